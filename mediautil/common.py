"""Integer rounding, clipping, bit counting, tags and UTF-8/UTF-16 coding."""

from collections.abc import Iterable, Iterator

from .intmath import log2

_U32 = 0xFFFFFFFF


def _cdiv(n: int, d: int) -> int:
    """Integer division truncating toward zero."""
    q = abs(n) // abs(d)
    return q if (n < 0) == (d < 0) else -q


def _clamp(a, lo, hi):
    if a < lo:
        return lo
    if a > hi:
        return hi
    return a


def _checked_clamp(a, amin, amax):
    if amin > amax:
        raise ValueError(f"empty clip range [{amin}, {amax}]")
    return _clamp(a, amin, amax)


def rshift(a: int, b: int) -> int:
    """Shift right by b bits, rounding to nearest."""
    half = (1 << b) >> 1
    return (a + half) >> b if a > 0 else (a + half - 1) >> b


def rounded_div(a: int, b: int) -> int:
    """Divide rounding to nearest, halves away from zero; b must be positive."""
    return _cdiv(a + (b >> 1) if a > 0 else a - (b >> 1), b)


def ceil_rshift(a: int, b: int) -> int:
    """Shift right by b bits, rounding up."""
    return -((-a) >> b)


def udiv(a: int, b: int) -> int:
    """Division rounding toward minus infinity for positive b."""
    return _cdiv(a if a > 0 else a - b + 1, b)


def umod(a: int, b: int) -> int:
    """Remainder matching udiv, non-negative for positive b."""
    return a - b * udiv(a, b)


def align(x: int, a: int) -> int:
    """Round x up to a multiple of the power of two a."""
    return (x + a - 1) & ~(a - 1)


def clip(a: int, amin: int, amax: int) -> int:
    """Clip an integer into [amin, amax]."""
    return _checked_clamp(a, amin, amax)


def clip64(a: int, amin: int, amax: int) -> int:
    """Clip a 64-bit integer into [amin, amax]."""
    return _checked_clamp(a, amin, amax)


def clip_uint8(a: int) -> int:
    """Clip an integer into 0..255."""
    return _clamp(a, 0, 0xFF)


def clip_int8(a: int) -> int:
    """Clip an integer into -128..127."""
    return _clamp(a, -0x80, 0x7F)


def clip_uint16(a: int) -> int:
    """Clip an integer into 0..65535."""
    return _clamp(a, 0, 0xFFFF)


def clip_int16(a: int) -> int:
    """Clip an integer into -32768..32767."""
    return _clamp(a, -0x8000, 0x7FFF)


def clipl_int32(a: int) -> int:
    """Clip an integer into the signed 32-bit range."""
    return _clamp(a, -0x80000000, 0x7FFFFFFF)


def clip_uintp2(a: int, p: int) -> int:
    """Clip an integer into 0..2**p - 1."""
    return _clamp(a, 0, (1 << p) - 1)


def sat_add32(a: int, b: int) -> int:
    """Add two 32-bit values with signed saturation."""
    return clipl_int32(a + b)


def sat_dadd32(a: int, b: int) -> int:
    """Add 2*b to a, saturating after doubling and after adding."""
    return sat_add32(a, sat_add32(b, b))


def clipf(a: float, amin: float, amax: float) -> float:
    """Clip a float into [amin, amax]; NaN passes through."""
    return _checked_clamp(a, amin, amax)


def clipd(a: float, amin: float, amax: float) -> float:
    """Clip a double into [amin, amax]; NaN passes through."""
    return _checked_clamp(a, amin, amax)


def ceil_log2(x: int) -> int:
    """Ceiling of the base 2 logarithm of x."""
    return log2((x - 1) << 1)


def popcount(x: int) -> int:
    """Number of set bits in a 32-bit value."""
    return (x & _U32).bit_count()


def popcount64(x: int) -> int:
    """Number of set bits in a 64-bit value."""
    return (x & 0xFFFFFFFFFFFFFFFF).bit_count()


def _tag_byte(c) -> int:
    if isinstance(c, (str, bytes)):
        if len(c) != 1:
            raise ValueError(f"tag component {c!r} is not a single character")
        return ord(c)
    return int(c)


def mktag(a, b, c, d) -> int:
    """Build a little-endian four-character code."""
    a, b, c, d = map(_tag_byte, (a, b, c, d))
    return (a | (b << 8) | (c << 16) | (d << 24)) & _U32


def mkbetag(a, b, c, d) -> int:
    """Build a big-endian four-character code."""
    a, b, c, d = map(_tag_byte, (a, b, c, d))
    return (d | (c << 8) | (b << 16) | (a << 24)) & _U32


def iter_utf8(data: Iterable[int]) -> Iterator[int]:
    """Decode UTF-8 bytes (sequences up to 6 bytes) into code points.

    Raises ValueError on a malformed or truncated sequence.
    """
    it = iter(data)
    for val in it:
        top = (val & 0x80) >> 1
        if (val & 0xC0) == 0x80 or val >= 0xFE:
            raise ValueError(f"invalid UTF-8 lead byte 0x{val:02x}")
        while val & top:
            nxt = next(it, None)
            if nxt is None:
                raise ValueError("truncated UTF-8 sequence")
            tmp = nxt - 128
            if tmp >> 6:
                raise ValueError(f"invalid UTF-8 continuation byte 0x{nxt:02x}")
            val = ((val << 6) + tmp) & _U32
            top <<= 5
        yield val & ((top << 1) - 1)


def put_utf8(value: int) -> bytes:
    """Encode a 32-bit code point as UTF-8 (up to 7 bytes)."""
    if not 0 <= value <= _U32:
        raise ValueError(f"code point {value} is not a 32-bit value")
    if value < 0x80:
        return bytes((value,))
    nbytes = (log2(value) + 4) // 5
    shift = (nbytes - 1) * 6
    out = bytearray([((256 - (256 >> nbytes)) | (value >> shift)) & 0xFF])
    while shift >= 6:
        shift -= 6
        out.append(0x80 | ((value >> shift) & 0x3F))
    return bytes(out)


def iter_utf16(units: Iterable[int]) -> Iterator[int]:
    """Decode UTF-16 code units into code points.

    Raises ValueError on an unpaired or truncated surrogate.
    """
    it = iter(units)
    for val in it:
        hi = (val - 0xD800) & _U32
        if hi < 0x800:
            nxt = next(it, None)
            if nxt is None:
                raise ValueError("truncated UTF-16 surrogate pair")
            low = (nxt - 0xDC00) & _U32
            if low > 0x3FF or hi > 0x3FF:
                raise ValueError("invalid UTF-16 surrogate pair")
            val = low + (hi << 10) + 0x10000
        yield val


def put_utf16(value: int) -> tuple[int, ...]:
    """Encode a code point as one or two UTF-16 code units."""
    if not 0 <= value <= _U32:
        raise ValueError(f"code point {value} is not a 32-bit value")
    if value < 0x10000:
        return (value,)
    rest = value - 0x10000
    return ((0xD800 | (rest >> 10)) & 0xFFFF, 0xDC00 | (rest & 0x3FF))