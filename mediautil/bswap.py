"""Byte-order reversal of fixed-width unsigned integers."""

import sys

_NATIVE_BIG_ENDIAN = sys.byteorder == "big"


def _swap(x: int, width: int) -> int:
    mask = (1 << (8 * width)) - 1
    return int.from_bytes((x & mask).to_bytes(width, "little"), "big")


def bswap16(x: int) -> int:
    """Reverse the two bytes of a 16-bit value."""
    return _swap(x, 2)


def bswap32(x: int) -> int:
    """Reverse the four bytes of a 32-bit value."""
    return _swap(x, 4)


def bswap64(x: int) -> int:
    """Reverse the eight bytes of a 64-bit value."""
    return _swap(x, 8)


def be2ne16(x: int) -> int:
    """Convert a big-endian 16-bit value to native byte order."""
    return x & 0xFFFF if _NATIVE_BIG_ENDIAN else bswap16(x)


def be2ne32(x: int) -> int:
    """Convert a big-endian 32-bit value to native byte order."""
    return x & 0xFFFFFFFF if _NATIVE_BIG_ENDIAN else bswap32(x)


def be2ne64(x: int) -> int:
    """Convert a big-endian 64-bit value to native byte order."""
    return x & 0xFFFFFFFFFFFFFFFF if _NATIVE_BIG_ENDIAN else bswap64(x)


def le2ne16(x: int) -> int:
    """Convert a little-endian 16-bit value to native byte order."""
    return bswap16(x) if _NATIVE_BIG_ENDIAN else x & 0xFFFF


def le2ne32(x: int) -> int:
    """Convert a little-endian 32-bit value to native byte order."""
    return bswap32(x) if _NATIVE_BIG_ENDIAN else x & 0xFFFFFFFF


def le2ne64(x: int) -> int:
    """Convert a little-endian 64-bit value to native byte order."""
    return bswap64(x) if _NATIVE_BIG_ENDIAN else x & 0xFFFFFFFFFFFFFFFF