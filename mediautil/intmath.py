"""Integer logarithm and bit-scanning helpers on 32-bit values."""

_U32 = 0xFFFFFFFF


def log2(v: int) -> int:
    """Index of the highest set bit of a 32-bit value, 0 for 0."""
    return max((v & _U32).bit_length() - 1, 0)


def log2_16bit(v: int) -> int:
    """Index of the highest set bit of a 16-bit value, 0 for 0."""
    if not 0 <= v <= 0xFFFF:
        raise ValueError(f"value {v} does not fit in 16 bits")
    return max(v.bit_length() - 1, 0)


def ctz(v: int) -> int:
    """Number of trailing zero bits of a non-zero 32-bit value."""
    v &= _U32
    if not v:
        raise ValueError("trailing zero count of 0 is undefined")
    return (v & -v).bit_length() - 1