"""Reinterpretation between IEEE-754 floats and their integer bit patterns."""

import struct

_F32 = struct.Struct("<f")
_U32 = struct.Struct("<I")
_F64 = struct.Struct("<d")
_U64 = struct.Struct("<Q")


def int2float(i: int) -> float:
    """Reinterpret a 32-bit integer as a single-precision float."""
    return _F32.unpack(_U32.pack(i & 0xFFFFFFFF))[0]


def float2int(f: float) -> int:
    """Reinterpret a single-precision float as a 32-bit integer."""
    return _U32.unpack(_F32.pack(f))[0]


def int2double(i: int) -> float:
    """Reinterpret a 64-bit integer as a double-precision float."""
    return _F64.unpack(_U64.pack(i & 0xFFFFFFFFFFFFFFFF))[0]


def double2int(f: float) -> int:
    """Reinterpret a double-precision float as a 64-bit integer."""
    return _U64.unpack(_F64.pack(f))[0]