"""Reading and writing fixed-width unsigned integers in byte buffers."""

import sys

_WIDTHS = frozenset({8, 16, 24, 32, 48, 64})


def _size(bits):
    if bits not in _WIDTHS:
        raise ValueError(f"unsupported integer width: {bits} bits")
    return bits // 8


def _span(length, bits, offset):
    size = _size(bits)
    if offset < 0 or offset + size > length:
        raise IndexError(
            f"{size} bytes at offset {offset} exceed a buffer of {length} bytes"
        )
    return size


def _read(data, bits, offset, byteorder):
    view = memoryview(data).cast("B")
    size = _span(len(view), bits, offset)
    return int.from_bytes(view[offset:offset + size], byteorder)


def _write(buf, bits, value, offset, byteorder):
    view = memoryview(buf).cast("B")
    if view.readonly:
        raise TypeError("buffer is read-only")
    size = _span(len(view), bits, offset)
    # Only the low bits of the value are stored, as with a plain store.
    view[offset:offset + size] = (value & ((1 << bits) - 1)).to_bytes(size, byteorder)


def read_be(data, bits, offset=0):
    """Read a big-endian unsigned integer of ``bits`` bits at ``offset``."""
    return _read(data, bits, offset, "big")


def read_le(data, bits, offset=0):
    """Read a little-endian unsigned integer of ``bits`` bits at ``offset``."""
    return _read(data, bits, offset, "little")


def read_ne(data, bits, offset=0):
    """Read a native-endian unsigned integer of ``bits`` bits at ``offset``."""
    return _read(data, bits, offset, sys.byteorder)


def write_be(buf, bits, value, offset=0):
    """Store ``value`` big-endian in ``bits`` bits of ``buf`` at ``offset``."""
    _write(buf, bits, value, offset, "big")


def write_le(buf, bits, value, offset=0):
    """Store ``value`` little-endian in ``bits`` bits of ``buf`` at ``offset``."""
    _write(buf, bits, value, offset, "little")


def write_ne(buf, bits, value, offset=0):
    """Store ``value`` native-endian in ``bits`` bits of ``buf`` at ``offset``."""
    _write(buf, bits, value, offset, sys.byteorder)