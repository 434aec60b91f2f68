import sys

import pytest
from hypothesis import given
from hypothesis import strategies as st

from mediautil.intreadwrite import (
    read_be,
    read_le,
    read_ne,
    write_be,
    write_le,
    write_ne,
)

WIDTHS = [8, 16, 24, 32, 48, 64]
DATA = bytes(range(1, 9))


def test_read_be_values():
    assert read_be(DATA, 8) == 0x01
    assert read_be(DATA, 16) == 0x0102
    assert read_be(DATA, 24) == 0x010203
    assert read_be(DATA, 32) == 0x01020304
    assert read_be(DATA, 48) == 0x010203040506
    assert read_be(DATA, 64) == 0x0102030405060708


def test_read_le_values():
    assert read_le(DATA, 8) == 0x01
    assert read_le(DATA, 16) == 0x0201
    assert read_le(DATA, 24) == 0x030201
    assert read_le(DATA, 32) == 0x04030201
    assert read_le(DATA, 48) == 0x060504030201
    assert read_le(DATA, 64) == 0x0807060504030201


def test_read_at_offset():
    assert read_be(DATA, 16, 2) == 0x0304
    assert read_le(DATA, 16, 6) == 0x0807


def test_read_ne_follows_byteorder():
    expected = read_be(DATA, 32) if sys.byteorder == "big" else read_le(DATA, 32)
    assert read_ne(DATA, 32) == expected


def test_write_be_layout():
    buf = bytearray(4)
    write_be(buf, 32, 0x11223344)
    assert buf == bytearray(b"\x11\x22\x33\x44")


def test_write_le_layout_with_offset():
    buf = bytearray(5)
    write_le(buf, 24, 0xAABBCC, 1)
    assert buf == bytearray(b"\x00\xcc\xbb\xaa\x00")


def test_write_truncates_to_width():
    buf = bytearray(2)
    write_be(buf, 16, 0x123456)
    assert buf == bytearray(b"\x34\x56")


def test_write_ne_follows_byteorder():
    buf = bytearray(2)
    write_ne(buf, 16, 0x0102)
    expected = b"\x01\x02" if sys.byteorder == "big" else b"\x02\x01"
    assert bytes(buf) == expected


@pytest.mark.parametrize("bits", [0, 7, 12, 40, 128])
def test_unsupported_width(bits):
    with pytest.raises(ValueError):
        read_be(DATA, bits)


def test_read_past_end():
    with pytest.raises(IndexError):
        read_be(DATA, 64, 1)
    with pytest.raises(IndexError):
        read_le(DATA, 16, -1)


def test_write_past_end():
    with pytest.raises(IndexError):
        write_le(bytearray(3), 32, 0)


def test_write_read_only():
    with pytest.raises(TypeError):
        write_be(b"\x00\x00", 16, 1)


@given(st.sampled_from(WIDTHS), st.data())
def test_round_trip(bits, data):
    value = data.draw(st.integers(min_value=0, max_value=(1 << bits) - 1))
    for write, read in ((write_be, read_be), (write_le, read_le), (write_ne, read_ne)):
        buf = bytearray(10)
        write(buf, bits, value, 1)
        assert read(buf, bits, 1) == value


@given(st.sampled_from(WIDTHS), st.binary(min_size=8, max_size=8))
def test_be_is_reversed_le(bits, raw):
    size = bits // 8
    assert read_be(raw, bits) == read_le(raw[:size][::-1], bits)