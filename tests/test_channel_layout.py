import pytest
from hypothesis import given
from hypothesis import strategies as st

from mediautil.channel_layout import (
    LAYOUT_5POINT1,
    LAYOUT_7POINT1,
    LAYOUT_MONO,
    LAYOUT_NATIVE,
    LAYOUT_STEREO,
    LAYOUT_STEREO_DOWNMIX,
    LAYOUT_SURROUND,
    Channel,
    MatrixEncoding,
    channel_count,
    channel_index,
    extract_channel,
)

layouts = st.integers(min_value=0, max_value=(1 << 64) - 1)


def test_channel_masks_from_header():
    assert extract_channel(0x00000001, 0) == Channel.FRONT_LEFT
    assert extract_channel(0x20000000, 0) == Channel.STEREO_LEFT
    assert extract_channel(0x0000000800000000, 0) == Channel.LOW_FREQUENCY_2
    assert extract_channel(0x8000000000000000, 0) == LAYOUT_NATIVE


def test_named_layouts_compose():
    assert [extract_channel(LAYOUT_STEREO, i) for i in range(2)] == [
        Channel.FRONT_LEFT,
        Channel.FRONT_RIGHT,
    ]
    assert [extract_channel(LAYOUT_SURROUND, i) for i in range(3)] == [
        Channel.FRONT_LEFT,
        Channel.FRONT_RIGHT,
        Channel.FRONT_CENTER,
    ]
    assert [extract_channel(LAYOUT_STEREO_DOWNMIX, i) for i in range(2)] == [
        Channel.STEREO_LEFT,
        Channel.STEREO_RIGHT,
    ]


def test_channel_counts_of_named_layouts():
    assert channel_count(LAYOUT_MONO) == 1
    assert channel_count(LAYOUT_STEREO) == 2
    assert channel_count(LAYOUT_5POINT1) == 6
    assert channel_count(LAYOUT_7POINT1) == 8


def test_channel_index_in_surround():
    assert channel_index(LAYOUT_SURROUND, Channel.FRONT_LEFT) == 0
    assert channel_index(LAYOUT_SURROUND, Channel.FRONT_CENTER) == 2


def test_channel_index_absent_channel():
    with pytest.raises(ValueError):
        channel_index(LAYOUT_STEREO, Channel.FRONT_CENTER)


def test_channel_index_requires_single_channel():
    with pytest.raises(ValueError):
        channel_index(LAYOUT_STEREO, LAYOUT_STEREO)
    with pytest.raises(ValueError):
        channel_index(LAYOUT_STEREO, 0)


def test_extract_channel_out_of_range():
    with pytest.raises(IndexError):
        extract_channel(LAYOUT_STEREO, 2)
    with pytest.raises(IndexError):
        extract_channel(LAYOUT_STEREO, -1)


def test_extract_first_channel():
    assert extract_channel(LAYOUT_STEREO, 0) == Channel.FRONT_LEFT
    assert extract_channel(LAYOUT_STEREO, 1) == Channel.FRONT_RIGHT


@given(layouts)
def test_extract_and_index_are_inverse(layout):
    count = channel_count(layout)
    extracted = [extract_channel(layout, i) for i in range(count)]
    assert sum(extracted) == layout
    for i, ch in enumerate(extracted):
        assert channel_index(layout, ch) == i


@given(layouts)
def test_extracted_channels_increase(layout):
    extracted = [extract_channel(layout, i) for i in range(channel_count(layout))]
    assert extracted == sorted(extracted)


def test_matrix_encoding_order():
    assert MatrixEncoding(0) is MatrixEncoding.NONE
    assert MatrixEncoding(len(MatrixEncoding) - 1) is MatrixEncoding.DOLBYHEADPHONE
    with pytest.raises(ValueError):
        MatrixEncoding(len(MatrixEncoding))