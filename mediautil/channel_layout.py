"""Audio channel masks, standard layouts and index lookups."""

from enum import IntEnum, IntFlag

from .common import popcount64

_U64 = 0xFFFFFFFFFFFFFFFF


class Channel(IntFlag):
    """Single audio channels as bits of a 64-bit layout mask."""

    FRONT_LEFT = 0x00000001
    FRONT_RIGHT = 0x00000002
    FRONT_CENTER = 0x00000004
    LOW_FREQUENCY = 0x00000008
    BACK_LEFT = 0x00000010
    BACK_RIGHT = 0x00000020
    FRONT_LEFT_OF_CENTER = 0x00000040
    FRONT_RIGHT_OF_CENTER = 0x00000080
    BACK_CENTER = 0x00000100
    SIDE_LEFT = 0x00000200
    SIDE_RIGHT = 0x00000400
    TOP_CENTER = 0x00000800
    TOP_FRONT_LEFT = 0x00001000
    TOP_FRONT_CENTER = 0x00002000
    TOP_FRONT_RIGHT = 0x00004000
    TOP_BACK_LEFT = 0x00008000
    TOP_BACK_CENTER = 0x00010000
    TOP_BACK_RIGHT = 0x00020000
    STEREO_LEFT = 0x20000000
    STEREO_RIGHT = 0x40000000
    WIDE_LEFT = 0x0000000080000000
    WIDE_RIGHT = 0x0000000100000000
    SURROUND_DIRECT_LEFT = 0x0000000200000000
    SURROUND_DIRECT_RIGHT = 0x0000000400000000
    LOW_FREQUENCY_2 = 0x0000000800000000


class MatrixEncoding(IntEnum):
    """Matrix-encoded stereo variants."""

    NONE = 0
    DOLBY = 1
    DPLII = 2
    DPLIIX = 3
    DPLIIZ = 4
    DOLBYEX = 5
    DOLBYHEADPHONE = 6


# Requests the decoder's native channel order.
LAYOUT_NATIVE = 0x8000000000000000

C = Channel
LAYOUT_MONO = C.FRONT_CENTER
LAYOUT_STEREO = C.FRONT_LEFT | C.FRONT_RIGHT
LAYOUT_2POINT1 = LAYOUT_STEREO | C.LOW_FREQUENCY
LAYOUT_2_1 = LAYOUT_STEREO | C.BACK_CENTER
LAYOUT_SURROUND = LAYOUT_STEREO | C.FRONT_CENTER
LAYOUT_3POINT1 = LAYOUT_SURROUND | C.LOW_FREQUENCY
LAYOUT_4POINT0 = LAYOUT_SURROUND | C.BACK_CENTER
LAYOUT_4POINT1 = LAYOUT_4POINT0 | C.LOW_FREQUENCY
LAYOUT_2_2 = LAYOUT_STEREO | C.SIDE_LEFT | C.SIDE_RIGHT
LAYOUT_QUAD = LAYOUT_STEREO | C.BACK_LEFT | C.BACK_RIGHT
LAYOUT_5POINT0 = LAYOUT_SURROUND | C.SIDE_LEFT | C.SIDE_RIGHT
LAYOUT_5POINT1 = LAYOUT_5POINT0 | C.LOW_FREQUENCY
LAYOUT_5POINT0_BACK = LAYOUT_SURROUND | C.BACK_LEFT | C.BACK_RIGHT
LAYOUT_5POINT1_BACK = LAYOUT_5POINT0_BACK | C.LOW_FREQUENCY
LAYOUT_6POINT0 = LAYOUT_5POINT0 | C.BACK_CENTER
LAYOUT_6POINT0_FRONT = LAYOUT_2_2 | C.FRONT_LEFT_OF_CENTER | C.FRONT_RIGHT_OF_CENTER
LAYOUT_HEXAGONAL = LAYOUT_5POINT0_BACK | C.BACK_CENTER
LAYOUT_6POINT1 = LAYOUT_5POINT1 | C.BACK_CENTER
LAYOUT_6POINT1_BACK = LAYOUT_5POINT1_BACK | C.BACK_CENTER
LAYOUT_6POINT1_FRONT = LAYOUT_6POINT0_FRONT | C.LOW_FREQUENCY
LAYOUT_7POINT0 = LAYOUT_5POINT0 | C.BACK_LEFT | C.BACK_RIGHT
LAYOUT_7POINT0_FRONT = LAYOUT_5POINT0 | C.FRONT_LEFT_OF_CENTER | C.FRONT_RIGHT_OF_CENTER
LAYOUT_7POINT1 = LAYOUT_5POINT1 | C.BACK_LEFT | C.BACK_RIGHT
LAYOUT_7POINT1_WIDE = LAYOUT_5POINT1 | C.FRONT_LEFT_OF_CENTER | C.FRONT_RIGHT_OF_CENTER
LAYOUT_7POINT1_WIDE_BACK = (
    LAYOUT_5POINT1_BACK | C.FRONT_LEFT_OF_CENTER | C.FRONT_RIGHT_OF_CENTER
)
LAYOUT_OCTAGONAL = LAYOUT_5POINT0 | C.BACK_LEFT | C.BACK_CENTER | C.BACK_RIGHT
LAYOUT_STEREO_DOWNMIX = C.STEREO_LEFT | C.STEREO_RIGHT
del C


def channel_count(layout: int) -> int:
    """Number of channels in a layout mask."""
    return popcount64(layout)


def channel_index(layout: int, channel: int) -> int:
    """Position of a single channel within a layout.

    Raises ValueError if channel is not exactly one bit present in layout.
    """
    layout &= _U64
    channel = int(channel)
    if channel <= 0 or channel > _U64 or channel & (channel - 1):
        raise ValueError(f"0x{channel:x} is not a single channel")
    if not layout & channel:
        raise ValueError(f"channel 0x{channel:x} is not in layout 0x{layout:x}")
    return popcount64(layout & (channel - 1))


def extract_channel(layout: int, index: int) -> int:
    """Channel bit at the given position within a layout.

    Raises IndexError if the layout has no channel at that position.
    """
    layout &= _U64
    if index < 0:
        raise IndexError(f"channel index {index} is negative")
    for position, bit in enumerate(
        1 << i for i in range(64) if layout & (1 << i)
    ):
        if position == index:
            return bit
    raise IndexError(f"layout 0x{layout:x} has no channel at index {index}")