# mediautil

Small, dependency-free helpers for the low-level arithmetic that audio and
video code keeps needing. Every module is a plain collection of functions,
enums and dataclasses; nothing is stateful.

## Modules

- `mediautil.bswap`: reverse the bytes of 16, 32 and 64-bit values
  (`bswap16`, `bswap32`, `bswap64`) and convert big- or little-endian values
  to the machine's byte order (`be2ne16`, `be2ne32`, `be2ne64`, `le2ne16`,
  `le2ne32`, `le2ne64`).
- `mediautil.intfloat`: reinterpret integer bit patterns as IEEE-754 floats
  and back (`int2float`, `float2int`, `int2double`, `double2int`).
- `mediautil.intmath`: index of the highest set bit (`log2`, `log2_16bit`)
  and trailing-zero count (`ctz`, which raises `ValueError` for 0).
- `mediautil.common`:
  - rounding shifts and divisions: `rshift`, `rounded_div`, `ceil_rshift`,
    `udiv`, `umod`, and `align` to round up to a power of two;
  - clipping: `clip`, `clip64`, `clipf`, `clipd` (these raise `ValueError`
    for an empty range), `clip_uint8`, `clip_int8`, `clip_uint16`,
    `clip_int16`, `clipl_int32`, `clip_uintp2`, and the saturating adds
    `sat_add32` and `sat_dadd32`;
  - bits: `ceil_log2`, `popcount`, `popcount64`;
  - four-character codes: `mktag` (little-endian) and `mkbetag`
    (big-endian), taking characters or byte values;
  - code points: `iter_utf8` and `iter_utf16` decode byte or code-unit
    iterables into code points, raising `ValueError` on malformed or
    truncated input; `put_utf8` returns `bytes` and `put_utf16` returns a
    tuple of one or two code units.
- `mediautil.intreadwrite`: `read_be`, `read_le`, `read_ne` read an
  unsigned integer of 8, 16, 24, 32, 48 or 64 bits at an offset in any
  buffer; `write_be`, `write_le`, `write_ne` store one into a writable
  buffer, keeping only the low bits of the value. An unsupported width
  raises `ValueError`, an out-of-range offset `IndexError`, a read-only
  buffer `TypeError`.
- `mediautil.colorspace`: 10-bit fixed-point YUV/RGB conversion in full
  (JPEG) and studio (CCIR) range: `fix`, `yuv_to_rgb`, `yuv_to_rgb_ccir`,
  `y_ccir_to_jpeg`, `y_jpeg_to_ccir`, `c_ccir_to_jpeg`, `c_jpeg_to_ccir`,
  `rgb_to_y`, `rgb_to_u`, `rgb_to_v`, `rgb_to_y_ccir`, `rgb_to_u_ccir`,
  `rgb_to_v_ccir`, with the constants `SCALEBITS` and `ONE_HALF`.
- `mediautil.error`: the `ErrorCode` enum of negative error codes, each
  with a `description`; the `MediaError` exception, which carries a `code`
  and a `message` (taken from the code when none is given, falling back to
  the system's errno text for other negative codes); and the helpers
  `fferrtag`, `averror`, `avunerror`.
- `mediautil.channel_layout`: the `Channel` flag enum of audio channel
  bits, the `LAYOUT_*` masks for standard layouts (`LAYOUT_MONO`,
  `LAYOUT_STEREO`, `LAYOUT_5POINT1`, `LAYOUT_7POINT1`, ...),
  `MatrixEncoding`, and `channel_count`, `channel_index` (raises
  `ValueError`) and `extract_channel` (raises `IndexError`).
- `mediautil.pixdesc`: `PixelFormat`, the `PixFmtFlag` and `Loss` flag
  enums, the frozen dataclasses `ComponentDescriptor` and
  `PixFmtDescriptor` (which validate their field ranges), and `desc_get`,
  which returns the descriptor of a format or `None`.

## Installation

    pip install mediautil

## Examples

    from mediautil.bswap import bswap32
    from mediautil.common import clip_uint8, mktag
    from mediautil.intreadwrite import read_be, write_le

    bswap32(0x11223344)          # 0x44332211
    clip_uint8(300)              # 255
    mktag(*b"RIFF")              # FourCC as an integer

    buf = bytearray(4)
    write_le(buf, 32, 0x01020304, 0)
    read_be(buf, 32, 0)          # 0x04030201

    from mediautil.channel_layout import Channel, channel_count
    channel_count(Channel.FRONT_LEFT | Channel.FRONT_RIGHT)   # 2

    from mediautil.pixdesc import PixelFormat, desc_get
    desc = desc_get(PixelFormat.YUV420P)
    desc.nb_components           # 3

## What it does not do

- The pixel format table knows only `yuv420p`, `yuv422p`, `yuv444p` and
  `gray`; `desc_get` returns `None` for anything else. There is no lookup of
  formats by name, no reading or writing of image lines, and no loss
  computation between formats: `Loss` only names the kinds of loss.
- Channel layouts are bit masks only. There is no parsing of layout names
  such as `"5.1"` and no text description of a layout or channel.
- There are no commands; the package is a library.

## Running the tests

    pip install -e ".[test]"
    pytest