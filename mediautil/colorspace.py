"""Fixed-point YUV/RGB conversion for full-range (JPEG) and studio-range (CCIR) values."""

from .common import clip_uint8

SCALEBITS = 10
ONE_HALF = 1 << (SCALEBITS - 1)


def fix(x: float) -> int:
    """Convert a coefficient to SCALEBITS fixed point, rounding to nearest."""
    return int(x * (1 << SCALEBITS) + 0.5)


def _chroma_adds(cb: int, cr: int, scale: float) -> tuple[int, int, int]:
    cb -= 128
    cr -= 128
    r_add = fix(1.40200 * scale) * cr + ONE_HALF
    g_add = -fix(0.34414 * scale) * cb - fix(0.71414 * scale) * cr + ONE_HALF
    b_add = fix(1.77200 * scale) * cb + ONE_HALF
    return r_add, g_add, b_add


def _combine(y: int, adds: tuple[int, int, int]) -> tuple[int, int, int]:
    r_add, g_add, b_add = adds
    return (
        clip_uint8((y + r_add) >> SCALEBITS),
        clip_uint8((y + g_add) >> SCALEBITS),
        clip_uint8((y + b_add) >> SCALEBITS),
    )


def yuv_to_rgb(y: int, cb: int, cr: int) -> tuple[int, int, int]:
    """Convert a full-range YCbCr triple to an (r, g, b) triple."""
    return _combine(y << SCALEBITS, _chroma_adds(cb, cr, 1.0))


def yuv_to_rgb_ccir(y: int, cb: int, cr: int) -> tuple[int, int, int]:
    """Convert a studio-range YCbCr triple to an (r, g, b) triple."""
    scaled_y = (y - 16) * fix(255.0 / 219.0)
    return _combine(scaled_y, _chroma_adds(cb, cr, 255.0 / 224.0))


def y_ccir_to_jpeg(y: int) -> int:
    """Expand a studio-range luma value to full range."""
    factor = fix(255.0 / 219.0)
    return clip_uint8((y * factor + (ONE_HALF - 16 * factor)) >> SCALEBITS)


def y_jpeg_to_ccir(y: int) -> int:
    """Compress a full-range luma value to studio range."""
    return (y * fix(219.0 / 255.0) + (ONE_HALF + (16 << SCALEBITS))) >> SCALEBITS


def c_ccir_to_jpeg(y: int) -> int:
    """Expand a studio-range chroma value to full range."""
    return clip_uint8(
        ((y - 128) * fix(127.0 / 112.0) + (ONE_HALF + (128 << SCALEBITS))) >> SCALEBITS
    )


def c_jpeg_to_ccir(y: int) -> int:
    """Compress a full-range chroma value to studio range, never below 16."""
    y = ((y - 128) * fix(112.0 / 127.0) + (ONE_HALF + (128 << SCALEBITS))) >> SCALEBITS
    return max(y, 16)


def rgb_to_y(r: int, g: int, b: int) -> int:
    """Full-range luma of an RGB triple."""
    return (fix(0.29900) * r + fix(0.58700) * g + fix(0.11400) * b + ONE_HALF) >> SCALEBITS


def rgb_to_u(r: int, g: int, b: int, shift: int) -> int:
    """Full-range Cb of an RGB sum of 2**shift pixels."""
    acc = -fix(0.16874) * r - fix(0.33126) * g + fix(0.50000) * b + (ONE_HALF << shift) - 1
    return (acc >> (SCALEBITS + shift)) + 128


def rgb_to_v(r: int, g: int, b: int, shift: int) -> int:
    """Full-range Cr of an RGB sum of 2**shift pixels."""
    acc = fix(0.50000) * r - fix(0.41869) * g - fix(0.08131) * b + (ONE_HALF << shift) - 1
    return (acc >> (SCALEBITS + shift)) + 128


def rgb_to_y_ccir(r: int, g: int, b: int) -> int:
    """Studio-range luma of an RGB triple."""
    k = 219.0 / 255.0
    return (
        fix(0.29900 * k) * r
        + fix(0.58700 * k) * g
        + fix(0.11400 * k) * b
        + (ONE_HALF + (16 << SCALEBITS))
    ) >> SCALEBITS


def rgb_to_u_ccir(r: int, g: int, b: int, shift: int) -> int:
    """Studio-range Cb of an RGB sum of 2**shift pixels."""
    k = 224.0 / 255.0
    acc = (
        -fix(0.16874 * k) * r
        - fix(0.33126 * k) * g
        + fix(0.50000 * k) * b
        + (ONE_HALF << shift)
        - 1
    )
    return (acc >> (SCALEBITS + shift)) + 128


def rgb_to_v_ccir(r: int, g: int, b: int, shift: int) -> int:
    """Studio-range Cr of an RGB sum of 2**shift pixels."""
    k = 224.0 / 255.0
    acc = (
        fix(0.50000 * k) * r
        - fix(0.41869 * k) * g
        - fix(0.08131 * k) * b
        + (ONE_HALF << shift)
        - 1
    )
    return (acc >> (SCALEBITS + shift)) + 128