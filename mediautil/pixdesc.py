"""Pixel format descriptors: how the components of a pixel are laid out in planes."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, IntFlag


class PixelFormat(Enum):
    """Pixel formats known to the descriptor table."""

    NONE = "none"
    YUV420P = "yuv420p"
    YUV422P = "yuv422p"
    YUV444P = "yuv444p"
    GRAY8 = "gray"


class PixFmtFlag(IntFlag):
    """Properties of a pixel format."""

    BE = 1 << 0
    PAL = 1 << 1
    BITSTREAM = 1 << 2
    HWACCEL = 1 << 3
    PLANAR = 1 << 4
    RGB = 1 << 5
    PSEUDOPAL = 1 << 6
    ALPHA = 1 << 7


class Loss(IntFlag):
    """Kinds of information lost when converting between pixel formats."""

    RESOLUTION = 0x0001
    DEPTH = 0x0002
    COLORSPACE = 0x0004
    ALPHA = 0x0008
    COLORQUANT = 0x0010
    CHROMA = 0x0020


def _check_bits(name: str, value: int, bits: int) -> None:
    if not 0 <= value < (1 << bits):
        raise ValueError(f"{name}={value} does not fit in {bits} bits")


@dataclass(frozen=True)
class ComponentDescriptor:
    """Where one pixel component lives and how many bits it has."""

    plane: int
    step_minus1: int
    offset_plus1: int
    shift: int
    depth_minus1: int

    def __post_init__(self) -> None:
        _check_bits("plane", self.plane, 2)
        _check_bits("step_minus1", self.step_minus1, 3)
        _check_bits("offset_plus1", self.offset_plus1, 3)
        _check_bits("shift", self.shift, 3)
        _check_bits("depth_minus1", self.depth_minus1, 4)


@dataclass(frozen=True)
class PixFmtDescriptor:
    """Storage layout of a pixel format: components, subsampling and flags."""

    nb_components: int
    log2_chroma_w: int
    log2_chroma_h: int
    comp: tuple[ComponentDescriptor, ...]
    flags: PixFmtFlag = PixFmtFlag(0)
    name: str | None = None
    alias: str | None = None

    def __post_init__(self) -> None:
        if not 1 <= self.nb_components <= 4:
            raise ValueError(f"nb_components={self.nb_components} is not in 1..4")
        if len(self.comp) > 4:
            raise ValueError("a pixel has at most 4 components")
        if len(self.comp) < self.nb_components:
            raise ValueError("fewer component descriptors than components")
        _check_bits("log2_chroma_w", self.log2_chroma_w, 8)
        _check_bits("log2_chroma_h", self.log2_chroma_h, 8)
        object.__setattr__(self, "flags", PixFmtFlag(self.flags))
        object.__setattr__(self, "comp", tuple(self.comp))


def _yuv_components() -> tuple[ComponentDescriptor, ...]:
    return tuple(ComponentDescriptor(plane, 1, 1, 0, 7) for plane in range(3))


_DESCRIPTORS: dict[PixelFormat, PixFmtDescriptor] = {
    PixelFormat.YUV420P: PixFmtDescriptor(
        nb_components=3,
        log2_chroma_w=1,
        log2_chroma_h=1,
        comp=_yuv_components(),
    ),
    PixelFormat.YUV422P: PixFmtDescriptor(
        nb_components=3,
        log2_chroma_w=1,
        log2_chroma_h=0,
        comp=_yuv_components(),
        flags=PixFmtFlag.PLANAR,
    ),
    PixelFormat.YUV444P: PixFmtDescriptor(
        nb_components=3,
        log2_chroma_w=0,
        log2_chroma_h=0,
        comp=_yuv_components(),
        flags=PixFmtFlag.PLANAR,
    ),
    PixelFormat.GRAY8: PixFmtDescriptor(
        nb_components=1,
        log2_chroma_w=0,
        log2_chroma_h=0,
        comp=(ComponentDescriptor(0, 1, 1, 0, 7),),
    ),
}


def desc_get(pix_fmt: PixelFormat) -> PixFmtDescriptor | None:
    """Descriptor of a pixel format, or None if the format is unknown."""
    return _DESCRIPTORS.get(pix_fmt)