"""Helpers for multimedia code: byte order, integer maths and packing, colour spaces, error codes, channel masks and pixel format descriptors."""

__version__ = "0.1.0"