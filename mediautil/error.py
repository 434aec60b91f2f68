"""Error codes and the exception that carries them."""

import os
from enum import IntEnum, unique

from .common import mktag

ERROR_MAX_STRING_SIZE = 64


def fferrtag(a, b, c, d) -> int:
    """Negated four-character tag used as an error code."""
    tag = mktag(a, b, c, d)
    if tag >= 1 << 31:
        tag -= 1 << 32
    return -tag


def averror(e: int) -> int:
    """Turn a positive errno value into a negative error code."""
    return -e


def avunerror(e: int) -> int:
    """Turn a negative error code back into a positive errno value."""
    return -e


@unique
class ErrorCode(IntEnum):
    """Library-specific error codes."""

    BSF_NOT_FOUND = fferrtag(0xF8, "B", "S", "F")
    BUG = fferrtag("B", "U", "G", "!")
    BUFFER_TOO_SMALL = fferrtag("B", "U", "F", "S")
    DECODER_NOT_FOUND = fferrtag(0xF8, "D", "E", "C")
    DEMUXER_NOT_FOUND = fferrtag(0xF8, "D", "E", "M")
    ENCODER_NOT_FOUND = fferrtag(0xF8, "E", "N", "C")
    EOF = fferrtag("E", "O", "F", " ")
    EXIT = fferrtag("E", "X", "I", "T")
    EXTERNAL = fferrtag("E", "X", "T", " ")
    FILTER_NOT_FOUND = fferrtag(0xF8, "F", "I", "L")
    INVALIDDATA = fferrtag("I", "N", "D", "A")
    MUXER_NOT_FOUND = fferrtag(0xF8, "M", "U", "X")
    OPTION_NOT_FOUND = fferrtag(0xF8, "O", "P", "T")
    PATCHWELCOME = fferrtag("P", "A", "W", "E")
    PROTOCOL_NOT_FOUND = fferrtag(0xF8, "P", "R", "O")
    STREAM_NOT_FOUND = fferrtag(0xF8, "S", "T", "R")
    BUG2 = fferrtag("B", "U", "G", " ")
    UNKNOWN = fferrtag("U", "N", "K", "N")
    EXPERIMENTAL = -0x2BB2AFA8
    INPUT_CHANGED = -0x636E6701
    OUTPUT_CHANGED = -0x636E6702
    HTTP_BAD_REQUEST = fferrtag(0xF8, "4", "0", "0")
    HTTP_UNAUTHORIZED = fferrtag(0xF8, "4", "0", "1")
    HTTP_FORBIDDEN = fferrtag(0xF8, "4", "0", "3")
    HTTP_NOT_FOUND = fferrtag(0xF8, "4", "0", "4")
    HTTP_OTHER_4XX = fferrtag(0xF8, "4", "X", "X")
    HTTP_SERVER_ERROR = fferrtag(0xF8, "5", "X", "X")

    @property
    def description(self) -> str:
        return _DESCRIPTIONS[self]


_DESCRIPTIONS = {
    ErrorCode.BSF_NOT_FOUND: "Bitstream filter not found",
    ErrorCode.BUG: "Internal bug",
    ErrorCode.BUFFER_TOO_SMALL: "Buffer too small",
    ErrorCode.DECODER_NOT_FOUND: "Decoder not found",
    ErrorCode.DEMUXER_NOT_FOUND: "Demuxer not found",
    ErrorCode.ENCODER_NOT_FOUND: "Encoder not found",
    ErrorCode.EOF: "End of file",
    ErrorCode.EXIT: "Immediate exit requested",
    ErrorCode.EXTERNAL: "Generic error in an external library",
    ErrorCode.FILTER_NOT_FOUND: "Filter not found",
    ErrorCode.INVALIDDATA: "Invalid data found when processing input",
    ErrorCode.MUXER_NOT_FOUND: "Muxer not found",
    ErrorCode.OPTION_NOT_FOUND: "Option not found",
    ErrorCode.PATCHWELCOME: "Not yet implemented",
    ErrorCode.PROTOCOL_NOT_FOUND: "Protocol not found",
    ErrorCode.STREAM_NOT_FOUND: "Stream not found",
    ErrorCode.BUG2: "Internal bug",
    ErrorCode.UNKNOWN: "Unknown error",
    ErrorCode.EXPERIMENTAL: "Requested feature is flagged experimental",
    ErrorCode.INPUT_CHANGED: "Input changed",
    ErrorCode.OUTPUT_CHANGED: "Output changed",
    ErrorCode.HTTP_BAD_REQUEST: "Server returned 400 Bad Request",
    ErrorCode.HTTP_UNAUTHORIZED: "Server returned 401 Unauthorized",
    ErrorCode.HTTP_FORBIDDEN: "Server returned 403 Forbidden",
    ErrorCode.HTTP_NOT_FOUND: "Server returned 404 Not Found",
    ErrorCode.HTTP_OTHER_4XX: "Server returned 4XX Client Error",
    ErrorCode.HTTP_SERVER_ERROR: "Server returned 5XX Server Error",
}


def _describe(code: int) -> str:
    try:
        return ErrorCode(code).description
    except ValueError:
        pass
    if code < 0:
        return os.strerror(avunerror(code))
    return f"Error number {code} occurred"


class MediaError(Exception):
    """An error carrying a negative error code."""

    def __init__(self, code: int, message: str | None = None):
        try:
            code = ErrorCode(code)
        except ValueError:
            code = int(code)
        self.code = code
        self.message = message if message is not None else _describe(code)
        super().__init__(self.message)