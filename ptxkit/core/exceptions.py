"""Error types raised while reading PTX files."""

from typing import Optional


class PtxError(ValueError):
    """Base class for PTX parsing errors."""


class NumberFormatError(PtxError):
    """A token could not be converted to the expected numeric type."""

    def __init__(self, token: str, expected: str):
        self.token = token
        self.expected = expected
        super().__init__(f"Invalid {expected} literal: {token!r}")


class EndOfStream(EOFError):
    """The line reader has no more lines to give."""


class HeaderError(PtxError):
    """A scan header was present but could not be parsed."""


class RecordError(PtxError):
    """A point record line is corrupt. Never recovered by the reader."""

    def __init__(self, message: str, line_number: Optional[int] = None):
        self.line_number = line_number
        if line_number is not None:
            message = f"Line {line_number}: {message}"
        super().__init__(message)


class TruncatedScanError(RecordError):
    """The input ended before every record of a scan was read."""
