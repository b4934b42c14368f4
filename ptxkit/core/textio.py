"""
Line-oriented text helpers used by the PTX reader.
Provides a line reader with end-of-input detection, a delimiter tokenizer
and the numeric conversions applied to tokens.
"""
from collections import deque
from typing import Deque, Iterable, Iterator, List

from .exceptions import EndOfStream, NumberFormatError


def parse_float(token: str) -> float:
    """
    Convert a token to a float.

    Args:
        token: Text of a single field

    Returns:
        Parsed value

    Raises:
        NumberFormatError: If the token is empty or not a decimal literal
    """
    # float() accepts digit separators, which no PTX writer emits
    if not token or "_" in token:
        raise NumberFormatError(token, "float")
    try:
        return float(token)
    except ValueError:
        raise NumberFormatError(token, "float") from None


def parse_uint(token: str) -> int:
    """Convert a token to a non-negative integer."""
    text = token.strip()
    if not (text.isascii() and text.isdigit()):
        raise NumberFormatError(token, "unsigned integer")
    return int(text)


def parse_uint8(token: str) -> int:
    """Convert a token to an unsigned integer narrowed to 8 bits."""
    return parse_uint(token) & 0xFF


class Tokenizer:
    """Splits a line into fields on a single-character delimiter."""

    def __init__(self, delimiter: str = " "):
        if len(delimiter) != 1:
            raise ValueError(f"Delimiter must be a single character, got {delimiter!r}")
        self.delimiter = delimiter

    def tokenize(self, line: str) -> List[str]:
        """
        Split a line into tokens.

        Repeated delimiters do not produce empty tokens, and the line
        terminator is never part of the last token.
        """
        line = line.rstrip("\r\n")
        return [token for token in line.split(self.delimiter) if token]


class LineReader:
    """
    Yields successive lines from a text source.

    The source is any iterable of strings, typically an open text file.
    Lines are returned without their terminator. A single line of lookahead
    is buffered so that end-of-input can be checked without consuming data.
    """

    def __init__(self, source: Iterable[str]):
        self._source: Iterator[str] = iter(source)
        self._pending: Deque[str] = deque()
        self.line_number = 0

    def _fill(self) -> bool:
        if self._pending:
            return True
        try:
            self._pending.append(next(self._source))
        except StopIteration:
            return False
        return True

    def getline(self) -> str:
        """Return the next line, raising EndOfStream when none is left."""
        if not self._fill():
            raise EndOfStream(f"End of input after line {self.line_number}")
        self.line_number += 1
        return self._pending.popleft().rstrip("\r\n")

    def at_end(self) -> bool:
        """
        True when nothing but blank lines remains.

        Blank lines found while checking are consumed.
        """
        while self._fill():
            if self._pending[0].strip():
                return False
            self._pending.popleft()
            self.line_number += 1
        return True
