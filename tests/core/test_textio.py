"""
Tests for the line reader, tokenizer and numeric conversions.
"""

import pytest

from ptxkit.core.exceptions import EndOfStream, NumberFormatError
from ptxkit.core.textio import LineReader, Tokenizer, parse_float, parse_uint, parse_uint8


def test_tokenize_on_spaces():
    tokenizer = Tokenizer(" ")
    assert tokenizer.tokenize("1.5 -2 3e-2\n") == ["1.5", "-2", "3e-2"]


def test_tokenize_collapses_repeated_delimiters():
    tokenizer = Tokenizer(" ")
    assert tokenizer.tokenize("  1  2   3 \r\n") == ["1", "2", "3"]


def test_tokenize_custom_delimiter():
    tokenizer = Tokenizer(",")
    assert tokenizer.tokenize("1,2,,3") == ["1", "2", "3"]


def test_tokenizer_rejects_multi_character_delimiter():
    with pytest.raises(ValueError):
        Tokenizer(", ")


@pytest.mark.parametrize("token,expected", [("0", 0.0), ("-1.25", -1.25), ("2.5e3", 2500.0)])
def test_parse_float(token, expected):
    assert parse_float(token) == expected


@pytest.mark.parametrize("token", ["", "abc", "1.0.0", "1_000", "0x10"])
def test_parse_float_rejects_malformed(token):
    with pytest.raises(NumberFormatError):
        parse_float(token)


def test_parse_uint():
    assert parse_uint("42") == 42
    assert parse_uint(" 7 ") == 7


@pytest.mark.parametrize("token", ["-1", "1.5", "", "x"])
def test_parse_uint_rejects_malformed(token):
    with pytest.raises(NumberFormatError):
        parse_uint(token)


def test_parse_uint8_narrows_to_eight_bits():
    assert parse_uint8("255") == 255
    assert parse_uint8("256") == 0
    assert parse_uint8("300") == 44


def test_number_format_error_is_value_error():
    with pytest.raises(ValueError, match="Invalid float literal"):
        parse_float("nope")


def test_line_reader_returns_lines_without_terminators():
    reader = LineReader(["a\n", "b\r\n", "c"])
    assert reader.getline() == "a"
    assert reader.getline() == "b"
    assert reader.getline() == "c"
    assert reader.line_number == 3
    with pytest.raises(EndOfStream):
        reader.getline()


def test_line_reader_at_end_does_not_consume_content():
    reader = LineReader(["first\n", "second\n"])
    assert not reader.at_end()
    assert reader.getline() == "first"
    assert not reader.at_end()
    assert reader.getline() == "second"
    assert reader.at_end()


def test_line_reader_at_end_skips_trailing_blank_lines():
    reader = LineReader(["data\n", "\n", "   \n"])
    reader.getline()
    assert reader.at_end()
    assert reader.line_number == 3


def test_line_reader_empty_source():
    reader = LineReader([])
    assert reader.at_end()
    with pytest.raises(EndOfStream):
        reader.getline()
