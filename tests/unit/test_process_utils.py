"""Tests for argument escaping and input validation helpers."""

import io
import shlex
from pathlib import Path

import pytest

from procspec.modules.process.exceptions import InvalidArgumentError, InvalidInputError
from procspec.modules.process.process_utils import (
    build_command_line,
    escape_argument,
    input_to_bytes,
    normalize_argument,
    validate_input,
)


@pytest.mark.parametrize(
    "argument, expected",
    [
        ("plain", "plain"),
        ("/usr/bin/ffmpeg", "/usr/bin/ffmpeg"),
        ("--flag=value", "--flag=value"),
        ("hello world", "'hello world'"),
        ("", "''"),
        ("it's", "'it'\"'\"'s'"),
        ("$HOME", "'$HOME'"),
    ],
)
def test_escape_argument(argument, expected):
    """Test that only unsafe arguments get quoted."""
    assert escape_argument(argument) == expected


def test_build_command_line_joins_with_single_spaces():
    """Test the joined command line."""
    line = build_command_line(["printf", "%s\\n", "a b", "c"])
    assert line == "printf '%s\\n' 'a b' c"
    assert shlex.split(line) == ["printf", "%s\\n", "a b", "c"]


def test_normalize_argument():
    """Test string conversion of supported argument types."""
    assert normalize_argument("x") == "x"
    assert normalize_argument(Path("a/b")) == "a/b"
    assert normalize_argument(7) == "7"
    with pytest.raises(InvalidArgumentError):
        normalize_argument(False)


def test_validate_input_keeps_streams():
    """Test that readable objects are passed through untouched."""
    stream = io.BytesIO(b"payload")
    assert validate_input(stream) is stream


def test_validate_input_wraps_generators():
    """Test that generators are consumed lazily."""
    consumed = []

    def chunks():
        for chunk in (b"a", b"b"):
            consumed.append(chunk)
            yield chunk

    validated = validate_input(chunks())
    assert consumed == []
    assert list(validated) == [b"a", b"b"]
    assert consumed == [b"a", b"b"]


def test_validate_input_rejects_objects_without_bytes():
    """Test that arbitrary objects are rejected."""
    with pytest.raises(InvalidInputError, match="only accepts"):
        validate_input(object())


@pytest.mark.parametrize(
    "value, expected",
    [
        (None, None),
        ("héllo", "héllo".encode("utf-8")),
        (b"raw", b"raw"),
        (io.BytesIO(b"stream"), b"stream"),
        (io.StringIO("text stream"), b"text stream"),
        ((b"a", b"b"), b"ab"),
    ],
)
def test_input_to_bytes(value, expected):
    """Test materializing validated input."""
    assert input_to_bytes(validate_input(value)) == expected
