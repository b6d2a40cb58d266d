"""
Argument and input helpers shared by the builder and the executors.

Escaping follows POSIX `sh` quoting rules so that every logical argument
survives shell tokenization as exactly one token.
"""
import decimal
import io
import math
import numbers
import os
import shlex
from collections.abc import Iterable, Iterator, Mapping
from typing import Any, List, Sequence, Union

from procspec.modules.process.exceptions import InvalidArgumentError, InvalidInputError

CommandArg = Union[str, "os.PathLike[str]", int, float]

_BYTES_TYPES = (bytes, bytearray, memoryview)


def normalize_argument(argument: Any) -> str:
    """
    Convert a single command argument to the string passed to the process.

    Strings are kept, paths go through `os.fspath` and numbers through `str`.

    Raises:
        InvalidArgumentError: If the argument has no string form
    """
    if isinstance(argument, str):
        return argument
    if isinstance(argument, os.PathLike):
        value = os.fspath(argument)
        if isinstance(value, bytes):
            raise InvalidArgumentError(f"Byte paths are not supported as arguments: {value!r}")
        return value
    if isinstance(argument, numbers.Real) and not isinstance(argument, bool):
        return str(argument)
    raise InvalidArgumentError(
        f"Command arguments must be strings, paths or numbers, got {type(argument).__name__}"
    )


def normalize_arguments(arguments: Sequence[Any]) -> List[str]:
    if isinstance(arguments, (str, bytes)) or not isinstance(arguments, Iterable):
        raise InvalidArgumentError("Arguments must be given as a list")
    return [normalize_argument(argument) for argument in arguments]


def escape_argument(argument: str) -> str:
    """
    Escape an argument for a POSIX shell.

    Arguments made only of safe characters are returned unchanged; anything
    else (whitespace, quotes, `$`, `;`, backticks, ...) is single quoted with
    embedded single quotes escaped. The empty string becomes `''`.
    """
    return shlex.quote(argument)


def build_command_line(arguments: Sequence[str]) -> str:
    """Join independently escaped arguments with single spaces."""
    return " ".join(escape_argument(argument) for argument in arguments)


def validate_input(value: Any) -> Any:
    """
    Validate the input payload of a process.

    Accepts None, str, bytes-like objects, finite numbers (Decimal
    included), readable file objects and iterables of bytes. Iterators are wrapped so that each chunk
    is checked when the executor consumes it; other iterables are checked
    immediately.

    Args:
        value: The candidate input

    Returns:
        The value to store on the builder

    Raises:
        InvalidInputError: If the value has no byte representation
    """
    if value is None or isinstance(value, str):
        return value
    if isinstance(value, _BYTES_TYPES):
        return bytes(value)
    if isinstance(value, bool):
        raise InvalidInputError("Boolean values are not accepted as process input")
    if isinstance(value, decimal.Decimal):
        if not value.is_finite():
            raise InvalidInputError(f"Numeric process input must be finite, got {value!r}")
        return str(value)
    if isinstance(value, numbers.Real):
        if not math.isfinite(value):
            raise InvalidInputError(f"Numeric process input must be finite, got {value!r}")
        return str(value)
    if isinstance(value, io.IOBase) or callable(getattr(value, "read", None)):
        return value
    if isinstance(value, Mapping):
        raise InvalidInputError("Mappings are not accepted as process input")
    if isinstance(value, Iterator):
        return _checked_chunks(value)
    if isinstance(value, Iterable):
        return tuple(_check_chunk(chunk) for chunk in value)
    raise InvalidInputError(
        f"Process input only accepts strings, numbers, bytes, readable streams "
        f"or iterables of bytes, got {type(value).__name__}"
    )


def _check_chunk(chunk: Any) -> bytes:
    if not isinstance(chunk, _BYTES_TYPES):
        raise InvalidInputError(f"Process input chunks must be bytes, got {type(chunk).__name__}")
    return bytes(chunk)


def _checked_chunks(chunks: Iterator[Any]) -> Iterator[bytes]:
    for chunk in chunks:
        yield _check_chunk(chunk)


def input_to_bytes(value: Any) -> Union[bytes, None]:
    """
    Materialize a validated input payload for a one-shot process run.

    Streams are read to the end and iterables joined.
    """
    if value is None:
        return None
    if isinstance(value, str):
        return value.encode("utf-8")
    if isinstance(value, bytes):
        return value
    if callable(getattr(value, "read", None)):
        data = value.read()
        return data.encode("utf-8") if isinstance(data, str) else bytes(data)
    return b"".join(_check_chunk(chunk) for chunk in value)
