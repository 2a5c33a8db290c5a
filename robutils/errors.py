"""Exception types and error-string formatting shared across the package."""

from __future__ import annotations

import sys

MESSAGE_MAX_LENGTH = 768
"""Size of the message field, including its terminating position."""

FILE_MAX_LENGTH = 229
"""Size of the file-name field, including its terminating position."""

LINE_NUMBER_MAX_LENGTH = 20
"""Maximum number of digits of a line number (an unsigned 64-bit value)."""

_MAX_LINE_NUMBER = 2**64 - 1
_AT = ", at "
_COLON = ":"

ERROR_STRING_MAX_LENGTH = (
    (MESSAGE_MAX_LENGTH - 1)
    + len(_AT)
    + (FILE_MAX_LENGTH - 1)
    + len(_COLON)
    + LINE_NUMBER_MAX_LENGTH
)
"""Longest string that format_error_string can return."""


class RcutilsError(Exception):
    """Base class for every error raised by this package."""


class InvalidArgumentError(RcutilsError, ValueError):
    """An argument was missing or had an unacceptable value."""


class BadAllocError(RcutilsError, MemoryError):
    """Storage could not be obtained for the requested size."""


class NotEnoughSpaceError(RcutilsError):
    """A container is full and was asked not to grow."""


class StringMapError(RcutilsError):
    """A string map is in a state that does not allow the operation."""


class StringKeyNotFoundError(RcutilsError, KeyError):
    """A key looked up in a string map is not present."""

    def __str__(self) -> str:
        return str(self.args[0]) if self.args else ""


def _truncate(text: str, field_size: int) -> str:
    """Fit text into a field of field_size, keeping room for a terminator."""
    limit = field_size - 1
    if len(text) > limit:
        sys.stderr.write(
            "[robutils|errors] an error string (message, file name, or formatted "
            "message) will be truncated\n"
        )
        return text[:limit]
    return text


def format_error_string(message: str, file: str, line_number: int) -> str:
    """Return "<message>, at <file>:<line_number>".

    The message and file name are truncated to their field sizes, with a
    warning written to stderr when that happens.
    """
    if not isinstance(message, str):
        raise InvalidArgumentError("message must be a string")
    if not isinstance(file, str):
        raise InvalidArgumentError("file must be a string")
    if isinstance(line_number, bool) or not isinstance(line_number, int):
        raise InvalidArgumentError("line_number must be an integer")
    if not 0 <= line_number <= _MAX_LINE_NUMBER:
        raise InvalidArgumentError("line_number must fit in an unsigned 64-bit value")
    return "".join(
        (
            _truncate(message, MESSAGE_MAX_LENGTH),
            _AT,
            _truncate(file, FILE_MAX_LENGTH),
            _COLON,
            str(line_number),
        )
    )