"""String helpers: duplication, replacement, splitting and bounded formatting."""

from __future__ import annotations

from collections.abc import Iterable
from typing import NamedTuple

from robutils.errors import InvalidArgumentError, RcutilsError
from robutils.string_array import StringArray


class FormatResult(NamedTuple):
    """Outcome of a bounded format.

    ``text`` is what fits into the buffer and ``length`` is the length the
    full result would have had without the limit.
    """

    text: str
    length: int


def _require_str(value: object, name: str) -> None:
    if not isinstance(value, str):
        raise InvalidArgumentError(f"{name} must be a string")


def _require_delimiter(delimiter: object) -> None:
    if not isinstance(delimiter, str) or len(delimiter) != 1:
        raise InvalidArgumentError("delimiter must be a single character")


def _to_string_array(items: Iterable[str]) -> StringArray:
    items = list(items)
    array = StringArray(len(items))
    for position, item in enumerate(items):
        array[position] = item
    return array


def strdup(value: str | None) -> str | None:
    """Return a copy of value, or None when value is None."""
    if value is None:
        return None
    _require_str(value, "value")
    return str(value)


def strndup(value: str | None, length: int) -> str | None:
    """Return at most the first length characters of value, or None for None."""
    if value is None:
        return None
    _require_str(value, "value")
    if isinstance(length, bool) or not isinstance(length, int):
        raise InvalidArgumentError("length must be an integer")
    if length < 0:
        raise InvalidArgumentError("length must not be negative")
    return value[:length]


def repl_str(value: str, old: str, new: str) -> str:
    """Replace every non-overlapping occurrence of old, scanning left to right."""
    _require_str(value, "value")
    _require_str(old, "old")
    _require_str(new, "new")
    if not old:
        raise InvalidArgumentError("the string to replace must not be empty")
    return value.replace(old, new)


def split(value: str | None, delimiter: str) -> StringArray:
    """Split value on delimiter, dropping empty tokens.

    An empty or missing string gives an empty array.
    """
    _require_delimiter(delimiter)
    if value is None or value == "":
        return StringArray(0)
    _require_str(value, "value")
    return _to_string_array(token for token in value.split(delimiter) if token)


def split_last(value: str | None, delimiter: str) -> StringArray:
    """Split value in two at the last delimiter.

    One leading and one trailing delimiter are ignored when searching. When no
    delimiter is found the result holds a single element: the string without
    its leading delimiter. Otherwise the first part drops one delimiter
    directly before the split point, and the second part drops the trailing
    delimiter.
    """
    _require_delimiter(delimiter)
    if value is None or value == "":
        return StringArray(0)
    _require_str(value, "value")

    size = len(value)
    lhs_offset = 1 if value[0] == delimiter else 0
    rhs_offset = 1 if value[-1] == delimiter else 0

    found_last = value.rfind(delimiter, lhs_offset, size - rhs_offset)
    if found_last == -1:
        return _to_string_array([value[lhs_offset:]])

    inner_rhs_offset = 1 if found_last > 0 and value[found_last - 1] == delimiter else 0
    first_end = max(lhs_offset, found_last - inner_rhs_offset)
    first = value[lhs_offset:first_end]
    second = value[found_last + 1 : size - rhs_offset]
    return _to_string_array([first, second])


def snprintf(buffer_size: int, fmt: str, *args: object) -> FormatResult:
    """Format fmt with printf-style arguments into a buffer of buffer_size.

    The buffer holds at most buffer_size - 1 characters. A buffer_size of
    zero only measures the result. The returned length is that of the whole
    formatted string, whether or not it was truncated.
    """
    if fmt is None:
        raise InvalidArgumentError("format must not be None")
    _require_str(fmt, "format")
    if isinstance(buffer_size, bool) or not isinstance(buffer_size, int):
        raise InvalidArgumentError("buffer_size must be an integer")
    if buffer_size < 0:
        raise InvalidArgumentError("buffer_size must not be negative")
    try:
        full = fmt % args
    except (TypeError, ValueError, KeyError) as exc:
        raise RcutilsError(f"failed to format string: {exc}") from exc
    if buffer_size == 0:
        return FormatResult("", len(full))
    return FormatResult(full[: buffer_size - 1], len(full))