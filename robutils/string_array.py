"""A fixed-size array of optional strings with lexicographic comparison."""

from __future__ import annotations

from collections.abc import Iterator

from robutils.errors import InvalidArgumentError, RcutilsError


class StringArray:
    """A fixed number of slots, each holding a string or None."""

    __slots__ = ("_data",)

    def __init__(self, size: int = 0) -> None:
        if isinstance(size, bool) or not isinstance(size, int):
            raise InvalidArgumentError("size must be an integer")
        if size < 0:
            raise InvalidArgumentError("size must not be negative")
        self._data: list[str | None] = [None] * size

    def __len__(self) -> int:
        return len(self._data)

    def __getitem__(self, index: int) -> str | None:
        return self._data[index]

    def __setitem__(self, index: int, value: str | None) -> None:
        if value is not None and not isinstance(value, str):
            raise InvalidArgumentError("string array elements must be str or None")
        self._data[index] = value

    def __iter__(self) -> Iterator[str | None]:
        return iter(self._data)

    def __repr__(self) -> str:
        return f"StringArray({self._data!r})"

    def compare(self, other: StringArray) -> int:
        """Compare lexicographically; return -1, 0 or 1."""
        return compare_string_arrays(self, other)


def compare_string_arrays(lhs: StringArray, rhs: StringArray) -> int:
    """Compare two string arrays element by element, then by size.

    Returns a negative value if lhs sorts first, zero if equal and a positive
    value otherwise. Raises RcutilsError if a compared element is None.
    """
    if not isinstance(lhs, StringArray):
        raise InvalidArgumentError("lhs string array is invalid")
    if not isinstance(rhs, StringArray):
        raise InvalidArgumentError("rhs string array is invalid")

    for left, right in zip(lhs, rhs):
        if left is None:
            raise RcutilsError("lhs array element is null")
        if right is None:
            raise RcutilsError("rhs array element is null")
        if left != right:
            return -1 if left < right else 1

    if len(lhs) < len(rhs):
        return -1
    if len(lhs) > len(rhs):
        return 1
    return 0