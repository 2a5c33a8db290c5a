"""A string-to-string map with explicit capacity and slot-ordered iteration."""

from __future__ import annotations

from collections.abc import Iterator

from robutils.errors import (
    BadAllocError,
    InvalidArgumentError,
    NotEnoughSpaceError,
    StringKeyNotFoundError,
)

_MAX_CAPACITY = (2**64 - 1) // 8


def _require_capacity(capacity: object) -> int:
    if isinstance(capacity, bool) or not isinstance(capacity, int):
        raise InvalidArgumentError("capacity must be an integer")
    if capacity < 0:
        raise InvalidArgumentError("capacity must not be negative")
    return capacity


def _require_str(value: object, name: str) -> str:
    if not isinstance(value, str):
        raise InvalidArgumentError(f"{name} must be a string")
    return value


class StringMap:
    """Maps string keys to string values inside a fixed number of slots.

    The map grows only through :meth:`reserve` or :meth:`set`; the latter
    doubles the capacity (or sets it to one) when the map is full. Keys are
    iterated in slot order, and a freed slot is reused by the next new key.
    """

    __slots__ = ("_keys", "_values", "_size")

    def __init__(self, initial_capacity: int = 0) -> None:
        self._keys: list[str | None] = []
        self._values: list[str | None] = []
        self._size = 0
        self.reserve(initial_capacity)

    @property
    def capacity(self) -> int:
        """Number of slots currently available."""
        return len(self._keys)

    def __len__(self) -> int:
        return self._size

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self._index_of(key) is not None

    def __iter__(self) -> Iterator[str]:
        return (key for key in list(self._keys) if key is not None)

    def __repr__(self) -> str:
        items = {key: self.get(key) for key in self}
        return f"StringMap({items!r}, capacity={self.capacity})"

    def _index_of(self, key: str) -> int | None:
        for index, stored in enumerate(self._keys):
            if stored is not None and stored == key:
                return index
        return None

    def reserve(self, capacity: int) -> None:
        """Set the capacity, never below the number of stored entries."""
        capacity = _require_capacity(capacity)
        if capacity < self._size:
            capacity = self._size
        current = self.capacity
        if capacity == current:
            return
        if capacity > _MAX_CAPACITY:
            raise BadAllocError("requested capacity for string_map too large")
        if capacity == 0:
            self._keys = []
            self._values = []
            return
        if capacity > current:
            extra = capacity - current
            self._keys.extend([None] * extra)
            self._values.extend([None] * extra)
            return
        # Shrinking: move occupied slots to the front so no entry is lost.
        pairs = [
            (key, value)
            for key, value in zip(self._keys, self._values)
            if key is not None
        ]
        padding = capacity - len(pairs)
        self._keys = [key for key, _ in pairs] + [None] * padding
        self._values = [value for _, value in pairs] + [None] * padding

    def clear(self) -> None:
        """Remove every entry, keeping the capacity."""
        self._keys = [None] * self.capacity
        self._values = [None] * self.capacity
        self._size = 0

    def set(self, key: str, value: str) -> None:
        """Store value under key, growing the map if it is full."""
        _require_str(key, "key")
        _require_str(value, "value")
        try:
            self.set_no_resize(key, value)
        except NotEnoughSpaceError:
            current = self.capacity
            self.reserve(2 * current if current else 1)
            self.set_no_resize(key, value)

    def set_no_resize(self, key: str, value: str) -> None:
        """Store value under key; raise NotEnoughSpaceError if a new key does not fit."""
        _require_str(key, "key")
        _require_str(value, "value")
        index = self._index_of(key)
        if index is None:
            if self._size >= self.capacity:
                raise NotEnoughSpaceError("string map is full")
            index = self._keys.index(None)
            self._keys[index] = key
            self._size += 1
        self._values[index] = value

    def unset(self, key: str) -> None:
        """Remove key and its value; raise StringKeyNotFoundError if absent."""
        _require_str(key, "key")
        index = self._index_of(key)
        if index is None:
            raise StringKeyNotFoundError(f"key '{key}' not found")
        self._keys[index] = None
        self._values[index] = None
        self._size -= 1

    def key_exists(self, key: str | None) -> bool:
        """Return whether key is stored; None is never stored."""
        if key is None:
            return False
        return key in self

    def get(self, key: str | None) -> str | None:
        """Return the value stored under key, or None."""
        if not isinstance(key, str):
            return None
        index = self._index_of(key)
        return None if index is None else self._values[index]

    def get_next_key(self, key: str | None = None) -> str | None:
        """Return the first key when key is None, else the key after it.

        Returns None when there is no further key or when key is not stored.
        """
        if self._size == 0:
            return None
        start = 0
        if key is not None:
            index = self._index_of(key)
            if index is None:
                return None
            start = index + 1
        return next(
            (stored for stored in self._keys[start:] if stored is not None), None
        )

    def copy_into(self, other: StringMap) -> None:
        """Set every entry of this map into other, overwriting equal keys."""
        if not isinstance(other, StringMap):
            raise InvalidArgumentError("destination string map is invalid")
        for key in self:
            value = self.get(key)
            other.set(key, value)