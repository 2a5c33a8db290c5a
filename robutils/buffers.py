"""Growable character and byte buffers with explicit capacity."""

from __future__ import annotations

from robutils.errors import InvalidArgumentError
from robutils.text import snprintf


def _require_size(value: object, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgumentError(f"{name} must be an integer")
    if value < 0:
        raise InvalidArgumentError(f"{name} must not be negative")
    return value


def _require_new_size(new_size: object) -> int:
    new_size = _require_size(new_size, "new_size")
    if new_size == 0:
        raise InvalidArgumentError("new size of buffer must not be zero")
    return new_size


def _require_str(value: object, name: str) -> str:
    if not isinstance(value, str):
        raise InvalidArgumentError(f"{name} must be a string")
    return value


class CharArray:
    """A string held in a buffer whose capacity grows on demand.

    The capacity counts one position for the string terminator, so a string
    of length n needs a capacity of at least n + 1.
    """

    __slots__ = ("_text", "_capacity")

    def __init__(self, capacity: int = 0) -> None:
        self._capacity = _require_size(capacity, "capacity")
        self._text = ""

    @property
    def capacity(self) -> int:
        """Number of positions available, terminator included."""
        return self._capacity

    @property
    def value(self) -> str:
        """The string currently held."""
        return self._text

    def __len__(self) -> int:
        return len(self._text)

    def __str__(self) -> str:
        return self._text

    def __repr__(self) -> str:
        return f"CharArray({self._text!r}, capacity={self._capacity})"

    def resize(self, new_size: int) -> None:
        """Set the capacity to new_size, cutting the string if it no longer fits."""
        new_size = _require_new_size(new_size)
        self._capacity = new_size
        if len(self._text) > new_size - 1:
            self._text = self._text[: new_size - 1]

    def expand_as_needed(self, new_size: int) -> None:
        """Grow to new_size only when the current capacity is smaller."""
        new_size = _require_new_size(new_size)
        if self._capacity < new_size:
            self.resize(new_size)

    def sprintf(self, fmt: str, *args: object) -> None:
        """Replace the content with fmt formatted printf-style with args."""
        length = snprintf(0, fmt, *args).length
        self.expand_as_needed(length + 1)
        self._text = snprintf(length + 1, fmt, *args).text

    def strncat(self, src: str, n: int) -> None:
        """Append at most the first n characters of src."""
        src = _require_str(src, "src")
        n = _require_size(n, "n")
        addition = src[:n]
        self.expand_as_needed(len(self._text) + len(addition) + 1)
        self._text += addition

    def strcat(self, src: str) -> None:
        """Append the whole of src."""
        src = _require_str(src, "src")
        self.strncat(src, len(src))

    def memcpy(self, src: str, n: int) -> None:
        """Overwrite the first n characters with those of src.

        Characters already held beyond position n are kept.
        """
        src = _require_str(src, "src")
        n = _require_size(n, "n")
        if n > len(src):
            raise InvalidArgumentError("n is larger than the source")
        if n == 0:
            return
        self.expand_as_needed(n)
        self._text = src[:n] + self._text[n:]
        if len(self._text) + 1 > self._capacity:
            self.resize(len(self._text) + 1)

    def strcpy(self, src: str) -> None:
        """Replace the content with src."""
        src = _require_str(src, "src")
        self.expand_as_needed(len(src) + 1)
        self._text = src


class Uint8Array:
    """A byte buffer with a capacity that can be changed explicitly."""

    __slots__ = ("_data", "_capacity")

    def __init__(self, capacity: int = 0) -> None:
        self._capacity = _require_size(capacity, "capacity")
        self._data = bytearray()

    @property
    def capacity(self) -> int:
        """Number of bytes the buffer can hold."""
        return self._capacity

    @property
    def data(self) -> bytes:
        """The bytes currently held."""
        return bytes(self._data)

    @data.setter
    def data(self, payload: bytes) -> None:
        if not isinstance(payload, (bytes, bytearray, memoryview)):
            raise InvalidArgumentError("data must be bytes")
        payload = bytes(payload)
        if len(payload) > self._capacity:
            self.resize(len(payload))
        self._data = bytearray(payload)

    def __len__(self) -> int:
        return len(self._data)

    def __bytes__(self) -> bytes:
        return bytes(self._data)

    def __repr__(self) -> str:
        return f"Uint8Array({bytes(self._data)!r}, capacity={self._capacity})"

    def resize(self, new_size: int) -> None:
        """Set the capacity to new_size, dropping bytes beyond it."""
        new_size = _require_new_size(new_size)
        self._capacity = new_size
        del self._data[new_size:]