# robutils

A collection of small, dependency-free utilities for Python 3.10 and later.

## Modules

- `robutils.text`:
  - `strdup(value)` returns a copy of a string, or `None` for `None`.
  - `strndup(value, length)` returns at most the first `length` characters.
  - `repl_str(value, old, new)` replaces every occurrence of `old`. An empty
    `old` is rejected.
  - `split(value, delimiter)` splits on a single-character delimiter and drops
    empty tokens. It returns a `StringArray`.
  - `split_last(value, delimiter)` splits in two at the last delimiter. It
    returns a `StringArray` of one or two elements.
  - `snprintf(buffer_size, fmt, *args)` formats printf-style. It returns a
    `FormatResult(text, length)`: `text` is cut to `buffer_size - 1`
    characters, and `length` is the length of the whole result.
- `robutils.string_array`:
  - `StringArray(size)` is a fixed number of slots, each holding a string or
    `None`. It supports `len`, indexing and iteration, and has
    `compare(other)`.
  - `compare_string_arrays(lhs, rhs)` returns -1, 0 or 1. It compares the
    elements first and then the sizes.
- `robutils.string_map`:
  - `StringMap(initial_capacity)` is a string-to-string map with an explicit
    `capacity`.
  - It has the methods `reserve`, `clear`, `set`, `set_no_resize`, `unset`,
    `key_exists`, `get`, `get_next_key` and `copy_into`. It supports `len`,
    `in` and iteration in slot order.
  - `set` grows a full map by doubling its capacity, or to 1 when the
    capacity is 0.
  - `set_no_resize` raises `NotEnoughSpaceError` when a new key does not fit.
- `robutils.timepoint`:
  - `system_time_now()` and `steady_time_now()` return integer nanoseconds.
  - `time_point_as_nanoseconds_string(time_point, str_size)` and
    `time_point_as_seconds_string(time_point, str_size)` give fixed-width
    strings, cut to `str_size - 1` characters.
- `robutils.process`:
  - `get_pid()` returns the process identifier.
  - `get_executable_name()` returns the name the process was started under,
    without its directory.
- `robutils.buffers`:
  - `CharArray(capacity)` is a string with a growable capacity. It has the
    methods `resize`, `expand_as_needed`, `sprintf`, `strncat`, `strcat`,
    `memcpy` and `strcpy`, and a `value` property.
  - `Uint8Array(capacity)` is a byte buffer. It has `resize` and a `data`
    property.
- `robutils.errors`:
  - The exceptions are `RcutilsError` and its subclasses
    `InvalidArgumentError`, `BadAllocError`, `NotEnoughSpaceError`,
    `StringMapError` and `StringKeyNotFoundError`.
  - `format_error_string(message, file, line_number)` returns
    `"<message>, at <file>:<line_number>"`. It truncates an over-long message
    or file name and writes a warning to stderr when it does.

## Installation

```
pip install .
```

## Examples

```python
from robutils.text import split, repl_str, snprintf
from robutils.string_map import StringMap
from robutils.timepoint import time_point_as_seconds_string

list(split("/foo/bar/", "/"))           # ['foo', 'bar']
repl_str("a-b-c", "-", "+")             # 'a+b+c'
snprintf(4, "%s", "hello")              # FormatResult(text='hel', length=5)

m = StringMap(2)
m.set("key", "value")
m.get("key")                            # 'value'

time_point_as_seconds_string(100, 256)  # '0000000000.000000100'
```

## What is not included

The package has no command-line program. It offers no atomic values or other
thread-safe counters, no logging setup and no filesystem helpers.

## Running the tests

```
pip install .[test]
pytest
```