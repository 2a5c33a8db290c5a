"""Clock readings in nanoseconds and their fixed-width string forms."""

from __future__ import annotations

import time

from robutils.errors import InvalidArgumentError, RcutilsError
from robutils.text import snprintf

_NS_PER_S = 1_000_000_000
_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1

if hasattr(time, "CLOCK_MONOTONIC_RAW"):

    def _steady_ns() -> int:
        return time.clock_gettime_ns(time.CLOCK_MONOTONIC_RAW)

else:

    def _steady_ns() -> int:
        return time.monotonic_ns()


def _checked(now: int) -> int:
    if now < 0:
        raise RcutilsError("unexpected negative time")
    return now


def system_time_now() -> int:
    """Return the wall-clock time in nanoseconds since the Unix epoch."""
    return _checked(time.time_ns())


def steady_time_now() -> int:
    """Return a monotonic clock reading in nanoseconds."""
    return _checked(_steady_ns())


def _require_time_point(time_point: object) -> int:
    if isinstance(time_point, bool) or not isinstance(time_point, int):
        raise InvalidArgumentError("time_point must be an integer")
    if not _INT64_MIN <= time_point <= _INT64_MAX:
        raise InvalidArgumentError("time_point must fit in a signed 64-bit value")
    return time_point


def _require_size(str_size: object) -> int:
    if isinstance(str_size, bool) or not isinstance(str_size, int):
        raise InvalidArgumentError("str_size must be an integer")
    if str_size < 0:
        raise InvalidArgumentError("str_size must not be negative")
    return str_size


def time_point_as_nanoseconds_string(time_point: int, str_size: int) -> str:
    """Format time_point as at least 19 zero-padded digits of nanoseconds.

    The result is cut to at most str_size - 1 characters; a str_size of zero
    gives an empty string.
    """
    time_point = _require_time_point(time_point)
    str_size = _require_size(str_size)
    if str_size == 0:
        return ""
    sign = "-" if time_point < 0 else ""
    return snprintf(str_size, "%s%.19d", sign, abs(time_point)).text


def time_point_as_seconds_string(time_point: int, str_size: int) -> str:
    """Format time_point as seconds with ten integer and nine fractional digits.

    The result is cut to at most str_size - 1 characters; a str_size of zero
    gives an empty string.
    """
    time_point = _require_time_point(time_point)
    str_size = _require_size(str_size)
    if str_size == 0:
        return ""
    seconds, nanoseconds = divmod(abs(time_point), _NS_PER_S)
    sign = "" if time_point >= 0 else "-"
    return snprintf(str_size, "%s%.10d.%.9d", sign, seconds, nanoseconds).text