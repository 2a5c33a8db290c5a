import time

import pytest

from robutils.errors import InvalidArgumentError
from robutils.timepoint import (
    steady_time_now,
    system_time_now,
    time_point_as_nanoseconds_string,
    time_point_as_seconds_string,
)

NS_PER_MS = 1_000_000


def test_system_time_now_is_positive():
    assert system_time_now() > 0


def test_system_time_now_matches_wall_clock():
    now = system_time_now()
    reference = time.time_ns()
    assert abs(now - reference) <= 1000 * NS_PER_MS


def test_steady_time_now_is_positive():
    assert steady_time_now() > 0


def test_steady_time_now_tracks_monotonic_clock():
    now = steady_time_now()
    now_ref = time.monotonic_ns()
    time.sleep(0.1)
    later = steady_time_now()
    later_ref = time.monotonic_ns()
    steady_diff = later - now
    ref_diff = later_ref - now_ref
    assert steady_diff > 0
    assert abs(steady_diff - ref_diff) <= 5 * NS_PER_MS


def test_steady_time_never_goes_backwards():
    readings = [steady_time_now() for _ in range(100)]
    assert readings == sorted(readings)


def test_nanoseconds_typical():
    assert time_point_as_nanoseconds_string(100, 256) == "0000000000000000100"


def test_nanoseconds_invalid_time_point():
    with pytest.raises(InvalidArgumentError):
        time_point_as_nanoseconds_string(None, 256)


def test_nanoseconds_invalid_size():
    with pytest.raises(InvalidArgumentError):
        time_point_as_nanoseconds_string(100, None)


@pytest.mark.parametrize(
    "size, expected",
    [(18, "00000000000000001"), (0, ""), (1, ""), (3, "00")],
)
def test_nanoseconds_truncation(size, expected):
    assert time_point_as_nanoseconds_string(100, size) == expected


def test_nanoseconds_negative():
    assert time_point_as_nanoseconds_string(-100, 256) == "-0000000000000000100"


def test_seconds_typical():
    assert time_point_as_seconds_string(100, 256) == "0000000000.000000100"


def test_seconds_invalid_time_point():
    with pytest.raises(InvalidArgumentError):
        time_point_as_seconds_string(None, 256)


def test_seconds_invalid_size():
    with pytest.raises(InvalidArgumentError):
        time_point_as_seconds_string(100, None)


@pytest.mark.parametrize(
    "size, expected",
    [(19, "0000000000.0000001"), (0, ""), (1, ""), (3, "00")],
)
def test_seconds_truncation(size, expected):
    assert time_point_as_seconds_string(100, size) == expected


def test_seconds_negative():
    assert time_point_as_seconds_string(-100, 256) == "-0000000000.000000100"


def test_out_of_range_time_point_rejected():
    with pytest.raises(InvalidArgumentError):
        time_point_as_seconds_string(2**63, 256)