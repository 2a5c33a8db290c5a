import os
import sys
from unittest import mock

from robutils.process import get_executable_name, get_pid


def test_get_pid_matches_os():
    assert get_pid() == os.getpid()


def test_get_pid_is_stable():
    first = get_pid()
    second = get_pid()
    assert first > 0
    assert first == second == os.getpid()


def test_executable_name_strips_directory():
    with mock.patch.object(sys, "orig_argv", ["/usr/bin/python3", "-c", "pass"]):
        assert get_executable_name() == "python3"


def test_executable_name_without_directory():
    with mock.patch.object(sys, "orig_argv", ["tool"]):
        assert get_executable_name() == "tool"


def test_executable_name_has_no_separator():
    name = get_executable_name()
    assert name
    assert "/" not in name