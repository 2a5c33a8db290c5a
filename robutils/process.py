"""Information about the running process."""

from __future__ import annotations

import ntpath
import os
import sys


def get_pid() -> int:
    """Return the identifier of the current process."""
    return os.getpid()


def _posix_basename(path: str) -> str:
    if path == "":
        return "."
    stripped = path.rstrip("/")
    if stripped == "":
        return "/"
    return stripped.rsplit("/", 1)[-1]


def _invocation_name() -> str:
    orig_argv = getattr(sys, "orig_argv", None)
    if orig_argv:
        return orig_argv[0]
    return sys.executable or ""


def get_executable_name() -> str | None:
    """Return the name the process was started under, without its directory.

    On Windows the extension is removed as well. Returns None when the name
    cannot be determined.
    """
    name = _invocation_name()
    if os.name == "nt":
        if not name:
            return None
        return ntpath.splitext(ntpath.basename(name))[0]
    return _posix_basename(name)