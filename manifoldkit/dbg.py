"""A simple switchable debug log that tags messages with their call site."""

from __future__ import annotations

import inspect
import sys
from pathlib import Path

from manifoldkit import fs

__all__ = ["set_debug", "is_debug", "debug_log"]

_INVALID_PATH = Path("./invalid/path")
_enabled = False


def set_debug(enabled: bool) -> None:
    """Turn debug output on or off."""
    global _enabled
    _enabled = bool(enabled)


def is_debug() -> bool:
    """Return True if debug output is on."""
    return _enabled


def _site_path(filename: str) -> Path:
    try:
        return fs.relative_path(filename)
    except (OSError, ValueError):
        return _INVALID_PATH


def debug_log(*args: object) -> str:
    """Format *args* with a ``[file:line@function]`` prefix.

    The arguments are concatenated without separators and a newline is
    appended. The line is written to standard error only while debug output
    is on; it is returned either way.
    """
    frame = inspect.currentframe()
    caller = frame.f_back if frame is not None else None
    try:
        if caller is None:
            site = f"{_INVALID_PATH}:0@?"
        else:
            filename = caller.f_code.co_filename
            site = f"{_site_path(filename)}:{caller.f_lineno}@{caller.f_code.co_name}"
    finally:
        del frame, caller
    line = f"[{site}] " + "".join(str(arg) for arg in args) + "\n"
    if _enabled:
        sys.stderr.write(line)
        sys.stderr.flush()
    return line