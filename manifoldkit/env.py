"""Access to process environment variables and basic system information."""

from __future__ import annotations

import os

__all__ = ["get", "set", "processor_count"]


def get(key: str) -> str:
    """Return the value of environment variable *key*, or ``""`` if it is unset."""
    return os.environ.get(key, "")


def set(key: str, value: str) -> None:  # noqa: A001 - mirrors the public API name
    """Set environment variable *key* to *value*, overwriting any existing value."""
    os.environ[key] = value


def processor_count() -> int:
    """Return the number of processors on this system, or 0 if it cannot be determined."""
    return os.cpu_count() or 0