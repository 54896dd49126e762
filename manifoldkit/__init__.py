"""Utilities for environment variables, filesystem access, strings, bit flags and debug logging."""

__version__ = "0.1.0"
__all__ = ["bitflags", "dbg", "env", "fs", "strutil"]