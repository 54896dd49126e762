"""Small string helpers with C-locale (ASCII) semantics."""

from __future__ import annotations

from collections.abc import Iterable

__all__ = [
    "ends_with",
    "starts_with",
    "split",
    "replace_all",
    "join",
    "to_lower",
    "to_upper",
    "trim",
    "as_cstr",
]

_WHITESPACE = " \t\n\v\f\r"
_UPPER = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
_LOWER = "abcdefghijklmnopqrstuvwxyz"
_TO_LOWER = str.maketrans(_UPPER, _LOWER)
_TO_UPPER = str.maketrans(_LOWER, _UPPER)


def ends_with(text: str, suffix: str) -> bool:
    """Return True if *text* ends with *suffix*."""
    return text.endswith(suffix)


def starts_with(text: str, prefix: str) -> bool:
    """Return True if *text* starts with *prefix*."""
    return text.startswith(prefix)


def split(text: str, delim: str) -> list[str]:
    """Split *text* on *delim*.

    An empty *text* gives an empty list; an empty *delim* splits into
    single characters.
    """
    if not text:
        return []
    if not delim:
        return list(text)
    return text.split(delim)


def replace_all(text: str, old: str, new: str) -> str:
    """Replace every occurrence of *old* in *text* with *new*."""
    if not old:
        raise ValueError("the substring to replace must not be empty")
    return text.replace(old, new)


def join(parts: Iterable[str], delim: str = "") -> str:
    """Join *parts* with *delim* between consecutive items."""
    return delim.join(parts)


def to_lower(text: str) -> str:
    """Lower-case the ASCII letters of *text*."""
    return text.translate(_TO_LOWER)


def to_upper(text: str) -> str:
    """Upper-case the ASCII letters of *text*."""
    return text.translate(_TO_UPPER)


def trim(text: str) -> str:
    """Strip ASCII whitespace from both ends of *text*."""
    return text.strip(_WHITESPACE)


def as_cstr(text: str) -> bytes:
    """Return a NUL-terminated UTF-8 copy of *text*."""
    return text.encode("utf-8") + b"\0"