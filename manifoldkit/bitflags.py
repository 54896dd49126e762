"""A set of flags packed into a 64-bit integer."""

from __future__ import annotations

from enum import Enum
from typing import Any

__all__ = ["BitFlags"]

_MAX_BITS = 64


def _flag_index(flag: Any) -> int:
    value = flag.value if isinstance(flag, Enum) else flag
    try:
        index = int(value)
    except (TypeError, ValueError):
        raise TypeError(f"flag {flag!r} is not convertible to an integer") from None
    if not 0 <= index < _MAX_BITS:
        raise ValueError(f"flag {flag!r} is outside the range 0..{_MAX_BITS - 1}")
    return index


class BitFlags:
    """Flags of one type, each stored as bit ``1 << int(flag)``."""

    __slots__ = ("_flags", "_flag_type")

    def __init__(self, *args: Any) -> None:
        self._flags = 0
        self._flag_type: type | None = None
        for flag in args:
            self._check_type(flag)
            self._flags |= self.raw_flag(flag)

    def _check_type(self, flag: Any) -> None:
        if self._flag_type is None:
            self._flag_type = type(flag)
        elif type(flag) is not self._flag_type:
            raise TypeError(
                f"all flags must be of type {self._flag_type.__name__}, "
                f"got {type(flag).__name__}"
            )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BitFlags):
            return NotImplemented
        return self._flags == other._flags

    __hash__ = None  # type: ignore[assignment]

    def __getitem__(self, flag: Any) -> bool:
        return self.contains(flag)

    def __contains__(self, flag: Any) -> bool:
        return self.contains(flag)

    def __bool__(self) -> bool:
        return not self.empty()

    def __repr__(self) -> str:
        return f"BitFlags(0x{self._flags:x})"

    def set(self, flag: Any, value: bool = True) -> None:
        """Turn *flag* on (or off when *value* is false)."""
        self._check_type(flag)
        if value:
            self._flags |= self.raw_flag(flag)
        else:
            self._flags &= ~self.raw_flag(flag)

    def contains(self, flag: Any) -> bool:
        """Return True if *flag* is set."""
        return bool(self._flags & self.raw_flag(flag))

    def empty(self) -> bool:
        """Return True if no flag is set."""
        return self._flags == 0

    def clear(self) -> None:
        """Unset every flag."""
        self._flags = 0

    def raw(self) -> int:
        """Return the packed integer value."""
        return self._flags

    def raw_flag(self, flag: Any) -> int:
        """Return the bit mask for a single *flag*."""
        return 1 << _flag_index(flag)