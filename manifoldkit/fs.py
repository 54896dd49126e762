"""Filesystem helpers that raise when the path they are given does not exist."""

from __future__ import annotations

import errno
import os
from collections.abc import Callable, Iterable, Iterator
from pathlib import Path
from typing import Union

from manifoldkit import env

__all__ = [
    "NoFileExistsError",
    "cwd",
    "home",
    "read_file",
    "read_file_bytes",
    "write_bytes",
    "path_exists",
    "relative_path",
    "absolute_path",
    "is_absolute",
    "is_relative",
    "is_dir",
    "is_file",
    "search",
]

PathArg = Union[str, "os.PathLike[str]"]


class NoFileExistsError(FileNotFoundError):
    """Raised when a path that an operation needs does not exist."""

    def __init__(self, path: PathArg) -> None:
        super().__init__(errno.ENOENT, os.strerror(errno.ENOENT), os.fspath(path))


def _require(path: PathArg) -> Path:
    resolved = Path(path)
    if not resolved.exists():
        raise NoFileExistsError(resolved)
    return resolved


def cwd() -> Path:
    """Return the current working directory."""
    return Path.cwd()


def home() -> Path:
    """Return the current user's home directory, as given by ``HOME``."""
    return Path(env.get("HOME"))


def read_file(path: PathArg) -> str:
    """Read the whole file at *path* as text, keeping line endings as they are."""
    with _require(path).open("r", encoding="utf-8", newline="") as handle:
        return handle.read()


def read_file_bytes(path: PathArg) -> bytes:
    """Read the whole file at *path* as bytes."""
    return _require(path).read_bytes()


def write_bytes(path: PathArg, data: bytes | bytearray | Iterable[int]) -> None:
    """Overwrite the existing file at *path* with *data*."""
    _require(path).write_bytes(bytes(data))


def path_exists(path: PathArg) -> bool:
    """Return True if *path* exists."""
    return Path(path).exists()


def relative_path(path: PathArg, ref: PathArg | None = None) -> Path:
    """Return *path* relative to *ref* (the working directory by default)."""
    target = _require(path)
    base = cwd() if ref is None else Path(ref)
    return Path(os.path.relpath(os.path.realpath(target), os.path.realpath(base)))


def absolute_path(path: PathArg) -> Path:
    """Return the absolute form of the existing *path*."""
    return _require(path).absolute()


def is_absolute(path: PathArg) -> bool:
    """Return True if *path* is absolute."""
    return Path(path).is_absolute()


def is_relative(path: PathArg) -> bool:
    """Return True if *path* is relative."""
    return not Path(path).is_absolute()


def is_dir(path: PathArg) -> bool:
    """Return True if *path* is a directory."""
    return Path(path).is_dir()


def is_file(path: PathArg) -> bool:
    """Return True if *path* is a regular file."""
    return Path(path).is_file()


def _walk(directory: Path) -> Iterator[Path]:
    with os.scandir(directory) as entries:
        children = sorted(entries, key=lambda entry: entry.name)
    for entry in children:
        yield Path(entry.path)
        if entry.is_dir(follow_symlinks=False):
            yield from _walk(Path(entry.path))


def search(directory: PathArg, matcher: Callable[[Path], bool]) -> Path:
    """Return the first path below *directory* for which *matcher* is true.

    Every entry, files and directories alike, is visited recursively.
    """
    root = _require(directory)
    for candidate in _walk(root):
        if matcher(candidate):
            return candidate
    raise NoFileExistsError(root)