"""Filesystem scanning for directory listings.

Every OS failure is raised as :class:`FileSystemError`; a scan either
produces a complete result or nothing.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Callable
from dataclasses import dataclass

from ..errors import FileSystemError

logger = logging.getLogger(__name__)

SizeOf = Callable[[str], int]


@dataclass(frozen=True)
class DirectoryChild:
    """Raw scan result for one child before it becomes an ``Entry``."""

    name: str
    path: str
    is_dir: bool
    file_size: int


def _stat_size(entry: os.DirEntry[str]) -> int:
    try:
        return int(entry.stat(follow_symlinks=False).st_size)
    except OSError as exc:
        raise FileSystemError("stat", entry.path, exc) from exc


def _is_dir(entry: os.DirEntry[str], follow_symlinks: bool = False) -> bool:
    try:
        return entry.is_dir(follow_symlinks=follow_symlinks)
    except OSError as exc:
        raise FileSystemError("stat", entry.path, exc) from exc


def directory_size(path: str) -> int:
    """Return the recursive sum of file sizes below ``path``.

    Symlinks below ``path`` are counted by their own size and never
    followed. The walk is unbounded; any unreadable nested directory
    aborts it.
    """
    total = 0
    pending = [path]
    while pending:
        directory = pending.pop()
        try:
            with os.scandir(directory) as entries:
                for child in entries:
                    if _is_dir(child):
                        pending.append(child.path)
                    else:
                        total += _stat_size(child)
        except OSError as exc:
            raise FileSystemError("scandir", directory, exc) from exc
    return total


def list_directory_children(
    directory: str,
    show_hidden: bool = True,
    size_of: SizeOf = directory_size,
) -> list[DirectoryChild]:
    """List immediate children of ``directory`` in enumeration order.

    A symlink to a directory lists as a directory so it can be entered.
    Directory sizes come from ``size_of``; file sizes from ``lstat``.
    """
    children: list[DirectoryChild] = []
    try:
        with os.scandir(directory) as entries:
            for child in entries:
                name = child.name
                if not show_hidden and name.startswith("."):
                    continue
                is_dir = _is_dir(child, follow_symlinks=True)
                file_size = size_of(child.path) if is_dir else _stat_size(child)
                children.append(
                    DirectoryChild(
                        name=name,
                        path=child.path,
                        is_dir=is_dir,
                        file_size=file_size,
                    )
                )
    except OSError as exc:
        raise FileSystemError("scandir", directory, exc) from exc
    logger.debug("scanned %s: %d children", directory, len(children))
    return children


__all__ = [
    "DirectoryChild",
    "SizeOf",
    "directory_size",
    "list_directory_children",
]
