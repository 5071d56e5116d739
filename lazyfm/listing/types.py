"""Entry datatype for one row of a directory listing."""

from __future__ import annotations

import os
from dataclasses import dataclass

DIR_SUFFIX = "/"


@dataclass(frozen=True)
class Entry:
    """One immediate child of a listed directory.

    ``name`` is the display name; directories carry a trailing ``/`` that is
    presentation only. ``full_path`` is always ``current_path + base_name``.
    """

    name: str
    is_dir: bool
    size_bytes: int
    full_path: str

    @property
    def base_name(self) -> str:
        """Name without the directory display suffix, safe for path joins."""
        if self.is_dir and self.name.endswith(DIR_SUFFIX):
            return self.name[: -len(DIR_SUFFIX)]
        return self.name


def display_name(base_name: str, is_dir: bool) -> str:
    """Return ``base_name`` with the directory suffix appended when needed."""
    return base_name + DIR_SUFFIX if is_dir else base_name


def ensure_trailing_separator(path: str) -> str:
    """Return ``path`` ending with exactly one ``os.sep``."""
    if not path:
        return "." + os.sep
    stripped = path.rstrip(os.sep)
    if not stripped:
        # Filesystem root.
        return os.sep
    return stripped + os.sep


def make_entry(directory: str, base_name: str, is_dir: bool, size_bytes: int) -> Entry:
    """Build an entry under ``directory`` (which must end with a separator)."""
    return Entry(
        name=display_name(base_name, is_dir),
        is_dir=is_dir,
        size_bytes=size_bytes,
        full_path=directory + base_name,
    )
