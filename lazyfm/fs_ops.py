"""Destructive filesystem operations on listing entries.

Only the interaction controller calls these.
"""

from __future__ import annotations

import logging
import os
import shutil

from .errors import FileSystemError
from .listing import Entry, make_entry

logger = logging.getLogger(__name__)


def delete_path(entry: Entry) -> None:
    """Delete ``entry`` from disk, recursively for directories.

    A symlinked directory loses only the link. A recursive delete that fails
    midway leaves whatever it did not reach; there is no rollback.
    """
    try:
        if entry.is_dir and not os.path.islink(entry.full_path):
            shutil.rmtree(entry.full_path)
        else:
            os.remove(entry.full_path)
    except OSError as exc:
        logger.warning("delete failed for %s: %s", entry.full_path, exc)
        raise FileSystemError("delete", entry.full_path, exc) from exc
    logger.info("deleted %s", entry.full_path)


def validate_new_name(entry: Entry, new_name: str) -> str:
    """Return ``new_name`` unchanged, or raise when it is not a plain file name."""
    if not new_name.strip():
        raise FileSystemError("rename", entry.full_path, "name cannot be empty")
    if os.sep in new_name or (os.altsep and os.altsep in new_name):
        raise FileSystemError("rename", entry.full_path, "name cannot contain path separators")
    if new_name in {".", ".."}:
        raise FileSystemError("rename", entry.full_path, f"invalid name {new_name!r}")
    return new_name


def _is_case_only_change(entry: Entry, target_name: str, target_path: str) -> bool:
    if target_name.casefold() != entry.base_name.casefold():
        return False
    try:
        return os.path.samestat(os.lstat(entry.full_path), os.lstat(target_path))
    except OSError:
        return False


def rename_path(entry: Entry, new_name: str) -> Entry:
    """Rename ``entry`` within its directory and return the updated entry.

    Existing targets are never overwritten; a target that is the entry itself
    (a case-only change on a case-insensitive filesystem) is allowed.
    Renaming to the current name returns ``entry`` unchanged.
    """
    target_name = validate_new_name(entry, new_name)
    if target_name == entry.base_name:
        return entry
    directory = entry.full_path[: len(entry.full_path) - len(entry.base_name)]
    target_path = directory + target_name
    if os.path.lexists(target_path) and not _is_case_only_change(entry, target_name, target_path):
        raise FileSystemError("rename", target_path, FileExistsError(f"{target_name!r} already exists"))
    try:
        os.rename(entry.full_path, target_path)
    except OSError as exc:
        logger.warning("rename failed for %s -> %s: %s", entry.full_path, target_path, exc)
        raise FileSystemError("rename", entry.full_path, exc) from exc
    logger.info("renamed %s -> %s", entry.full_path, target_path)
    return make_entry(directory, target_name, entry.is_dir, entry.size_bytes)
