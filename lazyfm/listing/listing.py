"""Directory snapshot plus a wrapping selection cursor."""

from __future__ import annotations

from dataclasses import dataclass

from .fs import SizeOf, directory_size, list_directory_children
from .types import Entry, ensure_trailing_separator, make_entry


@dataclass
class DirectoryListing:
    """Ordered entries of one directory and the selected row.

    ``selected_index`` is ``None`` only for an empty listing and otherwise
    stays within ``[0, len(entries) - 1]``.
    """

    path: str
    entries: tuple[Entry, ...]
    selected_index: int | None = None

    def __post_init__(self) -> None:
        self.selected_index = self._clamp(self.selected_index)

    @classmethod
    def build(
        cls,
        path: str,
        size_of: SizeOf = directory_size,
        show_hidden: bool = True,
    ) -> DirectoryListing:
        """Snapshot ``path``; raises ``FileSystemError`` instead of partial results."""
        directory = ensure_trailing_separator(path)
        children = list_directory_children(directory, show_hidden=show_hidden, size_of=size_of)
        entries = tuple(
            make_entry(directory, child.name, child.is_dir, child.file_size)
            for child in children
        )
        return cls(path=directory, entries=entries, selected_index=0)

    def _clamp(self, index: int | None) -> int | None:
        if not self.entries:
            return None
        if index is None:
            return 0
        return max(0, min(index, len(self.entries) - 1))

    def __len__(self) -> int:
        return len(self.entries)

    def selected_entry(self) -> Entry | None:
        if self.selected_index is None:
            return None
        return self.entries[self.selected_index]

    def move_selection(self, delta: int) -> bool:
        """Move selection by one row, wrapping at both ends.

        Returns ``True`` when the selected index changed.
        """
        if delta not in (-1, 1):
            raise ValueError(f"selection delta must be -1 or 1, got {delta}")
        if self.selected_index is None:
            return False
        previous = self.selected_index
        self.selected_index = (previous + delta) % len(self.entries)
        return self.selected_index != previous

    def replaced(self, index: int, entry: Entry) -> DirectoryListing:
        """Return a copy with ``entries[index]`` swapped for ``entry``."""
        entries = list(self.entries)
        entries[index] = entry
        return DirectoryListing(path=self.path, entries=tuple(entries), selected_index=self.selected_index)
