"""Current-directory navigation over directory listings.

Each path change builds the new listing first and commits path and listing
together only when the build succeeds, so a ``FileSystemError`` leaves the
state exactly as it was.
"""

from __future__ import annotations

import logging
import os

from .listing import DirectoryListing, Entry, SizeOf, directory_size, ensure_trailing_separator

logger = logging.getLogger(__name__)


class NavigationState:
    """Owns ``current_path`` and its listing, bounded above by ``root_path``."""

    def __init__(
        self,
        root_path: str,
        size_of: SizeOf = directory_size,
        show_hidden: bool = True,
    ) -> None:
        """Snapshot ``root_path``; raises ``FileSystemError`` if it is unreadable."""
        self.root_path = ensure_trailing_separator(root_path)
        self.size_of = size_of
        self.show_hidden = show_hidden
        self.listing = self._build(self.root_path)
        self.current_path = self.root_path

    def _build(self, path: str) -> DirectoryListing:
        return DirectoryListing.build(path, size_of=self.size_of, show_hidden=self.show_hidden)

    def _commit(self, path: str, listing: DirectoryListing) -> None:
        self.current_path = path
        self.listing = listing

    @property
    def at_root(self) -> bool:
        return self.current_path == self.root_path

    def enter(self, entry: Entry) -> bool:
        """Descend into ``entry``; returns ``False`` for non-directories."""
        if not entry.is_dir:
            return False
        target = self.current_path + entry.base_name + os.sep
        listing = self._build(target)
        self._commit(target, listing)
        logger.debug("entered %s", target)
        return True

    def parent_path(self) -> str:
        head, _sep, _last = self.current_path.rstrip(os.sep).rpartition(os.sep)
        return head + os.sep

    def go_up(self) -> bool:
        """Ascend one level; no-op at the configured root."""
        if self.at_root:
            return False
        target = self.parent_path()
        listing = self._build(target)
        self._commit(target, listing)
        logger.debug("went up to %s", target)
        return True

    def refresh(self) -> None:
        """Re-snapshot the current directory; selection resets to the first row."""
        self.listing = self._build(self.current_path)
