"""Tests for path navigation: descend, ascend, and failure atomicity."""

from __future__ import annotations

import os
import shutil
import tempfile
import unittest
from pathlib import Path

from lazyfm.errors import FileSystemError
from lazyfm.navigation import NavigationState


def _entry_named(state: NavigationState, name: str):
    return next(entry for entry in state.listing.entries if entry.name == name)


class NavigationStateTests(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.root = Path(self._tmp.name).resolve()
        (self.root / "docs").mkdir()
        (self.root / "docs" / "guide.md").write_text("# guide\n", encoding="utf-8")
        (self.root / "a.txt").write_bytes(b"a" * 50)
        self.root_path = str(self.root) + os.sep

    def tearDown(self) -> None:
        self._tmp.cleanup()

    def test_starts_at_root_with_trailing_separator(self) -> None:
        state = NavigationState(str(self.root))

        self.assertEqual(state.current_path, self.root_path)
        self.assertEqual(state.root_path, self.root_path)
        self.assertTrue(state.at_root)

    def test_enter_on_file_is_noop(self) -> None:
        state = NavigationState(str(self.root))
        before = state.listing

        moved = state.enter(_entry_named(state, "a.txt"))

        self.assertFalse(moved)
        self.assertEqual(state.current_path, self.root_path)
        self.assertIs(state.listing, before)

    def test_enter_then_go_up_restores_root_listing(self) -> None:
        state = NavigationState(str(self.root))
        original_names = {entry.name for entry in state.listing.entries}

        self.assertTrue(state.enter(_entry_named(state, "docs/")))
        self.assertEqual(state.current_path, self.root_path + "docs" + os.sep)
        self.assertEqual([entry.name for entry in state.listing.entries], ["guide.md"])

        self.assertTrue(state.go_up())
        self.assertEqual(state.current_path, self.root_path)
        self.assertEqual({entry.name for entry in state.listing.entries}, original_names)
        self.assertEqual(state.listing.selected_index, 0)

    def test_go_up_at_root_is_noop(self) -> None:
        state = NavigationState(str(self.root))
        before = state.listing

        self.assertFalse(state.go_up())
        self.assertEqual(state.current_path, self.root_path)
        self.assertIs(state.listing, before)

    def test_failed_enter_keeps_previous_path_and_listing(self) -> None:
        state = NavigationState(str(self.root))
        docs = _entry_named(state, "docs/")
        before = state.listing
        shutil.rmtree(self.root / "docs")

        with self.assertRaises(FileSystemError) as ctx:
            state.enter(docs)

        self.assertEqual(ctx.exception.operation, "scandir")
        self.assertEqual(state.current_path, self.root_path)
        self.assertIs(state.listing, before)

    def test_failed_go_up_keeps_current_path(self) -> None:
        state = NavigationState(str(self.root))
        state.enter(_entry_named(state, "docs/"))
        inside = state.current_path

        def failing_size(path: str) -> int:
            raise FileSystemError("scandir", path, PermissionError(13, "Permission denied"))

        state.size_of = failing_size
        with self.assertRaises(FileSystemError):
            state.go_up()

        self.assertEqual(state.current_path, inside)
        self.assertEqual([entry.name for entry in state.listing.entries], ["guide.md"])

    def test_refresh_picks_up_disk_changes_and_resets_selection(self) -> None:
        state = NavigationState(str(self.root))
        state.listing.move_selection(1)
        (self.root / "new.txt").write_text("n", encoding="utf-8")

        state.refresh()

        self.assertIn("new.txt", {entry.name for entry in state.listing.entries})
        self.assertEqual(state.listing.selected_index, 0)

    def test_unreadable_root_raises(self) -> None:
        with self.assertRaises(FileSystemError):
            NavigationState(str(self.root / "missing"))


if __name__ == "__main__":
    unittest.main()
