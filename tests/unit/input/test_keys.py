"""Key decoding and mode-aware key-to-command mapping tests."""

from __future__ import annotations

import os
import unittest

from lazyfm.controller import (
    Backspace,
    CancelOverlay,
    Confirm,
    ConfirmDelete,
    MoveSelection,
    NavigateInto,
    NavigateUp,
    NO_OVERLAY,
    Quit,
    RenameInput,
    RequestDelete,
    RequestRename,
    TypeChar,
)
from lazyfm.input import (
    BROWSING_KEYS,
    CONFIRM_DELETE_KEYS,
    RENAME_INPUT_KEYS,
    command_for_key,
    is_text_key,
    read_key,
)
from lazyfm.listing import Entry

TARGET = Entry(name="a.txt", is_dir=False, size_bytes=1, full_path="/tmp/a.txt")


class CommandForKeyTests(unittest.TestCase):
    def test_browsing_bindings(self) -> None:
        self.assertEqual(command_for_key("q", NO_OVERLAY), Quit())
        self.assertEqual(command_for_key("d", NO_OVERLAY), RequestDelete())
        self.assertEqual(command_for_key("r", NO_OVERLAY), RequestRename())
        self.assertEqual(command_for_key("UP", NO_OVERLAY), MoveSelection(-1))
        self.assertEqual(command_for_key("j", NO_OVERLAY), MoveSelection(1))
        self.assertEqual(command_for_key("ENTER", NO_OVERLAY), NavigateInto())
        self.assertEqual(command_for_key("ESC", NO_OVERLAY), NavigateUp())
        self.assertIsNone(command_for_key("x", NO_OVERLAY))

    def test_confirm_delete_bindings(self) -> None:
        overlay = ConfirmDelete(target=TARGET)

        self.assertEqual(command_for_key("LEFT", overlay), MoveSelection(-1))
        self.assertEqual(command_for_key("TAB", overlay), MoveSelection(1))
        self.assertEqual(command_for_key("ENTER", overlay), Confirm())
        self.assertEqual(command_for_key("ESC", overlay), CancelOverlay())
        self.assertEqual(command_for_key("q", overlay), Quit())
        self.assertIsNone(command_for_key("d", overlay))

    def test_rename_input_bindings_treat_letters_as_text(self) -> None:
        overlay = RenameInput(target=TARGET, buffer="")

        self.assertEqual(command_for_key("q", overlay), TypeChar("q"))
        self.assertEqual(command_for_key("d", overlay), TypeChar("d"))
        self.assertEqual(command_for_key(" ", overlay), TypeChar(" "))
        self.assertEqual(command_for_key("é", overlay), TypeChar("é"))
        self.assertEqual(command_for_key("BACKSPACE", overlay), Backspace())
        self.assertEqual(command_for_key("ENTER", overlay), Confirm())
        self.assertEqual(command_for_key("ESC", overlay), CancelOverlay())
        self.assertIsNone(command_for_key("UP", overlay))

    def test_unknown_overlay_raises(self) -> None:
        with self.assertRaises(TypeError):
            command_for_key("q", object())  # type: ignore[arg-type]


class KeyTableTests(unittest.TestCase):
    def test_tables_never_bind_plain_letters_in_rename_mode(self) -> None:
        for key in RENAME_INPUT_KEYS:
            self.assertFalse(is_text_key(key), key)

    def test_each_browsing_key_maps_to_one_command(self) -> None:
        self.assertIs(BROWSING_KEYS["UP"], BROWSING_KEYS["k"])
        self.assertEqual(BROWSING_KEYS["BACKSPACE"], NavigateUp())
        self.assertEqual(CONFIRM_DELETE_KEYS["TAB"], MoveSelection(1))


class ReadKeyTests(unittest.TestCase):
    def _read_all(self, payload: bytes) -> list[str]:
        read_fd, write_fd = os.pipe()
        try:
            os.write(write_fd, payload)
            os.close(write_fd)
            keys: list[str] = []
            while True:
                key = read_key(read_fd, timeout_ms=50)
                if key == "":
                    return keys
                keys.append(key)
        finally:
            os.close(read_fd)

    def test_decodes_arrows_enter_and_backspace(self) -> None:
        keys = self._read_all(b"\x1b[A\x1b[B\r\x7fq")

        self.assertEqual(keys, ["UP", "DOWN", "ENTER_CR", "BACKSPACE", "q"])

    def test_lone_escape_is_reported(self) -> None:
        self.assertEqual(self._read_all(b"\x1b"), ["ESC"])

    def test_multibyte_utf8_character_is_one_key(self) -> None:
        self.assertEqual(self._read_all("ü".encode("utf-8")), ["ü"])


if __name__ == "__main__":
    unittest.main()
