"""Mode-aware mapping from key tokens to controller commands."""

from __future__ import annotations

from collections.abc import Callable

from ..controller import (
    Backspace,
    CancelOverlay,
    Command,
    Confirm,
    ConfirmDelete,
    MoveSelection,
    NavigateInto,
    NavigateUp,
    NoOverlay,
    OverlayMode,
    Quit,
    RenameInput,
    RequestDelete,
    RequestRename,
    TypeChar,
)

KeyTable = dict[str, Command]


def _key_table(*bindings: tuple[tuple[str, ...], Command]) -> KeyTable:
    """Expand ``(keys, command)`` pairs into one token lookup; later pairs win."""
    table: KeyTable = {}
    for keys, command in bindings:
        for key in keys:
            table[key] = command
    return table


BROWSING_KEYS = _key_table(
    (("q",), Quit()),
    (("d",), RequestDelete()),
    (("r",), RequestRename()),
    (("UP", "k"), MoveSelection(-1)),
    (("DOWN", "j"), MoveSelection(1)),
    (("ENTER", "RIGHT", "l"), NavigateInto()),
    (("ESC", "LEFT", "h", "BACKSPACE"), NavigateUp()),
)

CONFIRM_DELETE_KEYS = _key_table(
    (("UP", "LEFT", "k", "h"), MoveSelection(-1)),
    (("DOWN", "RIGHT", "TAB", "j", "l"), MoveSelection(1)),
    (("ENTER",), Confirm()),
    (("ESC",), CancelOverlay()),
    (("q",), Quit()),
)

RENAME_INPUT_KEYS = _key_table(
    (("BACKSPACE",), Backspace()),
    (("ENTER",), Confirm()),
    (("ESC",), CancelOverlay()),
)


def is_text_key(key: str) -> bool:
    """Return whether ``key`` is a single printable character token."""
    return len(key) == 1 and key.isprintable()


def _rename_command(key: str) -> Command | None:
    command = RENAME_INPUT_KEYS.get(key)
    if command is None and is_text_key(key):
        return TypeChar(key)
    return command


_MODE_LOOKUPS: tuple[tuple[type, Callable[[str], Command | None]], ...] = (
    (NoOverlay, BROWSING_KEYS.get),
    (ConfirmDelete, CONFIRM_DELETE_KEYS.get),
    (RenameInput, _rename_command),
)


def command_for_key(key: str, overlay: OverlayMode) -> Command | None:
    """Translate ``key`` into a command for the active mode, or ``None``."""
    for mode_type, lookup in _MODE_LOOKUPS:
        if isinstance(overlay, mode_type):
            return lookup(key)
    raise TypeError(f"unknown overlay mode: {overlay!r}")
