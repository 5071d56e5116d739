"""Modal overlay variants layered on top of browsing."""

from __future__ import annotations

from dataclasses import dataclass

from ..listing import Entry

CHOICE_CANCEL = "cancel"
CHOICE_DELETE = "delete"
DELETE_CHOICES: tuple[str, ...] = (CHOICE_CANCEL, CHOICE_DELETE)


@dataclass(frozen=True)
class NoOverlay:
    pass


@dataclass(frozen=True)
class ConfirmDelete:
    """Delete confirmation for ``target``; ``choice`` is the focused button."""

    target: Entry
    choice: str = CHOICE_CANCEL

    def toggled(self, delta: int) -> ConfirmDelete:
        index = (DELETE_CHOICES.index(self.choice) + delta) % len(DELETE_CHOICES)
        return ConfirmDelete(target=self.target, choice=DELETE_CHOICES[index])


@dataclass(frozen=True)
class RenameInput:
    """Rename prompt for ``target`` with the text typed so far."""

    target: Entry
    buffer: str = ""

    def typed(self, char: str) -> RenameInput:
        return RenameInput(target=self.target, buffer=self.buffer + char)

    def backspaced(self) -> RenameInput:
        return RenameInput(target=self.target, buffer=self.buffer[:-1])


OverlayMode = NoOverlay | ConfirmDelete | RenameInput

NO_OVERLAY = NoOverlay()


def overlay_name(overlay: OverlayMode) -> str:
    """Return a stable mode label for logging and rendering."""
    if isinstance(overlay, NoOverlay):
        return "browsing"
    if isinstance(overlay, ConfirmDelete):
        return "confirm_delete"
    if isinstance(overlay, RenameInput):
        return "rename_input"
    raise TypeError(f"unknown overlay mode: {overlay!r}")
