"""Command interpreter for browsing and the delete/rename overlays.

``InteractionController.handle`` is the single entry point that mutates
application state. Filesystem failures never escape it: they are reported
through ``Effect.error`` and ``ApplicationState.status_message``.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

from .. import fs_ops
from ..errors import FileSystemError
from ..navigation import NavigationState
from .commands import (
    Backspace,
    CancelOverlay,
    Command,
    Confirm,
    MoveSelection,
    NavigateInto,
    NavigateUp,
    Quit,
    RequestDelete,
    RequestRename,
    TypeChar,
)
from .overlay import (
    CHOICE_DELETE,
    NO_OVERLAY,
    ConfirmDelete,
    NoOverlay,
    OverlayMode,
    RenameInput,
    overlay_name,
)

logger = logging.getLogger(__name__)


@dataclass
class ApplicationState:
    navigation: NavigationState
    overlay: OverlayMode = NO_OVERLAY
    should_quit: bool = False
    status_message: str = ""


@dataclass(frozen=True)
class Effect:
    """Outcome of one command: whether to redraw and any reportable error."""

    changed: bool = False
    error: FileSystemError | None = None


UNCHANGED = Effect()
CHANGED = Effect(changed=True)


class InteractionController:
    """Interpret commands against the active overlay mode."""

    def __init__(self, state: ApplicationState) -> None:
        self.state = state

    @property
    def navigation(self) -> NavigationState:
        return self.state.navigation

    def handle(self, command: Command) -> Effect:
        """Apply one command and report what happened."""
        overlay = self.state.overlay
        had_status = bool(self.state.status_message)
        self.state.status_message = ""
        if isinstance(overlay, NoOverlay):
            effect = self._handle_browsing(command)
        elif isinstance(overlay, ConfirmDelete):
            effect = self._handle_confirm_delete(overlay, command)
        elif isinstance(overlay, RenameInput):
            effect = self._handle_rename_input(overlay, command)
        else:
            raise TypeError(f"unknown overlay mode: {overlay!r}")

        if effect.error is not None:
            self.state.status_message = str(effect.error)
            return Effect(changed=True, error=effect.error)
        if had_status and not effect.changed:
            return CHANGED
        return effect

    def _set_overlay(self, overlay: OverlayMode) -> Effect:
        logger.debug("overlay %s -> %s", overlay_name(self.state.overlay), overlay_name(overlay))
        self.state.overlay = overlay
        return CHANGED

    def _handle_browsing(self, command: Command) -> Effect:
        listing = self.navigation.listing
        if isinstance(command, Quit):
            self.state.should_quit = True
            return CHANGED
        if isinstance(command, MoveSelection):
            return Effect(changed=listing.move_selection(command.delta))
        if isinstance(command, NavigateInto):
            entry = listing.selected_entry()
            if entry is None or not entry.is_dir:
                return UNCHANGED
            return self._navigate(lambda: self.navigation.enter(entry))
        if isinstance(command, NavigateUp):
            return self._navigate(self.navigation.go_up)
        if isinstance(command, RequestDelete):
            entry = listing.selected_entry()
            if entry is None:
                return UNCHANGED
            return self._set_overlay(ConfirmDelete(target=entry))
        if isinstance(command, RequestRename):
            entry = listing.selected_entry()
            if entry is None:
                return UNCHANGED
            return self._set_overlay(RenameInput(target=entry))
        return UNCHANGED

    def _navigate(self, move: Callable[[], bool]) -> Effect:
        try:
            moved = move()
        except FileSystemError as exc:
            logger.warning("navigation failed: %s", exc)
            return Effect(error=exc)
        return Effect(changed=moved)

    def _handle_confirm_delete(self, overlay: ConfirmDelete, command: Command) -> Effect:
        if isinstance(command, MoveSelection):
            return self._set_overlay(overlay.toggled(command.delta))
        if isinstance(command, CancelOverlay):
            return self._set_overlay(NO_OVERLAY)
        if isinstance(command, Confirm):
            self._set_overlay(NO_OVERLAY)
            if overlay.choice != CHOICE_DELETE:
                return CHANGED
            return self._delete(overlay)
        return UNCHANGED

    def _delete(self, overlay: ConfirmDelete) -> Effect:
        error: FileSystemError | None = None
        try:
            fs_ops.delete_path(overlay.target)
        except FileSystemError as exc:
            error = exc
        # Rebuild even after a failed delete: a partial recursive delete still changed the disk.
        try:
            self.navigation.refresh()
        except FileSystemError as exc:
            logger.warning("refresh after delete failed: %s", exc)
            error = error or exc
        return Effect(changed=True, error=error)

    def _handle_rename_input(self, overlay: RenameInput, command: Command) -> Effect:
        if isinstance(command, TypeChar):
            return self._set_overlay(overlay.typed(command.char))
        if isinstance(command, Backspace):
            if not overlay.buffer:
                return UNCHANGED
            return self._set_overlay(overlay.backspaced())
        if isinstance(command, CancelOverlay):
            return self._set_overlay(NO_OVERLAY)
        if isinstance(command, Confirm):
            return self._rename(overlay)
        return UNCHANGED

    def _rename(self, overlay: RenameInput) -> Effect:
        try:
            renamed = fs_ops.rename_path(overlay.target, overlay.buffer)
        except FileSystemError as exc:
            # Overlay and buffer stay so the user can edit and retry.
            return Effect(error=exc)
        listing = self.navigation.listing
        if overlay.target in listing.entries:
            index = listing.entries.index(overlay.target)
            self.navigation.listing = listing.replaced(index, renamed)
        else:
            try:
                self.navigation.refresh()
            except FileSystemError as exc:
                self._set_overlay(NO_OVERLAY)
                return Effect(error=exc)
        return self._set_overlay(NO_OVERLAY)
