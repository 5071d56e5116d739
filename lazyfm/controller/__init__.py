"""Interaction state machine: commands, overlay modes, and the controller."""

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
from .controller import ApplicationState, Effect, InteractionController
from .overlay import (
    CHOICE_CANCEL,
    CHOICE_DELETE,
    NO_OVERLAY,
    ConfirmDelete,
    NoOverlay,
    OverlayMode,
    RenameInput,
    overlay_name,
)

__all__ = [
    "ApplicationState",
    "Backspace",
    "CHOICE_CANCEL",
    "CHOICE_DELETE",
    "CancelOverlay",
    "Command",
    "Confirm",
    "ConfirmDelete",
    "Effect",
    "InteractionController",
    "MoveSelection",
    "NO_OVERLAY",
    "NavigateInto",
    "NavigateUp",
    "NoOverlay",
    "OverlayMode",
    "Quit",
    "RenameInput",
    "RequestDelete",
    "RequestRename",
    "TypeChar",
    "overlay_name",
]
