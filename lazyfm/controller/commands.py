"""Discrete user commands accepted by the interaction controller."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Quit:
    pass


@dataclass(frozen=True)
class RequestDelete:
    pass


@dataclass(frozen=True)
class RequestRename:
    pass


@dataclass(frozen=True)
class NavigateInto:
    pass


@dataclass(frozen=True)
class NavigateUp:
    pass


@dataclass(frozen=True)
class MoveSelection:
    delta: int


@dataclass(frozen=True)
class Confirm:
    pass


@dataclass(frozen=True)
class CancelOverlay:
    pass


@dataclass(frozen=True)
class TypeChar:
    char: str


@dataclass(frozen=True)
class Backspace:
    pass


Command = (
    Quit
    | RequestDelete
    | RequestRename
    | NavigateInto
    | NavigateUp
    | MoveSelection
    | Confirm
    | CancelOverlay
    | TypeChar
    | Backspace
)

__all__ = [
    "Backspace",
    "CancelOverlay",
    "Command",
    "Confirm",
    "MoveSelection",
    "NavigateInto",
    "NavigateUp",
    "Quit",
    "RequestDelete",
    "RequestRename",
    "TypeChar",
]
