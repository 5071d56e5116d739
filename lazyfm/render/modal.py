"""Centered modal boxes for the delete confirmation and rename prompt.

Presentation only: returns positioned rows for the frame builder.
"""

from __future__ import annotations

from ..ansi import display_width, fit_ansi_line, sanitize_terminal_text
from ..controller import (
    CHOICE_CANCEL,
    CHOICE_DELETE,
    ConfirmDelete,
    NoOverlay,
    OverlayMode,
    RenameInput,
)
from ..ui_theme import UITheme

MODAL_MAX_WIDTH = 60
MODAL_MIN_WIDTH = 30
INPUT_CURSOR = "█"

PositionedRow = tuple[int, int, str]


def _button(label: str, focused: bool, theme: UITheme) -> str:
    style = theme.modal_button_focused if focused else theme.modal_button
    return f"{style}[ {label} ]{theme.reset}"


def confirm_delete_lines(overlay: ConfirmDelete, theme: UITheme) -> tuple[str, list[str]]:
    target = overlay.target
    kind = "directory" if target.is_dir else "file"
    lines = [
        "",
        f"Delete {kind} {theme.modal_danger}{sanitize_terminal_text(target.name)}{theme.reset}?",
    ]
    if target.is_dir:
        lines.append("All of its contents will be removed.")
    lines.extend(
        [
            "",
            _button("Cancel", overlay.choice == CHOICE_CANCEL, theme)
            + "  "
            + _button("Delete", overlay.choice == CHOICE_DELETE, theme),
            "",
            f"{theme.status_hint}Left/Right choose  Enter confirm  Esc cancel{theme.reset}",
        ]
    )
    return "Delete", lines


def rename_input_lines(overlay: RenameInput, theme: UITheme) -> tuple[str, list[str]]:
    lines = [
        "",
        f"Rename {sanitize_terminal_text(overlay.target.name)} to:",
        "",
        f"> {sanitize_terminal_text(overlay.buffer)}{INPUT_CURSOR}",
        "",
        f"{theme.status_hint}Enter rename  Esc cancel{theme.reset}",
    ]
    return "Rename", lines


def modal_rows(overlay: OverlayMode, width: int, height: int, theme: UITheme) -> list[PositionedRow]:
    """Return ``(row, col, text)`` triples drawing ``overlay``; empty when none."""
    if isinstance(overlay, NoOverlay):
        return []
    if isinstance(overlay, ConfirmDelete):
        title, lines = confirm_delete_lines(overlay, theme)
    elif isinstance(overlay, RenameInput):
        title, lines = rename_input_lines(overlay, theme)
    else:
        raise TypeError(f"unknown overlay mode: {overlay!r}")

    modal_w = min(MODAL_MAX_WIDTH, max(MODAL_MIN_WIDTH, width - 10), max(4, width))
    modal_h = min(len(lines) + 2, max(3, height))
    x = max(0, (width - modal_w) // 2)
    y = max(0, (height - modal_h) // 2)
    inner_w = max(1, modal_w - 2)
    border = theme.modal_border
    reset = theme.reset

    # Rounded frame with the title set into the top border.
    title_text = f" {title} "
    fill = max(0, inner_w - display_width(title_text) - 1)
    rows: list[PositionedRow] = [
        (y, x, f"{border}╭─{reset}{theme.modal_title}{title_text}{reset}{border}{'─' * fill}╮{reset}")
    ]
    body_rows = modal_h - 2
    for i in range(body_rows):
        text = lines[i] if i < len(lines) else ""
        body = fit_ansi_line(" " + text, inner_w)
        rows.append((y + 1 + i, x, f"{border}│{reset}{body}{reset}{border}│{reset}"))
    rows.append((y + modal_h - 1, x, f"{border}╰{'─' * inner_w}╯{reset}"))
    return rows
