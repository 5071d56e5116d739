"""Rendering engine for the single-pane directory view.

Builds fully composed ANSI frames from a ``RenderContext`` snapshot and
writes them to stdout. Rendering never mutates application state.
"""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass

from ..ansi import fit_ansi_line, sanitize_terminal_text
from ..controller import ApplicationState, NoOverlay, OverlayMode
from ..listing import Entry, format_size
from ..ui_theme import DEFAULT_THEME, UITheme
from .modal import modal_rows

SIZE_COLUMN_WIDTH = 8
SELECTED_MARKER = "> "
BROWSING_HINT = "j/k move  Enter open  Esc up  d delete  r rename  q quit"
CHROME_ROWS = 3


@dataclass
class RenderContext:
    current_path: str
    entries: tuple[Entry, ...]
    selected_index: int | None
    list_start: int
    overlay: OverlayMode
    status_message: str
    width: int
    height: int
    theme: UITheme = DEFAULT_THEME


def context_from_state(
    state: ApplicationState,
    list_start: int,
    width: int,
    height: int,
    theme: UITheme = DEFAULT_THEME,
) -> RenderContext:
    """Snapshot the fields a frame needs from ``state``."""
    listing = state.navigation.listing
    return RenderContext(
        current_path=state.navigation.current_path,
        entries=listing.entries,
        selected_index=listing.selected_index,
        list_start=list_start,
        overlay=state.overlay,
        status_message=state.status_message,
        width=width,
        height=height,
        theme=theme,
    )


def list_view_rows(height: int) -> int:
    """Rows available for entries after title, header, and status rows."""
    return max(1, height - CHROME_ROWS)


def scroll_start(selected_index: int | None, start: int, visible_rows: int, total: int) -> int:
    """Return a list offset that keeps ``selected_index`` on screen."""
    if selected_index is None:
        return 0
    if selected_index < start:
        start = selected_index
    elif selected_index >= start + visible_rows:
        start = selected_index - visible_rows + 1
    return max(0, min(start, max(0, total - visible_rows)))


def format_entry_row(entry: Entry, selected: bool, width: int, theme: UITheme) -> str:
    """Format one listing row: marker, name, and right-aligned size label.

    The selected row is drawn in reverse video as a single span so inner
    color resets cannot cut the highlight short.
    """
    name_width = max(1, width - len(SELECTED_MARKER) - SIZE_COLUMN_WIDTH - 1)
    name = fit_ansi_line(sanitize_terminal_text(entry.name), name_width)
    size = format_size(entry.size_bytes).rjust(SIZE_COLUMN_WIDTH)
    if selected:
        return f"{theme.reverse}{theme.marker}{SELECTED_MARKER}{name} {size}{theme.reset}"
    color = theme.entry_dir if entry.is_dir else theme.entry_file
    blank = " " * len(SELECTED_MARKER)
    return f"{blank}{color}{name}{theme.reset} {theme.entry_size}{size}{theme.reset}"


def _header_row(width: int, theme: UITheme) -> str:
    name_width = max(1, width - len(SELECTED_MARKER) - SIZE_COLUMN_WIDTH - 1)
    text = " " * len(SELECTED_MARKER) + "Name".ljust(name_width) + " " + "Size".rjust(SIZE_COLUMN_WIDTH)
    return f"{theme.header}{fit_ansi_line(text, width)}{theme.reset}"


def _status_row(context: RenderContext) -> str:
    theme = context.theme
    if context.status_message:
        text = sanitize_terminal_text(context.status_message)
        return f"{theme.status_error}{fit_ansi_line(text, context.width)}{theme.reset}"
    hint = BROWSING_HINT if isinstance(context.overlay, NoOverlay) else ""
    return f"{theme.status_hint}{fit_ansi_line(hint, context.width)}{theme.reset}"


def screen_rows(context: RenderContext) -> list[str]:
    """Return the base screen rows (without any modal) top to bottom."""
    theme = context.theme
    width = max(1, context.width)
    title = f" {sanitize_terminal_text(context.current_path)}"
    rows = [f"{theme.title}{fit_ansi_line(title, width)}{theme.reset}", _header_row(width, theme)]

    visible = list_view_rows(context.height)
    for offset in range(visible):
        index = context.list_start + offset
        if index >= len(context.entries):
            rows.append(" " * width)
            continue
        rows.append(format_entry_row(context.entries[index], index == context.selected_index, width, theme))
    if not context.entries and visible > 0:
        rows[2] = f"{theme.status_hint}{fit_ansi_line('  (empty directory)', width)}{theme.reset}"
    rows.append(_status_row(context))
    return rows


def build_frame(context: RenderContext) -> str:
    """Compose the full ANSI frame, modal overlay included."""
    out: list[str] = ["\033[H\033[J"]
    for row_idx, row in enumerate(screen_rows(context)):
        out.append(f"\033[{row_idx + 1};1H")
        out.append(row)
    for row, col, text in modal_rows(context.overlay, context.width, context.height, context.theme):
        out.append(f"\033[{row + 1};{col + 1}H")
        out.append(text)
    out.append(context.theme.reset)
    return "".join(out)


def render_frame(context: RenderContext) -> None:
    """Write one composed frame to stdout."""
    os.write(sys.stdout.fileno(), build_frame(context).encode("utf-8", errors="replace"))


__all__ = [
    "RenderContext",
    "build_frame",
    "context_from_state",
    "format_entry_row",
    "list_view_rows",
    "render_frame",
    "screen_rows",
    "scroll_start",
]
