"""Main interactive event loop for the terminal UI.

One key is read, mapped to a command, and fully handled (filesystem calls
included) before the next key is read. Feature logic lives in the
controller; this loop only wires input, state, and rendering together.
"""

from __future__ import annotations

import logging
import shutil

from ..controller import ApplicationState, InteractionController
from ..input import command_for_key, read_key
from ..render import context_from_state, list_view_rows, render_frame, scroll_start
from ..ui_theme import UITheme
from .terminal import TerminalController

logger = logging.getLogger(__name__)

KEY_POLL_TIMEOUT_MS = 120


def normalize_enter_key(key: str, skip_next_lf: bool) -> tuple[str | None, bool]:
    """Collapse CR, LF, and CRLF into one ``ENTER`` token.

    Returns ``(key_or_None, skip_next_lf)``; ``None`` means the key was the
    LF half of a CRLF pair and must be dropped.
    """
    if skip_next_lf and key == "ENTER_LF":
        return None, False
    if key == "ENTER_CR":
        return "ENTER", True
    if key == "ENTER_LF":
        return "ENTER", False
    return key, False


def run_main_loop(
    state: ApplicationState,
    controller: InteractionController,
    terminal: TerminalController,
    stdin_fd: int,
    theme: UITheme,
) -> None:
    """Run the interactive loop until the controller sets ``should_quit``."""
    dirty = True
    list_start = 0
    last_size: tuple[int, int] | None = None
    skip_next_lf = False

    with terminal.raw_mode():
        while not state.should_quit:
            term = shutil.get_terminal_size((80, 24))
            if (term.columns, term.lines) != last_size:
                last_size = (term.columns, term.lines)
                dirty = True

            if dirty:
                listing = state.navigation.listing
                list_start = scroll_start(
                    listing.selected_index,
                    list_start,
                    list_view_rows(term.lines),
                    len(listing),
                )
                render_frame(context_from_state(state, list_start, term.columns, term.lines, theme))
                dirty = False

            try:
                key = read_key(stdin_fd, timeout_ms=KEY_POLL_TIMEOUT_MS)
            except KeyboardInterrupt:
                continue
            if key == "":
                continue

            normalized, skip_next_lf = normalize_enter_key(key, skip_next_lf)
            if normalized is None:
                continue

            command = command_for_key(normalized, state.overlay)
            if command is None:
                continue
            effect = controller.handle(command)
            if effect.error is not None:
                logger.debug("command %r reported: %s", command, effect.error)
            if effect.changed:
                dirty = True
