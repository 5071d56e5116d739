"""Bootstrap for the interactive browser session."""

from __future__ import annotations

import logging
import os
import sys

from ..controller import ApplicationState, InteractionController
from ..errors import FileSystemError
from ..navigation import NavigationState
from ..ui_theme import resolve_theme
from .loop import run_main_loop
from .terminal import TerminalController

logger = logging.getLogger(__name__)


def build_application_state(root: str, show_hidden: bool = True) -> ApplicationState:
    """Create the initial state rooted at ``root``.

    Raises ``SystemExit`` when the root directory cannot be listed.
    """
    try:
        navigation = NavigationState(root, show_hidden=show_hidden)
    except FileSystemError as exc:
        raise SystemExit(f"Cannot open {root}: {exc.reason()}") from exc
    return ApplicationState(navigation=navigation)


def run_browser(
    root: str,
    theme_name: str | None = None,
    show_hidden: bool = True,
    no_color: bool = False,
) -> None:
    """Run the interactive browser on ``root`` until the user quits."""
    if not sys.stdin.isatty() or not sys.stdout.isatty():
        raise SystemExit("lazyfm needs an interactive terminal.")
    state = build_application_state(root, show_hidden=show_hidden)
    controller = InteractionController(state)
    stdin_fd = sys.stdin.fileno()
    terminal = TerminalController(stdin_fd, sys.stdout.fileno())
    theme = resolve_theme(theme_name, no_color=no_color or "NO_COLOR" in os.environ)
    logger.info("browsing %s", state.navigation.root_path)
    run_main_loop(state, controller, terminal, stdin_fd, theme)
    logger.info("session ended at %s", state.navigation.current_path)
