"""Command-line front door for lazyfm.

Parses CLI options, merges them with the config file, sets up logging, and
dispatches into the interactive browser runtime.
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from .runtime import run_browser
from .runtime.config import LOG_LEVEL_NAMES, load_log_level, load_show_hidden, load_theme_name
from .ui_theme import available_theme_names

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(log_file: str | None, level_name: str) -> None:
    """Send log records to ``log_file``; without one, logging stays silent.

    The terminal is in raw mode while browsing, so records never go to stderr.
    """
    if log_file is None:
        return
    logging.basicConfig(
        filename=log_file,
        level=getattr(logging, level_name),
        format=LOG_FORMAT,
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lazyfm",
        description="Browse a directory in the terminal; delete or rename entries.",
    )
    parser.add_argument("path", nargs="?", default=None, help="Directory to browse. Defaults to current directory.")
    parser.add_argument(
        "--theme",
        default=None,
        help=f"UI theme name ({', '.join(available_theme_names())}).",
    )
    parser.add_argument(
        "--show-hidden",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="List dot-files (default from config, else on).",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable color output.")
    parser.add_argument("--log-file", default=None, help="Append log records to this file.")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVEL_NAMES,
        default=None,
        help="Log level (default from config, else WARNING).",
    )
    return parser


def main(default_path: Path | None = None) -> None:
    """Parse CLI arguments and launch the browser on a directory.

    ``default_path`` is primarily for tests; when omitted the current working
    directory is used.
    """
    args = build_parser().parse_args()

    configure_logging(args.log_file, args.log_level or load_log_level())

    if default_path is None:
        default_path = Path.cwd()
    path = Path(args.path or default_path)
    if not path.exists():
        raise SystemExit(f"Path not found: {path}")
    if not path.is_dir():
        raise SystemExit(f"Not a directory: {path}")

    show_hidden = args.show_hidden if args.show_hidden is not None else load_show_hidden()
    theme_name = args.theme if args.theme is not None else load_theme_name()
    run_browser(str(path.resolve()), theme_name, show_hidden, args.no_color)


if __name__ == "__main__":
    main()
