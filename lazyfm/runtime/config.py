"""Read-only JSON config helpers.

Supplies user preferences (hidden files, theme, log level). All access is
defensive: malformed or missing config falls back to defaults. The browser
never writes this file.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from platformdirs import user_config_dir

APP_NAME = "lazyfm"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME
DEFAULT_LOG_LEVEL = "WARNING"
LOG_LEVEL_NAMES = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

logger = logging.getLogger(__name__)


def load_config() -> dict[str, object]:
    """Load the JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return {}
    except (OSError, ValueError) as exc:
        logger.warning("ignoring unreadable config %s: %s", CONFIG_PATH, exc)
        return {}
    return data if isinstance(data, dict) else {}


def load_show_hidden() -> bool:
    """Return hidden-file visibility preference.

    Only explicit boolean values are accepted; anything else falls back to
    ``True`` so every directory child is listed.
    """
    value = load_config().get("show_hidden")
    return value if isinstance(value, bool) else True


def load_theme_name() -> str | None:
    """Load UI theme name, returning ``None`` when unset/invalid."""
    value = load_config().get("theme")
    if not isinstance(value, str):
        return None
    stripped = value.strip()
    return stripped if stripped else None


def load_log_level() -> str:
    """Return a valid logging level name from config, else the default."""
    value = load_config().get("log_level")
    if isinstance(value, str) and value.strip().upper() in LOG_LEVEL_NAMES:
        return value.strip().upper()
    return DEFAULT_LOG_LEVEL
