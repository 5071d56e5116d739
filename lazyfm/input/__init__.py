"""Input-layer public API: raw key decoding and key-to-command mapping."""

from .keys import BROWSING_KEYS, CONFIRM_DELETE_KEYS, RENAME_INPUT_KEYS, command_for_key, is_text_key
from .reader import ESC_SEQUENCE_TIMEOUT_MS, read_key

__all__ = [
    "BROWSING_KEYS",
    "CONFIRM_DELETE_KEYS",
    "ESC_SEQUENCE_TIMEOUT_MS",
    "RENAME_INPUT_KEYS",
    "command_for_key",
    "is_text_key",
    "read_key",
]
