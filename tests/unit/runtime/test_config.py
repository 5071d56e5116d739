"""Tests for config loading and input sanitization.

Malformed or missing config data must fall back to defaults.
"""

from __future__ import annotations

import json
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from lazyfm.runtime import config


class ConfigBehaviorTests(unittest.TestCase):
    def _with_config(self, payload: str | None):
        tmp = tempfile.TemporaryDirectory()
        self.addCleanup(tmp.cleanup)
        config_path = Path(tmp.name) / "config.json"
        if payload is not None:
            config_path.write_text(payload, encoding="utf-8")
        patcher = mock.patch("lazyfm.runtime.config.CONFIG_PATH", config_path)
        patcher.start()
        self.addCleanup(patcher.stop)

    def test_missing_config_uses_defaults(self) -> None:
        self._with_config(None)

        self.assertEqual(config.load_config(), {})
        self.assertTrue(config.load_show_hidden())
        self.assertIsNone(config.load_theme_name())
        self.assertEqual(config.load_log_level(), "WARNING")

    def test_valid_values_are_loaded(self) -> None:
        self._with_config(json.dumps({"show_hidden": False, "theme": " ocean ", "log_level": "debug"}))

        self.assertFalse(config.load_show_hidden())
        self.assertEqual(config.load_theme_name(), "ocean")
        self.assertEqual(config.load_log_level(), "DEBUG")

    def test_invalid_value_types_fall_back(self) -> None:
        self._with_config(json.dumps({"show_hidden": "no", "theme": 7, "log_level": "LOUD"}))

        self.assertTrue(config.load_show_hidden())
        self.assertIsNone(config.load_theme_name())
        self.assertEqual(config.load_log_level(), "WARNING")

    def test_malformed_json_is_ignored(self) -> None:
        self._with_config("{not json")

        with self.assertLogs("lazyfm.runtime.config", level="WARNING"):
            self.assertEqual(config.load_config(), {})

    def test_non_object_json_is_ignored(self) -> None:
        self._with_config("[1, 2, 3]")

        self.assertEqual(config.load_config(), {})


if __name__ == "__main__":
    unittest.main()
