"""CLI argument, config-merge, and default-path behavior tests."""

from __future__ import annotations

import os
import sys
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from lazyfm import cli


class CliDefaultPathTests(unittest.TestCase):
    def test_main_defaults_to_current_working_directory_when_no_path_arg(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            previous_cwd = Path.cwd()
            try:
                os.chdir(root)
                with mock.patch.object(sys, "argv", ["lazyfm"]), mock.patch(
                    "lazyfm.cli.load_show_hidden", return_value=True
                ), mock.patch("lazyfm.cli.load_theme_name", return_value=None), mock.patch(
                    "lazyfm.cli.run_browser"
                ) as run_browser:
                    cli.main()
            finally:
                os.chdir(previous_cwd)

            run_browser.assert_called_once_with(str(root), None, True, False)

    def test_main_uses_explicit_path_argument_over_default(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            target = root / "target"
            target.mkdir()

            with mock.patch.object(sys, "argv", ["lazyfm", str(target)]), mock.patch(
                "lazyfm.cli.run_browser"
            ) as run_browser:
                cli.main(default_path=root / "unused")

            path, *_rest = run_browser.call_args.args
            self.assertEqual(path, str(target))

    def test_flags_override_config(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            argv = ["lazyfm", tmp, "--theme", "ocean", "--no-show-hidden", "--no-color"]
            with mock.patch.object(sys, "argv", argv), mock.patch(
                "lazyfm.cli.load_show_hidden", return_value=True
            ), mock.patch("lazyfm.cli.load_theme_name", return_value="default"), mock.patch(
                "lazyfm.cli.run_browser"
            ) as run_browser:
                cli.main()

            _path, theme_name, show_hidden, no_color = run_browser.call_args.args
            self.assertEqual(theme_name, "ocean")
            self.assertFalse(show_hidden)
            self.assertTrue(no_color)

    def test_missing_path_exits(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            missing = Path(tmp) / "missing"
            with mock.patch.object(sys, "argv", ["lazyfm", str(missing)]), mock.patch(
                "lazyfm.cli.run_browser"
            ) as run_browser:
                with self.assertRaises(SystemExit) as ctx:
                    cli.main()

            run_browser.assert_not_called()
            self.assertIn("Path not found", str(ctx.exception))

    def test_file_path_exits(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            target = Path(tmp) / "file.txt"
            target.write_text("x", encoding="utf-8")
            with mock.patch.object(sys, "argv", ["lazyfm", str(target)]), mock.patch("lazyfm.cli.run_browser"):
                with self.assertRaises(SystemExit) as ctx:
                    cli.main()

            self.assertIn("Not a directory", str(ctx.exception))

    def test_log_file_flag_configures_logging(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            log_path = str(Path(tmp) / "lazyfm.log")
            argv = ["lazyfm", tmp, "--log-file", log_path, "--log-level", "debug"]
            with mock.patch.object(sys, "argv", argv), mock.patch("lazyfm.cli.run_browser"), mock.patch(
                "lazyfm.cli.logging.basicConfig"
            ) as basic_config:
                cli.main()

            basic_config.assert_called_once()
            self.assertEqual(basic_config.call_args.kwargs["filename"], log_path)
            self.assertEqual(basic_config.call_args.kwargs["level"], 10)

    def test_without_log_file_logging_is_left_alone(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            with mock.patch.object(sys, "argv", ["lazyfm", tmp]), mock.patch("lazyfm.cli.run_browser"), mock.patch(
                "lazyfm.cli.logging.basicConfig"
            ) as basic_config:
                cli.main()

            basic_config.assert_not_called()


class BootstrapTests(unittest.TestCase):
    def test_unreadable_root_exits_with_reason(self) -> None:
        from lazyfm.runtime.app import build_application_state

        with tempfile.TemporaryDirectory() as tmp:
            with self.assertRaises(SystemExit) as ctx:
                build_application_state(str(Path(tmp) / "gone"))

        self.assertIn("Cannot open", str(ctx.exception))

    def test_initial_state_is_browsing_at_root(self) -> None:
        from lazyfm.runtime.app import build_application_state

        with tempfile.TemporaryDirectory() as tmp:
            state = build_application_state(tmp)

            self.assertTrue(state.navigation.at_root)
            self.assertFalse(state.should_quit)
            self.assertEqual(state.status_message, "")


if __name__ == "__main__":
    unittest.main()
