"""CLI argument and default-path behavior tests.

Verifies how ``colorls.cli.main`` maps flags onto the listing action.
"""

from __future__ import annotations

import io
import os
import sys
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from colorls import cli
from colorls.errors import ConfigError
from colorls.layout import LayoutStrategy
from colorls.logging import Verbosity, init_logging
from colorls.width import PresentationMode


class CliActionTests(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self._tmp.cleanup)
        self.root = Path(self._tmp.name).resolve()
        patcher = mock.patch("colorls.config.CONFIG_PATH", self.root / "no-config.json")
        patcher.start()
        self.addCleanup(patcher.stop)
        self.addCleanup(init_logging, Verbosity.QUIET)

    def _action(self, argv: list[str]):
        with mock.patch.object(sys, "argv", ["colorls", *argv]), mock.patch("colorls.cli.run") as run:
            cli.main(default_path=self.root)
        run.assert_called_once()
        return run.call_args.args[0]

    def test_main_defaults_to_current_working_directory_when_no_path_arg(self) -> None:
        previous_cwd = Path.cwd()
        try:
            os.chdir(self.root)
            with mock.patch.object(sys, "argv", ["colorls"]), mock.patch("colorls.cli.run") as run:
                cli.main()
        finally:
            os.chdir(previous_cwd)

        action = run.call_args.args[0]
        self.assertEqual(action.directory.resolve(), self.root)
        self.assertEqual(action.verbosity, Verbosity.QUIET)
        self.assertIs(action.render_config.mode, PresentationMode.SHORT)
        self.assertIs(action.render_config.strategy, LayoutStrategy.SEARCH)

    def test_flags_select_mode_strategy_width_and_verbosity(self) -> None:
        action = self._action(["-l", "--layout", "uniform", "--width", "57", "-vv", str(self.root)])
        self.assertIs(action.render_config.mode, PresentationMode.LONG)
        self.assertIs(action.render_config.strategy, LayoutStrategy.UNIFORM)
        self.assertEqual(action.render_config.terminal_width, 57)
        self.assertEqual(action.verbosity, Verbosity.DEBUG)

    def test_no_color_disables_escapes(self) -> None:
        action = self._action(["--no-color"])
        self.assertFalse(action.render_config.color_enabled)

    def test_missing_path_exits(self) -> None:
        with mock.patch.object(sys, "argv", ["colorls", str(self.root / "absent")]):
            with self.assertRaises(SystemExit) as raised:
                cli.main()
        self.assertIn("Path not found", str(raised.exception))

    def test_rejects_non_positive_width(self) -> None:
        with mock.patch.object(sys, "argv", ["colorls", "--width", "0"]), mock.patch("sys.stderr", io.StringIO()):
            with self.assertRaises(SystemExit):
                cli.main(default_path=self.root)

    def test_configuration_error_exits_with_diagnostic(self) -> None:
        with (
            mock.patch.object(sys, "argv", ["colorls"]),
            mock.patch("colorls.cli.load_icon_tables", side_effect=ConfigError("missing 'file'")),
        ):
            with self.assertRaises(SystemExit) as raised:
                cli.main(default_path=self.root)
        self.assertIn("missing 'file'", str(raised.exception))


class CliOutputTests(unittest.TestCase):
    def test_lists_directory_in_sorted_order_without_color_when_piped(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            (root / "b.txt").write_text("b\n", encoding="utf-8")
            (root / "a.txt").write_text("a\n", encoding="utf-8")
            (root / "subdir").mkdir()
            out = io.StringIO()
            with (
                mock.patch("colorls.config.CONFIG_PATH", root / "no-config.json"),
                mock.patch.object(sys, "argv", ["colorls", "--width", "40", str(root)]),
                mock.patch("sys.stdout", out),
            ):
                cli.main()
            init_logging(Verbosity.QUIET)

        lines = out.getvalue().splitlines()
        self.assertEqual(len(lines), 1)
        self.assertNotIn("\033[", lines[0])
        self.assertLess(lines[0].index("a.txt"), lines[0].index("b.txt"))
        self.assertLess(lines[0].index("b.txt"), lines[0].index("subdir"))


if __name__ == "__main__":
    unittest.main()
