"""Command-line front door for colorls.

Parses CLI options, resolves the target path, and builds tables and palette
from bundled defaults plus the user config. Then runs one listing pass.
"""

from __future__ import annotations

import argparse
import shutil
import sys
from pathlib import Path

from .app import Action, run
from .config import THEME_NAMES, load_icon_tables, load_palette, load_user_config
from .errors import ConfigError
from .layout import LayoutStrategy
from .logging import init_logging, verbosity_from_count
from .render import RenderConfig
from .width import PresentationMode


def _positive_int(value: str) -> int:
    """argparse type for positive integer values."""
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}") from exc
    if parsed <= 0:
        raise argparse.ArgumentTypeError("value must be >= 1")
    return parsed


def _default_terminal_width() -> int:
    """Resolve listing width from current terminal size."""
    term = shutil.get_terminal_size((80, 24))
    return max(1, term.columns)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the colorls command line."""
    parser = argparse.ArgumentParser(
        prog="colorls",
        description="List information about the FILEs (the current directory by default).",
    )
    parser.add_argument("path", nargs="?", default=None, help="Directory to list. Defaults to current directory.")
    parser.add_argument("-l", "--long", action="store_true", help="Print full paths instead of names.")
    parser.add_argument(
        "--layout",
        choices=[strategy.value for strategy in LayoutStrategy],
        default=LayoutStrategy.SEARCH.value,
        help="Column planner: search packs columns densely, uniform uses equal cells.",
    )
    parser.add_argument("--theme", choices=THEME_NAMES, default=None, help="Color palette.")
    parser.add_argument("--no-color", action="store_true", help="Disable color output even on TTY.")
    parser.add_argument(
        "--width",
        type=_positive_int,
        default=None,
        help="Column width for output (default: terminal width).",
    )
    parser.add_argument("-v", action="count", default=0, dest="verbose", help="Sets the level of verbosity.")
    return parser


def main(default_path: Path | None = None, argv: list[str] | None = None) -> None:
    """Parse CLI arguments and list a directory.

    ``default_path`` is primarily for tests; when omitted the current working
    directory is used.
    """
    args = build_parser().parse_args(argv)
    verbosity = verbosity_from_count(args.verbose)
    init_logging(verbosity)

    if default_path is None:
        default_path = Path.cwd()
    path = Path(args.path) if args.path is not None else default_path
    if not path.exists():
        raise SystemExit(f"Path not found: {path}")

    user_config = load_user_config()
    try:
        tables = load_icon_tables(user_config)
        palette = load_palette(args.theme, user_config)
    except ConfigError as exc:
        raise SystemExit(f"colorls: configuration error: {exc}") from exc

    render_config = RenderConfig(
        terminal_width=args.width if args.width is not None else _default_terminal_width(),
        mode=PresentationMode.LONG if args.long else PresentationMode.SHORT,
        strategy=LayoutStrategy(args.layout),
        palette=palette,
        color_enabled=not args.no_color and sys.stdout.isatty(),
    )
    action = Action(verbosity=verbosity, directory=path, render_config=render_config, tables=tables)
    try:
        run(action, sys.stdout)
    except OSError as exc:
        raise SystemExit(f"Cannot list {path}: {exc}") from exc


if __name__ == "__main__":
    main()
