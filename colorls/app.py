"""Run one listing: enumerate, resolve, lay out, and print."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import TextIO

from loguru import logger

from .config import IconTables
from .entries import build_entries, list_target
from .logging import Verbosity
from .render import RenderConfig, grid_lines, layout_entries


@dataclass(frozen=True)
class Action:
    """Everything a listing run needs, built once by the CLI."""

    verbosity: Verbosity
    directory: Path
    render_config: RenderConfig
    tables: IconTables


def list_directory(action: Action) -> list[str]:
    """Return the output lines for ``action`` without printing them."""
    logger.info("Looking at {}", action.directory)
    entries = build_entries(action.tables, list_target(action.directory))
    return grid_lines(layout_entries(entries, action.render_config))


def run(action: Action, out: TextIO) -> None:
    """Write the listing for ``action`` to ``out``, one grid row per line."""
    logger.debug("{!r}", action)
    for line in list_directory(action):
        out.write(line)
        out.write("\n")
