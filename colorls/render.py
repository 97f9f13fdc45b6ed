"""Render sorted entries into a grid of ready-to-print cells.

Each cell is ``icon, space, color, padded text, reset`` followed by a single
separator space in short mode. Padding is computed from predicted widths so a
cell's visible width equals its column width; escapes add no columns.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from types import MappingProxyType

from loguru import logger

from .colors import RESET, ColorClass, Palette, RealColor, color_for, foreground_escape
from .entries import Entry
from .layout import LayoutStrategy, layout_column_widths, partition_rows, plan_row_capacity
from .width import PresentationMode, display_text, grapheme_count, overhead_for, predict_width

SHORT_CELL_SEPARATOR = " "

_EMPTY_PALETTE: Palette = MappingProxyType({})


@dataclass(frozen=True)
class RenderConfig:
    """Per-invocation rendering parameters."""

    terminal_width: int
    mode: PresentationMode = PresentationMode.SHORT
    strategy: LayoutStrategy = LayoutStrategy.SEARCH
    palette: Palette = field(default_factory=lambda: _EMPTY_PALETTE)
    color_enabled: bool = True


def color_escape(color_class: ColorClass, config: RenderConfig) -> str:
    """Return the foreground escape for ``color_class`` or ``""`` without color."""
    if not config.color_enabled:
        return ""
    color: RealColor = color_for(config.palette, color_class)
    return foreground_escape(color)


def format_cell(entry: Entry, column_width: int, config: RenderConfig) -> str:
    """Render one entry padded to ``column_width`` visible columns."""
    text = display_text(entry, config.mode)
    pad = max(0, column_width - overhead_for(config.mode) - grapheme_count(text))
    color = color_escape(entry.attribute.color_class, config)
    reset = RESET if config.color_enabled else ""
    trailer = SHORT_CELL_SEPARATOR if config.mode is PresentationMode.SHORT else ""
    return f"{entry.attribute.icon} {color}{text}{' ' * pad}{reset}{trailer}"


def render_grid(entries: Sequence[Entry], row_capacity: int, config: RenderConfig) -> list[list[str]]:
    """Lay ``entries`` out in rows of ``row_capacity`` and render every cell."""
    if not entries:
        return []
    widths = [predict_width(entry, config.mode) for entry in entries]
    columns = layout_column_widths(widths, row_capacity, config.strategy)
    return [
        [format_cell(entry, columns[index], config) for index, entry in enumerate(row)]
        for row in partition_rows(entries, row_capacity)
    ]


def layout_entries(entries: Sequence[Entry], config: RenderConfig) -> list[list[str]]:
    """Sort, plan, and render ``entries`` for ``config``.

    Short mode packs names into columns with the configured strategy. Long mode
    lists one full path per row.
    """
    ordered = sorted(entries)
    if not ordered:
        return []
    if config.mode is PresentationMode.LONG:
        # Full paths print one per line.
        row_capacity = 1
    else:
        widths = [predict_width(entry, config.mode) for entry in ordered]
        row_capacity = plan_row_capacity(widths, config.terminal_width, config.strategy)
    logger.debug(
        "Planned {} entries per row ({} strategy, width {})",
        row_capacity,
        config.strategy.value,
        config.terminal_width,
    )
    return render_grid(ordered, row_capacity, config)


def grid_lines(grid: Sequence[Sequence[str]]) -> list[str]:
    """Join each row's cells into one output line."""
    return ["".join(row) for row in grid]
