"""Choose how many entries go on each output row.

Two strategies are available. ``SEARCH`` tries row capacities from the
largest plausible down to a safe lower bound and keeps the first whose
column-wise widths fit the terminal. ``UNIFORM`` gives every cell the width
of the widest entry and divides the terminal evenly.
"""

from __future__ import annotations

from collections.abc import Sequence
from enum import Enum
from typing import TypeVar

from loguru import logger

T = TypeVar("T")

# Narrowest cell worth considering: one glyph plus decoration.
MIN_ENTRY_WIDTH = 5
UNIFORM_PADDING = 1


class LayoutStrategy(Enum):
    """Row-capacity planner used for a listing."""

    SEARCH = "search"
    UNIFORM = "uniform"


def partition_rows(items: Sequence[T], row_capacity: int) -> list[list[T]]:
    """Split ``items`` into consecutive rows of ``row_capacity``; the last may be shorter."""
    if row_capacity < 1:
        raise ValueError("row_capacity must be >= 1")
    return [list(items[start : start + row_capacity]) for start in range(0, len(items), row_capacity)]


def column_widths(widths: Sequence[int], row_capacity: int) -> list[int]:
    """Return the widest entry of each column when ``widths`` are laid out in rows."""
    columns: list[int] = []
    for row in partition_rows(widths, row_capacity):
        for index, width in enumerate(row):
            if index == len(columns):
                columns.append(width)
            elif width > columns[index]:
                columns[index] = width
    return columns


def min_row_capacity(widths: Sequence[int], terminal_width: int) -> int:
    """Row capacity that fits even if every entry were as wide as the widest one."""
    if not widths:
        return 1
    return max(1, terminal_width // (max(widths) + 1))


def max_row_capacity(terminal_width: int) -> int:
    """Largest row capacity worth trying for ``terminal_width``."""
    return max(1, terminal_width // MIN_ENTRY_WIDTH)


def plan_search(widths: Sequence[int], terminal_width: int) -> int:
    """Return the largest row capacity whose summed column widths fit.

    Candidates run from ``max_row_capacity`` down to ``min_row_capacity``
    inclusive. A candidate fits when its column widths sum to strictly less
    than ``terminal_width``. When none fits, the lower bound is returned and
    the rows are allowed to overflow.
    """
    if not widths:
        return 1
    lower = min_row_capacity(widths, terminal_width)
    upper = max_row_capacity(terminal_width)
    for candidate in range(upper, lower - 1, -1):
        if sum(column_widths(widths, candidate)) < terminal_width:
            return candidate
    logger.debug("No row capacity in [{}, {}] fits width {}; falling back", lower, upper, terminal_width)
    return lower


def plan_uniform(widths: Sequence[int], terminal_width: int) -> int:
    """Return how many cells of the widest entry's width fit on a row."""
    if not widths:
        return 1
    return max(1, terminal_width // (max(widths) + UNIFORM_PADDING))


def plan_row_capacity(widths: Sequence[int], terminal_width: int, strategy: LayoutStrategy) -> int:
    """Dispatch to the planner selected by ``strategy``."""
    if strategy is LayoutStrategy.UNIFORM:
        return plan_uniform(widths, terminal_width)
    return plan_search(widths, terminal_width)


def layout_column_widths(widths: Sequence[int], row_capacity: int, strategy: LayoutStrategy) -> list[int]:
    """Return the rendered width of each column for ``strategy``.

    ``SEARCH`` layouts size each column to its widest entry. ``UNIFORM``
    layouts give every column the global maximum plus padding.
    """
    per_column = column_widths(widths, row_capacity)
    if strategy is LayoutStrategy.UNIFORM and per_column:
        cell = max(widths) + UNIFORM_PADDING
        return [cell] * len(per_column)
    return per_column
