"""Logging initialization utilities using loguru."""

from __future__ import annotations

import sys
from enum import Enum
from typing import TextIO

from loguru import logger


class Verbosity(Enum):
    """Diagnostic level chosen by repeated ``-v`` flags."""

    QUIET = "quiet"
    WARN = "warn"
    DEBUG = "debug"


_LEVELS = {
    Verbosity.QUIET: "WARNING",
    Verbosity.WARN: "INFO",
    Verbosity.DEBUG: "DEBUG",
}


def verbosity_from_count(count: int) -> Verbosity:
    """Map the number of ``-v`` flags to a verbosity level."""
    if count <= 0:
        return Verbosity.QUIET
    if count == 1:
        return Verbosity.WARN
    return Verbosity.DEBUG


def init_logging(verbosity: Verbosity, sink: TextIO | None = None) -> None:
    """Route diagnostics to ``sink`` (stderr by default) at the level for ``verbosity``."""
    logger.remove()
    logger.add(
        sink if sink is not None else sys.stderr,
        level=_LEVELS[verbosity],
        format="<level>{level: <8}</level> {message}",
        backtrace=False,
        diagnose=False,
    )
