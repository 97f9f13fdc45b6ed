"""Semantic color classes and the ANSI palette they map onto.

Entries carry a ``ColorClass``; a palette maps each class to a ``RealColor``
and the renderer turns that into an escape sequence after width accounting.
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum

from .errors import ConfigError

RESET = "\033[0m"


class ColorClass(Enum):
    """Closed set of semantic color classes; values are config keys."""

    UNRECOGNIZED_FILE = "unrecognized_file"
    RECOGNIZED_FILE = "recognized_file"
    DIR = "dir"
    DEAD_LINK = "dead_link"
    LINK = "link"
    WRITE = "write"
    READ = "read"
    EXEC = "exec"
    NO_ACCESS = "no_access"
    DAY_OLD = "day_old"
    HOUR_OLD = "hour_old"
    NO_MODIFIER = "no_modifier"
    REPORT = "report"
    USER = "user"
    TREE = "tree"
    EMPTY = "empty"
    NORMAL = "normal"


class RealColor(Enum):
    """Concrete terminal colors a palette may use."""

    YELLOW = "yellow"
    GREEN = "green"
    BLUE = "blue"
    RED = "red"
    CYAN = "cyan"
    MAGENTA = "magenta"
    GREY = "grey"
    WHITE = "white"
    BLACK = "black"


FALLBACK_COLOR = RealColor.GREY

_FOREGROUND: dict[RealColor, str] = {
    RealColor.YELLOW: "\033[38;5;3m",
    RealColor.GREEN: "\033[38;5;2m",
    RealColor.BLUE: "\033[38;5;4m",
    RealColor.RED: "\033[38;5;1m",
    RealColor.CYAN: "\033[38;5;6m",
    RealColor.MAGENTA: "\033[38;5;5m",
    RealColor.GREY: "\033[38;5;102m",
    RealColor.WHITE: "\033[38;5;231m",
    RealColor.BLACK: "\033[38;5;16m",
}

Palette = Mapping[ColorClass, RealColor]


def parse_color_class(name: str) -> ColorClass:
    """Return the color class for config key ``name``."""
    try:
        return ColorClass(str(name).strip().lower())
    except ValueError:
        choices = ", ".join(member.value for member in ColorClass)
        raise ConfigError(f"Unknown color class {name!r}; expected one of {choices}") from None


def parse_real_color(name: str) -> RealColor:
    """Return the terminal color named ``name``."""
    try:
        return RealColor(str(name).strip().lower())
    except ValueError:
        choices = ", ".join(member.value for member in RealColor)
        raise ConfigError(f"Unknown color {name!r}; expected one of {choices}") from None


def parse_palette(raw: Mapping[str, object]) -> dict[ColorClass, RealColor]:
    """Parse a ``{class_key: color_name}`` mapping into a palette."""
    palette: dict[ColorClass, RealColor] = {}
    for key, value in raw.items():
        if not isinstance(value, str):
            raise ConfigError(f"Color for {key!r} must be a string, got {type(value).__name__}")
        palette[parse_color_class(key)] = parse_real_color(value)
    return palette


def color_for(palette: Palette, color_class: ColorClass) -> RealColor:
    """Resolve ``color_class`` through ``palette``, falling back to grey."""
    return palette.get(color_class, FALLBACK_COLOR)


def foreground_escape(color: RealColor) -> str:
    """Return the ANSI foreground sequence for ``color``."""
    return _FOREGROUND[color]
