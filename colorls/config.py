"""Icon tables, color palettes, and persisted JSON overrides.

Bundled defaults ship as JSON under ``default_config``. A user config file can
override individual table entries, palette colors, and the theme name.
Reading the user file is defensive: a missing or malformed file is ignored.
Structural problems in the merged tables raise ``ConfigError``.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType

from loguru import logger
from platformdirs import user_config_dir

from .colors import ColorClass, RealColor, parse_palette
from .errors import ConfigError

APP_NAME = "colorls"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME
DEFAULT_CONFIG_DIR = Path(__file__).resolve().parent / "default_config"

DEFAULT_FILE_KEY = "file"
DEFAULT_FOLDER_KEY = "folder"
DEFAULT_THEME = "dark"
THEME_NAMES = ("dark", "light")

_TABLE_NAMES = ("files", "file_aliases", "folders", "folder_aliases")


def _frozen(table: Mapping[str, str]) -> Mapping[str, str]:
    return MappingProxyType(dict(table))


@dataclass(frozen=True)
class IconTables:
    """Name-to-glyph tables plus one-hop alias tables for files and folders."""

    files: Mapping[str, str] = field(default_factory=dict)
    file_aliases: Mapping[str, str] = field(default_factory=dict)
    folders: Mapping[str, str] = field(default_factory=dict)
    folder_aliases: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        for name in _TABLE_NAMES:
            object.__setattr__(self, name, _frozen(getattr(self, name)))

    def validate(self) -> IconTables:
        """Raise ``ConfigError`` unless both default keys are present."""
        if DEFAULT_FILE_KEY not in self.files:
            raise ConfigError(f"File icon table is missing the required default key {DEFAULT_FILE_KEY!r}")
        if DEFAULT_FOLDER_KEY not in self.folders:
            raise ConfigError(f"Folder icon table is missing the required default key {DEFAULT_FOLDER_KEY!r}")
        return self


def read_json_object(path: Path) -> dict[str, object]:
    """Load a JSON object from ``path``; raises ``ConfigError`` when unusable."""
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as exc:
        raise ConfigError(f"Cannot read config table {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigError(f"Config table {path} must contain a JSON object")
    return data


def load_user_config() -> dict[str, object]:
    """Load the persisted user JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return {}
    except Exception as exc:
        logger.warning("Ignoring unreadable config {}: {}", CONFIG_PATH, exc)
        return {}
    if not isinstance(data, dict):
        logger.warning("Ignoring config {}: top-level value is not an object", CONFIG_PATH)
        return {}
    return data


def _string_table(raw: Mapping[str, object], source: str) -> dict[str, str]:
    table: dict[str, str] = {}
    for key, value in raw.items():
        if not isinstance(value, str):
            raise ConfigError(f"{source}: value for {key!r} must be a string")
        table[str(key)] = value
    return table


def _override_section(overrides: Mapping[str, object], key: str) -> Mapping[str, object]:
    section = overrides.get(key)
    if section is None:
        return {}
    if not isinstance(section, dict):
        raise ConfigError(f"Config section {key!r} must be an object")
    return section


def load_icon_tables(
    overrides: Mapping[str, object] | None = None,
    config_dir: Path = DEFAULT_CONFIG_DIR,
) -> IconTables:
    """Build validated icon tables from bundled defaults merged with ``overrides``."""
    overrides = overrides or {}
    tables: dict[str, dict[str, str]] = {}
    for name in _TABLE_NAMES:
        merged = _string_table(read_json_object(config_dir / f"{name}.json"), f"{name}.json")
        merged.update(_string_table(_override_section(overrides, name), f"config {name}"))
        tables[name] = merged
    return IconTables(**tables).validate()


def normalize_theme_name(name: str | None) -> str:
    """Return a known palette name, falling back to the dark palette."""
    if not name:
        return DEFAULT_THEME
    candidate = str(name).strip().lower()
    if candidate in THEME_NAMES:
        return candidate
    logger.warning("Unknown theme {!r}; using {}", name, DEFAULT_THEME)
    return DEFAULT_THEME


def load_palette(
    theme: str | None = None,
    overrides: Mapping[str, object] | None = None,
    config_dir: Path = DEFAULT_CONFIG_DIR,
) -> Mapping[ColorClass, RealColor]:
    """Return the read-only palette for ``theme`` with user color overrides applied."""
    overrides = overrides or {}
    if theme is None:
        persisted = overrides.get("theme")
        theme = persisted if isinstance(persisted, str) else None
    theme_name = normalize_theme_name(theme)
    palette = parse_palette(read_json_object(config_dir / f"{theme_name}_colors.json"))
    palette.update(parse_palette(_override_section(overrides, "colors")))
    return MappingProxyType(palette)
