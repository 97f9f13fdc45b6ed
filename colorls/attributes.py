"""Resolve directory entries to icon glyphs and semantic color classes.

Lookup goes through an alias table first, then the icon table. Aliases are
followed exactly one hop: an alias target is always looked up in the icon
table itself, never in the alias table again.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

from .colors import ColorClass
from .config import DEFAULT_FILE_KEY, DEFAULT_FOLDER_KEY, IconTables
from .errors import ConfigError


@dataclass(frozen=True)
class Attribute:
    """Icon glyph plus color class shown for one entry."""

    icon: str
    color_class: ColorClass


def file_lookup_key(name: str) -> str:
    """Return the icon-table key for file ``name``.

    The key is the text after the last dot. Names without an extension,
    including dotfiles such as ``.bashrc``, use the name minus one leading dot.
    """
    base = name[1:] if name.startswith(".") else name
    if "." in base:
        return base.rsplit(".", 1)[1]
    return base


def _default_icon(table: Mapping[str, str], key: str) -> str:
    try:
        return table[key]
    except KeyError:
        raise ConfigError(f"Icon table is missing the required default key {key!r}") from None


def _file_attribute(tables: IconTables, key: str) -> Attribute:
    icon = tables.files.get(key)
    if icon is not None:
        return Attribute(icon, ColorClass.RECOGNIZED_FILE)
    return Attribute(_default_icon(tables.files, DEFAULT_FILE_KEY), ColorClass.UNRECOGNIZED_FILE)


def _folder_attribute(tables: IconTables, name: str) -> Attribute:
    icon = tables.folders.get(name)
    if icon is None:
        icon = _default_icon(tables.folders, DEFAULT_FOLDER_KEY)
    return Attribute(icon, ColorClass.DIR)


def resolve_attribute(tables: IconTables, name: str, is_dir: bool) -> Attribute:
    """Return the display attribute for an entry called ``name``."""
    if is_dir:
        return _folder_attribute(tables, tables.folder_aliases.get(name, name))
    key = file_lookup_key(name)
    return _file_attribute(tables, tables.file_aliases.get(key, key))
