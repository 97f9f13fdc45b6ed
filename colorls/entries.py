"""Directory enumeration and the ``Entry`` model fed to the layout engine."""

from __future__ import annotations

import os
from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path

from loguru import logger

from .attributes import Attribute, resolve_attribute
from .config import IconTables


def entry_name(path: Path) -> str:
    """Return the listed name of ``path``, or the whole path when it has none."""
    return path.name or str(path)


@dataclass(frozen=True, order=True)
class Entry:
    """One listed path with its resolved attribute.

    Equality, hashing, and ordering use ``path`` only, so sorting a listing is
    lexicographic on path components.
    """

    path: Path
    attribute: Attribute = field(compare=False)

    @property
    def name(self) -> str:
        """Final path component shown in short listings."""
        return entry_name(self.path)


def scan_directory(directory: Path) -> list[tuple[Path, bool]]:
    """Return ``(path, is_dir)`` pairs for every child of ``directory``.

    Symlinks are classified by their target; a child whose type cannot be
    determined (for example a dangling link) is treated as a file. Errors
    opening ``directory`` itself propagate to the caller.
    """
    listing: list[tuple[Path, bool]] = []
    with os.scandir(directory) as children:
        for child in children:
            try:
                is_dir = child.is_dir()
            except OSError as exc:
                logger.debug("Cannot stat {}: {}", child.path, exc)
                is_dir = False
            listing.append((Path(child.path), is_dir))
    logger.debug("Scanned {} entries in {}", len(listing), directory)
    return listing


def list_target(target: Path) -> list[tuple[Path, bool]]:
    """Enumerate ``target``: its children for a directory, itself for a file."""
    if target.is_dir():
        return scan_directory(target)
    return [(target, False)]


def resolve_entry(tables: IconTables, path: Path, is_dir: bool) -> Entry:
    """Build an ``Entry`` for ``path`` with its attribute resolved."""
    return Entry(path=path, attribute=resolve_attribute(tables, entry_name(path), is_dir))


def build_entries(tables: IconTables, listing: Iterable[tuple[Path, bool]]) -> list[Entry]:
    """Resolve every listed path and return the entries sorted by path."""
    return sorted(resolve_entry(tables, path, is_dir) for path, is_dir in listing)
