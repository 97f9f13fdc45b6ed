"""Predict how many terminal columns an entry's rendered cell occupies.

Widths count extended grapheme clusters of the uncolored text, so combining
sequences and multi-codepoint glyphs each count once. Color escapes are added
by the renderer after widths are fixed and never reach these helpers.
"""

from __future__ import annotations

from enum import Enum

import regex

from .entries import Entry

_GRAPHEME_RE = regex.compile(r"\X")

# Icon glyph plus the space after it plus the trailing cell separator.
SHORT_OVERHEAD = 3
# Icon glyph plus the space after it.
LONG_OVERHEAD = 2


class PresentationMode(Enum):
    """How much of an entry's path is shown."""

    SHORT = "short"
    LONG = "long"


def grapheme_count(text: str) -> int:
    """Return the number of user-perceived characters in ``text``."""
    if not text:
        return 0
    return len(_GRAPHEME_RE.findall(text))


def display_text(entry: Entry, mode: PresentationMode) -> str:
    """Return the uncolored text shown for ``entry`` in ``mode``."""
    if mode is PresentationMode.LONG:
        return str(entry.path)
    return entry.name


def overhead_for(mode: PresentationMode) -> int:
    """Return the fixed decoration width added around the text in ``mode``."""
    if mode is PresentationMode.LONG:
        return LONG_OVERHEAD
    return SHORT_OVERHEAD


def predict_width(entry: Entry, mode: PresentationMode) -> int:
    """Return the rendered cell width of ``entry`` in ``mode``."""
    return grapheme_count(display_text(entry, mode)) + overhead_for(mode)
