"""Display-width prediction tests.

Widths are grapheme-cluster counts plus fixed icon/separator overhead.
"""

from __future__ import annotations

import unittest
from pathlib import Path

from colorls.attributes import Attribute
from colorls.colors import ColorClass
from colorls.entries import Entry
from colorls.width import PresentationMode, grapheme_count, predict_width


def _entry(path: str, icon: str = "I") -> Entry:
    return Entry(Path(path), Attribute(icon, ColorClass.RECOGNIZED_FILE))


class GraphemeCountTests(unittest.TestCase):
    def test_ascii_counts_characters(self) -> None:
        self.assertEqual(grapheme_count("hello"), 5)

    def test_empty_text_is_zero(self) -> None:
        self.assertEqual(grapheme_count(""), 0)

    def test_combining_accent_sequence_counts_once(self) -> None:
        self.assertEqual(grapheme_count("e\u0301"), 1)
        self.assertEqual(grapheme_count("cafe\u0301.txt"), 8)

    def test_multi_codepoint_glyphs_count_once(self) -> None:
        self.assertEqual(grapheme_count("\U0001F1EF\U0001F1F5"), 1)
        self.assertEqual(grapheme_count("\U0001F468\u200d\U0001F469\u200d\U0001F467"), 1)


class PredictWidthTests(unittest.TestCase):
    def test_short_mode_counts_name_plus_three(self) -> None:
        self.assertEqual(predict_width(_entry("dir/abc.txt"), PresentationMode.SHORT), 10)

    def test_long_mode_counts_full_path_plus_two(self) -> None:
        self.assertEqual(predict_width(_entry("dir/abc.txt"), PresentationMode.LONG), 13)

    def test_icon_representation_does_not_change_width(self) -> None:
        simple = _entry("x.txt", icon="I")
        composed = _entry("x.txt", icon="\U0001F468\u200d\U0001F4BB")
        self.assertEqual(
            predict_width(simple, PresentationMode.SHORT),
            predict_width(composed, PresentationMode.SHORT),
        )

    def test_decomposed_name_matches_precomposed_width(self) -> None:
        decomposed = _entry("re\u0301sume\u0301.md")
        precomposed = _entry("r\u00e9sum\u00e9.md")
        self.assertEqual(
            predict_width(decomposed, PresentationMode.SHORT),
            predict_width(precomposed, PresentationMode.SHORT),
        )


if __name__ == "__main__":
    unittest.main()
