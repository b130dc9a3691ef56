"""Regression tests for ANSI width measurement and clipping.

These cases protect top bar, status bar and tree row shaping.
"""

import unittest

from lazytree import ansi as ansi_mod


class DisplayWidthTests(unittest.TestCase):
    def test_escape_sequences_do_not_count(self) -> None:
        self.assertEqual(ansi_mod.display_width("\033[35mabc\033[0m"), 3)

    def test_wide_and_combining_characters(self) -> None:
        self.assertEqual(ansi_mod.display_width("日本"), 4)
        self.assertEqual(ansi_mod.display_width("é"), 1)


class ClipAnsiLineTests(unittest.TestCase):
    def test_clips_visible_text_and_keeps_escapes(self) -> None:
        clipped = ansi_mod.clip_ansi_line("\033[1mabcdef\033[0m", 3)
        self.assertEqual(clipped, "\033[1mabc")

    def test_trailing_escape_is_kept_when_text_fits(self) -> None:
        self.assertEqual(ansi_mod.clip_ansi_line("\033[1mab\033[0m", 5), "\033[1mab\033[0m")

    def test_wide_character_not_split(self) -> None:
        self.assertEqual(ansi_mod.clip_ansi_line("a日b", 2), "a")

    def test_non_positive_width_returns_empty(self) -> None:
        self.assertEqual(ansi_mod.clip_ansi_line("abc", 0), "")
        self.assertEqual(ansi_mod.clip_ansi_line("", 4), "")


if __name__ == "__main__":
    unittest.main()
