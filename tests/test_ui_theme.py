import unittest

from lazytree.ui_theme import (
    DEFAULT_THEME,
    OCEAN_THEME,
    PLAIN_THEME,
    available_theme_names,
    normalize_theme_name,
    resolve_theme,
)


class ThemeSelectionTests(unittest.TestCase):
    def test_available_names_exclude_plain(self) -> None:
        self.assertEqual(available_theme_names(), ("default", "ocean"))

    def test_normalize_falls_back_to_default(self) -> None:
        self.assertEqual(normalize_theme_name(None), "default")
        self.assertEqual(normalize_theme_name("  OCEAN "), "ocean")
        self.assertEqual(normalize_theme_name("missing"), "default")

    def test_resolve_theme(self) -> None:
        self.assertIs(resolve_theme("ocean"), OCEAN_THEME)
        self.assertIs(resolve_theme(None), DEFAULT_THEME)
        self.assertIs(resolve_theme("ocean", no_color=True), PLAIN_THEME)

    def test_default_palette_highlights_black_on_white_and_dirs_magenta(self) -> None:
        self.assertEqual(DEFAULT_THEME.tree_selected, "\033[30;47m")
        self.assertEqual(DEFAULT_THEME.tree_dir, "\033[35m")


if __name__ == "__main__":
    unittest.main()
