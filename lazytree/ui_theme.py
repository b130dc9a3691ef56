"""UI theme definitions and selection helpers.

Themes are ANSI palettes for the tree rows and the surrounding chrome.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class UITheme:
    """Semantic ANSI palette used by renderers."""

    name: str
    reset: str
    connector: str
    tree_dir: str
    tree_file: str
    tree_selected: str
    top_bar: str
    status_bar: str
    filler: str


DEFAULT_THEME = UITheme(
    name="default",
    reset="\033[0m",
    connector="\033[38;5;245m",
    tree_dir="\033[35m",
    tree_file="\033[37m",
    tree_selected="\033[30;47m",
    top_bar="\033[1m",
    status_bar="\033[7m",
    filler="\033[2m",
)

OCEAN_THEME = UITheme(
    name="ocean",
    reset="\033[0m",
    connector="\033[2;38;5;31m",
    tree_dir="\033[1;38;5;45m",
    tree_file="\033[38;5;252m",
    tree_selected="\033[38;5;16;48;5;117m",
    top_bar="\033[1;38;5;45m",
    status_bar="\033[38;5;153;48;5;24m",
    filler="\033[2;38;5;24m",
)

PLAIN_THEME = UITheme(
    name="plain",
    reset="\033[0m",
    connector="",
    tree_dir="",
    tree_file="",
    tree_selected="\033[7m",
    top_bar="",
    status_bar="",
    filler="",
)

_THEMES: dict[str, UITheme] = {
    DEFAULT_THEME.name: DEFAULT_THEME,
    OCEAN_THEME.name: OCEAN_THEME,
}


def available_theme_names() -> tuple[str, ...]:
    """Return selectable non-plain theme names."""
    return tuple(sorted(_THEMES.keys()))


def normalize_theme_name(name: str | None) -> str:
    """Return a valid theme name, falling back to default."""
    if not name:
        return DEFAULT_THEME.name
    candidate = str(name).strip().lower()
    if candidate in _THEMES:
        return candidate
    return DEFAULT_THEME.name


def resolve_theme(name: str | None, *, no_color: bool = False) -> UITheme:
    """Return concrete theme for requested name and color mode."""
    if no_color:
        return PLAIN_THEME
    return _THEMES[normalize_theme_name(name)]
