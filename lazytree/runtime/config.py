"""Read-only JSON config helpers.

Holds the UI theme name, the sibling window size, the input tick and the
status-message lifetime. Access is defensive: malformed or missing config
falls back to defaults. The browser never writes this file.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path

from platformdirs import user_config_dir

from ..input.key_normal import STATUS_MESSAGE_SECONDS
from ..render.viewport import MAX_VISIBLE_CHILDREN

APP_NAME = "lazytree"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME

DEFAULT_TICK_MS = 100


@dataclass(frozen=True)
class BrowserConfig:
    theme_name: str | None = None
    max_visible_children: int = MAX_VISIBLE_CHILDREN
    tick_ms: int = DEFAULT_TICK_MS
    status_seconds: float = STATUS_MESSAGE_SECONDS


def load_config() -> dict[str, object]:
    """Load the JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return {}
    return data if isinstance(data, dict) else {}


def _positive_int(data: dict[str, object], key: str, default: int) -> int:
    value = data.get(key)
    # bool is an int subclass; reject it explicitly.
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        return default
    return value


def _positive_float(data: dict[str, object], key: str, default: float) -> float:
    value = data.get(key)
    if isinstance(value, bool) or not isinstance(value, (int, float)) or value <= 0:
        return default
    return float(value)


def load_browser_config() -> BrowserConfig:
    """Return all browser settings from one config read."""
    data = load_config()
    theme = data.get("theme")
    return BrowserConfig(
        theme_name=theme if isinstance(theme, str) and theme.strip() else None,
        max_visible_children=_positive_int(data, "max_visible_children", MAX_VISIBLE_CHILDREN),
        tick_ms=_positive_int(data, "tick_ms", DEFAULT_TICK_MS),
        status_seconds=_positive_float(data, "status_seconds", STATUS_MESSAGE_SECONDS),
    )
