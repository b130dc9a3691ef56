"""Rendering engine for the tree browser screen.

Composes one full frame from the arena tree: a top bar with the selected
node's path, a blank separator, the budget-constrained tree viewport, ``~``
filler rows and a status bar. Frames are written as a single ANSI payload.
"""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass

from ..ansi import clip_ansi_line, display_width
from ..file_tree_model import ArenaTree
from ..ui_theme import DEFAULT_THEME, UITheme
from .viewport import MAX_VISIBLE_CHILDREN, ViewportLine, build_viewport, indent_prefix

CHROME_ROWS = 3
FILLER_TEXT = "~"
DEFAULT_STATUS = "--"


@dataclass
class RenderContext:
    tree: ArenaTree
    rows: int
    columns: int
    status: str = DEFAULT_STATUS
    theme: UITheme = DEFAULT_THEME
    max_children: int = MAX_VISIBLE_CHILDREN


def tree_line_budget(rows: int) -> int:
    """Rows left for the tree once top bar, separator and status bar are placed."""
    return max(1, rows - CHROME_ROWS)


def format_viewport_line(line: ViewportLine, columns: int, theme: UITheme = DEFAULT_THEME) -> str:
    """Render one viewport row as ANSI-styled text clipped to ``columns``."""
    prefix = clip_ansi_line(indent_prefix(line), columns)
    label = clip_ansi_line(line.label, max(0, columns - display_width(prefix)))
    if line.highlighted:
        color = theme.tree_selected
    elif line.is_dir:
        color = theme.tree_dir
    else:
        color = theme.tree_file
    return f"{theme.connector}{prefix}{theme.reset}{color}{label}{theme.reset}"


def build_screen_rows(context: RenderContext) -> list[str]:
    """Return every screen row for ``context``, top to bottom."""
    theme = context.theme
    columns = max(1, context.columns)
    budget = tree_line_budget(context.rows)

    selected_path = str(context.tree.get_selected().full_path)
    rows = [f"{theme.top_bar}{clip_ansi_line(selected_path, columns)}{theme.reset}", ""]

    lines = build_viewport(context.tree, budget, context.max_children)
    rows.extend(format_viewport_line(line, columns, theme) for line in lines)
    rows.extend(f"{theme.filler}{FILLER_TEXT}{theme.reset}" for _ in range(budget - len(lines)))

    status = context.status or DEFAULT_STATUS
    rows.append(f"{theme.status_bar}{clip_ansi_line(status, columns)}{theme.reset}")
    return rows


def compose_frame(rows: list[str]) -> str:
    """Join rows into a cursor-home frame that clears each row's tail."""
    out: list[str] = ["\033[H"]
    last = len(rows) - 1
    for row_idx, row in enumerate(rows):
        out.append(row)
        out.append("\033[K")
        if row_idx != last:
            out.append("\r\n")
    return "".join(out)


def render_context(context: RenderContext, fd: int | None = None) -> None:
    """Write one composed frame to ``fd`` (stdout by default)."""
    target = sys.stdout.fileno() if fd is None else fd
    frame = compose_frame(build_screen_rows(context))
    os.write(target, frame.encode("utf-8", errors="replace"))


__all__ = [
    "CHROME_ROWS",
    "DEFAULT_STATUS",
    "FILLER_TEXT",
    "RenderContext",
    "ViewportLine",
    "build_screen_rows",
    "build_viewport",
    "compose_frame",
    "format_viewport_line",
    "render_context",
    "tree_line_budget",
]
