"""Application bootstrap: wires tree, navigator, renderer and loop together."""

from __future__ import annotations

import logging
import os
import shutil
import sys

from ..file_tree_model import ArenaTree
from ..input import NormalKeyContext, NormalKeyHandler
from ..navigation import TreeNavigator
from ..render import RenderContext, build_screen_rows, render_context
from ..state import AppState
from ..terminal import TerminalController
from ..ui_theme import resolve_theme
from .config import BrowserConfig, load_browser_config
from .loop import RuntimeLoopCallbacks, RuntimeLoopTiming, run_main_loop

logger = logging.getLogger(__name__)


def _stream_is_tty(stream) -> bool:
    try:
        return os.isatty(stream.fileno())
    except (AttributeError, OSError, ValueError):
        return False


def render_snapshot(
    tree: ArenaTree,
    rows: int,
    columns: int,
    *,
    no_color: bool = False,
    theme_name: str | None = None,
    config: BrowserConfig | None = None,
) -> str:
    """Return one frame as newline-separated text, without cursor control."""
    settings = config if config is not None else load_browser_config()
    context = RenderContext(
        tree=tree,
        rows=rows,
        columns=columns,
        theme=resolve_theme(theme_name or settings.theme_name, no_color=no_color),
        max_children=settings.max_visible_children,
    )
    return "\n".join(build_screen_rows(context)) + "\n"


def run_browser(
    tree: ArenaTree,
    *,
    no_color: bool = False,
    theme_name: str | None = None,
    print_only: bool = False,
    lines: int | None = None,
    config: BrowserConfig | None = None,
) -> None:
    """Run the interactive browser on ``tree``, or print one frame.

    A single frame is printed instead when ``print_only`` is set or stdin is
    not a terminal.
    """
    settings = config if config is not None else load_browser_config()
    term = shutil.get_terminal_size((80, 24))
    if print_only or not _stream_is_tty(sys.stdin):
        sys.stdout.write(
            render_snapshot(
                tree,
                lines if lines is not None else term.lines,
                term.columns,
                no_color=no_color or not _stream_is_tty(sys.stdout),
                theme_name=theme_name,
                config=settings,
            )
        )
        return

    theme = resolve_theme(theme_name or settings.theme_name, no_color=no_color)
    state = AppState(tree=tree, rows=term.lines, columns=term.columns)
    navigator = TreeNavigator(tree)
    key_handler = NormalKeyHandler(
        NormalKeyContext(state=state, navigator=navigator, status_seconds=settings.status_seconds)
    )
    stdin_fd = sys.stdin.fileno()
    stdout_fd = sys.stdout.fileno()

    def render() -> None:
        render_context(
            RenderContext(
                tree=state.tree,
                rows=state.rows,
                columns=state.columns,
                status=state.status_text(),
                theme=theme,
                max_children=settings.max_visible_children,
            ),
            fd=stdout_fd,
        )

    logger.debug("starting browser at %s", tree.root.full_path)
    run_main_loop(
        state,
        TerminalController(stdin_fd, stdout_fd),
        stdin_fd,
        RuntimeLoopTiming(tick_ms=settings.tick_ms),
        RuntimeLoopCallbacks(render=render, handle_key=key_handler.handle),
    )
