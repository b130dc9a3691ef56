"""Main interactive event loop for the terminal UI.

Alternates between redrawing (only when the state is dirty) and waiting up
to one tick for a key. Feature logic lives in the injected callbacks.
"""

from __future__ import annotations

import shutil
import time
from collections.abc import Callable
from dataclasses import dataclass

from ..input import read_key
from ..state import AppState
from ..terminal import TerminalController


@dataclass(frozen=True)
class RuntimeLoopTiming:
    """Timing constants controlling interactive loop behavior."""

    tick_ms: int


@dataclass(frozen=True)
class RuntimeLoopCallbacks:
    """Injected operations used by ``run_main_loop``."""

    render: Callable[[], None]
    handle_key: Callable[[str], bool]


def run_main_loop(
    state: AppState,
    terminal: TerminalController,
    stdin_fd: int,
    timing: RuntimeLoopTiming,
    callbacks: RuntimeLoopCallbacks,
) -> None:
    """Run the interactive loop until a key handler requests quit.

    Each iteration tracks terminal size, expires the status message, redraws
    when something changed, then polls for one key. The tick only bounds the
    poll; it never triggers filesystem work.
    """
    with terminal.raw_mode():
        while True:
            term = shutil.get_terminal_size((80, 24))
            if term.lines != state.rows or term.columns != state.columns:
                state.rows = term.lines
                state.columns = term.columns
                state.dirty = True

            if state.status_message and time.monotonic() >= state.status_message_until:
                state.status_message = ""
                state.status_message_until = 0.0
                state.dirty = True

            if state.dirty:
                callbacks.render()
                state.dirty = False

            key = read_key(stdin_fd, timeout_ms=timing.tick_ms)
            if not key:
                continue
            if callbacks.handle_key(key):
                break
