"""Normal-mode keyboard handling."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from dataclasses import dataclass

from ..file_ops import (
    COPY,
    MOVE,
    FileOperationError,
    clipboard_from_selection,
    paste_target_index,
    sync_after_paste,
    transfer,
)
from ..file_tree_model import InvariantViolation, TreeIOError
from ..navigation import TreeNavigator
from ..state import AppState
from .key_registry import KeyBinding, KeyRegistry

logger = logging.getLogger(__name__)

STATUS_MESSAGE_SECONDS = 3.0


@dataclass(frozen=True)
class NormalKeyContext:
    """State and collaborators required for normal-mode key handling."""

    state: AppState
    navigator: TreeNavigator
    status_seconds: float = STATUS_MESSAGE_SECONDS
    clock: Callable[[], float] = time.monotonic


def show_status(context: NormalKeyContext, message: str) -> None:
    """Show ``message`` in the status bar until ``status_seconds`` elapse."""
    state = context.state
    state.status_message = message
    state.status_message_until = context.clock() + context.status_seconds
    state.dirty = True


def handle_normal_key(key: str, context: NormalKeyContext) -> bool:
    """Handle one key and return ``True`` when the app should quit."""
    state = context.state
    navigator = context.navigator

    def tree_command(command: Callable[[], bool]) -> Callable[[], bool]:
        def action() -> bool:
            try:
                changed = command()
            except TreeIOError as exc:
                show_status(context, str(exc))
                return False
            except InvariantViolation:
                if __debug__:
                    raise
                logger.exception("tree invariant violated, healing selection")
                state.tree.heal_selection()
                changed = True
            if changed:
                state.dirty = True
            return False

        return action

    def arm_clipboard(mode: str) -> Callable[[], bool]:
        def action() -> bool:
            state.clipboard = clipboard_from_selection(state.tree, mode)
            state.status_message = ""
            state.dirty = True
            return False

        return action

    def paste_action() -> bool:
        entry = state.clipboard
        if entry is None:
            show_status(context, "Nothing to paste")
            return False
        target_index = paste_target_index(state.tree)
        try:
            pasted = transfer(entry, state.tree.get(target_index).full_path)
        except FileOperationError as exc:
            show_status(context, str(exc))
            return False
        except OSError as exc:
            logger.warning("%s of %s failed: %s", entry.mode, entry.path, exc)
            show_status(context, f"Failed to {entry.mode} {entry.path}: {exc.strerror or exc}")
            return False
        state.clipboard = None
        try:
            sync_after_paste(state.tree, entry, target_index, pasted)
        except TreeIOError as exc:
            show_status(context, str(exc))
            return False
        verb = "Moved" if entry.mode == MOVE else "Copied"
        show_status(context, f"{verb}: {entry.path} -> {pasted}")
        return False

    def quit_action() -> bool:
        return True

    registry = KeyRegistry(
        KeyBinding(("h", "LEFT"), tree_command(navigator.ascend)),
        KeyBinding(("l", "RIGHT"), tree_command(navigator.descend)),
        KeyBinding(("j", "DOWN"), tree_command(lambda: navigator.step(1))),
        KeyBinding(("k", "UP"), tree_command(lambda: navigator.step(-1))),
        KeyBinding(("ENTER",), tree_command(navigator.toggle)),
        KeyBinding(("y",), arm_clipboard(COPY)),
        KeyBinding(("d",), arm_clipboard(MOVE)),
        KeyBinding(("p",), paste_action),
        KeyBinding(("q", "ESC"), quit_action),
    )
    return bool(registry.dispatch(key))


class NormalKeyHandler:
    """Normal-mode handler with bound runtime dependencies."""

    def __init__(self, context: NormalKeyContext) -> None:
        self.context = context

    def handle(self, key: str) -> bool:
        return handle_normal_key(key, self.context)
