"""Mutable runtime state owned by the interactive loop."""

from __future__ import annotations

from dataclasses import dataclass

from .file_ops import ClipboardEntry
from .file_tree_model import ArenaTree
from .render import DEFAULT_STATUS


@dataclass
class AppState:
    tree: ArenaTree
    rows: int = 24
    columns: int = 80
    dirty: bool = True
    status_message: str = ""
    status_message_until: float = 0.0
    clipboard: ClipboardEntry | None = None

    def status_text(self) -> str:
        """Transient message first, then the armed clipboard, then the idle marker."""
        if self.status_message:
            return self.status_message
        if self.clipboard is not None:
            return self.clipboard.describe()
        return DEFAULT_STATUS
