"""Error taxonomy for arena tree operations."""

from __future__ import annotations

from pathlib import Path


class TreeError(Exception):
    """Base class for tree-store failures."""


class TreeIOError(TreeError):
    """A directory could not be listed; the tree is left unchanged."""

    def __init__(self, path: Path, cause: OSError) -> None:
        super().__init__(f"Cannot read {path}: {cause.strerror or cause}")
        self.path = path
        self.cause = cause


class NotADirectoryNode(TreeError):
    """Load/collapse/refresh was requested on a file node."""

    def __init__(self, path: Path) -> None:
        super().__init__(f"Not a directory: {path}")
        self.path = path


class InvariantViolation(TreeError, LookupError):
    """An index that does not exist in the arena was dereferenced."""


__all__ = [
    "TreeError",
    "TreeIOError",
    "NotADirectoryNode",
    "InvariantViolation",
]
