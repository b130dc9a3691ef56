"""Domain model for the arena-backed filesystem tree.

This package contains non-UI tree primitives:
- file/directory node datatypes addressed by arena index
- filesystem listing in canonical order
- the arena store with lazy loads, merging refresh and soft collapse
- the tree error taxonomy
"""

from __future__ import annotations

from .arena import ROOT_INDEX, ArenaTree, DirectoryLister
from .errors import InvariantViolation, NotADirectoryNode, TreeError, TreeIOError
from .fs import DirectoryChild, child_sort_key, list_directory_children
from .types import DirectoryNode, FileNode, TreeNode

__all__ = [
    "ROOT_INDEX",
    "ArenaTree",
    "DirectoryLister",
    "DirectoryChild",
    "DirectoryNode",
    "FileNode",
    "TreeNode",
    "TreeError",
    "TreeIOError",
    "NotADirectoryNode",
    "InvariantViolation",
    "child_sort_key",
    "list_directory_children",
]
