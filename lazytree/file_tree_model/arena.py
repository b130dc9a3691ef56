"""Arena-backed directory tree with lazy, merging child loads.

Every discovered node lives in ``ArenaTree.nodes`` and is addressed by its
integer index; parent/child links are index pairs. Nodes are appended and
never relocated, so an index stays valid for the lifetime of the tree.

Collapse is soft: the directory's ``children`` list is cleared and the node
is marked unloaded, but its former descendants stay allocated (unreachable
through tree links). Refresh merges a fresh listing into the existing child
list keyed by ``full_path`` so nested expansion state survives.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path

from .errors import InvariantViolation, NotADirectoryNode, TreeIOError
from .fs import DirectoryChild, list_directory_children
from .types import DirectoryNode, FileNode, TreeNode

logger = logging.getLogger(__name__)

ROOT_INDEX = 0

DirectoryLister = Callable[[Path], tuple[list[DirectoryChild], OSError | None]]


def _root_name(root_path: Path) -> str:
    return root_path.name or str(root_path)


class ArenaTree:
    """Flat node store plus the current selection index."""

    def __init__(self, root_path: Path, lister: DirectoryLister = list_directory_children) -> None:
        self.nodes: list[TreeNode] = [
            DirectoryNode(
                index=ROOT_INDEX,
                parent=None,
                full_path=root_path,
                name=_root_name(root_path),
            )
        ]
        self.selected = ROOT_INDEX
        self._list_children = lister

    @classmethod
    def create(cls, root_path: Path | str, lister: DirectoryLister = list_directory_children) -> ArenaTree:
        """Build a tree for ``root_path`` and eagerly load the root's children.

        Raises ``TreeIOError`` when the root cannot be listed.
        """
        tree = cls(Path(root_path), lister=lister)
        tree.load_children(ROOT_INDEX)
        return tree

    def __len__(self) -> int:
        return len(self.nodes)

    @property
    def root(self) -> DirectoryNode:
        return self._directory(ROOT_INDEX)

    def get(self, index: int) -> TreeNode:
        """Return node at ``index``; unknown indices are a contract violation."""
        if index < 0 or index >= len(self.nodes):
            raise InvariantViolation(f"no node at arena index {index}")
        return self.nodes[index]

    def get_selected(self) -> TreeNode:
        return self.get(self.selected)

    def _directory(self, index: int) -> DirectoryNode:
        node = self.get(index)
        if not isinstance(node, DirectoryNode):
            raise NotADirectoryNode(node.full_path)
        return node

    def _read(self, directory: DirectoryNode) -> list[DirectoryChild]:
        listing, scan_error = self._list_children(directory.full_path)
        if scan_error is not None:
            logger.warning("failed to list %s: %s", directory.full_path, scan_error)
            raise TreeIOError(directory.full_path, scan_error)
        return listing

    def _append(self, parent: int, child: DirectoryChild) -> int:
        index = len(self.nodes)
        node: TreeNode
        if child.is_dir:
            node = DirectoryNode(index=index, parent=parent, full_path=child.path, name=child.name)
        else:
            node = FileNode(index=index, parent=parent, full_path=child.path, name=child.name)
        self.nodes.append(node)
        return index

    def load_children(self, index: int) -> bool:
        """Populate children of directory ``index`` from disk.

        No-op (returns ``False``) when the directory is already loaded and
        non-empty. Loaded-but-empty directories are re-read.
        """
        directory = self._directory(index)
        if directory.loaded and directory.children:
            return False
        listing = self._read(directory)
        directory.children = [self._append(index, child) for child in listing]
        directory.loaded = True
        logger.debug("loaded %d entries from %s", len(listing), directory.full_path)
        return True

    def refresh(self, index: int) -> None:
        """Re-list directory ``index`` and merge with its current children.

        Existing children whose ``full_path`` (and kind) still appear are kept
        with their own load state and subtree; new entries become fresh
        unloaded nodes. Entries gone from disk drop out of ``children``.
        """
        directory = self._directory(index)
        listing = self._read(directory)
        existing = {self.nodes[child].full_path: child for child in directory.children}
        merged: list[int] = []
        reused = 0
        for child in listing:
            kept = existing.get(child.path)
            if kept is not None and self.nodes[kept].is_dir == child.is_dir:
                merged.append(kept)
                reused += 1
            else:
                merged.append(self._append(index, child))
        directory.children = merged
        directory.loaded = True
        logger.debug(
            "refreshed %s: %d entries, %d kept, %d new",
            directory.full_path,
            len(merged),
            reused,
            len(merged) - reused,
        )
        self.heal_selection()

    def collapse(self, index: int) -> None:
        """Soft-collapse directory ``index``: forget children, keep arena slots."""
        directory = self._directory(index)
        directory.children = []
        directory.loaded = False
        self.heal_selection()

    def _sibling(self, index: int, offset: int) -> int | None:
        node = self.get(index)
        if node.parent is None:
            return None
        siblings = self.get(node.parent).children
        try:
            position = siblings.index(index)
        except ValueError:
            return None
        target = position + offset
        if 0 <= target < len(siblings):
            return siblings[target]
        return None

    def previous_sibling(self, index: int) -> int | None:
        return self._sibling(index, -1)

    def next_sibling(self, index: int) -> int | None:
        return self._sibling(index, 1)

    def subtree_size(self, index: int) -> int:
        """Count nodes reachable from ``index`` through child links, inclusive."""
        count = 0
        stack = [index]
        while stack:
            node = self.get(stack.pop())
            count += 1
            stack.extend(node.children)
        return count

    def path_to(self, index: int) -> list[int] | None:
        """Return indices from root to ``index``, or ``None`` if unreachable.

        A node is reachable when every ancestor link is mirrored by the
        parent's current ``children`` list.
        """
        path = [index]
        node = self.get(index)
        while node.parent is not None:
            parent = self.get(node.parent)
            if node.index not in parent.children:
                return None
            path.append(parent.index)
            node = parent
        if node.index != ROOT_INDEX:
            return None
        path.reverse()
        return path

    def is_reachable(self, index: int) -> bool:
        return self.path_to(index) is not None

    def depth(self, index: int) -> int:
        depth = 0
        node = self.get(index)
        while node.parent is not None:
            depth += 1
            node = self.get(node.parent)
        return depth

    def heal_selection(self) -> bool:
        """Move ``selected`` to its nearest reachable ancestor if it was cut off."""
        if not 0 <= self.selected < len(self.nodes):
            logger.warning("selection index %s outside arena, reset to root", self.selected)
            self.selected = ROOT_INDEX
            return True
        if self.is_reachable(self.selected):
            return False
        previous = self.selected
        node = self.get(previous)
        while node.parent is not None and not self.is_reachable(node.index):
            node = self.get(node.parent)
        self.selected = node.index
        logger.warning(
            "selection %s no longer reachable, moved to %s",
            self.get(previous).full_path,
            node.full_path,
        )
        return True

    def find_child(self, index: int, full_path: Path) -> int | None:
        """Return the child of ``index`` whose path is ``full_path``, if any."""
        for child in self.get(index).children:
            if self.nodes[child].full_path == full_path:
                return child
        return None


__all__ = [
    "ROOT_INDEX",
    "ArenaTree",
    "DirectoryLister",
]
