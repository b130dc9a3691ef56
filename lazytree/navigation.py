"""Selection movement over an ``ArenaTree``.

Each public method is one discrete input command. Methods return ``True``
when tree or selection state changed (the caller marks the frame dirty) and
``False`` for no-ops. ``TreeIOError`` from a filesystem read propagates to
the caller with the tree left unchanged; commands aimed at a file are
silently ignored.
"""

from __future__ import annotations

from .file_tree_model import ArenaTree, DirectoryNode, NotADirectoryNode


class TreeNavigator:
    """Translate navigation commands into arena tree operations."""

    def __init__(self, tree: ArenaTree) -> None:
        self.tree = tree

    @property
    def selected(self) -> int:
        return self.tree.selected

    def _select(self, index: int | None) -> bool:
        if index is None or index == self.tree.selected:
            return False
        self.tree.selected = index
        return True

    def ascend(self) -> bool:
        """Move to the parent; no-op at the root."""
        return self._select(self.tree.get_selected().parent)

    def descend(self) -> bool:
        """Load the selected directory if needed and move to its first child."""
        node = self.tree.get_selected()
        if not isinstance(node, DirectoryNode):
            return False
        self.tree.load_children(node.index)
        if not node.children:
            return False
        return self._select(node.children[0])

    def step(self, delta: int) -> bool:
        """Move to the next (``delta > 0``) or previous sibling, without wrapping."""
        if delta > 0:
            target = self.tree.next_sibling(self.tree.selected)
        elif delta < 0:
            target = self.tree.previous_sibling(self.tree.selected)
        else:
            return False
        return self._select(target)

    def toggle(self) -> bool:
        """Expand a childless directory or collapse an expanded one."""
        node = self.tree.get_selected()
        if not isinstance(node, DirectoryNode):
            return False
        if node.children:
            self.tree.collapse(node.index)
            return True
        return self.tree.load_children(node.index)

    def refresh(self, index: int) -> bool:
        """Re-read directory ``index`` keeping surviving nodes and the selection."""
        try:
            self.tree.refresh(index)
        except NotADirectoryNode:
            return False
        return True


__all__ = ["TreeNavigator"]
