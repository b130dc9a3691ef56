"""Budget-constrained tree viewport.

``build_viewport`` walks the arena depth-first (pre-order) and returns at most
``budget`` draw instructions while guaranteeing that the selected node's
line is among them whenever the selection is reachable from the root.

Three mechanisms keep the selection on screen:

- sibling windows: a directory shows at most ``max_children`` children, and
  on the selection path the window ends at (or just past) the child leading
  toward the selection;
- subtree pruning: before the selection is reached, a directory off the
  selection path only shows its descendants when its whole subtree fits in
  the lines not reserved for the path still ahead;
- path trimming: when the root-to-selection path alone exceeds the budget,
  rendering starts at the deepest ancestor that still fits.

The renderer keeps no state between calls.
"""

from __future__ import annotations

from dataclasses import dataclass

from ..file_tree_model import ROOT_INDEX, ArenaTree, TreeNode

MAX_VISIBLE_CHILDREN = 7
PADDING = "│  "
PADDING_MORE_UP = "▲  "
PADDING_MORE_DOWN = "▼  "


@dataclass(frozen=True)
class ViewportLine:
    """One emitted tree row."""

    index: int
    depth: int
    label: str
    is_dir: bool
    highlighted: bool = False
    more_above: bool = False
    more_below: bool = False

    @property
    def is_marker(self) -> bool:
        """Whether this row sits on a sibling-window boundary."""
        return self.more_above or self.more_below


def node_label(node: TreeNode) -> str:
    return f"{node.name}/" if node.is_dir else node.name


def indent_prefix(line: ViewportLine) -> str:
    """Connector tokens for ``line``; window markers replace the innermost one."""
    if line.depth <= 0:
        return ""
    if line.more_above:
        return PADDING * (line.depth - 1) + PADDING_MORE_UP
    if line.more_below:
        return PADDING * (line.depth - 1) + PADDING_MORE_DOWN
    return PADDING * line.depth


def sibling_window(count: int, focus: int | None, size: int) -> tuple[int, int]:
    """Return ``[start, end)`` of a window of ``size`` siblings ending at ``focus``."""
    size = max(1, min(size, count))
    start = 0 if focus is None else max(0, focus - size + 1)
    return start, min(count, start + size)


class _ViewportBuilder:
    def __init__(self, tree: ArenaTree, budget: int, max_children: int, path: list[int]) -> None:
        self.tree = tree
        self.remaining = budget
        self.max_children = max(1, max_children)
        self.path = path
        self.path_position = {index: position for position, index in enumerate(path)}
        self.reached_selected = False
        self.lines: list[ViewportLine] = []

    def visit(
        self,
        index: int,
        depth: int,
        reserve: int = 0,
        more_above: bool = False,
        more_below: bool = False,
    ) -> None:
        # ``reserve`` lines stay untouched for selection-path rows still ahead.
        if self.remaining <= reserve:
            return
        node = self.tree.get(index)
        is_selected = index == self.tree.selected
        if is_selected:
            self.reached_selected = True
        self.lines.append(
            ViewportLine(
                index=index,
                depth=depth,
                label=node_label(node),
                is_dir=node.is_dir,
                highlighted=is_selected,
                more_above=more_above,
                more_below=more_below,
            )
        )
        self.remaining -= 1
        if not node.children or self.remaining <= reserve:
            return

        if index in self.path_position and not is_selected:
            self._visit_path_children(index, depth)
            return
        # Inclusive size against rows left after this line: an exact fit is pruned too.
        if not self.reached_selected and self.tree.subtree_size(index) >= self.remaining - reserve:
            return
        self._visit_children(index, depth, reserve)

    def _visit_path_children(self, index: int, depth: int) -> None:
        children = self.tree.get(index).children
        focus_index = self.path[self.path_position[index] + 1]
        focus = children.index(focus_index)
        # Rows needed for the focus child and the rest of the path below it.
        owed = len(self.path) - self.path_position[focus_index]
        start, end = sibling_window(len(children), focus, self.max_children)
        spare = self.remaining - owed
        if focus - start > spare:
            start = focus - max(0, spare)
            end = min(len(children), start + self.max_children)
        has_more_above = start > 0
        has_more_below = end < len(children)
        for position in range(start, end):
            if self.remaining <= 0:
                break
            reserve = owed + (focus - position - 1) if position < focus else 0
            self.visit(
                children[position],
                depth + 1,
                reserve,
                more_above=has_more_above and position == start,
                more_below=has_more_below and position == end - 1,
            )

    def _visit_children(self, index: int, depth: int, reserve: int) -> None:
        children = self.tree.get(index).children
        start, end = sibling_window(len(children), None, self.max_children)
        has_more_below = end < len(children)
        for position in range(start, end):
            if self.remaining <= reserve:
                break
            self.visit(
                children[position],
                depth + 1,
                reserve,
                more_below=has_more_below and position == end - 1,
            )


def build_viewport(
    tree: ArenaTree,
    budget: int,
    max_children: int = MAX_VISIBLE_CHILDREN,
) -> list[ViewportLine]:
    """Return at most ``budget`` rows of ``tree`` keeping the selection visible."""
    if budget <= 0:
        return []
    path = tree.path_to(tree.selected) or []
    if len(path) > budget:
        path = path[-budget:]
    start = path[0] if path else ROOT_INDEX
    builder = _ViewportBuilder(tree, budget, max_children, path)
    builder.visit(start, tree.depth(start))
    return builder.lines


__all__ = [
    "MAX_VISIBLE_CHILDREN",
    "PADDING",
    "PADDING_MORE_UP",
    "PADDING_MORE_DOWN",
    "ViewportLine",
    "build_viewport",
    "indent_prefix",
    "node_label",
    "sibling_window",
]
