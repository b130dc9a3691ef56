"""Clipboard copy/move of tree entries.

``y``/``d`` arm the clipboard with the selected node; ``p`` copies or moves
it into the paste target with ``transfer``, then ``sync_after_paste``
refreshes the affected directories so the rest of the tree keeps its
expansion state.
"""

from __future__ import annotations

import logging
import shutil
from dataclasses import dataclass
from pathlib import Path

from .file_tree_model import ArenaTree, DirectoryNode

logger = logging.getLogger(__name__)

COPY = "copy"
MOVE = "move"


class FileOperationError(Exception):
    """A paste was refused before touching the filesystem."""


@dataclass(frozen=True)
class ClipboardEntry:
    path: Path
    mode: str
    source_index: int

    def describe(self) -> str:
        verb = "Moving" if self.mode == MOVE else "Copying"
        return f"{verb}: {self.path}"


def clipboard_from_selection(tree: ArenaTree, mode: str) -> ClipboardEntry:
    node = tree.get_selected()
    return ClipboardEntry(path=node.full_path, mode=mode, source_index=node.index)


def paste_target_index(tree: ArenaTree) -> int:
    """Selected directory, or the selected file's parent directory."""
    node = tree.get_selected()
    if isinstance(node, DirectoryNode) or node.parent is None:
        return node.index
    return node.parent


def _is_within(path: Path, ancestor: Path) -> bool:
    try:
        return path.resolve().is_relative_to(ancestor.resolve())
    except OSError:
        return False


def transfer(entry: ClipboardEntry, destination_dir: Path) -> Path:
    """Copy or move ``entry.path`` into ``destination_dir``; return the new path.

    Raises ``FileOperationError`` for refused pastes and ``OSError`` for
    filesystem failures.
    """
    source = entry.path
    target = destination_dir / source.name
    if not source.exists() and not source.is_symlink():
        raise FileOperationError(f"Source no longer exists: {source}")
    if target.exists() or target.is_symlink():
        raise FileOperationError(f"Already exists: {target}")
    if source.is_dir() and not source.is_symlink() and _is_within(destination_dir, source):
        raise FileOperationError(f"Cannot paste {source} into itself")

    if entry.mode == MOVE:
        shutil.move(str(source), str(target))
    elif source.is_dir() and not source.is_symlink():
        shutil.copytree(source, target, symlinks=True)
    else:
        shutil.copy2(source, target, follow_symlinks=False)
    logger.info("%s %s -> %s", entry.mode, source, target)
    return target


def sync_after_paste(tree: ArenaTree, entry: ClipboardEntry, target_index: int, pasted: Path) -> None:
    """Resynchronize the tree after ``entry`` landed at ``pasted``.

    The destination directory is refreshed (loading it if needed); for moves
    the source's parent directory is refreshed too when still reachable.
    The pasted node becomes the selection. Raises ``TreeIOError`` when a
    refresh cannot list its directory.
    """
    tree.refresh(target_index)
    if entry.mode == MOVE:
        source = tree.get(entry.source_index)
        if (
            source.full_path == entry.path
            and source.parent is not None
            and source.parent != target_index
            and tree.is_reachable(source.parent)
        ):
            tree.refresh(source.parent)

    pasted_index = tree.find_child(target_index, pasted)
    if pasted_index is not None:
        tree.selected = pasted_index


__all__ = [
    "COPY",
    "MOVE",
    "ClipboardEntry",
    "FileOperationError",
    "clipboard_from_selection",
    "paste_target_index",
    "sync_after_paste",
    "transfer",
]
