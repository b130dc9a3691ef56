"""Arena node datatypes for filesystem-backed trees."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path


@dataclass
class FileNode:
    """Leaf entry: regular files, symlinks, sockets and anything non-directory."""

    index: int
    parent: int | None
    full_path: Path
    name: str
    kind = "file"

    @property
    def is_dir(self) -> bool:
        return False

    @property
    def children(self) -> tuple[int, ...]:
        return ()


@dataclass
class DirectoryNode:
    """Directory entry whose ``children`` are arena indices.

    ``loaded`` distinguishes "never listed" from "listed and empty".
    """

    index: int
    parent: int | None
    full_path: Path
    name: str
    children: list[int] = field(default_factory=list)
    loaded: bool = False
    kind = "dir"

    @property
    def is_dir(self) -> bool:
        return True


TreeNode = DirectoryNode | FileNode


__all__ = [
    "FileNode",
    "DirectoryNode",
    "TreeNode",
]
