"""Filesystem listing for arena tree loads."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class DirectoryChild:
    """One immediate directory entry as observed on disk."""

    name: str
    path: Path
    is_dir: bool


def child_sort_key(child: DirectoryChild) -> tuple[bool, bytes]:
    """Directories first, then byte-wise (case-sensitive) name order."""
    return (not child.is_dir, os.fsencode(child.name))


def list_directory_children(directory: Path) -> tuple[list[DirectoryChild], OSError | None]:
    """List immediate children of ``directory`` in canonical tree order.

    Returns ``(children, scan_error)``. ``scan_error`` is set (and
    ``children`` empty) when the directory itself cannot be scanned. Entries
    whose type cannot be determined are listed as non-directories.
    """
    children: list[DirectoryChild] = []
    try:
        with os.scandir(directory) as entries:
            for child in entries:
                try:
                    is_dir = child.is_dir(follow_symlinks=False)
                except OSError:
                    is_dir = False
                children.append(
                    DirectoryChild(
                        name=child.name,
                        path=directory / child.name,
                        is_dir=is_dir,
                    )
                )
    except OSError as exc:
        return [], exc

    children.sort(key=child_sort_key)
    return children, None


__all__ = [
    "DirectoryChild",
    "child_sort_key",
    "list_directory_children",
]
