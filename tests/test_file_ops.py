"""Clipboard copy/move tests against a real temporary directory tree."""

from __future__ import annotations

import tempfile
import unittest
from pathlib import Path

from lazytree.file_ops import (
    COPY,
    MOVE,
    ClipboardEntry,
    FileOperationError,
    clipboard_from_selection,
    paste_target_index,
    sync_after_paste,
    transfer,
)
from lazytree.file_tree_model import ROOT_INDEX, ArenaTree


def _child(tree: ArenaTree, index: int, name: str) -> int:
    return next(child for child in tree.get(index).children if tree.get(child).name == name)


def _paste(tree: ArenaTree, entry: ClipboardEntry) -> Path:
    target_index = paste_target_index(tree)
    pasted = transfer(entry, tree.get(target_index).full_path)
    sync_after_paste(tree, entry, target_index, pasted)
    return pasted


class FileOpsTests(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.root = Path(self._tmp.name) / "proj"
        (self.root / "src").mkdir(parents=True)
        (self.root / "src" / "main.py").write_text("print()\n", encoding="utf-8")
        (self.root / "dest").mkdir()
        (self.root / "notes.txt").write_text("hello\n", encoding="utf-8")
        self.tree = ArenaTree.create(self.root)

    def tearDown(self) -> None:
        self._tmp.cleanup()

    def test_describe_reflects_mode(self) -> None:
        path = self.root / "notes.txt"
        self.assertEqual(ClipboardEntry(path, COPY, 1).describe(), f"Copying: {path}")
        self.assertEqual(ClipboardEntry(path, MOVE, 1).describe(), f"Moving: {path}")

    def test_paste_target_is_directory_or_parent_of_file(self) -> None:
        dest = _child(self.tree, ROOT_INDEX, "dest")
        self.tree.selected = dest
        self.assertEqual(paste_target_index(self.tree), dest)

        self.tree.selected = _child(self.tree, ROOT_INDEX, "notes.txt")
        self.assertEqual(paste_target_index(self.tree), ROOT_INDEX)

    def test_copy_file_into_directory_selects_new_node(self) -> None:
        self.tree.selected = _child(self.tree, ROOT_INDEX, "notes.txt")
        entry = clipboard_from_selection(self.tree, COPY)
        dest = _child(self.tree, ROOT_INDEX, "dest")
        self.tree.selected = dest

        pasted = _paste(self.tree, entry)

        self.assertEqual(pasted, self.root / "dest" / "notes.txt")
        self.assertEqual(pasted.read_text(encoding="utf-8"), "hello\n")
        self.assertTrue((self.root / "notes.txt").exists())
        self.assertEqual(self.tree.get_selected().full_path, pasted)
        self.assertEqual(self.tree.get_selected().parent, dest)

    def test_copy_directory_recursively(self) -> None:
        self.tree.selected = _child(self.tree, ROOT_INDEX, "src")
        entry = clipboard_from_selection(self.tree, COPY)
        self.tree.selected = _child(self.tree, ROOT_INDEX, "dest")

        pasted = _paste(self.tree, entry)

        self.assertTrue((pasted / "main.py").is_file())
        self.assertTrue(self.tree.get_selected().is_dir)

    def test_move_refreshes_source_parent(self) -> None:
        src = _child(self.tree, ROOT_INDEX, "src")
        self.tree.load_children(src)
        self.tree.selected = _child(self.tree, src, "main.py")
        entry = clipboard_from_selection(self.tree, MOVE)
        self.tree.selected = _child(self.tree, ROOT_INDEX, "dest")

        _paste(self.tree, entry)

        self.assertFalse((self.root / "src" / "main.py").exists())
        self.assertEqual(self.tree.get(src).children, [])
        self.assertEqual(self.tree.get_selected().full_path, self.root / "dest" / "main.py")

    def test_existing_target_is_refused(self) -> None:
        entry = ClipboardEntry(self.root / "notes.txt", COPY, 0)
        with self.assertRaisesRegex(FileOperationError, "Already exists"):
            transfer(entry, self.root)

    def test_missing_source_is_refused(self) -> None:
        entry = ClipboardEntry(self.root / "gone.txt", MOVE, 0)
        with self.assertRaisesRegex(FileOperationError, "no longer exists"):
            transfer(entry, self.root / "dest")

    def test_directory_into_itself_is_refused(self) -> None:
        entry = ClipboardEntry(self.root / "src", COPY, 0)
        with self.assertRaisesRegex(FileOperationError, "into itself"):
            transfer(entry, self.root / "src")


if __name__ == "__main__":
    unittest.main()
