"""CLI argument and default-path behavior tests.

Verifies how ``lazytree.cli.main`` chooses the root directory and forwards
options to the runtime.
"""

from __future__ import annotations

import io
import os
import sys
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from lazytree import cli
from lazytree.file_tree_model import TreeIOError


class CliDefaultPathTests(unittest.TestCase):
    def test_main_defaults_to_current_working_directory_when_no_path_arg(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            previous_cwd = Path.cwd()
            try:
                os.chdir(root)
                with mock.patch.object(sys, "argv", ["lazytree"]), mock.patch("lazytree.cli.run_browser") as run_browser:
                    cli.main()
            finally:
                os.chdir(previous_cwd)

            run_browser.assert_called_once()
            tree = run_browser.call_args.args[0]
            self.assertEqual(tree.root.full_path, root)
            self.assertEqual(
                run_browser.call_args.kwargs,
                {"no_color": False, "theme_name": None, "print_only": False, "lines": None},
            )

    def test_main_uses_explicit_path_and_options(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            target = root / "target"
            target.mkdir()
            (target / "a.txt").write_text("", encoding="utf-8")
            argv = ["lazytree", str(target), "--print", "--lines", "10", "--no-color", "--theme", "ocean"]

            with mock.patch.object(sys, "argv", argv), mock.patch("lazytree.cli.run_browser") as run_browser:
                cli.main(default_path=root / "unused")

            tree = run_browser.call_args.args[0]
            self.assertEqual(tree.root.full_path, target)
            self.assertEqual([tree.get(child).name for child in tree.root.children], ["a.txt"])
            self.assertEqual(
                run_browser.call_args.kwargs,
                {"no_color": True, "theme_name": "ocean", "print_only": True, "lines": 10},
            )


class CliErrorTests(unittest.TestCase):
    def test_non_directory_root_exits(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            target = Path(tmp).resolve() / "file.txt"
            target.write_text("", encoding="utf-8")

            with mock.patch.object(sys, "argv", ["lazytree", str(target)]), mock.patch(
                "lazytree.cli.run_browser"
            ) as run_browser:
                with self.assertRaises(SystemExit) as caught:
                    cli.main()

        self.assertEqual(str(caught.exception), f"Not a directory: {target}")
        run_browser.assert_not_called()

    def test_unreadable_root_exits_before_runtime(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            error = TreeIOError(root, PermissionError(13, "Permission denied", str(root)))

            with mock.patch.object(sys, "argv", ["lazytree", str(root)]), mock.patch(
                "lazytree.cli.ArenaTree.create", side_effect=error
            ), mock.patch("lazytree.cli.run_browser") as run_browser:
                with self.assertRaises(SystemExit) as caught:
                    cli.main()

        self.assertEqual(str(caught.exception), f"Cannot read {root}: Permission denied")
        run_browser.assert_not_called()

    def test_non_positive_lines_is_rejected(self) -> None:
        with mock.patch.object(sys, "argv", ["lazytree", "--lines", "0"]), mock.patch(
            "sys.stderr", new_callable=io.StringIO
        ):
            with self.assertRaises(SystemExit) as caught:
                cli.main()

        self.assertEqual(caught.exception.code, 2)


if __name__ == "__main__":
    unittest.main()
