"""Command-line front door for lazytree.

Parses CLI options, loads the root directory and hands the tree to the
interactive runtime. An unreadable root aborts before the terminal is touched.
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from .file_tree_model import ArenaTree, TreeIOError
from .runtime import run_browser
from .ui_theme import available_theme_names

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def _positive_int(value: str) -> int:
    """argparse type for positive integer values."""
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}") from exc
    if parsed <= 0:
        raise argparse.ArgumentTypeError("value must be >= 1")
    return parsed


def configure_logging(log_file: str | None) -> None:
    """Send debug logs to ``log_file``; the TUI owns stdout/stderr otherwise."""
    if not log_file:
        return
    logging.basicConfig(
        filename=log_file,
        level=logging.DEBUG,
        format=LOG_FORMAT,
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def main(default_path: Path | None = None) -> None:
    """Parse CLI arguments and launch lazytree on a directory.

    ``default_path`` is primarily for tests; when omitted the current working
    directory is used.
    """
    parser = argparse.ArgumentParser(description="Browse a directory tree with hjkl in the terminal.")
    parser.add_argument("path", nargs="?", default=None, help="Root directory. Defaults to current directory.")
    parser.add_argument(
        "--theme",
        default=None,
        help=f"UI theme name ({', '.join(available_theme_names())}).",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable color output.")
    parser.add_argument("--print", dest="print_only", action="store_true", help="Print one frame and exit.")
    parser.add_argument(
        "--lines",
        type=_positive_int,
        default=None,
        help="Frame height for --print output (default: terminal height).",
    )
    parser.add_argument("--log-file", default=None, help="Write debug logs to this file.")
    args = parser.parse_args()

    configure_logging(args.log_file)

    if default_path is None:
        default_path = Path.cwd()
    root = Path(args.path) if args.path is not None else default_path
    root = root.expanduser().resolve()
    if not root.is_dir():
        raise SystemExit(f"Not a directory: {root}")

    try:
        tree = ArenaTree.create(root)
    except TreeIOError as exc:
        raise SystemExit(str(exc)) from exc

    run_browser(
        tree,
        no_color=args.no_color,
        theme_name=args.theme,
        print_only=args.print_only,
        lines=args.lines,
    )


if __name__ == "__main__":
    main()
