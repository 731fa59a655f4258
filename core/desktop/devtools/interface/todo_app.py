#!/usr/bin/env python3
"""Process entry for the todo TUI: resolve the backing file, set up logging, run the app.

Reached through the `todo-tui` console script and the root `todo.py` loader.
Exits 0 on quit and 1 when the backing file cannot be read or written.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from application.ports import StorageError
from config import get_db_path, get_log_file, get_theme
from core.desktop.devtools.interface.tui_app import cmd_tui
from util.logging_setup import setup_logging

logger = logging.getLogger("todo_tui.cli")


def build_parser() -> argparse.ArgumentParser:
    """Build CLI argument parser."""
    parser = argparse.ArgumentParser(
        prog="todo-tui",
        description="Interactive terminal todo list backed by a CSV file.",
    )
    parser.add_argument(
        "path",
        nargs="?",
        default=None,
        help="Path to the tasks CSV file (default: db_path from the user config, else ./todo.csv)",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)
    args.path = Path(args.path).expanduser() if args.path else get_db_path()
    args.theme = get_theme()
    setup_logging(get_log_file())
    logger.info("Starting with %s", args.path)
    try:
        return cmd_tui(args)
    except StorageError as exc:
        logger.error("Unrecoverable storage error: %s", exc)
        reason = getattr(exc.cause, "strerror", None) or exc.cause
        print(f"error: cannot access {exc.path}: {reason}", file=sys.stderr)
        return 1


__all__ = ["build_parser", "main"]


if __name__ == "__main__":
    sys.exit(main())
