"""Logging configuration for the full-screen TUI.

The terminal belongs to the UI while it runs, so records go to a file only.
"""

from __future__ import annotations

import logging
from pathlib import Path

LOG_FORMAT = "%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"


def setup_logging(log_file: str | Path, level: int = logging.INFO) -> logging.Handler:
    """Route the ``todo_tui`` loggers to ``log_file``.

    Call once, before the TUI starts. If the log file cannot be opened the
    loggers get a NullHandler so nothing leaks onto the screen.
    """
    app_logger = logging.getLogger("todo_tui")
    app_logger.setLevel(level)
    app_logger.propagate = False
    for h in list(app_logger.handlers):
        app_logger.removeHandler(h)
        h.close()

    handler: logging.Handler
    try:
        path = Path(log_file).expanduser()
        path.parent.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(str(path), encoding="utf-8")
        handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATEFMT))
    except OSError:
        handler = logging.NullHandler()
    handler.setLevel(level)
    app_logger.addHandler(handler)
    return handler


__all__ = ["setup_logging"]
