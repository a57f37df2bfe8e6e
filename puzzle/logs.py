"""Logging configuration for the command line front end.

Console output goes through :class:`rich.logging.RichHandler`.  The detailed
search trace (every placement and undo) is only useful when written to a
file, so it is enabled separately via :func:`configure_logging`'s
``debug_log`` argument.  The default location is the per-user log directory
reported by :func:`platformdirs.user_log_dir`.
"""

from __future__ import annotations

import logging
from pathlib import Path

from platformdirs import user_log_dir
from rich.console import Console
from rich.logging import RichHandler

APP_NAME = "hexchain"
LOG_FILENAME = "solver.log"
FILE_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

_installed: list[logging.Handler] = []


def default_log_path() -> Path:
    return Path(user_log_dir(APP_NAME, appauthor=False)) / LOG_FILENAME


def configure_logging(
    level: int = logging.WARNING,
    *,
    debug_log: Path | None = None,
    console: Console | None = None,
) -> Path | None:
    """Install handlers on the root logger.

    Args:
        level: Threshold for messages shown on the console.
        debug_log: When given, every DEBUG record is also written to this file
            (truncated on each run).
        console: Console used by the rich handler; defaults to stderr.

    Returns:
        The resolved debug log path, or None when file logging is off.
    """
    root = logging.getLogger()
    # Only handlers from an earlier call are replaced.
    while _installed:
        handler = _installed.pop()
        root.removeHandler(handler)
        handler.close()

    console_handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
    )
    console_handler.setLevel(level)
    root.addHandler(console_handler)
    _installed.append(console_handler)
    root.setLevel(level)

    if debug_log is None:
        return None

    debug_log.parent.mkdir(parents=True, exist_ok=True)
    file_handler = logging.FileHandler(debug_log, mode="w", encoding="utf-8")
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(logging.Formatter(FILE_FORMAT))
    root.addHandler(file_handler)
    _installed.append(file_handler)
    root.setLevel(logging.DEBUG)
    return debug_log


__all__ = ["APP_NAME", "configure_logging", "default_log_path"]
