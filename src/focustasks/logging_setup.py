# src/focustasks/logging_setup.py

"""
Process-wide logging for the console app.

The console shows task-list activity; per-call storage chatter
(focustasks.storage, one line per SQLite write) only reaches the
log file unless it is a warning. Everything goes to <data_dir>/focustasks.log.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

LOG_FILE_NAME = "focustasks.log"

# Marker attribute so setup_logging() replaces only its own handlers.
_HANDLER_TAG = "_focustasks_handler"


def parse_level(name: str | int | None, default: int = logging.INFO) -> int:
    """Map a level name ("debug", "WARNING") or number to a logging level."""
    if isinstance(name, int):
        return name
    if not name:
        return default
    level = logging.getLevelName(str(name).strip().upper())
    return level if isinstance(level, int) else default


class _ConsoleNoiseFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        name = record.name
        if name == "focustasks.storage" or name.startswith("focustasks.storage."):
            return record.levelno >= logging.WARNING
        if name == "focustasks" or name.startswith("focustasks."):
            return True
        return record.levelno >= logging.ERROR


def _tagged(handler: logging.Handler) -> logging.Handler:
    setattr(handler, _HANDLER_TAG, True)
    return handler


def setup_logging(settings, *, file_level: int = logging.DEBUG) -> Path:
    """
    Install the console + file handlers described by ``settings``
    (``data_dir`` and ``log_level``). Returns the log file path.

    Safe to call again: handlers from a previous call are replaced,
    handlers installed by anything else are left alone.
    """
    log_dir = Path(settings.data_dir)
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / LOG_FILE_NAME

    root = logging.getLogger()
    root.setLevel(logging.DEBUG)
    for h in list(root.handlers):
        if getattr(h, _HANDLER_TAG, False):
            root.removeHandler(h)
            h.close()

    fmt = logging.Formatter(
        fmt="%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    console = _tagged(logging.StreamHandler(sys.stderr))
    console.setLevel(parse_level(getattr(settings, "log_level", None)))
    console.setFormatter(fmt)
    console.addFilter(_ConsoleNoiseFilter())
    root.addHandler(console)

    file_handler = _tagged(logging.FileHandler(str(log_file), encoding="utf-8"))
    file_handler.setLevel(file_level)
    file_handler.setFormatter(fmt)
    root.addHandler(file_handler)

    logging.captureWarnings(True)
    return log_file
