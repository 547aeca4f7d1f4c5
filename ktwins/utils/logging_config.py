"""Logging setup for the TUI.

The terminal belongs to Textual, so records go to the Textual devtools
console and, optionally, to a file.
"""

from __future__ import annotations

import logging
from pathlib import Path

from textual.logging import TextualHandler

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def resolve_level(level: str) -> int:
    """Numeric level for ``level``; unknown names fall back to WARNING."""
    value = logging.getLevelName(level.strip().upper())
    return value if isinstance(value, int) else logging.WARNING


def configure_logging(level: str = "WARNING", log_file: str = "") -> logging.Logger:
    """Route ``ktwins`` loggers to Textual and an optional log file.

    Args:
        level: Logging level name.
        log_file: Path of a file to append records to; empty disables it.

    Returns:
        The configured package logger.
    """
    logger = logging.getLogger("ktwins")
    logger.setLevel(resolve_level(level))
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    logger.addHandler(TextualHandler())
    if log_file:
        path = Path(log_file).expanduser()
        path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(path, encoding="utf-8")
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(file_handler)
    logger.propagate = False
    return logger
