"""Logging setup for the terminal app."""

from __future__ import annotations

import logging
import logging.handlers
from pathlib import Path

from deli.config import LOG_PATH

_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def configure_logging(log_path: str = LOG_PATH, level: int = logging.DEBUG) -> None:
    """
    Send all records to a rotating file.

    The Textual UI owns the terminal, so no console handler is installed.
    """
    log_file = Path(log_path)
    log_file.parent.mkdir(parents=True, exist_ok=True)

    root = logging.getLogger()
    root.setLevel(level)
    for handler in list(root.handlers):
        root.removeHandler(handler)

    file_handler = logging.handlers.RotatingFileHandler(
        filename=log_file,
        maxBytes=1024 * 1024,
        backupCount=3,
        encoding="utf-8",
    )
    file_handler.setFormatter(logging.Formatter(_LOG_FORMAT))
    file_handler.setLevel(level)
    root.addHandler(file_handler)
