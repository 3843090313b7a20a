"""Opt-in diagnostic logging.

The terminal belongs to the UI while a session runs, so log records only go
to a file. Without a configured file the package logger gets a NullHandler.
"""

from __future__ import annotations

import logging
from pathlib import Path

PACKAGE_LOGGER = "jqlive"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(log_file: Path | None) -> logging.Logger:
    """Attach a file handler (or a NullHandler) to the package logger."""
    logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.propagate = False

    if log_file is None:
        logger.addHandler(logging.NullHandler())
        logger.setLevel(logging.WARNING)
        return logger

    log_file.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.FileHandler(log_file, encoding="utf-8")
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)
    return logger
