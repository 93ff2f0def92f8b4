"""
Logger factory.

A single named logger with one stderr handler, installed on first use.
Logs go to stderr; stdout is reserved for CLI results.
"""

from __future__ import annotations

import logging
import sys

from .settings import LOG_LEVEL

LOGGER_NAME = "bom_merge"


def get_logger(name: str | None = None) -> logging.Logger:
    """Return the application logger (or a child of it when `name` is given)."""
    logger = logging.getLogger(LOGGER_NAME)
    if not logger.handlers:
        logger.setLevel(LOG_LEVEL)
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))
        logger.addHandler(handler)
        logger.propagate = False

    return logger.getChild(name) if name else logger
