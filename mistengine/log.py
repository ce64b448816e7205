"""Engine-wide logger."""

from __future__ import annotations

import logging
import sys

LOGGER_NAME = "mist"
TRACE = 5

logging.addLevelName(TRACE, "TRACE")


class _ConsoleHandler(logging.StreamHandler):
    pass


def init() -> logging.Logger:
    """Configure the engine logger to print every level to standard output."""
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        if isinstance(handler, _ConsoleHandler):
            logger.removeHandler(handler)
    handler = _ConsoleHandler(sys.stdout)
    handler.setFormatter(
        logging.Formatter("[%(asctime)s] %(name)s: %(message)s", datefmt="%H:%M:%S")
    )
    logger.addHandler(handler)
    logger.setLevel(TRACE)
    logger.propagate = False
    return logger


def get_logger() -> logging.Logger:
    """Return the engine logger."""
    return logging.getLogger(LOGGER_NAME)