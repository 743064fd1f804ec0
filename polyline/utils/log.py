"""Logging setup for the polyline command line.

Library modules only create ``logging.getLogger(__name__)`` loggers and emit
debug records; handlers are installed here, once, by the entry point.
"""

from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_LOGGER_CONFIGURED = False


def setup_logging(level: int = logging.INFO) -> None:
    """Attach a console handler to the ``polyline`` logger (first call only)."""
    global _LOGGER_CONFIGURED
    if _LOGGER_CONFIGURED:
        logging.getLogger("polyline").setLevel(level)
        return

    logger = logging.getLogger("polyline")
    logger.setLevel(level)

    handler = logging.StreamHandler()
    handler.setLevel(logging.DEBUG)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))
    logger.addHandler(handler)

    _LOGGER_CONFIGURED = True


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
