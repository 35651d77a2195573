"""Logging helpers for object_dumper.

The library only ever logs through the ``object_dumper`` logger and never
installs handlers on import; applications call :func:`configure_logging`.
"""
from __future__ import annotations

import logging
import sys
from typing import Optional, TextIO

_LOGGER_NAME = "object_dumper"
_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"

__all__ = [
    "get_logger",
    "configure_logging",
]


def get_logger(name: Optional[str] = None) -> logging.Logger:
    if name:
        return logging.getLogger(f"{_LOGGER_NAME}.{name}")
    return logging.getLogger(_LOGGER_NAME)


def configure_logging(verbosity: int = 0, stream: Optional[TextIO] = None) -> logging.Logger:
    logger = get_logger()
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:
        level = logging.DEBUG
    logger.setLevel(level)

    for h in list(logger.handlers):
        logger.removeHandler(h)

    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setFormatter(logging.Formatter(_FORMAT))
    logger.addHandler(handler)
    logger.propagate = False
    return logger
