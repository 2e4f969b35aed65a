"""Logging setup — every record goes to stderr, stdout carries the protocol."""

from __future__ import annotations

import logging
import sys

LOGGER_NAME = "mcp_gitlab"
LOG_FORMAT = "[%(levelname)s] %(message)s"

_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "warning": logging.WARNING,
    "error": logging.ERROR,
}


def resolve_level(name: str) -> int:
    """Map a level name to a :mod:`logging` level, defaulting to ``INFO``."""
    return _LEVELS.get(name.strip().lower(), logging.INFO)


def configure_logging(level: str = "info") -> logging.Logger:
    """Attach a single stderr handler to the package logger."""
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(resolve_level(level))
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    logger.propagate = False
    return logger
