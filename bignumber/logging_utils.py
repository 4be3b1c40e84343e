"""Shared package logger for bignumber."""

from __future__ import annotations

import logging

BASE_LOGGER_NAME = "bignumber"

BASE_LOGGER = logging.getLogger(BASE_LOGGER_NAME)
BASE_LOGGER.addHandler(logging.NullHandler())


def get_logger(suffix: str | None = None) -> logging.Logger:
    """Return the package logger or one of its children."""

    if suffix is None:
        return BASE_LOGGER
    logger = BASE_LOGGER.getChild(suffix)
    logger.propagate = True
    return logger


def set_log_level(level: int) -> None:
    """Update the base logger level (and implicitly its children)."""

    BASE_LOGGER.setLevel(level)
