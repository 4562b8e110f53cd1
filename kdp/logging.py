"""Logging setup for the ``kdp`` package.

Records go to the ``kdp`` logger hierarchy. ``configure_logging`` installs a
basic handler only when the host application has not configured the root
logger, and otherwise just adjusts the ``kdp`` level so embedding CLIs keep
control of their own output. ``$KDP_LOG_LEVEL`` provides the default level.
"""
from __future__ import annotations

import logging
import os
from typing import Optional

from .config import KDP_LOG_LEVEL_ENV

LOGGER_NAME = "kdp"
LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def _parse_level(value: Optional[str]) -> Optional[int]:
    if not value:
        return None
    candidate = logging.getLevelName(value.strip().upper())
    return candidate if isinstance(candidate, int) else None


def _resolve_level(value: int | str | None) -> int:
    if isinstance(value, int):
        return value
    for raw in (value, os.environ.get(KDP_LOG_LEVEL_ENV)):
        level = _parse_level(raw)
        if level is not None:
            return level
    return logging.INFO


def configure_logging(level: int | str | None = None) -> None:
    resolved = _resolve_level(level)
    if not logging.getLogger().hasHandlers():
        logging.basicConfig(format=LOG_FORMAT)
    logging.getLogger(LOGGER_NAME).setLevel(resolved)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a logger under the ``kdp`` namespace, e.g. ``kdp.paths``."""

    if logging.getLogger(LOGGER_NAME).level == logging.NOTSET:
        configure_logging()
    if not name or name == LOGGER_NAME:
        return logging.getLogger(LOGGER_NAME)
    if not name.startswith(LOGGER_NAME + "."):
        name = f"{LOGGER_NAME}.{name}"
    return logging.getLogger(name)
