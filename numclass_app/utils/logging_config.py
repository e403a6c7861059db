"""Logging configuration helpers for the number classification game."""

from __future__ import annotations

import logging
from logging import Logger
import os

LOG_LEVEL_ENV_VAR = "NUMCLASS_LOG_LEVEL"


def configure_logging(level: str | int | None = None) -> Logger:
    """Configure basic logging for the application and return its logger.

    ``level`` wins over the ``NUMCLASS_LOG_LEVEL`` environment variable;
    unknown level names fall back to INFO.
    """
    if level is None:
        level = os.environ.get(LOG_LEVEL_ENV_VAR, "INFO")
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )
    return logging.getLogger("numclass_app")
