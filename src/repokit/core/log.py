"""Logging setup for the repokit logger tree."""
from __future__ import annotations

import logging

from repokit.core.config import Settings

LOGGER_NAME = "repokit"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def configure_logging(settings: Settings) -> logging.Logger:
    """Set the repokit log level (DEBUG when settings.debug) and attach one stream handler."""
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG if settings.debug else settings.log_level)
    if not any(getattr(h, "_repokit", False) for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler._repokit = True  # type: ignore[attr-defined]
        logger.addHandler(handler)
    return logger
