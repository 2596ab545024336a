"""Logging helpers for autorange.

Modules log through `logging.getLogger(__name__)`; this module only adjusts
the package logger from settings so library users keep control of handlers.
"""

from __future__ import annotations

import logging
from typing import Optional

from autorange.config import Settings, load_settings

PACKAGE_LOGGER = "autorange"


def configure_logging(settings: Optional[Settings] = None) -> logging.Logger:
    """Apply `settings.app.log_level` to the package logger and return it."""
    settings = settings or load_settings()
    logger = logging.getLogger(PACKAGE_LOGGER)
    level = logging.getLevelName(settings.app.log_level.upper())
    if not isinstance(level, int):
        # Unknown level names come back as "Level <name>"
        level = logging.INFO
    logger.setLevel(level)
    return logger
