"""Loguru sink configuration shared by the API server and the CLI."""

from __future__ import annotations

import sys

from loguru import logger

from config import Settings

LOG_FORMAT = "<dim>{time:HH:mm:ss}</dim> | <level>{level: <8}</level> | {name} | {message}"


def configure_logging(settings: Settings, level: str | None = None) -> None:
    """Replace the default loguru sink with stderr (and optionally a file)."""
    level = level or settings.log_level
    logger.remove()
    logger.add(sys.stderr, level=level, format=LOG_FORMAT)

    if settings.log_file:
        logger.add(
            settings.log_file,
            level=level,
            rotation="10 MB",
            retention=5,
            encoding="utf-8",
        )
