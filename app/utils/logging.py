"""
Logging configuration.

Configures loguru logger for the estimator.
Sets up log rotation and retention policies.
"""

import sys

from loguru import logger

from app.config.settings import settings


def setup_logging(level: str | None = None, log_file: str | None = None) -> None:
    """
    Configure logger with stderr sink and optional file rotation.

    Args:
        level: Log level, defaults to settings.log_level
        log_file: Log file path, defaults to settings.log_file
    """
    level = level or settings.log_level
    log_file = log_file if log_file is not None else settings.log_file

    logger.remove()
    logger.add(
        sys.stderr,
        level=level,
        format="{time:HH:mm:ss} | {level} | {message}",
    )
    if log_file:
        logger.add(
            log_file,
            rotation="1 day",
            retention="7 days",
            level=level,
            encoding="utf-8",
        )

    logger.info("Starting ENKI rewards estimator...")
