"""Loguru sink configuration for the CLI."""

import sys

from loguru import logger

LOG_FORMAT = "<level>{level: <8}</level> | {name}:{function} - {message}"


def configure_logging(level: str = "WARNING") -> None:
    """Replace loguru's default sink with a single stderr sink.

    Args:
        level: Minimum level name to emit (e.g. "DEBUG", "INFO").
    """
    logger.remove()
    logger.add(sys.stderr, level=level, format=LOG_FORMAT)
