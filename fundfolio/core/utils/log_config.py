"""
Logging configuration with loguru.
"""

import sys

from loguru import logger

from fundfolio.core.constants import DEFAULT_LOG_LEVEL

LOG_FORMAT = (
    "<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
)


def configure_logging(level: str = DEFAULT_LOG_LEVEL) -> int:
    """Reset loguru sinks to a single stderr sink at ``level``.

    Returns:
        Id of the added sink
    """
    logger.remove()
    return logger.add(sys.stderr, format=LOG_FORMAT, level=level.upper())
