"""Logging setup for commitment."""

import sys

from loguru import logger

LOG_FORMAT = "<level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan> - <level>{message}</level>"


def setup_logging(verbose: bool = False) -> None:
    """Route log records to stderr.

    Args:
        verbose: Log at DEBUG level instead of WARNING.
    """
    logger.remove()
    logger.add(
        sys.stderr,
        level="DEBUG" if verbose else "WARNING",
        format=LOG_FORMAT,
        colorize=None,
    )
