"""Loguru sink configuration shared by the CLI and the Streamlit app."""

from __future__ import annotations

import sys

from loguru import logger

_FORMAT = "<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | {name}:{line} - {message}"


def configure_logging(verbose: bool = False) -> int:
    """Replace loguru's default handler with a single stderr sink.

    Args:
        verbose: Log at DEBUG instead of WARNING.

    Returns:
        The id of the new sink.
    """
    logger.remove()
    return logger.add(sys.stderr, level="DEBUG" if verbose else "WARNING", format=_FORMAT)
