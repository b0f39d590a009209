"""Minimal logging utilities for barelinks.

Provides a simple get_logger function that wraps the standard library logging.

Example:
    >>> from barelinks.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Scanning paragraph")
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "barelinks." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("scanner")
        >>> logger.name
        'barelinks.scanner'
    """
    if not (name == "barelinks" or name.startswith("barelinks.")):
        name = f"barelinks.{name}"
    return logging.getLogger(name)
