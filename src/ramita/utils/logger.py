"""Minimal logging utilities for Ramita.

Provides a simple get_logger function that wraps the standard library logging.

Example:
    >>> from ramita.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Dropping stray close tag")
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "ramita." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("mymodule")
        >>> logger.name
        'ramita.mymodule'
    """
    if not (name == "ramita" or name.startswith("ramita.")):
        name = f"ramita.{name}"
    return logging.getLogger(name)
