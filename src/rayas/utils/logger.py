"""Minimal logging utilities for Rayas.

Provides a simple get_logger function that wraps the standard library logging.

Example:
    >>> from rayas.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Registered language")
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "rayas." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("mymodule")
        >>> logger.name
        'rayas.mymodule'
    """
    if not (name == "rayas" or name.startswith("rayas.")):
        name = f"rayas.{name}"
    return logging.getLogger(name)
