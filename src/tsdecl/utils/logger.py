"""Minimal logging utilities for tsdecl.

Provides a simple get_logger function that wraps the standard library logging.

Example:
    >>> from tsdecl.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Rendering module")
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "tsdecl." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("mymodule")
        >>> logger.name
        'tsdecl.mymodule'
    """
    if not (name == "tsdecl" or name.startswith("tsdecl.")):
        name = f"tsdecl.{name}"
    return logging.getLogger(name)
