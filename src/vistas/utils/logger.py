"""Logging helper for Vistas.

Example:
    >>> from vistas.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Rendering <p>")
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger namespaced under ``vistas``.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> get_logger("mymodule").name
        'vistas.mymodule'
    """
    if not (name == "vistas" or name.startswith("vistas.")):
        name = f"vistas.{name}"
    return logging.getLogger(name)
