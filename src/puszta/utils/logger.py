"""Minimal logging utilities for Puszta.

All Puszta loggers live under the "puszta" namespace so hosts can tune
them with one logging.getLogger("puszta") call.

Example:
    >>> from puszta.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Laying out %d tokens", 12)
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Return the stdlib logger for a Puszta module.

    Returns a standard library logger with the "puszta." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("engine")
        >>> logger.name
        'puszta.engine'
    """
    # Ensure puszta prefix for consistent namespacing
    if not (name == "puszta" or name.startswith("puszta.")):
        name = f"puszta.{name}"
    return logging.getLogger(name)
