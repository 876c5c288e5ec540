"""Logging utilities for Bitacora.

Wraps the standard library logging: loggers live under the "bitacora."
namespace, and a TRACE level sits below DEBUG for full token and model
dumps that are too noisy for everyday debugging.

Example:
    >>> import logging
    >>> from bitacora.utils.logger import TRACE, get_logger
    >>> logging.basicConfig(level=TRACE)
    >>> logger = get_logger(__name__)
    >>> logger.log(TRACE, "tokens: %r", [])
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

TRACE = 5
logging.addLevelName(TRACE, "TRACE")


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "bitacora." prefix.

    Example:
        >>> get_logger("mymodule").name
        'bitacora.mymodule'
    """
    if not (name == "bitacora" or name.startswith("bitacora.")):
        name = f"bitacora.{name}"
    return logging.getLogger(name)


def trace_items(logger: logging.Logger, label: str, items: Sequence[Any]) -> None:
    """Log each item on its own line at TRACE level, if enabled."""
    if not logger.isEnabledFor(TRACE):
        return
    logger.log(TRACE, "%s (%d):", label, len(items))
    for index, item in enumerate(items):
        logger.log(TRACE, "  [%d] %r", index, item)
