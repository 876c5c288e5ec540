"""Utility modules for Bitacora.

Provides:
- logger: get_logger, the TRACE level and trace_items for logging
"""

from bitacora.utils.logger import TRACE, get_logger, trace_items

__all__ = ["TRACE", "get_logger", "trace_items"]
