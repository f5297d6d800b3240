"""Utility modules for tsdecl.

Provides:
- logger: get_logger for logging
"""

from tsdecl.utils.logger import get_logger

__all__ = [
    "get_logger",
]
