"""Utility modules for prettytags.

Provides:
- logger: get_logger for logging
"""

from prettytags.utils.logger import get_logger

__all__ = [
    "get_logger",
]
