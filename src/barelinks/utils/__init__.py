"""Utility modules for barelinks.

Provides:
- logger: get_logger for logging
"""

from barelinks.utils.logger import get_logger

__all__ = [
    "get_logger",
]
