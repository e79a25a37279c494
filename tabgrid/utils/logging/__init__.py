"""Logging utilities package.

Logging setup, factory, and helper functions.
"""

from tabgrid.utils.logging.init_logging import init_logging
from tabgrid.utils.logging.logger_factory import get_cached_logger

__all__ = [
    "get_cached_logger",
    "init_logging",
]
