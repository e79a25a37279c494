"""Module: logger_factory.py

Date: 2026-10-19

Logger factory with caching.
Provides centralized logger management with thread-safe operations.
"""

import logging
import threading

from tabgrid.utils.logging.logger_helper import get_logger


class LoggerFactory:
    """Thread-safe logger factory with caching.

    Maintains a single logger instance per module name.
    """

    _loggers: dict[str, logging.Logger] = {}
    _lock = threading.Lock()
    _global_level: int | None = None

    @classmethod
    def get_logger(cls, name: str | None = None) -> logging.Logger:
        """Get or create a cached logger for the given name.

        Args:
            name: Logger name, typically __name__ from calling module

        Returns:
            logging.Logger: Cached logger instance

        """
        key = name or "tabgrid"
        with cls._lock:
            if key not in cls._loggers:
                logger = get_logger(key)
                if cls._global_level is not None:
                    logger.setLevel(cls._global_level)
                cls._loggers[key] = logger

            return cls._loggers[key]

    @classmethod
    def set_global_level(cls, level: int) -> None:
        """Set logging level for all cached loggers."""
        with cls._lock:
            cls._global_level = level
            for logger in cls._loggers.values():
                logger.setLevel(level)

    @classmethod
    def clear_cache(cls) -> None:
        """Clear all cached loggers."""
        with cls._lock:
            cls._loggers.clear()
            cls._global_level = None


def get_cached_logger(name: str | None = None) -> logging.Logger:
    """Convenience function for getting a cached logger."""
    return LoggerFactory.get_logger(name)
