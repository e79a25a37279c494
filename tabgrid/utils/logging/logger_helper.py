"""Module: logger_helper.py

Date: 2026-10-19

Helpers for building named loggers with a consistent console handler.

Functions:
    get_logger(name): Returns a logger with a UTF-8 console handler attached
        to the package root logger.

DevOnlyFilter:
    A logging filter that hides dev-only debug messages from the console,
    while still allowing them to be stored in file logs.
"""

import logging
import sys

from tabgrid.config import LOG_CONSOLE_FORMAT, LOG_CONSOLE_LEVEL, LOG_TO_CONSOLE

ROOT_LOGGER_NAME = "tabgrid"


class DevOnlyFilter(logging.Filter):
    """Drop records logged with ``extra={"dev_only": True}``."""

    def filter(self, record: logging.LogRecord) -> bool:
        from tabgrid.config import app

        if app.SHOW_DEV_ONLY_IN_CONSOLE:
            return True
        return not getattr(record, "dev_only", False)


def _ensure_console_handler(root: logging.Logger) -> None:
    if not LOG_TO_CONSOLE or getattr(root, "_tabgrid_console", False):
        return

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(LOG_CONSOLE_LEVEL)
    handler.addFilter(DevOnlyFilter())
    handler.setFormatter(logging.Formatter(LOG_CONSOLE_FORMAT))

    reconfigure = getattr(handler.stream, "reconfigure", None)
    if reconfigure is not None:
        try:
            reconfigure(encoding="utf-8")
        except (OSError, ValueError):
            pass

    root.addHandler(handler)
    root._tabgrid_console = True  # type: ignore[attr-defined]


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a logger for ``name``.

    Handlers live on the ``tabgrid`` root logger only, so child loggers
    propagate to a single console handler.

    Args:
        name: Logger name, typically ``__name__`` of the calling module

    Returns:
        logging.Logger: Configured logger instance

    """
    root = logging.getLogger(ROOT_LOGGER_NAME)
    if root.level == logging.NOTSET:
        root.setLevel(logging.DEBUG)
    _ensure_console_handler(root)

    return logging.getLogger(name or ROOT_LOGGER_NAME)
