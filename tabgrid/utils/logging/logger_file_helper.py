"""Module: logger_file_helper.py

Date: 2026-10-19

Attach rotating file handlers to a logger, with optional filtering by
logger name.
"""

import logging
import os
from logging.handlers import RotatingFileHandler

from tabgrid.config import LOG_DATE_FORMAT, LOG_FILE_BACKUP_COUNT, LOG_FILE_MAX_BYTES, LOG_FORMAT


class NameFilter(logging.Filter):
    """Only pass records emitted by one logger name."""

    def __init__(self, logger_name: str) -> None:
        super().__init__()
        self.logger_name = logger_name

    def filter(self, record: logging.LogRecord) -> bool:
        return record.name == self.logger_name


def add_file_handler(
    logger: logging.Logger,
    log_path: str,
    level: int = logging.INFO,
    max_bytes: int = LOG_FILE_MAX_BYTES,
    backup_count: int = LOG_FILE_BACKUP_COUNT,
    filter_by_name: str | None = None,
) -> RotatingFileHandler:
    """Attach a rotating file handler to a logger.

    Args:
        logger: The logger to attach the handler to.
        log_path: Path to the log file.
        level: Logging level for this file handler (e.g., logging.ERROR).
        max_bytes: Maximum file size before rotating.
        backup_count: Number of backup files to keep.
        filter_by_name: Only log messages from loggers with this name.

    Returns:
        The handler that was attached.

    """
    directory = os.path.dirname(log_path)
    if directory:
        os.makedirs(directory, exist_ok=True)

    file_handler = RotatingFileHandler(
        log_path, maxBytes=max_bytes, backupCount=backup_count, encoding="utf-8"
    )
    file_handler.setLevel(level)
    file_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT))

    if filter_by_name:
        file_handler.addFilter(NameFilter(filter_by_name))

    logger.addHandler(file_handler)
    return file_handler
