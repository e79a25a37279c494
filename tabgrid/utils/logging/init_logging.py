"""Module: init_logging.py

Date: 2026-10-19

Single entry point for initializing file logging for an application that
hosts tabgrid grids.
"""

import logging
import os

from tabgrid.config import APP_NAME, LOG_DIR, LOG_FILE_LEVEL
from tabgrid.utils.logging.logger_file_helper import add_file_handler
from tabgrid.utils.logging.logger_helper import ROOT_LOGGER_NAME, get_logger


def init_logging(app_name: str = APP_NAME, log_dir: str = LOG_DIR) -> logging.Logger:
    """Add rotating activity and error log files under ``log_dir``.

    Args:
        app_name: Base name for log files (e.g., 'tabgrid').
        log_dir: Directory that receives the log files.

    Returns:
        logging.Logger: The package root logger.

    """
    root = get_logger(ROOT_LOGGER_NAME)

    add_file_handler(
        root,
        os.path.join(log_dir, f"{app_name}_activity.log"),
        level=logging.getLevelName(LOG_FILE_LEVEL),
    )
    add_file_handler(root, os.path.join(log_dir, f"{app_name}_errors.log"), level=logging.ERROR)

    return root
