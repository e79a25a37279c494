"""Module: tabgrid.config

Date: 2026-10-19

Configuration package for tabgrid.

This package organizes configuration into logical modules:
- app: Package info, logging
- columns: Column width defaults and resize tuning
- remote: Remote row loading

All settings are re-exported from this module:
    from tabgrid.config import MIN_COLUMN_WIDTH
"""

from tabgrid.config.app import *  # noqa: F401, F403
from tabgrid.config.columns import *  # noqa: F401, F403
from tabgrid.config.remote import *  # noqa: F401, F403
