"""Module: tabgrid.config.columns

Date: 2026-10-19

Column layout defaults and interactive resize tuning.
"""

# =====================================
# COLUMN WIDTH DEFAULTS
# =====================================

# Width used when a column descriptor carries no explicit width
DEFAULT_COLUMN_WIDTH = 150

# Minimum width used when a column descriptor carries no min_width
MIN_COLUMN_WIDTH = 50

# =====================================
# INTERACTIVE RESIZE
# =====================================

KEYBOARD_STEP_SMALL = 5  # px
KEYBOARD_STEP_LARGE = 20  # px

# Pointer-move events closer together than this are coalesced
RESIZE_THROTTLE_MS = 50
