"""Column layout: width engine and border drag sessions."""

from tabgrid.core.layout.border_drag import ColumnBorderDrag, nudge_border
from tabgrid.core.layout.column_layout_engine import ColumnLayoutEngine, ColumnTrack, distribute

__all__ = [
    "ColumnBorderDrag",
    "ColumnLayoutEngine",
    "ColumnTrack",
    "distribute",
    "nudge_border",
]
