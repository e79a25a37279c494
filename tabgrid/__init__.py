"""tabgrid - in-memory tabular data engine and column layout for grid widgets.

The headless API lives in tabgrid.core (TabularStore, ColumnLayoutEngine)
and tabgrid.app (GridState, GridRegistry). The Qt adapter in
tabgrid.models is imported on demand so headless hosts do not need PyQt5.
"""

from tabgrid.app import GridEngines, GridRegistry, GridState
from tabgrid.config import APP_VERSION as __version__
from tabgrid.core.grid import TabularStore
from tabgrid.core.layout import ColumnBorderDrag, ColumnLayoutEngine
from tabgrid.domain import CellType, ColumnDescriptor, SortDirection, SortState
from tabgrid.infra import RemoteSource

__all__ = [
    "CellType",
    "ColumnBorderDrag",
    "ColumnDescriptor",
    "ColumnLayoutEngine",
    "GridEngines",
    "GridRegistry",
    "GridState",
    "RemoteSource",
    "SortDirection",
    "SortState",
    "TabularStore",
    "__version__",
]
