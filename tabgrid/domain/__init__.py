"""Domain layer - column descriptors, cell values and sort types.

No UI or storage dependencies.
"""

from tabgrid.domain.columns import (
    CellType,
    CellValidator,
    CellValue,
    ColumnDescriptor,
    DisplayValueTransformer,
    coerce_columns,
)
from tabgrid.domain.sorting import SortDirection, SortState

__all__ = [
    "CellType",
    "CellValidator",
    "CellValue",
    "ColumnDescriptor",
    "DisplayValueTransformer",
    "SortDirection",
    "SortState",
    "coerce_columns",
]
