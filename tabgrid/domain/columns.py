"""Module: columns.py

Date: 2026-10-19

Domain types describing grid columns and cell values.

Pure domain layer - no UI dependencies.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Union

# Date cells hold milliseconds since the epoch or an ISO 8601 string
CellValue = Union[str, bool, int, float, None]

CellValidator = Callable[[str], bool]
DisplayValueTransformer = Callable[[str], str]


class CellType(str, Enum):
    """Kind of data a column holds; drives comparison and editing."""

    DATE = "date"
    TEXT = "text"
    NUMBER = "number"
    SELECT = "select"
    CHECKBOX = "checkbox"

    @property
    def is_numeric(self) -> bool:
        return self in (CellType.DATE, CellType.NUMBER)


# Wire (camelCase) keys accepted by ColumnDescriptor.from_mapping
_WIRE_KEYS = {
    "fieldName": "field_name",
    "displayName": "display_name",
    "cellType": "cell_type",
    "isEditable": "editable",
    "isSearchable": "searchable",
    "isSortable": "sortable",
    "selectsRow": "selects_row",
    "minWidth": "min_width",
    "maxWidth": "max_width",
    "flexWeight": "flex",
    "cellValidator": "cell_validator",
    "displayValueTransformer": "display_value_transformer",
}


@dataclass(frozen=True)
class ColumnDescriptor:
    """Immutable description of one grid column.

    ``field_name`` is the unique key of the column across a column set.
    ``width``/``min_width``/``max_width``/``flex`` are only read by the
    column layout engine; the tabular store ignores them.
    """

    field_name: str
    display_name: str = ""
    cell_type: CellType = CellType.TEXT
    editable: bool = False
    searchable: bool = False
    sortable: bool = False
    selects_row: bool = False
    width: int | None = None
    min_width: int | None = None
    max_width: int | None = None
    flex: float = 0
    cell_validator: CellValidator | None = field(default=None, compare=False)
    display_value_transformer: DisplayValueTransformer | None = field(
        default=None, compare=False
    )

    def __post_init__(self) -> None:
        if not isinstance(self.cell_type, CellType):
            object.__setattr__(self, "cell_type", CellType(self.cell_type))
        if not self.display_name:
            object.__setattr__(self, "display_name", self.field_name)

    @property
    def has_explicit_width(self) -> bool:
        return bool(self.width and self.width > 0)

    @property
    def is_checkable(self) -> bool:
        return self.selects_row or self.cell_type is CellType.CHECKBOX

    def validate(self, text: str) -> bool:
        """Run the column's validator; columns without one accept anything."""
        if self.cell_validator is None:
            return True
        return bool(self.cell_validator(text))

    def display_text(self, value: CellValue) -> str:
        text = "" if value is None else str(value)
        if self.display_value_transformer is not None:
            return self.display_value_transformer(text)
        return text

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> ColumnDescriptor:
        """Build a descriptor from a plain mapping.

        Both snake_case attribute names and the camelCase wire form
        (``fieldName``, ``isSortable``, ...) are accepted. Unknown keys are
        ignored.
        """
        known = set(cls.__dataclass_fields__)
        kwargs: dict[str, Any] = {}
        for key, value in data.items():
            name = _WIRE_KEYS.get(key, key)
            if name in known:
                kwargs[name] = value
        return cls(**kwargs)


def coerce_columns(columns: Any) -> list[ColumnDescriptor]:
    """Accept descriptors or mappings and return a list of descriptors."""
    return [
        col if isinstance(col, ColumnDescriptor) else ColumnDescriptor.from_mapping(col)
        for col in columns
    ]
