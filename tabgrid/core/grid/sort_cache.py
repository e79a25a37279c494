"""Module: sort_cache.py

Date: 2026-10-19

Precomputed row orderings per sortable column.

The cache holds the default (insertion) order plus, for every sortable
column, an ascending and a descending list of row indices. The descending
list is always the exact reverse of the ascending one. A column's pair is
rebuilt as a whole from the default order whenever that column's data
changes; there is no partial invalidation state.
"""

from __future__ import annotations

import locale
import math
from collections.abc import Callable
from datetime import date, datetime
from typing import Any

from tabgrid.domain import CellType, CellValue, ColumnDescriptor, SortDirection
from tabgrid.utils.logging.logger_factory import get_cached_logger

logger = get_cached_logger(__name__)

# (row_index, field_name) -> cell value
CellGetter = Callable[[int, str], CellValue]

# Sort key ranks: absent values first, then unparseable numbers, then values
_RANK_ABSENT = 0
_RANK_UNPARSEABLE = 1
_RANK_VALUE = 2

_EPOCH = datetime(1970, 1, 1)


def is_absent(value: CellValue) -> bool:
    return value is None or value == ""


def _datetime_to_ms(value: datetime) -> float:
    if value.tzinfo is not None:
        return value.timestamp() * 1000
    return (value - _EPOCH).total_seconds() * 1000


def _to_number(value: Any) -> float | None:
    if isinstance(value, bool):
        return float(value)
    if isinstance(value, int):
        try:
            return float(value)
        except OverflowError:
            return math.inf if value > 0 else -math.inf
    if isinstance(value, float):
        return value
    if isinstance(value, datetime):
        return _datetime_to_ms(value)
    if isinstance(value, date):
        return _datetime_to_ms(datetime(value.year, value.month, value.day))
    text = str(value).strip()
    try:
        return float(text)
    except ValueError:
        pass
    try:
        return _datetime_to_ms(datetime.fromisoformat(text))
    except ValueError:
        return None


def numeric_sort_key(value: CellValue) -> tuple[int, float]:
    """Sort key for number and date cells."""
    if is_absent(value):
        return (_RANK_ABSENT, 0.0)
    number = _to_number(value)
    if number is None or number != number:  # NaN
        return (_RANK_UNPARSEABLE, 0.0)
    return (_RANK_VALUE, number)


def text_sort_key(value: CellValue) -> tuple[int, str, str]:
    """Sort key for text-like cells using the process locale's collation."""
    if is_absent(value):
        return (_RANK_ABSENT, "", "")
    text = str(value)
    # strxfrm rejects embedded NUL characters
    collated = locale.strxfrm(text.casefold().replace("\x00", ""))
    return (_RANK_VALUE, collated, text)


def sort_key_for(cell_type: CellType) -> Callable[[CellValue], tuple]:
    return numeric_sort_key if cell_type.is_numeric else text_sort_key


class SortCache:
    """Default order plus per-column ascending/descending orders."""

    def __init__(self) -> None:
        self._default: list[int] = []
        self._orders: dict[tuple[str, SortDirection], list[int]] = {}

    def clear(self) -> None:
        self._default = []
        self._orders.clear()

    @property
    def default_order(self) -> list[int]:
        return self._default

    def set_default_order(self, rows: list[int]) -> None:
        self._default = list(rows)

    def has_column(self, field_name: str) -> bool:
        return (field_name, SortDirection.ASC) in self._orders

    def cached_fields(self) -> list[str]:
        return [name for name, direction in self._orders if direction is SortDirection.ASC]

    def get(self, field_name: str | None, direction: SortDirection | None) -> list[int] | None:
        """Look up an order; the default order for a null field or direction.

        Returns:
            The cached list (not a copy) or None when nothing is cached

        """
        if field_name is None or direction is None:
            return self._default
        return self._orders.get((field_name, direction))

    def build(self, column: ColumnDescriptor, get_value: CellGetter) -> None:
        """(Re)build both orders for ``column`` from the default order.

        Python's sort is stable, so rows with equal keys keep their default
        order in the ascending list.
        """
        if not column.sortable:
            return

        key = sort_key_for(column.cell_type)
        field_name = column.field_name
        ascending = sorted(self._default, key=lambda row: key(get_value(row, field_name)))

        self._orders[(field_name, SortDirection.ASC)] = ascending
        self._orders[(field_name, SortDirection.DSC)] = ascending[::-1]

        logger.debug(
            "[SortCache] Built orders for '%s' (%d rows)",
            field_name,
            len(ascending),
            extra={"dev_only": True},
        )
