"""Module: tabular_store.py

Date: 2026-10-19

TabularStore - in-memory data engine behind a grid widget.

Owns the cell map, the per-row search index, the per-column sort cache,
the visible-row sequence and row selection. Every runtime operation
(edit, search, sort, select) recomputes only the visible-row sequence and
never rebuilds a cache unrelated to the touched column.

Lookups on unknown rows or columns degrade to None or a no-op; nothing in
this module raises for bad keys.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from typing import Any

from tabgrid.core.grid.search_index import SearchIndex, normalize_query
from tabgrid.core.grid.sort_cache import SortCache
from tabgrid.domain import CellValue, ColumnDescriptor, SortDirection, SortState, coerce_columns
from tabgrid.utils.logging.logger_factory import get_cached_logger

logger = get_cached_logger(__name__)


class TabularStore:
    """Cells, search index, sort cache, visible rows and selection of one grid.

    The row-index space is fixed by ``init``: rows are numbered in insertion
    order and the numbers are never reused or compacted.
    """

    def __init__(self) -> None:
        self._columns: list[ColumnDescriptor] = []
        self._columns_by_field: dict[str, ColumnDescriptor] = {}
        self._cells: dict[tuple[int, str], CellValue] = {}
        self._row_count = 0

        self._search_index = SearchIndex()
        self._sort_cache = SortCache()

        self._rows: list[int] = []
        self._search_query = ""
        self._sort_field: str | None = None
        self._sort_direction: SortDirection | None = None
        self._selected: dict[int, bool] = {}

    # =====================================
    # Loading
    # =====================================

    def init(
        self,
        columns: Iterable[ColumnDescriptor | Mapping[str, Any]],
        rows: Sequence[Mapping[str, Any]],
    ) -> None:
        """Load a dataset, replacing anything loaded before.

        Populates the cell map, one search entry per row, the default order
        and both orders of every sortable column in a single pass over the
        data. Search query and sort key are reset. A row starts out selected
        when its value in the first ``selects_row`` column is truthy; without
        such a column nothing is selected.
        """
        self._columns = coerce_columns(columns)
        self._columns_by_field = {col.field_name: col for col in self._columns}
        self._cells = {}
        self._search_index.clear()
        self._sort_cache.clear()
        self._selected = {}
        self._search_query = ""
        self._sort_field = None
        self._sort_direction = None

        searchable = [col.field_name for col in self._columns if col.searchable]
        selection_field = next(
            (col.field_name for col in self._columns if col.selects_row), None
        )

        default_order: list[int] = []
        for row_index, item in enumerate(rows):
            for col in self._columns:
                self._cells[(row_index, col.field_name)] = item.get(col.field_name)
            self._search_index.set_row(
                row_index, (item.get(field_name) for field_name in searchable)
            )
            self._selected[row_index] = bool(
                selection_field is not None and item.get(selection_field)
            )
            default_order.append(row_index)

        self._row_count = len(default_order)
        self._sort_cache.set_default_order(default_order)
        for col in self._columns:
            if col.sortable:
                self._sort_cache.build(col, self.get_cell_value)

        self._rows = list(default_order)

        logger.debug(
            "[TabularStore] Loaded %d rows x %d columns (%d sortable)",
            self._row_count,
            len(self._columns),
            len(self._sort_cache.cached_fields()),
            extra={"dev_only": True},
        )

    # =====================================
    # Cells
    # =====================================

    def has_row(self, row_index: int) -> bool:
        return isinstance(row_index, int) and 0 <= row_index < self._row_count

    def get_column(self, field_name: str) -> ColumnDescriptor | None:
        return self._columns_by_field.get(field_name)

    def get_cell_value(self, row_index: int, field_name: str) -> CellValue:
        """Return the cell value, or None for absent cells and unknown keys."""
        return self._cells.get((row_index, field_name))

    def get_row_data(self, row_index: int) -> dict[str, CellValue]:
        """Return a field -> value mapping for one row (empty for unknown rows)."""
        if not self.has_row(row_index):
            return {}
        return {
            col.field_name: self.get_cell_value(row_index, col.field_name)
            for col in self._columns
        }

    def update_cell(self, row_index: int, field_name: str, value: CellValue) -> None:
        """Write a cell and repair the caches that depend on its column.

        The value is stored as-is. A searchable column rebuilds the row's
        search entry; a sortable column rebuilds its two orders. The visible
        rows are refreshed when the column is the active sort key or a
        search is active. All repair happens before this method returns.
        """
        column = self._columns_by_field.get(field_name)
        if column is None or not self.has_row(row_index):
            logger.debug(
                "[TabularStore] Ignoring update of unknown cell (%r, %r)",
                row_index,
                field_name,
                extra={"dev_only": True},
            )
            return

        self._cells[(row_index, field_name)] = value

        refresh = False
        if column.searchable:
            self._search_index.set_row(
                row_index,
                (
                    self.get_cell_value(row_index, col.field_name)
                    for col in self._columns
                    if col.searchable
                ),
            )
            refresh = bool(self._search_query)

        if column.sortable:
            self._sort_cache.build(column, self.get_cell_value)
            refresh = refresh or self._sort_field == field_name

        if refresh:
            self._apply_view()

    # =====================================
    # Search and sort
    # =====================================

    @property
    def search_query(self) -> str:
        return self._search_query

    def search(self, query: str | None) -> None:
        """Filter the active sort order down to rows matching ``query``.

        The query is trimmed and lowercased; an empty query shows the active
        sort order unfiltered. The visible sequence always keeps the sort
        order's sequence.
        """
        self._search_query = normalize_query(query)
        self._apply_view()

    def sort(self, field: str | None, direction: SortDirection | str | None) -> None:
        """Switch the active sort order.

        A null field or direction reverts to the default order. Unknown or
        non-sortable fields and unrecognized directions leave the store
        unchanged. An active search query is re-applied to the new order.
        """
        parsed = SortDirection.parse(direction)
        if field is None or direction is None:
            self._sort_field = None
            self._sort_direction = None
            self._apply_view()
            return

        if parsed is None or self._sort_cache.get(field, parsed) is None:
            logger.debug(
                "[TabularStore] No sort order for (%r, %r); ignoring",
                field,
                direction,
                extra={"dev_only": True},
            )
            return

        self._sort_field = field
        self._sort_direction = parsed
        self._apply_view()

    def get_sort_state(self) -> SortState:
        return SortState(self._sort_field, self._sort_direction)

    def _apply_view(self) -> None:
        order = self._sort_cache.get(self._sort_field, self._sort_direction)
        if order is None:
            order = self._sort_cache.default_order

        if not self._search_query:
            self._rows = list(order)
            return

        matches = self._search_index.matches(self._search_query)
        self._rows = [row_index for row_index in order if row_index in matches]

    # =====================================
    # Selection
    # =====================================

    def select_row(self, row_index: int, selected: bool = True) -> None:
        if not self.has_row(row_index):
            return
        self._selected[row_index] = bool(selected)

    def toggle_row_selection(self, row_index: int) -> None:
        if not self.has_row(row_index):
            return
        self._selected[row_index] = not self._selected.get(row_index, False)

    def select_all_visible(self, selected: bool = True) -> None:
        """Set the selection of every visible row; hidden rows are untouched."""
        for row_index in self._rows:
            self._selected[row_index] = bool(selected)

    def clear_selection(self) -> None:
        for row_index in self._selected:
            self._selected[row_index] = False

    def is_row_selected(self, row_index: int) -> bool:
        return self._selected.get(row_index, False)

    # =====================================
    # Snapshots
    # =====================================

    @property
    def row_count(self) -> int:
        return self._row_count

    def get_columns(self) -> list[ColumnDescriptor]:
        return list(self._columns)

    def get_visible_rows(self) -> list[int]:
        return list(self._rows)

    def get_selected_rows(self) -> list[int]:
        """Selected row indices in ascending order."""
        return [row_index for row_index, selected in sorted(self._selected.items()) if selected]
