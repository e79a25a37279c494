"""Module: grid_state.py

Date: 2026-10-19

GridState - observable facade over a TabularStore.

Holds the status flags a view layer reacts to (ready, loading, error,
all-selected) and forwards every action to the store, emitting a signal
for each piece of state the action changed. Also owns the optional remote
load path: a failed load sets ``error`` and leaves the loaded grid exactly
as it was.
"""

from __future__ import annotations

import threading
from collections.abc import Callable, Iterable, Mapping, Sequence
from typing import Any

from tabgrid.core.grid import TabularStore
from tabgrid.domain import (
    CellValue,
    ColumnDescriptor,
    SortDirection,
    SortState,
    coerce_columns,
)
from tabgrid.infra.remote_source import RemoteLoadError, RemoteSource, fetch_rows
from tabgrid.utils.events import Observable, Signal
from tabgrid.utils.logging.logger_factory import get_cached_logger

logger = get_cached_logger(__name__)

RowTransformer = Callable[[Any], Sequence[Mapping[str, Any]]]


class GridState(Observable):
    """View-facing state of one grid.

    Signals:
        grid_reset: a dataset was (re)loaded
        visible_rows_changed(list): visible row indices changed
        selection_changed(list): selected row indices changed
        sort_changed(SortState): active sort key changed
        loading_changed(bool): remote load started or ended
        error_changed(object): error message set or cleared (None)
    """

    grid_reset = Signal()
    visible_rows_changed = Signal(list)
    selection_changed = Signal(list)
    sort_changed = Signal(SortState)
    loading_changed = Signal(bool)
    error_changed = Signal(object)

    def __init__(self, store: TabularStore | None = None) -> None:
        super().__init__()
        self._store = store or TabularStore()
        self._columns: list[ColumnDescriptor] = []
        self._is_ready = False
        self._is_loading = False
        self._error: str | None = None

    # =====================================
    # Status
    # =====================================

    @property
    def store(self) -> TabularStore:
        return self._store

    @property
    def columns(self) -> list[ColumnDescriptor]:
        return list(self._columns)

    @property
    def total_rows(self) -> int:
        return self._store.row_count

    @property
    def is_ready(self) -> bool:
        return self._is_ready

    @property
    def is_loading(self) -> bool:
        return self._is_loading

    @property
    def error(self) -> str | None:
        return self._error

    @property
    def visible_rows(self) -> list[int]:
        return self._store.get_visible_rows()

    @property
    def selected_rows(self) -> list[int]:
        return self._store.get_selected_rows()

    @property
    def sort_state(self) -> SortState:
        return self._store.get_sort_state()

    @property
    def search_query(self) -> str:
        return self._store.search_query

    @property
    def all_selected(self) -> bool:
        """True when there are visible rows and every one of them is selected."""
        visible = self._store.get_visible_rows()
        return bool(visible) and all(self._store.is_row_selected(row) for row in visible)

    # =====================================
    # Actions
    # =====================================

    def initialize_grid(
        self,
        columns: Iterable[ColumnDescriptor | Mapping[str, Any]],
        rows: Sequence[Mapping[str, Any]],
    ) -> None:
        self._columns = coerce_columns(columns)
        self._store.init(self._columns, rows)
        self._is_ready = True
        self._set_error(None)

        logger.info("Grid initialized with %d rows", self._store.row_count)
        self.grid_reset.emit()
        self.visible_rows_changed.emit(self._store.get_visible_rows())
        self.selection_changed.emit(self._store.get_selected_rows())
        self.sort_changed.emit(self._store.get_sort_state())

    def get_cell_value(self, row_index: int, field_name: str) -> CellValue:
        return self._store.get_cell_value(row_index, field_name)

    def update_cell(self, row_index: int, field_name: str, value: CellValue) -> None:
        before = self._store.get_visible_rows()
        self._store.update_cell(row_index, field_name, value)
        after = self._store.get_visible_rows()
        if after != before:
            self.visible_rows_changed.emit(after)

    def sort_by(self, field: str | None, direction: SortDirection | str | None) -> None:
        previous = self._store.get_sort_state()
        self._store.sort(field, direction)
        state = self._store.get_sort_state()
        if state != previous:
            self.sort_changed.emit(state)
        self.visible_rows_changed.emit(self._store.get_visible_rows())

    def search(self, query: str | None) -> None:
        self._store.search(query)
        self.visible_rows_changed.emit(self._store.get_visible_rows())

    def select_row(self, row_index: int, selected: bool = True) -> None:
        self._store.select_row(row_index, selected)
        self.selection_changed.emit(self._store.get_selected_rows())

    def toggle_row_selection(self, row_index: int | None = None) -> None:
        """Toggle one row, or with no row select/deselect all visible rows."""
        if row_index is None:
            self._store.select_all_visible(not self.all_selected)
        else:
            self._store.toggle_row_selection(row_index)
        self.selection_changed.emit(self._store.get_selected_rows())

    def select_all_visible(self, selected: bool = True) -> None:
        self._store.select_all_visible(selected)
        self.selection_changed.emit(self._store.get_selected_rows())

    def clear_selection(self) -> None:
        self._store.clear_selection()
        self.selection_changed.emit(self._store.get_selected_rows())

    # =====================================
    # Remote loading
    # =====================================

    def fetch_data(
        self,
        columns: Iterable[ColumnDescriptor | Mapping[str, Any]],
        source: RemoteSource | str,
        transformer: RowTransformer | None = None,
    ) -> bool:
        """Load rows from ``source`` and initialize the grid with them.

        Returns:
            True when the grid was initialized with the fetched rows

        """
        if isinstance(source, str):
            source = RemoteSource(source)
        columns = coerce_columns(columns)

        self._set_error(None)
        self._set_loading(True)
        try:
            try:
                payload = fetch_rows(source)
                rows = transformer(payload) if transformer else payload
                if not isinstance(rows, list) or not all(
                    isinstance(row, Mapping) for row in rows
                ):
                    raise RemoteLoadError("Response is not a list of row objects")
            except RemoteLoadError as e:
                logger.warning("Remote load from %s failed: %s", source.url, e)
                self._set_error(str(e))
                return False
            except Exception as e:
                # Transformer errors are caller code; report them like load errors
                logger.exception("Row transformer failed for %s", source.url)
                self._set_error(str(e) or "An unknown error occurred")
                return False

            self.initialize_grid(columns, rows)
            return True
        finally:
            self._set_loading(False)

    def fetch_data_in_background(
        self,
        columns: Iterable[ColumnDescriptor | Mapping[str, Any]],
        source: RemoteSource | str,
        transformer: RowTransformer | None = None,
    ) -> threading.Thread:
        """Run fetch_data on a daemon thread and return the started thread.

        There is no cancellation: when several loads overlap, the one that
        finishes last wins.
        """
        worker = threading.Thread(
            target=self.fetch_data,
            args=(list(columns), source, transformer),
            name="tabgrid-remote-load",
            daemon=True,
        )
        worker.start()
        return worker

    def _set_loading(self, is_loading: bool) -> None:
        if self._is_loading != is_loading:
            self._is_loading = is_loading
            self.loading_changed.emit(is_loading)

    def _set_error(self, message: str | None) -> None:
        if self._error != message:
            self._error = message
            self.error_changed.emit(message)
