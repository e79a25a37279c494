"""tabgrid.models.grid_table_model

Qt table model over a GridState.

This module provides GridTableModel, a QAbstractTableModel exposing the
visible rows of a GridState to any QTableView. View row ``n`` is store row
``visible_rows[n]``; sorting from the header maps onto the store's
precomputed orders, and edits pass through the column's validator before
they reach the store.

Date: 2026-10-19
"""

from typing import Any

from PyQt5.QtCore import QAbstractTableModel, QModelIndex, Qt, pyqtSignal

from tabgrid.app.state import GridState
from tabgrid.domain import CellType, ColumnDescriptor, SortDirection
from tabgrid.utils.logging.logger_factory import get_cached_logger

logger = get_cached_logger(__name__)


class GridTableModel(QAbstractTableModel):
    """Table model for displaying and editing a GridState in a QTableView.

    GridState signals may be emitted from a background load thread; they are
    relayed through a Qt signal so the model resets on its own thread.
    """

    _state_changed = pyqtSignal()
    validation_failed = pyqtSignal(int, str, str)  # row_index, field_name, text

    def __init__(self, state: GridState, parent: Any = None) -> None:
        super().__init__(parent)
        self._state = state
        self._columns: list[ColumnDescriptor] = state.columns
        self._rows: list[int] = state.visible_rows

        self._state_changed.connect(self._reload)
        state.grid_reset.connect(self._on_state_changed)
        state.visible_rows_changed.connect(self._on_state_changed)
        state.selection_changed.connect(self._on_selection_changed)

    @property
    def state(self) -> GridState:
        return self._state

    def detach(self) -> None:
        """Stop listening to the state (call before dropping the model)."""
        self._state.grid_reset.disconnect(self._on_state_changed)
        self._state.visible_rows_changed.disconnect(self._on_state_changed)
        self._state.selection_changed.disconnect(self._on_selection_changed)

    # ==================== Mapping ====================

    def row_index_at(self, view_row: int) -> int | None:
        """Store row index shown at ``view_row``."""
        if 0 <= view_row < len(self._rows):
            return self._rows[view_row]
        return None

    def column_at(self, column: int) -> ColumnDescriptor | None:
        if 0 <= column < len(self._columns):
            return self._columns[column]
        return None

    def column_index(self, field_name: str) -> int:
        for i, col in enumerate(self._columns):
            if col.field_name == field_name:
                return i
        return -1

    # ==================== Qt Model Interface ====================

    def rowCount(self, parent: QModelIndex = QModelIndex()) -> int:
        return 0 if parent.isValid() else len(self._rows)

    def columnCount(self, parent: QModelIndex = QModelIndex()) -> int:
        return 0 if parent.isValid() else len(self._columns)

    def data(self, index: QModelIndex, role: int = Qt.DisplayRole) -> Any:
        if not index.isValid():
            return None
        row_index = self.row_index_at(index.row())
        column = self.column_at(index.column())
        if row_index is None or column is None:
            return None

        if column.selects_row:
            if role == Qt.CheckStateRole:
                selected = self._state.store.is_row_selected(row_index)
                return Qt.Checked if selected else Qt.Unchecked
            return None

        value = self._state.get_cell_value(row_index, column.field_name)

        if column.cell_type is CellType.CHECKBOX:
            if role == Qt.CheckStateRole:
                return Qt.Checked if value else Qt.Unchecked
            return None

        if role == Qt.DisplayRole:
            return column.display_text(value)
        if role == Qt.EditRole:
            return "" if value is None else str(value)
        if role == Qt.TextAlignmentRole and column.cell_type.is_numeric:
            return int(Qt.AlignRight | Qt.AlignVCenter)
        if role == Qt.UserRole:
            return row_index
        return None

    def setData(self, index: QModelIndex, value: Any, role: int = Qt.EditRole) -> bool:
        if not index.isValid():
            return False
        row_index = self.row_index_at(index.row())
        column = self.column_at(index.column())
        if row_index is None or column is None:
            return False

        if role == Qt.CheckStateRole and column.is_checkable:
            checked = value == Qt.Checked
            if column.selects_row:
                self._state.select_row(row_index, checked)
            else:
                self._state.update_cell(row_index, column.field_name, checked)
            self.dataChanged.emit(index, index, [Qt.CheckStateRole])
            return True

        if role != Qt.EditRole or not column.editable:
            return False

        text = "" if value is None else str(value)
        if not column.validate(text):
            logger.debug(
                "[GridTableModel] Rejected '%s' for %s[%d]",
                text,
                column.field_name,
                row_index,
                extra={"dev_only": True},
            )
            self.validation_failed.emit(row_index, column.field_name, text)
            return False

        self._state.update_cell(row_index, column.field_name, text)
        # update_cell may reorder the view; a reset covers that, otherwise repaint the cell
        if self.row_index_at(index.row()) == row_index:
            self.dataChanged.emit(index, index, [Qt.DisplayRole, Qt.EditRole])
        return True

    def flags(self, index: QModelIndex) -> Qt.ItemFlags:
        if not index.isValid():
            return Qt.NoItemFlags
        column = self.column_at(index.column())
        flags = Qt.ItemIsEnabled | Qt.ItemIsSelectable
        if column is None:
            return flags
        if column.is_checkable and (column.selects_row or column.editable):
            flags |= Qt.ItemIsUserCheckable
        elif column.editable:
            flags |= Qt.ItemIsEditable
        return flags

    def headerData(
        self, section: int, orientation: Qt.Orientation, role: int = Qt.DisplayRole
    ) -> Any:
        if orientation == Qt.Horizontal:
            column = self.column_at(section)
            if column is not None and role in (Qt.DisplayRole, Qt.ToolTipRole):
                return column.display_name
            return None
        if role == Qt.DisplayRole:
            row_index = self.row_index_at(section)
            return None if row_index is None else str(row_index + 1)
        return None

    def sort(self, column: int, order: Qt.SortOrder = Qt.AscendingOrder) -> None:
        """Switch to a precomputed order; column -1 restores the default order."""
        descriptor = self.column_at(column)
        if descriptor is None:
            self._state.sort_by(None, None)
            return
        if not descriptor.sortable:
            return
        direction = SortDirection.DSC if order == Qt.DescendingOrder else SortDirection.ASC
        self._state.sort_by(descriptor.field_name, direction)

    # ==================== State listeners ====================

    def _on_state_changed(self, *_args: Any) -> None:
        self._state_changed.emit()

    def _on_selection_changed(self, *_args: Any) -> None:
        selection_columns = [i for i, col in enumerate(self._columns) if col.selects_row]
        if not selection_columns or not self._rows:
            return
        for column in selection_columns:
            self.dataChanged.emit(
                self.index(0, column),
                self.index(len(self._rows) - 1, column),
                [Qt.CheckStateRole],
            )

    def _reload(self) -> None:
        self.beginResetModel()
        self._columns = self._state.columns
        self._rows = self._state.visible_rows
        self.endResetModel()
