"""Qt models exposing grid state to item views."""

from tabgrid.models.grid_table_model import GridTableModel

__all__ = ["GridTableModel"]
