"""Application state: observable grid state."""

from tabgrid.app.state.grid_state import GridState, RowTransformer

__all__ = ["GridState", "RowTransformer"]
