"""Module: registry.py

Date: 2026-10-19

GridRegistry - grid id -> engine pair lookup owned by the host application.

Each grid instance on screen gets one GridState (data) and one
ColumnLayoutEngine (widths). The host creates the pair when a grid mounts,
looks it up from anywhere that knows the grid id, and disposes it when the
grid is torn down.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass

from tabgrid.app.state.grid_state import GridState
from tabgrid.core.layout import ColumnLayoutEngine
from tabgrid.utils.logging.logger_factory import get_cached_logger

logger = get_cached_logger(__name__)


@dataclass(frozen=True)
class GridEngines:
    grid_id: str
    state: GridState
    layout: ColumnLayoutEngine


class GridRegistry:
    """Explicit create/lookup/dispose registry of grid engine pairs."""

    def __init__(self, id_prefix: str = "grid") -> None:
        self._id_prefix = id_prefix
        self._grids: dict[str, GridEngines] = {}

    def __contains__(self, grid_id: object) -> bool:
        return grid_id in self._grids

    def __len__(self) -> int:
        return len(self._grids)

    def ids(self) -> list[str]:
        return list(self._grids)

    def generate_id(self) -> str:
        """Return a ``<prefix>-<uuid4>`` id not used by this registry."""
        while True:
            grid_id = f"{self._id_prefix}-{uuid.uuid4()}"
            if grid_id not in self._grids:
                return grid_id

    def create(self, grid_id: str | None = None) -> GridEngines:
        """Create and register a new engine pair.

        Raises:
            ValueError: If ``grid_id`` is already registered

        """
        if grid_id is None:
            grid_id = self.generate_id()
        elif grid_id in self._grids:
            raise ValueError(f"Grid '{grid_id}' is already registered")

        engines = GridEngines(grid_id, GridState(), ColumnLayoutEngine())
        self._grids[grid_id] = engines
        logger.debug("[GridRegistry] Created %s", grid_id, extra={"dev_only": True})
        return engines

    def get(self, grid_id: str) -> GridEngines | None:
        return self._grids.get(grid_id)

    def get_or_create(self, grid_id: str) -> GridEngines:
        engines = self._grids.get(grid_id)
        return engines if engines is not None else self.create(grid_id)

    def dispose(self, grid_id: str) -> bool:
        """Remove a grid's engines and disconnect their listeners.

        Returns:
            False when ``grid_id`` was not registered

        """
        engines = self._grids.pop(grid_id, None)
        if engines is None:
            return False

        for signal in (
            engines.state.grid_reset,
            engines.state.visible_rows_changed,
            engines.state.selection_changed,
            engines.state.sort_changed,
            engines.state.loading_changed,
            engines.state.error_changed,
            engines.layout.widths_changed,
            engines.layout.resizing_changed,
        ):
            signal.disconnect()

        logger.debug("[GridRegistry] Disposed %s", grid_id, extra={"dev_only": True})
        return True

    def dispose_all(self) -> None:
        for grid_id in list(self._grids):
            self.dispose(grid_id)
