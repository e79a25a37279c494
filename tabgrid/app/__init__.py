"""Application layer: grid state facade and the grid registry."""

from tabgrid.app.registry import GridEngines, GridRegistry
from tabgrid.app.state import GridState

__all__ = ["GridEngines", "GridRegistry", "GridState"]
