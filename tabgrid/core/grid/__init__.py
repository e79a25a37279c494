"""Grid data engine: tabular store with its search index and sort cache."""

from tabgrid.core.grid.search_index import SearchIndex
from tabgrid.core.grid.sort_cache import SortCache
from tabgrid.core.grid.tabular_store import TabularStore

__all__ = ["SearchIndex", "SortCache", "TabularStore"]
