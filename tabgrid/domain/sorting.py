"""Module: sorting.py

Date: 2026-10-19

Sort direction and sort state value types.
"""

from __future__ import annotations

from enum import Enum
from typing import NamedTuple


class SortDirection(str, Enum):
    ASC = "asc"
    DSC = "dsc"

    @classmethod
    def parse(cls, value: SortDirection | str | None) -> SortDirection | None:
        """Normalize a direction; returns None for anything unrecognized.

        ``"desc"`` is accepted as an alias of ``"dsc"``.
        """
        if value is None or isinstance(value, SortDirection):
            return value
        text = str(value).strip().lower()
        if text == "desc":
            return cls.DSC
        try:
            return cls(text)
        except ValueError:
            return None


class SortState(NamedTuple):
    """Active sort key; both members are None for the default order."""

    field: str | None = None
    direction: SortDirection | None = None

    @property
    def is_default(self) -> bool:
        return self.field is None or self.direction is None
