"""Module: search_index.py

Date: 2026-10-19

Per-row search entries for substring matching across searchable columns.

Each row owns exactly one entry: the lowercased concatenation of its
searchable cell values, suffixed with ``-<row_index>``. Entries live in a set
that is scanned for substring containment; the row index is read back from
the suffix. A row -> entry map allows replacing a row's entry without a scan.
"""

from __future__ import annotations

from collections.abc import Iterable

from tabgrid.domain import CellValue

ENTRY_SEPARATOR = "-"


def normalize_query(query: str | None) -> str:
    return (query or "").strip().lower()


def searchable_text(values: Iterable[CellValue]) -> str:
    """Concatenate cell values into the lowercased text part of an entry."""
    return "".join("" if value is None else str(value).lower() for value in values)


def make_entry(text: str, row_index: int) -> str:
    return f"{text}{ENTRY_SEPARATOR}{row_index}"


def split_entry(entry: str) -> tuple[str, int]:
    """Split an entry into its text part and row index."""
    text, _, row = entry.rpartition(ENTRY_SEPARATOR)
    return text, int(row)


class SearchIndex:
    """Set of row search entries."""

    def __init__(self) -> None:
        self._entries: set[str] = set()
        self._entry_by_row: dict[int, str] = {}

    def __len__(self) -> int:
        return len(self._entries)

    def clear(self) -> None:
        self._entries.clear()
        self._entry_by_row.clear()

    def set_row(self, row_index: int, values: Iterable[CellValue]) -> str:
        """Insert or replace the entry of ``row_index``.

        Returns:
            The new entry string

        """
        stale = self._entry_by_row.pop(row_index, None)
        if stale is not None:
            self._entries.discard(stale)

        entry = make_entry(searchable_text(values), row_index)
        self._entries.add(entry)
        self._entry_by_row[row_index] = entry
        return entry

    def entry_for(self, row_index: int) -> str | None:
        return self._entry_by_row.get(row_index)

    def matches(self, query: str | None) -> set[int]:
        """Return the row indices whose text contains ``query``.

        The query is normalized first. Only the text part of an entry is
        matched, never the row-index suffix. An empty query matches every row.
        """
        needle = normalize_query(query)
        if not needle:
            return set(self._entry_by_row)

        matched: set[int] = set()
        for entry in self._entries:
            text, row_index = split_entry(entry)
            if needle in text:
                matched.add(row_index)
        return matched
