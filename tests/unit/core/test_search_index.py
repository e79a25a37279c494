"""Tests for SearchIndex and its entry helpers."""

from tabgrid.core.grid.search_index import (
    SearchIndex,
    make_entry,
    normalize_query,
    searchable_text,
    split_entry,
)


def test_normalize_query():
    assert normalize_query("  MiXeD ") == "mixed"
    assert normalize_query(None) == ""


def test_searchable_text_skips_none():
    assert searchable_text(["Ab", None, 12, True]) == "ab12true"


def test_entry_round_trip_with_dashes_in_text():
    entry = make_entry("a-b-c", 17)
    assert entry == "a-b-c-17"
    assert split_entry(entry) == ("a-b-c", 17)


class TestSearchIndex:
    def test_one_entry_per_row(self):
        index = SearchIndex()
        index.set_row(0, ["Alpha"])
        index.set_row(0, ["Beta"])
        index.set_row(1, ["Alpha"])

        assert len(index) == 2
        assert index.entry_for(0) == "beta-0"
        assert index.matches("alpha") == {1}

    def test_identical_text_keeps_distinct_entries(self):
        index = SearchIndex()
        index.set_row(0, ["same"])
        index.set_row(1, ["same"])

        assert index.matches("same") == {0, 1}

    def test_empty_query_matches_all(self):
        index = SearchIndex()
        for row in range(3):
            index.set_row(row, [f"r{row}"])

        assert index.matches("") == {0, 1, 2}
        assert index.matches("   ") == {0, 1, 2}

    def test_suffix_is_not_matched(self):
        index = SearchIndex()
        index.set_row(5, ["abc"])

        assert index.matches("5") == set()
        assert index.matches("c-") == set()

    def test_query_is_normalized(self):
        index = SearchIndex()
        index.set_row(0, ["Hello World"])

        assert index.matches(" WORLD ") == {0}

    def test_clear(self):
        index = SearchIndex()
        index.set_row(0, ["x"])
        index.clear()

        assert len(index) == 0
        assert index.entry_for(0) is None
