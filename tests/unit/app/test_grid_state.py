"""Tests for GridState.

Date: 2026-10-19

Signals are recorded through plain list callbacks; remote loading is
exercised by monkeypatching ``fetch_rows`` in the grid_state module.
"""

from __future__ import annotations

import pytest

from tabgrid.app.state import GridState
from tabgrid.app.state import grid_state as grid_state_module
from tabgrid.domain import SortDirection, SortState
from tabgrid.infra import RemoteLoadError, RemoteSource


class Recorder:
    """Collects every emission of the GridState signals."""

    def __init__(self, state: GridState) -> None:
        self.events: list[tuple[str, object]] = []
        for name in (
            "grid_reset",
            "visible_rows_changed",
            "selection_changed",
            "sort_changed",
            "loading_changed",
            "error_changed",
        ):
            getattr(state, name).connect(self._make(name))

    def _make(self, name: str):
        def record(*args):
            self.events.append((name, args[0] if args else None))

        record.__name__ = f"record_{name}"
        return record

    def of(self, name: str) -> list[object]:
        return [payload for event, payload in self.events if event == name]


@pytest.fixture
def state(people_columns, people_rows) -> GridState:
    grid = GridState()
    grid.initialize_grid(people_columns, people_rows)
    return grid


class TestInitialize:
    def test_initial_status(self) -> None:
        grid = GridState()

        assert not grid.is_ready
        assert not grid.is_loading
        assert grid.error is None
        assert grid.visible_rows == []
        assert not grid.all_selected

    def test_initialize_emits_full_state(self, people_columns, people_rows) -> None:
        grid = GridState()
        recorder = Recorder(grid)

        grid.initialize_grid(people_columns, people_rows)

        assert grid.is_ready
        assert grid.total_rows == 3
        assert recorder.of("grid_reset") == [None]
        assert recorder.of("visible_rows_changed") == [[0, 1, 2]]
        assert recorder.of("selection_changed") == [[]]
        assert recorder.of("sort_changed") == [SortState(None, None)]

    def test_columns_are_copied(self, state: GridState) -> None:
        state.columns.clear()
        assert len(state.columns) == 2


class TestActions:
    def test_scenario(self, state: GridState) -> None:
        state.sort_by("age", "asc")
        assert state.visible_rows == [2, 0, 1]

        state.search("al")
        assert state.visible_rows == [1]
        assert state.search_query == "al"

    def test_sort_emits_sort_and_rows(self, state: GridState) -> None:
        recorder = Recorder(state)

        state.sort_by("age", SortDirection.DSC)

        assert recorder.of("sort_changed") == [SortState("age", SortDirection.DSC)]
        assert recorder.of("visible_rows_changed") == [[1, 0, 2]]
        assert state.sort_state.field == "age"

    def test_ignored_sort_keeps_sort_state(self, state: GridState) -> None:
        recorder = Recorder(state)

        state.sort_by("ghost", "asc")

        assert recorder.of("sort_changed") == []
        assert state.visible_rows == [0, 1, 2]

    def test_update_cell_emits_only_when_view_changes(self, state: GridState) -> None:
        state.sort_by("age", "asc")
        recorder = Recorder(state)

        state.update_cell(0, "name", "Bobby")
        assert recorder.of("visible_rows_changed") == []

        state.update_cell(0, "age", 1)
        assert recorder.of("visible_rows_changed") == [[0, 2, 1]]
        assert state.get_cell_value(0, "age") == 1

    def test_selection_actions(self, state: GridState) -> None:
        recorder = Recorder(state)

        state.select_row(1)
        state.toggle_row_selection(2)
        state.toggle_row_selection(1)
        state.clear_selection()

        assert recorder.of("selection_changed") == [[1], [1, 2], [2], []]

    def test_toggle_all_visible(self, state: GridState) -> None:
        state.search("b")
        state.toggle_row_selection()
        assert state.selected_rows == [0]
        assert state.all_selected

        state.toggle_row_selection()
        assert state.selected_rows == []

    def test_all_selected_tracks_visible_rows_only(self, state: GridState) -> None:
        state.select_all_visible()
        assert state.all_selected

        state.select_row(0, False)
        assert not state.all_selected

        state.search("cy")
        assert state.all_selected

        state.search("zzz")
        assert not state.all_selected


class TestFetchData:
    def test_success_initializes_grid(self, monkeypatch, people_columns) -> None:
        payload = [{"name": "Xi", "age": 5}, {"name": "Yu", "age": 3}]
        seen: list[RemoteSource] = []

        def fake_fetch(source):
            seen.append(source)
            return payload

        monkeypatch.setattr(grid_state_module, "fetch_rows", fake_fetch)
        grid = GridState()
        recorder = Recorder(grid)

        assert grid.fetch_data(people_columns, "https://example.test/rows") is True

        assert seen[0].url == "https://example.test/rows"
        assert grid.is_ready
        assert grid.total_rows == 2
        assert grid.get_cell_value(1, "name") == "Yu"
        assert recorder.of("loading_changed") == [True, False]
        assert grid.error is None

    def test_transformer_reshapes_payload(self, monkeypatch, people_columns) -> None:
        monkeypatch.setattr(
            grid_state_module,
            "fetch_rows",
            lambda source: {"items": [{"name": "Zo", "age": 9}]},
        )
        grid = GridState()

        assert grid.fetch_data(
            people_columns,
            RemoteSource("https://example.test", {"method": "POST"}),
            transformer=lambda payload: payload["items"],
        )
        assert grid.get_cell_value(0, "name") == "Zo"

    def test_failure_keeps_previous_grid(self, monkeypatch, state: GridState) -> None:
        def failing(source):
            raise RemoteLoadError("Request failed with status 500")

        monkeypatch.setattr(grid_state_module, "fetch_rows", failing)
        state.sort_by("age", "asc")
        recorder = Recorder(state)

        assert state.fetch_data([], "https://example.test") is False

        assert state.error == "Request failed with status 500"
        assert state.visible_rows == [2, 0, 1]
        assert state.total_rows == 3
        assert not state.is_loading
        assert recorder.of("loading_changed") == [True, False]
        assert recorder.of("error_changed") == ["Request failed with status 500"]
        assert recorder.of("grid_reset") == []

    def test_non_list_payload_is_an_error(self, monkeypatch, people_columns) -> None:
        monkeypatch.setattr(grid_state_module, "fetch_rows", lambda source: {"rows": []})
        grid = GridState()

        assert grid.fetch_data(people_columns, "https://example.test") is False
        assert grid.error == "Response is not a list of row objects"
        assert not grid.is_ready

    def test_transformer_exception_is_reported(self, monkeypatch, people_columns) -> None:
        monkeypatch.setattr(grid_state_module, "fetch_rows", lambda source: [])

        def broken(payload):
            raise KeyError("items")

        grid = GridState()

        assert grid.fetch_data(people_columns, "https://example.test", broken) is False
        assert grid.error == "'items'"

    def test_next_load_clears_error(self, monkeypatch, people_columns) -> None:
        responses = iter([RemoteLoadError("Request timed out"), [{"name": "A", "age": 1}]])

        def fake_fetch(source):
            result = next(responses)
            if isinstance(result, Exception):
                raise result
            return result

        monkeypatch.setattr(grid_state_module, "fetch_rows", fake_fetch)
        grid = GridState()

        grid.fetch_data(people_columns, "https://example.test")
        assert grid.error == "Request timed out"

        grid.fetch_data(people_columns, "https://example.test")
        assert grid.error is None
        assert grid.total_rows == 1

    def test_background_load(self, monkeypatch, people_columns) -> None:
        monkeypatch.setattr(
            grid_state_module, "fetch_rows", lambda source: [{"name": "Bg", "age": 2}]
        )
        grid = GridState()

        worker = grid.fetch_data_in_background(people_columns, "https://example.test")
        worker.join(timeout=5)

        assert not worker.is_alive()
        assert worker.daemon
        assert grid.is_ready
        assert grid.get_cell_value(0, "name") == "Bg"


def test_fetch_with_huge_numbers_finishes_loading(monkeypatch, people_columns) -> None:
    monkeypatch.setattr(
        grid_state_module,
        "fetch_rows",
        lambda source: [{"name": "Big", "age": 10**400}, {"name": "Small", "age": 1}],
    )
    grid = GridState()

    assert grid.fetch_data(people_columns, "https://example.test") is True

    grid.sort_by("age", "dsc")
    assert grid.visible_rows == [0, 1]
    assert not grid.is_loading
