"""Tests for GridRegistry."""

import pytest

from tabgrid.app import GridRegistry
from tabgrid.app.state import GridState
from tabgrid.core.layout import ColumnLayoutEngine


def test_create_generates_prefixed_unique_ids():
    registry = GridRegistry(id_prefix="table")

    first = registry.create()
    second = registry.create()

    assert first.grid_id.startswith("table-")
    assert first.grid_id != second.grid_id
    assert len(registry) == 2
    assert isinstance(first.state, GridState)
    assert isinstance(first.layout, ColumnLayoutEngine)


def test_engines_are_independent():
    registry = GridRegistry()
    a = registry.create("a")
    b = registry.create("b")

    a.state.initialize_grid([{"fieldName": "x"}], [{"x": 1}])

    assert a.state.total_rows == 1
    assert b.state.total_rows == 0
    assert a.layout is not b.layout


def test_duplicate_id_raises():
    registry = GridRegistry()
    registry.create("orders")

    with pytest.raises(ValueError, match="orders"):
        registry.create("orders")


def test_get_and_get_or_create():
    registry = GridRegistry()

    assert registry.get("missing") is None

    created = registry.get_or_create("orders")
    assert registry.get_or_create("orders") is created
    assert registry.get("orders") is created
    assert "orders" in registry
    assert registry.ids() == ["orders"]


def test_dispose_disconnects_listeners():
    registry = GridRegistry()
    engines = registry.create("orders")
    calls = []
    engines.state.visible_rows_changed.connect(calls.append)
    engines.layout.widths_changed.connect(calls.append)

    assert registry.dispose("orders") is True

    engines.state.search("x")
    engines.layout.initialize_columns([{"fieldName": "x"}], 100)
    assert calls == []
    assert "orders" not in registry
    assert registry.dispose("orders") is False


def test_dispose_all():
    registry = GridRegistry()
    registry.create()
    registry.create()

    registry.dispose_all()

    assert len(registry) == 0
