"""Module: conftest.py

Date: 2026-10-19

Global pytest configuration and fixtures for the tabgrid test suite.
Includes headless Qt setup for the model tests and common grid fixtures.
"""

import os

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest

from tabgrid.core.grid import TabularStore
from tabgrid.core.layout import ColumnLayoutEngine
from tabgrid.domain import CellType, ColumnDescriptor
from tabgrid.utils.logging.logger_factory import LoggerFactory


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "gui: mark test as requiring a Qt application")


def pytest_collection_modifyitems(session, config, items):
    """Skip GUI tests on CI unless an offscreen platform was requested explicitly."""
    _ = session
    _ = config

    is_ci = "CI" in os.environ or "GITHUB_ACTIONS" in os.environ
    if not is_ci or os.environ.get("QT_QPA_PLATFORM") == "offscreen":
        return

    skip_gui = pytest.mark.skip(reason="GUI tests need a display on CI")
    for item in items:
        if "gui" in item.keywords:
            item.add_marker(skip_gui)


@pytest.fixture(autouse=True)
def reset_logger_level():
    """Undo LoggerFactory.set_global_level calls made by a test."""
    yield
    LoggerFactory._global_level = None


@pytest.fixture
def people_columns() -> list[ColumnDescriptor]:
    """Columns {name: text/sortable/searchable, age: number/sortable}."""
    return [
        ColumnDescriptor(
            "name",
            "Name",
            CellType.TEXT,
            editable=True,
            searchable=True,
            sortable=True,
        ),
        ColumnDescriptor("age", "Age", CellType.NUMBER, editable=True, sortable=True),
    ]


@pytest.fixture
def people_rows() -> list[dict]:
    return [
        {"name": "Bob", "age": 30},
        {"name": "Al", "age": 40},
        {"name": "Cy", "age": 20},
    ]


@pytest.fixture
def people_store(people_columns, people_rows) -> TabularStore:
    store = TabularStore()
    store.init(people_columns, people_rows)
    return store


@pytest.fixture
def inventory_columns() -> list[ColumnDescriptor]:
    """A wider column set with every cell type and a selection column."""
    return [
        ColumnDescriptor("picked", "Picked", CellType.CHECKBOX, selects_row=True, width=50),
        ColumnDescriptor("sku", "SKU", CellType.TEXT, searchable=True, sortable=True),
        ColumnDescriptor(
            "title", "Title", CellType.TEXT, editable=True, searchable=True, sortable=True
        ),
        ColumnDescriptor("qty", "Qty", CellType.NUMBER, editable=True, sortable=True),
        ColumnDescriptor("added", "Added", CellType.DATE, sortable=True),
        ColumnDescriptor("state", "State", CellType.SELECT, searchable=True),
        ColumnDescriptor("active", "Active", CellType.CHECKBOX, editable=True),
    ]


@pytest.fixture
def inventory_rows() -> list[dict]:
    return [
        {"picked": False, "sku": "A-100", "title": "Widget", "qty": "12",
         "added": "1700000000000", "state": "open", "active": True},
        {"picked": True, "sku": "B-200", "title": "gadget", "qty": "3",
         "added": "1600000000000", "state": "closed", "active": False},
        {"picked": False, "sku": "C-300", "title": "Doohickey", "qty": None,
         "added": "1800000000000", "state": "open", "active": True},
        {"picked": False, "sku": "D-400", "title": "Sprocket", "qty": "7",
         "added": None, "state": "pending", "active": False},
        {"picked": True, "sku": "E-500", "title": "widget stand", "qty": "12",
         "added": "1650000000000", "state": "closed", "active": True},
    ]


@pytest.fixture
def inventory_store(inventory_columns, inventory_rows) -> TabularStore:
    store = TabularStore()
    store.init(inventory_columns, inventory_rows)
    return store


@pytest.fixture
def layout_columns() -> list[ColumnDescriptor]:
    return [
        ColumnDescriptor("id", width=60, min_width=40, max_width=80),
        ColumnDescriptor("name"),
        ColumnDescriptor("email", min_width=120),
        ColumnDescriptor("notes", width=200, flex=0),
    ]


@pytest.fixture
def layout_engine(layout_columns) -> ColumnLayoutEngine:
    engine = ColumnLayoutEngine()
    engine.initialize_columns(layout_columns, 800)
    return engine
