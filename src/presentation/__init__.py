"""Presentation package: table model, search debouncing, text rendering."""

from .debounce import SearchDebouncer
from .render import render_text
from .screen import ListScreen
from .table import (
    BodyState,
    Column,
    CustomAction,
    DataTable,
    HeaderView,
    Pagination,
    PaginationView,
    RowView,
    TableActions,
    TableView,
)

__all__ = [
    "BodyState",
    "Column",
    "CustomAction",
    "DataTable",
    "HeaderView",
    "ListScreen",
    "Pagination",
    "PaginationView",
    "RowView",
    "SearchDebouncer",
    "TableActions",
    "TableView",
    "render_text",
]
