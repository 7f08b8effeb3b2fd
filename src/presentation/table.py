"""Tabular presentation model for entity lists.

DataTable turns a list of entities into a TableView: header cells, one
row per entity, an optional actions column and a pagination footer.  It
never fetches or filters data itself:

  - search input is debounced and handed to on_search;
  - pagination is read from the Pagination passed to render() and every
    navigation goes through its callbacks;
  - sorting only records the sorted field and direction (the header
    indicator), unless client_side_sort is enabled, in which case rows
    are stably sorted by the column's accessor value.

The only state DataTable owns is the search term and the sort selection.
"""

from __future__ import annotations

import math
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Any, Generic, TypeVar

from src.domain.models.entity import DEFAULT_KEY_FIELD, field_value, key_of
from src.domain.models.enums import SortDirection

from .debounce import DEFAULT_SEARCH_DELAY, SearchDebouncer

T = TypeVar("T")

LIMIT_OPTIONS = (10, 25, 50, 100)
DEFAULT_SEARCH_PLACEHOLDER = "Rechercher..."
DEFAULT_EMPTY_MESSAGE = "Aucune donnée disponible"
ACTIONS_HEADER = "Actions"


@dataclass(frozen=True)
class Column(Generic[T]):
    """One table column.

    accessor is either a field name (wire or attribute name) or a function
    deriving the value from the entity.  cell, when given, renders the
    displayed value and takes precedence over accessor.  Only field-name
    columns can be sortable.
    """

    header: str
    accessor: str | Callable[[T], Any]
    cell: Callable[[T], Any] | None = None
    sortable: bool = False

    @property
    def field(self) -> str | None:
        return self.accessor if isinstance(self.accessor, str) else None

    @property
    def is_sortable(self) -> bool:
        return self.sortable and self.field is not None

    def value(self, item: T) -> Any:
        if callable(self.accessor):
            return self.accessor(item)
        return field_value(item, self.accessor)

    def render(self, item: T) -> Any:
        if self.cell is not None:
            return self.cell(item)
        if callable(self.accessor):
            return self.accessor(item)
        value = field_value(item, self.accessor)
        if value is None:
            return ""
        return str(getattr(value, "value", value))


@dataclass(frozen=True)
class CustomAction(Generic[T]):
    label: str
    on_click: Callable[[T], Any]
    icon: str | None = None
    color: str | None = None


@dataclass(frozen=True)
class TableActions(Generic[T]):
    view: Callable[[T], Any] | None = None
    edit: Callable[[T], Any] | None = None
    delete: Callable[[T], Any] | None = None
    custom: Sequence[CustomAction[T]] = ()

    def names(self) -> tuple[str, ...]:
        """Action names in display order: view, edit, delete, then custom labels."""
        builtin = tuple(
            name for name in ("view", "edit", "delete") if getattr(self, name) is not None
        )
        return builtin + tuple(action.label for action in self.custom)

    def __bool__(self) -> bool:
        return bool(self.names())

    def handler(self, name: str) -> Callable[[T], Any]:
        if name in ("view", "edit", "delete"):
            callback = getattr(self, name)
            if callback is not None:
                return callback
        for action in self.custom:
            if action.label == name:
                return action.on_click
        raise KeyError(f"No table action named {name!r}")


@dataclass(frozen=True)
class Pagination:
    """Externally owned pagination window.  page is 1-based."""

    page: int
    limit: int
    total: int
    on_page_change: Callable[[int], Any]
    on_limit_change: Callable[[int], Any] | None = None

    def __post_init__(self) -> None:
        if self.limit < 1:
            raise ValueError(f"limit must be positive, got {self.limit}")

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total / self.limit)

    @property
    def start(self) -> int:
        return (self.page - 1) * self.limit + 1 if self.total > 0 else 0

    @property
    def end(self) -> int:
        return min(self.page * self.limit, self.total)

    @property
    def has_previous(self) -> bool:
        return self.page > 1

    @property
    def has_next(self) -> bool:
        return self.page < self.total_pages


# --- views ---


class BodyState(str, Enum):
    LOADING = "loading"
    EMPTY = "empty"
    ROWS = "rows"


@dataclass(frozen=True)
class HeaderView:
    label: str
    field: str | None = None
    sortable: bool = False
    indicator: str | None = None


@dataclass(frozen=True)
class RowView:
    key: Any
    item: Any
    cells: tuple[Any, ...]
    actions: tuple[str, ...] = ()
    clickable: bool = False


@dataclass(frozen=True)
class PaginationView:
    summary: str
    page_label: str
    previous_disabled: bool
    next_disabled: bool
    limit: int
    limit_options: tuple[int, ...] = ()


@dataclass(frozen=True)
class TableView:
    state: BodyState
    title: str | None = None
    search_placeholder: str | None = None
    search_term: str = ""
    headers: tuple[HeaderView, ...] = ()
    rows: tuple[RowView, ...] = ()
    empty_message: str | None = None
    pagination: PaginationView | None = None

    @property
    def show_spinner(self) -> bool:
        return self.state is BodyState.LOADING


def pagination_view(pagination: Pagination) -> PaginationView:
    return PaginationView(
        summary=(
            f"Affichage de {pagination.start} à {pagination.end} "
            f"sur {pagination.total} éléments"
        ),
        page_label=f"Page {pagination.page} sur {pagination.total_pages or 1}",
        previous_disabled=not pagination.has_previous,
        next_disabled=not pagination.has_next,
        limit=pagination.limit,
        limit_options=LIMIT_OPTIONS if pagination.on_limit_change is not None else (),
    )


def _sort_key(value: Any) -> tuple[int, Any]:
    # Numbers order before text; text compares case-insensitively.
    value = getattr(value, "value", value)
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return (0, value)
    return (1, str(value).lower())


class DataTable(Generic[T]):
    """Render entity lists as TableViews and route user input to callbacks."""

    def __init__(
        self,
        columns: Sequence[Column[T]],
        key_field: str = DEFAULT_KEY_FIELD,
        *,
        title: str | None = None,
        actions: TableActions[T] | None = None,
        on_row_click: Callable[[T], Any] | None = None,
        on_search: Callable[[str], Any] | None = None,
        search_placeholder: str = DEFAULT_SEARCH_PLACEHOLDER,
        empty_message: str = DEFAULT_EMPTY_MESSAGE,
        client_side_sort: bool = False,
        search_delay: float = DEFAULT_SEARCH_DELAY,
    ) -> None:
        self.columns = tuple(columns)
        self.key_field = key_field
        self.title = title
        self.actions = actions
        self.on_row_click = on_row_click
        self.on_search = on_search
        self.search_placeholder = search_placeholder
        self.empty_message = empty_message
        self.client_side_sort = client_side_sort
        self._debouncer = (
            SearchDebouncer(on_search, delay=search_delay) if on_search is not None else None
        )
        self.search_term = ""
        self.sort_field: str | None = None
        self.sort_direction = SortDirection.ASC

    # --- input ---

    def search(self, term: str) -> None:
        """Record search input; on_search fires once the input settles."""
        self.search_term = term
        if self._debouncer is not None:
            self._debouncer.push(term)

    async def wait_for_search(self) -> None:
        if self._debouncer is not None:
            await self._debouncer.wait()

    def toggle_sort(self, field: str) -> None:
        """Header click: same field flips direction, new field starts ascending.

        Clicks on unknown or non-sortable columns are ignored.
        """
        if not any(col.is_sortable and col.field == field for col in self.columns):
            return
        if self.sort_field == field:
            self.sort_direction = self.sort_direction.flipped()
        else:
            self.sort_field = field
            self.sort_direction = SortDirection.ASC

    def click_row(self, item: T) -> None:
        if self.on_row_click is not None:
            self.on_row_click(item)

    def trigger_action(self, name: str, item: T) -> Any:
        if not self.actions:
            raise KeyError(f"No table action named {name!r}")
        return self.actions.handler(name)(item)

    @staticmethod
    def previous_page(pagination: Pagination) -> None:
        if pagination.has_previous:
            pagination.on_page_change(pagination.page - 1)

    @staticmethod
    def next_page(pagination: Pagination) -> None:
        if pagination.has_next:
            pagination.on_page_change(pagination.page + 1)

    @staticmethod
    def change_limit(pagination: Pagination, limit: int) -> None:
        if pagination.on_limit_change is not None:
            pagination.on_limit_change(limit)

    # --- output ---

    def _ordered(self, data: Sequence[T]) -> list[T]:
        if not self.client_side_sort or self.sort_field is None:
            return list(data)
        column = next(col for col in self.columns if col.field == self.sort_field)
        present = [item for item in data if column.value(item) is not None]
        missing = [item for item in data if column.value(item) is None]
        present.sort(
            key=lambda item: _sort_key(column.value(item)),
            reverse=self.sort_direction is SortDirection.DESC,
        )
        return present + missing

    def _headers(self) -> tuple[HeaderView, ...]:
        headers = [
            HeaderView(
                label=col.header,
                field=col.field,
                sortable=col.is_sortable,
                indicator=(
                    self.sort_direction.indicator
                    if col.is_sortable and col.field == self.sort_field
                    else None
                ),
            )
            for col in self.columns
        ]
        if self.actions:
            headers.append(HeaderView(label=ACTIONS_HEADER))
        return tuple(headers)

    def _row(self, item: T) -> RowView:
        return RowView(
            key=key_of(item, self.key_field),
            item=item,
            cells=tuple(col.render(item) for col in self.columns),
            actions=self.actions.names() if self.actions else (),
            clickable=self.on_row_click is not None,
        )

    def render(
        self,
        data: Sequence[T] | None,
        is_loading: bool = False,
        pagination: Pagination | None = None,
    ) -> TableView:
        data = data or []
        common: dict[str, Any] = {
            "title": self.title,
            "search_placeholder": self.search_placeholder if self.on_search else None,
            "search_term": self.search_term,
            "pagination": pagination_view(pagination) if pagination is not None else None,
        }
        if is_loading:
            return TableView(state=BodyState.LOADING, **common)
        if not data:
            return TableView(state=BodyState.EMPTY, empty_message=self.empty_message, **common)
        return TableView(
            state=BodyState.ROWS,
            headers=self._headers(),
            rows=tuple(self._row(item) for item in self._ordered(data)),
            **common,
        )
