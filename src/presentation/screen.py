"""List screen: a CrudController wired to a DataTable.

Management screens all follow the same loop: hold the list window
(page, limit, filters) as ListParams, fetch on every change of it, and
render the controller's items/total/is_loading through a DataTable.
ListScreen is that loop without the page-specific forms and modals.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable, Sequence
from typing import Any, Generic, TypeVar

from src.domain.models.page import ItemsPage
from src.domain.models.params import ListParams
from src.domain.services.crud import CrudController

from .debounce import DEFAULT_SEARCH_DELAY
from .table import (
    DEFAULT_EMPTY_MESSAGE,
    Column,
    DataTable,
    Pagination,
    TableActions,
    TableView,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ListScreen(Generic[T]):
    """Own the list window and reload the controller whenever it changes.

    Page, limit and filter changes schedule a reload on the running loop;
    settle() waits for any scheduled reload and pending search.
    """

    def __init__(
        self,
        controller: CrudController[T, Any, Any],
        columns: Sequence[Column[T]],
        *,
        params: ListParams | None = None,
        title: str | None = None,
        actions: TableActions[T] | None = None,
        on_row_click: Callable[[T], Any] | None = None,
        searchable: bool = True,
        empty_message: str = DEFAULT_EMPTY_MESSAGE,
        client_side_sort: bool = False,
        search_delay: float = DEFAULT_SEARCH_DELAY,
    ) -> None:
        self.controller = controller
        self.params = params or ListParams()
        self.table: DataTable[T] = DataTable(
            columns,
            controller.key_field,
            title=title,
            actions=actions,
            on_row_click=on_row_click,
            on_search=self._on_search if searchable else None,
            empty_message=empty_message,
            client_side_sort=client_side_sort,
            search_delay=search_delay,
        )
        self._reloads: set[asyncio.Task[Any]] = set()

    async def load(self) -> ItemsPage[T] | None:
        return await self.controller.fetch_items(self.params)

    def _schedule_load(self) -> None:
        task = asyncio.get_running_loop().create_task(self.load())
        self._reloads.add(task)
        task.add_done_callback(self._reloads.discard)

    async def settle(self) -> None:
        """Wait until the pending search and every scheduled reload are done."""
        await self.table.wait_for_search()
        while self._reloads:
            await asyncio.gather(*list(self._reloads))

    async def _on_search(self, term: str) -> None:
        self.params = self.params.with_search(term)
        await self.load()

    def set_page(self, page: int) -> None:
        self.params = self.params.with_page(page)
        self._schedule_load()

    def set_limit(self, limit: int) -> None:
        self.params = self.params.with_limit(limit)
        self._schedule_load()

    def set_filters(self, **filters: Any) -> None:
        """Change status/priority/type (or extra) filters and go back to page 1."""
        known = {k: v for k, v in filters.items() if k in ("status", "priority", "type")}
        extra = {k: v for k, v in filters.items() if k not in known}
        data = {**self.params.model_dump(), **known, "page": 1}
        data["extra"] = {**self.params.extra, **extra}
        self.params = ListParams.model_validate(data)
        logger.debug("Filters changed: %s", filters)
        self._schedule_load()

    def pagination(self) -> Pagination:
        return Pagination(
            page=self.params.page,
            limit=self.params.limit,
            total=self.controller.total,
            on_page_change=self.set_page,
            on_limit_change=self.set_limit,
        )

    def render(self) -> TableView:
        return self.table.render(
            self.controller.items,
            is_loading=self.controller.is_loading,
            pagination=self.pagination(),
        )
