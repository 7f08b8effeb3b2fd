"""CRUD orchestration over one resource adapter.

CrudController keeps the client-side state a management screen needs for
one resource: the current page of items, the server's total for the
filter, an optional selected item, a loading flag and the last error.

Contract (per operation):

  fetch_items       replaces items/total; failures are recorded in error
                    and logged, never notified and never raised.  Only the
                    response to the most recently issued call is applied.
  fetch_item_by_id  sets selected_item; failures are recorded and raised.
  create_item       appends the created entity; total is NOT incremented.
  update_item       replaces the key-matching entity and selected_item.
  delete_item       removes the key-matching entity and clears a matching
                    selected_item; total is NOT decremented.

Every create/update/delete emits exactly one notification (success or
error) and re-raises on failure.  total stays as reported by the last
applied fetch until the caller fetches again (see refresh()).
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from typing import Any, Generic, Literal, TypeVar

from pydantic import BaseModel, ConfigDict

from src.domain.adapters.base import ResourceAdapter
from src.domain.models.entity import DEFAULT_KEY_FIELD, key_of
from src.domain.models.page import ItemsPage
from src.domain.models.params import ListParams

from .notifier import LoggingNotifier, Notifier

logger = logging.getLogger(__name__)

T = TypeVar("T")
C = TypeVar("C")
U = TypeVar("U")

Mutation = Literal["create", "update", "delete"]

_DEFAULT_SUCCESS: dict[str, str] = {
    "create": "Élément créé avec succès",
    "update": "Élément mis à jour avec succès",
    "delete": "Élément supprimé avec succès",
}

_DEFAULT_ERROR: dict[str, str] = {
    "create": "Erreur lors de la création",
    "update": "Erreur lors de la mise à jour",
    "delete": "Erreur lors de la suppression",
}


class MessageSet(BaseModel):
    """Per-mutation message overrides; None keeps the default."""

    model_config = ConfigDict(frozen=True)

    create: str | None = None
    update: str | None = None
    delete: str | None = None


class CrudMessages(BaseModel):
    """Success and error messages shown after create/update/delete."""

    model_config = ConfigDict(frozen=True)

    success: MessageSet = MessageSet()
    error: MessageSet = MessageSet()

    def success_for(self, operation: Mutation) -> str:
        return getattr(self.success, operation) or _DEFAULT_SUCCESS[operation]

    def error_for(self, operation: Mutation) -> str:
        return getattr(self.error, operation) or _DEFAULT_ERROR[operation]


class CrudController(Generic[T, C, U]):
    """List/detail/create/update/delete cycle for one resource.

    One instance per screen; state is never shared between instances.
    """

    def __init__(
        self,
        adapter: ResourceAdapter[T, C, U],
        notifier: Notifier | None = None,
        messages: CrudMessages | None = None,
        key_field: str = DEFAULT_KEY_FIELD,
    ) -> None:
        self._adapter = adapter
        self._notifier = notifier or LoggingNotifier()
        self._messages = messages or CrudMessages()
        self._key_field = key_field
        self._pending = 0
        self._fetch_seq = 0
        self._last_params: ListParams | None = None

        self.items: list[T] = []
        self.total: int = 0
        self.selected_item: T | None = None
        self.error: Exception | None = None

    @property
    def is_loading(self) -> bool:
        return self._pending > 0

    @property
    def key_field(self) -> str:
        return self._key_field

    @property
    def messages(self) -> CrudMessages:
        return self._messages

    @property
    def last_params(self) -> ListParams | None:
        return self._last_params

    @contextmanager
    def _operation(self) -> Iterator[None]:
        self._pending += 1
        self.error = None
        try:
            yield
        finally:
            self._pending -= 1

    def _matches(self, item: Any, id: str) -> bool:
        return key_of(item, self._key_field) == id

    @staticmethod
    def _as_page(result: ItemsPage[T] | Mapping[str, Any]) -> ItemsPage[T]:
        if isinstance(result, ItemsPage):
            return result
        return ItemsPage(items=list(result.get("items") or []), total=result.get("total"))

    # --- reads ---

    async def fetch_items(self, params: ListParams | None = None) -> ItemsPage[T] | None:
        """Load one page into items/total.

        Returns the applied page, or None when the call failed or was
        superseded by a later fetch_items() before it resolved.
        """
        self._fetch_seq += 1
        seq = self._fetch_seq
        self._last_params = params
        logger.debug("Fetching items with params: %s", params)
        with self._operation():
            try:
                page = self._as_page(await self._adapter.get_all(params))
            except Exception as exc:
                if seq != self._fetch_seq:
                    logger.debug(
                        "Discarding stale fetch error (seq %d < %d): %s",
                        seq,
                        self._fetch_seq,
                        exc,
                    )
                    return None
                self.error = exc
                logger.error("Error fetching items: %s", exc)
                return None
            if seq != self._fetch_seq:
                logger.debug(
                    "Discarding stale fetch response (seq %d < %d)", seq, self._fetch_seq
                )
                return None
            self.items = list(page.items)
            self.total = page.total or 0
            logger.debug("Fetched %d items (total %d)", len(self.items), self.total)
            return page

    async def refresh(self) -> ItemsPage[T] | None:
        """Fetch again with the last params, making total authoritative."""
        return await self.fetch_items(self._last_params)

    async def fetch_item_by_id(self, id: str) -> T:
        with self._operation():
            try:
                result = await self._adapter.get_by_id(id)
            except Exception as exc:
                self.error = exc
                logger.error("Error fetching item %s: %s", id, exc)
                raise
            self.selected_item = result
            return result

    def set_selected_item(self, item: T | None) -> None:
        self.selected_item = item

    # --- mutations ---

    async def create_item(self, data: C) -> T:
        with self._operation():
            try:
                result = await self._adapter.create(data)
            except Exception as exc:
                self._fail("create", exc)
                raise
            self.items = [*self.items, result]
            self._notifier.success(self._messages.success_for("create"))
            return result

    async def update_item(self, id: str, data: U) -> T:
        with self._operation():
            try:
                result = await self._adapter.update(id, data)
            except Exception as exc:
                self._fail("update", exc)
                raise
            self.items = [result if self._matches(item, id) else item for item in self.items]
            if self.selected_item is not None and self._matches(self.selected_item, id):
                self.selected_item = result
            self._notifier.success(self._messages.success_for("update"))
            return result

    async def delete_item(self, id: str) -> bool:
        with self._operation():
            try:
                await self._adapter.delete(id)
            except Exception as exc:
                self._fail("delete", exc)
                raise
            self.items = [item for item in self.items if not self._matches(item, id)]
            if self.selected_item is not None and self._matches(self.selected_item, id):
                self.selected_item = None
            self._notifier.success(self._messages.success_for("delete"))
            return True

    def _fail(self, operation: Mutation, exc: Exception) -> None:
        self.error = exc
        logger.debug("%s failed: %s", operation, exc)
        self._notifier.error(self._messages.error_for(operation))
