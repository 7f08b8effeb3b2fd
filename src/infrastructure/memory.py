"""In-memory implementation of ResourceAdapter.

Behaves like one collection of the platform API: filters on status,
priority and type, case-insensitive search over a few text fields,
newest-first ordering and page/limit slicing, with a total that counts
the whole filter.  Documents are stored as wire-format dicts and copied
on the way in and out, so callers never share state with the store.
"""

from __future__ import annotations

import copy
from collections.abc import Iterable, Mapping
from datetime import datetime, timezone
from typing import Any, TypeVar
from uuid import uuid4

from src.domain.adapters.base import ResourceAdapter
from src.domain.adapters.errors import AdapterError
from src.domain.models.entity import DEFAULT_KEY_FIELD, payload_of
from src.domain.models.page import ItemsPage
from src.domain.models.params import ALL, ListParams

T = TypeVar("T")

_SEARCH_FIELDS = ("reference", "title", "name", "description", "email")


def _new_id() -> str:
    return uuid4().hex[:24]


class InMemoryResourceAdapter(ResourceAdapter[T, Any, Any]):
    def __init__(
        self,
        model: type[T] | None = None,
        documents: Iterable[Mapping[str, Any]] = (),
        key_field: str = DEFAULT_KEY_FIELD,
        search_fields: Iterable[str] = _SEARCH_FIELDS,
    ) -> None:
        self._model = model
        self._key_field = key_field
        self._search_fields = tuple(search_fields)
        self._store: dict[str, dict[str, Any]] = {}
        for doc in documents:
            self._insert(dict(doc))

    def __len__(self) -> int:
        return len(self._store)

    def _insert(self, doc: dict[str, Any]) -> dict[str, Any]:
        doc.setdefault(self._key_field, _new_id())
        doc.setdefault("createdAt", datetime.now(timezone.utc).isoformat())
        self._store[doc[self._key_field]] = doc
        return doc

    def _build(self, doc: Mapping[str, Any]) -> T:
        doc = copy.deepcopy(dict(doc))
        return self._model.model_validate(doc) if self._model is not None else doc

    def _get_doc(self, id: str) -> dict[str, Any]:
        try:
            return self._store[id]
        except KeyError:
            raise AdapterError(f"Élément {id} introuvable", status_code=404) from None

    def _matches(self, doc: Mapping[str, Any], params: ListParams) -> bool:
        for name in ("status", "priority", "type"):
            wanted = getattr(params, name)
            if wanted is not None and wanted != ALL and doc.get(name) != wanted:
                return False
        for key, wanted in params.extra.items():
            if wanted is not None and doc.get(key) != wanted:
                return False
        if params.search:
            needle = params.search.lower()
            return any(
                needle in str(doc.get(name) or "").lower() for name in self._search_fields
            )
        return True

    async def get_all(self, params: ListParams | None = None) -> ItemsPage[T]:
        params = params or ListParams()
        matched = [doc for doc in reversed(self._store.values()) if self._matches(doc, params)]
        window = matched[params.skip : params.skip + params.limit]
        return ItemsPage(items=[self._build(doc) for doc in window], total=len(matched))

    async def get_by_id(self, id: str) -> T:
        return self._build(self._get_doc(id))

    async def create(self, data: Any) -> T:
        doc = copy.deepcopy(dict(payload_of(data)))
        if doc.get(self._key_field) in self._store:
            raise AdapterError(f"Élément {doc[self._key_field]} existe déjà", status_code=409)
        return self._build(self._insert(doc))

    async def update(self, id: str, data: Any) -> T:
        doc = self._get_doc(id)
        changes = copy.deepcopy(dict(payload_of(data)))
        changes.pop(self._key_field, None)
        doc.update(changes)
        doc["updatedAt"] = datetime.now(timezone.utc).isoformat()
        return self._build(doc)

    async def delete(self, id: str) -> bool:
        self._get_doc(id)
        del self._store[id]
        return True
