"""httpx implementation of ResourceAdapter for the platform REST API.

Every endpoint wraps its payload in an envelope:

    {"success": true, "data": {"<collection>": [...], "pagination": {"total": n, ...}}}
    {"success": true, "data": {"<item>": {...}}}

Some routes return the bare list or entity directly under "data", and a
few put pagination at the top level; _parse_page() and _parse_item()
accept all of these shapes.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, TypeVar

import httpx
from pydantic import ValidationError

from src.domain.adapters.base import ResourceAdapter
from src.domain.adapters.errors import AdapterError
from src.domain.models.entity import payload_of
from src.domain.models.page import ItemsPage
from src.domain.models.params import ListParams
from src.domain.services.notifier import Notifier

logger = logging.getLogger(__name__)

T = TypeVar("T")

SESSION_EXPIRED_MESSAGE = "Votre session a expiré. Veuillez vous reconnecter."
SERVER_ERROR_MESSAGE = "Une erreur serveur est survenue. Veuillez réessayer plus tard."
CONNECTION_ERROR_MESSAGE = (
    "Problème de connexion au serveur. Vérifiez votre connexion internet."
)
INVALID_RESPONSE_MESSAGE = "Réponse invalide du serveur"


class HttpResourceAdapter(ResourceAdapter[T, Any, Any]):
    """CRUD adapter for one REST collection.

    path            collection path relative to the client's base_url
    model           pydantic model each entity is validated into; None
                    keeps raw dicts
    collection_key  key of the entity list inside "data" (None when
                    "data" is the list itself)
    item_key        key of the single entity inside "data" (None when
                    "data" is the entity itself)
    notifier        receives session/server/connection messages, the
                    same ones the web client's interceptors showed
    """

    def __init__(
        self,
        client: httpx.AsyncClient,
        path: str,
        model: type[T] | None = None,
        collection_key: str | None = None,
        item_key: str | None = None,
        notifier: Notifier | None = None,
    ) -> None:
        self._client = client
        self._path = "/" + path.strip("/")
        self._model = model
        self._collection_key = collection_key
        self._item_key = item_key
        self._notifier = notifier

    @property
    def path(self) -> str:
        return self._path

    def _url(self, id: str | None = None) -> str:
        return self._path if id is None else f"{self._path}/{id}"

    # --- transport ---

    async def _request(self, method: str, url: str, **kwargs: Any) -> dict[str, Any]:
        try:
            response = await self._client.request(method, url, **kwargs)
        except httpx.TransportError as exc:
            logger.warning("%s %s failed: %s", method, url, exc)
            self._notify(CONNECTION_ERROR_MESSAGE)
            raise AdapterError(CONNECTION_ERROR_MESSAGE) from exc

        if response.is_error:
            message = self._error_message(response)
            logger.warning("%s %s -> %d %s", method, url, response.status_code, message)
            if response.status_code == 401:
                self._notify(SESSION_EXPIRED_MESSAGE)
            elif response.status_code >= 500:
                self._notify(SERVER_ERROR_MESSAGE)
            raise AdapterError(message, status_code=response.status_code)

        if not response.content:
            return {}
        try:
            body = response.json()
        except ValueError as exc:
            raise AdapterError(INVALID_RESPONSE_MESSAGE, response.status_code) from exc
        if not isinstance(body, dict):
            return {"data": body}
        return body

    @staticmethod
    def _error_message(response: httpx.Response) -> str:
        try:
            body = response.json()
        except ValueError:
            body = None
        if isinstance(body, Mapping) and body.get("message"):
            return str(body["message"])
        return f"HTTP {response.status_code}"

    def _notify(self, message: str) -> None:
        if self._notifier is not None:
            self._notifier.error(message)

    # --- envelope parsing ---

    def _validate(self, raw: Any) -> T:
        if self._model is None or raw is None:
            return raw
        try:
            return self._model.model_validate(raw)
        except ValidationError as exc:
            raise AdapterError(
                f"{INVALID_RESPONSE_MESSAGE}: {exc.error_count()} erreur(s)"
            ) from exc

    def _parse_page(self, body: Mapping[str, Any]) -> ItemsPage[T]:
        data = body.get("data", body)
        pagination = body.get("pagination")
        if isinstance(data, list):
            raw_items = data
        else:
            data = data or {}
            if not isinstance(data, Mapping):
                raise AdapterError(INVALID_RESPONSE_MESSAGE)
            if self._collection_key is not None:
                raw_items = data.get(self._collection_key) or []
            else:
                raw_items = data.get("items") or []
            pagination = data.get("pagination") or pagination or {"total": data.get("total")}
        total = pagination.get("total") if isinstance(pagination, Mapping) else None
        return ItemsPage(items=[self._validate(raw) for raw in raw_items], total=total)

    def _parse_item(self, body: Mapping[str, Any]) -> T | None:
        data = body.get("data")
        # Some routes wrap the entity under item_key, others send it as "data".
        if self._item_key is not None and isinstance(data, Mapping) and self._item_key in data:
            data = data[self._item_key]
        if data and not isinstance(data, Mapping):
            raise AdapterError(INVALID_RESPONSE_MESSAGE)
        return self._validate(data) if data else None

    # --- ResourceAdapter ---

    async def get_all(self, params: ListParams | None = None) -> ItemsPage[T]:
        query = (params or ListParams()).to_query()
        body = await self._request("GET", self._url(), params=query)
        return self._parse_page(body)

    async def get_by_id(self, id: str) -> T:
        body = await self._request("GET", self._url(id))
        item = self._parse_item(body)
        if item is None:
            raise AdapterError(f"{self._path}/{id} introuvable", status_code=404)
        return item

    async def create(self, data: Any) -> T:
        body = await self._request("POST", self._url(), json=payload_of(data))
        item = self._parse_item(body)
        if item is None:
            raise AdapterError(INVALID_RESPONSE_MESSAGE)
        return item

    async def update(self, id: str, data: Any) -> T:
        body = await self._request("PUT", self._url(id), json=payload_of(data))
        item = self._parse_item(body)
        if item is None:
            # Some routes only answer {"success": true}; re-read the entity.
            return await self.get_by_id(id)
        return item

    async def delete(self, id: str) -> bool:
        body = await self._request("DELETE", self._url(id))
        return bool(body.get("success", True))
