"""Generic resource adapter interface.

ResourceAdapter[T, C, U] is the boundary between the CRUD layer and the
network.  Concrete implementations live in src/infrastructure/ and are
wired at the application boundary via get_resources().

Design notes:
  - All methods are async; the CRUD layer awaits them and nothing else.
  - T is the entity type, C the creation payload, U the update payload.
  - get_all() returns an ItemsPage whose total is the server-side count
    for the filter, independent of len(items).
  - Implementations translate every failure into an exception (normally
    AdapterError); they never return error values.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from src.domain.models.page import ItemsPage
from src.domain.models.params import ListParams

T = TypeVar("T")
C = TypeVar("C")
U = TypeVar("U")


class ResourceAdapter(ABC, Generic[T, C, U]):
    """Abstract five-method CRUD interface for one platform resource."""

    @abstractmethod
    async def get_all(self, params: ListParams | None = None) -> ItemsPage[T]:
        """Return one page of entities matching params plus the filter's total."""

    @abstractmethod
    async def get_by_id(self, id: str) -> T:
        """Return the entity with the given key.  Raises when not found."""

    @abstractmethod
    async def create(self, data: C) -> T:
        """Create an entity and return it as stored by the server."""

    @abstractmethod
    async def update(self, id: str, data: U) -> T:
        """Apply a partial update and return the updated entity."""

    @abstractmethod
    async def delete(self, id: str) -> bool:
        """Delete the entity.  The returned flag is informational only."""
