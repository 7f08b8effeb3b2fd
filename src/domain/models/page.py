"""Normalised list response returned by every resource adapter."""

from __future__ import annotations

from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field, model_validator

T = TypeVar("T")


class ItemsPage(BaseModel, Generic[T]):
    """One page of entities plus the server's count for the whole filter.

    total is the server-side count, not len(items).  When the server does
    not report a count, total falls back to the number of items received.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    items: list[T] = Field(default_factory=list)
    total: int | None = Field(default=None, ge=0)

    @model_validator(mode="after")
    def _default_total(self) -> ItemsPage[T]:
        if self.total is None:
            self.total = len(self.items)
        return self
