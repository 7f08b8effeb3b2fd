"""List query parameters.

ListParams replaces the open filter bag passed to list endpoints.  The
recognised keys are the ones every list route of the platform API accepts;
anything resource-specific (assignedTechnician, departement, ...) goes in
extra and is forwarded verbatim.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from .enums import SortDirection

# Filter value the API treats as "no filter" for enumerated fields.
ALL = "all"

_ENUM_FILTERS = ("status", "priority", "type")


class ListParams(BaseModel):
    """Filter and pagination window for get_all().

    page is 1-based.  limit is capped at 100, the largest page size the
    table's limit selector offers.
    """

    model_config = ConfigDict(frozen=True)

    page: int = Field(default=1, ge=1)
    limit: int = Field(default=10, ge=1, le=100)
    status: str | None = None
    priority: str | None = None
    type: str | None = None
    search: str | None = None
    sort: str | None = None
    order: SortDirection | None = None
    extra: dict[str, Any] = Field(default_factory=dict)

    @property
    def skip(self) -> int:
        return (self.page - 1) * self.limit

    def to_query(self) -> dict[str, Any]:
        """Flatten into query-string parameters.

        None values, empty search terms and the "all" sentinel on enumerated
        filters are dropped.
        """
        query: dict[str, Any] = {"page": self.page, "limit": self.limit}
        for name in _ENUM_FILTERS:
            value = getattr(self, name)
            if value is not None and value != ALL:
                query[name] = getattr(value, "value", value)
        if self.search:
            query["search"] = self.search
        if self.sort:
            query["sort"] = self.sort
        if self.order is not None:
            query["order"] = self.order.value
        for key, value in self.extra.items():
            if value is not None:
                query[key] = value
        return query

    def with_page(self, page: int) -> ListParams:
        return ListParams.model_validate({**self.model_dump(), "page": page})

    def with_search(self, search: str) -> ListParams:
        """New search term; resets to the first page."""
        return ListParams.model_validate(
            {**self.model_dump(), "search": search or None, "page": 1}
        )

    def with_limit(self, limit: int) -> ListParams:
        """New page size; resets to the first page."""
        return ListParams.model_validate(
            {**self.model_dump(), "limit": limit, "page": 1}
        )
