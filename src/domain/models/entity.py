"""Base entity model and key-field lookup.

Every resource the console manages is identified by a single key field,
conventionally the server's ``_id``.  The CRUD layer never depends on a
concrete entity type: it matches items through key_of(), which works on
pydantic models, plain mappings and arbitrary objects alike.
"""

from __future__ import annotations

from collections.abc import Mapping
from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

DEFAULT_KEY_FIELD = "_id"


class Entity(BaseModel):
    """A server-side document with an opaque string identifier.

    Field names are snake_case in Python and camelCase on the wire.
    Unknown fields are kept (extra="allow") so that server-populated
    attributes survive a round trip through the console.
    """

    model_config = ConfigDict(
        populate_by_name=True,
        extra="allow",
        alias_generator=to_camel,
    )

    id: str = Field(alias="_id")
    created_at: datetime | None = None
    updated_at: datetime | None = None


def key_of(item: Any, key_field: str = DEFAULT_KEY_FIELD) -> Any:
    """Return the key-field value of an item, or None when it has none."""
    if item is None:
        return None
    if isinstance(item, Mapping):
        return item.get(key_field)
    if isinstance(item, BaseModel):
        for name, info in type(item).model_fields.items():
            if info.alias == key_field or name == key_field:
                return getattr(item, name)
        extra = item.model_extra or {}
        if key_field in extra:
            return extra[key_field]
    return getattr(item, key_field, None)


def field_value(item: Any, field: str) -> Any:
    """Look up a display field by wire name or attribute name."""
    if isinstance(item, Mapping):
        return item.get(field)
    if isinstance(item, BaseModel):
        if field in type(item).model_fields:
            return getattr(item, field)
        for name, info in type(item).model_fields.items():
            if info.alias == field:
                return getattr(item, name)
        return (item.model_extra or {}).get(field)
    return getattr(item, field, None)


def payload_of(data: Any) -> Any:
    """Request body for create/update: models are dumped with wire aliases.

    Only fields the caller actually set are sent, so a partial update model
    never overwrites server values with defaults.
    """
    if isinstance(data, BaseModel):
        return data.model_dump(by_alias=True, exclude_unset=True, mode="json")
    return data
