"""REST adapters for every platform resource.

Exports HttpResourceAdapter and the get_resources() factory for wiring at
the application boundary.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import httpx

from src.domain.models.resources import (
    Company,
    Equipment,
    Invoice,
    Mission,
    Payment,
    Quote,
    Report,
    ServiceRequest,
    ServiceType,
    User,
)
from src.domain.services.notifier import Notifier

from .adapters import HttpResourceAdapter


@dataclass
class Resources:
    """One adapter per platform resource, all sharing a single AsyncClient."""

    requests: HttpResourceAdapter[ServiceRequest]
    missions: HttpResourceAdapter[Mission]
    quotes: HttpResourceAdapter[Quote]
    invoices: HttpResourceAdapter[Invoice]
    payments: HttpResourceAdapter[Payment]
    reports: HttpResourceAdapter[Report]
    users: HttpResourceAdapter[User]
    companies: HttpResourceAdapter[Company]
    equipments: HttpResourceAdapter[Equipment]
    service_types: HttpResourceAdapter[ServiceType]


# (path, model, collection_key, item_key); service types and payments answer
# with bare lists, and missions and payments send entities as "data" itself.
_ROUTES: dict[str, tuple[str, type[Any], str | None, str | None]] = {
    "requests": ("/requests", ServiceRequest, "requests", "request"),
    "missions": ("/missions", Mission, "missions", None),
    "quotes": ("/quotes", Quote, "quotes", "quote"),
    "invoices": ("/invoices", Invoice, "invoices", "invoice"),
    "payments": ("/payments", Payment, None, None),
    "reports": ("/reports", Report, "reports", "report"),
    "users": ("/users", User, "users", "user"),
    "companies": ("/companies", Company, "companies", "company"),
    "equipments": ("/equipments", Equipment, "equipments", "equipment"),
    "service_types": ("/service-types", ServiceType, None, None),
}


def get_resources(client: httpx.AsyncClient, notifier: Notifier | None = None) -> Resources:
    """Construct all resource adapters bound to the given client.

    Intended for use at screen construction:

        async with create_client() as client:
            resources = get_resources(client, notifier)
            requests = CrudController(resources.requests, notifier)
            await requests.fetch_items(ListParams(status="pending"))
    """
    return Resources(
        **{
            name: HttpResourceAdapter(
                client,
                path,
                model=model,
                collection_key=collection_key,
                item_key=item_key,
                notifier=notifier,
            )
            for name, (path, model, collection_key, item_key) in _ROUTES.items()
        }
    )


__all__ = ["HttpResourceAdapter", "Resources", "get_resources"]
