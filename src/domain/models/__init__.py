"""Domain model package.

All domain objects are pure Python / Pydantic models with no HTTP or
presentation dependencies.  Import from this package to avoid coupling
application code to individual module paths.
"""

from .entity import DEFAULT_KEY_FIELD, Entity, field_value, key_of, payload_of
from .enums import (
    InterventionType,
    InvoiceStatus,
    MissionStatus,
    NotificationLevel,
    PaymentStatus,
    Priority,
    QuoteStatus,
    ReportStatus,
    RequestStatus,
    SortDirection,
    UserRole,
)
from .page import ItemsPage
from .params import ALL, ListParams
from .resources import (
    Address,
    Company,
    Equipment,
    Invoice,
    Mission,
    Payment,
    Quote,
    QuoteLine,
    Report,
    ServiceRequest,
    ServiceType,
    User,
)

__all__ = [
    # enums
    "InterventionType",
    "InvoiceStatus",
    "MissionStatus",
    "NotificationLevel",
    "PaymentStatus",
    "Priority",
    "QuoteStatus",
    "ReportStatus",
    "RequestStatus",
    "SortDirection",
    "UserRole",
    # entity
    "DEFAULT_KEY_FIELD",
    "Entity",
    "field_value",
    "key_of",
    "payload_of",
    # list window
    "ALL",
    "ItemsPage",
    "ListParams",
    # resources
    "Address",
    "Company",
    "Equipment",
    "Invoice",
    "Mission",
    "Payment",
    "Quote",
    "QuoteLine",
    "Report",
    "ServiceRequest",
    "ServiceType",
    "User",
]
