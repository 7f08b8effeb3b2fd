"""Platform resource models.

These are the entities the admin, technician and client screens list and
edit through CrudController.  Reference fields (client, technician, service
type, ...) hold either the referenced id or, when the API populated them,
the embedded document as a plain dict.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .entity import Entity
from .enums import (
    InterventionType,
    InvoiceStatus,
    MissionStatus,
    PaymentStatus,
    Priority,
    QuoteStatus,
    ReportStatus,
    RequestStatus,
    UserRole,
)

Reference = str | dict[str, Any] | None


class Address(BaseModel):
    model_config = ConfigDict(extra="allow", populate_by_name=True)

    full: str | None = None
    street: str | None = None
    city: str | None = None
    postal_code: str | None = Field(default=None, alias="postalCode")
    country: str | None = None

    def display(self) -> str:
        if self.full:
            return self.full
        parts = [self.street, " ".join(p for p in (self.postal_code, self.city) if p)]
        return ", ".join(p for p in parts if p)


class ServiceRequest(Entity):
    """A client's intervention request (installation, repair, ...)."""

    reference: str | None = None
    title: str
    description: str = ""
    type: InterventionType | None = None
    service_type_id: Reference = None
    priority: Priority = Priority.NORMAL
    status: RequestStatus = RequestStatus.PENDING
    address: Address | None = None
    contact_phone: str | None = None
    preferred_date: datetime | None = None
    client_id: Reference = None
    assigned_technician: Reference = None


class Mission(Entity):
    """Scheduled work assigned to a technician, usually from an accepted quote."""

    mission_number: str | None = None
    status: MissionStatus = MissionStatus.PENDING
    priority: Priority = Priority.NORMAL
    scheduled_date: datetime | None = None
    address: str | None = None
    details: str | None = None
    client_id: Reference = None
    technician_id: Reference = None
    quote_id: Reference = None
    invoice_id: Reference = None


class QuoteLine(BaseModel):
    model_config = ConfigDict(extra="allow", populate_by_name=True)

    description: str
    quantity: float = Field(default=1, ge=0)
    unit_price: float = Field(default=0, ge=0, alias="unitPrice")

    @property
    def amount(self) -> float:
        return self.quantity * self.unit_price


class Quote(Entity):
    """A priced proposal sent to a client.

    subtotal/tax_amount/total are server-computed; when lines are present
    and total is missing, total is derived from the lines and tax rate.
    """

    reference: str | None = None
    title: str
    description: str = ""
    status: QuoteStatus = QuoteStatus.DRAFT
    items: list[QuoteLine] = Field(default_factory=list)
    subtotal: float = 0
    tax_rate: float = 20
    tax_amount: float = 0
    total: float = 0
    valid_until: datetime | None = None
    client_id: Reference = None
    technician_id: Reference = None
    request_id: Reference = None

    @model_validator(mode="after")
    def _derive_totals(self) -> Quote:
        if self.items and not self.total:
            self.subtotal = sum(line.amount for line in self.items)
            self.tax_amount = round(self.subtotal * self.tax_rate / 100, 2)
            self.total = round(self.subtotal + self.tax_amount, 2)
        return self


class Invoice(Entity):
    invoice_number: str
    client: Reference = None
    company: Reference = None
    issue_date: datetime | None = None
    due_date: datetime | None = None
    total_amount: float = Field(default=0, ge=0)
    status: InvoiceStatus = InvoiceStatus.PENDING
    payment_status: str = "unpaid"


class Payment(Entity):
    quote_id: Reference = None
    amount: float = Field(ge=0)
    payment_date: datetime | None = None
    status: PaymentStatus = PaymentStatus.PENDING
    payment_method: str | None = None
    transaction_id: str | None = None


class Report(Entity):
    """Technician's intervention report attached to a mission."""

    mission: Reference = None
    intervention_reference: str | None = None
    type: str | None = None
    date: datetime | None = None
    work_performed: str | None = None
    notes: str | None = None
    status: ReportStatus = ReportStatus.DRAFT


class User(Entity):
    email: str
    first_name: str = ""
    last_name: str = ""
    phone: str | None = None
    role: UserRole = UserRole.CLIENT
    is_active: bool = True
    company: Reference = None

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()


class Company(Entity):
    name: str
    type: str = "other"
    siret: str | None = None
    is_active: bool = True
    clients_count: int = 0
    installations_count: int = 0
    total_revenue: float = 0


class Equipment(Entity):
    name: str
    description: str | None = None
    price: float = Field(default=0, ge=0)
    quantity: int = Field(default=0, ge=0)
    is_active: bool = True


class ServiceType(Entity):
    name: str
    category: InterventionType | None = None
    description: str | None = None
    image_url: str | None = None
