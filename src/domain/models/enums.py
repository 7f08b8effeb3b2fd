"""Domain enumerations for the field-service console.

All string-valued enums use str mixin so they serialize cleanly to JSON
query strings and remain comparable to the plain strings the REST API
returns (Pydantic default behaviour).
"""

from enum import Enum


class InterventionType(str, Enum):
    INSTALLATION = "installation"
    MAINTENANCE = "maintenance"
    REPAIR = "repair"
    DIAGNOSTIC = "diagnostic"
    EMERGENCY = "emergency"


class Priority(str, Enum):
    LOW = "low"
    NORMAL = "normal"
    HIGH = "high"
    URGENT = "urgent"


class RequestStatus(str, Enum):
    PENDING = "pending"
    ASSIGNED = "assigned"
    IN_PROGRESS = "in-progress"
    COMPLETED = "completed"
    CANCELLED = "cancelled"
    QUOTED = "quoted"


class MissionStatus(str, Enum):
    PENDING = "pending"
    ACCEPTED = "accepted"
    IN_PROGRESS = "in-progress"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class QuoteStatus(str, Enum):
    DRAFT = "draft"
    SENT = "sent"
    ACCEPTED = "accepted"
    REJECTED = "rejected"
    EXPIRED = "expired"
    MISSION_ASSIGNED = "mission_assigned"


class InvoiceStatus(str, Enum):
    PENDING = "pending"
    PAID = "paid"
    CANCELLED = "cancelled"
    OVERDUE = "overdue"


class PaymentStatus(str, Enum):
    PENDING = "pending"
    COMPLETED = "completed"
    FAILED = "failed"
    REFUNDED = "refunded"


class ReportStatus(str, Enum):
    DRAFT = "draft"
    PENDING = "pending"
    COMPLETED = "completed"
    SENT = "sent"


class UserRole(str, Enum):
    ADMIN = "admin"
    TECHNICIAN = "technician"
    CLIENT = "client"


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"

    @property
    def indicator(self) -> str:
        """Header arrow shown next to the sorted column."""
        return {
            SortDirection.ASC: "↑",
            SortDirection.DESC: "↓",
        }[self]

    def flipped(self) -> "SortDirection":
        return SortDirection.DESC if self is SortDirection.ASC else SortDirection.ASC


class NotificationLevel(str, Enum):
    SUCCESS = "success"
    ERROR = "error"
