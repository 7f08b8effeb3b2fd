"""Domain services package."""

from .crud import CrudController, CrudMessages, MessageSet
from .fetch import AsyncCall
from .notifier import LoggingNotifier, Notification, Notifier, RecordingNotifier

__all__ = [
    "AsyncCall",
    "CrudController",
    "CrudMessages",
    "LoggingNotifier",
    "MessageSet",
    "Notification",
    "Notifier",
    "RecordingNotifier",
]
