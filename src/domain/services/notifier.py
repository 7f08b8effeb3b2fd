"""User-facing notification capability.

The CRUD layer reports the outcome of every mutation through a Notifier
passed to it at construction time, instead of a process-wide toast
singleton.  LoggingNotifier is the default; consoles and tests use
RecordingNotifier to inspect what the user would have seen.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, Field

from src.domain.models.enums import NotificationLevel

logger = logging.getLogger(__name__)


class Notification(BaseModel):
    """A single toast-style message shown to the user."""

    model_config = ConfigDict(frozen=True)

    level: NotificationLevel
    message: str
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))


class Notifier(ABC):
    """Sink for success/error messages addressed to the user."""

    @abstractmethod
    def success(self, message: str) -> None:
        """Show a success message."""

    @abstractmethod
    def error(self, message: str) -> None:
        """Show an error message."""


class LoggingNotifier(Notifier):
    """Forward notifications to a logger (info for success, warning for error)."""

    def __init__(self, log: logging.Logger | None = None) -> None:
        self._log = log or logger

    def success(self, message: str) -> None:
        self._log.info(message)

    def error(self, message: str) -> None:
        self._log.warning(message)


class RecordingNotifier(Notifier):
    """Keep every notification in memory, in emission order."""

    def __init__(self) -> None:
        self.notifications: list[Notification] = []

    def success(self, message: str) -> None:
        self.notifications.append(
            Notification(level=NotificationLevel.SUCCESS, message=message)
        )

    def error(self, message: str) -> None:
        self.notifications.append(
            Notification(level=NotificationLevel.ERROR, message=message)
        )

    def messages(self, level: NotificationLevel | None = None) -> list[str]:
        return [
            n.message for n in self.notifications if level is None or n.level == level
        ]

    def clear(self) -> None:
        self.notifications.clear()
