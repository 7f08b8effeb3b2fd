"""Errors raised by resource adapters."""

from __future__ import annotations


class AdapterError(Exception):
    """A resource call was rejected.

    Covers transport failures, non-2xx responses and undecodable bodies
    alike.  status_code is None when no HTTP response was received.
    """

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code

    @property
    def is_not_found(self) -> bool:
        return self.status_code == 404

    def __repr__(self) -> str:
        return f"AdapterError({self.message!r}, status_code={self.status_code!r})"
