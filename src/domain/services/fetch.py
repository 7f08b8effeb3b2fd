"""Generic async call wrapper with observable loading/error/result state."""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import Generic, TypeVar

T = TypeVar("T")


class AsyncCall(Generic[T]):
    """Wrap one coroutine function and track the state of its invocations.

    execute() clears error and marks the call as loading, stores the result
    in data on success, stores the exception in error and re-raises it on
    failure.  The result is passed through untouched.

    There is no retry, timeout or cancellation.  Overlapping invocations
    all write data/error when they settle, so the last one to resolve wins
    regardless of call order.  is_loading stays true while any invocation
    is still pending.
    """

    def __init__(self, func: Callable[..., Awaitable[T]]) -> None:
        self._func = func
        self._pending = 0
        self.data: T | None = None
        self.error: Exception | None = None

    @property
    def is_loading(self) -> bool:
        return self._pending > 0

    async def execute(self, *args, **kwargs) -> T:
        self._pending += 1
        self.error = None
        try:
            result = await self._func(*args, **kwargs)
            self.data = result
            return result
        except Exception as exc:
            self.error = exc
            raise
        finally:
            self._pending -= 1
