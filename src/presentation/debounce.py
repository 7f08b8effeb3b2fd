"""Debounced delivery of search input."""

from __future__ import annotations

import asyncio
import inspect
import logging
from collections.abc import Awaitable, Callable

logger = logging.getLogger(__name__)

DEFAULT_SEARCH_DELAY = 0.3


class SearchDebouncer:
    """Deliver the latest search term once input has been quiet for delay seconds.

    Every push() restarts the timer, so a burst of keystrokes produces a
    single callback with the final term.  The callback may be a plain
    function or a coroutine function.  push() must be called from inside a
    running event loop.
    """

    def __init__(
        self,
        callback: Callable[[str], Awaitable[object] | object],
        delay: float = DEFAULT_SEARCH_DELAY,
    ) -> None:
        if delay < 0:
            raise ValueError(f"delay must be non-negative, got {delay}")
        self._callback = callback
        self._delay = delay
        self._task: asyncio.Task[None] | None = None

    @property
    def delay(self) -> float:
        return self._delay

    @property
    def pending(self) -> bool:
        return self._task is not None and not self._task.done()

    def push(self, term: str) -> None:
        self.cancel()
        self._task = asyncio.get_running_loop().create_task(self._deliver(term))
        self._task.add_done_callback(self._log_failure)

    @staticmethod
    def _log_failure(task: asyncio.Task[None]) -> None:
        if task.cancelled():
            return
        exc = task.exception()
        if exc is not None:
            logger.error("Search callback failed", exc_info=exc)

    def cancel(self) -> None:
        if self.pending:
            self._task.cancel()

    async def wait(self) -> None:
        """Wait for the scheduled delivery, if any, to complete."""
        task = self._task
        if task is None:
            return
        try:
            await task
        except asyncio.CancelledError:
            if not task.cancelled():
                raise

    async def _deliver(self, term: str) -> None:
        await asyncio.sleep(self._delay)
        logger.debug("Search settled on %r", term)
        result = self._callback(term)
        if inspect.isawaitable(result):
            await result
