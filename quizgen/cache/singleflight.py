"""In-flight request coalescing ("singleflight").

At most one computation per key runs at a time. Concurrent callers for the
same key await the same task and observe the same result or exception.
"""

import asyncio
import logging
from typing import Awaitable, Callable, Generic, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


class SingleFlight(Generic[T]):
    """Coalesces concurrent async computations by key. Event-loop local."""

    def __init__(self, name: str = "singleflight"):
        self.name = name
        self._in_flight: dict[str, asyncio.Task[T]] = {}

    async def run_exclusive(self, key: str, compute: Callable[[], Awaitable[T]]) -> T:
        """Run ``compute`` unless a computation for ``key`` is already under way.

        The shared task is shielded: a caller that stops waiting does not
        cancel the computation for the others.
        """
        task = self._in_flight.get(key)
        if task is not None:
            logger.info("Joining in-flight request | %s | key=%s", self.name, key[:20])
        else:
            task = asyncio.ensure_future(self._execute(key, compute))
            task.add_done_callback(self._retrieve_exception)
            self._in_flight[key] = task
        return await asyncio.shield(task)

    async def _execute(self, key: str, compute: Callable[[], Awaitable[T]]) -> T:
        try:
            return await compute()
        finally:
            if self._in_flight.get(key) is asyncio.current_task():
                del self._in_flight[key]

    def _retrieve_exception(self, task: asyncio.Task):
        # Marks the exception as retrieved when every waiter has gone away.
        if not task.cancelled() and task.exception() is not None:
            logger.debug("In-flight computation failed | %s | %s", self.name, str(task.exception())[:200])

    def in_flight(self, key: str) -> bool:
        return key in self._in_flight

    def __len__(self) -> int:
        return len(self._in_flight)
