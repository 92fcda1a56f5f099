"""Concurrency limiter for outgoing requests.

Architecture:
    A counter of running units plus a FIFO queue of waiters. A released slot
    is handed directly to the oldest waiter, so a newcomer can never overtake
    a unit that is already queued and the running count never exceeds the
    limit.

    Slots are held through ``slot()`` (async context manager) or ``run()``,
    which release on every exit path: success, error and cancellation. A
    waiter cancelled after a slot was handed to it passes the slot on.

    The limiter belongs to one client instance and is only used from that
    instance's event loop; no lock is needed because state changes happen
    between await points.
"""

from __future__ import annotations

import asyncio
from collections import deque
from collections.abc import AsyncIterator, Awaitable, Callable
from contextlib import asynccontextmanager
from typing import TypeVar

T = TypeVar("T")


class ConcurrencyLimiter:
    """Run at most ``limit`` units of work at once, admitting in FIFO order."""

    def __init__(self, limit: int) -> None:
        if limit < 1:
            raise ValueError("Concurrency limit must be a positive integer")
        self._limit = limit
        self._active = 0
        self._waiters: deque[asyncio.Future[None]] = deque()

    @property
    def limit(self) -> int:
        return self._limit

    @property
    def active_count(self) -> int:
        """Units currently holding a slot."""
        return self._active

    @property
    def pending_count(self) -> int:
        """Units queued for a slot."""
        return sum(1 for waiter in self._waiters if not waiter.done())

    async def acquire(self) -> None:
        """Wait for a slot."""
        if self._active < self._limit and not self._waiters:
            self._active += 1
            return

        waiter: asyncio.Future[None] = asyncio.get_running_loop().create_future()
        self._waiters.append(waiter)
        try:
            await waiter
        except asyncio.CancelledError:
            if waiter.done() and not waiter.cancelled():
                # Slot was handed over just before cancellation
                self.release()
            else:
                self._remove_waiter(waiter)
            raise

    def release(self) -> None:
        """Give the slot to the oldest waiter, or free it."""
        while self._waiters:
            waiter = self._waiters.popleft()
            if not waiter.done():
                waiter.set_result(None)
                return
        self._active -= 1

    @asynccontextmanager
    async def slot(self) -> AsyncIterator[None]:
        """Hold a slot for the duration of the block."""
        await self.acquire()
        try:
            yield
        finally:
            self.release()

    async def run(self, func: Callable[[], Awaitable[T]]) -> T:
        """Run ``func()`` while holding a slot."""
        async with self.slot():
            return await func()

    def _remove_waiter(self, waiter: asyncio.Future[None]) -> None:
        try:
            self._waiters.remove(waiter)
        except ValueError:
            pass
