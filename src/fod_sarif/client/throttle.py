# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Sliding-window throttle for outbound FoD requests."""

from __future__ import annotations

import asyncio
import logging
import time
from collections import deque
from collections.abc import Awaitable, Callable

logger = logging.getLogger("fod_sarif.client.throttle")


class RateLimiter:
    """Limit request starts per sliding window and requests in flight.

    At most *rate* acquisitions may begin within any window of *rate_per*
    seconds, and at most *concurrent* holders exist at once. Waiters queue on
    a FIFO lock, so no caller is starved.

    Parameters
    ----------
    rate:
        Requests allowed to start per window.
    rate_per:
        Window length in seconds.
    concurrent:
        Maximum number of requests in flight.
    clock, sleep:
        Time source and sleeper; injectable for tests.
    """

    def __init__(
        self,
        rate: int = 2,
        rate_per: float = 4.0,
        concurrent: int = 1,
        *,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], Awaitable[object]] = asyncio.sleep,
    ) -> None:
        if rate < 1 or concurrent < 1 or rate_per <= 0:
            msg = "rate and concurrent must be >= 1 and rate_per > 0"
            raise ValueError(msg)
        self.rate = rate
        self.rate_per = rate_per
        self.concurrent = concurrent
        self._clock = clock
        self._sleep = sleep
        self._slots = asyncio.Semaphore(concurrent)
        self._gate = asyncio.Lock()
        self._starts: deque[float] = deque()

    async def acquire(self) -> None:
        """Wait for a free slot and a free start in the current window."""
        await self._slots.acquire()
        try:
            async with self._gate:
                await self._wait_for_window()
                self._starts.append(self._clock())
        except BaseException:
            self._slots.release()
            raise

    def release(self) -> None:
        self._slots.release()

    async def _wait_for_window(self) -> None:
        while True:
            now = self._clock()
            while self._starts and now - self._starts[0] >= self.rate_per:
                self._starts.popleft()
            if len(self._starts) < self.rate:
                return
            delay = self.rate_per - (now - self._starts[0])
            logger.debug("Throttling detail request for %.2fs", delay)
            await self._sleep(delay)

    async def __aenter__(self) -> RateLimiter:
        await self.acquire()
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        self.release()
