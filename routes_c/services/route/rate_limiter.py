"""
Rate limiter - minimum spacing between directions requests
"""
import asyncio
import time
from typing import Awaitable, Callable, Optional

from routes_c.config import settings


class RateLimiter:
    """Suspends callers until `min_interval` seconds have passed since the last request.

    The clock and sleep function are injectable so tests can drive time
    without waiting.
    """

    def __init__(
        self,
        min_interval: Optional[float] = None,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ):
        self.min_interval = (
            settings.min_request_interval_s if min_interval is None else min_interval
        )
        self._clock = clock
        self._sleep = sleep
        self._lock = asyncio.Lock()
        self.last_request_time: Optional[float] = None

    async def acquire(self) -> None:
        """Wait for the gate, then stamp the request time."""
        async with self._lock:
            if self.last_request_time is not None:
                elapsed = self._clock() - self.last_request_time
                if elapsed < self.min_interval:
                    await self._sleep(self.min_interval - elapsed)
            self.last_request_time = self._clock()


# Process-wide limiter shared by every generation
rate_limiter = RateLimiter()
