"""Client-side rate limiting for the Riot API."""
import asyncio
import logging
import time
from collections import deque
from typing import Deque, Dict, Tuple

logger = logging.getLogger(__name__)


class RateLimiter:
    """
    Sliding-window limiter with two windows, matching a personal API key:
      - Short : N requests per 1 second
      - Long  : N requests per 120 seconds
    ``acquire`` suspends the caller until both windows have room.
    """

    def __init__(
        self,
        requests_per_1_sec: int = 18,
        requests_per_2_min: int = 90,
    ):
        self.requests_per_1_sec = requests_per_1_sec
        self.requests_per_2_min = requests_per_2_min

        self._times_1s:   Deque[float] = deque()
        self._times_2min: Deque[float] = deque()
        self._lock = asyncio.Lock()

    def _evict(self, now: float) -> None:
        while self._times_1s and now - self._times_1s[0] > 1.0:
            self._times_1s.popleft()
        while self._times_2min and now - self._times_2min[0] > 120.0:
            self._times_2min.popleft()

    async def acquire(self) -> None:
        async with self._lock:
            while True:
                now = time.monotonic()
                self._evict(now)

                ok_1s   = len(self._times_1s)   < self.requests_per_1_sec
                ok_2min = len(self._times_2min) < self.requests_per_2_min

                if ok_1s and ok_2min:
                    self._times_1s.append(now)
                    self._times_2min.append(now)
                    return

                wait = 0.05
                if not ok_1s and self._times_1s:
                    wait = max(wait, 1.0   - (now - self._times_1s[0])   + 0.01)
                if not ok_2min and self._times_2min:
                    wait = max(wait, 120.0 - (now - self._times_2min[0]) + 0.01)

                logger.debug(f"Rate limit, waiting {wait:.2f}s")
                await asyncio.sleep(wait)

    def get_status(self) -> Tuple[int, int, int, int]:
        now = time.monotonic()
        used_1s   = sum(1 for t in self._times_1s   if now - t <= 1.0)
        used_2min = sum(1 for t in self._times_2min if now - t <= 120.0)
        return used_1s, self.requests_per_1_sec, used_2min, self.requests_per_2_min


class HostRateLimiter:
    """One ``RateLimiter`` per API host; Riot counts requests per region."""

    def __init__(self, requests_per_1_sec: int = 18, requests_per_2_min: int = 90):
        self.requests_per_1_sec = requests_per_1_sec
        self.requests_per_2_min = requests_per_2_min
        self.limiters: Dict[str, RateLimiter] = {}

    def for_host(self, host: str) -> RateLimiter:
        limiter = self.limiters.get(host)
        if limiter is None:
            limiter = RateLimiter(self.requests_per_1_sec, self.requests_per_2_min)
            self.limiters[host] = limiter
        return limiter

    async def acquire(self, host: str) -> None:
        await self.for_host(host).acquire()
