"""
Minimum-interval pacing for outbound provider requests.

Nominatim's usage policy allows at most one request per second. A single
`RateLimiter` is shared by every request a geocoder makes during a run, so the
spacing holds across all records, not just within one.
"""

import logging
import time
from typing import Callable, Optional

logger = logging.getLogger(__name__)


class RateLimiter:
    """
    Blocks the caller until `min_interval` seconds have passed since the
    previous call started.

    Usage:
        limiter = RateLimiter(1.0)
        limiter.wait()
        requests.get(...)
    """

    def __init__(
        self,
        min_interval: float = 1.0,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self.min_interval = min_interval
        self._clock = clock
        self._sleep = sleep
        self._last_request: Optional[float] = None

    @property
    def last_request(self) -> Optional[float]:
        """Clock value at the start of the most recent call, None before the first."""
        return self._last_request

    def wait(self) -> float:
        """
        Sleep for whatever remains of the interval, then mark a new call start.

        Returns:
            Seconds slept (0.0 if no wait was needed)
        """
        slept = 0.0

        if self._last_request is not None:
            elapsed = self._clock() - self._last_request
            if elapsed < self.min_interval:
                slept = self.min_interval - elapsed
                logger.debug(f"Rate limit: sleeping {slept:.3f}s")
                self._sleep(slept)

        self._last_request = self._clock()
        return slept
