"""
Fixed-interval request limiter.

Spaces consecutive requests at least 1/qps seconds apart. There is no
burst allowance: every request after the first waits out the remainder
of the interval.

Dependencies: time (stdlib)
System role: Outbound backpressure for bulk submissions
"""

import time
from typing import Callable


class RateLimiter:
    """Block until the minimum interval since the previous request has passed."""

    def __init__(
        self,
        qps: float,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        """
        Initialize the limiter.

        Args:
            qps: Maximum requests per second
            clock: Monotonic clock in seconds
            sleep: Blocking sleep in seconds

        Raises:
            ValueError: When qps is not positive
        """
        if qps <= 0:
            raise ValueError("qps must be positive")

        self.min_interval = 1.0 / qps
        self._clock = clock
        self._sleep = sleep
        self._last_request: float | None = None
        self.request_count = 0

    def wait(self) -> float:
        """
        Sleep if the previous request was too recent, then record this one.

        Returns:
            float: Seconds slept
        """
        slept = 0.0
        if self._last_request is not None:
            elapsed = self._clock() - self._last_request
            if elapsed < self.min_interval:
                slept = self.min_interval - elapsed
                self._sleep(slept)

        self._last_request = self._clock()
        self.request_count += 1
        return slept
