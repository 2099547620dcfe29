"""A token bucket for rate limiting."""

from __future__ import annotations

import threading
import time
from typing import Callable

__all__ = ["TokenBucket"]


class TokenBucket:
    """Holds up to ``capacity`` whole tokens, refilled at a steady rate.

    Tokens are added in whole units; time that has not yet earned a whole
    token keeps counting towards the next one.
    """

    def __init__(
        self,
        capacity: int,
        tokens_per_second: float,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._capacity = capacity
        self._rate = tokens_per_second
        self._clock = clock
        self._tokens = capacity
        self._last_refill = clock()
        self._lock = threading.Lock()

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def tokens_per_second(self) -> float:
        return self._rate

    @property
    def current_tokens(self) -> int:
        """Tokens held as of the last refill."""
        with self._lock:
            return self._tokens

    def try_consume(self, tokens: int = 1) -> bool:
        """Take the tokens if enough are available; report whether it did."""
        with self._lock:
            self._refill()
            if self._tokens < tokens:
                return False
            self._tokens -= tokens
            return True

    def _refill(self) -> None:
        now = self._clock()
        new_tokens = int((now - self._last_refill) * self._rate)
        if new_tokens > 0:
            self._tokens = min(self._tokens + new_tokens, self._capacity)
            self._last_refill = now