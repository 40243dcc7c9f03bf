"""
Per-account nonce generation.

The venue rejects any request whose nonce is not greater than the last one
it saw for the API key, so the counter must never repeat or go backwards.
"""

import threading
import time
from typing import Callable, Optional


class NonceGenerator:
    """
    Thread-safe monotonic nonce counter.

    Seeded from the wall clock (nanoseconds since epoch) on first use, then
    incremented by one per call. Seed and increment run under the same lock
    so concurrent callers sharing an account never observe the same value.

    Not monotonic across process restarts if the system clock moves backward.
    """

    def __init__(self, clock: Callable[[], int] = time.time_ns):
        self._clock = clock
        self._value: Optional[int] = None
        self._lock = threading.Lock()

    def next(self) -> int:
        """
        Issue the next nonce.

        Returns:
            Clock seed on first call, previous value + 1 afterwards
        """
        with self._lock:
            if self._value is None:
                self._value = int(self._clock())
            else:
                self._value += 1
            return self._value

    def peek(self) -> Optional[int]:
        """Last issued nonce, or None if unseeded."""
        with self._lock:
            return self._value
