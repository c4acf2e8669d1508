"""A busy-waiting mutual-exclusion lock."""

from __future__ import annotations

import threading
import time


class SpinLock:
    """Lock that spins on a non-blocking test-and-set, yielding now and then."""

    _SPINS_BEFORE_YIELD = 100

    def __init__(self) -> None:
        self._flag = threading.Lock()

    def acquire(self) -> None:
        """Spin until the lock is taken."""
        spins = 0
        while not self._flag.acquire(blocking=False):
            spins += 1
            if spins > self._SPINS_BEFORE_YIELD:
                time.sleep(0)
                spins = 0

    def release(self) -> None:
        """Release the lock; raises RuntimeError if it is not held."""
        self._flag.release()

    def __enter__(self) -> SpinLock:
        self.acquire()
        return self

    def __exit__(self, *args: object) -> None:
        self.release()