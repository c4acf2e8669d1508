"""Lock-protected ring buffer with optional blocking push and pop."""

from __future__ import annotations

import threading
import time
from typing import Generic, TypeVar

from .ring_buffer import BufferEmpty, BufferFull

T = TypeVar("T")


class RingBufferEx(Generic[T]):
    """Ring buffer holding up to ``capacity`` items, safe for many threads.

    Blocking calls spin, yielding between attempts, until they succeed.
    """

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self._slots: list[T | None] = [None] * (capacity + 1)
        self._head = 0
        self._tail = 0
        self._lock = threading.Lock()

    def push(self, item: T, block: bool = False) -> None:
        """Append an item; without ``block`` raises BufferFull when full."""
        while True:
            with self._lock:
                next_head = (self._head + 1) % len(self._slots)
                if next_head != self._tail:
                    self._slots[self._head] = item
                    self._head = next_head
                    return
            if not block:
                raise BufferFull("ring buffer is full")
            time.sleep(0)

    def pop(self, block: bool = False) -> T:
        """Remove the oldest item; without ``block`` raises BufferEmpty when empty."""
        while True:
            with self._lock:
                if self._head != self._tail:
                    item = self._slots[self._tail]
                    self._slots[self._tail] = None
                    self._tail = (self._tail + 1) % len(self._slots)
                    return item  # type: ignore[return-value]
            if not block:
                raise BufferEmpty("ring buffer is empty")
            time.sleep(0)