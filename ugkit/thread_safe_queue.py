"""Bounded FIFO queue guarded by a lock and condition variables."""

from __future__ import annotations

import threading
from collections import deque
from typing import Generic, TypeVar

T = TypeVar("T")


class QueueFull(Exception):
    """Raised when a non-blocking push finds the queue full."""


class QueueEmpty(Exception):
    """Raised when a non-blocking pop finds the queue empty."""


class ThreadSafeQueue(Generic[T]):
    """FIFO queue holding at most ``size`` items, safe for many threads."""

    def __init__(self, size: int) -> None:
        self._size = size
        self._items: deque[T] = deque()
        lock = threading.Lock()
        self._not_full = threading.Condition(lock)
        self._not_empty = threading.Condition(lock)

    def push(self, item: T, block: bool = False) -> None:
        """Append an item; waits for room if ``block``, else raises QueueFull."""
        with self._not_full:
            if block:
                self._not_full.wait_for(lambda: len(self._items) < self._size)
            elif len(self._items) >= self._size:
                raise QueueFull("queue is full")
            self._items.append(item)
            self._not_empty.notify()

    def pop(self, block: bool = False) -> T:
        """Remove the oldest item; waits if ``block``, else raises QueueEmpty."""
        with self._not_empty:
            if block:
                self._not_empty.wait_for(lambda: len(self._items) > 0)
            elif not self._items:
                raise QueueEmpty("queue is empty")
            item = self._items.popleft()
            self._not_full.notify()
            return item

    def resize(self, new_size: int) -> None:
        """Change the maximum number of items the queue accepts."""
        with self._not_full:
            self._size = new_size
            self._not_full.notify_all()

    def __len__(self) -> int:
        with self._not_full:
            return len(self._items)