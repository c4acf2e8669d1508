"""Fixed-capacity ring buffer for one producer and one consumer."""

from __future__ import annotations

from typing import Generic, TypeVar

T = TypeVar("T")


class BufferFull(Exception):
    """Raised when pushing into a full buffer."""


class BufferEmpty(Exception):
    """Raised when popping from an empty buffer."""


class RingBuffer(Generic[T]):
    """Ring buffer holding up to ``capacity`` items.

    Safe for a single writer thread and a single reader thread: the writer
    only moves the head and the reader only moves the tail.
    """

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self._slots: list[T | None] = [None] * (capacity + 1)
        self._head = 0
        self._tail = 0

    @property
    def capacity(self) -> int:
        return len(self._slots) - 1

    def push(self, item: T) -> None:
        """Append an item; raises BufferFull when there is no room."""
        head = self._head
        next_head = (head + 1) % len(self._slots)
        if next_head == self._tail:
            raise BufferFull("ring buffer is full")
        self._slots[head] = item
        self._head = next_head

    def pop(self) -> T:
        """Remove and return the oldest item; raises BufferEmpty when empty."""
        tail = self._tail
        if tail == self._head:
            raise BufferEmpty("ring buffer is empty")
        item = self._slots[tail]
        self._slots[tail] = None
        self._tail = (tail + 1) % len(self._slots)
        return item  # type: ignore[return-value]

    def __len__(self) -> int:
        return (self._head - self._tail) % len(self._slots)