"""Sorted multiset that hands back its largest value first."""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Callable, Iterator
from dataclasses import dataclass
from functools import cmp_to_key
from typing import Generic, TypeVar

T = TypeVar("T")

Compare = Callable[[T, T], int]


def _natural_compare(a: T, b: T) -> int:
    return (a > b) - (a < b)  # type: ignore[operator]


@dataclass
class _Entry(Generic[T]):
    value: T
    count: int


class SortVector(Generic[T]):
    """Keeps values in ascending order, counting repeats of equal values.

    ``compare(v, other)`` returns 0 when the two are equal and a positive
    number when ``v`` is the larger; without it the values' own ordering
    is used.
    """

    def __init__(self, compare: Compare | None = None) -> None:
        self._compare: Compare = compare if compare is not None else _natural_compare
        self._key = cmp_to_key(self._compare)
        self._entries: list[_Entry[T]] = []

    def push(self, value: T) -> None:
        """Insert a value; an equal value already held gains one more count."""
        idx = bisect_left(
            self._entries, self._key(value), key=lambda entry: self._key(entry.value)
        )
        if idx < len(self._entries) and self._compare(self._entries[idx].value, value) == 0:
            self._entries[idx].count += 1
        else:
            self._entries.insert(idx, _Entry(value, 1))

    def pop(self) -> T:
        """Remove and return one copy of the largest value."""
        if not self._entries:
            raise IndexError("empty")
        last = self._entries[-1]
        if last.count == 1:
            self._entries.pop()
        else:
            last.count -= 1
        return last.value

    def __iter__(self) -> Iterator[T]:
        """Yield each distinct value once, smallest first."""
        return (entry.value for entry in list(self._entries))

    def __len__(self) -> int:
        """Number of distinct values held."""
        return len(self._entries)