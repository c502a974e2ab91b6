"""Bounded queue that overwrites its oldest entry when full."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


class CircularQueue(Generic[T]):
    """A fixed-capacity FIFO; enqueueing when full drops the oldest item."""

    def __init__(self, capacity: int = 10) -> None:
        if capacity <= 0:
            raise ValueError("capacity must be positive")
        self._items: list[Optional[T]] = [None] * capacity
        self._front = 0
        self._count = 0

    @property
    def capacity(self) -> int:
        return len(self._items)

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[T]:
        for offset in range(self._count):
            yield self._items[(self._front + offset) % self.capacity]

    def is_empty(self) -> bool:
        return self._count == 0

    def is_full(self) -> bool:
        return self._count == self.capacity

    def enqueue(self, item: T) -> None:
        """Add ``item`` at the rear, discarding the front item if full."""
        if self.is_full():
            self.dequeue()
        rear = (self._front + self._count) % self.capacity
        self._items[rear] = item
        self._count += 1

    def dequeue(self) -> Optional[T]:
        """Remove and return the front item, or ``None`` when empty."""
        if self.is_empty():
            return None
        item = self._items[self._front]
        self._items[self._front] = None
        self._front = (self._front + 1) % self.capacity
        self._count -= 1
        return item

    def peek(self) -> Optional[T]:
        """Return the front item without removing it, or ``None`` when empty."""
        if self.is_empty():
            return None
        return self._items[self._front]