"""Bounded and unbounded FIFO queues."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from typing import Any

DEFAULT_CAPACITY = 5


class QueueFullError(Exception):
    """Raised when an item is added to a queue that has no free slot."""


class QueueEmptyError(Exception):
    """Raised when an item is taken from a queue that holds nothing."""


class LinearQueue:
    """Array-style queue whose slots are only reclaimed once it drains.

    Each enqueue uses up one of ``capacity`` slots. Dequeuing does not
    free a slot; the queue becomes usable again only after every item
    has been removed.
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self.capacity = capacity
        self._items: deque[Any] = deque()
        self._used = 0

    def enqueue(self, item: Any) -> None:
        """Append ``item`` at the rear."""
        if self.is_full():
            raise QueueFullError("Queue is full")
        self._items.append(item)
        self._used += 1

    def dequeue(self) -> Any:
        """Remove and return the item at the front."""
        if not self._items:
            raise QueueEmptyError("Queue is empty")
        item = self._items.popleft()
        if not self._items:
            self._used = 0
        return item

    def is_empty(self) -> bool:
        return not self._items

    def is_full(self) -> bool:
        return self._used == self.capacity

    def __iter__(self) -> Iterator[Any]:
        return iter(list(self._items))

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self._items)!r}, capacity={self.capacity})"


class CircularQueue:
    """Ring-buffer queue that reuses slots freed by dequeuing."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self.capacity = capacity
        self._items: deque[Any] = deque()

    def enqueue(self, item: Any) -> None:
        """Append ``item`` at the rear."""
        if self.is_full():
            raise QueueFullError("Queue is full")
        self._items.append(item)

    def dequeue(self) -> Any:
        """Remove and return the item at the front."""
        if not self._items:
            raise QueueEmptyError("Queue is empty")
        return self._items.popleft()

    def is_empty(self) -> bool:
        return not self._items

    def is_full(self) -> bool:
        return len(self._items) == self.capacity

    def __iter__(self) -> Iterator[Any]:
        return iter(list(self._items))

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self._items)!r}, capacity={self.capacity})"


class LinkedQueue:
    """Unbounded queue."""

    def __init__(self) -> None:
        self._items: deque[Any] = deque()

    def enqueue(self, item: Any) -> None:
        """Append ``item`` at the rear."""
        self._items.append(item)

    def dequeue(self) -> Any:
        """Remove and return the item at the front."""
        if not self._items:
            raise QueueEmptyError("Queue Underflow")
        return self._items.popleft()

    def is_empty(self) -> bool:
        return not self._items

    def __iter__(self) -> Iterator[Any]:
        return iter(list(self._items))

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self._items)!r})"