"""Unbounded LIFO stack."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any


class StackUnderflowError(Exception):
    """Raised when popping from an empty stack."""


class LinkedStack:
    """Unbounded stack; iteration runs from the top down."""

    def __init__(self) -> None:
        self._items: list[Any] = []

    def push(self, item: Any) -> None:
        """Place ``item`` on top."""
        self._items.append(item)

    def pop(self) -> Any:
        """Remove and return the top item."""
        if not self._items:
            raise StackUnderflowError("Stack Underflow")
        return self._items.pop()

    def is_empty(self) -> bool:
        return not self._items

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items[::-1])

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._items[::-1]!r})"