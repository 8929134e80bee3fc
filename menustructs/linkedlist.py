"""Singly linked list with 1-based positional operations."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any


class ListEmptyError(Exception):
    """Raised when removing from an empty list."""


class PositionError(Exception):
    """Raised for a position that is invalid or out of range."""


class SinglyLinkedList:
    """Ordered list addressed by 1-based positions."""

    def __init__(self) -> None:
        self._items: list[Any] = []

    def insert_first(self, item: Any) -> None:
        """Insert ``item`` at the beginning."""
        self._items.insert(0, item)

    def insert_last(self, item: Any) -> None:
        """Append ``item`` at the end."""
        self._items.append(item)

    def insert_at(self, position: int, item: Any) -> None:
        """Insert ``item`` so that it ends up at ``position``."""
        if position < 1:
            raise PositionError("Invalid position.")
        if position > len(self._items) + 1:
            raise PositionError("Position out of range.")
        self._items.insert(position - 1, item)

    def insert_after(self, position: int, item: Any) -> None:
        """Insert ``item`` right after the element at ``position``."""
        if position < 1:
            raise PositionError("Invalid position.")
        if position > len(self._items):
            raise PositionError("Position out of range.")
        self._items.insert(position, item)

    def delete_first(self) -> Any:
        """Remove and return the first element."""
        if not self._items:
            raise ListEmptyError("List is empty.")
        return self._items.pop(0)

    def delete_last(self) -> Any:
        """Remove and return the last element."""
        if not self._items:
            raise ListEmptyError("List is empty.")
        return self._items.pop()

    def delete_at(self, position: int) -> Any:
        """Remove and return the element at ``position``."""
        if not self._items:
            raise ListEmptyError("Invalid operation.")
        if position < 1:
            raise PositionError("Invalid operation.")
        if position > len(self._items):
            raise PositionError("Position out of range.")
        return self._items.pop(position - 1)

    def is_empty(self) -> bool:
        return not self._items

    def __iter__(self) -> Iterator[Any]:
        return iter(list(self._items))

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._items!r})"