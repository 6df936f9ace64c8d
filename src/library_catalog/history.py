"""
LIFO stack used for the library's return history.
"""

from collections.abc import Iterator
from typing import Generic, TypeVar

from .exceptions import EmptyContainerError

T = TypeVar("T")


class Stack(Generic[T]):
    """Unbounded last-in, first-out stack backed by a list."""

    def __init__(self) -> None:
        self._items: list[T] = []

    def push(self, item: T) -> None:
        """Place an item on top of the stack."""
        self._items.append(item)

    def pop(self) -> T:
        """
        Remove and return the top item.

        Raises:
            EmptyContainerError: If the stack is empty
        """
        if self.is_empty():
            raise EmptyContainerError("Stack is empty")
        return self._items.pop()

    def top(self) -> T:
        """
        Return the top item without removing it.

        Raises:
            EmptyContainerError: If the stack is empty
        """
        if self.is_empty():
            raise EmptyContainerError("Stack is empty")
        return self._items[-1]

    def is_empty(self) -> bool:
        return not self._items

    def copy(self) -> "Stack[T]":
        """Shallow copy; items are shared, the stack itself is not."""
        duplicate: Stack[T] = Stack()
        duplicate._items = list(self._items)
        return duplicate

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        # Top first
        return reversed(self._items)
