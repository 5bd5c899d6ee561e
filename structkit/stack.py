"""A last-in, first-out stack."""

from __future__ import annotations

from typing import Generic, Iterator, TypeVar

T = TypeVar("T")


class StackUnderflowError(IndexError):
    """Raised when reading from or removing from an empty stack."""


class Stack(Generic[T]):
    """A LIFO stack; iteration runs from the top down."""

    def __init__(self) -> None:
        self._items: list[T] = []

    def push(self, data: T) -> None:
        """Place ``data`` on top of the stack."""
        self._items.append(data)

    def pop(self) -> T:
        """Remove and return the top item."""
        if not self._items:
            raise StackUnderflowError("Stack is already empty")
        return self._items.pop()

    def peek(self) -> T:
        """Return the top item without removing it."""
        if not self._items:
            raise StackUnderflowError("Stack has no data")
        return self._items[-1]

    def is_empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return reversed(self._items)