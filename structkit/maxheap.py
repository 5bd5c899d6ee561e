"""A binary max-heap stored in a flat list."""

from __future__ import annotations

import sys
from typing import Generic, Iterator, TextIO, TypeVar

T = TypeVar("T")


class HeapUnderflowError(IndexError):
    """Raised when reading from or removing from an empty heap."""


class MaxHeap(Generic[T]):
    """A max-heap; the largest item is always on top.

    Iteration yields the items in their stored (level) order.
    """

    def __init__(self, capacity: int = 0) -> None:
        if capacity < 0:
            raise ValueError("Invalid Size")
        self._items: list[T] = []

    def _sift_down(self, index: int) -> None:
        items = self._items
        size = len(items)
        while True:
            largest = index
            left = self.left(index)
            right = self.right(index)
            if left < size and items[left] > items[largest]:
                largest = left
            if right < size and items[right] > items[largest]:
                largest = right
            if largest == index:
                return
            items[index], items[largest] = items[largest], items[index]
            index = largest

    def _sift_up(self, index: int) -> None:
        items = self._items
        while index > 0:
            parent = self.parent(index)
            if not items[index] > items[parent]:
                return
            items[index], items[parent] = items[parent], items[index]
            index = parent

    def top(self) -> T:
        """Return the largest item without removing it."""
        if not self._items:
            raise HeapUnderflowError("The HeapTree is empty")
        return self._items[0]

    def parent(self, index: int) -> int:
        """Index of the parent of ``index``; the root has none."""
        if index <= 0:
            raise IndexError("Invalid index")
        return (index - 1) // 2

    def left(self, index: int) -> int:
        """Index of the left child of ``index``."""
        return index * 2 + 1

    def right(self, index: int) -> int:
        """Index of the right child of ``index``."""
        return index * 2 + 2

    def push(self, data: T) -> None:
        """Add ``data`` to the heap."""
        self._items.append(data)
        self._sift_up(len(self._items) - 1)

    def pop(self) -> T:
        """Remove and return the largest item."""
        items = self._items
        if not items:
            raise HeapUnderflowError("The HeapTree is empty")
        largest = items[0]
        last = items.pop()
        if items:
            items[0] = last
            self._sift_down(0)
        return largest

    def clear(self) -> None:
        """Remove every item."""
        self._items.clear()

    def is_empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def debug_print(self, file: TextIO | None = None) -> None:
        """Write the stored items, each followed by a space, then a newline."""
        out = file if file is not None else sys.stdout
        out.write("".join(f"{item} " for item in self._items))
        out.write("\n")