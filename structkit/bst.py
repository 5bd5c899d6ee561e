"""An unbalanced binary search tree with in-order cursors."""

from __future__ import annotations

import sys
from typing import Generic, Iterator, Optional, TextIO, TypeVar

from structkit.cursors import IteratorCategory

T = TypeVar("T")


class InvalidTreeCursorError(RuntimeError):
    """Raised when a cursor that points at no element is used."""


class _TreeNode(Generic[T]):
    __slots__ = ("data", "left", "right", "parent")

    def __init__(self, data: T, parent: Optional["_TreeNode[T]"] = None) -> None:
        self.data = data
        self.left: Optional[_TreeNode[T]] = None
        self.right: Optional[_TreeNode[T]] = None
        self.parent = parent

    def __repr__(self) -> str:
        return f"_TreeNode({self.data!r})"


def _minimum(node: _TreeNode[T]) -> _TreeNode[T]:
    while node.left is not None:
        node = node.left
    return node


def _maximum(node: _TreeNode[T]) -> _TreeNode[T]:
    while node.right is not None:
        node = node.right
    return node


def _successor(node: _TreeNode[T]) -> Optional[_TreeNode[T]]:
    if node.right is not None:
        return _minimum(node.right)
    parent = node.parent
    while parent is not None and parent.right is node:
        node, parent = parent, parent.parent
    return parent


def _predecessor(node: _TreeNode[T]) -> Optional[_TreeNode[T]]:
    if node.left is not None:
        return _maximum(node.left)
    parent = node.parent
    while parent is not None and parent.left is node:
        node, parent = parent, parent.parent
    return parent


class BinarySearchTree(Generic[T]):
    """A binary search tree kept in order; equal values go to the left.

    Iteration yields the values in ascending order.
    """

    def __init__(self) -> None:
        self._root: Optional[_TreeNode[T]] = None
        self._count = 0

    def insert(self, data: T) -> None:
        """Add ``data`` at its in-order position."""
        parent: Optional[_TreeNode[T]] = None
        current = self._root
        go_right = False
        while current is not None:
            parent = current
            go_right = data > current.data
            current = current.right if go_right else current.left
        node = _TreeNode(data, parent)
        if parent is None:
            self._root = node
        elif go_right:
            parent.right = node
        else:
            parent.left = node
        self._count += 1

    def _find(self, data: T) -> Optional[_TreeNode[T]]:
        current = self._root
        while current is not None:
            if data > current.data:
                current = current.right
            elif data < current.data:
                current = current.left
            else:
                return current
        return None

    def _replace(self, node: _TreeNode[T], child: Optional[_TreeNode[T]]) -> None:
        parent = node.parent
        if parent is None:
            self._root = child
        elif parent.left is node:
            parent.left = child
        else:
            parent.right = child
        if child is not None:
            child.parent = parent

    def erase(self, data: T) -> bool:
        """Remove one element equal to ``data``; return whether one was found."""
        node = self._find(data)
        if node is None:
            return False
        if node.left is not None and node.right is not None:
            successor = _minimum(node.right)
            node.data = successor.data
            self._replace(successor, successor.right)
        else:
            self._replace(node, node.left if node.left is not None else node.right)
        self._count -= 1
        return True

    def clear(self) -> None:
        """Remove every element."""
        self._root = None
        self._count = 0

    def search(self, data: T) -> bool:
        """Return whether an element equal to ``data`` is stored."""
        return self._find(data) is not None

    def __contains__(self, data: object) -> bool:
        return self.search(data)  # type: ignore[arg-type]

    def find_max(self) -> T:
        """Return the largest element."""
        if self._root is None:
            raise ValueError("tree is empty")
        return _maximum(self._root).data

    def find_min(self) -> T:
        """Return the smallest element."""
        if self._root is None:
            raise ValueError("tree is empty")
        return _minimum(self._root).data

    def print(self, file: TextIO | None = None) -> None:
        """Write every element in order, with no separator."""
        out = file if file is not None else sys.stdout
        out.write("".join(str(item) for item in self))

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[T]:
        node = _minimum(self._root) if self._root is not None else None
        while node is not None:
            yield node.data
            node = _successor(node)

    def __reversed__(self) -> Iterator[T]:
        node = _maximum(self._root) if self._root is not None else None
        while node is not None:
            yield node.data
            node = _predecessor(node)

    def begin(self) -> "TreeCursor[T]":
        """Cursor at the smallest element; equal to :meth:`end` when empty."""
        node = _minimum(self._root) if self._root is not None else None
        return TreeCursor(self, node)

    def end(self) -> "TreeCursor[T]":
        """Cursor one past the largest element."""
        return TreeCursor(self, None)

    def __repr__(self) -> str:
        return f"BinarySearchTree({list(self)!r})"


class TreeCursor(Generic[T]):
    """An in-order position in a :class:`BinarySearchTree`."""

    category = IteratorCategory.BIDIRECTIONAL

    def __init__(
        self,
        tree: Optional[BinarySearchTree[T]],
        node: Optional[_TreeNode[T]],
    ) -> None:
        self.tree = tree
        self.node = node

    @property
    def is_valid(self) -> bool:
        return self.tree is not None and self.node is not None

    def _check(self) -> _TreeNode[T]:
        if self.tree is None or self.node is None:
            raise InvalidTreeCursorError("Iterator Invalid")
        return self.node

    def value(self) -> T:
        """Return the element under the cursor."""
        return self._check().data

    def forward(self) -> "TreeCursor[T]":
        """Move to the next element in order and return the cursor."""
        self.node = _successor(self._check())
        return self

    def backward(self) -> "TreeCursor[T]":
        """Move to the previous element in order and return the cursor."""
        self.node = _predecessor(self._check())
        return self

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TreeCursor):
            return NotImplemented
        return self.tree is other.tree and self.node is other.node

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"TreeCursor(node={self.node!r})"