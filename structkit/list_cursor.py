"""Nodes and cursors for a doubly linked list."""

from __future__ import annotations

from typing import Any, Generic, Optional, TypeVar

from structkit.cursors import IteratorCategory

T = TypeVar("T")


class InvalidCursorError(RuntimeError):
    """Raised when a cursor that points at no element is used."""


class ListNode(Generic[T]):
    """One element of a doubly linked list."""

    __slots__ = ("data", "next_node", "prev_node")

    def __init__(
        self,
        data: T,
        next_node: Optional["ListNode[T]"] = None,
        prev_node: Optional["ListNode[T]"] = None,
    ) -> None:
        self.data = data
        self.next_node = next_node
        self.prev_node = prev_node

    def __repr__(self) -> str:
        return f"ListNode({self.data!r})"


class ListCursor(Generic[T]):
    """A position in a linked list, moving forwards or in reverse.

    ``owner`` is the list the cursor belongs to; it must expose ``head_node``.
    A cursor whose ``node`` is ``None`` stands one past the last element (or,
    for a reverse cursor, one before the first) and cannot be read or moved.
    """

    category = IteratorCategory.BIDIRECTIONAL

    def __init__(
        self,
        owner: Any,
        node: Optional[ListNode[T]],
        reverse: bool = False,
    ) -> None:
        self.owner = owner
        self.node = node
        self.reverse = reverse

    @property
    def is_valid(self) -> bool:
        return self.owner is not None and self.node is not None

    def _check(self) -> ListNode[T]:
        if self.owner is None or self.node is None:
            raise InvalidCursorError("Invalid Iterator")
        return self.node

    def value(self) -> T:
        """Return the element under the cursor."""
        return self._check().data

    def forward(self) -> "ListCursor[T]":
        """Step one element in the cursor's direction and return the cursor."""
        node = self._check()
        self.node = node.prev_node if self.reverse else node.next_node
        return self

    def backward(self) -> "ListCursor[T]":
        """Step one element against the cursor's direction and return the cursor."""
        node = self._check()
        self.node = node.next_node if self.reverse else node.prev_node
        return self

    def base(self) -> "ListCursor[T]":
        """Return the forward cursor one element to the right of this one.

        For a forward cursor this is a plain copy.
        """
        if not self.reverse:
            return ListCursor(self.owner, self.node)
        if self.owner is None:
            raise InvalidCursorError("Invalid Iterator")
        if self.node is None:
            return ListCursor(self.owner, self.owner.head_node)
        return ListCursor(self.owner, self.node.next_node)

    def __iadd__(self, n: int) -> "ListCursor[T]":
        step = self.forward if n > 0 else self.backward
        for _ in range(abs(n)):
            step()
        return self

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ListCursor):
            return NotImplemented
        return (
            self.node is other.node
            and self.owner is other.owner
            and self.reverse == other.reverse
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        kind = "reverse" if self.reverse else "forward"
        return f"ListCursor({kind}, node={self.node!r})"