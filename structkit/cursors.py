"""Cursor categories and generic cursor movement."""

from __future__ import annotations

import copy
from enum import Enum
from typing import TypeVar

C = TypeVar("C")


class IteratorCategory(Enum):
    """Capability level of a cursor; each level includes the ones it refines."""

    INPUT = "input"
    OUTPUT = "output"
    FORWARD = "forward"
    BIDIRECTIONAL = "bidirectional"
    RANDOM_ACCESS = "random_access"
    CONTIGUOUS = "contiguous"

    def includes(self, other: "IteratorCategory") -> bool:
        """True when this category is ``other`` or refines it."""
        category: IteratorCategory | None = self
        while category is not None:
            if category is other:
                return True
            category = _REFINES.get(category)
        return False


_REFINES = {
    IteratorCategory.FORWARD: IteratorCategory.INPUT,
    IteratorCategory.BIDIRECTIONAL: IteratorCategory.FORWARD,
    IteratorCategory.RANDOM_ACCESS: IteratorCategory.BIDIRECTIONAL,
    IteratorCategory.CONTIGUOUS: IteratorCategory.RANDOM_ACCESS,
}


def advance(cursor: C, n: int) -> C:
    """Move ``cursor`` by ``n`` steps in place and return it.

    Random-access cursors jump with ``+=``; bidirectional cursors step with
    ``forward()``/``backward()``; input and forward cursors only step forward.
    """
    category: IteratorCategory = cursor.category
    if category.includes(IteratorCategory.RANDOM_ACCESS):
        cursor += n
        return cursor
    if category.includes(IteratorCategory.BIDIRECTIONAL):
        step = cursor.forward if n > 0 else cursor.backward
        for _ in range(abs(n)):
            step()
        return cursor
    if category.includes(IteratorCategory.INPUT):
        if n < 0:
            raise ValueError(f"a {category.value} cursor cannot move backwards")
        for _ in range(n):
            cursor.forward()
        return cursor
    raise TypeError(f"a {category.value} cursor cannot be advanced")


def next_of(cursor: C, n: int = 1) -> C:
    """Return a copy of ``cursor`` moved ``n`` steps forward."""
    return advance(copy.copy(cursor), n)


def prev_of(cursor: C, n: int = 1) -> C:
    """Return a copy of ``cursor`` moved ``n`` steps backward."""
    return advance(copy.copy(cursor), -n)