"""In-place comparison sorts over ranges of a mutable sequence."""

from __future__ import annotations

from typing import Any, Callable, MutableSequence

Compare = Callable[[Any, Any], bool]

_INSERTION_THRESHOLD = 16


def less(first: Any, second: Any) -> bool:
    """Ascending order comparator."""
    return first < second


def greater(first: Any, second: Any) -> bool:
    """Descending order comparator."""
    return first > second


def _bounds(seq: MutableSequence, begin: int, end: int | None) -> tuple[int, int]:
    if end is None:
        end = len(seq)
    if not 0 <= begin <= end <= len(seq):
        raise IndexError(f"invalid range [{begin}, {end}) for length {len(seq)}")
    return begin, end


def heapify(
    seq: MutableSequence, begin: int, index: int, heap_size: int, comp: Compare = less
) -> None:
    """Sift the element at heap position ``index`` down within the heap at ``begin``."""
    while True:
        largest = index
        left = 2 * index + 1
        right = left + 1
        if left < heap_size and comp(seq[begin + largest], seq[begin + left]):
            largest = left
        if right < heap_size and comp(seq[begin + largest], seq[begin + right]):
            largest = right
        if largest == index:
            return
        a, b = begin + index, begin + largest
        seq[a], seq[b] = seq[b], seq[a]
        index = largest


def heap_sort(
    seq: MutableSequence, begin: int = 0, end: int | None = None, comp: Compare = less
) -> None:
    """Sort ``seq[begin:end]`` in place with a heap."""
    begin, end = _bounds(seq, begin, end)
    n = end - begin
    for i in range(n // 2 - 1, -1, -1):
        heapify(seq, begin, i, n, comp)
    for i in range(n - 1, 0, -1):
        seq[begin], seq[begin + i] = seq[begin + i], seq[begin]
        heapify(seq, begin, 0, i, comp)


def insertion_sort(
    seq: MutableSequence, begin: int = 0, end: int | None = None, comp: Compare = less
) -> None:
    """Stable in-place insertion sort of ``seq[begin:end]``."""
    begin, end = _bounds(seq, begin, end)
    for i in range(begin + 1, end):
        item = seq[i]
        j = i
        while j > begin and comp(item, seq[j - 1]):
            seq[j] = seq[j - 1]
            j -= 1
        seq[j] = item


def partition(
    seq: MutableSequence, begin: int = 0, end: int | None = None, comp: Compare = less
) -> int:
    """Hoare partition of ``seq[begin:end]`` around its middle element.

    Returns index ``p`` such that no element of ``seq[begin:p + 1]`` orders
    after any element of ``seq[p + 1:end]``; ``p < end - 1`` when the range
    holds two or more elements.
    """
    begin, end = _bounds(seq, begin, end)
    if begin == end:
        raise ValueError("cannot partition an empty range")
    pivot_value = seq[begin + (end - begin - 1) // 2]
    left, right = begin, end - 1
    while True:
        while comp(seq[left], pivot_value):
            left += 1
        while comp(pivot_value, seq[right]):
            right -= 1
        if left >= right:
            return right
        seq[left], seq[right] = seq[right], seq[left]
        left += 1
        right -= 1


def quick_sort(
    seq: MutableSequence, begin: int = 0, end: int | None = None, comp: Compare = less
) -> None:
    """In-place quicksort of ``seq[begin:end]``."""
    begin, end = _bounds(seq, begin, end)
    while end - begin > 1:
        mid = partition(seq, begin, end, comp) + 1
        # Recurse into the smaller half, loop over the larger one.
        if mid - begin < end - mid:
            quick_sort(seq, begin, mid, comp)
            begin = mid
        else:
            quick_sort(seq, mid, end, comp)
            end = mid


def intro_sort(
    seq: MutableSequence,
    begin: int = 0,
    end: int | None = None,
    comp: Compare = less,
    depth: int = 0,
) -> None:
    """Introsort: partition until ``depth`` runs out, then heap sort; small runs use insertion sort."""
    begin, end = _bounds(seq, begin, end)
    if end - begin <= _INSERTION_THRESHOLD:
        insertion_sort(seq, begin, end, comp)
        return
    if depth == 0:
        heap_sort(seq, begin, end, comp)
        return
    mid = partition(seq, begin, end, comp) + 1
    intro_sort(seq, begin, mid, comp, depth - 1)
    intro_sort(seq, mid, end, comp, depth - 1)


def floor_log2(n: int) -> int:
    """Largest ``k`` with ``2**k <= n``; 0 for ``n == 0``."""
    if n < 0:
        raise ValueError("floor_log2 needs a non-negative number")
    return max(n.bit_length() - 1, 0)


def sort(seq: MutableSequence, comp: Compare = less) -> None:
    """Sort ``seq`` in place with introsort."""
    size = len(seq)
    intro_sort(seq, 0, size, comp, 2 * floor_log2(size))