"""Stack, max heap, binary search tree, linked-list cursors and in-place sorting algorithms."""

__version__ = "0.1.0"