"""
Heap Sort
=========
In-place heap sort over an implicit binary max-heap
(children of index ``i`` live at ``2i + 1`` and ``2i + 2``).
"""

from __future__ import annotations

from typing import List, TypeVar

T = TypeVar("T")


def sift_down(seq: List[T], start: int, end: int) -> None:
    """
    Move ``seq[start]`` down the heap ``seq[:end]`` until no child exceeds it.

    At each step the node is compared with its larger child and swapped
    only when that child is strictly greater.
    """
    i = start
    while True:
        child = 2 * i + 1
        if child >= end:
            break
        if child + 1 < end and seq[child + 1] > seq[child]:
            child += 1

        if seq[i] < seq[child]:
            seq[i], seq[child] = seq[child], seq[i]
            i = child
        else:
            break


def heapify(seq: List[T]) -> None:
    """Arrange *seq* so that every parent is >= both of its children."""
    n = len(seq)
    for i in range(n // 2, -1, -1):
        sift_down(seq, i, n)


def heap_sort(seq: List[T]) -> None:
    """Sort *seq* in place.  O(n log n) worst case, not stable."""
    heapify(seq)

    # the root is the maximum of the live heap: park it at the end and
    # repair the heap over what is left
    for i in range(len(seq) - 1, 0, -1):
        seq[0], seq[i] = seq[i], seq[0]
        sift_down(seq, 0, i)
