"""
Elementary Sorts
================
Quadratic, in-place sorts: insertion, gnome, bubble and selection.

Every function receives the list by reference, reorders it in place and
returns ``None``.  Elements only need to support ``<`` / ``>``.

``insertion_sort`` also accepts ``lo`` / ``hi`` bounds so the quicksort and
merge-sort variants can finish small sub-ranges of one backing list
without slicing it.
"""

from __future__ import annotations

from typing import List, Optional, TypeVar

T = TypeVar("T")


def insertion_sort(seq: List[T], lo: int = 0, hi: Optional[int] = None) -> None:
    """
    Sort ``seq[lo:hi]`` in place by growing a sorted prefix.

    Parameters
    ----------
    seq : list
        Items to sort.  Mutated in place.
    lo, hi : int, optional
        Half-open range to sort.  Defaults to the whole list.

    Notes
    -----
    Stable.  O(n) comparisons on already sorted input because the leftward
    scan stops at the first predecessor that is not greater.
    """
    if hi is None:
        hi = len(seq)

    for i in range(lo + 1, hi):
        item = seq[i]
        # find where `item` belongs: left of every predecessor greater than it
        j = i
        while j > lo and seq[j - 1] > item:
            j -= 1

        if j < i:
            # shift seq[j:i] one slot right, then drop `item` into the gap
            seq[j + 1:i + 1] = seq[j:i]
            seq[j] = item


def gnome_sort(seq: List[T]) -> None:
    """Insertion sort driven by a single cursor instead of a nested loop."""
    i = 0
    n = len(seq)
    while i < n:
        if i == 0 or seq[i] >= seq[i - 1]:
            i += 1
        else:
            seq[i], seq[i - 1] = seq[i - 1], seq[i]
            i -= 1


def bubble_sort(seq: List[T]) -> None:
    """
    Swap adjacent out-of-order pairs left to right, pass after pass.

    Each pass remembers where its last swap happened; everything past that
    point already holds the largest elements in order, so the next pass
    stops there.  A pass without swaps leaves the boundary at 0 and ends
    the sort, which makes sorted input cost a single pass of n-1
    comparisons.
    """
    n = len(seq)
    while n > 0:
        last_swap = 0
        for i in range(1, n):
            if seq[i - 1] > seq[i]:
                seq[i - 1], seq[i] = seq[i], seq[i - 1]
                last_swap = i
        n = last_swap


def selection_sort(seq: List[T]) -> None:
    """
    Repeatedly move the smallest remaining element to the front.

    Always performs n-1 scans (no early exit) but at most n-1 swaps.
    The long-range swap can reorder equal elements, so this sort is not
    stable.
    """
    n = len(seq)
    for i in range(n - 1):
        smallest = i
        for j in range(i + 1, n):
            if seq[j] < seq[smallest]:
                smallest = j
        if smallest != i:
            seq[i], seq[smallest] = seq[smallest], seq[i]
