"""
Quicksort
=========
Binary and three-way quicksort with a random pivot.

Both variants work on ``[lo, hi)`` ranges of the caller's list, recurse
only into the smaller partition and keep looping over the larger one, so
the stack depth stays O(log n) whatever the input.  Ranges of at most
``QUICKSORT_CUTOFF`` elements are left to insertion sort.

The pivot source is injectable: ``rng(n)`` must return an int uniformly
distributed in ``[0, n)``.  It defaults to :func:`random.randrange`; pass
``random.Random(seed).randrange`` (or any stub) for reproducible runs.
The result never depends on the pivots, only the running time does.
"""

from __future__ import annotations

import random
from typing import Callable, List, Optional, Tuple, TypeVar

from sortlab.sorts.elementary_sorts import insertion_sort

T = TypeVar("T")

RandomIndex = Callable[[int], int]

QUICKSORT_CUTOFF = 30


def choose_pivot(lo: int, hi: int, rng: RandomIndex) -> int:
    """Return a pivot index drawn from ``[lo, hi)``."""
    return lo + rng(hi - lo)


def partition(seq: List[T], lo: int, hi: int) -> int:
    """
    Partition ``seq[lo:hi]`` around the pivot stored at ``seq[lo]``.

    Elements strictly less than the pivot end up on its left, the rest on
    its right.  Returns the pivot's final index.
    """
    pivot = seq[lo]
    boundary = lo + 1
    for j in range(lo + 1, hi):
        if seq[j] < pivot:
            seq[boundary], seq[j] = seq[j], seq[boundary]
            boundary += 1

    seq[lo], seq[boundary - 1] = seq[boundary - 1], seq[lo]
    return boundary - 1


def partition_3way(seq: List[T], lo: int, hi: int) -> Tuple[int, int]:
    """
    Split ``seq[lo:hi]`` into less / equal / greater than the pivot at ``seq[lo]``.

    One left-to-right scan keeps the layout
    ``[pivot | less | equal | greater | unprocessed]``; at the end the
    pivot is swapped to the front of the equal block.

    Returns
    -------
    (lt, gt) : tuple of int
        ``seq[lo:lt]`` < pivot, ``seq[lt:gt]`` == pivot, ``seq[gt:hi]`` > pivot.
    """
    pivot = seq[lo]
    lt = gt = lo + 1
    for j in range(lo + 1, hi):
        item = seq[j]
        if item < pivot:
            # rotate item -> first "equal" slot -> first "greater" slot
            seq[gt], seq[j] = seq[j], seq[gt]
            seq[gt], seq[lt] = seq[lt], seq[gt]
            lt += 1
            gt += 1
        elif item == pivot:
            seq[gt], seq[j] = seq[j], seq[gt]
            gt += 1

    seq[lo], seq[lt - 1] = seq[lt - 1], seq[lo]
    return lt - 1, gt


def _quick_sort(seq: List[T], lo: int, hi: int, rng: RandomIndex) -> None:
    while hi - lo > QUICKSORT_CUTOFF:
        p = choose_pivot(lo, hi, rng)
        seq[lo], seq[p] = seq[p], seq[lo]

        mid = partition(seq, lo, hi)
        if mid - lo < hi - mid - 1:
            if mid - lo > 1:
                _quick_sort(seq, lo, mid, rng)
            lo = mid + 1
        else:
            if hi - mid - 1 > 1:
                _quick_sort(seq, mid + 1, hi, rng)
            hi = mid

    insertion_sort(seq, lo, hi)


def _quick_sort_3way(seq: List[T], lo: int, hi: int, rng: RandomIndex) -> None:
    while hi - lo > QUICKSORT_CUTOFF:
        p = choose_pivot(lo, hi, rng)
        seq[lo], seq[p] = seq[p], seq[lo]

        # seq[lt:gt] is final and never visited again
        lt, gt = partition_3way(seq, lo, hi)
        if lt - lo < hi - gt:
            if lt - lo > 1:
                _quick_sort_3way(seq, lo, lt, rng)
            lo = gt
        else:
            if hi - gt > 1:
                _quick_sort_3way(seq, gt, hi, rng)
            hi = lt

    insertion_sort(seq, lo, hi)


def quick_sort(seq: List[T], rng: Optional[RandomIndex] = None) -> None:
    """Sort *seq* in place with binary-partition quicksort.  Not stable."""
    _quick_sort(seq, 0, len(seq), rng or random.randrange)


def quick_sort_3way(seq: List[T], rng: Optional[RandomIndex] = None) -> None:
    """
    Sort *seq* in place with three-way quicksort.  Not stable.

    Much faster than :func:`quick_sort` on inputs with many duplicates,
    since every element equal to a pivot is settled by that partition.
    """
    _quick_sort_3way(seq, 0, len(seq), rng or random.randrange)
