"""
Merge Sort
==========
Stable, comparison-based merge sorts with O(n log n) worst-case
complexity, in four flavours:

- top-down (recursive halving)
- top-down with an insertion-sort floor for short ranges
- bottom-up (iterative doubling of the run width)
- bottom-up with an initial insertion-sort pass

All variants sort the caller's list in place.  Each call allocates one
scratch list of the same length and ping-pongs between it and the
caller's list, so no element is copied more than once per level.
Stability comes from :func:`merge`, which takes the left element on ties.
"""

from __future__ import annotations

from typing import List, Optional, TypeVar

from sortlab.sorts.elementary_sorts import insertion_sort

T = TypeVar("T")

# ranges of at most this many elements are insertion-sorted by the
# top-down hybrid
TOP_DOWN_INSERTION_THRESHOLD = 16

# block size of the first, insertion-sorted pass of the bottom-up hybrid
BOTTOM_UP_INSERTION_WIDTH = 8


def merge(
    source: List[T],
    half: int,
    target: List[T],
    lo: int = 0,
    hi: Optional[int] = None,
) -> None:
    """
    Merge ``source[lo:lo+half]`` and ``source[lo+half:hi]`` into ``target[lo:hi]``.

    Parameters
    ----------
    source : list
        Holds the two adjacent sorted runs.  Not modified.
    half : int
        Length of the left run.  May reach past *hi*, in which case the
        right run is empty and the left run is copied over.
    target : list
        Receives the merged run.  Must be a different list from *source*.
    lo, hi : int, optional
        Bounds of the merged range.  Defaults to the whole of *source*.
    """
    if hi is None:
        hi = len(source)

    i = lo
    mid = min(lo + half, hi)
    j = mid
    for k in range(lo, hi):
        # equal heads: the left run wins (stable)
        if i < mid and (j >= hi or source[i] <= source[j]):
            target[k] = source[i]
            i += 1
        else:
            target[k] = source[j]
            j += 1


# ── Top-down ──────────────────────────────────────────────────────────


def _split_merge(scratch: List[T], target: List[T], lo: int, hi: int, floor: int) -> None:
    """
    Sort ``target[lo:hi]``, using ``scratch[lo:hi]`` (same elements) as work space.

    Both halves are first sorted into *scratch* (buffer roles swap on
    every level), then merged back into *target*.
    """
    if hi - lo <= floor:
        insertion_sort(target, lo, hi)
        return

    mid = lo + (hi - lo) // 2
    _split_merge(target, scratch, lo, mid, floor)
    _split_merge(target, scratch, mid, hi, floor)
    merge(scratch, mid - lo, target, lo, hi)


def merge_sort_top_down(seq: List[T]) -> None:
    """Recursive merge sort.  O(n) extra space, stable."""
    scratch = list(seq)
    # a floor of 1 only "sorts" single elements, i.e. leaves them alone
    _split_merge(scratch, seq, 0, len(seq), 1)


def merge_sort_top_down_insertion(seq: List[T]) -> None:
    """Recursive merge sort that insertion-sorts ranges of up to 16 items."""
    scratch = list(seq)
    _split_merge(scratch, seq, 0, len(seq), TOP_DOWN_INSERTION_THRESHOLD)


# ── Bottom-up ─────────────────────────────────────────────────────────


def _merge_passes(seq: List[T], width: int) -> None:
    """
    Merge adjacent runs of *width* sorted elements, doubling until done.

    Runs alternate between *seq* and a scratch copy; if the final pass
    leaves the sorted data in the scratch list it is copied back.
    """
    n = len(seq)
    scratch = list(seq)
    seq_is_source = True

    while width < n:
        if seq_is_source:
            source, target = seq, scratch
        else:
            source, target = scratch, seq

        for lo in range(0, n, 2 * width):
            merge(source, width, target, lo, min(lo + 2 * width, n))

        seq_is_source = not seq_is_source
        width *= 2

    if not seq_is_source:
        seq[:] = scratch


def merge_sort_bottom_up(seq: List[T]) -> None:
    """Iterative merge sort: pairs, then fours, and so on.  Stable."""
    _merge_passes(seq, 1)


def merge_sort_bottom_up_insertion(seq: List[T]) -> None:
    """Iterative merge sort starting from insertion-sorted blocks of 8."""
    n = len(seq)
    width = BOTTOM_UP_INSERTION_WIDTH

    for lo in range(0, n, width):
        insertion_sort(seq, lo, min(lo + width, n))

    _merge_passes(seq, width)
