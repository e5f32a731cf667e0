"""
Shell Sort
==========
Insertion sort over a shrinking sequence of gaps (Knuth's 3h+1 series).
"""

from __future__ import annotations

from typing import List, TypeVar

T = TypeVar("T")


def gap_sequence(n: int) -> List[int]:
    """
    Return the decreasing gaps used for a list of length *n*.

    The series 1, 4, 13, 40, ... is climbed while h <= n // 9, so the
    first gap is the first term past n // 9.  The list always ends with 1.
    """
    h = 1
    while h <= n // 9:
        h = 3 * h + 1

    gaps = []
    while h > 0:
        gaps.append(h)
        h //= 3
    return gaps


def shell_sort(seq: List[T]) -> None:
    """Sort *seq* in place; the final gap-1 pass is a plain insertion sort."""
    n = len(seq)
    for h in gap_sequence(n):
        for i in range(h, n):
            item = seq[i]
            j = i
            while j >= h and seq[j - h] > item:
                seq[j] = seq[j - h]
                j -= h
            seq[j] = item
