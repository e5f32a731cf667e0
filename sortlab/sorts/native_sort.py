"""
Native Sorts
============
Baselines for the benchmark: the interpreter's own ``list.sort``.
"""

from __future__ import annotations

from typing import List, TypeVar

T = TypeVar("T")


def native_sort(seq: List[T]) -> None:
    """Timsort via ``list.sort``: stable and in place."""
    seq.sort()


def native_unstable_sort(seq: List[T]) -> None:
    """
    Same call as :func:`native_sort`.

    Python ships no separate unstable sort; the name is kept so both
    baseline slots of the roster are filled.
    """
    seq.sort()
