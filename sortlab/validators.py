"""
Sort Validators
===============
Post-condition checks for sorted output: non-decreasing order and
multiset equality with the input.
"""

from __future__ import annotations

from collections import Counter
from typing import Any, Dict, Optional, Sequence

from sortlab.sort_errors import OrderingViolationError, PermutationViolationError


def first_violation_index(seq: Sequence[Any]) -> Optional[int]:
    """
    Return the first index i where seq[i] > seq[i+1], or None if ordered.
    """
    for i in range(1, len(seq)):
        if seq[i - 1] > seq[i]:
            return i - 1
    return None


def is_nondecreasing(seq: Sequence[Any]) -> bool:
    return first_violation_index(seq) is None


def permutation_diff(before: Sequence[Any], after: Sequence[Any]) -> Dict[Any, int]:
    """
    Return value -> (count in *before* - count in *after*) for every value
    whose multiplicity changed.  Empty dict means the same multiset.
    """
    diff = Counter(before)
    diff.subtract(Counter(after))
    return {value: count for value, count in diff.items() if count != 0}


def is_permutation(before: Sequence[Any], after: Sequence[Any]) -> bool:
    if len(before) != len(after):
        return False
    return not permutation_diff(before, after)


def assert_ordered(seq: Sequence[Any], context: Optional[str] = None) -> None:
    """Raise OrderingViolationError at the first out-of-order pair."""
    i = first_violation_index(seq)
    if i is not None:
        raise OrderingViolationError(i, seq[i], seq[i + 1], context=context)


def assert_permutation(
    before: Sequence[Any],
    after: Sequence[Any],
    context: Optional[str] = None,
) -> None:
    """Raise PermutationViolationError if *after* is not a rearrangement of *before*."""
    diff = permutation_diff(before, after)
    if diff:
        raise PermutationViolationError(diff, context=context)
