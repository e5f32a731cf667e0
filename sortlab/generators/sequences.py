"""
Input Sequences
===============
Input distributions for the benchmark.  Each generator takes a length
``n`` and returns a fresh list of ints, so a sort can mutate it freely.

The adversarial shapes target the usual weak spots: sorted and reversed
input (fixed-pivot quicksort), all-equal input (binary partitioning) and
a single misplaced element at either end (bubble and insertion sort).
"""

import random
from collections import OrderedDict
from typing import Callable, List, Optional

from sortlab.sort_errors import UnknownSequenceError

RANDOM_VALUE_LIMIT = 10000
EQUAL_VALUE = 42


def random_sequence(n: int, rng: Optional[random.Random] = None) -> List[int]:
    """n values drawn uniformly from [0, 10000)."""
    randrange = (rng or random).randrange
    return [randrange(RANDOM_VALUE_LIMIT) for _ in range(n)]


def increasing_sequence(n: int) -> List[int]:
    return list(range(n))


def decreasing_sequence(n: int) -> List[int]:
    return list(range(n - 1, -1, -1))


def equal_sequence(n: int) -> List[int]:
    return [EQUAL_VALUE] * n


def last_out_of_order(n: int) -> List[int]:
    """n-1 equal values followed by a smaller one."""
    seq = [EQUAL_VALUE] * n
    if seq:
        seq[-1] = EQUAL_VALUE - 1
    return seq


def first_out_of_order(n: int) -> List[int]:
    """A larger value followed by n-1 equal ones."""
    seq = [EQUAL_VALUE] * n
    if seq:
        seq[0] = EQUAL_VALUE + 1
    return seq


SEQUENCES: "OrderedDict[str, Callable[[int], List[int]]]" = OrderedDict([
    ("random_sequence", random_sequence),
    ("increasing_sequence", increasing_sequence),
    ("decreasing_sequence", decreasing_sequence),
    ("equal_sequence", equal_sequence),
    ("last_out_of_order", last_out_of_order),
    ("first_out_of_order", first_out_of_order),
])


def get_sequence(name: str) -> Callable[[int], List[int]]:
    try:
        return SEQUENCES[name]
    except KeyError:
        raise UnknownSequenceError(name, list(SEQUENCES)) from None
