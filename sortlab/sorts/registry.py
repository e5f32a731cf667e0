"""
Sort Roster
===========
Every sort in the package under its benchmark name, in benchmark order.
All entries share the ``sort(seq) -> None`` in-place contract.
"""

from collections import OrderedDict
from typing import Callable, List

from sortlab.sort_errors import UnknownSortError
from sortlab.sorts.elementary_sorts import bubble_sort, gnome_sort, insertion_sort, selection_sort
from sortlab.sorts.heap_sort import heap_sort
from sortlab.sorts.merge_sort import (
    merge_sort_bottom_up,
    merge_sort_bottom_up_insertion,
    merge_sort_top_down,
    merge_sort_top_down_insertion,
)
from sortlab.sorts.native_sort import native_sort, native_unstable_sort
from sortlab.sorts.quick_sort import quick_sort, quick_sort_3way
from sortlab.sorts.shell_sort import shell_sort

SortFn = Callable[[List], None]

SORTS: "OrderedDict[str, SortFn]" = OrderedDict([
    ("gnome_sort", gnome_sort),
    ("bubble_sort", bubble_sort),
    ("selection_sort", selection_sort),
    ("insertion_sort", insertion_sort),
    ("shell_sort", shell_sort),
    ("heap_sort", heap_sort),
    ("quick_sort", quick_sort),
    ("quick_sort_3way", quick_sort_3way),
    ("merge_sort_top_down", merge_sort_top_down),
    ("merge_sort_top_down_insertion", merge_sort_top_down_insertion),
    ("merge_sort_bottom_up", merge_sort_bottom_up),
    ("merge_sort_bottom_up_insertion", merge_sort_bottom_up_insertion),
    ("native_sort", native_sort),
    ("native_unstable_sort", native_unstable_sort),
])

# sorts that keep equal elements in their original relative order
STABLE_SORTS = (
    "gnome_sort",
    "bubble_sort",
    "insertion_sort",
    "merge_sort_top_down",
    "merge_sort_top_down_insertion",
    "merge_sort_bottom_up",
    "merge_sort_bottom_up_insertion",
    "native_sort",
)

# O(n^2) sorts, skipped by default in quick benchmark runs
QUADRATIC_SORTS = ("gnome_sort", "bubble_sort", "selection_sort", "insertion_sort")


def get_sort(name: str) -> SortFn:
    try:
        return SORTS[name]
    except KeyError:
        raise UnknownSortError(name, list(SORTS)) from None
