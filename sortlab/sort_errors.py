"""
Benchmark errors and limits.
"""

from __future__ import annotations

import os
from typing import Any, Dict, Optional

DEFAULT_REPETITIONS = 100
DEFAULT_TIME_LIMIT_MS = 500
DEFAULT_START_SIZE = 128
DEFAULT_MAX_SIZE = 1 << 22


class OrderingViolationError(AssertionError):
    """
    Raised when a sorted sequence has a pair of neighbours out of order.
    """

    def __init__(
        self,
        index: int,
        left: Any,
        right: Any,
        *,
        context: str | None = None,
    ) -> None:
        message = f"ordering failed at index {index}: {left!r} > {right!r}"
        if context:
            message = f"{context}: {message}"
        super().__init__(message)
        self.index = index
        self.left = left
        self.right = right
        self.context = context


class PermutationViolationError(AssertionError):
    """
    Raised when a sort lost, duplicated or invented elements.

    ``diff`` maps each offending value to (count before - count after).
    """

    def __init__(self, diff: Dict[Any, int], *, context: str | None = None) -> None:
        message = f"result is not a permutation of the input: {diff!r}"
        if context:
            message = f"{context}: {message}"
        super().__init__(message)
        self.diff = diff
        self.context = context


class UnknownSortError(KeyError):
    """Raised when a sort name is not in the roster."""

    def __init__(self, name: str, known: list) -> None:
        super().__init__(f"unknown sort {name!r}; choose from: {', '.join(known)}")
        self.name = name
        self.known = known


class UnknownSequenceError(KeyError):
    """Raised when an input distribution name is not registered."""

    def __init__(self, name: str, known: list) -> None:
        super().__init__(f"unknown sequence {name!r}; choose from: {', '.join(known)}")
        self.name = name
        self.known = known


def _resolve_positive_int(value: Optional[Any], env_name: str, default: int) -> int:
    """
    Resolve a positive integer setting.

    Priority:
    1) explicit *value* (e.g. a CLI flag)
    2) env *env_name*
    3) *default*

    Values that are not positive integers are ignored.
    """
    raw = value
    if raw is None:
        raw = os.getenv(env_name)
    if raw is None:
        return default

    try:
        resolved = int(raw)
        if resolved > 0:
            return resolved
    except (TypeError, ValueError):
        pass
    return default


def resolve_repetitions(value: Optional[Any] = None) -> int:
    """Sorts per measured size.  Env override: SORTLAB_REPETITIONS."""
    return _resolve_positive_int(value, "SORTLAB_REPETITIONS", DEFAULT_REPETITIONS)


def resolve_time_limit_ms(value: Optional[Any] = None) -> int:
    """Wall time a measurement must reach.  Env override: SORTLAB_TIME_LIMIT_MS."""
    return _resolve_positive_int(value, "SORTLAB_TIME_LIMIT_MS", DEFAULT_TIME_LIMIT_MS)


def resolve_start_size(value: Optional[Any] = None) -> int:
    return _resolve_positive_int(value, "SORTLAB_START_SIZE", DEFAULT_START_SIZE)


def resolve_max_size(value: Optional[Any] = None) -> int:
    return _resolve_positive_int(value, "SORTLAB_MAX_SIZE", DEFAULT_MAX_SIZE)
