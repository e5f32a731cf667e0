"""
Benchmark Engine
================
Throughput measurement for the sort roster.

For each (sort, input distribution) pair, :func:`measure` sorts a fresh
sequence ``repetitions`` times, checks the result every time, and keeps
doubling the sequence length until one batch takes at least
``time_limit_ms``.  The reported speed is elements sorted per second at
that size.

Set ``DEBUG_MODE = True`` to print every doubling step.
"""

import time
from collections import OrderedDict
from dataclasses import asdict, dataclass
from typing import Any, Callable, Dict, List, Optional

from sortlab.sort_errors import (
    resolve_max_size,
    resolve_repetitions,
    resolve_start_size,
    resolve_time_limit_ms,
)
from sortlab.validators import assert_ordered

DEBUG_MODE = False

SortFn = Callable[[List], None]
SequenceFn = Callable[[int], List]
Results = Dict[str, Dict[str, "BenchmarkResult"]]


@dataclass
class BenchmarkResult:
    """Final measurement for one (sort, sequence) pair."""
    sort_name: str
    sequence_name: str
    size: int            # sequence length of the measured batch
    repetitions: int     # sorts per batch
    elapsed_ms: float    # wall time of the whole batch
    speed: float         # elements sorted per second


def measure(
    sort_fn: SortFn,
    sequence_fn: SequenceFn,
    *,
    repetitions: Optional[int] = None,
    time_limit_ms: Optional[int] = None,
    start_size: Optional[int] = None,
    max_size: Optional[int] = None,
    sort_name: str = "sort",
    sequence_name: str = "sequence",
    validate: bool = True,
) -> BenchmarkResult:
    """
    Time *sort_fn* on inputs from *sequence_fn* of doubling length.

    Unset limits fall back to the SORTLAB_* environment variables and
    then to the defaults in :mod:`sortlab.sort_errors`.

    Raises
    ------
    OrderingViolationError
        If *validate* is set and a sorted batch comes back out of order.
    """
    repetitions = resolve_repetitions(repetitions)
    time_limit_ms = resolve_time_limit_ms(time_limit_ms)
    n = resolve_start_size(start_size)
    max_size = resolve_max_size(max_size)
    context = f"{sort_name} on {sequence_name}"

    while True:
        elapsed = 0.0
        for _ in range(repetitions):
            seq = sequence_fn(n)
            started = time.perf_counter()
            sort_fn(seq)
            elapsed += time.perf_counter() - started
            if validate:
                assert_ordered(seq, context=context)

        elapsed_ms = elapsed * 1000
        if DEBUG_MODE:
            print(f"[BENCH DEBUG] {context}: n={n} reps={repetitions} elapsed={elapsed_ms:.1f} ms")

        if elapsed_ms >= time_limit_ms or n >= max_size:
            speed = (n / elapsed) * repetitions if elapsed > 0 else float("inf")
            return BenchmarkResult(
                sort_name=sort_name,
                sequence_name=sequence_name,
                size=n,
                repetitions=repetitions,
                elapsed_ms=elapsed_ms,
                speed=speed,
            )
        n *= 2


def run_benchmark(
    sorts: Dict[str, SortFn],
    sequences: Dict[str, SequenceFn],
    progress: Optional[Callable[[BenchmarkResult], None]] = None,
    **options: Any,
) -> Results:
    """
    Measure every sort against every sequence.

    Returns results keyed as ``results[sort_name][sequence_name]``, in
    the iteration order of the two input mappings.  *options* are passed
    through to :func:`measure`; *progress* is called after each pair.
    """
    results: Results = OrderedDict()
    for sort_name, sort_fn in sorts.items():
        row: Dict[str, BenchmarkResult] = OrderedDict()
        for sequence_name, sequence_fn in sequences.items():
            result = measure(
                sort_fn,
                sequence_fn,
                sort_name=sort_name,
                sequence_name=sequence_name,
                **options,
            )
            row[sequence_name] = result
            if progress is not None:
                progress(result)
        results[sort_name] = row
    return results


# ── Reporting ──────────────────────────────────────────────────────────


def format_line(result: BenchmarkResult, name_width: int = 0, sequence_width: int = 0) -> str:
    """One console line per measurement."""
    return (
        f"testing {result.sort_name:<{name_width}} with {result.sequence_name:<{sequence_width}} : "
        f"{result.size:12} in {result.elapsed_ms:5.0f} ms = {result.speed:>15.2f} elements/s"
    )


def tabulate(results: Results) -> str:
    """
    Render speeds as a pipe-separated table: one row per sort, one column
    per sequence, cells right-aligned to the widest sequence name.
    """
    sort_names = list(results)
    sequence_names: List[str] = []
    for row in results.values():
        for name in row:
            if name not in sequence_names:
                sequence_names.append(name)

    sort_width = max((len(s) for s in sort_names), default=0)
    cell_width = max((len(s) for s in sequence_names), default=0)

    lines = []
    header = f"{'':>{sort_width}} |"
    for name in sequence_names:
        header += f" {name:>{cell_width}} |"
    lines.append(header)

    for sort_name in sort_names:
        line = f"{sort_name:<{sort_width}} |"
        for name in sequence_names:
            result = results[sort_name].get(name)
            if result is None:
                line += f" {'-':>{cell_width}} |"
            else:
                line += f" {result.speed:>{cell_width}.2f} |"
        lines.append(line)

    return "\n".join(lines)


def results_to_rows(results: Results) -> List[Dict[str, Any]]:
    """Flatten results into dicts, one per measurement (for csv.DictWriter)."""
    return [asdict(result) for row in results.values() for result in row.values()]
