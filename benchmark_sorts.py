import sys
import os
import csv
import argparse
from typing import Dict, List, Optional

# Add project root to path
sys.path.append(os.path.dirname(os.path.abspath(__file__)))

import sortlab.benchmark
from sortlab.benchmark import BenchmarkResult, format_line, results_to_rows, run_benchmark, tabulate
from sortlab.generators.sequences import SEQUENCES, get_sequence
from sortlab.sorts.registry import SORTS, get_sort


def select(names: str, registry: Dict, lookup) -> Dict:
    """
    Pick entries from *registry* by a comma-separated name list.
    Empty or "all" selects everything, in roster order.
    """
    if not names or names == "all":
        return dict(registry)
    selected = {}
    for name in names.split(","):
        name = name.strip()
        if name:
            selected[name] = lookup(name)
    return selected


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Benchmark in-place sorting algorithms")
    parser.add_argument("--sorts", type=str, default="all",
                        help=f"Comma-separated sorts (default: all). Known: {', '.join(SORTS)}")
    parser.add_argument("--sequences", type=str, default="all",
                        help=f"Comma-separated inputs (default: all). Known: {', '.join(SEQUENCES)}")
    parser.add_argument("--repetitions", type=int, default=None,
                        help="Sorts per measured size (env SORTLAB_REPETITIONS, default 100)")
    parser.add_argument("--time-limit-ms", type=int, default=None,
                        help="Batch time to reach before reporting (env SORTLAB_TIME_LIMIT_MS, default 500)")
    parser.add_argument("--start-size", type=int, default=None,
                        help="First sequence length (env SORTLAB_START_SIZE, default 128)")
    parser.add_argument("--max-size", type=int, default=None,
                        help="Largest sequence length (env SORTLAB_MAX_SIZE)")
    parser.add_argument("--output", type=str, default=None, help="Optional CSV output file")
    parser.add_argument("--debug", action="store_true", help="Print every doubling step")
    return parser


def main(argv: Optional[List[str]] = None):
    parser = build_parser()
    args = parser.parse_args(argv)

    sorts = select(args.sorts, SORTS, get_sort)
    sequences = select(args.sequences, SEQUENCES, get_sequence)
    if not sorts:
        parser.error("no sorts selected")
    if not sequences:
        parser.error("no sequences selected")
    sortlab.benchmark.DEBUG_MODE = args.debug

    name_width = max(len(name) for name in sorts)
    sequence_width = max(len(name) for name in sequences)

    print(f"Starting Benchmark: {len(sorts)} sorts x {len(sequences)} inputs")

    def report(result: BenchmarkResult):
        print(format_line(result, name_width, sequence_width))

    results = run_benchmark(
        sorts,
        sequences,
        progress=report,
        repetitions=args.repetitions,
        time_limit_ms=args.time_limit_ms,
        start_size=args.start_size,
        max_size=args.max_size,
    )

    print("\nSpeed (elements/s):")
    print(tabulate(results))

    if args.output:
        rows = results_to_rows(results)
        with open(args.output, "w", newline="") as f:
            dict_writer = csv.DictWriter(f, fieldnames=list(rows[0].keys()))
            dict_writer.writeheader()
            dict_writer.writerows(rows)
        print(f"\nResults saved to {args.output}")

    return results


if __name__ == "__main__":
    main()
