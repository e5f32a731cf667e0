import unittest
import csv
import io
import os
import sys
import tempfile
from contextlib import redirect_stderr, redirect_stdout
from unittest import mock

# Add project root to path
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

import benchmark_sorts
import sortlab.benchmark
from sortlab.benchmark import BenchmarkResult, format_line, measure, results_to_rows, run_benchmark, tabulate
from sortlab.generators.sequences import SEQUENCES, equal_sequence, increasing_sequence
from sortlab.sort_errors import (
    DEFAULT_REPETITIONS,
    DEFAULT_TIME_LIMIT_MS,
    OrderingViolationError,
    UnknownSequenceError,
    UnknownSortError,
    resolve_max_size,
    resolve_repetitions,
    resolve_start_size,
    resolve_time_limit_ms,
)
from sortlab.sorts.heap_sort import heap_sort
from sortlab.sorts.native_sort import native_sort

# Limits that make every measurement stop on max_size, never on time
FAST = dict(repetitions=2, time_limit_ms=10 ** 9, start_size=8, max_size=32)


def reverse_in_place(seq):
    seq.reverse()


class TestConfigResolution(unittest.TestCase):

    def test_defaults(self):
        with mock.patch.dict(os.environ, {}, clear=True):
            self.assertEqual(resolve_repetitions(), DEFAULT_REPETITIONS)
            self.assertEqual(resolve_time_limit_ms(), DEFAULT_TIME_LIMIT_MS)
            self.assertEqual(resolve_start_size(), 128)
            self.assertEqual(resolve_max_size(), 1 << 22)

    def test_environment_override(self):
        with mock.patch.dict(os.environ, {"SORTLAB_REPETITIONS": "7", "SORTLAB_TIME_LIMIT_MS": "50"}):
            self.assertEqual(resolve_repetitions(), 7)
            self.assertEqual(resolve_time_limit_ms(), 50)

    def test_explicit_value_wins(self):
        with mock.patch.dict(os.environ, {"SORTLAB_REPETITIONS": "7"}):
            self.assertEqual(resolve_repetitions(3), 3)

    def test_invalid_values_fall_back(self):
        with mock.patch.dict(os.environ, {"SORTLAB_START_SIZE": "lots"}):
            self.assertEqual(resolve_start_size(), 128)
        self.assertEqual(resolve_repetitions(0), DEFAULT_REPETITIONS)
        self.assertEqual(resolve_repetitions(-5), DEFAULT_REPETITIONS)


class TestMeasure(unittest.TestCase):

    def test_doubles_until_max_size(self):
        result = measure(native_sort, increasing_sequence, sort_name="native_sort",
                         sequence_name="increasing_sequence", **FAST)
        self.assertIsInstance(result, BenchmarkResult)
        self.assertEqual(result.size, 32)
        self.assertEqual(result.repetitions, 2)
        self.assertEqual(result.sort_name, "native_sort")
        self.assertEqual(result.sequence_name, "increasing_sequence")
        self.assertGreater(result.speed, 0)

    def test_stops_at_time_limit(self):
        sizes = []

        def slow_sort(seq):
            sizes.append(len(seq))
            seq.sort()

        with mock.patch("sortlab.benchmark.time.perf_counter", side_effect=[0.0, 1.0] * 10):
            result = measure(slow_sort, equal_sequence, repetitions=1, time_limit_ms=500,
                             start_size=16, max_size=1 << 20)
        self.assertEqual(result.size, 16)
        self.assertEqual(sizes, [16])
        self.assertAlmostEqual(result.elapsed_ms, 1000.0)
        self.assertAlmostEqual(result.speed, 16.0)

    def test_broken_sort_is_reported(self):
        with self.assertRaises(OrderingViolationError) as ctx:
            measure(reverse_in_place, increasing_sequence, sort_name="reverse",
                    sequence_name="increasing_sequence", **FAST)
        self.assertEqual(ctx.exception.context, "reverse on increasing_sequence")
        self.assertEqual(ctx.exception.index, 0)

    def test_validation_can_be_disabled(self):
        result = measure(reverse_in_place, increasing_sequence, validate=False, **FAST)
        self.assertEqual(result.size, 32)

    def test_debug_lines(self):
        buffer = io.StringIO()
        with mock.patch.object(sortlab.benchmark, "DEBUG_MODE", True), redirect_stdout(buffer):
            measure(native_sort, increasing_sequence, **FAST)
        lines = [line for line in buffer.getvalue().splitlines() if line.startswith("[BENCH DEBUG]")]
        self.assertEqual(len(lines), 3)  # n = 8, 16, 32


class TestRunBenchmark(unittest.TestCase):

    def setUp(self):
        self.sorts = {"heap_sort": heap_sort, "native_sort": native_sort}
        self.sequences = {"increasing_sequence": increasing_sequence, "equal_sequence": equal_sequence}
        self.seen = []
        self.results = run_benchmark(self.sorts, self.sequences, progress=self.seen.append, **FAST)

    def test_nested_results(self):
        self.assertEqual(list(self.results), ["heap_sort", "native_sort"])
        for row in self.results.values():
            self.assertEqual(list(row), ["increasing_sequence", "equal_sequence"])
        self.assertEqual(len(self.seen), 4)

    def test_tabulate(self):
        table = tabulate(self.results).splitlines()
        self.assertEqual(len(table), 3)
        self.assertIn("increasing_sequence", table[0])
        self.assertIn("equal_sequence", table[0])
        self.assertTrue(table[1].startswith("heap_sort   |"))
        self.assertTrue(table[2].startswith("native_sort |"))
        self.assertEqual(table[1].count("|"), 3)

    def test_tabulate_empty(self):
        self.assertEqual(tabulate({}), " |")

    def test_rows_for_csv(self):
        rows = results_to_rows(self.results)
        self.assertEqual(len(rows), 4)
        self.assertEqual(
            set(rows[0]),
            {"sort_name", "sequence_name", "size", "repetitions", "elapsed_ms", "speed"},
        )

    def test_format_line(self):
        result = BenchmarkResult("heap_sort", "equal_sequence", 1024, 100, 512.4, 199843.21)
        line = format_line(result, 12, 16)
        self.assertTrue(line.startswith("testing heap_sort    with equal_sequence   : "))
        self.assertTrue(line.endswith("199843.21 elements/s"))
        self.assertIn("        1024 in   512 ms", line)


class TestBenchmarkCli(unittest.TestCase):

    def test_select(self):
        self.assertEqual(list(benchmark_sorts.select("all", SEQUENCES, None)), list(SEQUENCES))
        picked = benchmark_sorts.select("heap_sort, native_sort", {}, lambda n: n.upper())
        self.assertEqual(picked, {"heap_sort": "HEAP_SORT", "native_sort": "NATIVE_SORT"})

    def test_unknown_names(self):
        with self.assertRaises(UnknownSortError):
            benchmark_sorts.main(["--sorts", "bogo_sort"])
        with self.assertRaises(UnknownSequenceError):
            benchmark_sorts.main(["--sequences", "zigzag"])

    def test_empty_selection_is_rejected(self):
        for argv in (["--sorts", ","], ["--sequences", " , "]):
            with self.subTest(argv=argv):
                with redirect_stderr(io.StringIO()), self.assertRaises(SystemExit) as ctx:
                    benchmark_sorts.main(argv)
                self.assertEqual(ctx.exception.code, 2)

    def test_main_writes_csv(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "results.csv")
            buffer = io.StringIO()
            with redirect_stdout(buffer):
                benchmark_sorts.main([
                    "--sorts", "shell_sort,quick_sort_3way",
                    "--sequences", "random_sequence,first_out_of_order",
                    "--repetitions", "2",
                    "--time-limit-ms", "1000000000",
                    "--start-size", "8",
                    "--max-size", "16",
                    "--output", path,
                ])
            with open(path, newline="") as f:
                rows = list(csv.DictReader(f))

        self.assertEqual(len(rows), 4)
        self.assertEqual({r["sort_name"] for r in rows}, {"shell_sort", "quick_sort_3way"})
        self.assertTrue(all(r["size"] == "16" for r in rows))
        self.assertIn("Speed (elements/s):", buffer.getvalue())


if __name__ == '__main__':
    unittest.main()
