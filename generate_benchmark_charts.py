"""
Benchmark Chart Generator
=========================
Runs the sort benchmark and renders charts comparing throughput.
Run:  python generate_benchmark_charts.py --quick
Output: benchmark_charts/ folder with 2 PNG files.
"""

import sys
import os
import argparse
import numpy as np
from typing import List, Optional, Tuple

# Ensure project root is on the path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

import matplotlib
matplotlib.use("Agg")  # Non-interactive backend for file output
import matplotlib.pyplot as plt

from benchmark_sorts import select
from sortlab.benchmark import Results, format_line, run_benchmark, tabulate
from sortlab.generators.sequences import SEQUENCES, get_sequence
from sortlab.sorts.registry import QUADRATIC_SORTS, SORTS, get_sort

# ── Color Palette & Styling ───────────────────────────────────────────
BG_COLOR = "#1A1B26"       # Tokyo Night background
CARD_COLOR = "#24283B"     # Card panels
TEXT_COLOR = "#C0CAF5"     # Soft lavender text
GRID_COLOR = "#414868"     # Subtle grid lines
BASELINE = "native_sort"


def setup_style():
    """Apply a dark, presentation-friendly matplotlib style."""
    plt.rcParams.update({
        "figure.facecolor": BG_COLOR,
        "axes.facecolor": CARD_COLOR,
        "axes.edgecolor": GRID_COLOR,
        "axes.labelcolor": TEXT_COLOR,
        "axes.titleweight": "bold",
        "text.color": TEXT_COLOR,
        "xtick.color": TEXT_COLOR,
        "ytick.color": TEXT_COLOR,
        "grid.color": GRID_COLOR,
        "grid.alpha": 0.3,
        "font.size": 11,
        "axes.titlesize": 16,
        "legend.facecolor": CARD_COLOR,
        "legend.edgecolor": GRID_COLOR,
        "legend.fontsize": 9,
        "figure.dpi": 150,
        "savefig.dpi": 150,
        "savefig.bbox": "tight",
        "savefig.facecolor": BG_COLOR,
    })


def speed_matrix(results: Results) -> Tuple[List[str], List[str], np.ndarray]:
    """Return (sort names, sequence names, speeds[sort, sequence])."""
    sort_names = list(results)
    sequence_names = list(next(iter(results.values())))
    speeds = np.array([
        [results[s][q].speed for q in sequence_names]
        for s in sort_names
    ], dtype=float)
    return sort_names, sequence_names, speeds


def relative_speeds(sort_names: List[str], speeds: np.ndarray) -> np.ndarray:
    """Speeds divided by the baseline row; raw speeds if no baseline ran."""
    if BASELINE not in sort_names:
        return speeds
    baseline = speeds[sort_names.index(BASELINE)]
    return speeds / np.where(baseline > 0, baseline, 1.0)


def chart_1_throughput(results: Results, out_dir: str):
    """Grouped bar chart: log-scaled speed per sort, one bar per input."""
    sort_names, sequence_names, speeds = speed_matrix(results)
    fig, ax = plt.subplots(figsize=(max(10, len(sort_names) * 1.1), 6))
    x = np.arange(len(sort_names))
    width = 0.8 / len(sequence_names)
    colors = plt.cm.viridis(np.linspace(0.15, 0.95, len(sequence_names)))

    for i, name in enumerate(sequence_names):
        ax.bar(x + i * width, speeds[:, i], width, label=name,
               color=colors[i], edgecolor="none", alpha=0.9, zorder=3)

    ax.set_yscale("log")
    ax.set_xticks(x + width * (len(sequence_names) - 1) / 2)
    ax.set_xticklabels([n.replace("_", "\n") for n in sort_names], fontsize=8)
    ax.set_ylabel("Elements / second (log)")
    ax.set_title("Sort Throughput by Input Distribution", fontsize=16, pad=15)
    ax.legend(loc="upper left")
    ax.grid(axis="y", zorder=0)
    ax.spines["top"].set_visible(False)
    ax.spines["right"].set_visible(False)

    fig.savefig(os.path.join(out_dir, "1_throughput.png"))
    plt.close(fig)
    print("  Chart 1: Throughput")


def chart_2_relative_heatmap(results: Results, out_dir: str):
    """Heatmap: speed relative to the built-in sort (1.0 = as fast)."""
    sort_names, sequence_names, speeds = speed_matrix(results)
    relative = relative_speeds(sort_names, speeds)

    fig, ax = plt.subplots(figsize=(10, max(4, len(sort_names) * 0.5)))
    image = ax.imshow(np.log10(np.clip(relative, 1e-6, None)), cmap="magma", aspect="auto")

    ax.set_xticks(np.arange(len(sequence_names)))
    ax.set_xticklabels(sequence_names, rotation=30, ha="right", fontsize=9)
    ax.set_yticks(np.arange(len(sort_names)))
    ax.set_yticklabels(sort_names, fontsize=9)
    for r in range(len(sort_names)):
        for c in range(len(sequence_names)):
            ax.text(c, r, f"{relative[r, c]:.3g}", ha="center", va="center",
                    fontsize=7, color="white")

    colorbar = fig.colorbar(image, ax=ax)
    colorbar.set_label(f"log10(speed / {BASELINE})")
    ax.set_title(f"Speed Relative to {BASELINE}", fontsize=16, pad=15)

    fig.savefig(os.path.join(out_dir, "2_relative_heatmap.png"))
    plt.close(fig)
    print("  Chart 2: Relative Speed Heatmap")


def main(argv: Optional[List[str]] = None):
    parser = argparse.ArgumentParser(description="Generate Benchmark Charts")
    parser.add_argument("--sorts", type=str, default="all",
                        help=f"Comma-separated sorts (default: all). Known: {', '.join(SORTS)}")
    parser.add_argument("--sequences", type=str, default="all",
                        help=f"Comma-separated inputs (default: all). Known: {', '.join(SEQUENCES)}")
    parser.add_argument("--repetitions", type=int, default=None,
                        help="Sorts per measured size (default: SORTLAB_REPETITIONS or 100)")
    parser.add_argument("--time-limit-ms", type=int, default=None,
                        help="Batch time per measurement (default: SORTLAB_TIME_LIMIT_MS or 500)")
    parser.add_argument("--start-size", type=int, default=None,
                        help="First sequence length (default: SORTLAB_START_SIZE or 128)")
    parser.add_argument("--max-size", type=int, default=None,
                        help="Largest sequence length (default: SORTLAB_MAX_SIZE)")
    parser.add_argument("--quick", action="store_true",
                        help="Quick mode: skip quadratic sorts, 10 repetitions, 100 ms batches")
    parser.add_argument("--out-dir", type=str, default=None,
                        help="Output folder (default: benchmark_charts/ next to this script)")
    args = parser.parse_args(argv)

    sorts = select(args.sorts, SORTS, get_sort)
    sequences = select(args.sequences, SEQUENCES, get_sequence)
    repetitions, time_limit_ms = args.repetitions, args.time_limit_ms
    if args.quick:
        sorts = {name: fn for name, fn in sorts.items() if name not in QUADRATIC_SORTS}
        repetitions = repetitions or 10
        time_limit_ms = time_limit_ms or 100
    if not sorts:
        parser.error("no sorts selected")
    if not sequences:
        parser.error("no sequences selected")

    out_dir = args.out_dir or os.path.join(os.path.dirname(os.path.abspath(__file__)),
                                           "benchmark_charts")
    os.makedirs(out_dir, exist_ok=True)

    setup_style()

    print(f"  Sorts         : {len(sorts)}")
    print(f"  Inputs        : {len(sequences)}")
    print(f"  Output folder : {out_dir}")
    print()

    # ── Phase 1: Benchmark ──
    print("Phase 1/2: Running Benchmarks...")
    name_width = max(len(n) for n in sorts)
    sequence_width = max(len(n) for n in sequences)
    results = run_benchmark(
        sorts,
        sequences,
        progress=lambda r: print(format_line(r, name_width, sequence_width)),
        repetitions=repetitions,
        time_limit_ms=time_limit_ms,
        start_size=args.start_size,
        max_size=args.max_size,
    )

    # ── Phase 2: Generate Charts ──
    print("\nPhase 2/2: Generating Charts...")
    chart_1_throughput(results, out_dir)
    chart_2_relative_heatmap(results, out_dir)

    print()
    print(tabulate(results))
    print(f"\nCharts saved to: {out_dir}")
    return results


if __name__ == "__main__":
    main()
