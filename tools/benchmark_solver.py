"""
Benchmark script for level authoring.

Authors a number of seeded levels and reports how often a solvable
assignment was found, how many tries it took and how long solving ran.

Usage:
    python tools/benchmark_solver.py
    python tools/benchmark_solver.py --level stacked --types 6 --runs 10
"""

import sys
import time
import argparse
import random
import statistics
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from tilematch.authoring import AUTHORING_CONFIG, find_solvable_assignment
from tilematch.layout import LEVELS, create_layout


def run_benchmark(level: str, types: int, runs: int, max_tries: int):
    """Author `runs` levels and print summary statistics."""
    print(f"\n{'='*60}")
    print(f"Benchmark: {level}, {types} types, {runs} runs")
    print(f"{'='*60}")

    layout = create_layout(level)
    copies = len(layout) // types
    print(f"  Slots: {len(layout)}, layers: {layout.layer_counts()}")
    print(f"  Budget: {AUTHORING_CONFIG}")

    solved = 0
    tries = []
    solve_times = []
    expansions = []

    for seed in range(runs):
        start = time.perf_counter()
        result = find_solvable_assignment(
            layout,
            piece_types=list(range(types)),
            copies_per_type=copies,
            max_tries=max_tries,
            rng=random.Random(seed),
            label=f"{level}#{seed}",
        )
        elapsed = (time.perf_counter() - start) * 1000

        tries.append(result.tries)
        solve_times.append(elapsed)
        expansions.append(result.result.stats.expansions_used)
        if result.solvable:
            solved += 1

        status = "PASS" if result.solvable else "FAIL"
        print(f"    seed {seed:3d}: [{status}] tries={result.tries:2d} "
              f"expansions={result.result.stats.expansions_used:5d} {elapsed:8.1f}ms")

    print(f"\n  Solvable: {solved}/{runs}")
    print(f"  Tries: mean {statistics.mean(tries):.1f}, max {max(tries)}")
    print(f"  Time: mean {statistics.mean(solve_times):.1f}ms, "
          f"max {max(solve_times):.1f}ms")
    print(f"  Expansions (last try): mean {statistics.mean(expansions):.0f}")
    return solved


def main():
    parser = argparse.ArgumentParser(description="Authoring benchmark")
    parser.add_argument("--level", default="level1", choices=sorted(LEVELS.keys()))
    parser.add_argument("--types", type=int, default=3)
    parser.add_argument("--runs", type=int, default=20)
    parser.add_argument("--tries", type=int, default=50)
    args = parser.parse_args()

    layout_size = len(create_layout(args.level))
    if args.types <= 0 or layout_size % args.types:
        print(f"{layout_size} slots cannot be split across {args.types} types")
        return 1

    run_benchmark(args.level, args.types, args.runs, args.tries)
    return 0


if __name__ == "__main__":
    sys.exit(main())
