"""Benchmark runner comparing front-runner sorters against Pymoo on ZDT populations.

This script ranks random ZDT1-3 populations with every registered sorter,
reusing one ranking engine per sorter across runs the way an optimizer reuses
it across generations, and checks each ranking against Pymoo's
NonDominatedSorting.

Usage:
    uv run --extra benchmark python benchmarks/zdt/run_benchmark.py
"""

import json
import logging
import sys
import time
from collections import defaultdict
from datetime import UTC, datetime
from pathlib import Path

# Add project root to path for imports
PROJECT_ROOT = Path(__file__).parent.parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

import numpy as np

from benchmarks.reference import pymoo_constrained_ranks, pymoo_ranks
from benchmarks.zdt.problems import N_VARS, PROBLEMS, sample_population
from front_runner import FastDominanceRanking, OverallConstraintViolation, Solution, list_sorters

# Configure logging
logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(levelname)s - %(message)s")
logger = logging.getLogger(__name__)


# Experiment parameters
POP_SIZES = [100, 200, 400]
N_RUNS = 10
SEEDS = list(range(N_RUNS))
CONSTRAINED = [False, True]


def make_population(objectives: np.ndarray, violations: np.ndarray | None) -> list[Solution]:
    """Wrap objective rows in solutions, tagging violations when given."""
    population = [Solution.from_objectives(row) for row in objectives]
    if violations is not None:
        violation = OverallConstraintViolation()
        for solution, value in zip(population, violations, strict=True):
            violation.set_attribute(solution, value)
    return population


def run_front_runner(ranking: FastDominanceRanking, population: list[Solution]) -> tuple[np.ndarray, float]:
    """Rank a population with a reusable ranking engine.

    Args:
        ranking: The engine, possibly already warmed up by earlier runs.
        population: Solutions to rank.

    Returns:
        Tuple of (ranks, elapsed_time_seconds).
    """
    start_time = time.perf_counter()
    ranking.compute_ranking(population)
    elapsed = time.perf_counter() - start_time

    return ranking.ranks(population), elapsed


def run_pymoo(objectives: np.ndarray, violations: np.ndarray | None) -> tuple[np.ndarray, float]:
    """Rank the same objectives with Pymoo.

    Returns:
        Tuple of (ranks, elapsed_time_seconds).
    """
    start_time = time.perf_counter()
    if violations is None:
        ranks = pymoo_ranks(objectives)
    else:
        ranks = pymoo_constrained_ranks(objectives, violations)
    elapsed = time.perf_counter() - start_time

    return ranks, elapsed


def run_benchmark() -> dict:
    """Run the full benchmark suite.

    Returns:
        Dictionary containing metadata and results.
    """
    timestamp = datetime.now(UTC).isoformat()
    sorters = list_sorters()

    metadata = {
        "timestamp": timestamp,
        "parameters": {
            "pop_sizes": POP_SIZES,
            "n_vars": N_VARS,
            "n_runs": N_RUNS,
            "seeds": SEEDS,
            "sorters": sorters,
        },
    }

    results = []
    rankings = {name: FastDominanceRanking(sorter=name) for name in sorters}

    total_runs = len(PROBLEMS) * len(POP_SIZES) * len(CONSTRAINED) * N_RUNS
    current_run = 0

    for problem_name, problem_fn in PROBLEMS.items():
        for pop_size in POP_SIZES:
            for constrained in CONSTRAINED:
                for seed in SEEDS:
                    current_run += 1
                    label = "constrained" if constrained else "unconstrained"
                    logger.info(
                        f"Running [{current_run}/{total_runs}]: {problem_name.upper()} "
                        f"n={pop_size} {label} (seed={seed})"
                    )

                    objectives, violations = sample_population(problem_fn, pop_size, np.random.default_rng(seed))
                    if not constrained:
                        violations = None

                    expected, elapsed = run_pymoo(objectives, violations)
                    results.append(
                        {
                            "library": "pymoo",
                            "problem": problem_name.upper(),
                            "pop_size": pop_size,
                            "constrained": constrained,
                            "seed": seed,
                            "n_fronts": int(expected.max()) + 1,
                            "matches_reference": True,
                            "time_seconds": elapsed,
                        }
                    )

                    population = make_population(objectives, violations)
                    for name, ranking in rankings.items():
                        ranks, elapsed = run_front_runner(ranking, population)
                        matches = bool(np.array_equal(ranks, expected))
                        if not matches:
                            logger.warning(f"  {name} disagrees with pymoo on {problem_name.upper()} (seed={seed})")

                        results.append(
                            {
                                "library": name,
                                "problem": problem_name.upper(),
                                "pop_size": pop_size,
                                "constrained": constrained,
                                "seed": seed,
                                "n_fronts": ranking.number_of_subfronts,
                                "matches_reference": matches,
                                "time_seconds": elapsed,
                            }
                        )

    return {"metadata": metadata, "results": results}


def print_summary(results: dict) -> None:
    """Print a summary table of the benchmark results.

    Args:
        results: The benchmark results dictionary.
    """
    time_data = defaultdict(lambda: defaultdict(list))
    mismatches = defaultdict(int)

    for r in results["results"]:
        key = (r["pop_size"], r["constrained"])
        time_data[key][r["library"]].append(r["time_seconds"])
        if not r["matches_reference"]:
            mismatches[r["library"]] += 1

    libraries = [*results["metadata"]["parameters"]["sorters"], "pymoo"]

    # Print header
    print("\n" + "=" * 80)
    print("BENCHMARK SUMMARY")
    print("=" * 80)
    print(f"\nParameters: pop_sizes={POP_SIZES}, runs={N_RUNS}, problems={len(PROBLEMS)}")
    print()

    print("Timing (mean milliseconds per ranking):")
    header = f"{'Size':<8}{'Constr.':<10}"
    for lib in libraries:
        header += f"{lib:>12}"
    print(header)
    print("-" * (18 + 12 * len(libraries)))

    for pop_size, constrained in sorted(time_data):
        row = f"{pop_size:<8}{'yes' if constrained else 'no':<10}"
        for lib in libraries:
            times = time_data[(pop_size, constrained)][lib]
            if times:
                row += f"{np.mean(times) * 1000:>12.3f}"
            else:
                row += f"{'N/A':>12}"
        print(row)

    print("-" * (18 + 12 * len(libraries)))

    print("\nDisagreements with pymoo:")
    for lib in libraries[:-1]:
        print(f"  {lib:<10}{mismatches[lib]:>6}")

    print()


def main() -> None:
    """Main entry point for the benchmark."""
    logger.info("Starting ZDT ranking benchmark suite")
    logger.info(f"Parameters: pop_sizes={POP_SIZES}, runs={N_RUNS}, sorters={list_sorters()}")

    results = run_benchmark()

    # Save results to JSON
    output_path = Path(__file__).parent / "results" / "benchmark_results.json"
    output_path.parent.mkdir(parents=True, exist_ok=True)

    with open(output_path, "w") as f:
        json.dump(results, f, indent=2)

    logger.info(f"Results saved to {output_path}")

    # Print summary
    print_summary(results)


if __name__ == "__main__":
    main()
