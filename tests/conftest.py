"""Shared test fixtures for front-runner tests.

This module provides common fixtures used across test modules:
- rng: Seeded random number generator
- make_population: Build Solutions from objective rows and violations
- reference_ranks: Brute-force front peeling used as a test oracle
- Small populations with known front structure
"""

from collections.abc import Callable, Sequence

import numpy as np
import pytest

from front_runner import OverallConstraintViolation, Solution, dominates_matrix


@pytest.fixture
def rng() -> np.random.Generator:
    """Provide a seeded random number generator for deterministic tests."""
    return np.random.default_rng(42)


@pytest.fixture
def make_population() -> Callable[..., list[Solution]]:
    """Build a list of Solutions from objective rows.

    Returns a function ``(objectives, violations=None) -> list[Solution]``.
    Violations, when given, are set through the OverallConstraintViolation
    attribute; zeros are left unset so they read as feasible by default.
    """

    def build(objectives, violations: Sequence[float] | None = None) -> list[Solution]:
        population = [Solution.from_objectives(row) for row in np.asarray(objectives, dtype=np.float64)]
        if violations is not None:
            attribute = OverallConstraintViolation()
            for solution, value in zip(population, violations, strict=True):
                if value != 0:
                    attribute.set_attribute(solution, value)
        return population

    return build


@pytest.fixture
def reference_ranks() -> Callable[[np.ndarray], np.ndarray]:
    """Brute-force non-dominated sort: repeatedly remove the non-dominated set."""

    def peel(objectives: np.ndarray) -> np.ndarray:
        n = objectives.shape[0]
        ranks = np.full(n, -1, dtype=np.int64)
        dom = dominates_matrix(objectives)
        remaining = np.arange(n)
        rank = 0
        while remaining.size > 0:
            sub = dom[np.ix_(remaining, remaining)]
            front_mask = ~sub.any(axis=0)
            ranks[remaining[front_mask]] = rank
            remaining = remaining[~front_mask]
            rank += 1
        return ranks

    return peel


@pytest.fixture
def layered_objectives() -> np.ndarray:
    """Objectives with three known fronts.

    Layout (minimization):
        Front 0: [1,1]
        Front 1: [2,2], [1,3], [3,1]
        Front 2: [3,3]
    """
    return np.array(
        [
            [1.0, 1.0],  # 0: front 0
            [2.0, 2.0],  # 1: front 1
            [3.0, 3.0],  # 2: front 2
            [1.0, 3.0],  # 3: front 1
            [3.0, 1.0],  # 4: front 1
        ]
    )


@pytest.fixture
def random_objectives(rng: np.random.Generator) -> np.ndarray:
    """Random 3-objective cloud with some duplicated rows."""
    objectives = rng.integers(0, 6, size=(60, 3)).astype(np.float64)
    objectives[50:] = objectives[:10]
    return objectives
