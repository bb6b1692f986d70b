"""ZDT test problems used to generate benchmark populations.

The ZDT (Zitzler-Deb-Thiele) test suite is a standard benchmark for
multi-objective evolutionary algorithms. Evaluating random decision vectors
gives bi-objective populations with many layered fronts, which is the
workload the ranking engine sees in early generations.

All problems have:
- n decision variables in [0, 1]
- 2 objectives to minimize

References:
    Zitzler, E., Deb, K., & Thiele, L. (2000). Comparison of multiobjective
    evolutionary algorithms: Empirical results. Evolutionary computation, 8(2), 173-195.
"""

from collections.abc import Callable

import numpy as np

# Problem configuration
N_VARS: int = 30
BOUNDS: tuple[float, float] = (0.0, 1.0)

# Feasible iff the mean of x[1:] does not exceed this bound
G_BOUND: float = 0.5


def _g(x: np.ndarray) -> np.ndarray:
    return 1 + 9 * np.mean(x[:, 1:], axis=1)


def zdt1(x: np.ndarray) -> np.ndarray:
    """ZDT1: Convex Pareto front, f2 = 1 - sqrt(f1) on the optimum.

    Args:
        x: Decision variables (n, n_vars), all in [0, 1]

    Returns:
        Objectives (n, 2) to minimize
    """
    f1 = x[:, 0]
    g = _g(x)
    return np.column_stack([f1, g * (1 - np.sqrt(f1 / g))])


def zdt2(x: np.ndarray) -> np.ndarray:
    """ZDT2: Concave Pareto front, f2 = 1 - f1^2 on the optimum."""
    f1 = x[:, 0]
    g = _g(x)
    return np.column_stack([f1, g * (1 - (f1 / g) ** 2)])


def zdt3(x: np.ndarray) -> np.ndarray:
    """ZDT3: Discontinuous Pareto front."""
    f1 = x[:, 0]
    g = _g(x)
    return np.column_stack([f1, g * (1 - np.sqrt(f1 / g) - (f1 / g) * np.sin(10 * np.pi * f1))])


def constraint_violation(x: np.ndarray) -> np.ndarray:
    """Overall constraint violation of mean(x[1:]) <= G_BOUND.

    Returns:
        Violations (n,): 0 where feasible, negative excess elsewhere. Values are
        rounded to one decimal so violating solutions form a handful of blocks.
    """
    excess = np.mean(x[:, 1:], axis=1) - G_BOUND
    return -np.round(np.maximum(excess, 0.0), 1)


def sample_population(
    problem_fn: Callable[[np.ndarray], np.ndarray],
    n: int,
    rng: np.random.Generator,
) -> tuple[np.ndarray, np.ndarray]:
    """Evaluate n random decision vectors.

    Returns:
        Tuple of (objectives (n, 2), constraint violations (n,)).
    """
    x = rng.uniform(BOUNDS[0], BOUNDS[1], size=(n, N_VARS))
    return problem_fn(x), constraint_violation(x)


# Registry of all ZDT problems
PROBLEMS: dict[str, Callable[[np.ndarray], np.ndarray]] = {
    "zdt1": zdt1,
    "zdt2": zdt2,
    "zdt3": zdt3,
}
