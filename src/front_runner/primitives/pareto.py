"""Array-level Pareto primitives.

This module provides pure functions over objective matrices:
- dominates: scalar Pareto dominance check
- dominates_matrix: vectorized pairwise dominance
- non_dominated_sort: front index of every row
- constrained_non_dominated_sort: front index with constraint-violation blocks
- fronts_from_ranks: group row indices by front
"""

import numpy as np

from front_runner.constraints import check_constraint_violations, constraint_blocks
from front_runner.registry import SorterRegistry
from front_runner.sorting import DEFAULT_SORTER


def dominates(a: np.ndarray, b: np.ndarray) -> bool:
    """Check if solution a Pareto-dominates solution b (minimization).

    A solution a dominates b if and only if:
      - a[i] <= b[i] for ALL objectives (a is at least as good everywhere)
      - a[i] < b[i] for AT LEAST ONE objective (a is strictly better somewhere)

    Args:
        a: Objective values for solution a. Shape (n_obj,).
        b: Objective values for solution b. Shape (n_obj,).

    Returns:
        True if a dominates b, False otherwise.

    Examples:
        >>> dominates(np.array([1.0, 2.0]), np.array([2.0, 3.0]))
        True
        >>> dominates(np.array([1.0, 3.0]), np.array([2.0, 2.0]))
        False
    """
    return bool(np.all(a <= b) and np.any(a < b))


def dominates_matrix(objectives: np.ndarray) -> np.ndarray:
    """Compute pairwise dominance for all rows.

    Args:
        objectives: Objective values, shape (n, n_obj).

    Returns:
        Boolean array of shape (n, n) where result[i, j] is True iff row i
        dominates row j.

    Examples:
        >>> dom = dominates_matrix(np.array([[1.0, 1.0], [2.0, 2.0], [1.0, 2.0]]))
        >>> bool(dom[0, 1]), bool(dom[2, 0])
        (True, False)
    """
    a = objectives[:, np.newaxis, :]  # (n, 1, n_obj)
    b = objectives[np.newaxis, :, :]  # (1, n, n_obj)
    return np.all(a <= b, axis=2) & np.any(a < b, axis=2)


def _validate_objectives(objectives: np.ndarray) -> None:
    if not isinstance(objectives, np.ndarray):
        raise TypeError(f"objectives must be a numpy array, got {type(objectives).__name__}")
    if objectives.ndim != 2:
        raise ValueError(f"objectives must be 2D, got shape {objectives.shape}")


def non_dominated_sort(objectives: np.ndarray, algorithm: str = DEFAULT_SORTER) -> np.ndarray:
    """Assign each row to a Pareto front.

    Builds a one-off sorter sized to the input. Use FastDominanceRanking when
    sorting repeatedly, so the workspace is reused.

    Args:
        objectives: Objective values, shape (n, n_obj).
        algorithm: Name of a registered sorter.

    Returns:
        Integer array of shape (n,) where rank[i] is the front index of row i.
        Rank 0 = Pareto optimal (first front), rank 1 = second front, etc.

    Raises:
        TypeError: If objectives is not a numpy array.
        ValueError: If objectives is not 2D.
        KeyError: If the algorithm is not registered.

    Examples:
        >>> non_dominated_sort(np.array([[1.0, 1.0], [2.0, 2.0], [3.0, 3.0]]))
        array([0, 1, 2])
    """
    _validate_objectives(objectives)
    n, n_obj = objectives.shape
    ranks = np.empty(n, dtype=np.int64)
    if n == 0:
        return ranks
    sorter = SorterRegistry.get(algorithm, max_points=n, max_dimension=n_obj)
    sorter.sort(objectives, ranks)
    return ranks


def constrained_non_dominated_sort(
    objectives: np.ndarray,
    constraint_violation: np.ndarray | None = None,
    algorithm: str = DEFAULT_SORTER,
) -> np.ndarray:
    """Assign each row to a front, sorting equal-violation blocks separately.

    Rows are grouped by constraint violation (0 = feasible, negative = violated).
    Blocks are ranked from least to most violating; each block's ranks start
    one above the highest rank of the previous block.

    Args:
        objectives: Objective values, shape (n, n_obj).
        constraint_violation: Violations, shape (n,), or None for an
            unconstrained problem.
        algorithm: Name of a registered sorter.

    Returns:
        Integer array of shape (n,) with global front indices.

    Raises:
        ValueError: If shapes are inconsistent or a violation is NaN or positive.

    Examples:
        >>> objs = np.array([[1.0, 1.0], [2.0, 2.0], [0.0, 0.0]])
        >>> constrained_non_dominated_sort(objs, np.array([0.0, 0.0, -1.0]))
        array([0, 1, 2])
    """
    _validate_objectives(objectives)
    n, n_obj = objectives.shape
    if constraint_violation is None:
        return non_dominated_sort(objectives, algorithm)

    violation = np.asarray(constraint_violation, dtype=np.float64)
    if violation.shape != (n,):
        raise ValueError(f"constraint_violation must have shape ({n},), got {violation.shape}")
    check_constraint_violations(violation)

    ranks = np.empty(n, dtype=np.int64)
    if n == 0:
        return ranks

    blocks = constraint_blocks(violation)
    sorter = SorterRegistry.get(algorithm, max_points=max(len(b) for b in blocks), max_dimension=n_obj)
    local = np.empty(n, dtype=np.int64)
    rank_offset = 0
    for block in blocks:
        block_ranks = sorter.sort(objectives[block], local) + rank_offset
        ranks[block] = block_ranks
        rank_offset = int(block_ranks.max()) + 1
    return ranks


def fronts_from_ranks(ranks: np.ndarray) -> list[np.ndarray]:
    """Group row indices by front.

    Args:
        ranks: Front indices, shape (n,), contiguous from 0.

    Returns:
        List where element k holds the indices of rank k in ascending order.

    Examples:
        >>> fronts_from_ranks(np.array([1, 0, 1, 2]))
        [array([1]), array([0, 2]), array([3])]
    """
    if ranks.size == 0:
        return []
    return [np.flatnonzero(ranks == r) for r in range(int(ranks.max()) + 1)]
