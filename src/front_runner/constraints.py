"""Constraint-violation partitioning for dominance ranking.

Solutions are ranked by dominance only against solutions with the same
overall constraint violation. This module orders a population by violation
severity and splits it into contiguous equal-violation blocks:

- overall_constraint_violation: read the violation attribute (0 when unset)
- constraint_violations: read and validate the violations of a population
- constraint_blocks: index blocks for a violation array, best block first
- partition_by_constraint_violation: the same blocks as lists of solutions

Violation values are <= 0: 0 means feasible, more negative means worse. A
stable sort keeps equal-violation solutions in input order.
"""

from collections.abc import Callable, Sequence
from typing import Any, TypeVar

import numpy as np

from front_runner.attributes import OverallConstraintViolation

S = TypeVar("S")

ViolationReader = Callable[[Any], float]

_overall_constraint_violation = OverallConstraintViolation()


def overall_constraint_violation(solution: Any) -> float:
    """Return the overall constraint violation of a solution, 0 if unset.

    Example:
        >>> s = Solution.from_objectives([1.0, 2.0])
        >>> overall_constraint_violation(s)
        0.0
        >>> OverallConstraintViolation().set_attribute(s, -2.5)
        >>> overall_constraint_violation(s)
        -2.5
    """
    value = _overall_constraint_violation.get_attribute(solution)
    return 0.0 if value is None else float(value)


def constraint_violations(
    solutions: Sequence[Any],
    violation: ViolationReader = overall_constraint_violation,
) -> np.ndarray:
    """Read the constraint violation of every solution.

    Args:
        solutions: Solutions to read.
        violation: Function returning the violation of one solution.

    Returns:
        Float array of shape (n,).

    Raises:
        ValueError: If any violation is NaN or positive.
    """
    values = np.fromiter((violation(s) for s in solutions), dtype=np.float64, count=len(solutions))
    check_constraint_violations(values)
    return values


def check_constraint_violations(values: np.ndarray) -> None:
    """Validate an array of violations (finite or -inf, never NaN or positive).

    Raises:
        ValueError: If any value is NaN or positive. The message names the
            first offending index.
    """
    nan = np.flatnonzero(np.isnan(values))
    if nan.size > 0:
        raise ValueError(f"constraint violation must not be NaN (index {nan[0]})")
    positive = np.flatnonzero(values > 0)
    if positive.size > 0:
        idx = positive[0]
        raise ValueError(f"constraint violation must be <= 0, got {values[idx]} at index {idx}")


def has_constraint_violation(
    solutions: Sequence[Any],
    violation: ViolationReader = overall_constraint_violation,
) -> bool:
    """Return True if at least one solution has a strictly negative violation."""
    return bool(np.any(constraint_violations(solutions, violation) < 0))


def compare_constraint_violation(
    a: Any,
    b: Any,
    violation: ViolationReader = overall_constraint_violation,
) -> int:
    """Compare two solutions by constraint violation.

    Returns:
        -1 if ``a`` violates less than ``b``, 1 if more, 0 if equal. Usable with
        ``functools.cmp_to_key``.
    """
    va, vb = violation(a), violation(b)
    if va > vb:
        return -1
    if va < vb:
        return 1
    return 0


def constraint_blocks(values: np.ndarray) -> list[np.ndarray]:
    """Split indices into maximal equal-violation blocks, best block first.

    If no value is negative the whole range forms a single block and no sort
    is performed.

    Args:
        values: Constraint violations, shape (n,).

    Returns:
        List of index arrays. Concatenated, they are a stable ordering of
        ``range(n)`` by decreasing violation value.

    Example:
        >>> constraint_blocks(np.array([0.0, -1.0, 0.0, -0.5, -1.0]))
        [array([0, 2]), array([3]), array([1, 4])]
    """
    n = values.shape[0]
    if n == 0:
        return []
    if not np.any(values < 0):
        return [np.arange(n)]

    order = np.argsort(-values, kind="stable")
    sorted_values = values[order]
    boundaries = np.flatnonzero(sorted_values[1:] != sorted_values[:-1]) + 1
    return np.split(order, boundaries)


def sort_by_constraint_violation(
    solutions: Sequence[S],
    violation: ViolationReader = overall_constraint_violation,
) -> list[S]:
    """Return a copy of ``solutions`` stably sorted from least to most violating."""
    values = constraint_violations(solutions, violation)
    order = np.argsort(-values, kind="stable")
    return [solutions[i] for i in order]


def partition_by_constraint_violation(
    solutions: Sequence[S],
    violation: ViolationReader = overall_constraint_violation,
) -> list[list[S]]:
    """Partition solutions into equal-violation blocks, best block first.

    The feasible block (violation 0), if present, always comes first. Within a
    block solutions keep their input order. The input is not modified.

    Args:
        solutions: Solutions to partition.
        violation: Function returning the violation of one solution.

    Returns:
        List of blocks; empty for an empty population.

    Raises:
        ValueError: If any violation is NaN or positive.
    """
    values = constraint_violations(solutions, violation)
    return [[solutions[i] for i in block] for block in constraint_blocks(values)]
