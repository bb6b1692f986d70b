"""Pareto primitives for dominance ranking.

This package provides core pure functions over objective matrices.
"""

from front_runner.primitives.pareto import (
    constrained_non_dominated_sort,
    dominates,
    dominates_matrix,
    fronts_from_ranks,
    non_dominated_sort,
)

__all__ = [
    "dominates",
    "dominates_matrix",
    "non_dominated_sort",
    "constrained_non_dominated_sort",
    "fronts_from_ranks",
]
