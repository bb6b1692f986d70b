"""front-runner: constraint-aware Pareto dominance ranking.

A numpy implementation of the ranking engine behind evolutionary and swarm
multi-objective optimizers: it partitions a population into non-dominated
fronts, giving precedence to solutions that violate constraints less, and
records the rank of every solution.

Example (unconstrained):
    >>> from front_runner import FastDominanceRanking, Solution
    >>> population = [Solution.from_objectives(p) for p in ([1, 4], [2, 3], [3, 2], [3, 3])]
    >>> ranking = FastDominanceRanking().compute_ranking(population)
    >>> ranking.number_of_subfronts
    2
    >>> len(ranking.get_subfront(0))
    3

Example (constrained):
    >>> from front_runner import OverallConstraintViolation
    >>> violation = OverallConstraintViolation()
    >>> violation.set_attribute(population[0], -0.5)
    >>> ranking.compute_ranking(population).get_rank(population[0])
    2

Example (array level):
    >>> import numpy as np
    >>> from front_runner import non_dominated_sort
    >>> non_dominated_sort(np.array([[1.0, 1.0], [2.0, 2.0]]))
    array([0, 1])
"""

from front_runner.attributes import AttributeStore, OverallConstraintViolation, SolutionAttribute, default_store
from front_runner.constraints import (
    has_constraint_violation,
    overall_constraint_violation,
    partition_by_constraint_violation,
    sort_by_constraint_violation,
)
from front_runner.errors import CapacityGrowthError, DimensionMismatchError
from front_runner.primitives import (
    constrained_non_dominated_sort,
    dominates,
    dominates_matrix,
    fronts_from_ranks,
    non_dominated_sort,
)
from front_runner.protocols import Archive, Ranking, SolutionLike, SorterFactory
from front_runner.ranking import FastDominanceRanking
from front_runner.registry import SorterRegistry, list_sorters
from front_runner.solution import Solution
from front_runner.sorting import DEFAULT_SORTER, DebSorter, ENSSorter, NonDominatedSorter

__all__ = [
    # Ranking engine
    "FastDominanceRanking",
    # Sorters
    "NonDominatedSorter",
    "DebSorter",
    "ENSSorter",
    "DEFAULT_SORTER",
    # Registry system
    "SorterRegistry",
    "list_sorters",
    # Constraint partitioning
    "overall_constraint_violation",
    "has_constraint_violation",
    "sort_by_constraint_violation",
    "partition_by_constraint_violation",
    # Attributes
    "AttributeStore",
    "SolutionAttribute",
    "OverallConstraintViolation",
    "default_store",
    # Primitives
    "dominates",
    "dominates_matrix",
    "non_dominated_sort",
    "constrained_non_dominated_sort",
    "fronts_from_ranks",
    # Data structures
    "Solution",
    # Protocols
    "SolutionLike",
    "SorterFactory",
    "Ranking",
    "Archive",
    # Errors
    "DimensionMismatchError",
    "CapacityGrowthError",
]
