"""Protocol definitions for the collaborators of the ranking engine.

The ranking engine only talks to its surroundings through small structural
interfaces, so algorithms, problems and archives from other code bases can be
plugged in without inheriting from anything in this package:

1. **SolutionLike**: anything exposing an ``objectives`` vector. Solutions are
   identified by reference; the engine never mutates them.

2. **SorterFactory**: builds a non-dominated sorter for a given capacity.
   Registered in ``front_runner.registry.SorterRegistry``.

3. **Ranking**: the handle returned by ``compute_ranking``; algorithm loops
   query fronts through it to drive survivor and mating selection.

4. **Archive**: an external, possibly bounded, collection of solutions that
   may use ranking output to decide admission.

Example usage:
    ```python
    def survivor_selection(ranking: Ranking, population, n_survivors):
        ranking.compute_ranking(population)
        survivors = []
        for rank in range(ranking.number_of_subfronts):
            front = ranking.get_subfront(rank)
            if len(survivors) + len(front) > n_survivors:
                break
            survivors.extend(front)
        return survivors
    ```
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    import numpy as np

    from front_runner.sorting.base import NonDominatedSorter


@runtime_checkable
class SolutionLike(Protocol):
    """Protocol for objects that can be ranked.

    Attributes:
        objectives: Objective values (minimization), a 1D sequence of floats
            with the same length for every solution ranked together.
            Maximization objectives must be negated by the problem definition.
    """

    @property
    def objectives(self) -> np.ndarray | Sequence[float]: ...


class SorterFactory(Protocol):
    """Protocol for non-dominated sorter factories.

    A factory receives the capacity the caller needs and returns a sorter
    whose ``maximum_points`` and ``maximum_dimension`` are at least that large.
    NonDominatedSorter subclasses satisfy this protocol through their
    constructor.

    Example:
        ```python
        def deb_factory(max_points: int, max_dimension: int) -> NonDominatedSorter:
            return DebSorter(max_points, max_dimension)
        ```
    """

    def __call__(self, max_points: int, max_dimension: int) -> NonDominatedSorter: ...


@runtime_checkable
class Ranking(Protocol):
    """Protocol for dominance rankings.

    ``compute_ranking`` partitions a population into fronts and returns the
    ranking itself so calls can be chained. Fronts are numbered contiguously
    from 0 and stay valid until the next ``compute_ranking`` call.
    """

    def compute_ranking(self, solutions: Sequence[Any]) -> Ranking:
        """Rank ``solutions`` and return self."""
        ...

    def get_subfront(self, rank: int) -> list[Any]:
        """Return the solutions of front ``rank``."""
        ...

    @property
    def number_of_subfronts(self) -> int:
        """Number of fronts produced by the last ``compute_ranking`` call."""
        ...


@runtime_checkable
class Archive(Protocol):
    """Protocol for solution archives.

    Archives are external consumers of a ranking. The admission policy
    (what ``add`` accepts and what it evicts) belongs to the archive.
    """

    def add(self, solution: Any) -> bool:
        """Offer ``solution`` to the archive; return True if it was accepted."""
        ...

    def get(self, index: int) -> Any:
        """Return the solution stored at ``index``."""
        ...

    @property
    def solution_list(self) -> list[Any]:
        """Solutions currently held, in archive order."""
        ...

    def size(self) -> int:
        """Number of solutions currently held."""
        ...
