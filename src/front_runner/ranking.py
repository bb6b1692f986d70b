"""Constraint-aware dominance ranking.

FastDominanceRanking partitions a population into non-dominated fronts using
the objective vectors directly, delegating the per-block work to a pluggable
NonDominatedSorter.

If at least one solution has a strictly negative overall constraint
violation, the violation is used as a preliminary key: solutions are stably
sorted from least to most violating, each block of equal violation is sorted
independently, and every block's ranks start one above the highest rank of
the previous block. A solution in a worse-violation block therefore always
ranks strictly behind every solution in a better one.

Example:
    >>> population = [Solution.from_objectives(p) for p in ([1, 1], [2, 2], [1, 3])]
    >>> ranking = FastDominanceRanking().compute_ranking(population)
    >>> ranking.number_of_subfronts
    2
    >>> [ranking.get_rank(s) for s in population]
    [0, 1, 1]
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

import numpy as np

from front_runner.attributes import AttributeStore, SolutionAttribute
from front_runner.constraints import (
    ViolationReader,
    constraint_blocks,
    constraint_violations,
    overall_constraint_violation,
)
from front_runner.errors import CapacityGrowthError, DimensionMismatchError
from front_runner.protocols import SorterFactory
from front_runner.registry import SorterRegistry
from front_runner.sorting import DEFAULT_SORTER, NonDominatedSorter

logger = logging.getLogger(__name__)


class FastDominanceRanking(SolutionAttribute[int]):
    """Dominance ranking engine with a reusable sorting workspace.

    The engine is also the rank attribute: after ``compute_ranking`` the rank
    of each ranked solution is available through ``get_rank`` (or
    ``get_attribute``). Ranks are kept in a store private to this engine
    unless one is passed explicitly, so independent engines never share
    mutable state.

    The engine caches one sorter sized to the largest block seen so far and
    replaces it only when a block exceeds its capacity. The cache is not safe
    for concurrent use; rank independent populations concurrently with
    independent engines.

    Args:
        sorter: Registered sorter name (see ``front_runner.registry.list_sorters``)
            or a factory ``(max_points, max_dimension) -> NonDominatedSorter``.
        constraint_violation: Function returning the overall constraint
            violation of a solution. Defaults to reading the
            OverallConstraintViolation attribute (0 when unset).
        store: Store for the rank attribute. Defaults to a fresh store owned by
            the engine, which drops the ranks of the previous population at the
            start of every ranking. Ranks written to a given store are kept
            until the caller removes them or the solutions are collected.

    Raises:
        KeyError: If ``sorter`` is a name that is not registered.
    """

    def __init__(
        self,
        sorter: str | SorterFactory = DEFAULT_SORTER,
        constraint_violation: ViolationReader | None = None,
        store: AttributeStore | None = None,
    ) -> None:
        super().__init__(identifier="rank", store=store if store is not None else AttributeStore())
        self._owns_store = store is None
        self._sorter_factory = SorterRegistry.get_factory(sorter) if isinstance(sorter, str) else sorter
        self._violation = constraint_violation if constraint_violation is not None else overall_constraint_violation
        self._sorter: NonDominatedSorter | None = None
        self._ranks_buffer = np.empty(0, dtype=np.int64)
        self._subfronts: list[list[Any]] = []

    def compute_ranking(self, solutions: Sequence[Any]) -> FastDominanceRanking:
        """Rank ``solutions`` into non-dominated fronts.

        Args:
            solutions: Population to rank. Every solution exposes ``objectives``
                and all report the same number of objectives.

        Returns:
            self, with fronts and rank attributes updated.

        Raises:
            DimensionMismatchError: If solutions report different numbers of objectives.
            ValueError: If a constraint violation is NaN or positive.
            CapacityGrowthError: If the sorting workspace cannot be grown.
        """
        self._subfronts = []
        # ranks of discarded populations must not keep them alive
        if self._owns_store:
            self._store.clear(self._identifier)
        n_solutions = len(solutions)
        if n_solutions == 0:
            return self

        objectives = self._objective_matrix(solutions)
        violations = constraint_violations(solutions, self._violation)

        blocks = constraint_blocks(violations)
        if len(blocks) > 1:
            logger.debug("Ranking %d solutions in %d constraint blocks", n_solutions, len(blocks))

        rank_offset = 0
        for block in blocks:
            rank_offset = 1 + self._rank_block(solutions, objectives, block, rank_offset)
        return self

    def _objective_matrix(self, solutions: Sequence[Any]) -> np.ndarray:
        rows = [np.asarray(s.objectives, dtype=np.float64) for s in solutions]
        for i, row in enumerate(rows):
            if row.ndim != 1:
                raise ValueError(f"objectives must be 1D, got shape {row.shape} for solution {i}")
        n_obj = rows[0].shape[0]
        for i, row in enumerate(rows):
            if row.shape[0] != n_obj:
                raise DimensionMismatchError(
                    f"Solutions have different numbers of objectives: solution 0 has {n_obj}, "
                    f"solution {i} has {row.shape[0]}"
                )
        return np.vstack(rows)

    def _rank_block(
        self,
        solutions: Sequence[Any],
        objectives: np.ndarray,
        block: np.ndarray,
        rank_offset: int,
    ) -> int:
        """Sort one block, record its ranks, and return the highest rank assigned."""
        n_points = block.shape[0]
        dimension = objectives.shape[1]
        sorter = self._ensure_capacity(n_points, dimension)

        local_ranks = sorter.sort(objectives[block], self._ranks_buffer)
        max_rank = rank_offset
        for idx, local_rank in zip(block.tolist(), local_ranks.tolist(), strict=True):
            rank = local_rank + rank_offset
            max_rank = max(max_rank, rank)
            solution = solutions[idx]
            self.set_attribute(solution, rank)
            while len(self._subfronts) <= rank:
                self._subfronts.append([])
            self._subfronts[rank].append(solution)
        return max_rank

    def _ensure_capacity(self, n_points: int, dimension: int) -> NonDominatedSorter:
        """Return a sorter able to serve the request, growing the workspace if needed."""
        sorter = self._sorter
        if sorter is not None and sorter.can_sort(n_points, dimension):
            return sorter

        max_points = max(n_points, self.maximum_points)
        max_dimension = max(dimension, self.maximum_dimension)
        logger.debug(
            "Growing sorting workspace from (%d, %d) to (%d, %d)",
            self.maximum_points,
            self.maximum_dimension,
            max_points,
            max_dimension,
        )
        self._sorter = None
        try:
            sorter = self._sorter_factory(max_points, max_dimension)
            self._ranks_buffer = np.empty(max_points, dtype=np.int64)
        except MemoryError as exc:
            raise CapacityGrowthError(
                f"Could not allocate a sorting workspace for {max_points} points in {max_dimension} dimensions"
            ) from exc

        if not sorter.can_sort(n_points, dimension):
            raise ValueError(
                f"Sorter factory returned {sorter!r}, which cannot sort {n_points} points in {dimension} dimensions"
            )
        self._sorter = sorter
        return sorter

    @property
    def maximum_points(self) -> int:
        """Point capacity of the cached sorter (0 before the first ranking)."""
        return 0 if self._sorter is None else self._sorter.maximum_points

    @property
    def maximum_dimension(self) -> int:
        """Dimension capacity of the cached sorter (0 before the first ranking)."""
        return 0 if self._sorter is None else self._sorter.maximum_dimension

    def get_subfront(self, rank: int) -> list[Any]:
        """Return the solutions of front ``rank``.

        Raises:
            IndexError: If ``rank`` is not a front of the last ranking.
        """
        if rank < 0 or rank >= len(self._subfronts):
            raise IndexError(f"rank {rank} is out of bounds for ranking with {len(self._subfronts)} fronts")
        return self._subfronts[rank]

    @property
    def number_of_subfronts(self) -> int:
        return len(self._subfronts)

    def get_number_of_subfronts(self) -> int:
        return len(self._subfronts)

    @property
    def subfronts(self) -> tuple[list[Any], ...]:
        """All fronts of the last ranking, best first."""
        return tuple(self._subfronts)

    def get_rank(self, solution: Any) -> int | None:
        """Rank of ``solution``, or None if the store holds no rank for it."""
        return self.get_attribute(solution)

    def ranks(self, solutions: Sequence[Any]) -> np.ndarray:
        """Ranks of ``solutions`` as an integer array.

        Raises:
            KeyError: If a solution has not been ranked by this engine.
        """
        out = np.empty(len(solutions), dtype=np.int64)
        for i, solution in enumerate(solutions):
            rank = self.get_attribute(solution)
            if rank is None:
                raise KeyError(f"solution {i} has not been ranked")
            out[i] = rank
        return out
