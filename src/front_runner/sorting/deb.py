"""Deb's fast non-dominated sorting over a reusable dominance matrix."""

import numpy as np

from front_runner.sorting.base import NonDominatedSorter


class DebSorter(NonDominatedSorter):
    """Fast non-dominated sort from NSGA-II.

    Time complexity O(M * N^2). The pairwise dominance matrix and the
    domination counters are allocated once for ``max_points`` and reused by
    every call, so repeated sorting of same-sized populations does not
    allocate quadratic memory.

    Raises:
        MemoryError: If the ``max_points x max_points`` workspace cannot be allocated.
    """

    def __init__(self, max_points: int, max_dimension: int) -> None:
        super().__init__(max_points, max_dimension)
        shape = (self._max_points, self._max_points)
        self._dominates = np.empty(shape, dtype=bool)
        self._strict = np.empty(shape, dtype=bool)
        self._scratch = np.empty(shape, dtype=bool)
        self._counts = np.empty(self._max_points, dtype=np.int64)

    def _dominance_matrix(self, points: np.ndarray) -> np.ndarray:
        n, dimension = points.shape
        leq = self._dominates[:n, :n]
        lt = self._strict[:n, :n]
        scratch = self._scratch[:n, :n]

        column = points[:, 0]
        np.less_equal(column[:, np.newaxis], column[np.newaxis, :], out=leq)
        np.less(column[:, np.newaxis], column[np.newaxis, :], out=lt)
        for m in range(1, dimension):
            column = points[:, m]
            np.less_equal(column[:, np.newaxis], column[np.newaxis, :], out=scratch)
            leq &= scratch
            np.less(column[:, np.newaxis], column[np.newaxis, :], out=scratch)
            lt |= scratch

        # leq[i, j] now holds "i dominates j"
        leq &= lt
        return leq

    def _sort(self, points: np.ndarray, ranks: np.ndarray) -> None:
        n = points.shape[0]
        dominance = self._dominance_matrix(points)

        # counts[j] = number of points that dominate j
        counts = self._counts[:n]
        np.sum(dominance, axis=0, dtype=np.int64, out=counts)

        remaining = np.arange(n)
        current_rank = 0
        while remaining.size > 0:
            front_mask = counts[remaining] == 0
            front = remaining[front_mask]
            ranks[front] = current_rank

            remaining = remaining[~front_mask]
            if remaining.size > 0:
                counts[remaining] -= dominance[np.ix_(front, remaining)].sum(axis=0)
            current_rank += 1
