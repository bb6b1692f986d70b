"""Efficient non-dominated sort (ENS).

Based on:
    Zhang, X., Tian, Y., Cheng, R., & Jin, Y. (2015).
    "An efficient approach to nondominated sorting for evolutionary
     multiobjective optimization." IEEE Trans. Evol. Comput. 19(2), 201-213.

Points are visited in lexicographic order, so a point can only be dominated
by points visited before it. Each point is inserted into the first existing
front that holds no point dominating it, found by sequential (ENS-SS) or
binary (ENS-BS) search over the fronts built so far.
"""

import numpy as np

from front_runner.sorting.base import NonDominatedSorter

SEARCH_STRATEGIES = ("sequential", "binary")


class ENSSorter(NonDominatedSorter):
    """Efficient non-dominated sort with sequential or binary front search.

    Best case O(M * N log N), worst case O(M * N^2). Memory is linear in the
    number of points.

    Args:
        max_points: Largest number of points a single call may sort.
        max_dimension: Largest number of objectives a single call may sort.
        search: "sequential" or "binary".

    Example:
        >>> sorter = ENSSorter(max_points=4, max_dimension=2, search="binary")
        >>> out = np.empty(4, dtype=np.int64)
        >>> sorter.sort(np.array([[1.0, 4.0], [2.0, 2.0], [3.0, 3.0], [1.0, 4.0]]), out)
        array([0, 0, 1, 0])
    """

    def __init__(self, max_points: int, max_dimension: int, search: str = "binary") -> None:
        if search not in SEARCH_STRATEGIES:
            raise ValueError(f"search must be one of {', '.join(SEARCH_STRATEGIES)}, got '{search}'")
        super().__init__(max_points, max_dimension)
        self._search = search
        self._order = np.empty(self._max_points, dtype=np.intp)

    @property
    def search(self) -> str:
        return self._search

    @staticmethod
    def _front_dominates(points: np.ndarray, front: list[int], point: np.ndarray) -> bool:
        members = points[front]
        return bool(np.any(np.all(members <= point, axis=1) & np.any(members < point, axis=1)))

    def _sequential_search(self, points: np.ndarray, fronts: list[list[int]], point: np.ndarray) -> int:
        for k, front in enumerate(fronts):
            if not self._front_dominates(points, front, point):
                return k
        return len(fronts)

    def _binary_search(self, points: np.ndarray, fronts: list[list[int]], point: np.ndarray) -> int:
        # Being dominated by front k implies being dominated by every front before k
        lo, hi = 0, len(fronts)
        while lo < hi:
            mid = (lo + hi) // 2
            if self._front_dominates(points, fronts[mid], point):
                lo = mid + 1
            else:
                hi = mid
        return lo

    def _sort(self, points: np.ndarray, ranks: np.ndarray) -> None:
        n = points.shape[0]
        order = self._order[:n]
        # lexsort treats the last key as primary
        order[:] = np.lexsort(points.T[::-1])

        search = self._binary_search if self._search == "binary" else self._sequential_search
        fronts: list[list[int]] = []
        for idx in order.tolist():
            k = search(points, fronts, points[idx])
            if k == len(fronts):
                fronts.append([idx])
            else:
                fronts[k].append(idx)
            ranks[idx] = k
