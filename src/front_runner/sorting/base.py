"""Base class for non-dominated sorting implementations.

A sorter is constructed for a fixed capacity ``(max_points, max_dimension)``
and may preallocate whatever workspace it needs for that capacity. It can
then serve any number of requests up to that size without reallocating.
"""

from abc import ABC, abstractmethod

import numpy as np


class NonDominatedSorter(ABC):
    """Assign non-domination front indices to a set of points.

    For points ``i`` and ``j``, ``i`` dominates ``j`` iff ``i`` is <= ``j`` in
    every dimension and < in at least one (minimization). Rank 0 is the
    Pareto-optimal subset; rank k is the Pareto-optimal subset after removing
    every point of rank < k. Implementations must be deterministic for a
    given input order.

    Args:
        max_points: Largest number of points a single call may sort.
        max_dimension: Largest number of objectives a single call may sort.

    Raises:
        ValueError: If max_points is negative or max_dimension is not positive.
    """

    def __init__(self, max_points: int, max_dimension: int) -> None:
        if max_points < 0:
            raise ValueError(f"max_points must be non-negative, got {max_points}")
        if max_dimension < 1:
            raise ValueError(f"max_dimension must be positive, got {max_dimension}")
        self._max_points = int(max_points)
        self._max_dimension = int(max_dimension)

    @property
    def maximum_points(self) -> int:
        """Largest number of points this instance can sort."""
        return self._max_points

    @property
    def maximum_dimension(self) -> int:
        """Largest number of objectives this instance can sort."""
        return self._max_dimension

    def can_sort(self, n_points: int, dimension: int) -> bool:
        """Return True if a request of this size fits the current capacity."""
        return n_points <= self._max_points and dimension <= self._max_dimension

    def sort(self, points: np.ndarray, ranks: np.ndarray) -> np.ndarray:
        """Write the front index of every point into ``ranks``.

        Args:
            points: Objective vectors, shape (n, dimension).
            ranks: Integer output buffer with at least n elements. Only the
                first n entries are written.

        Returns:
            The view ``ranks[:n]``.

        Raises:
            TypeError: If points or ranks is not a numpy array.
            ValueError: If shapes are invalid or the request exceeds capacity.

        Example:
            >>> sorter = DebSorter(max_points=3, max_dimension=2)
            >>> out = np.empty(3, dtype=np.int64)
            >>> sorter.sort(np.array([[1.0, 1.0], [2.0, 2.0], [0.5, 3.0]]), out)
            array([0, 1, 0])
        """
        if not isinstance(points, np.ndarray):
            raise TypeError(f"points must be a numpy array, got {type(points).__name__}")
        if not isinstance(ranks, np.ndarray):
            raise TypeError(f"ranks must be a numpy array, got {type(ranks).__name__}")
        if points.ndim != 2:
            raise ValueError(f"points must be 2D, got shape {points.shape}")
        if ranks.ndim != 1 or not np.issubdtype(ranks.dtype, np.integer):
            raise ValueError(f"ranks must be a 1D integer array, got shape {ranks.shape} and dtype {ranks.dtype}")

        n, dimension = points.shape
        if dimension < 1:
            raise ValueError("points must have at least one objective")
        if not self.can_sort(n, dimension):
            raise ValueError(
                f"request of {n} points in {dimension} dimensions exceeds capacity "
                f"({self._max_points} points, {self._max_dimension} dimensions)"
            )
        if ranks.shape[0] < n:
            raise ValueError(f"ranks has {ranks.shape[0]} elements, expected at least {n}")

        out = ranks[:n]
        if n > 0:
            self._sort(points.astype(np.float64, copy=False), out)
        return out

    @abstractmethod
    def _sort(self, points: np.ndarray, ranks: np.ndarray) -> None:
        """Fill ``ranks`` (shape (n,)) for ``points`` (shape (n, d), n >= 1)."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}(max_points={self._max_points}, max_dimension={self._max_dimension})"
