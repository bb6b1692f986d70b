"""Solution data structure for dominance ranking.

A Solution bundles decision variables with objective values. Unlike a
struct-of-arrays population, each Solution is a distinct object: identity
is by reference, so two solutions with equal objective values are still
different entities and hash differently. Per-solution metadata such as rank
or constraint violation lives in an AttributeStore keyed by that identity.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

import numpy as np


@dataclass(eq=False)
class Solution:
    """A candidate solution with decision variables and objective values.

    Both arrays are copied on construction. The ranking engine never mutates
    a Solution; algorithms and operators may reassign ``variables`` and
    ``objectives`` between generations.

    Attributes:
        variables: Decision variables, shape (n_vars,).
        objectives: Objective values (minimization), shape (n_obj,).

    Example:
        >>> s = Solution(variables=np.array([0.2, 0.4]), objectives=np.array([1.0, 3.0]))
        >>> s.n_obj
        2
        >>> t = s.copy()
        >>> t is s, np.array_equal(t.objectives, s.objectives)
        (False, True)
    """

    variables: np.ndarray
    objectives: np.ndarray

    def __post_init__(self) -> None:
        """Validate shapes and copy arrays.

        Raises:
            TypeError: If variables or objectives is not a numpy array.
            ValueError: If either array is not 1D.
        """
        if not isinstance(self.variables, np.ndarray):
            raise TypeError(f"variables must be a numpy array, got {type(self.variables).__name__}")
        if self.variables.ndim != 1:
            raise ValueError(f"variables must be 1D, got shape {self.variables.shape}")

        if not isinstance(self.objectives, np.ndarray):
            raise TypeError(f"objectives must be a numpy array, got {type(self.objectives).__name__}")
        if self.objectives.ndim != 1:
            raise ValueError(f"objectives must be 1D, got shape {self.objectives.shape}")

        self.variables = self.variables.copy()
        self.objectives = self.objectives.astype(np.float64, copy=True)

    @classmethod
    def from_objectives(
        cls,
        objectives: Sequence[float] | np.ndarray,
        variables: np.ndarray | None = None,
    ) -> Solution:
        """Build a Solution from any objective sequence.

        Args:
            objectives: Sequence of objective values.
            variables: Optional decision variables. Defaults to an empty vector.

        Returns:
            A new Solution.

        Example:
            >>> Solution.from_objectives([1, 4]).objectives
            array([1., 4.])
        """
        if variables is None:
            variables = np.empty(0, dtype=np.float64)
        return cls(variables=np.asarray(variables), objectives=np.asarray(objectives, dtype=np.float64))

    def copy(self) -> Solution:
        """Return a new Solution with copied arrays.

        Attributes held in an AttributeStore are keyed by identity and are
        therefore not carried over to the copy.
        """
        return Solution(variables=self.variables, objectives=self.objectives)

    @property
    def n_vars(self) -> int:
        """Number of decision variables."""
        return self.variables.shape[0]

    @property
    def n_obj(self) -> int:
        """Number of objectives."""
        return self.objectives.shape[0]

    def __repr__(self) -> str:
        return f"Solution(objectives={self.objectives.tolist()}, n_vars={self.n_vars})"
