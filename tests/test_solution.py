"""Tests for the Solution data structure."""

import numpy as np
import pytest

from front_runner import Solution, SolutionLike


class TestSolutionConstruction:
    """Tests for Solution construction and validation."""

    def test_constructs_with_arrays(self) -> None:
        """Solution can be constructed from variables and objectives."""
        s = Solution(variables=np.array([0.1, 0.2, 0.3]), objectives=np.array([1.0, 2.0]))

        assert s.n_vars == 3
        assert s.n_obj == 2
        np.testing.assert_array_equal(s.objectives, [1.0, 2.0])

    def test_objectives_cast_to_float(self) -> None:
        """Integer objectives are stored as float64."""
        s = Solution(variables=np.array([1]), objectives=np.array([1, 2]))
        assert s.objectives.dtype == np.float64

    def test_copies_input_arrays(self) -> None:
        """Mutating the input arrays does not affect the solution."""
        variables = np.array([0.5])
        objectives = np.array([1.0, 2.0])
        s = Solution(variables=variables, objectives=objectives)

        variables[0] = 9.0
        objectives[0] = 9.0

        assert s.variables[0] == 0.5
        assert s.objectives[0] == 1.0

    def test_rejects_non_array_variables(self) -> None:
        """Solution rejects variables that are not a numpy array."""
        with pytest.raises(TypeError, match="variables must be a numpy array"):
            Solution(variables=[1.0], objectives=np.array([1.0]))

    def test_rejects_non_array_objectives(self) -> None:
        """Solution rejects objectives that are not a numpy array."""
        with pytest.raises(TypeError, match="objectives must be a numpy array"):
            Solution(variables=np.array([1.0]), objectives=[1.0])

    def test_rejects_2d_objectives(self) -> None:
        """Solution rejects 2D objectives."""
        with pytest.raises(ValueError, match="objectives must be 1D"):
            Solution(variables=np.array([1.0]), objectives=np.zeros((2, 2)))

    def test_rejects_2d_variables(self) -> None:
        """Solution rejects 2D variables."""
        with pytest.raises(ValueError, match="variables must be 1D"):
            Solution(variables=np.zeros((2, 2)), objectives=np.array([1.0]))

    def test_from_objectives(self) -> None:
        """from_objectives accepts plain sequences and defaults to no variables."""
        s = Solution.from_objectives([3, 4])

        np.testing.assert_array_equal(s.objectives, [3.0, 4.0])
        assert s.n_vars == 0


class TestSolutionIdentity:
    """Tests for identity semantics."""

    def test_equal_values_are_distinct(self) -> None:
        """Solutions with equal values are not equal."""
        a = Solution.from_objectives([1.0, 2.0])
        b = Solution.from_objectives([1.0, 2.0])
        assert a != b
        assert a == a

    def test_hash_by_identity(self) -> None:
        """Solutions can be used in sets even with equal values."""
        a = Solution.from_objectives([1.0, 2.0])
        b = Solution.from_objectives([1.0, 2.0])
        assert len({a, b}) == 2

    def test_copy_is_new_object(self) -> None:
        """copy() returns a new object with equal, independent arrays."""
        a = Solution(variables=np.array([0.1]), objectives=np.array([1.0, 2.0]))
        b = a.copy()

        assert b is not a
        np.testing.assert_array_equal(b.objectives, a.objectives)
        b.objectives[0] = 5.0
        assert a.objectives[0] == 1.0

    def test_satisfies_solution_protocol(self) -> None:
        """Solution satisfies the SolutionLike protocol."""
        assert isinstance(Solution.from_objectives([1.0]), SolutionLike)

    def test_repr(self) -> None:
        """repr shows objectives and number of variables."""
        assert repr(Solution.from_objectives([1.0, 2.0])) == "Solution(objectives=[1.0, 2.0], n_vars=0)"
