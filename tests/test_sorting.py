"""Tests for NonDominatedSorter implementations.

Covers the shared sort contract (shapes, capacity, output buffer) and checks
every built-in sorter against brute-force front peeling.
"""

import numpy as np
import pytest

from front_runner.sorting import DebSorter, ENSSorter, NonDominatedSorter

SORTERS = [
    pytest.param(DebSorter, id="deb"),
    pytest.param(lambda p, d: ENSSorter(p, d, search="sequential"), id="ens-ss"),
    pytest.param(lambda p, d: ENSSorter(p, d, search="binary"), id="ens-bs"),
]


@pytest.mark.parametrize("factory", SORTERS)
class TestSortContract:
    """Tests for the sort contract shared by all sorters."""

    def test_capacity_reported(self, factory) -> None:
        """Capacity matches the constructor arguments."""
        sorter = factory(10, 3)
        assert sorter.maximum_points == 10
        assert sorter.maximum_dimension == 3

    def test_can_sort(self, factory) -> None:
        """can_sort reflects both capacity axes."""
        sorter = factory(10, 3)
        assert sorter.can_sort(10, 3)
        assert sorter.can_sort(1, 1)
        assert not sorter.can_sort(11, 3)
        assert not sorter.can_sort(10, 4)

    def test_writes_into_buffer(self, factory) -> None:
        """Ranks are written into the prefix of the output buffer."""
        sorter = factory(4, 2)
        out = np.full(4, -7, dtype=np.int64)
        result = sorter.sort(np.array([[1.0, 1.0], [2.0, 2.0]]), out)
        np.testing.assert_array_equal(result, [0, 1])
        np.testing.assert_array_equal(out, [0, 1, -7, -7])

    def test_empty_request(self, factory) -> None:
        """Sorting zero points returns an empty view."""
        sorter = factory(4, 2)
        assert sorter.sort(np.zeros((0, 2)), np.empty(4, dtype=np.int64)).shape == (0,)

    def test_rejects_too_many_points(self, factory) -> None:
        """Requests above point capacity are rejected."""
        sorter = factory(2, 2)
        with pytest.raises(ValueError, match="exceeds capacity"):
            sorter.sort(np.zeros((3, 2)), np.empty(3, dtype=np.int64))

    def test_rejects_too_many_dimensions(self, factory) -> None:
        """Requests above dimension capacity are rejected."""
        sorter = factory(2, 2)
        with pytest.raises(ValueError, match="exceeds capacity"):
            sorter.sort(np.zeros((2, 3)), np.empty(2, dtype=np.int64))

    def test_rejects_zero_objectives(self, factory) -> None:
        """At least one objective is required."""
        sorter = factory(2, 2)
        with pytest.raises(ValueError, match="at least one objective"):
            sorter.sort(np.zeros((2, 0)), np.empty(2, dtype=np.int64))

    def test_rejects_short_buffer(self, factory) -> None:
        """Output buffer must hold every rank."""
        sorter = factory(4, 2)
        with pytest.raises(ValueError, match="ranks has 1 elements, expected at least 2"):
            sorter.sort(np.zeros((2, 2)), np.empty(1, dtype=np.int64))

    def test_rejects_float_buffer(self, factory) -> None:
        """Output buffer must be integer."""
        sorter = factory(4, 2)
        with pytest.raises(ValueError, match="ranks must be a 1D integer array"):
            sorter.sort(np.zeros((2, 2)), np.empty(2))

    def test_rejects_list_points(self, factory) -> None:
        """Points must be a numpy array."""
        sorter = factory(4, 2)
        with pytest.raises(TypeError, match="points must be a numpy array"):
            sorter.sort([[1.0, 2.0]], np.empty(1, dtype=np.int64))

    def test_smaller_dimension_than_capacity(self, factory) -> None:
        """A sorter serves requests with fewer objectives than its capacity."""
        sorter = factory(3, 5)
        out = np.empty(3, dtype=np.int64)
        np.testing.assert_array_equal(sorter.sort(np.array([[3.0], [1.0], [2.0]]), out), [2, 0, 1])

    def test_reuse_across_calls(self, factory, reference_ranks) -> None:
        """Repeated calls of varying size give independent, correct results."""
        rng = np.random.default_rng(7)
        sorter = factory(40, 3)
        out = np.empty(40, dtype=np.int64)
        for n in (40, 5, 23, 40, 1):
            points = rng.random((n, 3))
            np.testing.assert_array_equal(sorter.sort(points, out), reference_ranks(points))


@pytest.mark.parametrize("factory", SORTERS)
@pytest.mark.parametrize("seed", range(5))
@pytest.mark.parametrize("n_obj", [1, 2, 3, 5])
def test_matches_reference(factory, seed: int, n_obj: int, reference_ranks) -> None:
    """Every sorter agrees with brute-force peeling on random integer grids (many ties)."""
    rng = np.random.default_rng(seed)
    points = rng.integers(0, 5, size=(50, n_obj)).astype(np.float64)
    sorter = factory(50, n_obj)
    out = np.empty(50, dtype=np.int64)
    np.testing.assert_array_equal(sorter.sort(points, out), reference_ranks(points))


@pytest.mark.parametrize("factory", SORTERS)
def test_deterministic(factory, random_objectives: np.ndarray) -> None:
    """Two sorts of the same input give identical ranks."""
    n, d = random_objectives.shape
    first = factory(n, d).sort(random_objectives, np.empty(n, dtype=np.int64)).copy()
    second = factory(n, d).sort(random_objectives, np.empty(n, dtype=np.int64))
    np.testing.assert_array_equal(first, second)


class TestConstruction:
    """Tests for sorter construction."""

    def test_rejects_negative_points(self) -> None:
        """Negative point capacity is rejected."""
        with pytest.raises(ValueError, match="max_points must be non-negative"):
            DebSorter(-1, 2)

    def test_rejects_zero_dimension(self) -> None:
        """Dimension capacity must be positive."""
        with pytest.raises(ValueError, match="max_dimension must be positive"):
            ENSSorter(5, 0)

    def test_rejects_unknown_search(self) -> None:
        """ENS search strategy must be sequential or binary."""
        with pytest.raises(ValueError, match="search must be one of sequential, binary"):
            ENSSorter(5, 2, search="galloping")

    def test_base_class_is_abstract(self) -> None:
        """NonDominatedSorter cannot be instantiated directly."""
        with pytest.raises(TypeError):
            NonDominatedSorter(5, 2)

    def test_repr(self) -> None:
        """repr shows the capacity."""
        assert repr(DebSorter(5, 2)) == "DebSorter(max_points=5, max_dimension=2)"

    def test_ens_default_search_is_binary(self) -> None:
        """ENSSorter defaults to binary search."""
        assert ENSSorter(5, 2).search == "binary"
