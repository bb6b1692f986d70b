"""Reference ranks from pymoo for cross-checking the ranking engine.

pymoo's NonDominatedSorting is an independent implementation of the same
front definition, so agreement on random populations is a strong check on
every registered sorter.
"""

import numpy as np
from pymoo.util.nds.non_dominated_sorting import NonDominatedSorting


def pymoo_ranks(objectives: np.ndarray) -> np.ndarray:
    """Compute front indices with pymoo.

    Args:
        objectives: (n, n_obj) objective values to minimize.

    Returns:
        Integer array (n,) of front indices, rank 0 = non-dominated.

    Raises:
        ValueError: If objectives is not a 2D array.
    """
    if objectives.ndim != 2:
        raise ValueError(f"objectives must be 2D array, got shape {objectives.shape}")
    if objectives.shape[0] == 0:
        return np.empty(0, dtype=np.int64)

    _, rank = NonDominatedSorting().do(objectives, return_rank=True)
    return np.asarray(rank, dtype=np.int64)


def pymoo_constrained_ranks(objectives: np.ndarray, violation: np.ndarray) -> np.ndarray:
    """Front indices with equal-violation blocks ranked separately, best block first."""
    ranks = np.empty(objectives.shape[0], dtype=np.int64)
    offset = 0
    for value in np.unique(violation)[::-1]:
        members = np.flatnonzero(violation == value)
        block = pymoo_ranks(objectives[members]) + offset
        ranks[members] = block
        offset = int(block.max()) + 1
    return ranks
