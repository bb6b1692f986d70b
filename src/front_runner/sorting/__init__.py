"""Non-dominated sorting implementations."""

from functools import partial

from front_runner.registry import SorterRegistry
from front_runner.sorting.base import NonDominatedSorter
from front_runner.sorting.deb import DebSorter
from front_runner.sorting.ens import ENSSorter

DEFAULT_SORTER = "ens-bs"

# Register built-in sorters
SorterRegistry.register("deb", DebSorter)
SorterRegistry.register("ens-ss", partial(ENSSorter, search="sequential"))
SorterRegistry.register("ens-bs", partial(ENSSorter, search="binary"))

__all__ = ["DEFAULT_SORTER", "DebSorter", "ENSSorter", "NonDominatedSorter"]
