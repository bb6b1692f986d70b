"""Registry of non-dominated sorting implementations.

Sorters are registered by name as factories with the signature
``(max_points, max_dimension) -> NonDominatedSorter``. The ranking engine and
the array-level primitives look sorters up by name, so the algorithm can be
chosen from configuration without code changes:

- **Pluggable algorithms**: swap the sorting algorithm behind the engine
- **Configuration-driven experiments**: select a sorter by string name
- **Discoverability**: list all available sorters programmatically

Built-in sorters are registered when ``front_runner.sorting`` is imported.

Basic usage:
    ```python
    from front_runner.registry import SorterRegistry, list_sorters

    sorter = SorterRegistry.get("deb", max_points=200, max_dimension=3)
    available = list_sorters()  # ["deb", "ens-bs", "ens-ss"]
    ```

Registering a custom sorter:
    ```python
    class MySorter(NonDominatedSorter):
        def _sort(self, points, ranks): ...

    SorterRegistry.register("mine", MySorter)
    ranking = FastDominanceRanking(sorter="mine")
    ```
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from front_runner.protocols import SorterFactory

if TYPE_CHECKING:
    from front_runner.sorting.base import NonDominatedSorter


class SorterRegistry:
    """Class-level registry of non-dominated sorter factories.

    Class Attributes:
        _registry: Dictionary mapping sorter names to factories.
    """

    _registry: dict[str, SorterFactory] = {}

    @classmethod
    def register(cls, name: str, factory: SorterFactory) -> None:
        """Register a sorter factory under ``name``, overwriting any existing entry.

        Args:
            name: Unique name for the sorter.
            factory: Callable ``(max_points, max_dimension) -> NonDominatedSorter``.
                A NonDominatedSorter subclass qualifies directly.
        """
        cls._registry[name] = factory

    @classmethod
    def get_factory(cls, name: str) -> SorterFactory:
        """Return the factory registered under ``name``.

        Raises:
            KeyError: If the name is not registered. The message lists the
                available sorters.
        """
        if name not in cls._registry:
            available = ", ".join(sorted(cls._registry.keys())) or "none"
            raise KeyError(f"Sorter '{name}' not found. Available sorters: {available}")
        return cls._registry[name]

    @classmethod
    def get(cls, name: str, max_points: int, max_dimension: int) -> NonDominatedSorter:
        """Build a sorter by name for the given capacity.

        Args:
            name: Name of the registered sorter.
            max_points: Largest number of points the sorter must accept.
            max_dimension: Largest number of objectives the sorter must accept.

        Returns:
            A NonDominatedSorter with at least the requested capacity.

        Raises:
            KeyError: If the name is not registered.

        Example:
            ```python
            sorter = SorterRegistry.get("ens-bs", max_points=100, max_dimension=2)
            sorter.maximum_points  # 100
            ```
        """
        return cls.get_factory(name)(max_points, max_dimension)

    @classmethod
    def list(cls) -> list[str]:
        """Return the sorted list of registered sorter names."""
        return sorted(cls._registry.keys())


def list_sorters() -> list[str]:
    """List all registered sorters.

    Convenience function that returns SorterRegistry.list().
    """
    return SorterRegistry.list()
