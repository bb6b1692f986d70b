"""Per-solution attributes kept in an identity-keyed side table.

Ranking algorithms need to attach metadata (rank, constraint violation, ...)
to solutions they do not own. Instead of setting dynamic properties on the
solution objects, every attribute value is stored in an AttributeStore:

- AttributeStore: side table ``identifier -> {id(solution): entry}``
- SolutionAttribute: a named attribute bound to one store
- OverallConstraintViolation: the aggregate constraint-violation attribute

Lookups are by object identity only. Solutions do not need to be hashable,
orderable or comparable, and two solutions with equal objective values never
share an entry. Entries hold a weak reference to their solution when the
object supports it and disappear when the solution is garbage-collected.

Example:
    >>> store = AttributeStore()
    >>> s = Solution.from_objectives([1.0, 2.0])
    >>> store.set("rank", s, 0)
    >>> store.set("crowding", s, 0.5)
    >>> store.get("rank", s), store.get("crowding", s)
    (0, 0.5)
"""

from __future__ import annotations

import weakref
from collections.abc import Callable
from typing import Any, Generic, TypeVar

T = TypeVar("T")


class _StrongReference:
    """Reference wrapper for objects that do not support weak references."""

    __slots__ = ("_obj",)

    def __init__(self, obj: Any) -> None:
        self._obj = obj

    def __call__(self) -> Any:
        return self._obj


class _Entry:
    __slots__ = ("ref", "value")

    def __init__(self, ref: Callable[[], Any], value: Any) -> None:
        self.ref = ref
        self.value = value


class AttributeStore:
    """Identity-keyed storage for named per-solution attributes.

    Each identifier owns an independent table, so one solution can carry
    any number of attributes without collision.
    """

    def __init__(self) -> None:
        self._tables: dict[str, dict[int, _Entry]] = {}

    def _lookup(self, identifier: str, solution: Any) -> _Entry | None:
        table = self._tables.get(identifier)
        if table is None:
            return None
        entry = table.get(id(solution))
        # id() values are reused after collection
        if entry is None or entry.ref() is not solution:
            return None
        return entry

    @staticmethod
    def _reference(table: dict[int, _Entry], key: int, solution: Any) -> Callable[[], Any]:
        def forget(ref: weakref.ref) -> None:
            entry = table.get(key)
            if entry is not None and entry.ref is ref:
                del table[key]

        try:
            return weakref.ref(solution, forget)
        except TypeError:
            return _StrongReference(solution)

    def set(self, identifier: str, solution: Any, value: Any) -> None:
        """Set the value of attribute ``identifier`` for ``solution``."""
        entry = self._lookup(identifier, solution)
        if entry is not None:
            entry.value = value
            return
        table = self._tables.setdefault(identifier, {})
        key = id(solution)
        table[key] = _Entry(self._reference(table, key, solution), value)

    def get(self, identifier: str, solution: Any, default: Any = None) -> Any:
        """Return the value of attribute ``identifier`` for ``solution``, or ``default``."""
        entry = self._lookup(identifier, solution)
        return default if entry is None else entry.value

    def contains(self, identifier: str, solution: Any) -> bool:
        """Return True if ``solution`` has a value for ``identifier``."""
        return self._lookup(identifier, solution) is not None

    def discard(self, identifier: str, solution: Any) -> bool:
        """Remove the value of ``identifier`` for ``solution``.

        Returns:
            True if a value was removed, False if none was set.
        """
        if self._lookup(identifier, solution) is None:
            return False
        del self._tables[identifier][id(solution)]
        return True

    def size(self, identifier: str) -> int:
        """Number of live solutions carrying attribute ``identifier``."""
        return len(self._tables.get(identifier, ()))

    def identifiers(self) -> list[str]:
        """Sorted list of attribute identifiers with at least one value."""
        return sorted(name for name, table in self._tables.items() if table)

    def clear(self, identifier: str | None = None) -> None:
        """Drop all values of ``identifier``, or of every attribute when None."""
        if identifier is None:
            self._tables.clear()
        else:
            self._tables.pop(identifier, None)


#: Store shared by attributes that several components read and write,
#: e.g. the constraint violation set by a problem and read by a ranking.
default_store = AttributeStore()


class SolutionAttribute(Generic[T]):
    """A named attribute attached to solutions through an AttributeStore.

    The identifier defaults to the class name, so independent instances of the
    same attribute class bound to the same store see the same values.

    Args:
        identifier: Attribute name. Defaults to the class name.
        store: Backing store. Defaults to the module-level ``default_store``.

    Example:
        >>> violation = OverallConstraintViolation()
        >>> s = Solution.from_objectives([1.0, 2.0])
        >>> violation.set_attribute(s, -0.5)
        >>> OverallConstraintViolation().get_attribute(s)
        -0.5
    """

    def __init__(self, identifier: str | None = None, store: AttributeStore | None = None) -> None:
        self._identifier = identifier if identifier is not None else type(self).__name__
        self._store = store if store is not None else default_store

    @property
    def attribute_identifier(self) -> str:
        return self._identifier

    @property
    def store(self) -> AttributeStore:
        return self._store

    def get_attribute(self, solution: Any, default: T | None = None) -> T | None:
        return self._store.get(self._identifier, solution, default)

    def set_attribute(self, solution: Any, value: T) -> None:
        self._store.set(self._identifier, solution, value)

    def has_attribute(self, solution: Any) -> bool:
        return self._store.contains(self._identifier, solution)

    def remove_attribute(self, solution: Any) -> bool:
        return self._store.discard(self._identifier, solution)


class OverallConstraintViolation(SolutionAttribute[float]):
    """Aggregate constraint violation of a solution.

    0 means feasible (or unconstrained); a negative value encodes the
    severity of the violation. Unset solutions read as feasible through
    ``front_runner.constraints.overall_constraint_violation``.
    """

    def set_attribute(self, solution: Any, value: float) -> None:
        super().set_attribute(solution, float(value))
