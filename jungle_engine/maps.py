"""Hash map, hash set and key/value pair containers."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, MutableSet
from dataclasses import dataclass
from typing import Any, Callable, Generic, TypeVar

from jungle_engine.arrays import Array

K = TypeVar("K")
V = TypeVar("V")

_MISSING = object()


@dataclass(slots=True)
class Pair(Generic[K, V]):
    """A key and its value."""

    key: Any = None
    value: Any = None

    def __iter__(self) -> Iterator[Any]:
        yield self.key
        yield self.value

    def as_tuple(self) -> tuple[Any, Any]:
        """The pair as a plain ``(key, value)`` tuple."""
        return (self.key, self.value)


def make_pair(first, second) -> Pair:
    """Build a :class:`Pair` from two values."""
    return Pair(first, second)


class Map(dict):
    """A ``dict`` with engine-style insertion and lookup helpers.

    Values created implicitly (by :meth:`emplace` without a value or by
    :meth:`find_or_add`) come from ``default_factory``; without a factory
    they are ``None``.
    """

    def __init__(self, *args, default_factory: Callable[[], Any] | None = None, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self.default_factory = default_factory

    def _default_value(self):
        return self.default_factory() if self.default_factory is not None else None

    def add(self, key, value) -> None:
        """Insert ``value`` under ``key``, replacing any existing value."""
        self[key] = value

    def emplace(self, key, value=_MISSING):
        """Insert ``value`` under ``key`` unless the key exists; return the stored value."""
        if key in self:
            return self[key]
        stored = self._default_value() if value is _MISSING else value
        self[key] = stored
        return stored

    def find(self, key):
        """The value stored under ``key``, or ``None``."""
        return self.get(key)

    def find_or_add(self, key):
        """The value under ``key``, inserting a default value first if absent."""
        return self.emplace(key)

    def pairs(self) -> Iterator[Pair]:
        """Iterate over the entries as :class:`Pair` objects."""
        for key, value in self.items():
            yield Pair(key, value)

    def copy(self) -> Map:
        return Map(self, default_factory=self.default_factory)

    def __repr__(self) -> str:
        return f"Map({dict.__repr__(self)})"


class Set(MutableSet):
    """A hash set that keeps insertion order and reports element positions."""

    def __init__(self, items: Iterable = ()) -> None:
        self._items: dict[Any, None] = {}
        for item in items:
            self.add(item)

    def __contains__(self, item) -> bool:
        return item in self._items

    def __iter__(self) -> Iterator:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"Set({list(self._items)!r})"

    def add(self, item) -> int:
        """Insert ``item`` if absent; return its position in iteration order."""
        self._items.setdefault(item, None)
        return next(i for i, existing in enumerate(self._items) if existing == item)

    def discard(self, item) -> None:
        """Remove ``item`` if present."""
        self._items.pop(item, None)

    def remove(self, item) -> int:
        """Remove ``item``; return how many elements were removed (0 or 1)."""
        if item in self._items:
            del self._items[item]
            return 1
        return 0

    def clear(self) -> None:
        self._items.clear()

    def to_array(self) -> Array:
        """The elements as an :class:`Array`, in iteration order."""
        return Array(self._items)