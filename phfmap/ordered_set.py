"""An immutable, order-preserving set backed by a perfect hash table."""

from __future__ import annotations

from typing import Any, Iterable, Iterator

from .builder import DEFAULT_LAMBDA
from .ordered_map import _PerfectIndex

__all__ = ["OrderedSet"]


class OrderedSet:
    """A read-only set whose membership tests use a perfect hash.

    Iteration follows the order in which the entries were given.
    """

    __slots__ = ("_entries", "_index")

    def __init__(self, entries: Iterable[Any] = (), bucket_factor: int = DEFAULT_LAMBDA) -> None:
        self._entries: tuple[Any, ...] = tuple(entries)
        self._index = _PerfectIndex(self._entries, bucket_factor)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._entries)

    def __contains__(self, key: Any) -> bool:
        return self._index.find(key) is not None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, OrderedSet):
            return NotImplemented
        return self._entries == other._entries

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        body = ", ".join(repr(entry) for entry in self._entries)
        return f"OrderedSet([{body}])"

    def get(self, key: Any) -> Any:
        """Return the set's own stored instance of ``key``, or ``None``."""
        position = self._index.find(key)
        return None if position is None else self._entries[position]

    def contains(self, key: Any) -> bool:
        """Return whether ``key`` is in the set."""
        return key in self

    def get_index(self, key: Any) -> int | None:
        """Return the position of ``key`` in the defining order, or ``None``."""
        return self._index.find(key)

    def index(self, position: int) -> Any:
        """Return the entry at ``position``, or ``None`` if out of range."""
        if 0 <= position < len(self._entries):
            return self._entries[position]
        return None

    def is_disjoint(self, other: "OrderedSet") -> bool:
        """Return whether ``other`` shares no elements with this set."""
        return not any(value in other for value in self._entries)

    def is_subset(self, other: "OrderedSet") -> bool:
        """Return whether ``other`` contains every element of this set."""
        return all(value in other for value in self._entries)

    def is_superset(self, other: "OrderedSet") -> bool:
        """Return whether this set contains every element of ``other``."""
        return other.is_subset(self)