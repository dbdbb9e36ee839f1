"""An immutable, order-preserving map backed by a perfect hash table."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Iterable, Iterator

from .builder import DEFAULT_LAMBDA, build_state
from .hashing import HashValue, get_index
from .keys import UncasedStr, hash_key, keys_equal
from .siphash import SipHasher13

__all__ = ["OrderedMap"]


class _PerfectIndex:
    """Perfect-hash lookup from a probe key to a position in a key list."""

    __slots__ = ("_keys", "_state")

    def __init__(self, keys: Iterable[Any], bucket_factor: int) -> None:
        self._keys = tuple(keys)
        self._state = build_state(self._keys, bucket_factor)

    def _coerce(self, probe: Any) -> Any:
        # A plain string probe is hashed the way the stored key type hashes it.
        if isinstance(probe, str) and isinstance(self._keys[0], UncasedStr):
            return UncasedStr(probe)
        return probe

    def find(self, probe: Any) -> int | None:
        """Return the position of the key equal to ``probe``, or ``None``."""
        state = self._state
        if not state.disps:
            return None
        probe = self._coerce(probe)
        hasher = SipHasher13(0, state.key)
        try:
            hash_key(probe, hasher)
        except (TypeError, ValueError):
            # A key that cannot be hashed cannot have been stored.
            return None
        slot = get_index(HashValue.from_hasher(hasher), state.disps, len(state.idxs))
        position = state.idxs[slot]
        if keys_equal(self._keys[position], probe):
            return position
        return None


class OrderedMap:
    """A read-only map whose lookups use a perfect hash.

    Iteration follows the order in which the entries were given.
    """

    __slots__ = ("_entries", "_index")

    def __init__(
        self,
        entries: Mapping[Any, Any] | Iterable[tuple[Any, Any]] = (),
        bucket_factor: int = DEFAULT_LAMBDA,
    ) -> None:
        if isinstance(entries, Mapping):
            entries = entries.items()
        pairs = []
        for item in entries:
            key, value = item
            pairs.append((key, value))
        self._entries: tuple[tuple[Any, Any], ...] = tuple(pairs)
        self._index = _PerfectIndex((key for key, _ in self._entries), bucket_factor)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[Any]:
        return self.keys()

    def __getitem__(self, key: Any) -> Any:
        entry = self.get_entry(key)
        if entry is None:
            raise KeyError(key)
        return entry[1]

    def __contains__(self, key: Any) -> bool:
        return self._index.find(key) is not None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, OrderedMap):
            return NotImplemented
        return self._entries == other._entries

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        body = ", ".join(f"{key!r}: {value!r}" for key, value in self._entries)
        return f"OrderedMap({{{body}}})"

    def get(self, key: Any, default: Any = None) -> Any:
        """Return the value ``key`` maps to, or ``default``."""
        entry = self.get_entry(key)
        return default if entry is None else entry[1]

    def get_key(self, key: Any) -> Any:
        """Return the map's own stored instance of ``key``, or ``None``."""
        entry = self.get_entry(key)
        return None if entry is None else entry[0]

    def get_entry(self, key: Any) -> tuple[Any, Any] | None:
        """Return the stored ``(key, value)`` pair for ``key``, or ``None``."""
        position = self._index.find(key)
        return None if position is None else self._entries[position]

    def get_index(self, key: Any) -> int | None:
        """Return the position of ``key`` in the defining order, or ``None``."""
        return self._index.find(key)

    def index(self, position: int) -> tuple[Any, Any] | None:
        """Return the ``(key, value)`` pair at ``position``, or ``None`` if out of range."""
        if 0 <= position < len(self._entries):
            return self._entries[position]
        return None

    def entries(self) -> Iterator[tuple[Any, Any]]:
        """Iterate over ``(key, value)`` pairs in defining order."""
        return iter(self._entries)

    def keys(self) -> Iterator[Any]:
        """Iterate over keys in defining order."""
        return (key for key, _ in self._entries)

    def values(self) -> Iterator[Any]:
        """Iterate over values in defining order."""
        return (value for _, value in self._entries)