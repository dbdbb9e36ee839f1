"""Hashing and equality rules for keys stored in perfect-hash containers."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from .siphash import SipHasher13

__all__ = ["PhfKey", "UncasedStr", "hash_key", "keys_equal"]

_BYTES_LIKE = (bytes, bytearray, memoryview)


class PhfKey(ABC):
    """Base class for user-defined key types.

    Subclasses decide how they are fed into the hasher and which probe
    values count as equal to them.
    """

    @abstractmethod
    def phf_hash(self, hasher: SipHasher13) -> None:
        """Feed this key into ``hasher``."""

    def phf_eq(self, other: Any) -> bool:
        """Return whether ``other`` is equal to this key."""
        return self == other


class UncasedStr(PhfKey):
    """A string compared and hashed without regard to ASCII case."""

    __slots__ = ("_value",)

    def __init__(self, value: "str | UncasedStr") -> None:
        if isinstance(value, UncasedStr):
            value = value.as_str()
        if not isinstance(value, str):
            raise TypeError(f"expected str, got {type(value).__name__}")
        self._value = value

    def as_str(self) -> str:
        """Return the wrapped string with its original case."""
        return self._value

    def _folded(self) -> bytes:
        return self._value.encode("utf-8").lower()

    def __len__(self) -> int:
        return len(self._value.encode("utf-8"))

    def __eq__(self, other: object) -> bool:
        if isinstance(other, str):
            other = UncasedStr(other)
        if not isinstance(other, UncasedStr):
            return NotImplemented
        return self._folded() == other._folded()

    def __hash__(self) -> int:
        return hash(self._folded())

    def __repr__(self) -> str:
        return f"UncasedStr({self._value!r})"

    def phf_hash(self, hasher: SipHasher13) -> None:
        hasher.write(self._folded())

    def phf_eq(self, other: Any) -> bool:
        if not isinstance(other, (str, UncasedStr)):
            return False
        return self == other


def _hash_int(key: int, hasher: SipHasher13) -> None:
    if 0 <= key < 1 << 64:
        hasher.write_u64(key)
    elif -(1 << 127) <= key < 1 << 127:
        hasher.write(key.to_bytes(16, "little", signed=True))
    else:
        raise ValueError(f"integer key {key} is out of the supported range")


def hash_key(key: Any, hasher: SipHasher13) -> None:
    """Feed ``key`` into ``hasher``.

    Integers in ``[0, 2**64)`` are written as 64-bit words, other integers as
    signed 128-bit words; strings as their UTF-8 bytes; byte strings as-is;
    :class:`PhfKey` instances hash themselves.
    """
    if isinstance(key, PhfKey):
        key.phf_hash(hasher)
    elif isinstance(key, int):
        _hash_int(key, hasher)
    elif isinstance(key, str):
        hasher.write(key.encode("utf-8"))
    elif isinstance(key, _BYTES_LIKE):
        hasher.write(bytes(key))
    else:
        raise TypeError(f"unsupported key type: {type(key).__name__}")


def keys_equal(stored: Any, probe: Any) -> bool:
    """Return whether ``probe`` matches the stored key ``stored``.

    A stored :class:`UncasedStr` matches a plain ``str`` probe case-insensitively.
    """
    if isinstance(stored, PhfKey):
        return bool(stored.phf_eq(probe))
    if isinstance(stored, int):
        return isinstance(probe, int) and stored == probe
    if isinstance(stored, str):
        return isinstance(probe, str) and stored == probe
    if isinstance(stored, _BYTES_LIKE):
        return isinstance(probe, _BYTES_LIKE) and bytes(stored) == bytes(probe)
    raise TypeError(f"unsupported key type: {type(stored).__name__}")