"""Split hash values and the displacement function of the CHD scheme."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from .siphash import SipHasher13

__all__ = ["HashValue", "displace", "get_index"]

_MASK32 = (1 << 32) - 1


@dataclass(frozen=True, order=True)
class HashValue:
    """A 128-bit hash broken into the bucket selector ``g`` and the parts ``f1``, ``f2``."""

    g: int = 0
    f1: int = 0
    f2: int = 0

    @classmethod
    def from_hasher(cls, hasher: SipHasher13) -> "HashValue":
        """Build a hash value from the digest of ``hasher``."""
        digest = hasher.finish128()
        return cls(
            g=(digest.h1 >> 32) & _MASK32,
            f1=digest.h1 & _MASK32,
            f2=digest.h2 & _MASK32,
        )

    def as_int(self) -> int:
        """Return the parts packed as ``g``, ``f1``, ``f2`` from high to low."""
        return (self.g << 64) | (self.f1 << 32) | self.f2


def displace(f1: int, f2: int, d1: int, d2: int) -> int:
    """Return ``d2 + f1 * d1 + f2`` wrapped to 32 bits."""
    return (d2 + f1 * d1 + f2) & _MASK32


def get_index(hashes: HashValue, disps: Sequence[tuple[int, int]], length: int) -> int:
    """Return the slot a hash lands in, given the displacement table and slot count."""
    if not disps:
        raise ValueError("the displacement table is empty")
    if length <= 0:
        raise ValueError("the slot count must be positive")
    d1, d2 = disps[hashes.g % len(disps)]
    return displace(hashes.f1, hashes.f2, d1, d2) % length