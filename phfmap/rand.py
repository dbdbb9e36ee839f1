"""A small deterministic WyRand pseudo-random generator."""

from __future__ import annotations

__all__ = ["WyRand"]

_MASK64 = (1 << 64) - 1
_MASK128 = (1 << 128) - 1


class WyRand:
    """WyRand generator producing 64-bit values from a 64-bit seed."""

    __slots__ = ("seed",)

    def __init__(self, seed: int) -> None:
        self.seed = seed & _MASK64

    def rand(self) -> int:
        """Advance the state and return the next 64-bit value."""
        self.seed = (self.seed + 0xA0761D6478BD642F) & _MASK64
        product = (self.seed * (self.seed ^ 0xE7037ED1A0B428DB)) & _MASK128
        return ((product >> 64) ^ product) & _MASK64