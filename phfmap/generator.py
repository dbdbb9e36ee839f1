"""Search for CHD displacement tables that give a perfect hash."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from .hashing import HashValue, displace
from .rand import WyRand

__all__ = ["BuilderState", "Generator", "FIXED_SEED"]

FIXED_SEED = 1234567890


@dataclass(frozen=True)
class BuilderState:
    """The result of a successful search.

    ``key`` is the hasher key the table was built for, ``disps`` holds one
    displacement pair per bucket and ``idxs`` maps each slot to the position
    of the entry stored there.
    """

    key: int
    disps: tuple[tuple[int, int], ...]
    idxs: tuple[int, ...]


class Generator:
    """Draws hasher keys and tries to build a displacement table for them."""

    __slots__ = ("length", "bucket_len", "key", "_rng")

    def __init__(self, length: int, bucket_len: int) -> None:
        if length < 0 or bucket_len < 0:
            raise ValueError("length and bucket_len must not be negative")
        if length > 0 and bucket_len == 0:
            raise ValueError("a non-empty table needs at least one bucket")
        self.length = length
        self.bucket_len = bucket_len
        self.key = 0
        self._rng = WyRand(FIXED_SEED)

    def next_key(self) -> int:
        """Draw the next hasher key and remember it."""
        self.key = self._rng.rand()
        return self.key

    def try_generate_hash(self, hashes: Sequence[HashValue]) -> BuilderState | None:
        """Try to place every hash into its own slot.

        Returns ``None`` when some bucket cannot be displaced without a
        collision; a new key should then be drawn.
        """
        hashes = list(hashes)
        if len(hashes) != self.length:
            raise ValueError(f"expected {self.length} hashes, got {len(hashes)}")

        buckets: list[list[int]] = [[] for _ in range(self.bucket_len)]
        for position, value in enumerate(hashes):
            buckets[value.g % self.bucket_len].append(position)

        # Largest buckets are the hardest to place, so they go first.
        order = sorted(range(self.bucket_len), key=lambda b: len(buckets[b]), reverse=True)

        slots: list[int | None] = [None] * self.length
        disps: list[tuple[int, int]] = [(0, 0)] * self.bucket_len
        for bucket in order:
            found = self._place(buckets[bucket], hashes, slots)
            if found is None:
                return None
            disps[bucket], placed = found
            for slot, position in placed.items():
                slots[slot] = position

        if any(slot is None for slot in slots):
            raise RuntimeError("expected generator map")
        return BuilderState(key=self.key, disps=tuple(disps), idxs=tuple(slots))

    def _place(
        self,
        members: list[int],
        hashes: list[HashValue],
        slots: list[int | None],
    ) -> tuple[tuple[int, int], dict[int, int]] | None:
        for d1 in range(self.length):
            for d2 in range(self.length):
                placed: dict[int, int] = {}
                for position in members:
                    value = hashes[position]
                    slot = displace(value.f1, value.f2, d1, d2) % self.length
                    if slots[slot] is not None or slot in placed:
                        break
                    placed[slot] = position
                else:
                    return (d1, d2), placed
        return None