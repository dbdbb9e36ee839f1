"""Build perfect-hash state for a list of keys, rejecting duplicates."""

from __future__ import annotations

import math
from typing import Any, Sequence

from .generator import BuilderState, Generator
from .hashing import HashValue
from .keys import hash_key, keys_equal
from .siphash import SipHasher13

__all__ = [
    "DEFAULT_LAMBDA",
    "MAX_GENERATIONS",
    "DuplicateKeyError",
    "GenerationLimitError",
    "check_duplicates",
    "check_generations",
    "build_state",
]

DEFAULT_LAMBDA = 5
MAX_GENERATIONS = 1000


class DuplicateKeyError(ValueError):
    """Two entries share the same key."""

    def __init__(self, first: int, second: int) -> None:
        super().__init__(f"duplicate keys at index `{first}` and index `{second}`")
        self.first = first
        self.second = second


class GenerationLimitError(RuntimeError):
    """No perfect hash was found within the allowed number of attempts."""

    def __init__(self, generations: int, key: int) -> None:
        super().__init__(f"generations={generations} key={key}")
        self.generations = generations
        self.key = key


def check_duplicates(keys: Sequence[Any]) -> None:
    """Raise :class:`DuplicateKeyError` if two of ``keys`` are equal."""
    seen: dict[int, list[int]] = {}
    for position, key in enumerate(keys):
        hasher = SipHasher13(0, 0)
        hash_key(key, hasher)
        digest = hasher.finish128().as_int()
        earlier = seen.setdefault(digest, [])
        for other in earlier:
            if keys_equal(keys[other], key):
                raise DuplicateKeyError(other, position)
        earlier.append(position)


def check_generations(generations: int, key: int) -> None:
    """Raise :class:`GenerationLimitError` once too many attempts were made."""
    if generations > MAX_GENERATIONS:
        raise GenerationLimitError(generations, key)


def build_state(keys: Sequence[Any], bucket_factor: int = DEFAULT_LAMBDA) -> BuilderState:
    """Find a hasher key and displacement table that hash ``keys`` perfectly."""
    if bucket_factor <= 0:
        raise ValueError("bucket_factor must be positive")
    keys = list(keys)
    check_duplicates(keys)
    length = len(keys)
    generator = Generator(length, math.ceil(length / bucket_factor))
    generations = 0
    while True:
        key = generator.next_key()
        check_generations(generations, key)
        generations += 1
        hashes = []
        for entry in keys:
            hasher = SipHasher13(0, key)
            hash_key(entry, hasher)
            hashes.append(HashValue.from_hasher(hasher))
        state = generator.try_generate_hash(hashes)
        if state is not None:
            return state