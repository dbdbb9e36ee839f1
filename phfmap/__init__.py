"""Read-only, order-preserving maps and sets backed by perfect hash functions."""

__version__ = "1.0.0"

__all__ = ["builder", "generator", "hashing", "keys", "ordered_map", "ordered_set", "rand", "siphash"]