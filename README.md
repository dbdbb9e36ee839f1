# phfmap

Read-only, order-preserving maps and sets whose lookups go through a
perfect hash function. The function is built with the CHD
(compress, hash, displace) algorithm. Keys are hashed with SipHash-1-3.

A container is built once from its entries. After that, each lookup
costs one hash, one displacement step and one equality check.
Iteration always follows the order in which the entries were given.
The containers cannot be changed after they are built.

## Installation

```
pip install phfmap
```

To install the test dependencies as well:

```
pip install "phfmap[test]"
```

## Maps

`phfmap.ordered_map.OrderedMap` takes a mapping or an iterable of
`(key, value)` pairs:

```python
from phfmap.ordered_map import OrderedMap

keywords = OrderedMap([
    ("loop", "Loop"),
    ("continue", "Continue"),
    ("break", "Break"),
    ("fn", "Fn"),
    ("extern", "Extern"),
])

keywords["loop"]             # "Loop"
keywords.get("while")        # None
keywords.get("while", "?")   # "?"
"fn" in keywords             # True
keywords.get_index("break")  # 2, its position among the given entries
keywords.index(0)            # ("loop", "Loop")
keywords.index(99)           # None
keywords.get_entry("fn")     # ("fn", "Fn")
list(keywords.keys())        # keys in the order they were given
```

`map[key]` raises `KeyError` when the key is absent. `get_key` returns
the map's own stored key object. `entries()`, `keys()` and `values()`
iterate in the given order, and iterating over the map yields its keys.
Two maps compare equal when their entries are equal and in the same
order.

A value can be anything, including another map:

```python
by_length = OrderedMap([
    (0, OrderedMap([("loop", 1), ("continue", 2)])),
    (2, OrderedMap([("break", 3), ("fn", 4)])),
])
by_length[2]["break"]  # 3
```

`OrderedMap()` with no arguments is an empty map. Every lookup on it
misses.

## Sets

```python
from phfmap.ordered_set import OrderedSet

small = OrderedSet([1, 2, 3])
large = OrderedSet(range(10))

small.contains(2)                       # True
2 in small                              # True
small.get_index(3)                      # 2
small.index(0)                          # 1
small.is_subset(large)                  # True
large.is_superset(small)                # True
small.is_disjoint(OrderedSet([7, 8]))   # True
```

## Case-insensitive keys

`phfmap.keys.UncasedStr` wraps a string and compares and hashes it
without regard to ASCII case. A map with `UncasedStr` keys also accepts
plain `str` probes:

```python
from phfmap.keys import UncasedStr
from phfmap.ordered_map import OrderedMap

headers = OrderedMap([(UncasedStr("Foo"), 0), (UncasedStr("Bar"), 1)])
headers["foo"]  # 0
headers["bAR"]  # 1
```

## Key types

These key types are supported without extra work:

- integers in `[0, 2**64)`, hashed as 64-bit words;
- other integers in the signed 128-bit range, hashed as 128-bit words;
- `str`, hashed as its UTF-8 bytes;
- `bytes`, `bytearray` and `memoryview`;
- `UncasedStr`.

For any other key type, subclass `phfmap.keys.PhfKey` and implement
`phf_hash(hasher)` to feed the key into a `phfmap.siphash.SipHasher13`.
You can also override `phf_eq(other)`, which by default uses `==`.
A probe that cannot be hashed is reported as absent and raises no
error.

## Errors

- `phfmap.builder.DuplicateKeyError` (a `ValueError`): two entries have
  equal keys. The error message names both positions.
- `phfmap.builder.GenerationLimitError` (a `RuntimeError`): no perfect
  hash was found within 1000 attempts.
- `ValueError`: `bucket_factor` is not positive.

## Bucket factor

Both containers accept an optional `bucket_factor`, which defaults to 5.
It is the average number of keys per bucket during construction.

## Lower-level pieces

- `phfmap.siphash`: `SipHasher13` and its `Hash128` result.
- `phfmap.rand`: the `WyRand` generator that draws hasher keys.
- `phfmap.hashing`: `HashValue`, `displace` and `get_index`.
- `phfmap.generator`: `Generator`, which searches for a displacement
  table and returns a `BuilderState`.
- `phfmap.builder`: `build_state`, `check_duplicates` and
  `check_generations`.

The generator starts from a fixed seed. As a result, the same entries
always produce the same table.