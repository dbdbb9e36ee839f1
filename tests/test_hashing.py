import pytest
from hypothesis import given
from hypothesis import strategies as st

from phfmap.hashing import HashValue, displace, get_index
from phfmap.siphash import SipHasher13

u32 = st.integers(min_value=0, max_value=(1 << 32) - 1)


def test_default_hash_value_is_zero():
    assert HashValue() == HashValue(0, 0, 0)
    assert HashValue().as_int() == 0


@given(st.binary(max_size=32), st.integers(min_value=0, max_value=(1 << 64) - 1))
def test_from_hasher_splits_digest(data, key):
    hasher = SipHasher13(0, key)
    hasher.write(data)
    digest = hasher.finish128()
    value = HashValue.from_hasher(hasher)
    assert value.g == digest.h1 >> 32
    assert value.f1 == digest.h1 & 0xFFFFFFFF
    assert value.f2 == digest.h2 & 0xFFFFFFFF


@given(u32, u32, u32, u32, u32, u32)
def test_ordering_matches_packed_integer(g1, a1, b1, g2, a2, b2):
    left = HashValue(g1, a1, b1)
    right = HashValue(g2, a2, b2)
    assert (left > right) == (left.as_int() > right.as_int())
    assert (left == right) == (left.as_int() == right.as_int())


def test_as_int_packing():
    assert HashValue(g=1, f1=0, f2=0).as_int() == 1 << 64
    assert HashValue(g=0, f1=1, f2=0).as_int() == 1 << 32
    assert HashValue(g=0, f1=0, f2=5).as_int() == 5


def test_displace_small_values():
    assert displace(1, 2, 3, 4) == 9


def test_displace_wraps_to_32_bits():
    assert displace(0xFFFFFFFF, 1, 1, 0) == 0


@given(u32, u32)
def test_displace_zero_displacement_gives_f2(f1, f2):
    assert displace(f1, f2, 0, 0) == f2


@given(u32, u32, u32, u32)
def test_displace_in_range(f1, f2, d1, d2):
    assert 0 <= displace(f1, f2, d1, d2) < 1 << 32


@given(u32, u32, u32, st.integers(min_value=1, max_value=500))
def test_get_index_in_range(g, f1, f2, length):
    disps = [(1, 2), (3, 4), (5, 6)]
    index = get_index(HashValue(g, f1, f2), disps, length)
    assert 0 <= index < length


def test_get_index_selects_bucket_by_g():
    hashes = HashValue(g=4, f1=10, f2=20)
    disps = [(0, 0), (2, 3)]
    assert get_index(hashes, disps, 1000) == displace(10, 20, 0, 0) % 1000
    hashes = HashValue(g=5, f1=10, f2=20)
    assert get_index(hashes, disps, 1000) == displace(10, 20, 2, 3) % 1000


def test_get_index_rejects_empty_table():
    with pytest.raises(ValueError):
        get_index(HashValue(), [], 4)


def test_get_index_rejects_zero_length():
    with pytest.raises(ValueError):
        get_index(HashValue(), [(0, 0)], 0)