import pytest

from phfmap.generator import FIXED_SEED, BuilderState, Generator
from phfmap.hashing import HashValue, get_index
from phfmap.keys import hash_key
from phfmap.rand import WyRand
from phfmap.siphash import SipHasher13


def _hashes(keys, key):
    result = []
    for entry in keys:
        hasher = SipHasher13(0, key)
        hash_key(entry, hasher)
        result.append(HashValue.from_hasher(hasher))
    return result


def _search(keys, bucket_len):
    generator = Generator(len(keys), bucket_len)
    for _ in range(200):
        key = generator.next_key()
        state = generator.try_generate_hash(_hashes(keys, key))
        if state is not None:
            return state
    raise AssertionError("no state found")


def test_next_key_follows_fixed_seed():
    generator = Generator(3, 1)
    rng = WyRand(FIXED_SEED)
    drawn = [generator.next_key() for _ in range(4)]
    assert drawn == [rng.rand() for _ in range(4)]
    assert generator.key == drawn[-1]


def test_state_records_key():
    keys = list(range(20))
    state = _search(keys, 4)
    assert isinstance(state, BuilderState)
    assert len(state.disps) == 4
    generator = Generator(20, 4)
    expected_keys = {generator.next_key() for _ in range(200)}
    assert state.key in expected_keys


@pytest.mark.parametrize("keys,bucket_len", [
    (list(range(10)), 2),
    (["loop", "continue", "break", "fn", "extern"], 1),
    ([b"a", b"bb", b"ccc", b"dddd"], 4),
    (list(range(50)), 10),
])
def test_every_entry_lands_in_its_own_slot(keys, bucket_len):
    state = _search(keys, bucket_len)
    assert sorted(state.idxs) == list(range(len(keys)))
    hashes = _hashes(keys, state.key)
    for position, value in enumerate(hashes):
        slot = get_index(value, state.disps, len(keys))
        assert state.idxs[slot] == position


def test_identical_hashes_cannot_be_placed():
    same = HashValue(g=7, f1=11, f2=13)
    generator = Generator(2, 1)
    generator.next_key()
    assert generator.try_generate_hash([same, same]) is None


def test_empty_table():
    generator = Generator(0, 0)
    key = generator.next_key()
    state = generator.try_generate_hash([])
    assert state == BuilderState(key=key, disps=(), idxs=())


def test_single_entry_uses_zero_displacement():
    generator = Generator(1, 1)
    generator.next_key()
    state = generator.try_generate_hash([HashValue(g=3, f1=5, f2=9)])
    assert state.disps == ((0, 0),)
    assert state.idxs == (0,)


def test_wrong_hash_count_rejected():
    generator = Generator(3, 1)
    with pytest.raises(ValueError):
        generator.try_generate_hash([HashValue()])


def test_non_empty_without_buckets_rejected():
    with pytest.raises(ValueError):
        Generator(3, 0)


def test_negative_sizes_rejected():
    with pytest.raises(ValueError):
        Generator(-1, 1)