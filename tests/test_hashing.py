import random

import pytest

from contestlib.hashing import (
    HashParams,
    HashPowers,
    HashValue,
    Hashing,
    hash_forward,
    hash_multiset,
    hash_reverse,
    is_prime,
    random_primes,
)


@pytest.fixture
def params():
    return HashParams(2, random.Random(12345))


@pytest.mark.parametrize("p", [2, 3, 167772161, 469762049, 1224736769])
def test_known_primes(p):
    assert is_prime(p) is True


def test_products_are_composite():
    for a in range(2, 40):
        for b in range(2, 40):
            assert not is_prime(a * b)


def test_below_two_not_prime():
    assert [is_prime(n) for n in (-5, 0, 1)] == [False, False, False]


def test_random_primes_are_ordered_primes_in_range():
    gen = random.Random(7)
    for _ in range(5):
        p1, p2 = random_primes(1_000_000_000, 2_000_000_000, gen)
        assert 1_000_000_000 <= p1 < p2 <= 2_000_000_000
        assert is_prime(p1) and is_prime(p2)


def test_random_primes_small_range():
    p1, p2 = random_primes(2, 7, random.Random(3))
    assert p1 < p2
    assert {p1, p2} <= {2, 3, 5, 7}


def test_random_primes_empty_range():
    with pytest.raises(ValueError):
        random_primes(10, 5)


@pytest.mark.parametrize("count", [0, 21])
def test_hash_params_size_limits(count):
    with pytest.raises(ValueError):
        HashParams(count)


def test_hash_params_shape(params):
    assert len(params) == 2
    assert all(base < mod for base, mod in zip(params.bases, params.mods))


def test_single_symbol_hash_is_its_code(params):
    assert hash_forward("a", params) == HashValue((97, 97))


def test_forward_equals_reverse_of_reversed(params):
    s = "contest library"
    assert hash_forward(s, params) == hash_reverse(s[::-1], params)


def test_different_strings_differ(params):
    assert hash_forward("ab", params) != hash_forward("ba", params)


def test_substring_hashes_match_direct_hashes(params):
    s = "mississippi"
    h = Hashing(s, params)
    for a in range(len(s)):
        for b in range(a, len(s)):
            part = s[a:b + 1]
            assert h.ha(a, b) == hash_forward(part, params)
            assert h.rha(a, b) == hash_reverse(part, params)
            assert h.pha(a, b) == hash_multiset(part, params)
            assert h.ha(b, a) == h.ha(a, b)


def test_palindrome_forward_equals_reverse(params):
    h = Hashing("abacaba", params)
    assert h.ha(0, 6) == h.rha(0, 6)
    assert h.ha(0, 2) == h.rha(0, 2)
    assert h.ha(0, 1) != h.rha(0, 1)


def test_multiset_hash_ignores_order(params):
    assert hash_multiset("listen", params) == hash_multiset("silent", params)
    assert hash_multiset("aab", params) != hash_multiset("abb", params)


def test_integer_sequences(params):
    values = [5, 1, 400, 7]
    h = Hashing(values, params)
    assert h.ha(1, 3) == hash_forward([1, 400, 7], params)
    assert h.pha(0, 3) == hash_multiset([7, 400, 1, 5], params)


def test_out_of_range_raises(params):
    h = Hashing("abc", params)
    with pytest.raises(IndexError):
        h.ha(0, 3)
    with pytest.raises(IndexError):
        h.rha(-1, 1)
    with pytest.raises(IndexError):
        Hashing("", params).pha(0, 0)


def test_negative_symbol_rejected(params):
    with pytest.raises(ValueError):
        hash_forward([1, -2], params)


def test_powers_table(params):
    powers = HashPowers(params)
    assert len(powers.table) == 301
    powers.update(1000)
    assert len(powers.table) == 1001
    for i in (0, 299, 999):
        for j, (base, mod) in enumerate(zip(params.bases, params.mods)):
            assert powers.table[i + 1][j] == powers.table[i][j] * base % mod


def test_mismatched_powers_rejected(params):
    other = HashParams(1, random.Random(99))
    with pytest.raises(ValueError):
        hash_multiset("abc", params, HashPowers(other))


def test_set_rebuilds(params):
    h = Hashing("abc", params)
    h.set("xyzw")
    assert h.n == 4
    assert h.ha(0, 3) == hash_forward("xyzw", params)


def test_hash_value_less_than():
    assert HashValue((1, 5)) < HashValue((2, 0))
    assert not HashValue((3,)) < HashValue((2,))