import random

import pytest

from contestlib.ntt import (
    conv,
    convolution,
    convolve,
    fmt,
    format_number,
    mod_inverse,
    mod_pow,
    parse_number,
)

P = 998244353


def evaluate(coefficients, base):
    return sum(c * base**i for i, c in enumerate(coefficients))


@pytest.mark.parametrize("value,modulus", [(3, 7), (10, 17), (123456, P), (2, 1_000_000_007)])
def test_mod_inverse(value, modulus):
    assert value * mod_inverse(value, modulus) % modulus == 1


def test_mod_inverse_missing_raises():
    with pytest.raises(ValueError):
        mod_inverse(4, 8)


def test_mod_pow():
    assert mod_pow(3, 10, 7) == pow(3, 10, 7)
    assert mod_pow(123, 456789, P) == pow(123, 456789, P)
    assert mod_pow(5, 0, 13) == 1


def test_fmt_round_trip():
    gen = random.Random(1)
    values = [gen.randrange(P) for _ in range(16)]
    assert fmt(fmt(values, P, 1), P, -1) == values


def test_fmt_bad_length_raises():
    with pytest.raises(ValueError):
        fmt([1, 2, 3], P, 1)


def test_conv_length_mismatch_raises():
    with pytest.raises(ValueError):
        conv([1, 2], [1, 2, 3, 4], P)


def test_convolve_evaluates_as_product():
    gen = random.Random(2)
    x = [gen.randrange(10) for _ in range(11)]
    y = [gen.randrange(10) for _ in range(7)]
    result = convolve(x, y, P)
    assert len(result) == len(x) + len(y) - 1
    assert evaluate(result, 1000) == evaluate(x, 1000) * evaluate(y, 1000)


def test_convolve_identity_and_empty():
    assert convolve([5, 6, 7], [1], P) == [5, 6, 7]
    assert convolve([], [1], P) == []


def test_convolution_matches_convolve_on_ntt_prime():
    gen = random.Random(3)
    x = [gen.randrange(P) for _ in range(20)]
    y = [gen.randrange(P) for _ in range(9)]
    assert convolution(x, y, P) == convolve(x, y, P)


def test_convolution_arbitrary_modulus_reduces():
    gen = random.Random(4)
    mod = 1_000_000_007
    x = [gen.randrange(mod) for _ in range(8)]
    y = [gen.randrange(mod) for _ in range(5)]
    exact = convolution(x, y, 10**40)
    assert convolution(x, y, mod) == [v % mod for v in exact]


def test_big_number_multiplication():
    a = "98765432109876543210"
    b = "12345678901234567890123"
    product = convolution(parse_number(a), parse_number(b), 10**18)
    assert format_number(product) == str(int(a) * int(b))


def test_parse_number_limbs():
    assert parse_number("123456789") == [56789, 1234, 0]
    assert parse_number("") == [0]


def test_parse_number_rejects_non_digits():
    with pytest.raises(ValueError):
        parse_number("12a4")


@pytest.mark.parametrize("text", ["0", "7", "100000", "123456789012345678901234567890"])
def test_number_round_trip(text):
    assert format_number(parse_number(text)) == text


def test_format_number_strips_leading_zeros_and_carries():
    assert format_number(parse_number("000123")) == "123"
    assert format_number([100000, 0]) == "100000"
    assert format_number([0, 0, 0]) == "0"