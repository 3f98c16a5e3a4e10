"""Number theoretic transform, modular convolution and big-number limbs."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

WIDTH = 5
RADIX = 100000

_PRIME_A = 167772161
_PRIME_B = 469762049
_PRIME_C = 1224736769
_DIGITS = frozenset("0123456789")


def mod_inverse(b: int, m: int) -> int:
    """Return the inverse of ``b`` modulo ``m``."""
    u, x, s, t = 1, 0, b % m, m
    while s:
        q = t // s
        x, u = u, x - u * q
        t, s = s, t - s * q
    if t != 1:
        raise ValueError(f"{b} has no inverse modulo {m}")
    return x % m


def mod_pow(a: int, b: int, m: int) -> int:
    """Return ``a ** b`` modulo ``m``; a non-positive exponent gives 1."""
    if b <= 0:
        return 1
    return pow(a, b, m)


def fmt(values: Iterable[int], mod: int, sign: int = 1) -> list[int]:
    """Return the number theoretic transform of ``values`` modulo prime ``mod``.

    The length must be a power of two dividing ``mod - 1``; 3 is taken as the
    primitive root. A negative ``sign`` gives the scaled inverse transform.
    """
    x = [v % mod for v in values]
    n = len(x)
    if n == 0 or n & (n - 1) or (mod - 1) % n:
        raise ValueError(f"length {n} is not a power of two dividing {mod - 1}")
    h = mod_pow(3, (mod - 1) // n, mod)
    if sign < 0:
        h = mod_inverse(h, mod)

    i = 0
    for j in range(1, n - 1):
        k = n >> 1
        i ^= k
        while k > i:
            k >>= 1
            i ^= k
        if j < i:
            x[i], x[j] = x[j], x[i]

    m = 1
    while m < n:
        w = 1
        wk = mod_pow(h, n // (2 * m), mod)
        for offset in range(m):
            for j in range(offset, n, 2 * m):
                u = x[j]
                d = x[j + m] * w % mod
                x[j] = (u + d) % mod
                x[j + m] = (u - d) % mod
            w = w * wk % mod
        m *= 2

    if sign < 0:
        n_inv = mod_inverse(n, mod)
        x = [v * n_inv % mod for v in x]
    return x


def conv(x: Sequence[int], y: Sequence[int], mod: int) -> list[int]:
    """Return the cyclic convolution of two equal-length sequences modulo ``mod``."""
    fx = fmt(x, mod, 1)
    fy = fmt(y, mod, 1)
    return fmt((a * b % mod for a, b in zip(fx, fy, strict=True)), mod, -1)


def _padded(x: Sequence[int], y: Sequence[int], mod: int) -> tuple[list[int], list[int], int]:
    n = len(x) + len(y) - 1
    size = 1 << (n - 1).bit_length()
    px = [v % mod for v in x] + [0] * (size - len(x))
    py = [v % mod for v in y] + [0] * (size - len(y))
    return px, py, n


def convolve(x: Sequence[int], y: Sequence[int], mod: int) -> list[int]:
    """Return the linear convolution of ``x`` and ``y`` modulo an NTT-friendly prime."""
    if not x or not y:
        return []
    px, py, n = _padded(x, y, mod)
    return conv(px, py, mod)[:n]


def convolution(x: Sequence[int], y: Sequence[int], mod: int) -> list[int]:
    """Return the linear convolution of ``x`` and ``y`` modulo any ``mod``.

    Three NTT primes are combined with the Chinese remainder theorem.
    """
    if not x or not y:
        return []
    px, py, n = _padded(x, y, mod)
    inv_a_mod_b = mod_inverse(_PRIME_A, _PRIME_B)
    inv_ab_mod_c = mod_inverse(_PRIME_A * _PRIME_B % _PRIME_C, _PRIME_C)
    ab_mod = _PRIME_A * _PRIME_B % mod
    ra = conv(px, py, _PRIME_A)
    rb = conv(px, py, _PRIME_B)
    rc = conv(px, py, _PRIME_C)
    result = []
    for a, b, c in zip(ra[:n], rb[:n], rc[:n]):
        z = _PRIME_A * ((b - a) * inv_a_mod_b % _PRIME_B)
        r2 = (c - (a + z) % _PRIME_C) * inv_ab_mod_c % _PRIME_C
        result.append((a + z + ab_mod * r2) % mod)
    return result


def parse_number(s: str) -> list[int]:
    """Split a decimal string into base-``RADIX`` limbs, lowest first, plus a zero limb."""
    if not set(s) <= _DIGITS:
        raise ValueError(f"not a decimal number: {s!r}")
    limbs = [int(s[max(0, end - WIDTH) : end]) for end in range(len(s), 0, -WIDTH)]
    limbs.append(0)
    return limbs


def format_number(limbs: Sequence[int]) -> str:
    """Normalise carries in base-``RADIX`` limbs and return the decimal string.

    A carry out of the last limb is dropped.
    """
    digits = []
    carry = 0
    for limb in limbs:
        carry, digit = divmod(carry + limb, RADIX)
        digits.append(digit)
    while len(digits) > 1 and digits[-1] == 0:
        digits.pop()
    if not digits:
        return "0"
    return str(digits[-1]) + "".join(f"{d:0{WIDTH}d}" for d in reversed(digits[:-1]))