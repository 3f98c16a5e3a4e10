"""Polynomial and multiset string hashing with random prime moduli."""

from __future__ import annotations

import math
import random
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import Any

ALPHABET_MAX_VALUE = 300
HASH_SIZE = 1
MAX_HASH_SIZE = 20
PRIME_LOW = 1_000_000_000
PRIME_HIGH = 2_000_000_000

_WITNESSES = (2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37)
_generator = random.Random()


def _is_witness(a: int, s: int, d: int, n: int) -> bool:
    x = pow(a, d, n)
    if x in (1, n - 1):
        return False
    for _ in range(s - 1):
        x = x * x % n
        if x == 1:
            return True
        if x == n - 1:
            return False
    return True


def is_prime(n: int) -> bool:
    """Deterministic Miller-Rabin test, exact for every 64-bit integer."""
    if n < 2:
        return False
    if n == 2:
        return True
    if n % 2 == 0:
        return False
    d, s = n - 1, 0
    while d % 2 == 0:
        d //= 2
        s += 1
    for p in _WITNESSES:
        if p >= n:
            break
        if _is_witness(p, s, d, n):
            return False
    return True


def _random_prime(low: int, high: int, generator: random.Random) -> int:
    while True:
        candidate = generator.randint(low, high)
        if is_prime(candidate):
            return candidate


def random_primes(
    low: int, high: int, generator: random.Random | None = None
) -> tuple[int, int]:
    """Return two distinct random primes in ``[low, high]``, smaller first.

    The range must hold at least two primes, otherwise this never returns.
    """
    if low > high:
        raise ValueError(f"empty range [{low}, {high}]")
    gen = generator if generator is not None else _generator
    while True:
        p1 = _random_prime(low, high, gen)
        p2 = _random_prime(low, high, gen)
        if math.gcd(p1, p2) == 1:
            return (p1, p2) if p1 < p2 else (p2, p1)


class HashParams:
    """A set of ``(base, modulus)`` pairs, each a pair of random primes."""

    def __init__(self, count: int = HASH_SIZE, generator: random.Random | None = None) -> None:
        if not 0 < count <= MAX_HASH_SIZE:
            raise ValueError(f"hash size must be in 1..{MAX_HASH_SIZE}, got {count}")
        pairs = [random_primes(PRIME_LOW, PRIME_HIGH, generator) for _ in range(count)]
        self.bases: tuple[int, ...] = tuple(base for base, _ in pairs)
        self.mods: tuple[int, ...] = tuple(mod for _, mod in pairs)

    def __len__(self) -> int:
        return len(self.bases)

    def __repr__(self) -> str:
        return f"HashParams(bases={self.bases}, mods={self.mods})"


class HashPowers:
    """Table of powers of every base, ``table[i][j] == bases[j] ** i % mods[j]``."""

    def __init__(self, params: HashParams, size: int = ALPHABET_MAX_VALUE) -> None:
        self.params = params
        self.size = 0
        self.table: list[tuple[int, ...]] = [tuple(1 for _ in params.bases)]
        self.update(size)

    def update(self, n: int) -> None:
        """Make sure the table reaches exponent ``n``."""
        if n < self.size:
            return
        pairs = list(zip(self.params.bases, self.params.mods))
        while len(self.table) <= n:
            last = self.table[-1]
            self.table.append(tuple(p * base % mod for p, (base, mod) in zip(last, pairs)))
        self.size = n


@dataclass(frozen=True)
class HashValue:
    """One hash per ``(base, modulus)`` pair."""

    values: tuple[int, ...]

    def __lt__(self, other: HashValue) -> bool:
        return any(a < b for a, b in zip(self.values, other.values))


def _code(item: Any) -> int:
    value = ord(item) if isinstance(item, str) else int(item)
    if value < 0:
        raise ValueError(f"negative symbol {value}")
    return value


def _codes(s: Iterable[Any]) -> list[int]:
    return [_code(item) for item in s]


def _default_powers(params: HashParams, powers: HashPowers | None) -> HashPowers:
    if powers is None:
        return DEFAULT_POWERS if params is DEFAULT_PARAMS else HashPowers(params)
    if powers.params is not params:
        raise ValueError("power table belongs to other hash parameters")
    return powers


def _polynomial(codes: Sequence[int], params: HashParams) -> HashValue:
    values = []
    for base, mod in zip(params.bases, params.mods):
        h = 0
        for c in codes:
            h = (h * base + c) % mod
        values.append(h)
    return HashValue(tuple(values))


def hash_forward(s: Iterable[Any], params: HashParams | None = None) -> HashValue:
    """Polynomial hash, the first symbol taking the highest power."""
    return _polynomial(_codes(s), params or DEFAULT_PARAMS)


def hash_reverse(s: Iterable[Any], params: HashParams | None = None) -> HashValue:
    """Polynomial hash, the last symbol taking the highest power."""
    return _polynomial(_codes(s)[::-1], params or DEFAULT_PARAMS)


def hash_multiset(
    s: Iterable[Any], params: HashParams | None = None, powers: HashPowers | None = None
) -> HashValue:
    """Order-independent hash: the sum of ``base ** symbol`` over all symbols."""
    params = params or DEFAULT_PARAMS
    powers = _default_powers(params, powers)
    codes = _codes(s)
    powers.update(max(codes, default=0))
    values = []
    for j, mod in enumerate(params.mods):
        values.append(sum(powers.table[c][j] for c in codes) % mod)
    return HashValue(tuple(values))


class Hashing:
    """Prefix tables giving the forward, reverse and multiset hash of any substring."""

    def __init__(
        self,
        s: Iterable[Any] = (),
        params: HashParams | None = None,
        powers: HashPowers | None = None,
    ) -> None:
        self.params = params or DEFAULT_PARAMS
        self.powers = _default_powers(self.params, powers)
        self.set(s)

    def set(self, s: Iterable[Any]) -> None:
        """Rebuild the tables for a new sequence."""
        codes = _codes(s)
        n = len(codes)
        self.n = n
        self.powers.update(max(n, max(codes, default=0)))
        self._forward: list[list[int]] = []
        self._reverse: list[list[int]] = []
        self._multiset: list[list[int]] = []
        for j, (base, mod) in enumerate(zip(self.params.bases, self.params.mods)):
            forward = [0] * (n + 1)
            for i, c in enumerate(codes):
                forward[i + 1] = (forward[i] * base + c) % mod
            reverse = [0] * (n + 2)
            for i in range(n - 1, -1, -1):
                reverse[i + 1] = (reverse[i + 2] * base + codes[i]) % mod
            multiset = [0] * (n + 1)
            for i, c in enumerate(codes):
                multiset[i + 1] = (multiset[i] + self.powers.table[c][j]) % mod
            self._forward.append(forward)
            self._reverse.append(reverse)
            self._multiset.append(multiset)

    def _bounds(self, a: int, b: int) -> tuple[int, int]:
        if a > b:
            a, b = b, a
        if a < 0 or b >= self.n:
            raise IndexError(f"range [{a}, {b}] outside a sequence of length {self.n}")
        return a, b

    def ha(self, a: int, b: int) -> HashValue:
        """Forward hash of ``s[a..b]`` (inclusive, either order)."""
        a, b = self._bounds(a, b)
        length = b - a + 1
        return HashValue(tuple(
            (table[b + 1] - table[a] * self.powers.table[length][j]) % mod
            for j, (table, mod) in enumerate(zip(self._forward, self.params.mods))
        ))

    def rha(self, a: int, b: int) -> HashValue:
        """Reverse hash of ``s[a..b]`` (inclusive, either order)."""
        a, b = self._bounds(a, b)
        length = b - a + 1
        return HashValue(tuple(
            (table[a + 1] - table[b + 2] * self.powers.table[length][j]) % mod
            for j, (table, mod) in enumerate(zip(self._reverse, self.params.mods))
        ))

    def pha(self, a: int, b: int) -> HashValue:
        """Multiset hash of ``s[a..b]`` (inclusive, either order)."""
        a, b = self._bounds(a, b)
        return HashValue(tuple(
            (table[b + 1] - table[a]) % mod
            for table, mod in zip(self._multiset, self.params.mods)
        ))


DEFAULT_PARAMS = HashParams(HASH_SIZE)
DEFAULT_POWERS = HashPowers(DEFAULT_PARAMS)