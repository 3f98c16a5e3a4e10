"""Fast Fourier transform over complex numbers and real convolution."""

from __future__ import annotations

import cmath
import math
from collections.abc import Iterable, Sequence


def fft(values: Iterable[complex], sign: int = 1) -> list[complex]:
    """Return the discrete Fourier transform of ``values``.

    The length must be a power of two. ``sign=-1`` gives the inverse
    transform, already divided by the length.
    """
    a = [complex(v) for v in values]
    n = len(a)
    if n & (n - 1):
        raise ValueError(f"length {n} is not a power of two")

    j = 0
    for i in range(1, n - 1):
        k = n >> 1
        j ^= k
        while j < k:
            k >>= 1
            j ^= k
        if i < j:
            a[i], a[j] = a[j], a[i]

    theta = 2 * math.pi * sign
    half = 1
    while (block := half << 1) <= n:
        root = cmath.exp(1j * theta / block)
        for start in range(0, n, block):
            w = 1 + 0j
            for lo in range(start, start + half):
                hi = lo + half
                x, y = a[lo], a[hi] * w
                a[lo] = x + y
                a[hi] = x - y
                w *= root
        half = block

    if sign == -1:
        a = [v / n for v in a]
    return a


def convolve(v1: Sequence[float], v2: Sequence[float]) -> list[float]:
    """Return the linear convolution of two real sequences."""
    if not v1 or not v2:
        return []
    size = len(v1) + len(v2) - 1
    n = 1 << (size - 1).bit_length()
    c1 = fft(list(v1) + [0.0] * (n - len(v1)))
    c2 = fft(list(v2) + [0.0] * (n - len(v2)))
    product = fft((x * y for x, y in zip(c1, c2)), -1)
    return [v.real for v in product[:size]]