"""Palindromic radii of every centre of a sequence."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any


class Manacher:
    """Palindrome radii for all ``2 * len(s)`` centres of ``s``.

    ``rad[i]`` is the longest palindrome around centre ``i``: even ``i`` is
    the character ``i // 2``, odd ``i`` is the gap after it. ``pal`` lists the
    maximal palindrome ``(begin, end)`` of every centre that has one.
    """

    def __init__(self, s: Sequence[Any]) -> None:
        size = 2 * len(s)
        rad = [0] * size
        i = j = 0
        while i < size:
            while i >= j and i + j + 1 < size and s[(i - j) // 2] == s[(i + j + 1) // 2]:
                j += 1
            rad[i] = j
            k = 1
            while i >= k and rad[i] >= k and rad[i - k] != rad[i] - k:
                rad[i + k] = min(rad[i - k], rad[i] - k)
                k += 1
            i += k
            j = max(j - k, 0)
        self.rad = rad
        self.pal = [
            ((centre - radius + 1) // 2, (centre + radius - 1) // 2)
            for centre, radius in enumerate(rad)
            if radius
        ]

    def is_pal(self, b: int, e: int) -> bool:
        """Tell whether ``s[b..e]`` (inclusive, either order) is a palindrome."""
        if b > e:
            b, e = e, b
        n = len(self.rad) // 2
        return b >= 0 and e < n and self.rad[b + e] >= e - b + 1