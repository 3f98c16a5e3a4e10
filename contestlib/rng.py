"""Random integers and shuffling from a generator seeded with system entropy."""

from __future__ import annotations

import random
from typing import Any, MutableSequence

_generator = random.Random()


def rng(a: int, b: int) -> int:
    """Return a uniformly random integer in ``[a, b]``."""
    if a > b:
        raise ValueError(f"empty range [{a}, {b}]")
    return _generator.randint(a, b)


def shuffle(items: MutableSequence[Any]) -> None:
    """Shuffle ``items`` in place."""
    _generator.shuffle(items)