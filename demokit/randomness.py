"""Random helpers: coin flips, ranges and picking two distinct items."""

from __future__ import annotations

import random
from typing import MutableSequence, Optional, Sequence, Tuple

_default_rng = random.Random()


def _rng(rng: Optional[random.Random]) -> random.Random:
    return rng if rng is not None else _default_rng


def chance(p: float, rng: Optional[random.Random] = None) -> bool:
    """True with probability ``p``, which must lie in ``[0, 1]``."""
    if not 0.0 <= p <= 1.0:
        raise ValueError(f"probability {p} is not in [0, 1]")
    return _rng(rng).random() < p


def range_exclusive(low: int, high: int, rng: Optional[random.Random] = None) -> int:
    """A random integer in the half-open range ``[low, high)``."""
    if high <= low:
        raise ValueError(f"empty range [{low}, {high})")
    return _rng(rng).randrange(low, high)


def choose_two_distinct_indices(
    items: Sequence[object], rng: Optional[random.Random] = None
) -> Optional[Tuple[int, int]]:
    """Two distinct indices ``(a, b)`` with ``a < b``, or ``None`` for fewer than two items."""
    n = len(items)
    if n < 2:
        return None
    if n == 2:
        return (0, 1)
    first = range_exclusive(0, n, rng)
    while True:
        second = range_exclusive(0, n, rng)
        if second != first:
            break
    return (min(first, second), max(first, second))


def swap_two_distinct(
    items: MutableSequence[object], rng: Optional[random.Random] = None
) -> Optional[Tuple[int, int]]:
    """Swap two distinct random items in place; returns their indices, or ``None``."""
    pair = choose_two_distinct_indices(items, rng)
    if pair is None:
        return None
    lo, hi = pair
    items[lo], items[hi] = items[hi], items[lo]
    return pair