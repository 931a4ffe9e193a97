"""Weight types and the stock combination/acceptance functions."""

from __future__ import annotations

import operator
from typing import Callable, TypeVar

# Any value the configured operator can combine and the comparator can rank.
Weight = TypeVar("Weight")

Operator = Callable[[Weight, Weight], Weight]
Comparator = Callable[[Weight, Weight], bool]


def add(x: Weight, y: Weight) -> Weight:
    """Sum two path-segment weights."""
    return operator.add(x, y)


def multiply(x: Weight, y: Weight) -> Weight:
    """Multiply two path-segment weights (e.g. link reliabilities)."""
    return operator.mul(x, y)


def bottleneck(x: Weight, y: Weight) -> Weight:
    """Return the smaller of two segment capacities."""
    return y if y < x else x


def strict_less(candidate: Weight, current: Weight) -> bool:
    """
    Return True if `candidate` is strictly smaller than `current`.

    Incomparable operands are never an improvement: NaN compares False on its
    own, and a TypeError from ``<`` is mapped to False as well.
    """
    try:
        return bool(candidate < current)
    except TypeError:
        return False


def strict_greater(candidate: Weight, current: Weight) -> bool:
    """
    Return True if `candidate` is strictly larger than `current`.

    Same incomparable-as-not-better rule as `strict_less`.
    """
    try:
        return bool(candidate > current)
    except TypeError:
        return False
