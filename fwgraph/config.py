"""Configuration for the Floyd-Warshall relaxation engine."""

from __future__ import annotations

from dataclasses import dataclass

from fwgraph.algorithms.base import (
    Comparator,
    Operator,
    add,
    bottleneck,
    multiply,
    strict_greater,
    strict_less,
)


@dataclass(frozen=True)
class FloydWarshallConfig:
    """Immutable bundle of engine settings.

    The operator and comparator are taken as given. A pair that is not
    associative or not monotonic still terminates, but the closure it yields
    is not canonical.

    Attributes:
        op: Combines the weights of two consecutive path segments.
        cmp: ``cmp(candidate, current)`` is True when the candidate path
            through an intermediate node should replace the stored one.
        discard_loops: Skip every relaxation whose intermediate, source and
            destination nodes are not pairwise distinct.
    """

    op: Operator = add
    cmp: Comparator = strict_less
    discard_loops: bool = True

    @classmethod
    def customized(cls, op: Operator, cmp: Comparator) -> FloydWarshallConfig:
        """Build a config from a custom operator/comparator, discarding loops."""
        return cls.fully_customized(op, cmp, True)

    @classmethod
    def fully_customized(
        cls, op: Operator, cmp: Comparator, discard_loops: bool
    ) -> FloydWarshallConfig:
        """Build a config with every setting given explicitly."""
        return cls(op=op, cmp=cmp, discard_loops=discard_loops)

    #
    # Presets
    #
    @classmethod
    def shortest_path(cls) -> FloydWarshallConfig:
        """Minimum total cost: sum of weights, smaller is better."""
        return cls()

    @classmethod
    def widest_path(cls) -> FloydWarshallConfig:
        """Maximum bottleneck capacity: min along the path, larger is better."""
        return cls.customized(bottleneck, strict_greater)

    @classmethod
    def most_reliable_path(cls) -> FloydWarshallConfig:
        """Maximum reliability: product of probabilities, larger is better."""
        return cls.customized(multiply, strict_greater)


# Shared default instance
DEFAULT_CONFIG = FloydWarshallConfig()
