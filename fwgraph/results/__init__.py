"""Result containers returned by the path algorithms."""

from fwgraph.results.paths import FloydWarshallResult

__all__ = ["FloydWarshallResult"]
