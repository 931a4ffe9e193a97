"""fwgraph: generalized Floyd-Warshall all-pairs path closure.

One engine covers shortest-path, widest-path, most-reliable-path and other
closure problems; the caller picks the combination operator and acceptance
comparator.

Primary API:
    floyd_warshall() - Run the closure with a given configuration
    FloydWarshall - Reusable engine bound to a configuration
    FloydWarshallConfig - Operator, comparator and loop-discard settings
    FloydWarshallResult - Best weights, first hops and path reconstruction
    WeightedDiGraph - Input graph type

Example:
    from fwgraph import WeightedDiGraph, floyd_warshall

    graph = WeightedDiGraph.from_edges([("a", "g", 0.8), ("g", "f", 0.6)])
    result = floyd_warshall(graph)
    result.weight("a", "f")      # 1.4
    result.path_nodes("a", "f")  # ["a", "g", "f"]
"""

from __future__ import annotations

from fwgraph import logging
from fwgraph._version import __version__
from fwgraph.algorithms.floyd_warshall import FloydWarshall, floyd_warshall
from fwgraph.config import DEFAULT_CONFIG, FloydWarshallConfig
from fwgraph.graph.convert import from_networkx, to_networkx
from fwgraph.graph.weighted_digraph import WeightedDiGraph
from fwgraph.results.paths import FloydWarshallResult

__all__ = [
    # Version
    "__version__",
    # Graph
    "WeightedDiGraph",
    "from_networkx",
    "to_networkx",
    # Engine
    "FloydWarshall",
    "FloydWarshallConfig",
    "DEFAULT_CONFIG",
    "floyd_warshall",
    # Results
    "FloydWarshallResult",
    # Utilities
    "logging",
]
