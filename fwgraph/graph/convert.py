"""Conversion between WeightedDiGraph and plain NetworkX graphs."""

from __future__ import annotations

import networkx as nx

from fwgraph.graph.weighted_digraph import WeightedDiGraph


def from_networkx(nx_graph: nx.Graph, weight: str = "weight") -> WeightedDiGraph:
    """Convert a NetworkX graph into a WeightedDiGraph.

    Node order is preserved. Each undirected edge contributes both directions.

    Args:
        nx_graph: A ``nx.DiGraph`` or ``nx.Graph``.
        weight: Name of the edge attribute holding the weight.

    Returns:
        WeightedDiGraph: The converted graph.

    Raises:
        ValueError: If `nx_graph` is a multigraph, or an edge lacks `weight`.
    """
    if nx_graph.is_multigraph():
        raise ValueError(
            "Multigraphs are not supported: at most one weight per node pair."
        )

    graph = WeightedDiGraph.with_nodes(nx_graph.nodes)
    for u, v, data in nx_graph.edges(data=True):
        if weight not in data:
            raise ValueError(f"Edge '{u}'->'{v}' has no '{weight}' attribute.")
        graph.set_edge(u, v, data[weight])
        if not nx_graph.is_directed():
            graph.set_edge(v, u, data[weight])
    return graph


def to_networkx(graph: WeightedDiGraph, weight: str = "weight") -> nx.DiGraph:
    """Convert a WeightedDiGraph into a plain ``nx.DiGraph``.

    Args:
        graph: The graph to convert.
        weight: Name of the edge attribute to store weights under.

    Returns:
        A NetworkX DiGraph with the same nodes and weighted edges.
    """
    nx_graph = nx.DiGraph()
    nx_graph.add_nodes_from(graph.nodes)
    for src, dst, value in graph.all_edges():
        nx_graph.add_edge(src, dst, **{weight: value})
    return nx_graph
