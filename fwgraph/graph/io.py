"""Edge-list and node-link (de)serialization for WeightedDiGraph."""

from __future__ import annotations

from typing import Any, Callable, Dict, Iterable, List, Optional

from fwgraph.graph.weighted_digraph import NodeID, WeightedDiGraph


def graph_to_node_link(graph: WeightedDiGraph) -> Dict[str, Any]:
    """
    Convert a WeightedDiGraph into a node-link dict representation.

    The result is JSON-serializable when node ids and weights are:
        {
            "graph": { ... top-level graph attributes ... },
            "nodes": [{"id": node_id}, ...],
            "links": [
                {"source": <node index>, "target": <node index>, "weight": w},
                ...
            ]
        }

    Args:
        graph: The graph to convert.

    Returns:
        A dict with 'graph', 'nodes' and 'links'.
    """
    node_list = list(graph.nodes)
    node_map = {node_id: i for i, node_id in enumerate(node_list)}

    return {
        "graph": dict(graph.graph),
        "nodes": [{"id": node_id} for node_id in node_list],
        "links": [
            {"source": node_map[src], "target": node_map[dst], "weight": weight}
            for src, dst, weight in graph.all_edges()
        ],
    }


def node_link_to_graph(data: Dict[str, Any]) -> WeightedDiGraph:
    """
    Rebuild a WeightedDiGraph from the output of `graph_to_node_link`.

    Args:
        data: Node-link dict.

    Returns:
        The reconstructed graph.
    """
    graph = WeightedDiGraph(**data.get("graph", {}))

    node_map: Dict[int, NodeID] = {}
    for idx, node_obj in enumerate(data.get("nodes", [])):
        node_id = node_obj["id"]
        graph.add_node(node_id)
        node_map[idx] = node_id

    for link in data.get("links", []):
        graph.set_edge(node_map[link["source"]], node_map[link["target"]], link["weight"])

    return graph


def edgelist_to_graph(
    lines: Iterable[str],
    separator: Optional[str] = None,
    weight_type: Callable[[str], Any] = float,
    graph: Optional[WeightedDiGraph] = None,
) -> WeightedDiGraph:
    """
    Build or update a WeightedDiGraph from ``src dst weight`` lines.

    Blank lines are skipped. Missing nodes are created in first-seen order.

    Args:
        lines: An iterable of strings, one edge per line.
        separator: Token separator; None splits on any whitespace.
        weight_type: Converts the weight token (default ``float``).
        graph: An existing graph to update; if None, a new one is created.

    Returns:
        The updated (or newly created) graph.

    Raises:
        RuntimeError: If a line does not have exactly three tokens.
    """
    if graph is None:
        graph = WeightedDiGraph()

    for line in lines:
        line = line.rstrip("\r\n")
        if not line.strip():
            continue
        tokens = line.split(separator)
        if len(tokens) != 3:
            raise RuntimeError(
                f"Line '{line}' does not match expected columns [src, dst, weight] "
                f"(token count mismatch)."
            )
        src_id, dst_id, weight_token = tokens

        if src_id not in graph:
            graph.add_node(src_id)
        if dst_id not in graph:
            graph.add_node(dst_id)
        graph.set_edge(src_id, dst_id, weight_type(weight_token))

    return graph


def graph_to_edgelist(graph: WeightedDiGraph, separator: str = " ") -> List[str]:
    """
    Convert a WeightedDiGraph into ``src dst weight`` lines.

    Args:
        graph: The graph to export.
        separator: String used to join tokens.

    Returns:
        One line per edge, in edge iteration order.
    """
    return [
        separator.join((str(src), str(dst), str(weight)))
        for src, dst, weight in graph.all_edges()
    ]
