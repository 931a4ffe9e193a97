import json

import pytest

from fwgraph.graph.io import (
    edgelist_to_graph,
    graph_to_edgelist,
    graph_to_node_link,
    node_link_to_graph,
)
from fwgraph.graph.weighted_digraph import WeightedDiGraph


def test_graph_to_node_link_basic():
    g = WeightedDiGraph(name="demo")
    g.add_node("A")
    g.add_node("B")
    g.set_edge("A", "B", 10)
    g.set_edge("B", "A", 99)

    result = graph_to_node_link(g)

    assert result["graph"] == {"name": "demo"}
    assert result["nodes"] == [{"id": "A"}, {"id": "B"}]
    assert result["links"] == [
        {"source": 0, "target": 1, "weight": 10},
        {"source": 1, "target": 0, "weight": 99},
    ]
    # Plain data only
    json.dumps(result)


def test_node_link_to_graph_basic():
    data = {
        "graph": {"name": "demo"},
        "nodes": [{"id": "A"}, {"id": "B"}, {"id": "C"}],
        "links": [
            {"source": 0, "target": 1, "weight": 1.5},
            {"source": 1, "target": 2, "weight": 2.5},
        ],
    }
    g = node_link_to_graph(data)
    assert g.graph == {"name": "demo"}
    assert list(g.nodes) == ["A", "B", "C"]
    assert g.edge_weight("A", "B") == 1.5
    assert g.edge_weight("B", "C") == 2.5


def test_node_link_round_trip(square1):
    g = node_link_to_graph(graph_to_node_link(square1))
    assert list(g.nodes) == list(square1.nodes)
    assert sorted(g.all_edges()) == sorted(square1.all_edges())


def test_node_link_to_graph_empty():
    g = node_link_to_graph({})
    assert len(g) == 0


def test_edgelist_to_graph_basic():
    lines = ["A B 1.5", "B C 2", "", "C A 0.25\n"]
    g = edgelist_to_graph(lines)
    assert list(g.nodes) == ["A", "B", "C"]
    assert g.edge_weight("A", "B") == 1.5
    assert g.edge_weight("B", "C") == 2.0
    assert g.edge_weight("C", "A") == 0.25


def test_edgelist_to_graph_custom_separator_and_type():
    g = edgelist_to_graph(["A,B,3", "B,C,4"], separator=",", weight_type=int)
    assert g.edge_weight("A", "B") == 3
    assert isinstance(g.edge_weight("B", "C"), int)


def test_edgelist_to_graph_updates_existing():
    g = WeightedDiGraph.from_edges([("A", "B", 1.0)])
    edgelist_to_graph(["A B 5", "B D 1"], graph=g)
    assert g.edge_weight("A", "B") == 5.0
    assert g.edge_weight("B", "D") == 1.0


def test_edgelist_to_graph_bad_line():
    with pytest.raises(RuntimeError, match="token count mismatch"):
        edgelist_to_graph(["A B"])


def test_graph_to_edgelist():
    g = WeightedDiGraph.from_edges([("A", "B", 1.5), ("B", "C", 2)])
    assert graph_to_edgelist(g) == ["A B 1.5", "B C 2"]
    assert graph_to_edgelist(g, separator=";") == ["A;B;1.5", "B;C;2"]
