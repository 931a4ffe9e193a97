import random

import pytest

from fwgraph.graph.weighted_digraph import WeightedDiGraph


@pytest.fixture
def empty_graph():
    return WeightedDiGraph()


@pytest.fixture
def fan_graph():
    # Weight:
    #            [0.12]     [3.0]
    #       ┌───────────►B────────►C
    #       │                      ▲
    #       │        [1.99]        │
    #       A──────────────────────┘
    #       │ [2.1]► D   [0.9]► E
    #       │
    #       │ [0.8]      [0.6]       [1.0]
    #       ├───────►G────────►F────────►H
    #       │                  ▲         ▲
    #       │      [4.44]      │  [8.8]  │
    #       ├──────────────────┘         │
    #       └────────────────────────────┘
    return WeightedDiGraph.from_edges(
        [
            ("a", "b", 0.12),
            ("a", "c", 1.99),
            ("b", "c", 3.0),
            ("a", "d", 2.1),
            ("a", "e", 0.9),
            ("a", "f", 4.44),
            ("a", "g", 0.8),
            ("g", "f", 0.6),
            ("a", "h", 8.8),
            ("f", "h", 1.0),
        ]
    )


@pytest.fixture
def line1():
    # Weight:
    #      [1]       [2]       [3]
    #  A◄───────►B◄───────►C◄───────►D
    g = WeightedDiGraph()
    for node in "ABCD":
        g.add_node(node)
    for src, dst, weight in [("A", "B", 1), ("B", "C", 2), ("C", "D", 3)]:
        g.set_edge(src, dst, weight)
        g.set_edge(dst, src, weight)
    return g


@pytest.fixture
def square1():
    # Weight:
    #       [1]        [1]
    #   ┌────────►B─────────┐
    #   │                   │
    #   │                   ▼
    #   A──────[5]─────────►C
    #   │                   ▲
    #   │   [2]        [2]  │
    #   └────────►D─────────┘
    return WeightedDiGraph.from_edges(
        [
            ("A", "B", 1),
            ("B", "C", 1),
            ("A", "C", 5),
            ("A", "D", 2),
            ("D", "C", 2),
        ]
    )


@pytest.fixture
def capacity1():
    # Capacity:
    #       [10]       [5]        [8]
    #   A────────►B────────►C────────►D
    #   │                   ▲         ▲
    #   │        [3]        │         │
    #   ├───────────────────┘         │
    #   │             [1]             │
    #   └─────────────────────────────┘
    return WeightedDiGraph.from_edges(
        [
            ("A", "B", 10),
            ("B", "C", 5),
            ("A", "C", 3),
            ("C", "D", 8),
            ("A", "D", 1),
        ]
    )


@pytest.fixture
def reliability1():
    # Probability of success:
    #       [0.9]      [0.9]
    #   A────────►B────────►C
    #   │                   ▲
    #   │       [0.5]       │
    #   └───────────────────┘
    return WeightedDiGraph.from_edges(
        [("A", "B", 0.9), ("B", "C", 0.9), ("A", "C", 0.5)]
    )


@pytest.fixture
def cycle1():
    #      [1]
    #  A◄───────►B
    return WeightedDiGraph.from_edges([("A", "B", 1), ("B", "A", 1)])


@pytest.fixture
def diamond_tie():
    # Two equal-cost routes A->B->D and A->C->D, B listed before C.
    return WeightedDiGraph.from_edges(
        [("A", "B", 1), ("B", "D", 1), ("A", "C", 1), ("C", "D", 1)]
    )


@pytest.fixture
def random_graph1():
    # 12 nodes, ~40% density, integer weights in [1, 9]
    rng = random.Random(42)
    g = WeightedDiGraph.with_nodes(range(12))
    for src in range(12):
        for dst in range(12):
            if src != dst and rng.random() < 0.4:
                g.set_edge(src, dst, rng.randint(1, 9))
    return g
