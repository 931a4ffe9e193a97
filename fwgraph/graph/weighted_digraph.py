"""Strict weighted directed graph used as engine input and result storage.

`WeightedDiGraph` extends `networkx.DiGraph` with explicit node management and
a single weight per ordered node pair. A missing edge is reported as ``None``
by `edge_weight`, never as zero or some other default.
"""

from __future__ import annotations

import copy
from pickle import dumps, loads
from typing import Any, Hashable, Iterable, Iterator, Optional, Tuple

import networkx as nx

NodeID = Hashable
WEIGHT_ATTR = "weight"
EdgeTriple = Tuple[NodeID, NodeID, Any]


class WeightedDiGraph(nx.DiGraph):
    """A directed graph with at most one weight per ordered node pair.

    This class enforces:
      - No automatic creation of missing nodes when setting an edge.
      - No duplicate nodes (raises ValueError on duplicates).
      - Removing non-existent nodes or edges raises ValueError.
      - ``None`` is never a stored weight; it is the "absent" signal.
      - ``copy()`` performs a pickle-based deep copy by default, so the copy
        shares no weight objects with the original. ``clone()`` does the same
        through ``copy.deepcopy`` but keeps the node label objects.

    Inherits from:
        networkx.DiGraph
    """

    @classmethod
    def from_edges(cls, edges: Iterable[EdgeTriple]) -> WeightedDiGraph:
        """Build a graph from ``(src, dst, weight)`` triples.

        Nodes are created in first-seen order. A repeated pair overwrites the
        earlier weight.

        Args:
            edges: Iterable of ``(src, dst, weight)``.

        Returns:
            WeightedDiGraph: The new graph.
        """
        graph = cls()
        for src, dst, weight in edges:
            if src not in graph:
                graph.add_node(src)
            if dst not in graph:
                graph.add_node(dst)
            graph.set_edge(src, dst, weight)
        return graph

    @classmethod
    def with_nodes(cls, nodes: Iterable[NodeID]) -> WeightedDiGraph:
        """Build an edgeless graph over `nodes`, keeping their order."""
        graph = cls()
        for node in nodes:
            graph.add_node(node)
        return graph

    def copy(self, as_view: bool = False, pickle: bool = True) -> WeightedDiGraph:
        """Create a copy of this graph.

        Args:
            as_view: If True, return a view instead of a full copy; only used
                if ``pickle=False``.
            pickle: If True, perform a pickle-based deep copy.

        Returns:
            WeightedDiGraph: A new instance (or view) of the graph.
        """
        if not pickle:
            return super().copy(as_view=as_view)  # type: ignore[return-value]
        return loads(dumps(self))

    def clone(self) -> WeightedDiGraph:
        """Deep-copy the graph while keeping the caller's node label objects.

        Weights and attribute dicts are copied; node labels are shared, so
        labels hashed by identity still find their edges in the clone. Unlike
        ``copy()``, nothing has to be picklable.

        Returns:
            WeightedDiGraph: An independent graph of the same class.
        """
        return copy.deepcopy(self, memo={id(node): node for node in self})

    #
    # Node management
    #
    def add_node(self, node_for_adding: NodeID, **attr: Any) -> None:
        """Add a single node, disallowing duplicates.

        Raises:
            ValueError: If the node already exists in the graph.
        """
        if node_for_adding in self:
            raise ValueError(f"Node '{node_for_adding}' already exists in this graph.")
        super().add_node(node_for_adding, **attr)

    def remove_node(self, n: NodeID) -> None:
        """Remove a single node and all incident edges.

        Raises:
            ValueError: If the node does not exist in the graph.
        """
        if n not in self:
            raise ValueError(f"Node '{n}' does not exist.")
        super().remove_node(n)

    #
    # Edge management
    #
    def set_edge(self, src: NodeID, dst: NodeID, weight: Any) -> None:
        """Insert the edge ``src -> dst`` or overwrite its weight.

        Other edges are never touched. Both endpoints must already exist.

        Args:
            src: Source node.
            dst: Destination node.
            weight: Edge weight; must not be None.

        Raises:
            ValueError: If either node is missing or `weight` is None.
        """
        if src not in self:
            raise ValueError(f"Source node '{src}' does not exist.")
        if dst not in self:
            raise ValueError(f"Target node '{dst}' does not exist.")
        if weight is None:
            raise ValueError(f"Edge '{src}'->'{dst}' cannot have a None weight.")

        edge_data = self._adj[src].get(dst)
        if edge_data is None:
            super().add_edge(src, dst, **{WEIGHT_ATTR: weight})
        else:
            edge_data[WEIGHT_ATTR] = weight

    def add_edge(self, u_of_edge: NodeID, v_of_edge: NodeID, **attr: Any) -> None:
        """NetworkX-compatible alias for `set_edge`.

        The weight is read from the ``weight`` keyword; other attributes are
        not supported.

        Raises:
            ValueError: On missing nodes, a missing weight, or extra attributes.
        """
        extra = set(attr) - {WEIGHT_ATTR}
        if extra:
            raise ValueError(f"Unsupported edge attributes: {sorted(extra)}.")
        self.set_edge(u_of_edge, v_of_edge, attr.get(WEIGHT_ATTR))

    def remove_edge(self, u: NodeID, v: NodeID) -> None:
        """Remove the edge ``u -> v``.

        Raises:
            ValueError: If the edge does not exist.
        """
        if not self.has_edge(u, v):
            raise ValueError(f"No edge from '{u}' to '{v}' to remove.")
        super().remove_edge(u, v)

    #
    # Queries
    #
    def edge_weight(self, src: NodeID, dst: NodeID) -> Optional[Any]:
        """Return the weight of ``src -> dst``, or None if there is no such edge."""
        nbrs = self._adj.get(src)
        if nbrs is None:
            return None
        edge_data = nbrs.get(dst)
        if edge_data is None:
            return None
        return edge_data[WEIGHT_ATTR]

    def all_edges(self) -> Iterator[EdgeTriple]:
        """Yield every ``(src, dst, weight)`` triple exactly once."""
        for src, nbrs in self._adj.items():
            for dst, edge_data in nbrs.items():
                yield src, dst, edge_data[WEIGHT_ATTR]

    def node_count(self) -> int:
        return self.number_of_nodes()

    def edge_count(self) -> int:
        return self.number_of_edges()
