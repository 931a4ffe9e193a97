"""All-pairs closure result with distance queries and path reconstruction."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Iterator, List, Optional, Tuple

from fwgraph.graph.weighted_digraph import NodeID, WeightedDiGraph


@dataclass(frozen=True)
class FloydWarshallResult:
    """
    Outcome of one Floyd-Warshall run.

    Attributes:
        path (WeightedDiGraph):
            Best combined weight found for each reachable ordered pair.
        next (WeightedDiGraph):
            First hop on the best path for each reachable pair. An entry
            exists exactly when `path` has one, and ``next[i][j] == j`` when
            the best path is the direct edge.
    """

    path: WeightedDiGraph
    next: WeightedDiGraph

    def weight(self, src: NodeID, dst: NodeID) -> Optional[Any]:
        """Best combined weight from `src` to `dst`, or None if unreachable."""
        return self.path.edge_weight(src, dst)

    def first_hop(self, src: NodeID, dst: NodeID) -> Optional[NodeID]:
        """Node to step to from `src` towards `dst`, or None if unreachable."""
        return self.next.edge_weight(src, dst)

    def has_path(self, src: NodeID, dst: NodeID) -> bool:
        """True if the run found any path from `src` to `dst`."""
        return self.next.edge_weight(src, dst) is not None

    def iter_path(self, src: NodeID, dst: NodeID) -> Iterator[NodeID]:
        """
        Walk the best path from `src` to `dst` by repeated first-hop lookups.

        Yields `src` first and `dst` last; yields nothing if `dst` is not
        reachable. At least one hop is always taken, so a recorded cycle
        ``src -> ... -> src`` is walked once rather than cut to ``[src]``.

        The walk ends only if the comparator used for the run was consistent:
        an inconsistent one can produce a first-hop cycle, and this generator
        does not guard against it.

        Raises:
            ValueError: If the chain hits a pair with no first hop, which only
                happens when `next` was edited after the run.
        """
        current = self.first_hop(src, dst)
        if current is None:
            return
        yield src
        while True:
            yield current
            if current == dst:
                return
            hop = self.first_hop(current, dst)
            if hop is None:
                raise ValueError(f"Next-hop chain from '{src}' to '{dst}' is broken.")
            current = hop

    def path_nodes(self, src: NodeID, dst: NodeID) -> Optional[List[NodeID]]:
        """Return the best path as a node list, or None if `dst` is unreachable."""
        nodes = list(self.iter_path(src, dst))
        return nodes or None

    def pairs(self) -> Iterator[Tuple[NodeID, NodeID, Any]]:
        """Yield ``(src, dst, weight)`` for every reachable ordered pair."""
        return self.path.all_edges()

    def to_dict(self) -> Dict[NodeID, Dict[NodeID, Dict[str, Any]]]:
        """
        Nested mapping ``{src: {dst: {"weight": w, "next": hop}}}``.

        Sources with no reachable destination are omitted.
        """
        out: Dict[NodeID, Dict[NodeID, Dict[str, Any]]] = {}
        for src, dst, weight in self.path.all_edges():
            out.setdefault(src, {})[dst] = {
                "weight": weight,
                "next": self.next.edge_weight(src, dst),
            }
        return out
