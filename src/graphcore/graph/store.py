"""Graph store: the single owner and mutator of nodes and edges.

The store grows monotonically. Nodes and edges are appended, never
removed or modified, so handles stay valid for the graph's lifetime.
Not thread-safe; callers sharing a graph across threads must lock around it.
"""

import math
from typing import Any, Generic

from graphcore.common.exceptions import InvalidArgumentError, NodeNotInGraphError
from graphcore.graph.adjacency import AdjacencyMixin
from graphcore.graph.model import Edge, Node, P


class Graph(AdjacencyMixin, Generic[P]):
    """Ordered collection of nodes and weighted, optionally directed edges.

    Node order is insertion order, which fixes the seed order of every
    whole-graph algorithm. Edge order is insertion order too, with the
    reverse entry of an undirected edge directly after the original.

    Example:
        graph = Graph()
        a = graph.add_node("A")
        b = graph.add_node("B")
        graph.add_edge(a, b, weight=2.0, directed=False)
        graph.neighbors(a)  # [Node(B)]
    """

    def __init__(self) -> None:
        self._nodes: list[Node[P]] = []
        self._edges: list[Edge] = []

    @property
    def nodes(self) -> tuple[Node[P], ...]:
        """Nodes in insertion order."""
        return tuple(self._nodes)

    @property
    def edges(self) -> tuple[Edge, ...]:
        """Edge entries in insertion order."""
        return tuple(self._edges)

    @property
    def edge_count(self) -> int:
        """Number of stored edge entries (an undirected edge counts twice)."""
        return len(self._edges)

    def add_node(self, name: str | None = None, payload: P | None = None) -> Node[P]:
        """Create and append a node.

        Args:
            name: Optional display name. Names need not be unique.
            payload: Opaque caller data; never inspected by the algorithms.

        Returns:
            Handle to the new node.
        """
        node: Node[P] = Node(index=len(self._nodes), name=name, payload=payload)
        self._nodes.append(node)
        return node

    def add_edge(
        self,
        source: Node[P],
        target: Node[P],
        weight: float = 0.0,
        directed: bool = True,
    ) -> Edge:
        """Append an edge, plus its reverse entry when undirected.

        Args:
            source: Edge origin; must belong to this graph.
            target: Edge destination; must belong to this graph.
            weight: Finite edge weight. Zero means "unweighted".
            directed: False stores a matching target -> source entry.

        Returns:
            The source -> target entry.

        Raises:
            NodeNotInGraphError: If either endpoint is foreign to this graph.
            InvalidArgumentError: If the weight is not a finite number.
        """
        self.require_node(source)
        self.require_node(target)
        try:
            weight = float(weight)
        except (TypeError, ValueError) as e:
            raise InvalidArgumentError(
                f"Edge weight must be a number, got {weight!r}",
                cause=e,
            ) from e
        if not math.isfinite(weight):
            raise InvalidArgumentError(
                "Edge weight must be finite",
                details={"weight": weight},
            )

        edge = self._append_edge(source, target, weight, directed)
        if not directed:
            self._append_edge(target, source, weight, directed)
        return edge

    def _append_edge(self, source: Node[P], target: Node[P], weight: float, directed: bool) -> Edge:
        edge = Edge(
            index=len(self._edges),
            source=source,
            target=target,
            weight=weight,
            directed=directed,
        )
        self._edges.append(edge)
        return edge

    def require_node(self, node: Node[P]) -> Node[P]:
        """Return ``node`` if it belongs to this graph.

        Raises:
            NodeNotInGraphError: If the handle was issued by another graph
                or is not a node at all.
        """
        if node not in self:
            raise NodeNotInGraphError(
                f"Node {node!r} does not belong to this graph",
                details={"node": repr(node)},
            )
        return node

    def get_node(self, name: str) -> Node[P] | None:
        """First node with the given name, or None."""
        for node in self._nodes:
            if node.name == name:
                return node
        return None

    def __contains__(self, node: Any) -> bool:
        if not isinstance(node, Node):
            return False
        return node.index < len(self._nodes) and self._nodes[node.index] is node

    def __len__(self) -> int:
        return len(self._nodes)

    def __repr__(self) -> str:
        return f"Graph(nodes={len(self._nodes)}, edges={len(self._edges)})"
