"""Adjacency queries derived from the edge list on demand.

Nothing is indexed: every query scans the current edges, so results are
always consistent with the latest add_edge at linear cost per call.
"""

from collections.abc import Callable, Sequence

from graphcore.graph.model import Edge, Node


class AdjacencyMixin:
    """Adjacency queries for a class exposing ``edges`` and ``require_node``."""

    edges: Sequence[Edge]
    require_node: Callable[[Node], Node]

    def outgoing_edges(self, node: Node) -> list[Edge]:
        """Edges whose source is ``node``, in insertion order."""
        self.require_node(node)
        return [edge for edge in self.edges if edge.source is node]

    def incoming_edges(self, node: Node) -> list[Edge]:
        """Edges whose target is ``node``, in insertion order."""
        self.require_node(node)
        return [edge for edge in self.edges if edge.target is node]

    def successors(self, node: Node) -> list[Node]:
        """Distinct targets of outgoing edges, first-seen order."""
        return list(dict.fromkeys(edge.target for edge in self.outgoing_edges(node)))

    def predecessors(self, node: Node) -> list[Node]:
        """Distinct sources of incoming edges, first-seen order."""
        return list(dict.fromkeys(edge.source for edge in self.incoming_edges(node)))

    def neighbors(self, node: Node) -> list[Node]:
        """Nodes one edge away from ``node`` in either direction.

        Outgoing targets come first, then incoming sources, each node
        once at its first sighting. The fixed order keeps every traversal
        built on it reproducible.
        """
        seen: dict[Node, None] = {}
        for edge in self.outgoing_edges(node):
            seen.setdefault(edge.target)
        for edge in self.incoming_edges(node):
            seen.setdefault(edge.source)
        return list(seen)

    def find_edge(self, source: Node, target: Node) -> Edge | None:
        """First edge in insertion order linking ``source`` to ``target``.

        Args:
            source: Start of the connection.
            target: End of the connection.

        Returns:
            The matching edge, or None if the pair is not connected.
        """
        self.require_node(source)
        self.require_node(target)
        for edge in self.edges:
            if edge.connects(source, target):
                return edge
        return None
