"""Graph traversal: depth-first, breadth-first, connected components.

Traversals follow ``Graph.neighbors``, which ignores edge direction, so
components found here are weakly connected components.
"""

import time
from collections import deque
from collections.abc import Callable, Iterator

from graphcore.common.logging import get_logger
from graphcore.common.metrics import record_traversal
from graphcore.graph.model import Node
from graphcore.graph.store import Graph

logger = get_logger(__name__)

Visitor = Callable[[Node], None]


class GraphTraversal:
    """Performs traversals over an in-memory graph.

    Supports:
    - Depth-first traversal with a caller-owned visited set
    - Breadth-first traversal
    - Weakly connected component discovery
    """

    def __init__(self, graph: Graph) -> None:
        """Initialize traversal.

        Args:
            graph: Graph to traverse. It is read, never modified.
        """
        self._graph = graph

    def dfs(
        self,
        start: Node,
        visit: Visitor | None = None,
        visited: set[Node] | None = None,
    ) -> list[Node]:
        """Depth-first, pre-order walk from ``start``.

        ``start`` is always visited. Each neighbor not yet in ``visited``
        is then descended into, in ``neighbors()`` order. Passing the same
        ``visited`` set to several calls makes them cumulative.

        Uses an explicit stack of neighbor iterators, producing the same
        order as the recursive formulation without its depth limit.

        Args:
            start: Node to start from.
            visit: Called once per node, in visit order.
            visited: Shared visited set, updated in place.

        Returns:
            Nodes visited by this call, in visit order.
        """
        self._graph.require_node(start)
        if visited is None:
            visited = set()

        started = time.perf_counter()
        order = self._walk(start, visited, visit)
        record_traversal("dfs", time.perf_counter() - started, len(order))

        logger.debug("DFS complete", start=start.label, visited=len(order))
        return order

    def _walk(self, start: Node, visited: set[Node], visit: Visitor | None) -> list[Node]:
        order: list[Node] = []
        stack: list[Iterator[Node]] = []

        def enter(node: Node) -> None:
            visited.add(node)
            order.append(node)
            if visit is not None:
                visit(node)
            stack.append(iter(self._graph.neighbors(node)))

        enter(start)
        while stack:
            for neighbor in stack[-1]:
                if neighbor not in visited:
                    enter(neighbor)
                    break
            else:
                stack.pop()

        return order

    def bfs(self, start: Node, visit: Visitor | None = None) -> list[Node]:
        """Breadth-first walk from ``start`` with a fresh visited set.

        A node may be queued more than once before its first dequeue;
        later dequeues are skipped, so ``visit`` fires once per node.

        Args:
            start: Node to start from.
            visit: Called once per node, in visit order.

        Returns:
            Nodes in visit order.
        """
        self._graph.require_node(start)
        started = time.perf_counter()

        visited: set[Node] = set()
        order: list[Node] = []
        queue: deque[Node] = deque([start])

        while queue:
            node = queue.popleft()
            if node in visited:
                continue
            visited.add(node)
            order.append(node)
            if visit is not None:
                visit(node)

            for neighbor in self._graph.neighbors(node):
                if neighbor not in visited:
                    queue.append(neighbor)

        record_traversal("bfs", time.perf_counter() - started, len(order))
        logger.debug("BFS complete", start=start.label, visited=len(order))
        return order

    def connected_components(self) -> list[list[Node]]:
        """Weakly connected components.

        Seeds are taken in node insertion order; each component lists its
        nodes in DFS visit order from its seed.

        Returns:
            Components in the order their seeds were reached.
        """
        started = time.perf_counter()

        visited: set[Node] = set()
        components: list[list[Node]] = []
        for node in self._graph.nodes:
            if node not in visited:
                components.append(self._walk(node, visited, None))

        record_traversal("connected_components", time.perf_counter() - started, len(visited))
        logger.debug("Components found", components=len(components), nodes=len(visited))
        return components
