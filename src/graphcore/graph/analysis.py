"""Structural analysis: cycles, DAG check, topological order, edge kinds.

Unlike traversal, these analyses respect edge direction and walk
``Graph.successors``. An undirected edge is stored in both directions,
so it shows up here as a two-node cycle.

Every depth-first search below keeps an explicit stack of
(node, successor iterator) frames instead of recursing, so arbitrarily
deep graphs are handled with the same visit and finish order a recursive
search would produce.
"""

import time
from collections.abc import Iterator
from enum import Enum

from graphcore.common.config import get_settings
from graphcore.common.logging import get_logger
from graphcore.common.metrics import record_traversal
from graphcore.graph.model import Edge, Node
from graphcore.graph.store import Graph

logger = get_logger(__name__)


class EdgeKind(str, Enum):
    """Classification of an edge relative to a DFS forest."""

    TREE = "tree"
    BACK = "back"
    FORWARD = "forward"
    CROSS = "cross"

    @property
    def label(self) -> str:
        """Human-readable name, e.g. "Back Edge"."""
        return f"{self.value.capitalize()} Edge"


class StructureAnalyzer:
    """Answers structural questions about a directed graph.

    Provides:
    - Single-source cycle enumeration (and an all-sources wrapper)
    - DAG check
    - Topological sort
    - Tree/back/forward/cross edge classification
    """

    def __init__(self, graph: Graph, cycle_limit: int | None = None) -> None:
        """Initialize analyzer.

        Args:
            graph: Graph to analyze. It is read, never modified.
            cycle_limit: Default cap on cycles per detect_cycles call.
                None to use settings.
        """
        self._graph = graph
        self.cycle_limit = cycle_limit if cycle_limit is not None else get_settings().graph.cycle_limit

    def detect_cycles(self, start: Node, max_cycles: int | None = None) -> list[list[Node]]:
        """Enumerate cycles reachable from ``start``.

        Explores every simple path out of ``start``: a node counts as
        visited only while it is on the current path, so overlapping paths
        are all explored. Whenever a successor is already on the path, the
        cycle ``path + [successor]`` is recorded. The leading part of the
        path before the repeated node is kept.

        Cycles that cannot be reached from ``start`` are not reported; see
        find_cycles for whole-graph coverage. The enumeration is
        exponential on dense graphs, hence the optional cap.

        Args:
            start: Node to search from.
            max_cycles: Stop after this many cycles. Defaults to cycle_limit.

        Returns:
            Cycles in discovery order, each ending with its repeated node.
        """
        self._graph.require_node(start)
        limit = max_cycles if max_cycles is not None else self.cycle_limit
        started = time.perf_counter()

        cycles: list[list[Node]] = []
        path: list[Node] = []
        on_path: set[Node] = set()
        stack: list[Iterator[Node]] = []
        expanded = 0

        def enter(node: Node) -> None:
            path.append(node)
            on_path.add(node)
            stack.append(iter(self._graph.successors(node)))

        enter(start)
        while stack:
            if limit is not None and len(cycles) >= limit:
                break
            for successor in stack[-1]:
                if successor in on_path:
                    cycles.append([*path, successor])
                    if limit is not None and len(cycles) >= limit:
                        break
                else:
                    expanded += 1
                    enter(successor)
                    break
            else:
                stack.pop()
                on_path.discard(path.pop())

        record_traversal("detect_cycles", time.perf_counter() - started, expanded + 1)
        logger.debug("Cycle detection complete", start=start.label, cycles=len(cycles))
        return cycles

    def find_cycles(self) -> list[list[Node]]:
        """Run detect_cycles from every node, in node order.

        The same cycle is reported once per start node that reaches it.
        """
        cycles: list[list[Node]] = []
        for node in self._graph.nodes:
            cycles.extend(self.detect_cycles(node))
        return cycles

    def is_dag(self) -> bool:
        """Check that no directed cycle exists anywhere in the graph.

        Searches from every unvisited node; returns False as soon as a
        successor is found on the active search stack (a back edge).
        An empty graph is a DAG.
        """
        started = time.perf_counter()
        visited: set[Node] = set()
        on_stack: set[Node] = set()
        stack: list[tuple[Node, Iterator[Node]]] = []

        def enter(node: Node) -> None:
            visited.add(node)
            on_stack.add(node)
            stack.append((node, iter(self._graph.successors(node))))

        acyclic = True
        for seed in self._graph.nodes:
            if seed in visited:
                continue
            enter(seed)
            while stack and acyclic:
                node, pending = stack[-1]
                for successor in pending:
                    if successor in on_stack:
                        acyclic = False
                        break
                    if successor not in visited:
                        enter(successor)
                        break
                else:
                    stack.pop()
                    on_stack.discard(node)
            if not acyclic:
                break

        record_traversal("is_dag", time.perf_counter() - started, len(visited))
        logger.debug("DAG check complete", is_dag=acyclic, visited=len(visited))
        return acyclic

    def topological_sort(self) -> list[Node]:
        """Order nodes so every directed edge points forward.

        Reverse DFS post-order over all seeds in node order. The result is
        only a valid topological order when is_dag() is True; on a cyclic
        graph every node is still returned, in no guaranteed order.
        """
        started = time.perf_counter()
        visited: set[Node] = set()
        finished: list[Node] = []
        stack: list[tuple[Node, Iterator[Node]]] = []

        def enter(node: Node) -> None:
            visited.add(node)
            stack.append((node, iter(self._graph.successors(node))))

        for seed in self._graph.nodes:
            if seed in visited:
                continue
            enter(seed)
            while stack:
                node, pending = stack[-1]
                for successor in pending:
                    if successor not in visited:
                        enter(successor)
                        break
                else:
                    stack.pop()
                    finished.append(node)

        finished.reverse()
        record_traversal("topological_sort", time.perf_counter() - started, len(finished))
        return finished

    def classify_edges(self) -> dict[Edge, EdgeKind]:
        """Classify every edge entry against a DFS forest.

        One search over all seeds in node order; a shared clock stamps each
        node on discovery and again on finish. For an edge out of the
        current node to ``target``:

        - TREE: target undiscovered (the search descends into it)
        - FORWARD: target discovered after the current node
        - BACK: target discovered earlier and not yet finished
        - CROSS: anything else

        Returns:
            Mapping from each edge entry to its kind, in classification order.
        """
        started = time.perf_counter()
        discovered: dict[Node, int] = {}
        finished: dict[Node, int] = {}
        kinds: dict[Edge, EdgeKind] = {}
        stack: list[tuple[Node, Iterator[Edge]]] = []
        clock = 0

        def enter(node: Node) -> None:
            nonlocal clock
            discovered[node] = clock
            clock += 1
            stack.append((node, iter(self._graph.outgoing_edges(node))))

        for seed in self._graph.nodes:
            if seed in discovered:
                continue
            enter(seed)
            while stack:
                node, pending = stack[-1]
                for edge in pending:
                    target = edge.target
                    if target not in discovered:
                        kinds[edge] = EdgeKind.TREE
                        enter(target)
                        break
                    if discovered[target] > discovered[node]:
                        kinds[edge] = EdgeKind.FORWARD
                    elif target not in finished:
                        kinds[edge] = EdgeKind.BACK
                    else:
                        kinds[edge] = EdgeKind.CROSS
                else:
                    stack.pop()
                    finished[node] = clock
                    clock += 1

        record_traversal("classify_edges", time.perf_counter() - started, len(discovered))
        logger.debug("Edges classified", edges=len(kinds), nodes=len(discovered))
        return kinds

    def is_weighted(self) -> bool:
        """True if any edge has a non-zero weight.

        Zero doubles as "no weight given", so a graph whose only weights
        are genuine zeros reads as unweighted.
        """
        return any(edge.weight != 0 for edge in self._graph.edges)
