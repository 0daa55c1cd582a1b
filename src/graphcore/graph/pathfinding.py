"""Weighted shortest-path search (A*).

The open set is a plain list scanned for its minimum f-score on every
iteration rather than a priority queue: O(open set) per step, which is
fine for the small-to-medium graphs this engine targets. With the default
zero heuristic the search is Dijkstra's algorithm.
"""

import math
import time
from collections.abc import Callable, Sequence

from graphcore.common.config import get_settings
from graphcore.common.exceptions import (
    InvalidArgumentError,
    NegativeWeightError,
    SearchBudgetExceededError,
)
from graphcore.common.logging import get_logger
from graphcore.common.metrics import record_traversal
from graphcore.graph.model import Node
from graphcore.graph.store import Graph

logger = get_logger(__name__)

# heuristic(node, goal) -> estimated remaining cost; must never overestimate
Heuristic = Callable[[Node, Node], float]


def zero_heuristic(node: Node, goal: Node) -> float:
    """Admissible everywhere; turns A* into Dijkstra."""
    return 0.0


def edge_heuristic(graph: Graph) -> Heuristic:
    """Estimate remaining cost as the cheapest direct edge to the goal.

    Only edges usable from ``node`` towards ``goal`` count, the same ones
    a_star relaxes. Zero at the goal itself and zero when no such edge
    exists. Admissible whenever no multi-hop route from a node is cheaper
    than its direct edge to the goal.

    Args:
        graph: Graph whose edges are consulted.

    Returns:
        Heuristic function bound to ``graph``.
    """

    def estimate(node: Node, goal: Node) -> float:
        if node is goal:
            return 0.0
        weights = [edge.weight for edge in graph.outgoing_edges(node) if edge.target is goal]
        return min(weights, default=0.0)

    return estimate


class PathFinder:
    """Finds least-cost paths between nodes of a weighted graph."""

    def __init__(self, graph: Graph, max_expansions: int | None = None) -> None:
        """Initialize path finder.

        Args:
            graph: Graph to search. It is read, never modified.
            max_expansions: Default expansion budget per search.
                None to use settings (unlimited when unset there too).
        """
        self._graph = graph
        self.max_expansions = (
            max_expansions if max_expansions is not None
            else get_settings().graph.astar_max_expansions
        )

    def a_star(
        self,
        start: Node,
        goal: Node,
        heuristic: Heuristic | None = None,
        max_expansions: int | None = None,
    ) -> list[Node] | None:
        """Find a least-cost path from ``start`` to ``goal``.

        Each step picks the open node with the lowest f-score (the first
        one on ties), finishes if it is the goal, and otherwise relaxes
        every edge leaving it: directed edges stored in that direction and
        undirected edges. A neighbor whose g-score improves is (re)added to
        the open set.

        Args:
            start: Path origin.
            goal: Path destination.
            heuristic: Admissible estimate of remaining cost. Defaults to zero.
            max_expansions: Node expansion budget. Defaults to the finder's.

        Returns:
            Nodes from start to goal inclusive, or None if goal is unreachable.

        Raises:
            NodeNotInGraphError: If start or goal is foreign to this graph.
            NegativeWeightError: If a negative-weight edge is relaxed.
            SearchBudgetExceededError: If the budget runs out before the
                search concludes.
        """
        self._graph.require_node(start)
        self._graph.require_node(goal)
        estimate = heuristic or zero_heuristic
        budget = max_expansions if max_expansions is not None else self.max_expansions
        started = time.perf_counter()

        open_set: list[Node] = [start]
        came_from: dict[Node, Node] = {}
        g_score: dict[Node, float] = {start: 0.0}
        f_score: dict[Node, float] = {start: estimate(start, goal)}
        expansions = 0

        while open_set:
            current = min(open_set, key=lambda node: f_score[node])

            if current is goal:
                path = self._reconstruct_path(came_from, current)
                record_traversal("a_star", time.perf_counter() - started, expansions + 1)
                logger.debug(
                    "Path found",
                    start=start.label,
                    goal=goal.label,
                    cost=g_score[current],
                    length=len(path),
                    expansions=expansions,
                )
                return path

            if budget is not None and expansions >= budget:
                raise SearchBudgetExceededError(
                    f"A* exceeded {budget} expansions",
                    details={"start": start.label, "goal": goal.label, "budget": budget},
                )

            open_set.remove(current)
            expansions += 1

            for edge in self._graph.outgoing_edges(current):
                if edge.weight < 0:
                    raise NegativeWeightError(
                        f"Edge {edge!r} has negative weight {edge.weight}",
                        details={"edge_index": edge.index, "weight": edge.weight},
                    )
                neighbor = edge.target
                tentative = g_score[current] + edge.weight
                if tentative < g_score.get(neighbor, math.inf):
                    came_from[neighbor] = current
                    g_score[neighbor] = tentative
                    f_score[neighbor] = tentative + estimate(neighbor, goal)
                    if neighbor not in open_set:
                        open_set.append(neighbor)

        record_traversal("a_star", time.perf_counter() - started, expansions)
        logger.debug("No path", start=start.label, goal=goal.label, expansions=expansions)
        return None

    @staticmethod
    def _reconstruct_path(came_from: dict[Node, Node], current: Node) -> list[Node]:
        path = [current]
        while current in came_from:
            current = came_from[current]
            path.append(current)
        path.reverse()
        return path

    def path_cost(self, path: Sequence[Node]) -> float:
        """Total weight along ``path``.

        Each hop costs its cheapest edge usable in that direction, the same
        edges a_star relaxes, so the cost of a returned path equals the
        g-score the search found for it.

        Args:
            path: Consecutive nodes; a single node or empty path costs 0.

        Raises:
            NodeNotInGraphError: If any node is foreign to this graph.
            InvalidArgumentError: If two consecutive nodes are not connected.
        """
        for node in path:
            self._graph.require_node(node)

        total = 0.0
        for source, target in zip(path, path[1:]):
            weights = [
                edge.weight
                for edge in self._graph.outgoing_edges(source)
                if edge.target is target
            ]
            if not weights:
                raise InvalidArgumentError(
                    f"No edge from {source!r} to {target!r}",
                    details={"source": source.label, "target": target.label},
                )
            total += min(weights)
        return total
