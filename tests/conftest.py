"""Pytest configuration and fixtures for graphcore tests."""

import heapq
import logging
import math
import random
from collections.abc import Generator

import pytest
import structlog

from graphcore.common.config import get_settings
from graphcore.common.logging import configure_default_logging
from graphcore.graph import Graph, Node


@pytest.fixture(autouse=True)
def fresh_settings() -> Generator[None, None, None]:
    """Drop the cached settings so env overrides apply per test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture(autouse=True)
def default_logging() -> Generator[None, None, None]:
    """Undo any logging configuration a test installs."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
    structlog.reset_defaults()
    configure_default_logging()


# =============================================================================
# Sample Graph Fixtures
# =============================================================================


@pytest.fixture
def empty_graph() -> Graph:
    """Graph with no nodes and no edges."""
    return Graph()


@pytest.fixture
def detour_graph() -> tuple[Graph, dict[str, Node]]:
    """A->B (1), B->C (2), A->C (10), all directed."""
    graph = Graph()
    nodes = {name: graph.add_node(name) for name in "ABC"}
    graph.add_edge(nodes["A"], nodes["B"], 1.0, directed=True)
    graph.add_edge(nodes["B"], nodes["C"], 2.0, directed=True)
    graph.add_edge(nodes["A"], nodes["C"], 10.0, directed=True)
    return graph, nodes


@pytest.fixture
def triangle_graph() -> tuple[Graph, dict[str, Node]]:
    """Undirected triangle A-B, B-C, C-A."""
    graph = Graph()
    nodes = {name: graph.add_node(name) for name in "ABC"}
    graph.add_edge(nodes["A"], nodes["B"], 1.0, directed=False)
    graph.add_edge(nodes["B"], nodes["C"], 1.0, directed=False)
    graph.add_edge(nodes["C"], nodes["A"], 1.0, directed=False)
    return graph, nodes


@pytest.fixture
def dag_graph() -> tuple[Graph, dict[str, Node]]:
    """Build-order DAG.

    shirt -> tie -> jacket, trousers -> shoes, trousers -> belt -> jacket,
    shirt -> belt, socks -> shoes; watch stands alone.
    """
    graph = Graph()
    names = ["shirt", "tie", "jacket", "belt", "trousers", "shoes", "socks", "watch"]
    nodes = {name: graph.add_node(name) for name in names}
    for source, target in [
        ("shirt", "tie"),
        ("tie", "jacket"),
        ("trousers", "shoes"),
        ("trousers", "belt"),
        ("belt", "jacket"),
        ("shirt", "belt"),
        ("socks", "shoes"),
    ]:
        graph.add_edge(nodes[source], nodes[target], directed=True)
    return graph, nodes


def _random_graph(
    seed: int,
    node_count: int = 12,
    edge_count: int = 24,
    directed_ratio: float = 0.5,
    acyclic: bool = False,
) -> Graph:
    """Build a reproducible random graph with non-negative weights.

    With ``acyclic`` set, only directed edges from lower to higher node
    index are added.
    """
    rng = random.Random(seed)
    graph = Graph()
    nodes = [graph.add_node(f"n{i}") for i in range(node_count)]
    for _ in range(edge_count):
        a, b = rng.sample(range(node_count), 2)
        weight = float(rng.randint(0, 20))
        if acyclic:
            graph.add_edge(nodes[min(a, b)], nodes[max(a, b)], weight, directed=True)
        else:
            directed = rng.random() < directed_ratio
            graph.add_edge(nodes[a], nodes[b], weight, directed=directed)
    return graph


def _dijkstra_cost(graph: Graph, start: Node, goal: Node) -> float:
    """Reference shortest-path cost over edges usable outward from each node."""
    best: dict[Node, float] = {start: 0.0}
    heap: list[tuple[float, int, Node]] = [(0.0, start.index, start)]
    done: set[Node] = set()
    while heap:
        cost, _, node = heapq.heappop(heap)
        if node in done:
            continue
        if node is goal:
            return cost
        done.add(node)
        for edge in graph.edges:
            if edge.source is not node:
                continue
            candidate = cost + edge.weight
            if candidate < best.get(edge.target, math.inf):
                best[edge.target] = candidate
                heapq.heappush(heap, (candidate, edge.target.index, edge.target))
    return math.inf


@pytest.fixture
def random_graph():
    """Factory for reproducible random graphs."""
    return _random_graph


@pytest.fixture
def dijkstra_cost():
    """Independent shortest-path cost computation."""
    return _dijkstra_cost


# =============================================================================
# Markers
# =============================================================================

def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests")
    config.addinivalue_line("markers", "slow: Slow tests")
