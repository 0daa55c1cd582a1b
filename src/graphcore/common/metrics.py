"""Prometheus metrics for graphcore.

Provides pre-defined metrics for monitoring graph traversal,
analysis and pathfinding operations.
"""

from prometheus_client import Histogram

# Graph traversal metrics
GRAPH_TRAVERSAL_DURATION = Histogram(
    "graphcore_graph_traversal_duration_seconds",
    "Graph algorithm duration",
    ["operation"],
    buckets=[0.0001, 0.0005, 0.001, 0.005, 0.01, 0.05, 0.1, 0.5, 1.0, 5.0],
)

GRAPH_TRAVERSAL_NODES = Histogram(
    "graphcore_graph_traversal_nodes",
    "Number of nodes visited in graph traversal",
    ["operation"],
    buckets=[1, 5, 10, 25, 50, 100, 250, 500, 1000, 10000],
)


def record_traversal(operation: str, duration: float, nodes_visited: int) -> None:
    """Record duration and visited-node count for one graph operation.

    Args:
        operation: Operation label (e.g. "dfs", "a_star").
        duration: Wall time in seconds.
        nodes_visited: Number of nodes the operation touched.
    """
    GRAPH_TRAVERSAL_DURATION.labels(operation=operation).observe(duration)
    GRAPH_TRAVERSAL_NODES.labels(operation=operation).observe(nodes_visited)
