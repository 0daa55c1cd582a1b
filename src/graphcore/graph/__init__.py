"""Graph engine - store, adjacency queries, traversal, analysis, A*.

All structures live in memory. Queries recompute adjacency from the
current edge list on every call, so no index has to be kept in sync.
"""

from graphcore.graph.analysis import EdgeKind, StructureAnalyzer
from graphcore.graph.model import Edge, Node
from graphcore.graph.pathfinding import Heuristic, PathFinder, edge_heuristic, zero_heuristic
from graphcore.graph.store import Graph
from graphcore.graph.traversal import GraphTraversal

__all__ = [
    # Store
    "Edge",
    "Graph",
    "Node",
    # Traversal
    "GraphTraversal",
    # Analysis
    "EdgeKind",
    "StructureAnalyzer",
    # Pathfinding
    "Heuristic",
    "PathFinder",
    "edge_heuristic",
    "zero_heuristic",
]
