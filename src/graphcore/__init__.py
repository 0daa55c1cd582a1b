"""graphcore - In-memory graph engine.

Builds graphs of identity-bearing nodes and weighted, optionally directed
edges, and answers traversal, structural and shortest-path queries on them.
"""

__version__ = "0.1.0"
