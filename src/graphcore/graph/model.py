"""Node and edge records held by the graph store.

Both records compare and hash by identity: a node is its handle, not its
name or payload. Each record carries its position (``index``) in the
owning graph's arena so membership checks are a single list lookup.
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

P = TypeVar("P")


@dataclass(frozen=True, eq=False)
class Node(Generic[P]):
    """A vertex with an optional display name and an opaque payload."""

    index: int
    name: str | None = None
    payload: P | None = None

    @property
    def label(self) -> str:
        """Display name, falling back to the arena index."""
        return self.name if self.name is not None else f"#{self.index}"

    def __repr__(self) -> str:
        return f"Node({self.label})"


@dataclass(frozen=True, eq=False)
class Edge:
    """A weighted connection from ``source`` to ``target``.

    An undirected edge is stored twice, once per direction, both entries
    with ``directed=False``.
    """

    index: int
    source: Node
    target: Node
    weight: float = 0.0
    directed: bool = True

    def connects(self, source: Node, target: Node) -> bool:
        """Check whether this edge links ``source`` to ``target``.

        A directed edge matches only in its stored direction; an
        undirected edge matches either way round.
        """
        if self.source is source and self.target is target:
            return True
        if self.directed:
            return False
        return self.source is target and self.target is source

    def __repr__(self) -> str:
        arrow = "->" if self.directed else "--"
        return f"Edge({self.source.label} {arrow} {self.target.label}, weight={self.weight})"
