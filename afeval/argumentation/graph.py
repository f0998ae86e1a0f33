"""
Attack Graph — the directed graph underneath an argumentation framework

A graph is nothing but its edge set. Nodes exist only by appearing in
some edge, so an isolated argument cannot be represented.

Every combinator returns a new graph; a Graph is never mutated after
construction and can be used as a dict key.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Hashable, Iterable, TypeVar

X = TypeVar("X", bound=Hashable)


@dataclass(frozen=True)
class Graph(Generic[X]):
    """
    A directed graph on nodes of type X.

    (a, b) in edges means argument 'a' attacks argument 'b'.
    """
    edges: frozenset[tuple[X, X]] = frozenset()

    def __post_init__(self):
        object.__setattr__(
            self, "edges", frozenset((a, b) for a, b in self.edges)
        )

    @classmethod
    def of(cls, *pairs: tuple[X, X]) -> Graph[X]:
        """Build a graph from a literal list of (attacker, target) pairs."""
        return cls(frozenset(pairs))

    # ── Structure ───────────────────────────────────────────────

    @property
    def nodes(self) -> frozenset[X]:
        return frozenset(n for edge in self.edges for n in edge)

    @property
    def reverse(self) -> Graph[X]:
        return Graph(frozenset((b, a) for a, b in self.edges))

    def direct(self, origin: Iterable[X]) -> frozenset[X]:
        """All nodes one outgoing edge away from any node in origin."""
        origin = set(origin)
        return frozenset(b for a, b in self.edges if a in origin)

    def attackers(self, node: X) -> frozenset[X]:
        """All nodes with an edge into node."""
        return frozenset(a for a, b in self.edges if b == node)

    def reachable(self, origin: Iterable[X]) -> frozenset[X]:
        """
        All nodes reachable from origin, origin included.

        Expands the frontier one step at a time until no new node
        is found. Terminates because the node universe is finite.
        """
        result = set(origin)
        while True:
            step = self.direct(result)
            if step <= result:
                return frozenset(result)
            result |= step

    # ── Combinators ─────────────────────────────────────────────

    def union(self, other: Graph[X]) -> Graph[X]:
        return Graph(self.edges | other.edges)

    def intersect(self, other: Graph[X]) -> Graph[X]:
        return Graph(self.edges & other.edges)

    def subtract(self, other: Graph[X]) -> Graph[X]:
        return Graph(self.edges - other.edges)

    def with_edge(self, edge: tuple[X, X]) -> Graph[X]:
        return Graph(self.edges | {tuple(edge)})

    def without_edge(self, edge: tuple[X, X]) -> Graph[X]:
        return Graph(self.edges - {tuple(edge)})

    def __or__(self, other: Graph[X]) -> Graph[X]:
        return self.union(other)

    def __and__(self, other: Graph[X]) -> Graph[X]:
        return self.intersect(other)

    def __add__(self, edge: tuple[X, X]) -> Graph[X]:
        return self.with_edge(edge)

    def __sub__(self, other):
        if isinstance(other, Graph):
            return self.subtract(other)
        return self.without_edge(other)

    def __len__(self) -> int:
        return len(self.edges)

    def __repr__(self):
        edges = ", ".join(f"{a}->{b}" for a, b in sorted(self.edges, key=repr))
        return f"Graph({edges})"
