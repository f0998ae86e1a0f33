"""
Argumentation Framework Models — Dung's Abstract Argumentation

Implements the formal structures from:
- Dung (1995): On the acceptability of arguments

An Instance pairs an attack graph with a candidate set of arguments
and answers, for that one set, every membership question the standard
semantics ask: is it conflict-free, which arguments does it defend,
what is its image under the characteristic function F, and is it
admissible, complete or stable.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from functools import cached_property
from typing import Generic, Iterable

from .graph import Graph, X


class Semantics(str, Enum):
    """Argumentation semantics for extension computation."""
    ADMISSIBLE = "admissible"
    COMPLETE = "complete"
    GROUNDED = "grounded"
    PREFERRED = "preferred"
    STABLE = "stable"


class InvalidArgumentsError(ValueError):
    """Raised when a candidate set names arguments the graph does not have."""

    def __init__(self, unknown: Iterable):
        self.unknown = frozenset(unknown)
        names = ", ".join(sorted(map(str, self.unknown)))
        super().__init__(f"Arguments not in graph: {names}")


@dataclass(frozen=True)
class Instance(Generic[X]):
    """
    An attack graph paired with the arguments assumed to be accepted.

    Derived properties are computed on first access and cached on the
    instance. Equality and hashing only look at (graph, arguments).

    Note that is_complete is the bare fixpoint test F(S) = S; a set
    can be a fixpoint without being conflict-free (a <-> b with
    S = {a, b}). The enumeration functions only ever ask is_complete
    of valid sets.
    """
    graph: Graph[X]
    arguments: frozenset[X] = frozenset()

    def __post_init__(self):
        arguments = frozenset(self.arguments)
        object.__setattr__(self, "arguments", arguments)
        unknown = arguments - self.graph.nodes
        if unknown:
            raise InvalidArgumentsError(unknown)

    @classmethod
    def of(cls, graph: Graph[X], *arguments: X) -> Instance[X]:
        return cls(graph, frozenset(arguments))

    # ── Conflict ────────────────────────────────────────────────

    @cached_property
    def conflicted(self) -> frozenset[tuple[X, X]]:
        """All edges running between two members of the candidate set."""
        return frozenset(
            (a, b) for a, b in self.graph.edges
            if a in self.arguments and b in self.arguments
        )

    @property
    def is_conflict_free(self) -> bool:
        return not self.conflicted

    # ── Defense & Characteristic Function ───────────────────────

    @cached_property
    def defended(self) -> frozenset[X]:
        """
        All arguments defended by the candidate set.

        a is defended by S if every attacker b of a is itself
        attacked by some member of S. Unattacked arguments are
        defended by every set, the empty set included.
        """
        graph = self.graph
        return frozenset(
            a for a in graph.nodes
            if all(graph.attackers(b) & self.arguments
                   for b in graph.attackers(a))
        )

    @cached_property
    def characteristic(self) -> Instance[X]:
        """F(S): the instance whose arguments are exactly those S defends."""
        return Instance(self.graph, self.defended)

    # ── Semantics Predicates ────────────────────────────────────

    @cached_property
    def is_valid(self) -> bool:
        """Conflict-free and admissible: S defends all of its members."""
        return self.is_conflict_free and self.arguments <= self.defended

    @cached_property
    def is_complete(self) -> bool:
        return self.arguments == self.characteristic.arguments

    @cached_property
    def is_stable(self) -> bool:
        """Conflict-free and attacks every argument outside itself."""
        outside = self.graph.nodes - self.arguments
        return self.is_conflict_free and outside <= self.graph.direct(self.arguments)

    def __repr__(self):
        args = ", ".join(sorted(map(str, self.arguments)))
        return f"Instance({{{args}}})"
