"""
Argumentation Engine — Dung's Extension Computation

Implements the core algorithms from Dung (1995) for computing:
- Admissible sets (conflict-free, self-defending)
- Complete extensions (admissible fixpoints of F)
- Grounded extension (unique, least fixpoint of F)
- Preferred extensions (maximal admissible)
- Stable extensions (conflict-free, attack every outsider)

Computational complexity:
- Grounded: polynomial, iterates F at most |Args| times
- Everything else: O(2^|Args|) by power-set enumeration

Enumeration is brute force and meant for teaching-sized frameworks
(a handful of arguments). It is not designed to scale; the engine
logs a warning above the configured node count.
"""

from __future__ import annotations

import logging
import time
from typing import Iterator

from afeval import config
from afeval.models import FrameworkReport, InstanceReport

from .graph import Graph, X
from .models import Instance, Semantics

logger = logging.getLogger("afeval.argumentation")


# ── Power Set ───────────────────────────────────────────────────

def power_set(nodes) -> list[frozenset]:
    """
    All subsets of nodes.

    Each index in 0..2^n-1 selects a subset: bit p of the index set
    means the p-th node is a member. Nodes are ordered by repr so the
    output order is the same on every run.
    """
    index = sorted(nodes, key=repr)
    return [
        frozenset(node for p, node in enumerate(index) if mask >> p & 1)
        for mask in range(1 << len(index))
    ]


# ── Extension Enumeration ───────────────────────────────────────

def all_instances(graph: Graph[X]) -> list[Instance[X]]:
    """Every subset of the graph's arguments, paired with the graph."""
    return [Instance(graph, subset) for subset in power_set(graph.nodes)]


def valid_instances(graph: Graph[X]) -> list[Instance[X]]:
    """Conflict-free and admissible sets."""
    return [i for i in all_instances(graph) if i.is_valid]


def complete_instances(graph: Graph[X]) -> list[Instance[X]]:
    return [i for i in valid_instances(graph) if i.is_complete]


def stable_instances(graph: Graph[X]) -> list[Instance[X]]:
    return [i for i in valid_instances(graph) if i.is_stable]


def preferred_instances(graph: Graph[X]) -> list[Instance[X]]:
    """Valid sets with no valid strict superset."""
    valid = valid_instances(graph)
    return [
        e for e in valid
        if not any(e.arguments < other.arguments for other in valid)
    ]


# ── Grounded Extension ──────────────────────────────────────────

def grounded_instance(graph: Graph[X]) -> Instance[X]:
    """
    Compute the grounded extension via inflationary fixpoint.

    Algorithm:
        S₀ = ∅
        Sₙ₊₁ = Sₙ ∪ F(Sₙ)
        Stop when F(Sₙ) ⊆ Sₙ

    The sequence never shrinks and the argument set is finite, so
    the loop ends after at most |Args| rounds.
    """
    current = Instance(graph)
    while not current.characteristic.arguments <= current.arguments:
        current = Instance(
            graph, current.arguments | current.characteristic.arguments
        )
    return current


def characteristic_sequence(start: Instance[X]) -> Iterator[Instance[X]]:
    """
    Yield start, F(start), F(F(start)), ... up to the first repeat.

    Starting from the empty set this walks the grounded construction
    step by step; from other sets F may oscillate, in which case the
    cycle is yielded once.
    """
    seen: set[Instance[X]] = set()
    current = start
    while current not in seen:
        seen.add(current)
        yield current
        current = current.characteristic


class ArgumentationEngine:
    """
    Computes and memoizes extensions for argumentation frameworks.

    Follows Dung's characteristic function F:
        F(S) = { a ∈ Args | S defends a }

    Results are cached per (graph, semantics); graphs are immutable
    values, so a cached answer never goes stale.
    """

    _ENUMERATORS = {
        Semantics.ADMISSIBLE: valid_instances,
        Semantics.COMPLETE: complete_instances,
        Semantics.PREFERRED: preferred_instances,
        Semantics.STABLE: stable_instances,
    }

    def __init__(self, max_nodes: int | None = None):
        self.max_nodes = (
            config.MAX_ENUMERATION_NODES if max_nodes is None else max_nodes
        )
        self._cache: dict[tuple[Graph, Semantics], tuple[Instance, ...]] = {}

    # ── Extensions ──────────────────────────────────────────────

    def extensions(self, graph: Graph[X],
                   semantics: Semantics) -> list[Instance[X]]:
        """All extensions of graph under the given semantics."""
        semantics = Semantics(semantics)
        key = (graph, semantics)
        if key not in self._cache:
            if semantics == Semantics.GROUNDED:
                result = (grounded_instance(graph),)
            else:
                self._check_size(graph)
                result = tuple(self._ENUMERATORS[semantics](graph))
            logger.debug(
                f"{semantics.value}: {len(result)} extension(s) "
                f"over {len(graph.nodes)} args"
            )
            self._cache[key] = result
        return list(self._cache[key])

    def grounded(self, graph: Graph[X]) -> Instance[X]:
        return self.extensions(graph, Semantics.GROUNDED)[0]

    def clear_cache(self) -> None:
        self._cache.clear()

    def _check_size(self, graph: Graph) -> None:
        n = len(graph.nodes)
        if n > self.max_nodes:
            logger.warning(
                f"Large framework ({n} args), enumerating 2^{n} subsets"
            )

    # ── Reports ─────────────────────────────────────────────────

    def evaluate(self, instance: Instance[X]) -> InstanceReport:
        """
        Summarize one candidate set against every semantics of its graph.
        """
        graph = instance.graph
        complete = self.extensions(graph, Semantics.COMPLETE)
        grounded = self.grounded(graph)
        preferred = self.extensions(graph, Semantics.PREFERRED)
        stable = self.extensions(graph, Semantics.STABLE)

        return InstanceReport(
            arguments=_labels(instance.arguments),
            conflicted=sorted((str(a), str(b)) for a, b in instance.conflicted),
            defended=_labels(instance.defended),
            valid=instance.is_valid,
            complete=[_labels(e.arguments) for e in complete],
            in_complete=instance in complete,
            grounded=_labels(grounded.arguments),
            in_grounded=instance == grounded,
            preferred=[_labels(e.arguments) for e in preferred],
            in_preferred=instance in preferred,
            stable=[_labels(e.arguments) for e in stable],
            in_stable=instance in stable,
        )

    def analyze(self, graph: Graph[X]) -> FrameworkReport:
        """Compute every semantics for graph."""
        start = time.perf_counter()

        extensions = {
            semantics.value: [
                _labels(e.arguments) for e in self.extensions(graph, semantics)
            ]
            for semantics in Semantics
        }

        elapsed = (time.perf_counter() - start) * 1000
        logger.info(
            f"Analyzed framework: {len(graph.nodes)} args, "
            f"{len(graph.edges)} attacks in {elapsed:.3f}ms"
        )

        return FrameworkReport(
            arguments=_labels(graph.nodes),
            attacks=sorted((str(a), str(b)) for a, b in graph.edges),
            extensions=extensions,
            computation_ms=round(elapsed, 3),
        )


def _labels(arguments) -> list[str]:
    return sorted(str(a) for a in arguments)
