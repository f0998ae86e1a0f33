"""
models — Report and Input Schemas

Pydantic models that carry argumentation results out of the engine in
JSON-ready form, and validate graph literals coming in from callers.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field, field_validator, model_validator


# ── Input Models ─────────────────────────────────────────────────

class FrameworkSpec(BaseModel):
    """
    A graph literal plus the candidate sets to evaluate against it.

        {"edges": [["A1", "A2"], ["A2", "A1"]], "candidates": [["A1"]]}
    """
    edges: list[tuple[str, str]] = Field(default_factory=list)
    candidates: list[list[str]] = Field(default_factory=list)
    name: Optional[str] = None

    @field_validator("edges")
    @classmethod
    def dedupe_edges(cls, v: list[tuple[str, str]]) -> list[tuple[str, str]]:
        return list(dict.fromkeys(v))

    @model_validator(mode="after")
    def check_candidates(self) -> FrameworkSpec:
        nodes = {n for edge in self.edges for n in edge}
        for candidate in self.candidates:
            unknown = set(candidate) - nodes
            if unknown:
                raise ValueError(
                    f"Candidate names arguments not in graph: {sorted(unknown)}"
                )
        return self

    def to_graph(self):
        from afeval.argumentation import Graph
        return Graph.of(*self.edges)

    def to_instances(self) -> list:
        from afeval.argumentation import Instance
        graph = self.to_graph()
        return [Instance(graph, frozenset(c)) for c in self.candidates]


# ── Report Models ────────────────────────────────────────────────

class InstanceReport(BaseModel):
    """Where one candidate set stands under every semantics of its graph."""
    arguments: list[str]
    conflicted: list[tuple[str, str]]
    defended: list[str]
    valid: bool
    complete: list[list[str]]
    in_complete: bool
    grounded: list[str]
    in_grounded: bool
    preferred: list[list[str]]
    in_preferred: bool
    stable: list[list[str]]
    in_stable: bool

    def render(self) -> str:
        """Plain-text summary, one property per line."""
        def fmt(args: list[str]) -> str:
            return "{" + ", ".join(args) + "}"

        def fmt_all(sets: list[list[str]]) -> str:
            return "[" + ", ".join(fmt(s) for s in sets) + "]"

        conflicted = ", ".join(f"{a}->{b}" for a, b in self.conflicted)
        return "\n".join([
            fmt(self.arguments),
            f"  - conflicted:   [{conflicted}]",
            f"  - defended:     {fmt(self.defended)}",
            f"  - valid:        {self.valid}",
            f"  - complete:     {fmt_all(self.complete)}",
            f"  - in complete:  {self.in_complete}",
            f"  - grounded:     {fmt(self.grounded)}",
            f"  - in grounded:  {self.in_grounded}",
            f"  - preferred:    {fmt_all(self.preferred)}",
            f"  - in preferred: {self.in_preferred}",
            f"  - stable:       {fmt_all(self.stable)}",
            f"  - in stable:    {self.in_stable}",
        ])


class FrameworkReport(BaseModel):
    """Every extension of a graph, keyed by semantics name."""
    arguments: list[str]
    attacks: list[tuple[str, str]]
    extensions: dict[str, list[list[str]]]
    computation_ms: float = 0.0

    @property
    def stats(self) -> dict:
        return {
            "num_arguments": len(self.arguments),
            "num_attacks": len(self.attacks),
        }
