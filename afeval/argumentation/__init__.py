"""Argumentation engine — Dung's AAF semantics by enumeration."""
from .graph import Graph
from .models import InvalidArgumentsError, Instance, Semantics
from .engine import (
    ArgumentationEngine,
    all_instances,
    characteristic_sequence,
    complete_instances,
    grounded_instance,
    power_set,
    preferred_instances,
    stable_instances,
    valid_instances,
)

__all__ = [
    "ArgumentationEngine",
    "Graph",
    "Instance",
    "InvalidArgumentsError",
    "Semantics",
    "all_instances",
    "characteristic_sequence",
    "complete_instances",
    "grounded_instance",
    "power_set",
    "preferred_instances",
    "stable_instances",
    "valid_instances",
]
