"""
Lecture frameworks — worked examples as data

Named attack graphs from the lecture slides and exercise sheet 10,
with the candidate sets the exercises ask about.
"""

from __future__ import annotations

from afeval.argumentation import Graph

# Slides 326 and 330: a simple chain, A1 reinstates A3.
CHAIN = Graph.of(
    ("A1", "A2"),
    ("A2", "A3"),
)

# Slides 334 and 338: two arguments attacking each other.
MUTUAL = Graph.of(
    ("A1", "A2"),
    ("A2", "A1"),
)

# Slides 327, 337 and 340.
TWO_CYCLES = (
    Graph.of(("A1", "A2"))
    + ("A2", "A1")
    + ("A2", "A3")
    + ("A3", "A4")
    + ("A4", "A5")
    + ("A5", "A4")
    + ("A5", "A3")
)

# Slide 337: the sets F is applied to by hand.
TWO_CYCLES_PROBES = [
    {"A1"},
    {"A2"},
    {"A5"},
    {"A1", "A5"},
    {"A2", "A5"},
    {"A2", "A4"},
]

# Slide 333: the murder case.
MURDER_CASE = (
    Graph.of(("autopsy", "pistol"))
    + ("pistol", "knife")
    + ("knife", "pistol")
    + ("pistol", "innocent")
    + ("knife", "innocent")
    + ("innocent", "guilty")
)

# Sheet 10, exercise 1.
EXERCISE_10_1 = Graph.of(
    ("A1", "A2"),
    ("A2", "A3"),
    ("A3", "A4"),
    ("A3", "A5"),
    ("A5", "A2"),
    ("A6", "A5"),
    ("A6", "A1"),
)

EXERCISE_10_1_CANDIDATES = {
    "a": {"A1", "A3", "A6"},
    "b": {"A2", "A4", "A6"},
    "c": {"A1", "A3", "A4", "A6"},
}

# Sheet 10, exercise 2.
EXERCISE_10_2 = Graph.of(
    ("A1", "A2"),
    ("A1", "A3"),
    ("A2", "A3"),
    ("A3", "A5"),
    ("A5", "A4"),
    ("A4", "A5"),
    ("A5", "A6"),
)

FRAMEWORKS: dict[str, Graph[str]] = {
    "chain": CHAIN,
    "mutual": MUTUAL,
    "two_cycles": TWO_CYCLES,
    "murder_case": MURDER_CASE,
    "exercise_10_1": EXERCISE_10_1,
    "exercise_10_2": EXERCISE_10_2,
}
