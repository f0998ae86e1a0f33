"""afeval — abstract argumentation framework semantics."""

__version__ = "0.1.0"
