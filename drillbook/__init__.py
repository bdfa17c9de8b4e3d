"""Classic small exercises on arrays, rotations, sorting, searching, strings, DP and patterns."""

__version__ = "0.1.0"

__all__ = [
    "arrays",
    "rotations",
    "linked_list",
    "dp",
    "graph",
    "searching",
    "sorting",
    "factorials",
    "strings",
    "patterns",
]