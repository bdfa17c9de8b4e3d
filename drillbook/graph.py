"""A directed graph stored as adjacency lists with vertices numbered from one."""

from __future__ import annotations


class Graph:
    """Directed graph on vertices 1..vertices."""

    def __init__(self, vertices: int) -> None:
        if vertices < 0:
            raise ValueError(f"vertex count must not be negative, got {vertices}")
        self._adjacency: list[list[int]] = [[] for _ in range(vertices)]

    @property
    def vertices(self) -> int:
        return len(self._adjacency)

    def _edges_of(self, vertex: int) -> list[int]:
        if not 1 <= vertex <= len(self._adjacency):
            raise ValueError(f"vertex {vertex} is outside 1..{len(self._adjacency)}")
        return self._adjacency[vertex - 1]

    def add_edge(self, x: int, y: int) -> None:
        """Add a directed edge from x to y."""
        self._edges_of(y)
        self._edges_of(x).append(y)

    def neighbours(self, vertex: int) -> list[int]:
        """Vertices reached from vertex, in the order the edges were added."""
        return list(self._edges_of(vertex))

    def render(self) -> str:
        """Text listing of every vertex followed by its neighbours."""
        lines = []
        for label, edges in enumerate(self._adjacency, 1):
            lines.append(f"List value {label} is :- ")
            lines.append("".join(f"{target} " for target in edges))
        return "".join(f"{line}\n" for line in lines)