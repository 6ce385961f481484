"""A small directed graph stored as adjacency lists."""

from __future__ import annotations


class Graph:
    """Directed graph whose vertices are consecutive integers from zero.

    Edges are kept per source vertex. The first edge added from a vertex
    stays at the head of its list; later edges are placed directly after
    the head, so the newest of them comes first.
    """

    def __init__(self) -> None:
        self._edges: list[list[int]] = []

    def __len__(self) -> int:
        return len(self._edges)

    def _check_vertex(self, vertex: int, role: str) -> None:
        if not 0 <= vertex < len(self._edges):
            raise IndexError(f"{role} vertex {vertex} does not exist")

    def add_vertex(self) -> int:
        """Add a vertex with no edges and return its index."""
        self._edges.append([])
        return len(self._edges) - 1

    def add_edge(self, source: int, target: int) -> None:
        """Add an edge from ``source`` to ``target``."""
        self._check_vertex(source, "source")
        self._check_vertex(target, "target")
        targets = self._edges[source]
        if targets:
            targets.insert(1, target)
        else:
            targets.append(target)

    def fanout(self, vertex: int) -> list[int]:
        """Return the vertices that ``vertex`` has an edge to."""
        self._check_vertex(vertex, "")
        return list(self._edges[vertex])

    def fanin(self, vertex: int) -> list[int]:
        """Return the other vertices that have an edge to ``vertex``."""
        return [
            source
            for source, targets in enumerate(self._edges)
            if source != vertex and vertex in targets
        ]