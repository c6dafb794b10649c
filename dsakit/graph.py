"""Adjacency-list graph."""

from __future__ import annotations

from typing import Any


class Graph:
    """A graph stored as a mapping from node to its neighbours in insertion order."""

    def __init__(self) -> None:
        self.adj: dict[Any, list[Any]] = {}

    def add_edge(self, u: Any, v: Any, directed: bool = False) -> None:
        """Add an edge from ``u`` to ``v``, and back again unless ``directed``."""
        self.adj.setdefault(u, []).append(v)
        if not directed:
            self.adj.setdefault(v, []).append(u)

    def format(self) -> str:
        """Return one line per node: ``node->n1,n2,``."""
        return "\n".join(
            f"{node}->" + "".join(f"{neighbour}," for neighbour in neighbours)
            for node, neighbours in self.adj.items()
        )

    def __str__(self) -> str:
        return self.format()