"""
Graph model over adjacency data.

A directed graph is given as one row of outbound targets per vertex. The
module-level functions work on raw adjacency rows; ``Graph`` validates the rows
once and caches the derived vertex, edge and neighbor sequences for the
lifetime of a layout run.

Neighbors are the outbound targets followed by the inbound sources, so spring
forces treat the graph as undirected. Every edge occurrence counts: a parallel
edge contributes one neighbor entry per occurrence, in both directions.
"""

from __future__ import annotations

from typing import Iterable, Sequence

from .types import Adjacency, Edge
from .validation import MalformedGraphError, validate_adjacency


def vertices(adjacency: Adjacency) -> list[int]:
    """Vertex indices ``0..N-1``."""
    return list(range(len(adjacency)))


def edges(adjacency: Adjacency) -> list[Edge]:
    """
    Flatten adjacency rows into directed edges.

    Order is row-major, then per-row target order.
    """
    return [Edge(source, target) for source, row in enumerate(adjacency) for target in row]


def neighbors(adjacency: Adjacency, vertex: int) -> list[int]:
    """
    Outbound targets of ``vertex`` followed by its inbound sources.

    Args:
        adjacency: Adjacency rows
        vertex: Vertex index

    Returns:
        Neighbor indices, one entry per edge occurrence

    Raises:
        IndexError: If ``vertex`` is not in ``[0, N)``
    """
    if vertex < 0 or vertex >= len(adjacency):
        raise IndexError(f"vertex {vertex} out of bounds [0, {len(adjacency)})")

    outbound = list(adjacency[vertex])
    inbound = [
        source
        for source, row in enumerate(adjacency)
        for target in row
        if target == vertex
    ]
    return outbound + inbound


class Graph:
    """
    Read-only directed graph built from adjacency rows.

    Example:
        graph = Graph([[1], [2], []])
        graph.edges        # (Edge(source=0, target=1), Edge(source=1, target=2))
        graph.neighbors(1) # (2, 0)
    """

    def __init__(self, adjacency: Adjacency, *, validate: bool = True) -> None:
        """
        Initialize graph from adjacency rows.

        Args:
            adjacency: Row ``i`` lists the outbound targets of vertex ``i``
            validate: Check target indices up front (default True)

        Raises:
            MalformedGraphError: If validate=True and a target is out of range.
        """
        if validate:
            validate_adjacency(adjacency, strict=True)

        self._adjacency: tuple[tuple[int, ...], ...] = tuple(
            tuple(int(target) for target in row) for row in adjacency
        )
        self._vertices: tuple[int, ...] = tuple(range(len(self._adjacency)))
        self._edges: tuple[Edge, ...] = tuple(edges(self._adjacency))

        inbound: list[list[int]] = [[] for _ in self._vertices]
        for edge in self._edges:
            inbound[edge.target].append(edge.source)
        self._neighbors: tuple[tuple[int, ...], ...] = tuple(
            self._adjacency[v] + tuple(inbound[v]) for v in self._vertices
        )

    @classmethod
    def from_edges(cls, vertex_count: int, pairs: Iterable[Sequence[int]]) -> "Graph":
        """
        Build a graph from ``(source, target)`` pairs.

        Args:
            vertex_count: Number of vertices N
            pairs: Directed edges as index pairs

        Returns:
            A new Graph whose rows keep the pair order per source.

        Raises:
            MalformedGraphError: If any source or target is out of range.
        """
        rows: list[list[int]] = [[] for _ in range(vertex_count)]
        for source, target in pairs:
            if source < 0 or source >= vertex_count:
                raise MalformedGraphError(
                    f"edge source {source} out of bounds [0, {vertex_count})"
                )
            rows[source].append(target)
        return cls(rows)

    # -------------------------------------------------------------------------
    # Properties
    # -------------------------------------------------------------------------

    @property
    def adjacency(self) -> tuple[tuple[int, ...], ...]:
        """Get the normalized adjacency rows."""
        return self._adjacency

    @property
    def vertices(self) -> tuple[int, ...]:
        """Get vertex indices ``0..N-1``."""
        return self._vertices

    @property
    def edges(self) -> tuple[Edge, ...]:
        """Get directed edges in row-major order."""
        return self._edges

    def neighbors(self, vertex: int) -> tuple[int, ...]:
        """Get outbound then inbound neighbors of ``vertex``."""
        if vertex < 0 or vertex >= len(self._vertices):
            raise IndexError(f"vertex {vertex} out of bounds [0, {len(self._vertices)})")
        return self._neighbors[vertex]

    def __len__(self) -> int:
        return len(self._vertices)

    def __repr__(self) -> str:
        return f"Graph(vertices={len(self._vertices)}, edges={len(self._edges)})"


__all__ = [
    "Graph",
    "vertices",
    "edges",
    "neighbors",
]
