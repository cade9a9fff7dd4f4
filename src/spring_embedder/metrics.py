"""
Snapshot metrics.

Quantitative measures over position snapshots:
- Array conversion for numeric post-processing
- Bounding box of a layout
- Edge lengths and their variance
- Total displacement between two consecutive snapshots

All metrics work with any snapshot produced by the layout engine.
"""

from __future__ import annotations

from typing import Sequence

import numpy as np

from .types import Edge, Snapshot


def snapshot_to_array(snapshot: Snapshot) -> np.ndarray:
    """
    Convert a snapshot to an ``(N, 2)`` array ordered by vertex index.

    Args:
        snapshot: Mapping of vertex index to position

    Returns:
        Array of x, y coordinates
    """
    if not snapshot:
        return np.zeros((0, 2), dtype=np.float64)
    return np.array([[snapshot[i].x, snapshot[i].y] for i in sorted(snapshot)], dtype=np.float64)


def bounding_box(snapshot: Snapshot) -> tuple[float, float, float, float]:
    """
    Get the axis aligned bounding box of a snapshot.

    Returns:
        (min_x, min_y, max_x, max_y), all zero for an empty snapshot
    """
    points = snapshot_to_array(snapshot)
    if len(points) == 0:
        return (0.0, 0.0, 0.0, 0.0)
    min_x, min_y = points.min(axis=0)
    max_x, max_y = points.max(axis=0)
    return (float(min_x), float(min_y), float(max_x), float(max_y))


def edge_lengths(snapshot: Snapshot, edges: Sequence[Edge]) -> np.ndarray:
    """Euclidean length of every edge, in edge order."""
    if not edges:
        return np.zeros(0, dtype=np.float64)
    sources = np.array([[snapshot[e.source].x, snapshot[e.source].y] for e in edges])
    targets = np.array([[snapshot[e.target].x, snapshot[e.target].y] for e in edges])
    delta = targets - sources
    return np.hypot(delta[:, 0], delta[:, 1])


def edge_length_variance(snapshot: Snapshot, edges: Sequence[Edge]) -> float:
    """
    Variance of edge lengths.

    Lower values indicate more uniform edge lengths. Returns 0.0 when there
    are fewer than two edges.
    """
    lengths = edge_lengths(snapshot, edges)
    if len(lengths) < 2:
        return 0.0
    return float(np.var(lengths))


def total_displacement(before: Snapshot, after: Snapshot) -> float:
    """
    Sum of distances moved by every vertex between two snapshots.

    Raises:
        ValueError: If the snapshots cover different vertex sets.
    """
    if set(before) != set(after):
        raise ValueError("snapshots must cover the same vertices")
    delta = snapshot_to_array(after) - snapshot_to_array(before)
    if len(delta) == 0:
        return 0.0
    return float(np.hypot(delta[:, 0], delta[:, 1]).sum())


__all__ = [
    "snapshot_to_array",
    "bounding_box",
    "edge_lengths",
    "edge_length_variance",
    "total_displacement",
]
