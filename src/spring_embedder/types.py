"""
Common types for the spring embedder.

This module provides the fundamental types shared across the package:
- Edge: Directed (source, target) vertex pair derived from adjacency data
- Adjacency: Per-vertex sequence of outbound targets
- Snapshot: Read-only mapping of vertex index to position
- EventType: Layout lifecycle events
- Event: Event payload for callbacks
"""

from __future__ import annotations

from enum import IntEnum
from typing import Mapping, NamedTuple, Optional, Sequence, TypedDict

from .vector import Vector


class Edge(NamedTuple):
    """Directed edge between two vertex indices."""

    source: int
    target: int


class EventType(IntEnum):
    """
    Layout lifecycle events.

    - start: The initial snapshot has been produced
    - tick: Fired once per relaxation step (for animation)
    - end: The final snapshot has been produced
    """

    start = 0
    tick = 1
    end = 2


class Event(TypedDict, total=False):
    """Event payload passed to event listeners."""

    type: EventType
    alpha: float
    stress: Optional[float]
    iteration: int


Adjacency = Sequence[Sequence[int]]
"""Row ``i`` lists the outbound targets of vertex ``i``."""

Snapshot = Mapping[int, Vector]
"""Position of every vertex at one iteration."""


__all__ = [
    "Edge",
    "EventType",
    "Event",
    "Adjacency",
    "Snapshot",
]
