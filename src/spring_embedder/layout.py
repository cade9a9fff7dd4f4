"""
Spring-embedder layout engine.

The engine places every vertex at a random position and then relaxes the
layout for a fixed number of steps. In each step a vertex is pulled or pushed
by logarithmic springs toward its neighbors and pushed away from every other
vertex; the damped sum of those forces is added to its position.

Every step reads one frozen snapshot and writes a brand-new one, so earlier
snapshots stay valid while a consumer animates them. ``run()`` produces the
snapshots lazily:

    embedder = SpringEmbedder([[1], [2], []], iterations=200, random_seed=7)
    for snapshot in embedder.run():
        draw(snapshot)
"""

from __future__ import annotations

import math
import random
import warnings
from types import MappingProxyType
from typing import Callable, Iterator, Optional, Union

from typing_extensions import Self

from . import vector as V
from .forces import repulsion_force, spring_force
from .graph import Graph
from .metrics import total_displacement
from .types import Adjacency, Event, EventType, Snapshot
from .validation import (
    DegenerateGeometryWarning,
    validate_iterations,
    validate_optimum_distance,
)
from .vector import Vector

DAMPING = 0.4

# Fraction of the optimum distance used to pull apart coincident vertices.
COINCIDENCE_OFFSET = 1e-3


class SpringEmbedder:
    """
    Force-directed layout of a directed graph.

    Vertices repel each other electrostatically while edges act as springs
    with a resting length of ``optimum_distance``. Edge direction is ignored
    for attraction: a vertex is attracted by its outbound targets and its
    inbound sources alike.

    Example:
        embedder = SpringEmbedder(
            [[], [0, 2], [3], []],
            optimum_distance=80,
            iterations=500,
            random_seed=42,
        )
        final = embedder.final()

        for vertex, position in final.items():
            print(f"Vertex {vertex}: ({position.x:.1f}, {position.y:.1f})")
    """

    def __init__(
        self,
        graph: Union[Graph, Adjacency],
        *,
        optimum_distance: float = 100.0,
        iterations: int = 1000,
        random_seed: Optional[int] = None,
        rng: Optional[random.Random] = None,
        on_start: Optional[Callable[[Optional[Event]], None]] = None,
        on_tick: Optional[Callable[[Optional[Event]], None]] = None,
        on_end: Optional[Callable[[Optional[Event]], None]] = None,
    ) -> None:
        """
        Initialize the layout engine.

        Args:
            graph: A Graph or raw adjacency rows (validated on construction)
            optimum_distance: Resting length of springs (positive, default 100)
            iterations: Number of relaxation steps (non-negative, default 1000)
            random_seed: Seed for reproducible runs. Each run restarts from it.
            rng: Random source shared across runs. Takes precedence over random_seed.
            on_start: Callback fired with the initial snapshot
            on_tick: Callback fired after every relaxation step
            on_end: Callback fired once the run is exhausted

        Raises:
            MalformedGraphError: If the adjacency references missing vertices.
            InvalidConfigurationError: If a parameter is out of range.
        """
        self._graph: Graph = graph if isinstance(graph, Graph) else Graph(graph)
        self._optimum_distance: float = validate_optimum_distance(optimum_distance)
        self._iterations: int = validate_iterations(iterations)
        self._random_seed: Optional[int] = random_seed
        self._rng: Optional[random.Random] = rng
        self._events: dict[EventType, Callable[[Optional[Event]], None]] = {}

        if on_start:
            self._events[EventType.start] = on_start
        if on_tick:
            self._events[EventType.tick] = on_tick
        if on_end:
            self._events[EventType.end] = on_end

    # -------------------------------------------------------------------------
    # Properties
    # -------------------------------------------------------------------------

    @property
    def graph(self) -> Graph:
        """Get the graph being laid out."""
        return self._graph

    @property
    def optimum_distance(self) -> float:
        """Get the optimum distance between adjacent vertices."""
        return self._optimum_distance

    @optimum_distance.setter
    def optimum_distance(self, value: float) -> None:
        """Set the optimum distance (must be positive)."""
        self._optimum_distance = validate_optimum_distance(value)

    @property
    def iterations(self) -> int:
        """Get the number of relaxation steps per run."""
        return self._iterations

    @iterations.setter
    def iterations(self, value: int) -> None:
        """Set the number of relaxation steps (must be >= 0)."""
        self._iterations = validate_iterations(value)

    @property
    def random_seed(self) -> Optional[int]:
        """Get random seed for reproducible layouts."""
        return self._random_seed

    @random_seed.setter
    def random_seed(self, value: Optional[int]) -> None:
        """Set random seed for reproducible layouts."""
        self._random_seed = value

    # -------------------------------------------------------------------------
    # Event System
    # -------------------------------------------------------------------------

    def on(self, event: EventType | str, callback: Callable[[Optional[Event]], None]) -> Self:
        """
        Subscribe to a layout event.

        Args:
            event: Event type (EventType enum or string name)
            callback: Function to call when event fires

        Returns:
            self (for chaining)
        """
        if isinstance(event, str):
            event = EventType[event]
        self._events[event] = callback
        return self

    def trigger(self, event: Event) -> None:
        """Trigger an event, calling the registered callback."""
        event_type = event.get("type")
        if event_type is not None and event_type in self._events:
            self._events[event_type](event)

    # -------------------------------------------------------------------------
    # Layout Implementation
    # -------------------------------------------------------------------------

    def initial_positions(self, rng: Optional[random.Random] = None) -> Snapshot:
        """
        Place every vertex uniformly at random in ``[-d, d] x [-d, d]``.

        Args:
            rng: Random source. Defaults to a fresh source for this engine.

        Returns:
            The initial snapshot
        """
        if rng is None:
            rng = self._make_rng()
        d = self._optimum_distance
        return MappingProxyType(
            {v: Vector(rng.uniform(-d, d), rng.uniform(-d, d)) for v in self._graph.vertices}
        )

    def forces(
        self, positions: Snapshot, rng: Optional[random.Random] = None
    ) -> dict[int, Vector]:
        """
        Damped force on every vertex for one step from ``positions``.

        Args:
            positions: Snapshot to read from (not modified)
            rng: Random source used to separate coincident vertices

        Returns:
            Mapping of vertex index to the displacement it would receive
        """
        working = self._separate_coincident(positions, rng, stacklevel=3)
        return self._damped_forces(working)

    def step(self, positions: Snapshot, rng: Optional[random.Random] = None) -> Snapshot:
        """
        Perform one relaxation step.

        All new positions are computed from the same prior snapshot, which is
        left untouched.

        Args:
            positions: Current snapshot
            rng: Random source used to separate coincident vertices

        Returns:
            A new snapshot
        """
        return self._step(positions, rng, stacklevel=4)

    def run(self) -> Iterator[Snapshot]:
        """
        Lazily produce ``iterations + 1`` snapshots.

        The first snapshot is the random initial placement, the last is the
        relaxed layout. The iterator is forward-only: once exhausted it stays
        exhausted. Calling run() again starts a new run, with fresh randomness
        unless a random_seed is set.

        Yields:
            One snapshot per iteration
        """
        rng = self._make_rng()
        positions = self.initial_positions(rng)
        self.trigger({"type": EventType.start, "alpha": 1.0, "stress": None, "iteration": 0})
        yield positions

        for iteration in range(1, self._iterations + 1):
            next_positions = self._step(positions, rng, stacklevel=4)
            if EventType.tick in self._events:
                self.trigger(
                    {
                        "type": EventType.tick,
                        "alpha": 1.0 - iteration / self._iterations,
                        "stress": total_displacement(positions, next_positions),
                        "iteration": iteration,
                    }
                )
            positions = next_positions
            yield positions

        self.trigger(
            {"type": EventType.end, "alpha": 0.0, "stress": None, "iteration": self._iterations}
        )

    def final(self) -> Snapshot:
        """Run the layout to completion and return the last snapshot."""
        snapshot: Optional[Snapshot] = None
        for snapshot in self.run():
            pass
        assert snapshot is not None
        return snapshot

    # -------------------------------------------------------------------------
    # Internals
    # -------------------------------------------------------------------------

    def _make_rng(self) -> random.Random:
        if self._rng is not None:
            return self._rng
        return random.Random(self._random_seed)

    def _damped_forces(self, positions: Snapshot) -> dict[int, Vector]:
        """Sum local attraction and global repulsion for every vertex."""
        d = self._optimum_distance
        vertices = self._graph.vertices
        result: dict[int, Vector] = {}

        for vertex in vertices:
            here = positions[vertex]

            local_attraction = V.ZERO
            for adjacent in self._graph.neighbors(vertex):
                # Self-loops carry no force
                if adjacent == vertex:
                    continue
                local_attraction = V.add(
                    local_attraction, spring_force(here, positions[adjacent], d)
                )

            global_repulsion = V.ZERO
            for other in vertices:
                if other == vertex:
                    continue
                global_repulsion = V.add(
                    global_repulsion, repulsion_force(here, positions[other], d)
                )

            result[vertex] = V.scalar_mult(DAMPING, V.add(local_attraction, global_repulsion))

        return result

    def _step(
        self, positions: Snapshot, rng: Optional[random.Random], stacklevel: int
    ) -> Snapshot:
        working = self._separate_coincident(positions, rng, stacklevel=stacklevel)
        displacement = self._damped_forces(working)
        return MappingProxyType(
            {v: V.add(working[v], displacement[v]) for v in self._graph.vertices}
        )

    def _separate_coincident(
        self, positions: Snapshot, rng: Optional[random.Random], stacklevel: int
    ) -> Snapshot:
        """
        Offset vertices that share a position with an earlier vertex.

        Returns ``positions`` itself when no two vertices coincide. The
        warning is attributed ``stacklevel`` frames up, counting this method.
        """
        seen: set[tuple[float, float]] = set()
        moved: list[int] = []
        working: Optional[dict[int, Vector]] = None
        offset = Vector(self._optimum_distance * COINCIDENCE_OFFSET, 0.0)

        for vertex in self._graph.vertices:
            position = positions[vertex]
            while (position.x, position.y) in seen:
                if rng is None:
                    rng = self._make_rng()
                if working is None:
                    working = dict(positions)
                angle = rng.uniform(0.0, 2 * math.pi)
                position = V.add(position, V.rotate(angle, offset))
                working[vertex] = position
                if not moved or moved[-1] != vertex:
                    moved.append(vertex)
            seen.add((position.x, position.y))

        if working is None:
            return positions

        warnings.warn(
            f"Vertices {moved} coincide with other vertices and were offset by "
            f"{offset.x:g} in a random direction.",
            DegenerateGeometryWarning,
            stacklevel=stacklevel,
        )
        return working


def run_layout(
    adjacency: Union[Graph, Adjacency],
    optimum_distance: float = 100.0,
    iterations: int = 1000,
    *,
    random_seed: Optional[int] = None,
) -> Iterator[Snapshot]:
    """
    Lay out a graph and return the lazy snapshot sequence.

    Configuration and graph errors are raised by this call, before any
    snapshot is produced.

    Args:
        adjacency: Adjacency rows (or a Graph)
        optimum_distance: Resting length of springs
        iterations: Number of relaxation steps
        random_seed: Seed for the initial placement

    Returns:
        Iterator over ``iterations + 1`` snapshots
    """
    embedder = SpringEmbedder(
        adjacency,
        optimum_distance=optimum_distance,
        iterations=iterations,
        random_seed=random_seed,
    )
    return embedder.run()


__all__ = [
    "DAMPING",
    "SpringEmbedder",
    "run_layout",
]
