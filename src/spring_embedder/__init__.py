"""
spring-embedder: Force-directed layout of directed graphs.

Vertices repel each other electrostatically while edges pull connected
vertices together like logarithmic springs. The layout engine relaxes a random
initial placement for a fixed number of steps and yields one position snapshot
per step, suitable for animation.

Modules:
- vector: Immutable 2D vectors and pure vector operations
- graph: Vertices, edges and neighbors derived from adjacency rows
- forces: Spring and repulsion force equations
- layout: The iterative layout engine
- metrics: Numeric analysis of snapshots
- export: SVG rendering of snapshots
"""

__version__ = "0.1.0"

# Force model
from .forces import repulsion_force, spring_force

# Graph model
from .graph import Graph, edges, neighbors, vertices

# Layout engine
from .layout import DAMPING, SpringEmbedder, run_layout

# Metrics for snapshot analysis
from .metrics import (
    bounding_box,
    edge_length_variance,
    edge_lengths,
    snapshot_to_array,
    total_displacement,
)
from .types import Adjacency, Edge, Event, EventType, Snapshot

# Validation utilities
from .validation import (
    DegenerateGeometryError,
    DegenerateGeometryWarning,
    InvalidConfigurationError,
    MalformedGraphError,
    ValidationError,
    validate_adjacency,
    validate_iterations,
    validate_optimum_distance,
)

# Vector math
from .vector import ZERO, Vector, add, length, norm, rotate, scalar_mult, sub

__all__ = [
    # Version
    "__version__",
    # Shared types
    "Adjacency",
    "Edge",
    "Event",
    "EventType",
    "Snapshot",
    # Vector math
    "Vector",
    "ZERO",
    "add",
    "sub",
    "scalar_mult",
    "length",
    "norm",
    "rotate",
    # Graph model
    "Graph",
    "vertices",
    "edges",
    "neighbors",
    # Force model
    "spring_force",
    "repulsion_force",
    # Layout engine
    "DAMPING",
    "SpringEmbedder",
    "run_layout",
    # Metrics
    "snapshot_to_array",
    "bounding_box",
    "edge_lengths",
    "edge_length_variance",
    "total_displacement",
    # Validation
    "ValidationError",
    "InvalidConfigurationError",
    "MalformedGraphError",
    "DegenerateGeometryError",
    "DegenerateGeometryWarning",
    "validate_adjacency",
    "validate_optimum_distance",
    "validate_iterations",
]
