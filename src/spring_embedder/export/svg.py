"""
SVG export for spring embedder snapshots.

Draws vertices as circles and directed edges as lines ending in a filled
arrowhead just outside the target vertex. Layout coordinates have +y pointing
up, so the y axis is flipped when mapped to SVG.

Rendering is kept outside the layout engine: anything implementing the
``Surface`` protocol can be driven by ``render_frames`` while a run is
consumed.
"""

from __future__ import annotations

import math
from typing import Callable, Iterable, Optional, Protocol, Sequence
from xml.sax.saxutils import escape

from .. import vector as V
from ..metrics import bounding_box
from ..types import Edge, Snapshot
from ..vector import Vector


class Surface(Protocol):
    """Drawing target for snapshots."""

    def clear(self) -> None: ...

    def draw_vertex(self, vertex: int, position: Vector) -> None: ...

    def draw_edge(self, tail: Vector, tip: Vector) -> None: ...


class SvgSurface:
    """
    Surface that accumulates one SVG document per frame.

    Layout point (x, y) is drawn at (origin_x + x, origin_y - y).

    Example:
        surface = SvgSurface(width=800, height=600)  # origin at the center
        render_frames(embedder.run(), graph.edges, surface, on_frame=save)
    """

    def __init__(
        self,
        width: float,
        height: float,
        *,
        origin: Optional[tuple[float, float]] = None,
        vertex_radius: float = 5.0,
        vertex_color: str = "#4a90d9",
        edge_color: str = "#666666",
        edge_width: float = 1.5,
        show_labels: bool = False,
        label_color: str = "#000000",
        font_size: float = 10.0,
        font_family: str = "sans-serif",
        background: Optional[str] = None,
    ) -> None:
        self.width = float(width)
        self.height = float(height)
        if origin is None:
            origin = (self.width / 2, self.height / 2)
        self.origin_x, self.origin_y = float(origin[0]), float(origin[1])
        self.vertex_radius = float(vertex_radius)
        self.vertex_color = vertex_color
        self.edge_color = edge_color
        self.edge_width = edge_width
        self.show_labels = show_labels
        self.label_color = label_color
        self.font_size = font_size
        self.font_family = font_family
        self.background = background

        self._edges: list[str] = []
        self._vertices: list[str] = []
        self._labels: list[str] = []

    def _map(self, point: Vector) -> tuple[float, float]:
        return self.origin_x + point.x, self.origin_y - point.y

    def clear(self) -> None:
        """Discard everything drawn since the last clear."""
        self._edges = []
        self._vertices = []
        self._labels = []

    def draw_vertex(self, vertex: int, position: Vector) -> None:
        """Draw a vertex as a filled circle."""
        x, y = self._map(position)
        self._vertices.append(
            f'    <circle cx="{x:.1f}" cy="{y:.1f}" r="{self.vertex_radius:.1f}" '
            f'fill="{escape(self.vertex_color)}"/>'
        )
        if self.show_labels:
            self._labels.append(
                f'    <text x="{x:.1f}" y="{y - self.vertex_radius - 2:.1f}" '
                f'fill="{escape(self.label_color)}" font-size="{self.font_size}" '
                f'font-family="{escape(self.font_family)}" '
                f'text-anchor="middle">{vertex}</text>'
            )

    def draw_edge(self, tail: Vector, tip: Vector) -> None:
        """Draw a directed edge from ``tail`` to ``tip``."""
        x1, y1 = self._map(tail)
        x2, y2 = self._map(tip)
        color = escape(self.edge_color)
        self._edges.append(
            f'    <line x1="{x1:.1f}" y1="{y1:.1f}" x2="{x2:.1f}" y2="{y2:.1f}" '
            f'stroke="{color}" stroke-width="{self.edge_width}"/>'
        )

        head = arrowhead(tail, tip, self.vertex_radius)
        if head is None:
            return
        points = " ".join("{:.1f},{:.1f}".format(*self._map(p)) for p in head)
        self._edges.append(
            f'    <polygon points="{points}" fill="{color}" stroke="{color}"/>'
        )

    def to_string(self) -> str:
        """Serialize the current frame."""
        svg_parts = [
            f'<svg xmlns="http://www.w3.org/2000/svg" '
            f'width="{self.width:.1f}" height="{self.height:.1f}" '
            f'viewBox="0 0 {self.width:.1f} {self.height:.1f}">'
        ]
        if self.background:
            svg_parts.append(
                f'  <rect width="100%" height="100%" fill="{escape(self.background)}"/>'
            )

        svg_parts.append('  <g class="edges">')
        svg_parts.extend(self._edges)
        svg_parts.append("  </g>")

        svg_parts.append('  <g class="nodes">')
        svg_parts.extend(self._vertices)
        svg_parts.append("  </g>")

        if self.show_labels:
            svg_parts.append('  <g class="labels">')
            svg_parts.extend(self._labels)
            svg_parts.append("  </g>")

        svg_parts.append("</svg>")
        return "\n".join(svg_parts)


def arrowhead(tail: Vector, tip: Vector, radius: float) -> Optional[tuple[Vector, Vector, Vector]]:
    """
    Triangle marking the direction of an edge.

    The point sits ``radius`` before ``tip`` so it touches the target vertex
    outline; the base is another ``radius`` further back and half a radius wide
    on each side.

    Returns:
        (point, left, right) in layout coordinates, or None if the edge has
        zero length
    """
    if V.length(V.sub(tail, tip)) == 0:
        return None
    tip_to_head = V.scalar_mult(radius, V.norm(V.sub(tail, tip)))
    point = V.add(tip, tip_to_head)
    base = V.add(point, tip_to_head)
    right = V.add(base, V.scalar_mult(0.5, V.rotate(math.pi / 2, tip_to_head)))
    left = V.add(base, V.scalar_mult(0.5, V.rotate(-math.pi / 2, tip_to_head)))
    return point, left, right


def draw_snapshot(surface: Surface, snapshot: Snapshot, edges: Sequence[Edge]) -> None:
    """Clear ``surface`` and draw one snapshot onto it."""
    surface.clear()
    for vertex, position in snapshot.items():
        surface.draw_vertex(vertex, position)
    for edge in edges:
        surface.draw_edge(snapshot[edge.source], snapshot[edge.target])


def render_frames(
    snapshots: Iterable[Snapshot],
    edges: Sequence[Edge],
    surface: Surface,
    on_frame: Optional[Callable[[int, Surface], None]] = None,
) -> int:
    """
    Draw every snapshot of a run onto ``surface``.

    Args:
        snapshots: Snapshot sequence, typically ``SpringEmbedder.run()``
        edges: Edges to draw, derived once from the graph
        surface: Drawing target
        on_frame: Called with (frame_index, surface) after each frame is drawn

    Returns:
        Number of frames drawn
    """
    frames = 0
    for snapshot in snapshots:
        draw_snapshot(surface, snapshot, edges)
        if on_frame is not None:
            on_frame(frames, surface)
        frames += 1
    return frames


def to_svg(
    snapshot: Snapshot,
    edges: Sequence[Edge],
    *,
    vertex_radius: float = 5.0,
    vertex_color: str = "#4a90d9",
    edge_color: str = "#666666",
    edge_width: float = 1.5,
    show_labels: bool = True,
    label_color: str = "#000000",
    font_size: float = 10.0,
    font_family: str = "sans-serif",
    padding: float = 20.0,
    background: Optional[str] = None,
) -> str:
    """
    Export a snapshot to SVG, fitted to the layout's bounding box.

    Args:
        snapshot: Vertex positions
        edges: Directed edges to draw
        vertex_radius: Radius of vertex circles (default 5)
        vertex_color: Fill color for vertices (default blue)
        edge_color: Color for edges and arrowheads (default gray)
        edge_width: Width for edges (default 1.5)
        show_labels: Whether to label vertices with their index (default True)
        label_color: Color for labels (default black)
        font_size: Font size for labels (default 10)
        font_family: Font family for labels (default sans-serif)
        padding: Padding around the graph (default 20)
        background: Background color (default None for transparent)

    Returns:
        SVG string representation of the snapshot
    """
    min_x, min_y, max_x, max_y = bounding_box(snapshot)
    margin = padding + vertex_radius
    width = max_x - min_x + 2 * margin
    height = max_y - min_y + 2 * margin

    surface = SvgSurface(
        width,
        height,
        origin=(margin - min_x, margin + max_y),
        vertex_radius=vertex_radius,
        vertex_color=vertex_color,
        edge_color=edge_color,
        edge_width=edge_width,
        show_labels=show_labels,
        label_color=label_color,
        font_size=font_size,
        font_family=font_family,
        background=background,
    )
    draw_snapshot(surface, snapshot, edges)
    return surface.to_string()


__all__ = [
    "Surface",
    "SvgSurface",
    "arrowhead",
    "draw_snapshot",
    "render_frames",
    "to_svg",
]
