"""Tests for SVG export and frame rendering."""

import math

import pytest

from spring_embedder import Edge, SpringEmbedder, Vector
from spring_embedder.export import SvgSurface, arrowhead, draw_snapshot, render_frames, to_svg

# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def path_snapshot():
    """Three vertices on a line with two directed edges."""
    snapshot = {0: Vector(0, 0), 1: Vector(50, 0), 2: Vector(100, 40)}
    edges = [Edge(0, 1), Edge(1, 2)]
    return snapshot, edges


class RecordingSurface:
    """Surface that records draw calls."""

    def __init__(self):
        self.calls = []

    def clear(self):
        self.calls.append(("clear",))

    def draw_vertex(self, vertex, position):
        self.calls.append(("vertex", vertex, position))

    def draw_edge(self, tail, tip):
        self.calls.append(("edge", tail, tip))


# =============================================================================
# Arrowheads
# =============================================================================


class TestArrowhead:
    """Tests for arrowhead geometry."""

    def test_horizontal_edge(self):
        point, left, right = arrowhead(Vector(0, 0), Vector(10, 0), 1.0)
        assert point.x == pytest.approx(9)
        assert point.y == pytest.approx(0)
        assert left.x == pytest.approx(8)
        assert left.y == pytest.approx(0.5)
        assert right.x == pytest.approx(8)
        assert right.y == pytest.approx(-0.5)

    def test_point_sits_on_vertex_outline(self):
        tip = Vector(30, 40)
        point, _, _ = arrowhead(Vector(0, 0), tip, 5.0)
        assert math.dist(tuple(point), tuple(tip)) == pytest.approx(5.0)

    def test_zero_length_edge(self):
        assert arrowhead(Vector(1, 1), Vector(1, 1), 5.0) is None


# =============================================================================
# SVG
# =============================================================================


class TestSvgSurface:
    """Tests for the SVG drawing surface."""

    def test_origin_defaults_to_center_with_y_up(self):
        surface = SvgSurface(100, 100)
        surface.draw_vertex(0, Vector(10, 20))
        svg = surface.to_string()
        assert 'cx="60.0"' in svg
        assert 'cy="30.0"' in svg

    def test_clear_discards_frame(self):
        surface = SvgSurface(100, 100)
        surface.draw_vertex(0, Vector(0, 0))
        surface.draw_edge(Vector(0, 0), Vector(10, 0))
        surface.clear()
        svg = surface.to_string()
        assert "<circle" not in svg
        assert "<line" not in svg

    def test_edge_has_arrowhead(self):
        surface = SvgSurface(100, 100)
        surface.draw_edge(Vector(-20, 0), Vector(20, 0))
        svg = surface.to_string()
        assert svg.count("<line") == 1
        assert svg.count("<polygon") == 1

    def test_background(self):
        svg = SvgSurface(100, 100, background="#fff").to_string()
        assert 'fill="#fff"' in svg


class TestToSvg:
    """Tests for fitted SVG export."""

    def test_document_structure(self, path_snapshot):
        svg = to_svg(*path_snapshot)
        assert svg.startswith("<svg")
        assert svg.endswith("</svg>")
        assert 'xmlns="http://www.w3.org/2000/svg"' in svg
        assert '<g class="edges">' in svg
        assert '<g class="nodes">' in svg

    def test_element_counts(self, path_snapshot):
        svg = to_svg(*path_snapshot)
        assert svg.count("<circle") == 3
        assert svg.count("<line") == 2
        assert svg.count("<polygon") == 2

    def test_labels(self, path_snapshot):
        svg = to_svg(*path_snapshot, show_labels=True)
        assert '<g class="labels">' in svg
        assert svg.count("<text") == 3

    def test_no_labels_when_disabled(self, path_snapshot):
        svg = to_svg(*path_snapshot, show_labels=False)
        assert '<g class="labels">' not in svg
        assert "<text" not in svg

    def test_fitted_dimensions(self, path_snapshot):
        svg = to_svg(*path_snapshot, padding=10, vertex_radius=5)
        # 100 x 40 layout plus 15 on each side
        assert 'width="130.0" height="70.0"' in svg

    def test_top_vertex_drawn_at_top(self, path_snapshot):
        svg = to_svg(*path_snapshot, padding=10, vertex_radius=5)
        assert '<circle cx="115.0" cy="15.0"' in svg

    def test_self_loop_has_no_arrowhead(self):
        svg = to_svg({0: Vector(0, 0)}, [Edge(0, 0)])
        assert svg.count("<line") == 1
        assert "<polygon" not in svg

    def test_empty_snapshot(self):
        svg = to_svg({}, [])
        assert svg.startswith("<svg")
        assert "<circle" not in svg

    def test_escapes_colors(self, path_snapshot):
        svg = to_svg(*path_snapshot, vertex_color='"><script>')
        assert "<script>" not in svg


# =============================================================================
# Frames
# =============================================================================


class TestRenderFrames:
    """Tests for driving a surface from a layout run."""

    def test_draw_snapshot_order(self, path_snapshot):
        snapshot, edges = path_snapshot
        surface = RecordingSurface()
        draw_snapshot(surface, snapshot, edges)

        kinds = [call[0] for call in surface.calls]
        assert kinds == ["clear", "vertex", "vertex", "vertex", "edge", "edge"]
        assert surface.calls[4] == ("edge", snapshot[0], snapshot[1])

    def test_one_frame_per_snapshot(self):
        embedder = SpringEmbedder([[1], [2], []], iterations=4, random_seed=0)
        surface = RecordingSurface()
        seen = []

        count = render_frames(
            embedder.run(),
            embedder.graph.edges,
            surface,
            on_frame=lambda index, drawn: seen.append(index),
        )

        assert count == 5
        assert seen == [0, 1, 2, 3, 4]
        assert sum(1 for call in surface.calls if call[0] == "clear") == 5

    def test_svg_frames(self):
        embedder = SpringEmbedder([[1], []], iterations=2, random_seed=0)
        frames = []
        render_frames(
            embedder.run(),
            embedder.graph.edges,
            SvgSurface(400, 400),
            on_frame=lambda index, drawn: frames.append(drawn.to_string()),
        )
        assert len(frames) == 3
        assert all(frame.count("<circle") == 2 for frame in frames)
