"""
Export functionality for spring embedder snapshots.

Example usage:
    from spring_embedder import SpringEmbedder
    from spring_embedder.export import to_svg

    embedder = SpringEmbedder([[1, 2], [2], []], iterations=300, random_seed=1)
    svg_content = to_svg(embedder.final(), embedder.graph.edges)
    with open("graph.svg", "w") as f:
        f.write(svg_content)
"""

from .svg import Surface, SvgSurface, arrowhead, draw_snapshot, render_frames, to_svg

__all__ = [
    "Surface",
    "SvgSurface",
    "arrowhead",
    "draw_snapshot",
    "render_frames",
    "to_svg",
]
