#!/usr/bin/env python3
"""
Render the spring embedder on a sample graph.

Writes the final layout to ./build/layout.svg and, with --frames, every
n-th snapshot of the run to ./build/frames/.

Usage:
    uv run python scripts/render_layout.py --iterations 500 --frames 25
"""

import argparse
from pathlib import Path

from spring_embedder import SpringEmbedder
from spring_embedder.export import SvgSurface, render_frames, to_svg

# Output directory
BUILD_DIR = Path(__file__).parent.parent / "build"

SAMPLE_GRAPH = [
    [],
    [0, 2],
    [3, 4, 5],
    [6],
    [],
    [],
    [7, 8],
    [],
    [9, 10],
    [],
    [],
]


def main():
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[1])
    parser.add_argument("--iterations", type=int, default=1000)
    parser.add_argument("--distance", type=float, default=100.0)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument(
        "--frames", type=int, default=0, help="write every n-th snapshot (0 = none)"
    )
    args = parser.parse_args()

    embedder = SpringEmbedder(
        SAMPLE_GRAPH,
        optimum_distance=args.distance,
        iterations=args.iterations,
        random_seed=args.seed,
    )
    edges = embedder.graph.edges
    BUILD_DIR.mkdir(exist_ok=True)

    if args.frames > 0:
        frames_dir = BUILD_DIR / "frames"
        frames_dir.mkdir(exist_ok=True)
        surface = SvgSurface(1000, 800, show_labels=True)
        final = None

        def save(index, drawn):
            if index % args.frames == 0:
                (frames_dir / f"frame_{index:05d}.svg").write_text(drawn.to_string())

        def remember(snapshots):
            nonlocal final
            for snapshot in snapshots:
                final = snapshot
                yield snapshot

        count = render_frames(remember(embedder.run()), edges, surface, on_frame=save)
        print(f"Wrote {(count - 1) // args.frames + 1} of {count} frames to {frames_dir}")
    else:
        final = embedder.final()

    output = BUILD_DIR / "layout.svg"
    output.write_text(to_svg(final, edges))
    print(f"Wrote {output}")


if __name__ == "__main__":
    main()
