"""Shapes, camera bounds and board placement for drawing a replay."""

from __future__ import annotations

import argparse
import math
import struct
from typing import Iterable, NamedTuple, Sequence

Vertex = tuple[float, float, float]

HALF_EXTENT = 25.0
"""Half the width of the orthographic view, in board cells."""


class OrthoBounds(NamedTuple):
    left: float
    right: float
    bottom: float
    top: float


def _as_float32(value: float) -> float:
    return struct.unpack("f", struct.pack("f", value))[0]


def circle_triangles(
    segments: int = 36,
    radius: float = 0.35,
    origin_x: float = 0.5,
    origin_y: float = 0.5,
    start: int = 0,
) -> list[tuple[int, Vertex]]:
    """Triangulate a disc as a fan of ``segments`` triangles.

    Returns ``(index, vertex)`` pairs; indices begin at ``3 * start``.
    """
    if segments <= 0:
        raise ValueError("segments must be positive")
    step = 2 * math.pi / segments
    center = (_as_float32(origin_x), _as_float32(origin_y), 0.0)

    def rim(angle: float) -> Vertex:
        return (
            _as_float32(origin_x + radius * math.cos(angle)),
            _as_float32(origin_y + radius * math.sin(angle)),
            0.0,
        )

    result: list[tuple[int, Vertex]] = []
    angle = 0.0
    for triangle in range(start, start + segments):
        first = rim(angle)
        angle += step
        result.extend(
            [
                (3 * triangle, center),
                (3 * triangle + 1, first),
                (3 * triangle + 2, rim(angle)),
            ]
        )
    return result


def _number(value: float) -> str:
    return f"{value:g}"


def format_vertices(vertices: Iterable[Vertex], start: int = 0) -> list[str]:
    """Render vertices as array assignment lines, numbered from ``start``."""
    return [
        f"Vertices[{index}] = glm::vec3({_number(x)}f,{_number(y)}f,0.0f);"
        for index, (x, y, _z) in enumerate(vertices, start)
    ]


def ortho_bounds(aspect: float) -> OrthoBounds:
    """Bounds of the orthographic projection for a viewport of ``aspect`` width/height.

    The view is flipped vertically: ``bottom`` is positive and ``top`` negative.
    """
    if aspect <= 0:
        raise ValueError("aspect ratio must be positive")
    left, right = -HALF_EXTENT, HALF_EXTENT
    top, bottom = -HALF_EXTENT, HALF_EXTENT
    if aspect > 1:
        left *= aspect
        right *= aspect
    elif aspect < 1:
        bottom /= aspect
        top /= aspect
    return OrthoBounds(left, right, bottom, top)


def cell_origin(row: int, col: int, rows: int, cols: int) -> tuple[int, int]:
    """Position of a board cell with the board centred on the origin."""
    return row - rows // 2, col - cols // 2


def _quad(low: float, high: float) -> tuple[Vertex, ...]:
    return (
        (low, low, 0.0),
        (high, low, 0.0),
        (high, high, 0.0),
        (high, high, 0.0),
        (low, high, 0.0),
        (low, low, 0.0),
    )


SQUARE_VERTICES: tuple[Vertex, ...] = _quad(0.05, 0.95)
PLAYER_VERTICES: tuple[Vertex, ...] = _quad(0.2, 0.8)
BONUS_VERTICES: tuple[Vertex, ...] = (
    (0.4, 0.2, 0.0), (0.6, 0.2, 0.0), (0.6, 0.4, 0.0),
    (0.4, 0.2, 0.0), (0.6, 0.4, 0.0), (0.4, 0.4, 0.0),
    (0.2, 0.4, 0.0), (0.8, 0.4, 0.0), (0.8, 0.6, 0.0),
    (0.2, 0.4, 0.0), (0.8, 0.6, 0.0), (0.2, 0.6, 0.0),
    (0.4, 0.6, 0.0), (0.6, 0.6, 0.0), (0.6, 0.8, 0.0),
    (0.4, 0.6, 0.0), (0.6, 0.8, 0.0), (0.4, 0.8, 0.0),
)
BUBBLE_VERTICES: tuple[Vertex, ...] = tuple(v for _, v in circle_triangles())


def main(argv: Sequence[str] | None = None) -> int:
    """Print the vertex table of a triangulated circle."""
    parser = argparse.ArgumentParser(description="Print circle vertices.")
    parser.add_argument("--segments", type=int, default=36)
    parser.add_argument("--radius", type=float, default=0.35)
    parser.add_argument("--origin-x", type=float, default=0.5)
    parser.add_argument("--origin-y", type=float, default=0.5)
    parser.add_argument("--start", type=int, default=0)
    args = parser.parse_args(argv)
    try:
        pairs = circle_triangles(
            args.segments, args.radius, args.origin_x, args.origin_y, args.start
        )
    except ValueError as exc:
        parser.error(str(exc))
    first_index = pairs[0][0]
    for line in format_vertices((v for _, v in pairs), first_index):
        print(line)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())