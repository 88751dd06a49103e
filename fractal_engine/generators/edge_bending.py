"""Koch-snowflake style edge bending."""

from __future__ import annotations

import logging
import math
from typing import List, Tuple

from ..geometry import Frame, Point, advance, heading_between
from ..params import ShapeParameters, koch_snowflake
from .base import FrameLike, GenerationResult, ShapeGenerator

logger = logging.getLogger(__name__)

SQRT3 = math.sqrt(3)
FRAME_FILL = 0.8
DISTANCE_SCALE = 1.0 / 3
# Each offset is added onto the running heading, so the four children turn
# 0, +60, -60 and 0 degrees relative to the parent.
DELTA_THETA: Tuple[float, ...] = (0.0, math.pi / 3, -2 * math.pi / 3, math.pi / 3)


class _Pen:
    """Cursor threaded through one traversal; owned by a single ``generate`` call."""

    __slots__ = ("position", "points")

    def __init__(self, start: Point) -> None:
        self.position = start
        self.points: List[Point] = [start]

    def line_to(self, heading: float, distance: float) -> None:
        self.position = advance(self.position, heading, distance)
        self.points.append(self.position)


def snowflake_size(frame: Frame) -> float:
    """Edge length of the base triangle that fits in 80% of ``frame``."""

    size_from_height = FRAME_FILL * frame.height / (SQRT3 * 4 / 3)
    size_from_width = FRAME_FILL * frame.width / 2
    return 2 * min(size_from_height, size_from_width)


def base_triangle(frame: Frame, size: float) -> Tuple[Point, Point, Point, Point]:
    """Closed base triangle centred in ``frame``, pointing down in screen space."""

    xmid, ymid = frame.center
    half = size / 2
    p0 = Point(xmid, ymid + (half * SQRT3 * 2 / 3))
    p1 = Point(xmid + half, ymid - (half * SQRT3 / 3))
    p2 = Point(xmid - half, ymid - (half * SQRT3 / 3))
    return (p0, p1, p2, p0)


def _bend_edge(pen: _Pen, depth: int, theta: float, distance: float) -> None:
    if depth <= 0:
        pen.line_to(theta, distance)
        return
    distance *= DISTANCE_SCALE
    for delta in DELTA_THETA:
        theta += delta
        _bend_edge(pen, depth - 1, theta, distance)


class EdgeBendingGenerator(ShapeGenerator):
    """Closed curve whose every edge is recursively bent outward.

    Depth ``d`` yields ``3 * 4**d + 1`` points; the last one repeats the first
    (up to rounding) so the polyline closes. Depth values below zero draw the
    base triangle, as depth 0 does.
    """

    title = "Koch Snowflake"
    element_label = "Polyline points"

    @classmethod
    def default_parameters(cls) -> ShapeParameters:
        return koch_snowflake()

    @property
    def depth_ceiling(self) -> int:
        # Zero and negative ceilings both mean: draw the base triangle, then stop.
        return max(self.params.max_depth, 0)

    def generate(self, depth: int, frame: FrameLike) -> GenerationResult:
        frame = Frame.coerce(frame)
        size = snowflake_size(frame)
        corners = base_triangle(frame, size)
        pen = _Pen(corners[0])
        for start, end in zip(corners, corners[1:]):
            pen.position = start
            _bend_edge(pen, depth, heading_between(start, end), size)
        logger.debug("Koch depth %d: %d points", depth, len(pen.points))
        return GenerationResult(tuple(pen.points))

    def estimate_element_count(self, depth: int, frame: FrameLike) -> int:
        return 3 * 4 ** max(depth, 0) + 1


__all__ = [
    "EdgeBendingGenerator",
    "snowflake_size",
    "base_triangle",
    "DELTA_THETA",
]
