"""Point/vector primitives shared by every fractal family."""

from __future__ import annotations

import math
from typing import NamedTuple, Sequence, Tuple, Union

import numpy as np

from .validate import ConfigurationError


class Point(NamedTuple):
    x: float
    y: float


class Segment(NamedTuple):
    start: Point
    end: Point


Polyline = Tuple[Point, ...]
SegmentList = Tuple[Segment, ...]
Geometry = Union[Polyline, SegmentList]


class Frame(NamedTuple):
    """Size of the host drawing surface, in surface units (y grows downward)."""

    width: float
    height: float

    @classmethod
    def coerce(cls, value: Union["Frame", Sequence[float]]) -> "Frame":
        if isinstance(value, Frame):
            frame = value
        else:
            if len(value) != 2:
                raise ConfigurationError(f"frame must be a (width, height) pair, got {value!r}")
            frame = cls(float(value[0]), float(value[1]))
        frame = cls(float(frame.width), float(frame.height))
        if not (math.isfinite(frame.width) and math.isfinite(frame.height)):
            raise ConfigurationError(f"frame size must be finite, got {frame.width}x{frame.height}")
        if frame.width <= 0.0 or frame.height <= 0.0:
            raise ConfigurationError(f"frame size must be positive, got {frame.width}x{frame.height}")
        return frame

    @property
    def center(self) -> Point:
        return Point(self.width / 2, self.height / 2)


def advance(origin: Tuple[float, float], heading: float, distance: float) -> Point:
    """Return the point ``distance`` away from ``origin`` along ``heading`` (radians)."""

    return Point(
        origin[0] + (distance * math.cos(heading)),
        origin[1] + (distance * math.sin(heading)),
    )


def heading_between(a: Tuple[float, float], b: Tuple[float, float]) -> float:
    return math.atan2(b[1] - a[1], b[0] - a[0])


def is_segment_list(geometry: Sequence[object]) -> bool:
    return bool(geometry) and isinstance(geometry[0], Segment)


def as_array(geometry: Sequence[object]) -> np.ndarray:
    """Return ``geometry`` as a float array.

    Polylines become ``(n, 2)`` arrays, segment lists ``(n, 2, 2)`` arrays
    (the layout expected by :class:`matplotlib.collections.LineCollection`).
    An empty input yields an empty ``(0, 2)`` array.
    """

    if not geometry:
        return np.zeros((0, 2), dtype=float)
    return np.asarray(geometry, dtype=float)


def bounding_box(geometry: Sequence[object]) -> Tuple[float, float, float, float]:
    """Return ``(min_x, min_y, max_x, max_y)`` over every vertex of ``geometry``."""

    arr = as_array(geometry)
    if arr.size == 0:
        return (0.0, 0.0, 0.0, 0.0)
    pts = arr.reshape(-1, 2)
    min_x, min_y = pts.min(axis=0)
    max_x, max_y = pts.max(axis=0)
    return (float(min_x), float(min_y), float(max_x), float(max_y))


__all__ = [
    "Point",
    "Segment",
    "Polyline",
    "SegmentList",
    "Geometry",
    "Frame",
    "advance",
    "heading_between",
    "is_segment_list",
    "as_array",
    "bounding_box",
]
