"""Shape parameters shared by the fractal families, plus the stock presets."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, fields, replace

from .validate import as_finite, as_int, validate_shape_values

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ShapeParameters:
    """Recursion knobs for one fractal run.

    ``max_depth`` is read by each family: the branch families treat 0 as "no
    depth ceiling, stop on ``min_segment_size``", while the edge-bending
    family treats 0 or any negative value as "draw the base shape and stop".
    Non-positive pacing is corrected to one redraw per tick.
    """

    max_depth: int = 5
    min_segment_size: float = 0.0
    angle_delta: float = 2 * math.pi / 5
    length_scale: float = 0.75
    child_offset: float = 0.0
    child_offset_rotation: float = 0.0
    child_count: int = 2
    draw_every_n_ticks: int = 1

    def __post_init__(self) -> None:
        max_depth = as_int(self.max_depth, 'max_depth')
        min_segment_size = as_finite(self.min_segment_size, 'min_segment_size')
        angle_delta = as_finite(self.angle_delta, 'angle_delta')
        length_scale = as_finite(self.length_scale, 'length_scale')
        child_offset = as_finite(self.child_offset, 'child_offset')
        child_offset_rotation = as_finite(self.child_offset_rotation, 'child_offset_rotation')
        child_count = as_int(self.child_count, 'child_count')
        draw_every_n_ticks = as_int(self.draw_every_n_ticks, 'draw_every_n_ticks')

        validate_shape_values(
            min_segment_size,
            angle_delta,
            length_scale,
            child_offset,
            child_offset_rotation,
            child_count,
        )

        if draw_every_n_ticks <= 0:
            logger.warning("draw_every_n_ticks=%d is not positive; using 1", draw_every_n_ticks)
            draw_every_n_ticks = 1

        object.__setattr__(self, 'max_depth', max_depth)
        object.__setattr__(self, 'min_segment_size', min_segment_size)
        object.__setattr__(self, 'angle_delta', angle_delta)
        object.__setattr__(self, 'length_scale', length_scale)
        object.__setattr__(self, 'child_offset', child_offset)
        object.__setattr__(self, 'child_offset_rotation', child_offset_rotation)
        object.__setattr__(self, 'child_count', child_count)
        object.__setattr__(self, 'draw_every_n_ticks', draw_every_n_ticks)

    @property
    def uses_size_escape(self) -> bool:
        return self.min_segment_size != 0.0

    def with_changes(self, **changes: object) -> "ShapeParameters":
        known = {f.name for f in fields(self)}
        unknown = sorted(set(changes) - known)
        if unknown:
            raise TypeError(f"unknown shape parameter(s): {', '.join(unknown)}")
        return replace(self, **changes)


def koch_snowflake(**overrides: object) -> ShapeParameters:
    return ShapeParameters(max_depth=5, draw_every_n_ticks=10).with_changes(**overrides)


def binary_tree(**overrides: object) -> ShapeParameters:
    return ShapeParameters(
        max_depth=10,
        min_segment_size=1.0,
        angle_delta=2 * math.pi / 5,
        length_scale=0.75,
        child_offset=1.0,
        draw_every_n_ticks=5,
    ).with_changes(**overrides)


def symmetric_tree(**overrides: object) -> ShapeParameters:
    return ShapeParameters(
        max_depth=0,
        min_segment_size=1.0,
        angle_delta=2 * math.pi / 5,
        length_scale=0.75,
        child_offset=0.0,
        child_offset_rotation=0.0,
        child_count=2,
        draw_every_n_ticks=1,
    ).with_changes(**overrides)


__all__ = [
    "ShapeParameters",
    "koch_snowflake",
    "binary_tree",
    "symmetric_tree",
]
