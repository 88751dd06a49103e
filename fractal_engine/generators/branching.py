"""Branching trees: one recursion shared by the binary and symmetric families."""

from __future__ import annotations

import logging
import math
from typing import Callable, List, Optional, Sequence

from ..geometry import Frame, Point, Segment, advance
from ..params import ShapeParameters, binary_tree, symmetric_tree
from ..validate import ConfigurationError
from .base import FrameLike, GenerationResult, ShapeGenerator

logger = logging.getLogger(__name__)

ROOT_Y_FRACTION = 0.83
ROOT_LENGTH_FRACTION = 0.2
ROOT_HEADING = -math.pi / 2

ChildSpread = Callable[[float, float, int], Sequence[float]]


def even_spread(theta: float, angle_delta: float, child_count: int) -> List[float]:
    """Headings of ``child_count`` children fanned evenly across ``angle_delta``."""

    between = angle_delta / (child_count - 1)
    child_theta = theta - (angle_delta / 2)
    headings = []
    for _ in range(child_count):
        headings.append(child_theta)
        child_theta = child_theta + between
    return headings


def pair_spread(theta: float, angle_delta: float, child_count: int = 2) -> List[float]:
    """Mirror-image pair about ``theta``; ``child_count`` is ignored."""

    half = angle_delta / 2
    return [theta - half, theta - half + angle_delta]


def root_segment_length(frame: Frame) -> float:
    return ROOT_LENGTH_FRACTION * frame.width


def root_point(frame: Frame) -> Point:
    return Point(frame.width / 2, ROOT_Y_FRACTION * frame.height)


class _BranchRun:
    """Output buffer and escape record for one ``generate`` call."""

    __slots__ = ("segments", "escaped_at")

    def __init__(self) -> None:
        self.segments: List[Segment] = []
        self.escaped_at: Optional[int] = None

    def mark_escape(self, level: int) -> None:
        if self.escaped_at is None or level < self.escaped_at:
            self.escaped_at = level


class BranchGenerator(ShapeGenerator):
    """Tree of straight branches; each branch spawns ``child_count`` children.

    Child headings come from ``spread``. Depth ``d >= 1`` draws ``d`` levels
    of branches; depth 0 draws the trunk alone.
    """

    title = "Branch Tree"
    element_label = "Branches"
    spread: ChildSpread = staticmethod(even_spread)

    def __init__(self, params: Optional[ShapeParameters] = None) -> None:
        super().__init__(params)
        p = self.params
        if p.max_depth < 0:
            raise ConfigurationError(f"max_depth must be >= 0 for {self.title} (got {p.max_depth})")
        if p.max_depth == 0 and not p.uses_size_escape:
            logger.warning("%s: max_depth and min_segment_size are both 0; using max_depth=1", self.title)
            p = self.params = p.with_changes(max_depth=1)
        if p.max_depth == 0 and p.length_scale >= 1.0:
            raise ConfigurationError(
                "max_depth=0 relies on min_segment_size to stop, "
                "but length_scale=1 never shrinks a branch"
            )

    @property
    def child_count(self) -> int:
        return self.params.child_count

    @property
    def depth_ceiling(self) -> Optional[int]:
        return None if self.params.max_depth == 0 else self.params.max_depth

    def generate(self, depth: int, frame: FrameLike) -> GenerationResult:
        frame = Frame.coerce(frame)
        run = _BranchRun()
        self._branch(run, depth, 1, root_point(frame), root_segment_length(frame), ROOT_HEADING)
        if run.escaped_at is not None:
            logger.debug("%s depth %d escaped by size at level %d", self.title, depth, run.escaped_at)
        return GenerationResult(tuple(run.segments), run.escaped_at is not None, run.escaped_at)

    def _branch(
        self,
        run: _BranchRun,
        depth: int,
        level: int,
        start: Point,
        length: float,
        theta: float,
    ) -> None:
        p = self.params
        end = advance(start, theta, length)
        run.segments.append(Segment(start, end))

        child_length = length * p.length_scale
        if p.min_segment_size != 0.0 and child_length < p.min_segment_size:
            run.mark_escape(level)
            return

        if depth > 1:
            child_start = advance(end, theta + p.child_offset_rotation, -(p.child_offset * length))
            for child_theta in self.spread(theta, p.angle_delta, self.child_count):
                self._branch(run, depth - 1, level + 1, child_start, child_length, child_theta)

    def escape_level(self, frame: FrameLike) -> Optional[int]:
        """First level whose children fall under ``min_segment_size``, if any."""

        p = self.params
        if p.min_segment_size == 0.0:
            return None
        length = root_segment_length(Frame.coerce(frame))
        level = 1
        while length * p.length_scale >= p.min_segment_size:
            if p.length_scale >= 1.0:
                return None
            length *= p.length_scale
            level += 1
        return level

    def deepest_depth(self, frame: FrameLike) -> Optional[int]:
        ceiling = self.depth_ceiling
        escape = self.escape_level(frame)
        if ceiling is None:
            return escape
        if escape is None:
            return ceiling
        return min(ceiling, escape)

    def estimate_element_count(self, depth: int, frame: FrameLike) -> int:
        levels = max(depth, 1)
        escape = self.escape_level(frame)
        if escape is not None:
            levels = min(levels, escape)
        n = self.child_count
        return sum(n ** i for i in range(levels))


class BinaryBranchGenerator(BranchGenerator):
    """Two children per branch, mirrored about the parent heading."""

    title = "Binary Tree"
    spread = staticmethod(pair_spread)

    @classmethod
    def default_parameters(cls) -> ShapeParameters:
        return binary_tree()

    @property
    def child_count(self) -> int:
        return 2


class SymmetricBranchGenerator(BranchGenerator):
    """``child_count`` children spread evenly across ``angle_delta``."""

    title = "Symmetric Tree"
    spread = staticmethod(even_spread)

    @classmethod
    def default_parameters(cls) -> ShapeParameters:
        return symmetric_tree()


__all__ = [
    "ChildSpread",
    "even_spread",
    "pair_spread",
    "root_point",
    "root_segment_length",
    "BranchGenerator",
    "BinaryBranchGenerator",
    "SymmetricBranchGenerator",
]
