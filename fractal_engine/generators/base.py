"""Common contract for the fractal shape generators."""

from __future__ import annotations

import collections.abc
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Iterator, Optional, Sequence, Union, overload

from ..geometry import Frame, Geometry, Point, Segment
from ..params import ShapeParameters

FrameLike = Union[Frame, Sequence[float]]


@dataclass(frozen=True)
class GenerationResult(collections.abc.Sequence):
    """Geometry emitted for one depth, plus the size-escape flag.

    ``terminal`` is set when a branch stopped because its children would
    have been shorter than ``min_segment_size``; the run must end after
    this frame. ``escaped_at`` is the shallowest recursion level (1 = the
    root segment) at which that happened.
    """

    geometry: Geometry
    terminal: bool = False
    escaped_at: Optional[int] = None

    @overload
    def __getitem__(self, index: int) -> Union[Point, Segment]: ...

    @overload
    def __getitem__(self, index: slice) -> Geometry: ...

    def __getitem__(self, index):
        return self.geometry[index]

    def __len__(self) -> int:
        return len(self.geometry)

    def __iter__(self) -> Iterator[Union[Point, Segment]]:
        return iter(self.geometry)


class ShapeGenerator(ABC):
    """Pure mapping ``(depth, frame) -> GenerationResult`` for one family."""

    title = "Fractal"
    element_label = "elements"

    def __init__(self, params: Optional[ShapeParameters] = None) -> None:
        self.params = params if params is not None else self.default_parameters()

    @classmethod
    def default_parameters(cls) -> ShapeParameters:
        return ShapeParameters()

    @property
    def depth_ceiling(self) -> Optional[int]:
        """Deepest depth the stepper draws, or ``None`` when size escape decides."""
        return self.params.max_depth

    def deepest_depth(self, frame: FrameLike) -> Optional[int]:
        """Deepest depth a full run will generate, or ``None`` if unbounded."""
        return self.depth_ceiling

    @abstractmethod
    def generate(self, depth: int, frame: FrameLike) -> GenerationResult:
        raise NotImplementedError

    @abstractmethod
    def estimate_element_count(self, depth: int, frame: FrameLike) -> int:
        """Upper bound on ``len(self.generate(depth, frame))``."""
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.params!r})"
