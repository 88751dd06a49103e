"""Host-side contracts: where emitted geometry and progress go."""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Protocol, runtime_checkable

from .geometry import Geometry, Polyline, SegmentList

if TYPE_CHECKING:
    from .stepper import StepStatus


@runtime_checkable
class RenderSink(Protocol):
    """Drawable owned by the host; receives a whole frame of geometry at a time."""

    def replace(self, geometry: Geometry) -> None:
        ...

    def clear(self) -> None:
        ...


@runtime_checkable
class PolylineSink(RenderSink, Protocol):
    def replace(self, geometry: Polyline) -> None:
        ...


@runtime_checkable
class SegmentListSink(RenderSink, Protocol):
    def replace(self, geometry: SegmentList) -> None:
        ...


# Receives ``StepStatus`` events; the return value is ignored.
StatusSink = Callable[["StepStatus"], None]


__all__ = ["RenderSink", "PolylineSink", "SegmentListSink", "StatusSink"]
