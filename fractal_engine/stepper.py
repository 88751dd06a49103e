"""Depth-stepping state machine: one recursion depth per paced host tick."""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from typing import Optional

from .config import get_engine_config
from .generators.base import FrameLike, GenerationResult, ShapeGenerator
from .geometry import Frame
from .logging_utils import apply_debug_logging
from .sinks import RenderSink, StatusSink
from .validate import ConfigurationError

logger = logging.getLogger(__name__)


class StepperPhase(enum.Enum):
    IDLE = "idle"
    RUNNING = "running"
    FINISHED = "finished"


@dataclass(frozen=True)
class StepperState:
    current_depth: int = 0
    ticks_seen: int = 0
    running: bool = False


@dataclass(frozen=True)
class StepStatus:
    """Progress report for one drawn depth (or the end of a run)."""

    depth: int
    element_count: int
    finished: bool = False
    escaped: bool = False
    title: str = "Fractal"
    element_label: str = "elements"

    @property
    def message(self) -> str:
        done = " Finished." if self.finished else ""
        return f"{self.title} - Depth = {self.depth}.{done} # of {self.element_label} = {self.element_count}"

    def __str__(self) -> str:
        return self.message


class DepthStepper:
    """Turns "draw depth d" into an animation 0, 1, 2, ... driven by ``tick()``.

    Every ``draw_every_n_ticks``-th tick regenerates the current depth, hands
    the geometry to the render sink and reports a :class:`StepStatus`. The
    run finishes once the depth passes the generator's ceiling or a branch
    escapes by size, whichever comes first.
    """

    def __init__(
        self,
        sink: RenderSink,
        frame: Optional[FrameLike] = None,
        status_sink: Optional[StatusSink] = None,
        *,
        element_budget: Optional[int] = None,
    ) -> None:
        config = get_engine_config()
        self.sink = sink
        self.frame = Frame.coerce(frame if frame is not None else config.default_frame)
        self.status_sink = status_sink
        self.element_budget = element_budget if element_budget is not None else config.element_budget
        self._generator: Optional[ShapeGenerator] = None
        self._phase = StepperPhase.IDLE
        self._current_depth = 0
        self._ticks_seen = 0
        self._last_status: Optional[StepStatus] = None
        self._last_result: Optional[GenerationResult] = None

    @property
    def generator(self) -> Optional[ShapeGenerator]:
        return self._generator

    @property
    def phase(self) -> StepperPhase:
        return self._phase

    @property
    def running(self) -> bool:
        return self._phase is StepperPhase.RUNNING

    @property
    def state(self) -> StepperState:
        return StepperState(self._current_depth, self._ticks_seen, self.running)

    @property
    def last_status(self) -> Optional[StepStatus]:
        return self._last_status

    @property
    def last_result(self) -> Optional[GenerationResult]:
        return self._last_result

    def start(self, generator: ShapeGenerator) -> None:
        self._check_budget(generator)
        self._generator = generator
        self._reset()
        self._phase = StepperPhase.RUNNING
        self._last_status = None
        self._last_result = None
        self.sink.clear()
        logger.info(
            "Starting %s on %gx%g frame (max_depth=%d, every %d tick(s))",
            generator.title,
            self.frame.width,
            self.frame.height,
            generator.params.max_depth,
            generator.params.draw_every_n_ticks,
        )

    def stop(self) -> None:
        if self.running:
            logger.info("Stopped %s at depth %d", self._generator.title, self._current_depth)
        self._phase = StepperPhase.IDLE

    def tick(self) -> bool:
        """Advance one host frame; return ``True`` when geometry was redrawn."""

        if not self.running:
            return False
        generator = self._generator
        self._ticks_seen += 1
        if self._ticks_seen % generator.params.draw_every_n_ticks != 0:
            return False

        depth = self._current_depth
        result = generator.generate(depth, self.frame)
        self._last_result = result
        self.sink.replace(result.geometry)
        if result.escaped_at == 1:
            logger.warning(
                "%s: trunk children are already below min_segment_size=%g; nothing to refine",
                generator.title,
                generator.params.min_segment_size,
            )
        self._emit(depth, result, finished=False)

        self._current_depth += 1
        ceiling = generator.depth_ceiling
        if result.terminal or (ceiling is not None and self._current_depth > ceiling):
            self._emit(depth, result, finished=True)
            self._reset()
            self._phase = StepperPhase.FINISHED
            logger.info("Finished %s at depth %d with %d %s", generator.title, depth, len(result), generator.element_label)
        return True

    def _reset(self) -> None:
        self._current_depth = 0
        self._ticks_seen = 0

    def _emit(self, depth: int, result: GenerationResult, *, finished: bool) -> None:
        generator = self._generator
        status = StepStatus(
            depth=depth,
            element_count=len(result),
            finished=finished,
            escaped=result.terminal,
            title=generator.title,
            element_label=generator.element_label,
        )
        self._last_status = status
        logger.debug("%s", status.message)
        if self.status_sink is not None:
            self.status_sink(status)

    def _check_budget(self, generator: ShapeGenerator) -> None:
        deepest = generator.deepest_depth(self.frame)
        if deepest is None:
            raise ConfigurationError(f"{generator.title} run has no depth ceiling and never escapes by size")
        estimate = generator.estimate_element_count(deepest, self.frame)
        if estimate > self.element_budget:
            raise ConfigurationError(
                f"{generator.title} at depth {deepest} would emit ~{estimate} {generator.element_label}, "
                f"over the budget of {self.element_budget}"
            )


apply_debug_logging(globals(), logger=logger, skip={"StepStatus", "StepperState", "StepperPhase"})
