"""A minimal frame clock for hosts without their own refresh callback."""

from __future__ import annotations

import logging
from typing import Callable, List, Optional

logger = logging.getLogger(__name__)

TickCallback = Callable[[], object]


class FrameClock:
    """Delivers zero-argument ticks to subscribers, strictly one after another.

    Subscribers may unsubscribe from inside their own callback; the change
    takes effect from the next frame.
    """

    def __init__(self) -> None:
        self._subscribers: List[TickCallback] = []
        self.frame = 0

    def subscribe(self, callback: TickCallback) -> None:
        if callback not in self._subscribers:
            self._subscribers.append(callback)

    def unsubscribe(self, callback: TickCallback) -> None:
        if callback in self._subscribers:
            self._subscribers.remove(callback)

    @property
    def subscribers(self) -> int:
        return len(self._subscribers)

    def advance(self, frames: int = 1) -> int:
        """Deliver ``frames`` ticks; return how many were delivered to anyone."""

        delivered = 0
        for _ in range(frames):
            if not self._subscribers:
                break
            self.frame += 1
            for callback in list(self._subscribers):
                callback()
            delivered += 1
        return delivered


def run_to_completion(stepper, clock: Optional[FrameClock] = None, *, max_ticks: int = 100_000) -> int:
    """Tick a started ``stepper`` until it stops running; return the ticks used."""

    clock = clock or FrameClock()
    ticks = 0

    def _on_frame() -> None:
        nonlocal ticks
        ticks += 1
        stepper.tick()
        if not stepper.running:
            clock.unsubscribe(_on_frame)

    clock.subscribe(_on_frame)
    try:
        while stepper.running:
            if ticks >= max_ticks:
                raise RuntimeError(f"stepper still running after {max_ticks} ticks")
            clock.advance()
    finally:
        clock.unsubscribe(_on_frame)
    logger.debug("Run completed after %d tick(s)", ticks)
    return ticks
