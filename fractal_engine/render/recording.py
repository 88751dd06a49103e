"""In-memory render sink, used by the CLI and by tests."""

from __future__ import annotations

from typing import List, Optional

from ..geometry import Geometry


class RecordingSink:
    """Keeps every frame it is handed; ``current`` is what a screen would show."""

    def __init__(self) -> None:
        self.history: List[Geometry] = []
        self.current: Optional[Geometry] = None
        self.clear_count = 0

    @property
    def replace_count(self) -> int:
        return len(self.history)

    def replace(self, geometry: Geometry) -> None:
        self.current = tuple(geometry)
        self.history.append(self.current)

    def clear(self) -> None:
        self.current = None
        self.clear_count += 1
