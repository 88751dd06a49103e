"""Render sink drawing onto a matplotlib ``Axes``."""

from __future__ import annotations

import logging
from typing import List, Optional

from matplotlib.artist import Artist
from matplotlib.axes import Axes
from matplotlib.collections import LineCollection

from ..geometry import Frame, Geometry, as_array, is_segment_list

logger = logging.getLogger(__name__)

POLYLINE_COLOR = "blue"
SEGMENT_COLOR = "green"


class MatplotlibSink:
    """Draws a polyline as one ``Line2D`` and a segment list as one ``LineCollection``.

    When ``frame`` is given the axes are fixed to it with the y axis pointing
    down, matching the screen coordinates the generators emit.
    """

    def __init__(
        self,
        ax: Axes,
        frame: Optional[Frame] = None,
        *,
        color: Optional[str] = None,
        linewidth: float = 1.0,
    ) -> None:
        self.ax = ax
        self.color = color
        self.linewidth = linewidth
        self._artists: List[Artist] = []
        if frame is not None:
            ax.set_xlim(0, frame.width)
            ax.set_ylim(frame.height, 0)
            ax.set_aspect("equal", adjustable="box")

    @property
    def artists(self) -> List[Artist]:
        return list(self._artists)

    def clear(self) -> None:
        for artist in self._artists:
            artist.remove()
        self._artists = []

    def replace(self, geometry: Geometry) -> None:
        self.clear()
        if not geometry:
            return
        arr = as_array(geometry)
        if is_segment_list(geometry):
            artist = LineCollection(
                arr,
                colors=self.color or SEGMENT_COLOR,
                linewidths=self.linewidth,
            )
            self.ax.add_collection(artist)
        else:
            (artist,) = self.ax.plot(
                arr[:, 0],
                arr[:, 1],
                color=self.color or POLYLINE_COLOR,
                linewidth=self.linewidth,
            )
        self._artists.append(artist)
        logger.debug("Drew %d element(s) on %r", len(geometry), self.ax)
