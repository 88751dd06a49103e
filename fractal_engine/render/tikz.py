"""Fractal geometry → TikZ export."""

from __future__ import annotations

import math
from typing import List, Optional, Sequence, Tuple

from ..geometry import Geometry, bounding_box, is_segment_list
from .tex_utils import latex_escape

NORMALIZED_SPAN = 8.0

standalone_tpl = r"""\documentclass[border=2pt]{standalone}
\usepackage[utf8]{inputenc}
\usepackage{adjustbox}
\usepackage{tikz}
\tikzset{
  %% global sizes (scale-aware; override per figure if needed)
  fr/line width/.store in=\frLW,   fr/line width=0.4pt,
  curve/.style={line width=\frLW, line join=round},
  branch/.style={line width=\frLW, line cap=round},
}
\begin{document}
\begin{minipage}[t]{\linewidth}
%s

\begin{adjustbox}{max width=\linewidth, max totalheight=\textheight, keepaspectratio}
%s
\end{adjustbox}
\end{minipage}
\end{document}
"""


def generate_tikz_document(
    geometry: Geometry,
    *,
    title: Optional[str] = None,
    normalize: bool = False,
) -> str:
    """Render a standalone LaTeX document around :func:`generate_tikz_code`."""

    header = ""
    if title:
        header = "\\noindent\\textbf{" + latex_escape(title.strip()) + "}\\par\\vspace{4pt}\n"
    return standalone_tpl % (header, generate_tikz_code(geometry, normalize=normalize))


def generate_tikz_code(geometry: Geometry, *, normalize: bool = False) -> str:
    """Emit a ``tikzpicture`` for a polyline or a list of segments.

    Generators work in screen space (y down); TikZ is y up, so every y value
    is negated. With ``normalize`` the drawing is centred on the origin and
    scaled so its larger side spans ``NORMALIZED_SPAN`` units.
    """

    transform = _make_transform(geometry, normalize=normalize)
    lines: List[str] = ["\\begin{tikzpicture}"]
    if is_segment_list(geometry):
        for seg in geometry:
            a = transform(seg.start)
            b = transform(seg.end)
            lines.append(f"  \\draw[branch] {_coord(a)} -- {_coord(b)};")
    elif geometry:
        points = [transform(pt) for pt in geometry]
        lines.extend(_emit_polyline(points))
    lines.append("\\end{tikzpicture}")
    return "\n".join(lines)


def _emit_polyline(points: Sequence[Tuple[float, float]], per_line: int = 4) -> List[str]:
    if len(points) == 1:
        return [f"  \\fill {_coord(points[0])} circle[radius=0.5pt];"]
    coords = [_coord(pt) for pt in points]
    rows = [" -- ".join(coords[i:i + per_line]) for i in range(0, len(coords), per_line)]
    body = "\n    -- ".join(rows)
    return [f"  \\draw[curve] {body};"]


def _make_transform(geometry: Geometry, *, normalize: bool):
    if not normalize or not geometry:
        return lambda pt: (float(pt[0]), -float(pt[1]))
    min_x, min_y, max_x, max_y = bounding_box(geometry)
    span = max(max_x - min_x, max_y - min_y, 1e-9)
    cx = 0.5 * (min_x + max_x)
    cy = 0.5 * (min_y + max_y)
    scale = NORMALIZED_SPAN / span
    return lambda pt: ((float(pt[0]) - cx) * scale, -(float(pt[1]) - cy) * scale)


def _coord(pt: Tuple[float, float]) -> str:
    return f"({_format_float(pt[0])}, {_format_float(pt[1])})"


def _format_float(value: float) -> str:
    if math.isnan(value) or math.isinf(value):
        raise ValueError("Cannot format non-finite float for TikZ output")
    formatted = f"{value:.4f}"
    formatted = formatted.rstrip("0").rstrip(".")
    if formatted in ("", "-0"):
        return "0"
    return formatted


class TikzSink:
    """Render sink that keeps the latest frame and renders it to TikZ on demand."""

    def __init__(self, *, title: Optional[str] = None, normalize: bool = True) -> None:
        self.title = title
        self.normalize = normalize
        self.geometry: Geometry = ()

    def replace(self, geometry: Geometry) -> None:
        self.geometry = tuple(geometry)

    def clear(self) -> None:
        self.geometry = ()

    def code(self) -> str:
        return generate_tikz_code(self.geometry, normalize=self.normalize)

    def document(self) -> str:
        return generate_tikz_document(self.geometry, title=self.title, normalize=self.normalize)


__all__ = [
    "generate_tikz_code",
    "generate_tikz_document",
    "TikzSink",
]
