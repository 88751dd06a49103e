"""Render sink implementations for hosts and tooling."""

from .mpl import MatplotlibSink
from .recording import RecordingSink
from .tikz import TikzSink, generate_tikz_code, generate_tikz_document

__all__ = [
    "MatplotlibSink",
    "RecordingSink",
    "TikzSink",
    "generate_tikz_code",
    "generate_tikz_document",
]
