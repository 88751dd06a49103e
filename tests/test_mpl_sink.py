import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt
import numpy as np
import pytest

from fractal_engine import BinaryBranchGenerator, DepthStepper, EdgeBendingGenerator, koch_snowflake, run_to_completion
from fractal_engine.geometry import Frame
from fractal_engine.render import MatplotlibSink
from fractal_engine.sinks import RenderSink

FRAME = Frame(400, 400)


@pytest.fixture
def ax():
    fig, axes = plt.subplots()
    yield axes
    plt.close(fig)


def test_segments_become_one_line_collection(ax):
    sink = MatplotlibSink(ax, FRAME)
    geometry = BinaryBranchGenerator().generate(3, FRAME).geometry

    sink.replace(geometry)

    assert len(ax.collections) == 1
    assert len(ax.lines) == 0
    segments = ax.collections[0].get_segments()
    assert len(segments) == 7
    assert np.allclose(segments[0], [geometry[0].start, geometry[0].end])


def test_polyline_becomes_one_line(ax):
    sink = MatplotlibSink(ax, FRAME, color="red")
    geometry = EdgeBendingGenerator().generate(1, FRAME).geometry

    sink.replace(geometry)

    assert len(ax.lines) == 1
    assert len(ax.lines[0].get_xdata()) == 13
    assert ax.lines[0].get_color() == "red"


def test_replace_and_clear_remove_previous_artists(ax):
    sink = MatplotlibSink(ax)
    sink.replace(BinaryBranchGenerator().generate(2, FRAME).geometry)
    sink.replace(EdgeBendingGenerator().generate(0, FRAME).geometry)
    assert len(ax.collections) == 0
    assert len(ax.lines) == 1

    sink.clear()
    assert len(ax.lines) == 0
    assert sink.artists == []


def test_frame_sets_screen_oriented_axes(ax):
    MatplotlibSink(ax, FRAME)
    assert ax.get_xlim() == (0.0, 400.0)
    assert ax.get_ylim() == (400.0, 0.0)


def test_matplotlib_sink_drives_a_full_run(ax):
    sink = MatplotlibSink(ax, FRAME)
    assert isinstance(sink, RenderSink)
    stepper = DepthStepper(sink, FRAME)
    stepper.start(EdgeBendingGenerator(koch_snowflake(max_depth=2, draw_every_n_ticks=1)))
    run_to_completion(stepper)
    assert len(ax.lines) == 1
    assert len(ax.lines[0].get_xdata()) == 49
