import math

import numpy as np
import pytest

from fractal_engine.geometry import (
    Frame,
    Point,
    Segment,
    advance,
    as_array,
    bounding_box,
    heading_between,
    is_segment_list,
)
from fractal_engine.validate import ConfigurationError


def test_advance_moves_along_heading():
    pt = advance(Point(1.0, 2.0), 0.0, 3.0)
    assert pt == Point(4.0, 2.0)

    up = advance((0.0, 0.0), -math.pi / 2, 10.0)
    assert up.x == pytest.approx(0.0, abs=1e-12)
    assert up.y == pytest.approx(-10.0)


def test_advance_matches_explicit_formula():
    origin = Point(12.5, -3.25)
    heading = 1.234
    distance = 7.5
    expected = (origin.x + distance * math.cos(heading), origin.y + distance * math.sin(heading))
    assert advance(origin, heading, distance) == expected


def test_heading_between_is_atan2():
    assert heading_between((0, 0), (1, 1)) == pytest.approx(math.pi / 4)
    assert heading_between((2, 2), (2, 0)) == pytest.approx(-math.pi / 2)
    a, b = Point(3.0, 4.0), Point(-1.0, 7.0)
    assert heading_between(a, b) == math.atan2(3.0, -4.0)


def test_points_compare_equal_to_plain_tuples():
    assert Point(1.0, 2.0) == (1.0, 2.0)
    seg = Segment(Point(0.0, 0.0), Point(1.0, 1.0))
    assert seg.start.x == 0.0 and seg.end.y == 1.0


def test_frame_coerce_accepts_pairs_and_rejects_bad_sizes():
    assert Frame.coerce((400, 300)) == Frame(400.0, 300.0)
    assert Frame.coerce(Frame(10, 20)).center == (5.0, 10.0)
    for bad in [(0, 100), (100, -1), (float("nan"), 10), (float("inf"), 10)]:
        with pytest.raises(ConfigurationError):
            Frame.coerce(bad)
    with pytest.raises(ConfigurationError):
        Frame.coerce((1, 2, 3))


def test_as_array_shapes():
    polyline = (Point(0, 0), Point(1, 0), Point(1, 1))
    segments = (Segment(Point(0, 0), Point(1, 0)), Segment(Point(1, 0), Point(2, 2)))

    assert as_array(polyline).shape == (3, 2)
    assert as_array(segments).shape == (2, 2, 2)
    assert as_array(()).shape == (0, 2)
    assert np.allclose(as_array(segments)[1], [[1, 0], [2, 2]])
    assert is_segment_list(segments)
    assert not is_segment_list(polyline)
    assert not is_segment_list(())


def test_bounding_box_covers_every_vertex():
    segments = (Segment(Point(-1, 5), Point(3, 2)), Segment(Point(0, 0), Point(2, 7)))
    assert bounding_box(segments) == (-1.0, 0.0, 3.0, 7.0)
    assert bounding_box(()) == (0.0, 0.0, 0.0, 0.0)
