import math

import pytest

from fractal_engine.generators import (
    BinaryBranchGenerator,
    SymmetricBranchGenerator,
    create_generator,
    even_spread,
    pair_spread,
)
from fractal_engine.geometry import Frame, Segment, heading_between
from fractal_engine.params import ShapeParameters, binary_tree, symmetric_tree
from fractal_engine.validate import ConfigurationError

FRAME = Frame(400, 400)


def test_depth_zero_and_one_draw_the_trunk():
    generator = BinaryBranchGenerator()
    for depth in (0, 1):
        result = generator.generate(depth, FRAME)
        assert len(result) == 1
        (trunk,) = result
        assert trunk.start == (200.0, 0.83 * 400)
        assert trunk.end.x == pytest.approx(200.0)
        assert trunk.end.y == pytest.approx(0.83 * 400 - 80.0)


@pytest.mark.parametrize('depth', [1, 2, 3, 4, 5, 6, 8])
def test_binary_segment_count_without_escape(depth):
    generator = BinaryBranchGenerator(binary_tree(min_segment_size=0))
    result = generator.generate(depth, FRAME)
    assert len(result) == 2 ** depth - 1
    assert not result.terminal
    assert generator.estimate_element_count(depth, FRAME) == len(result)


def test_symmetric_with_two_children_matches_binary_exactly():
    params = ShapeParameters(max_depth=6, angle_delta=0.9, length_scale=0.7, child_offset=0.25)
    binary = BinaryBranchGenerator(params)
    symmetric = SymmetricBranchGenerator(params.with_changes(child_count=2))
    for depth in range(0, 7):
        assert symmetric.generate(depth, FRAME).geometry == binary.generate(depth, FRAME).geometry


def test_binary_ignores_child_count():
    params = ShapeParameters(max_depth=4, child_count=5)
    assert len(BinaryBranchGenerator(params).generate(3, FRAME)) == 7


def test_children_are_spread_across_angle_delta():
    params = symmetric_tree(child_count=3, angle_delta=math.pi / 2)
    result = SymmetricBranchGenerator(params).generate(2, FRAME)
    trunk, children = result[0], result[1:]
    assert len(children) == 3
    headings = [heading_between(seg.start, seg.end) for seg in children]
    assert headings == pytest.approx([-3 * math.pi / 4, -math.pi / 2, -math.pi / 4])
    for seg in children:
        assert seg.start == trunk.end
        assert math.dist(seg.start, seg.end) == pytest.approx(80 * 0.75)


def test_spread_strategies_agree_for_pairs():
    assert pair_spread(0.3, 1.1) == even_spread(0.3, 1.1, 2)
    assert even_spread(0.0, math.pi, 5) == pytest.approx(
        [-math.pi / 2, -math.pi / 4, 0.0, math.pi / 4, math.pi / 2]
    )


def test_symmetric_four_children_three_levels():
    params = symmetric_tree(child_count=4, angle_delta=2 * math.pi / 5)
    generator = SymmetricBranchGenerator(params)
    # Depths 0 and 1 both draw the trunk alone, so three levels appear at depth 3.
    assert len(generator.generate(3, FRAME)) == 1 + 4 + 16
    assert len(generator.generate(2, FRAME)) == 1 + 4


def test_child_offset_pulls_children_back_along_parent():
    result = BinaryBranchGenerator(binary_tree(child_offset=1.0)).generate(2, FRAME)
    trunk = result[0]
    for child in result[1:]:
        assert child.start.x == pytest.approx(trunk.start.x)
        assert child.start.y == pytest.approx(trunk.start.y)


def test_child_offset_rotation_turns_the_pullback():
    params = symmetric_tree(child_offset=0.5, child_offset_rotation=math.pi / 2)
    result = SymmetricBranchGenerator(params).generate(2, FRAME)
    trunk = result[0]
    # Trunk heads up (-pi/2); rotating by +pi/2 pulls back along +x.
    expected = (trunk.end.x - 40.0, trunk.end.y)
    for child in result[1:]:
        assert child.start.x == pytest.approx(expected[0])
        assert child.start.y == pytest.approx(expected[1], abs=1e-9)


def test_size_escape_stops_before_depth_limit():
    params = binary_tree(min_segment_size=50, length_scale=0.5, max_depth=10)
    frame = Frame(500, 500)
    generator = BinaryBranchGenerator(params)

    result = generator.generate(10, frame)

    assert math.dist(result[0].start, result[0].end) == pytest.approx(100.0)
    assert len(result) == 3
    assert result.terminal
    assert result.escaped_at == 2
    assert generator.escape_level(frame) == 2
    assert generator.deepest_depth(frame) == 2


def test_no_escape_when_children_stay_long_enough():
    params = binary_tree(min_segment_size=50, length_scale=0.5, max_depth=10)
    result = BinaryBranchGenerator(params).generate(1, Frame(500, 500))
    assert len(result) == 1
    assert not result.terminal
    assert result.escaped_at is None


def test_zero_min_size_disables_escape():
    params = binary_tree(min_segment_size=0, length_scale=0.1, max_depth=6)
    result = BinaryBranchGenerator(params).generate(6, FRAME)
    assert len(result) == 63
    assert not result.terminal


def test_corrected_params_still_draw_base_shape(caplog):
    params = ShapeParameters(max_depth=0, min_segment_size=0)
    with caplog.at_level('WARNING', logger='fractal_engine.generators.branching'):
        generator = BinaryBranchGenerator(params)
    assert 'max_depth=1' in caplog.text
    assert generator.params.max_depth == 1
    assert len(generator.generate(0, FRAME)) == 1


def test_size_only_mode_has_no_depth_ceiling():
    generator = SymmetricBranchGenerator(symmetric_tree(min_segment_size=10))
    assert generator.depth_ceiling is None
    assert generator.escape_level(FRAME) == 8
    assert generator.deepest_depth(FRAME) == 8


def test_size_only_mode_that_never_shrinks_is_rejected():
    with pytest.raises(ConfigurationError):
        SymmetricBranchGenerator(symmetric_tree(length_scale=1.0))


def test_generate_is_idempotent():
    generator = SymmetricBranchGenerator(symmetric_tree(child_count=3, child_offset=0.2))
    assert generator.generate(4, FRAME) == generator.generate(4, FRAME)


def test_segments_are_segment_instances():
    result = BinaryBranchGenerator().generate(3, FRAME)
    assert all(isinstance(seg, Segment) for seg in result)


def test_create_generator_by_family_name():
    assert isinstance(create_generator('binary'), BinaryBranchGenerator)
    assert isinstance(create_generator(' Symmetric '), SymmetricBranchGenerator)
    generator = create_generator('symmetric', symmetric_tree(child_count=6))
    assert generator.child_count == 6
    with pytest.raises(ConfigurationError):
        create_generator('dragon')


def test_generation_result_behaves_like_a_sequence():
    result = BinaryBranchGenerator().generate(2, FRAME)
    assert len(result) == 3
    assert list(result) == list(result.geometry)
    assert result[-1] == result.geometry[-1]
    assert result[1:] == result.geometry[1:]
    assert result[0] in result


@pytest.mark.parametrize('cls', [BinaryBranchGenerator, SymmetricBranchGenerator])
def test_negative_max_depth_is_rejected_for_trees(cls):
    with pytest.raises(ConfigurationError, match='max_depth'):
        cls(ShapeParameters(max_depth=-1, min_segment_size=1.0))


def test_binary_preset_starts_children_at_parent_start():
    result = BinaryBranchGenerator().generate(3, FRAME)
    root = result[0].start
    for seg in result[1:]:
        assert seg.start.x == pytest.approx(root.x)
        assert seg.start.y == pytest.approx(root.y)
