from math import radians

import pytest

from lsystem_tree.geometry import BASE_RADIUS_FACTOR, ROTATION_ORDER, build, get_point_pairs
from lsystem_tree.grammar import DEFAULT_RULES, expand
from lsystem_tree.turtle import constant_angle_jitter, interpret


@pytest.mark.parametrize("num_points, pairs", [
    (0, []),
    (1, []),
    (2, [(0, 1)]),
    (4, [(0, 2)]),
    (6, [(0, 2), (2, 4)]),
    (10, [(0, 2), (2, 4), (4, 6), (6, 8)]),
])
def test_point_pairs(num_points, pairs):
    assert get_point_pairs(num_points) == pairs


def test_single_segment_tree():
    points = interpret(expand("F", DEFAULT_RULES, 0), constant_angle_jitter(10))
    branches = build(points)
    assert len(branches) == 1

    b = branches[0]
    assert b.length == pytest.approx(1.0, abs=1e-6)
    assert b.radius == pytest.approx(BASE_RADIUS_FACTOR * b.length)
    assert tuple(b.position) == pytest.approx((0.0, 0.0, 0.0))
    assert tuple(b.scale) == pytest.approx((b.radius, b.length / 2.0, b.radius))
    assert tuple(b.rotation) == (0.0, 10.0, 0.0)


def test_pairs_join_consecutive_segment_starts():
    points = interpret("FF", constant_angle_jitter(0))
    branches = build(points)
    assert len(branches) == 1
    assert tuple(branches[0].start) == pytest.approx((0.0, 0.0, 0.0))
    assert tuple(branches[0].end) == pytest.approx((0.0, 1.0, 0.0), abs=1e-6)
    assert branches[0].rotation == points[2].angle


def test_branch_count_for_iterations():
    points = interpret(expand("F", DEFAULT_RULES, 2), constant_angle_jitter(0))
    assert len(points) == 50
    assert len(build(points)) == 24


def test_no_points_no_branches():
    assert build([]) == []


def test_radius_factor():
    points = interpret("F", constant_angle_jitter(0))
    assert build(points, radius_factor=0.25)[0].radius == pytest.approx(0.25, abs=1e-6)


def test_rotation_euler():
    points = interpret("+F", constant_angle_jitter(-20))
    euler = build(points)[0].rotation_euler()
    assert euler.order == ROTATION_ORDER
    assert tuple(euler) == pytest.approx((radians(30), radians(-20), 0.0), abs=1e-6)


def test_descriptor_is_hashable_and_immutable():
    points = interpret("+F", constant_angle_jitter(5))
    first = build(points)[0]
    second = build(points)[0]
    assert first == second
    assert hash(first) == hash(second)
    assert len({first, second}) == 1
    assert first.rotation.is_frozen

    with pytest.raises(TypeError):
        first.start.x = 3.0

    # Recorded turtle points are not frozen by building.
    assert not points[1].angle.is_frozen
    position = first.position
    position.x = 3.0
    assert first.start.x == 0.0
