from math import cos, radians, sin

import pytest

from lsystem_tree.errors import UnbalancedBracketError
from lsystem_tree.turtle import (INITIAL_LENGTH, LENGTH_DECAY, MIN_LENGTH, TurtleState, constant_angle_jitter,
                                 interpret, turtle_3D, uniform_angle_jitter)


def _xyz(v):
    return (v[0], v[1], v[2])


def test_single_draw_records_two_points():
    points = interpret("F", constant_angle_jitter(12))
    assert len(points) == 2

    start, end = points
    assert _xyz(start.position) == pytest.approx((0.0, 0.0, 0.0))
    assert start.branch_length == INITIAL_LENGTH
    assert (end.position - start.position).length == pytest.approx(INITIAL_LENGTH, abs=1e-6)
    assert end.branch_length == pytest.approx(INITIAL_LENGTH - LENGTH_DECAY)
    assert end.angle.y == 12


def test_turn_rotates_about_x_then_jitter_about_y():
    points = interpret("+F", constant_angle_jitter(0))
    assert _xyz(points[1].position) == pytest.approx((0.0, cos(radians(30)), sin(radians(30))), abs=1e-6)
    assert points[1].angle.x == 30

    points = interpret("+F", constant_angle_jitter(30))
    expected = (sin(radians(30)) * sin(radians(30)), cos(radians(30)), sin(radians(30)) * cos(radians(30)))
    assert _xyz(points[1].position) == pytest.approx(expected, abs=1e-6)

    points = interpret("-F", constant_angle_jitter(0))
    assert _xyz(points[1].position) == pytest.approx((0.0, cos(radians(30)), -sin(radians(30))), abs=1e-6)


def test_second_draw_uses_decayed_length():
    points = interpret("FF", constant_angle_jitter(0))
    assert len(points) == 4
    assert _xyz(points[2].position) == pytest.approx((0.0, 1.0, 0.0), abs=1e-6)
    assert _xyz(points[3].position) == pytest.approx((0.0, 1.98, 0.0), abs=1e-6)


def test_length_is_floored_above_zero():
    points = interpret("F" * 60, constant_angle_jitter(0))
    lengths = [p.branch_length for p in points]
    assert min(lengths) > 0.0
    assert lengths[-1] == MIN_LENGTH
    head = lengths[:90]
    assert all(a >= b for a, b in zip(head, head[1:]))


def test_pop_restores_fork_point():
    points = interpret("[+F]F", constant_angle_jitter(5))
    assert len(points) == 4
    assert points[1].angle.x == 30
    assert _xyz(points[2].position) == pytest.approx((0.0, 0.0, 0.0))
    assert points[2].angle.x == 0
    assert points[2].angle.y == 0
    assert points[2].branch_length == INITIAL_LENGTH


def test_recorded_points_are_snapshots():
    t = turtle_3D(constant_angle_jitter(0))
    points = t.draw("F+")
    assert points[1].angle.x == 0
    assert t.cur_state.angle.x == 30
    assert points[1] is not t.cur_state


def test_symbols_without_draw_produce_no_points():
    assert interpret("[+-]", constant_angle_jitter(0)) == []
    assert interpret("", constant_angle_jitter(0)) == []


def test_unknown_symbols_are_ignored():
    assert len(interpret("XFY", constant_angle_jitter(0))) == 2


def test_unclosed_branch_is_tolerated():
    assert len(interpret("[F", constant_angle_jitter(0))) == 2


@pytest.mark.parametrize("symbols, index", [("F]", 1), ("]", 0), ("[]]", 2), ("[F]F]", 4)])
def test_unbalanced_pop_raises(symbols, index):
    with pytest.raises(UnbalancedBracketError) as info:
        interpret(symbols, constant_angle_jitter(0))
    assert info.value.index == index


def test_draw_resets_between_walks():
    t = turtle_3D(constant_angle_jitter(0))
    t.draw("+F")
    points = t.draw("F")
    assert len(points) == 2
    assert points[0].angle.x == 0


def test_state_copy_is_deep():
    state = TurtleState.origin()
    snapshot = state.copy()
    state.position.y = 4.0
    state.angle.x = 30.0
    assert snapshot.position.y == 0.0
    assert snapshot.angle.x == 0.0


def test_uniform_jitter_is_seeded_and_bounded():
    first = uniform_angle_jitter(3)
    second = uniform_angle_jitter(3)
    values = [first() for _ in range(500)]
    assert values == [second() for _ in range(500)]
    assert all(-30 <= v <= 30 for v in values)
    assert all(isinstance(v, int) for v in values)


def test_constant_jitter_range_checked():
    with pytest.raises(ValueError):
        constant_angle_jitter(31)
