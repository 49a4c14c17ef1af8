import math
from itertools import islice

import pytest

from gamegfx.geometry import Rectangle, Vec2

BASE = Rectangle(2.0, 2.0, 4.0, 4.0)
FULLY_CONTAINED = Rectangle(2.5, 2.5, 2.0, 2.0)
OVERLAPPING = Rectangle(3.0, 3.0, 4.0, 4.0)
SEPARATE = Rectangle(20.0, 20.0, 4.0, 4.0)
ADJACENT = Rectangle(6.0, 2.0, 4.0, 4.0)


def test_intersects():
    assert BASE.intersects(BASE)
    assert BASE.intersects(FULLY_CONTAINED)
    assert BASE.intersects(OVERLAPPING)
    assert not BASE.intersects(SEPARATE)
    assert not BASE.intersects(ADJACENT)


def test_contains():
    assert BASE.contains(BASE)
    assert BASE.contains(FULLY_CONTAINED)
    assert not BASE.contains(OVERLAPPING)
    assert not BASE.contains(SEPARATE)
    assert not BASE.contains(ADJACENT)


@pytest.mark.parametrize(
    "point, inside",
    [
        (Vec2(2.0, 2.0), True),
        (Vec2(4.0, 4.0), True),
        (Vec2(6.0, 2.0), False),
        (Vec2(2.0, 6.0), False),
        (Vec2(6.0, 6.0), False),
        (Vec2(1.0, 1.0), False),
        (Vec2(7.0, 7.0), False),
    ],
)
def test_contains_point(point, inside):
    assert BASE.contains_point(point) is inside


def test_combine():
    combined = Rectangle(16.0, 8.0, 32.0, 64.0).combine(Rectangle(8.0, 0.0, 32.0, 16.0))
    assert combined == Rectangle(8.0, 0.0, 40.0, 72.0)


def test_row():
    rects = list(islice(Rectangle.row(0.0, 0.0, 16.0, 16.0), 3))
    assert rects == [
        Rectangle(0.0, 0.0, 16.0, 16.0),
        Rectangle(16.0, 0.0, 16.0, 16.0),
        Rectangle(32.0, 0.0, 16.0, 16.0),
    ]


def test_column():
    rects = list(islice(Rectangle.column(0.0, 0.0, 16.0, 16.0), 3))
    assert rects == [
        Rectangle(0.0, 0.0, 16.0, 16.0),
        Rectangle(0.0, 16.0, 16.0, 16.0),
        Rectangle(0.0, 32.0, 16.0, 16.0),
    ]


def test_edges_and_corners():
    assert BASE.left() == 2.0
    assert BASE.top() == 2.0
    assert BASE.right() == 6.0
    assert BASE.bottom() == 6.0
    assert BASE.top_left() == Vec2(2.0, 2.0)
    assert BASE.top_right() == Vec2(6.0, 2.0)
    assert BASE.bottom_left() == Vec2(2.0, 6.0)
    assert BASE.bottom_right() == Vec2(6.0, 6.0)


def test_center():
    assert BASE.center() == Vec2(4.0, 4.0)
    assert Rectangle(0, 0, 5, 7).center() == Vec2(2, 3)


def test_combine_contains_both():
    a = Rectangle(1.0, 5.0, 3.0, 2.0)
    b = Rectangle(-4.0, 0.0, 2.0, 9.0)
    combined = a.combine(b)
    assert combined.contains(a)
    assert combined.contains(b)


def test_rectangles_are_hashable():
    assert len({Rectangle(1, 2, 3, 4), Rectangle(1, 2, 3, 4)}) == 1


def test_vec2_rotate_quarter_turn():
    rotated = Vec2(1.0, 0.0).rotate_z(math.pi / 2)
    assert rotated.x == pytest.approx(0.0, abs=1e-9)
    assert rotated.y == pytest.approx(1.0)


def test_vec2_rotate_round_trip():
    v = Vec2(3.0, -2.0)
    back = v.rotate_z(0.7).rotate_z(-0.7)
    assert back.x == pytest.approx(v.x)
    assert back.y == pytest.approx(v.y)


def test_vec2_map():
    assert Vec2(1.5, -2.25).map(abs) == Vec2(1.5, 2.25)


def test_vec2_arithmetic():
    assert Vec2(1.0, 2.0) + Vec2(3.0, 4.0) == Vec2(4.0, 6.0)
    assert Vec2(1.0, 2.0) - Vec2(3.0, 4.0) == Vec2(-2.0, -2.0)
    assert -Vec2(1.0, -2.0) == Vec2(-1.0, 2.0)
    assert Vec2(1.0, 2.0) * 2 == Vec2(2.0, 4.0)
    assert Vec2(4.0, 6.0) / Vec2(2.0, 3.0) == Vec2(2.0, 2.0)
    assert tuple(Vec2(5, 6)) == (5, 6)