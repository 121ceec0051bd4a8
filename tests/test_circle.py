import math

import pytest

from rasterkit.circle import bresenham_circle, eight_way_symmetry


def test_eight_way_symmetry_order():
    assert eight_way_symmetry(0, 0, 1, 2) == (
        (1, 2),
        (2, 1),
        (-2, 1),
        (-1, 2),
        (-1, -2),
        (-2, -1),
        (2, -1),
        (1, -2),
    )


def test_eight_way_symmetry_translates_with_centre():
    base = eight_way_symmetry(0, 0, 3, 5)
    shifted = eight_way_symmetry(100, 100, 3, 5)
    assert shifted == tuple((x + 100, y + 100) for x, y in base)


def test_circle_starts_with_top_point():
    points = list(bresenham_circle(100, 100, 20))
    assert points[0] == (100, 120)
    assert points[:8] == list(eight_way_symmetry(100, 100, 0, 20))


def test_circle_point_count_is_multiple_of_eight():
    for radius in (1, 5, 20, 37):
        assert len(list(bresenham_circle(0, 0, radius))) % 8 == 0


@pytest.mark.parametrize("radius", [1, 3, 10, 20, 50])
def test_circle_points_near_radius(radius):
    for x, y in bresenham_circle(100, 100, radius):
        assert abs(math.hypot(x - 100, y - 100) - radius) <= 1


@pytest.mark.parametrize("radius", [4, 20])
def test_circle_is_symmetric(radius):
    cx, cy = 100, 100
    points = set(bresenham_circle(cx, cy, radius))
    for x, y in points:
        assert (2 * cx - x, y) in points
        assert (x, 2 * cy - y) in points
        assert (cx + (y - cy), cy + (x - cx)) in points


def test_circle_reaches_all_four_extremes():
    points = set(bresenham_circle(100, 100, 20))
    assert {(100, 120), (120, 100), (100, 80), (80, 100)} <= points