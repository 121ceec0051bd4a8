import pytest

from rasterkit.lines import bresenham_line, dda


def test_dda_horizontal_unit_steps():
    points = list(dda(0, 0, 4, 0))
    assert points == [(0, 0), (1, 0), (2, 0), (3, 0), (4, 0)]


def test_dda_zero_length_yields_start():
    assert list(dda(3, 3, 3, 3)) == [(3, 3)]


def test_dda_sub_unit_line_yields_only_start():
    assert list(dda(0, 0, 0.5, 0.5)) == [(0, 0)]


def test_dda_point_count_and_endpoints():
    x0, y0, x1, y1 = 110, 110, 800, 300
    points = list(dda(x0, y0, x1, y1))
    assert len(points) == (x1 - x0) + 1
    assert points[0] == (x0, y0)
    assert points[-1] == pytest.approx((x1, y1))


def test_dda_points_lie_on_line():
    x0, y0, x1, y1 = 110, 110, 800, 300
    for x, y in dda(x0, y0, x1, y1):
        cross = (x - x0) * (y1 - y0) - (y - y0) * (x1 - x0)
        assert cross == pytest.approx(0, abs=1e-6)


def test_dda_steep_line_steps_along_y():
    points = list(dda(0, 0, 2, 6))
    ys = [y for _, y in points]
    assert ys == pytest.approx([0, 1, 2, 3, 4, 5, 6])


def test_dda_reverse_direction():
    forward = list(dda(0, 0, 10, 5))
    backward = list(dda(10, 5, 0, 0))
    assert len(forward) == len(backward)
    assert backward[-1] == pytest.approx(forward[0])


def test_dda_truncates_fractional_delta():
    points = list(dda(0, 0, 2.9, 0))
    assert len(points) == 3
    assert points[-1] == pytest.approx((2.9, 0))


def test_bresenham_starts_and_ends_on_x_range():
    points = list(bresenham_line(110, 10, 210, 30))
    assert points[0] == (110, 10)
    assert points[-1][0] == 210
    assert len(points) == 210 - 110 + 1


def test_bresenham_steps_are_unit_in_x_and_at_most_one_in_y():
    points = list(bresenham_line(110, 10, 210, 30))
    for (xa, ya), (xb, yb) in zip(points, points[1:]):
        assert xb - xa == 1
        assert yb - ya in (0, 1)


def test_bresenham_stays_near_ideal_line():
    x0, y0, x1, y1 = 110, 10, 210, 30
    for x, y in bresenham_line(x0, y0, x1, y1):
        ideal = y0 + (y1 - y0) * (x - x0) / (x1 - x0)
        assert abs(y - ideal) <= 1


def test_bresenham_horizontal_line():
    points = list(bresenham_line(0, 7, 5, 7))
    assert points == [(x, 7) for x in range(6)]


def test_bresenham_single_point_when_end_not_right_of_start():
    assert list(bresenham_line(4, 4, 4, 9)) == [(4, 4)]
    assert list(bresenham_line(4, 4, 1, 1)) == [(4, 4)]