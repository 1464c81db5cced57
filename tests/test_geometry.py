import math

import pytest

from tagcloud_layout.geometry import (
    Point,
    Rectangle,
    Size,
    distance,
    intersection,
    intersection_area,
    intersects,
)


def rect(x, y, w, h):
    return Rectangle(Point(x, y), Size(w, h))


def test_rectangle_edges_and_corners():
    r = rect(10, 20, 30, 40)

    assert (r.left, r.top, r.right, r.bottom) == (10, 20, 40, 60)
    assert (r.width, r.height, r.area) == (30, 40, 1200)
    assert r.corners() == (Point(10, 20), Point(40, 20), Point(40, 60), Point(10, 60))
    assert r.to_dict() == {"x": 10, "y": 20, "width": 30, "height": 40}


def test_from_center_truncates_half_size():
    r = Rectangle.from_center(Point(350, 350), Size(51, 21))

    assert r.location == Point(325, 340)
    assert r.center == Point(350, 350)


def test_from_center_keeps_real_sizes_exact():
    r = Rectangle.from_center(Point(1.0, 1.0), Size(3.0, 1.0))

    assert r.location == Point(-0.5, 0.5)


def test_point_arithmetic_and_value_semantics():
    assert Point(1, 2) + Point(3, 4) == Point(4, 6)
    assert Point(1, 2) - Point(3, 4) == Point(-2, -2)
    with pytest.raises(AttributeError):
        Point(1, 2).x = 5  # type: ignore[misc]


@pytest.mark.parametrize(
    'size, expected',
    [(Size(1, 1), True), (Size(0, 1), False), (Size(1, 0), False), (Size(-1, -1), False)],
)
def test_size_is_positive(size, expected):
    assert size.is_positive is expected


@pytest.mark.parametrize(
    'a, b, expected',
    [
        (rect(0, 0, 10, 10), rect(5, 5, 10, 10), True),
        (rect(0, 0, 10, 10), rect(2, 2, 3, 3), True),
        (rect(0, 0, 10, 10), rect(10, 0, 10, 10), False),
        (rect(0, 0, 10, 10), rect(0, 10, 10, 10), False),
        (rect(0, 0, 10, 10), rect(10, 10, 5, 5), False),
        (rect(0, 0, 10, 10), rect(20, 20, 5, 5), False),
        (rect(0, 0, 10, 10), rect(-5, 3, 30, 2), True),
    ],
)
def test_intersects_is_symmetric(a, b, expected):
    assert intersects(a, b) is expected
    assert intersects(b, a) is expected
    assert a.intersects_with(b) is expected


def test_intersection_and_area():
    a = rect(0, 0, 10, 10)
    b = rect(5, 6, 10, 10)

    assert intersection(a, b) == rect(5, 6, 5, 4)
    assert intersection_area(a, b) == 20
    assert intersection(a, rect(10, 0, 5, 5)) is None
    assert intersection_area(a, rect(10, 0, 5, 5)) == 0


def test_distance():
    assert distance(Point(0, 0), Point(3, 4)) == pytest.approx(5.0)
    assert distance(Point(1, 1), Point(1, 1)) == 0.0
    assert math.isclose(distance(Point(-1, 0), Point(1, 0)), 2.0)


def test_half_truncates_numpy_integers():
    import numpy as np

    assert Size(np.int64(51), np.int64(21)).half() == Point(25, 10)
    assert Rectangle.from_center(Point(350, 350), Size(np.int32(51), np.int32(21))).location == Point(325, 340)


def test_nan_size_is_not_positive():
    assert Size(math.nan, 10).is_positive is False
    assert Size(10, math.nan).is_positive is False
