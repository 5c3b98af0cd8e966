import math

import pytest

from bbox import BoundingBox


def test_default_box_is_unbounded() -> None:
    box = BoundingBox()
    assert box.min_x == -math.inf and box.max_y == math.inf
    assert box.point_intersects(1e12, -1e12)


@pytest.mark.parametrize("point", [(11, 11), (50, 20), (169.5, 39.5)])
def test_point_strictly_inside(point) -> None:
    assert BoundingBox(10, 10, 170, 40).point_intersects(*point)


@pytest.mark.parametrize("point", [(10, 20), (170, 20), (50, 10), (50, 40), (10, 10), (5, 5)])
def test_point_on_boundary_or_outside(point) -> None:
    assert not BoundingBox(10, 10, 170, 40).point_intersects(*point)


def test_set_replaces_all_fields() -> None:
    box = BoundingBox()
    box.set(1, 2, 3, 4)
    assert (box.min_x, box.min_y, box.max_x, box.max_y) == (1, 2, 3, 4)
    assert box == BoundingBox(1, 2, 3, 4)
    assert (box.width, box.height) == (2, 2)


@pytest.mark.parametrize("other, expected", [
    (BoundingBox(5, 5, 15, 15), True),      # overlap
    (BoundingBox(2, 2, 3, 3), True),        # contained
    (BoundingBox(10, 0, 20, 10), True),     # shared edge
    (BoundingBox(10, 10, 20, 20), True),    # shared corner
    (BoundingBox(11, 0, 20, 10), False),    # right of
    (BoundingBox(0, -10, 10, -1), False),   # above
])
def test_box_intersection_is_closed_and_symmetric(other, expected) -> None:
    box = BoundingBox(0, 0, 10, 10)
    assert box.box_intersects(other) is expected
    assert other.box_intersects(box) is expected


def test_degenerate_box_never_contains_points() -> None:
    box = BoundingBox(10, 10, 0, 0)
    assert not box.point_intersects(5, 5)
    assert not box.point_intersects(10, 10)


def test_degenerate_box_follows_separating_axis_rule() -> None:
    inverted = BoundingBox(10, 10, 0, 0)
    assert inverted.box_intersects(BoundingBox(0, 0, 10, 10))
    assert not inverted.box_intersects(BoundingBox(20, 20, 30, 30))
