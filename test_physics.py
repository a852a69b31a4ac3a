"""Overlap tests and obstacle push-out."""
from physics import check_circle_collision, push_out_of_rect, rect_intersect, rects_overlap
from utils import Vec2


def test_touching_rects_do_not_overlap():
    assert not rect_intersect(0, 0, 10, 10, 10, 0, 10, 10)
    assert not rects_overlap((0, 0, 10, 10), (0, 10, 10, 10))


def test_overlapping_rects():
    assert rect_intersect(0, 0, 10, 10, 5, 5, 10, 10)
    assert rects_overlap((0, 0, 100, 100), (40, 40, 5, 5))


def test_circle_collision_is_strict():
    assert not check_circle_collision(Vec2(0, 0), 4, Vec2(10, 0), 6)
    assert check_circle_collision(Vec2(0, 0), 4, Vec2(9, 0), 6)


def test_push_out_along_dominant_axis():
    rect = (0, 0, 100, 100)
    assert push_out_of_rect(Vec2(90, 60), rect, 5) == Vec2(95, 60)
    assert push_out_of_rect(Vec2(55, 10), rect, 5) == Vec2(55, 5)
    assert push_out_of_rect(Vec2(10, 45), rect, 5) == Vec2(5, 45)


def test_push_out_tie_uses_vertical_axis():
    assert push_out_of_rect(Vec2(60, 60), (0, 0, 100, 100), 5) == Vec2(60, 65)


def test_push_out_at_exact_center_does_nothing():
    assert push_out_of_rect(Vec2(50, 50), (0, 0, 100, 100), 5) == Vec2(50, 50)
