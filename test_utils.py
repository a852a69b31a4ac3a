"""Vector and angle helpers."""
import pytest

from utils import Vec2, clamp, dist, heading_deg, normalize_angle_deg


def test_heading_points_up_at_zero():
    assert heading_deg(Vec2(0, -1)) == pytest.approx(0.0)
    assert heading_deg(Vec2(1, 0)) == pytest.approx(90.0)
    assert heading_deg(Vec2(0, 1)) == pytest.approx(180.0)
    assert heading_deg(Vec2(-1, 0)) == pytest.approx(270.0)


@pytest.mark.parametrize(
    "angle, expected",
    [(270.0, -90.0), (-270.0, 90.0), (180.0, 180.0), (-180.0, 180.0), (540.0, 180.0), (10.0, 10.0)],
)
def test_normalize_angle_wraps_into_half_open_range(angle, expected):
    assert normalize_angle_deg(angle) == pytest.approx(expected)


def test_perp_rotates_quarter_turn():
    assert Vec2(1, 0).perp() == Vec2(0, 1)
    assert Vec2(0, 1).perp() == Vec2(-1, 0)


def test_division_by_zero_gives_zero_vector():
    assert Vec2(3, 4) / 0 == Vec2(0.0, 0.0)


def test_normalized_zero_vector_stays_zero():
    assert Vec2(0, 0).normalized().is_zero()
    assert Vec2(3, 4).normalized().length() == pytest.approx(1.0)


def test_clamp_and_dist():
    assert clamp(5, 0, 3) == 3
    assert clamp(-1, 0, 3) == 0
    assert clamp(2, 0, 3) == 2
    assert dist(Vec2(0, 0), Vec2(3, 4)) == pytest.approx(5.0)
