"""Shell flight, trails and bounds."""
import pytest

from logic import BalanceLogic
from projectile import Projectile, make_projectile
from utils import Vec2


def test_shell_moves_by_speed_and_records_trail():
    p = Projectile(pos=Vec2(10, 10), direction=Vec2(1, 0))
    assert p.update(100, 100)
    assert p.pos == Vec2(17, 10)
    assert list(p.trail) == [(10, 10)]


def test_shell_leaving_the_battlefield_is_spent():
    p = Projectile(pos=Vec2(98, 50), direction=Vec2(1, 0))
    assert not p.update(100, 100)
    assert not p.active


def test_shell_exactly_on_the_edge_stays_live():
    p = Projectile(pos=Vec2(93, 50), direction=Vec2(1, 0))
    assert p.update(100, 100)
    assert p.pos.x == pytest.approx(100)


def test_trail_keeps_last_five_positions():
    p = Projectile(pos=Vec2(0, 500), direction=Vec2(1, 0))
    for _ in range(7):
        p.update(1000, 1000)
    assert len(p.trail) == 5
    assert p.trail[-1] == (42, 500)


def test_spent_shell_does_not_move():
    p = Projectile(pos=Vec2(10, 10), direction=Vec2(1, 0), active=False)
    assert not p.update(100, 100)
    assert p.pos == Vec2(10, 10)


def test_heading_follows_direction():
    assert Projectile(pos=Vec2(0, 0), direction=Vec2(0, -1)).heading == pytest.approx(0.0)
    assert Projectile(pos=Vec2(0, 0), direction=Vec2(1, 0)).heading == pytest.approx(90.0)


def test_make_projectile_uses_balance_ballistics():
    b = BalanceLogic(bullet_speed=9.0, trail_length=3)
    origin = Vec2(5, 5)
    p = make_projectile(origin, Vec2(0, 1), b)
    assert p.speed == 9.0
    assert p.trail.maxlen == 3
    assert p.pos == origin and p.pos is not origin
    assert p.bounding_box() == (1.0, -2.0, 8.0, 14.0)
