"""Enemy pursuit patterns and terrain avoidance."""
import math
import random

import pytest

from enemy import Enemy
from enemy_behaviors.base import MovementPattern
from layout import Obstacle
from logic import EnemyProfile
from utils import Vec2, dist


def make_enemy(pattern=MovementPattern.DIRECT, pos=None):
    return Enemy.spawn(
        pos=pos or Vec2(100, 100),
        profile=EnemyProfile(speed=2.0, health=3),
        pattern=pattern,
    )


def test_pattern_cycle_is_round_robin():
    assert MovementPattern.DIRECT.next() is MovementPattern.ZIGZAG
    assert MovementPattern.ZIGZAG.next() is MovementPattern.FLANKING
    assert MovementPattern.FLANKING.next() is MovementPattern.DIRECT


def test_spawn_copies_profile():
    e = make_enemy()
    assert e.health == 3
    assert e.max_health == 3
    assert e.width == 35
    assert e.hit_radius == 17


def test_direct_pursuit_moves_at_speed():
    e = make_enemy()
    e.pursue(Vec2(400, 500), (), 0.0, random.Random(1))
    assert e.pos.x == pytest.approx(101.2)
    assert e.pos.y == pytest.approx(101.6)
    assert e.turret_heading == pytest.approx(math.degrees(math.atan2(400, 300)) + 90)
    # Body eases a tenth of the way towards the travel heading.
    assert e.body_heading == pytest.approx(e.turret_heading * 0.1)


def test_flanking_circles_inside_range():
    e = make_enemy(MovementPattern.FLANKING)
    e.pursue(Vec2(200, 100), (), 0.0, random.Random(1))
    assert e.pos.x == pytest.approx(100)
    assert e.pos.y == pytest.approx(101.6)


def test_flanking_closes_in_from_afar():
    e = make_enemy(MovementPattern.FLANKING)
    e.pursue(Vec2(400, 100), (), 0.0, random.Random(1))
    assert e.pos.x == pytest.approx(102)
    assert e.pos.y == pytest.approx(100)


def test_zigzag_weaves_with_simulation_time():
    e = make_enemy(MovementPattern.ZIGZAG)
    e.pursue(Vec2(400, 100), (), 0.0, random.Random(1))
    assert e.pos.x == pytest.approx(102)
    assert e.pos.y == pytest.approx(100)

    e = make_enemy(MovementPattern.ZIGZAG)
    e.pursue(Vec2(400, 100), (), 250 * math.pi, random.Random(1))
    assert e.pos.x == pytest.approx(102)
    assert e.pos.y == pytest.approx(101.4)
    assert e.last_move_time == pytest.approx(250 * math.pi)


def test_blocked_enemy_switches_pattern_and_nudges():
    e = make_enemy()
    bush = Obstacle(118, 80, 40, 40, "bush")
    start = e.pos.copy()
    e.pursue(Vec2(400, 100), (bush,), 0.0, random.Random(7))
    assert e.pattern is MovementPattern.ZIGZAG
    assert dist(start, e.pos) == pytest.approx(1.0)


def test_enemy_on_top_of_player_stays_put():
    e = make_enemy()
    e.turret_heading = 33.0
    e.pursue(Vec2(100, 100), (), 0.0, random.Random(1))
    assert e.pos == Vec2(100, 100)
    assert e.turret_heading == 33.0


def test_destroyed_enemy_does_not_move():
    e = make_enemy()
    e.active = False
    e.pursue(Vec2(400, 500), (), 0.0, random.Random(1))
    assert e.pos == Vec2(100, 100)
