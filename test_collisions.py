"""Collision resolution: shells, tank contact and terrain."""
import pytest

from collisions import resolve_collisions
from enemy import Enemy
from enemy_behaviors.base import MovementPattern
from layout import Obstacle
from level import reset_match, update_match
from logic import DifficultyLogic
from projectile import Projectile
from utils import Vec2


@pytest.fixture
def state():
    s = reset_match("medium", 1024, 700, seed=1)
    s.terrain = ()
    return s


def add_enemy(state, pos):
    e = Enemy.spawn(
        pos=pos,
        profile=DifficultyLogic().enemy_profile(state.difficulty),
        pattern=MovementPattern.DIRECT,
        balance=state.balance,
    )
    state.enemies.append(e)
    return e


def shell_at(pos):
    return Projectile(pos=pos.copy(), direction=Vec2(1, 0))


def sizes(state):
    return sorted(e.size for e in state.explosions)


def test_three_hits_destroy_medium_enemy(state):
    enemy = add_enemy(state, Vec2(600, 350))
    for _ in range(3):
        state.player.projectiles.append(shell_at(enemy.pos))
        resolve_collisions(state)

    assert not enemy.active
    assert sizes(state) == [20.0, 20.0, 20.0, 40.0]
    assert state.score.score == 10
    assert state.score.kills == 1

    state.player.projectiles.append(shell_at(enemy.pos))
    resolve_collisions(state)
    assert state.score.score == 10
    assert state.player.projectiles[-1].active


def test_one_hit_per_enemy_per_tick(state):
    enemy = add_enemy(state, Vec2(600, 350))
    first, second = shell_at(enemy.pos), shell_at(enemy.pos)
    state.player.projectiles += [first, second]
    resolve_collisions(state)
    assert enemy.health == 2
    assert not first.active
    assert second.active


def test_enemy_shell_damages_player(state):
    enemy = add_enemy(state, Vec2(800, 350))
    shell = shell_at(state.player.pos)
    enemy.projectiles.append(shell)
    resolve_collisions(state)
    assert state.player.health == 95
    assert not shell.active
    assert sizes(state) == [15.0]
    assert not state.ended


def test_killing_blow_ends_match_once(state):
    enemy = add_enemy(state, Vec2(800, 350))
    state.player.health = 5
    enemy.projectiles.append(shell_at(state.player.pos))
    enemy.projectiles.append(shell_at(state.player.pos))
    resolve_collisions(state)

    assert state.ended
    assert state.player.health == 0
    assert sizes(state).count(50.0) == 1

    tick = state.tick
    update_match(state)
    assert state.tick == tick
    assert state.ended


def test_tank_contact_hurts_and_pushes_player(state):
    add_enemy(state, Vec2(522, 350))
    resolve_collisions(state)
    assert state.player.health == pytest.approx(99.5)
    assert state.player.pos.x == pytest.approx(510)
    assert state.player.pos.y == pytest.approx(350)


def test_no_contact_outside_reach(state):
    # (40 + 35) / 2.5 == 30
    add_enemy(state, Vec2(542, 350))
    resolve_collisions(state)
    assert state.player.health == 100


def test_rock_pushes_player_out(state):
    state.terrain = (Obstacle(520, 330, 40, 40, "rock"),)
    resolve_collisions(state)
    assert state.player.pos == Vec2(507, 350)


def test_bush_does_not_block_player(state):
    state.terrain = (Obstacle(520, 330, 40, 40, "bush"),)
    resolve_collisions(state)
    assert state.player.pos == Vec2(512, 350)


def test_shells_stop_at_rocks_but_pass_bushes(state):
    state.terrain = (
        Obstacle(100, 100, 50, 50, "rock"),
        Obstacle(300, 100, 50, 50, "bush"),
    )
    into_rock = shell_at(Vec2(120, 120))
    into_bush = shell_at(Vec2(320, 120))
    state.player.projectiles += [into_rock, into_bush]
    resolve_collisions(state)
    assert not into_rock.active
    assert into_bush.active
    assert sizes(state) == [10.0]


def test_contact_killing_blow_leaves_wreck_in_place(state):
    add_enemy(state, Vec2(522, 350))
    state.player.health = 0.5
    resolve_collisions(state)
    assert state.ended
    assert not state.player.active
    assert state.player.pos == Vec2(512, 350)
    wreck = [e for e in state.explosions if e.size == 50.0]
    assert len(wreck) == 1
    assert wreck[0].pos == Vec2(512, 350)


def test_destroyed_player_is_not_pushed_by_rocks(state):
    state.terrain = (Obstacle(520, 330, 40, 40, "rock"),)
    state.player.active = False
    resolve_collisions(state)
    assert state.player.pos == Vec2(512, 350)
