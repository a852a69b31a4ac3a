"""Render snapshots are read-only copies of the match."""
import dataclasses

import pytest

from level import reset_match, spawn_enemy
from snapshot import take_snapshot
from utils import Vec2


def test_snapshot_mirrors_state():
    s = reset_match("hard", 1024, 700, seed=2)
    enemy = spawn_enemy(s)
    s.player.fire(Vec2(512, 100))
    snap = take_snapshot(s)

    assert snap.difficulty == "hard"
    assert snap.player.pos == (s.player.pos.x, s.player.pos.y)
    assert snap.player_starting_health == 80
    assert len(snap.player.projectiles) == 1
    assert len(snap.terrain) == len(s.terrain)
    assert snap.enemies[0].pattern == enemy.pattern.value
    assert not snap.ended


def test_snapshot_skips_destroyed_enemies():
    s = reset_match("medium", 1024, 700, seed=2)
    spawn_enemy(s).active = False
    assert take_snapshot(s).enemies == ()


def test_snapshot_cannot_be_mutated():
    snap = take_snapshot(reset_match("medium", 1024, 700, seed=2))
    with pytest.raises(dataclasses.FrozenInstanceError):
        snap.score = 100
    with pytest.raises(dataclasses.FrozenInstanceError):
        snap.player.health = 0


def test_snapshot_does_not_follow_later_ticks():
    s = reset_match("medium", 1024, 700, seed=2)
    snap = take_snapshot(s)
    s.player.pos = Vec2(0, 0)
    assert snap.player.pos == (512, 350)
