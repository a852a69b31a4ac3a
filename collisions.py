"""Per-tick collision resolution between shells, tanks and terrain."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from physics import check_circle_collision, push_out_of_rect, rects_overlap

if TYPE_CHECKING:
    from level import MatchState

LOG = logging.getLogger(__name__)


def resolve_collisions(state: "MatchState") -> None:
    """Reconcile every entity after movement, in a fixed order."""
    _player_shells_vs_enemies(state)
    _enemy_shells_vs_player(state)
    _tank_contact(state)
    _player_vs_terrain(state)
    _shells_vs_terrain(state)


def _player_shells_vs_enemies(state: "MatchState") -> None:
    b = state.balance
    for enemy in state.enemies:
        if not enemy.active:
            continue
        for shell in state.player.projectiles:
            if not shell.active:
                continue
            if not check_circle_collision(shell.pos, shell.hit_radius, enemy.pos, enemy.hit_radius):
                continue

            shell.deactivate()
            state.add_explosion(shell.pos, b.explosion_size("impact"))
            if enemy.take_damage(1):
                state.add_explosion(enemy.pos, b.explosion_size("enemy_destroyed"))
                awarded = state.score.on_enemy_kill(state.profile.kill_points)
                LOG.debug("Enemy destroyed at (%.0f, %.0f), +%d", enemy.pos.x, enemy.pos.y, awarded)
            # One hit per enemy per tick.
            break


def _enemy_shells_vs_player(state: "MatchState") -> None:
    b = state.balance
    player = state.player
    for enemy in state.enemies:
        if not enemy.active:
            continue
        for shell in enemy.projectiles:
            if not shell.active or state.ended:
                continue
            if not check_circle_collision(shell.pos, shell.hit_radius, player.pos, player.hit_radius):
                continue

            shell.deactivate()
            state.add_explosion(shell.pos, b.explosion_size("player_hit"))
            _damage_player(state, b.enemy_bullet_damage)


def _tank_contact(state: "MatchState") -> None:
    b = state.balance
    player = state.player
    for enemy in state.enemies:
        if not enemy.active or state.ended:
            continue
        reach = (player.width + enemy.width) / b.contact_divisor
        offset = player.pos - enemy.pos
        if offset.length() >= reach:
            continue

        _damage_player(state, b.contact_damage)
        if not player.active:
            continue
        away = offset.normalized()
        player.pos = player.pos + away * b.contact_push


def _player_vs_terrain(state: "MatchState") -> None:
    player = state.player
    if not player.active:
        return
    push = state.balance.obstacle_push
    for obstacle in state.terrain:
        if not obstacle.blocking:
            continue
        if rects_overlap(player.bounding_box(), obstacle.bounding_box()):
            player.pos = push_out_of_rect(player.pos, obstacle.bounding_box(), push)


def _shells_vs_terrain(state: "MatchState") -> None:
    size = state.balance.explosion_size("terrain_hit")
    blocking = [o for o in state.terrain if o.blocking]
    owners = [state.player] + [e for e in state.enemies if e.active]
    for owner in owners:
        for shell in owner.projectiles:
            if not shell.active:
                continue
            box = shell.bounding_box()
            if any(rects_overlap(box, o.bounding_box()) for o in blocking):
                shell.deactivate()
                state.add_explosion(shell.pos, size)


def _damage_player(state: "MatchState", amount: float) -> None:
    player = state.player
    if player.take_damage(amount):
        state.add_explosion(player.pos, state.balance.explosion_size("player_destroyed"))
        state.end_match()
