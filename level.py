"""Match state and the per-tick simulation loop."""

from __future__ import annotations

from dataclasses import dataclass, field
import logging
import random

from collisions import resolve_collisions
from enemy import Enemy
from enemy_behaviors.base import MovementPattern
from layout import Obstacle, generate_terrain
from logic import BalanceLogic, DifficultyLogic, DifficultyProfile
from particles import Explosion
from player import Player
from score import ScoreTracker
from utils import Vec2, clamp

LOG = logging.getLogger(__name__)

_DIFFICULTY_LOGIC = DifficultyLogic()


@dataclass
class InputState:
    """What the input collaborator hands the simulation each tick."""
    move: Vec2 = field(default_factory=lambda: Vec2(0.0, 0.0))
    aim: Vec2 | None = None
    fire: bool = False
    speed_scale: float = 1.0

    @classmethod
    def idle(cls) -> "InputState":
        return cls()

    def clamped_move(self) -> Vec2:
        return Vec2(clamp(self.move.x, -1.0, 1.0), clamp(self.move.y, -1.0, 1.0))


@dataclass
class MatchState:
    """Everything one match owns. The loop driver passes it to each subsystem."""
    profile: DifficultyProfile
    width: float
    height: float
    player: Player
    terrain: tuple[Obstacle, ...] = ()
    enemies: list[Enemy] = field(default_factory=list)
    explosions: list[Explosion] = field(default_factory=list)
    score: ScoreTracker = field(default_factory=ScoreTracker)
    spawn_timer: int = 0
    tick: int = 0
    time_ms: float = 0.0
    ended: bool = False
    balance: BalanceLogic = field(default_factory=BalanceLogic)
    rng: random.Random = field(default_factory=random.Random)
    # Tier name as asked for; differs from profile.name after a fallback.
    requested_difficulty: str | None = None

    @property
    def difficulty(self) -> str:
        return self.profile.name

    @property
    def enemy_tier(self) -> str:
        if self.requested_difficulty is None:
            return self.profile.name
        return self.requested_difficulty

    def add_explosion(self, pos: Vec2, size: float) -> Explosion:
        e = Explosion.burst(pos, size, self.rng, max_frames=self.balance.explosion_frames)
        self.explosions.append(e)
        return e

    def end_match(self) -> None:
        if self.ended:
            return
        self.ended = True
        LOG.info("Match over on tick %d. %s", self.tick, self.score.summary())


def get_difficulty_profile(difficulty: str | None) -> DifficultyProfile:
    return _DIFFICULTY_LOGIC.profile(difficulty)


def reset_match(
    difficulty: str | None,
    width: float,
    height: float,
    seed: int | None = None,
    balance: BalanceLogic | None = None,
) -> MatchState:
    """Build a fresh match: terrain, player at the center, no enemies."""
    if width <= 0 or height <= 0:
        raise ValueError(f"Battlefield must have a positive size, got {width}x{height}")

    b = balance or BalanceLogic()
    profile = get_difficulty_profile(difficulty)
    rng = random.Random(seed)

    player = Player(
        pos=Vec2(width / 2, height / 2),
        health=float(profile.player_starting_health),
        speed=float(profile.player_speed),
        width=b.player_width,
        height=b.player_height,
        hit_radius=b.player_hit_radius,
        balance=b,
    )
    state = MatchState(
        profile=profile,
        width=float(width),
        height=float(height),
        player=player,
        terrain=generate_terrain(width, height, profile, rng, b),
        score=ScoreTracker(),
        balance=b,
        rng=rng,
        requested_difficulty=difficulty,
    )
    LOG.info("Match started: %s on %.0fx%.0f, %d obstacles", profile.name, width, height, len(state.terrain))
    return state


def resize_battlefield(state: MatchState, width: float, height: float) -> None:
    """Track the host viewport. Terrain stays where it was generated."""
    if width <= 0 or height <= 0:
        return
    state.width = float(width)
    state.height = float(height)


def random_edge_position(state: MatchState) -> Vec2:
    """Pick a point on one of the four edges, padded inwards."""
    pad = state.balance.spawn_padding
    w, h = state.width, state.height
    rng = state.rng
    side = rng.choice(("left", "right", "top", "bottom"))
    if side == "left":
        return Vec2(pad, pad + rng.random() * (h - pad * 2))
    if side == "right":
        return Vec2(w - pad, pad + rng.random() * (h - pad * 2))
    if side == "top":
        return Vec2(pad + rng.random() * (w - pad * 2), pad)
    return Vec2(pad + rng.random() * (w - pad * 2), h - pad)


def spawn_enemy(state: MatchState) -> Enemy | None:
    """Add one enemy at a screen edge if the difficulty cap allows it."""
    if len(state.enemies) >= state.profile.max_concurrent_enemies:
        return None

    enemy = Enemy.spawn(
        pos=random_edge_position(state),
        profile=_DIFFICULTY_LOGIC.enemy_profile(state.enemy_tier),
        pattern=state.rng.choice(list(MovementPattern)),
        balance=state.balance,
    )
    enemy.last_move_time = state.time_ms
    state.enemies.append(enemy)
    LOG.debug("Spawned %s enemy at (%.0f, %.0f)", enemy.pattern.value, enemy.pos.x, enemy.pos.y)
    return enemy


def update_match(state: MatchState, inputs: InputState | None = None) -> None:
    """Advance the match by one fixed tick."""
    if state.ended:
        return

    inputs = inputs or InputState.idle()
    player = state.player
    w, h = state.width, state.height

    if inputs.aim is not None:
        player.aim(inputs.aim)
    player.move(inputs.clamped_move(), w, h, inputs.speed_scale)
    if inputs.fire and inputs.aim is not None:
        player.fire(inputs.aim)
    player.tick(w, h)

    for enemy in state.enemies:
        enemy.pursue(player.pos, state.terrain, state.time_ms, state.rng)
        enemy.tick(w, h)

    resolve_collisions(state)

    for explosion in state.explosions:
        explosion.update()
    state.explosions = [e for e in state.explosions if e.active]
    state.enemies = [e for e in state.enemies if e.active]

    state.spawn_timer += 1
    if state.spawn_timer >= state.profile.enemy_spawn_interval_ticks:
        spawn_enemy(state)
        state.spawn_timer = 0

    state.tick += 1
    state.time_ms += state.balance.tick_ms
