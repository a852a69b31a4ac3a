"""Read-only view of a match for the render collaborator."""

from __future__ import annotations

from dataclasses import dataclass

from enemy import Enemy
from layout import Obstacle
from level import MatchState
from particles import Explosion
from projectile import Projectile
from tank import Tank

Point = tuple[float, float]


@dataclass(frozen=True)
class ProjectileView:
    pos: Point
    heading: float
    width: float
    height: float
    trail: tuple[Point, ...]


@dataclass(frozen=True)
class TankView:
    pos: Point
    body_heading: float
    turret_heading: float
    health: float
    max_health: float
    width: float
    height: float
    active: bool
    projectiles: tuple[ProjectileView, ...]
    pattern: str = ""


@dataclass(frozen=True)
class ParticleView:
    offset: Point
    size: float
    color: tuple[int, int, int]


@dataclass(frozen=True)
class ExplosionView:
    pos: Point
    size: float
    progress: float
    particles: tuple[ParticleView, ...]


@dataclass(frozen=True)
class ObstacleView:
    x: float
    y: float
    width: float
    height: float
    kind: str


@dataclass(frozen=True)
class MatchSnapshot:
    """Everything needed to draw one frame."""
    width: float
    height: float
    player: TankView
    enemies: tuple[TankView, ...]
    explosions: tuple[ExplosionView, ...]
    terrain: tuple[ObstacleView, ...]
    score: int
    kills: int
    difficulty: str
    player_starting_health: float
    ended: bool
    tick: int


def _projectile_view(p: Projectile) -> ProjectileView:
    return ProjectileView(
        pos=(p.pos.x, p.pos.y),
        heading=p.heading,
        width=p.width,
        height=p.height,
        trail=tuple(p.trail),
    )


def _tank_view(t: Tank) -> TankView:
    pattern = t.pattern.value if isinstance(t, Enemy) else ""
    return TankView(
        pos=(t.pos.x, t.pos.y),
        body_heading=t.body_heading,
        turret_heading=t.turret_heading,
        health=t.health,
        max_health=t.max_health,
        width=t.width,
        height=t.height,
        active=t.active,
        projectiles=tuple(_projectile_view(p) for p in t.projectiles if p.active),
        pattern=pattern,
    )


def _explosion_view(e: Explosion) -> ExplosionView:
    return ExplosionView(
        pos=(e.pos.x, e.pos.y),
        size=e.size,
        progress=e.progress,
        particles=tuple(
            ParticleView(offset=(p.offset.x, p.offset.y), size=p.size, color=p.color) for p in e.particles
        ),
    )


def _obstacle_view(o: Obstacle) -> ObstacleView:
    return ObstacleView(o.x, o.y, o.width, o.height, o.kind)


def take_snapshot(state: MatchState) -> MatchSnapshot:
    return MatchSnapshot(
        width=state.width,
        height=state.height,
        player=_tank_view(state.player),
        enemies=tuple(_tank_view(e) for e in state.enemies if e.active),
        explosions=tuple(_explosion_view(e) for e in state.explosions if e.active),
        terrain=tuple(_obstacle_view(o) for o in state.terrain),
        score=state.score.score,
        kills=state.score.kills,
        difficulty=state.difficulty,
        player_starting_health=state.profile.player_starting_health,
        ended=state.ended,
        tick=state.tick,
    )
