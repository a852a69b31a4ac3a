"""Centralized gameplay balance tuning logic."""

from __future__ import annotations

from dataclasses import dataclass, field
import logging


LOG = logging.getLogger(__name__)


@dataclass
class BalanceLogic:
    """Single source of truth for tuning values shared by every difficulty."""

    fps: float = 60.0

    # Simulation pacing
    frame_dt_cap: float = 0.25
    max_catchup_steps: int = 6

    # Player tank
    player_width: float = 40.0
    player_height: float = 40.0
    player_hit_radius: float = 20.0
    launch_offset: float = 25.0
    recoil: float = 2.0
    fire_cooldown_ticks: int = 25

    # Shells
    bullet_speed: float = 7.0
    bullet_hit_radius: float = 4.0
    bullet_width: float = 8.0
    bullet_height: float = 14.0
    trail_length: int = 5

    # Damage interactions
    enemy_bullet_damage: float = 5.0
    contact_damage: float = 0.5
    contact_push: float = 2.0
    # Tanks touch when closer than (w1 + w2) / contact_divisor.
    contact_divisor: float = 2.5
    obstacle_push: float = 5.0

    # Enemy steering
    body_turn_rate: float = 0.1
    zigzag_period_ms: float = 500.0
    zigzag_amplitude: float = 0.7
    flank_distance: float = 200.0
    flank_circle_factor: float = 0.8
    escape_speed_factor: float = 0.5

    # Touch controls
    stick_speed_factor: float = 1.2
    stick_aim_distance: float = 100.0

    # Terrain
    border_width: float = 40.0
    obstacle_padding: float = 100.0
    center_avoidance: float = 150.0
    obstacle_min_size: float = 40.0
    obstacle_max_size: float = 100.0
    rock_chance: float = 0.4

    # Spawning
    spawn_padding: float = 80.0

    # Explosion sizes
    explosion_sizes: dict[str, float] = field(
        default_factory=lambda: {
            "impact": 20.0,
            "enemy_destroyed": 40.0,
            "player_hit": 15.0,
            "player_destroyed": 50.0,
            "terrain_hit": 10.0,
        }
    )
    explosion_frames: int = 20

    @property
    def fixed_dt(self) -> float:
        return 1.0 / max(1.0, float(self.fps))

    @property
    def tick_ms(self) -> float:
        return 1000.0 / max(1.0, float(self.fps))

    def explosion_size(self, event: str) -> float:
        return float(self.explosion_sizes.get(event, self.explosion_sizes["impact"]))


@dataclass(frozen=True)
class DifficultyProfile:
    """Per-tier match tuning, fixed for the whole match."""

    name: str
    enemy_spawn_interval_ticks: int
    max_concurrent_enemies: int
    player_starting_health: float
    player_speed: float
    obstacle_count: int
    kill_points: int


@dataclass(frozen=True)
class EnemyProfile:
    """Enemy tank stats for a difficulty tier."""

    speed: float
    health: int
    width: float = 35.0
    height: float = 35.0
    hit_radius: float = 17.0


class DifficultyLogic:
    """Difficulty tables with a default fallback for unknown tiers."""

    default_name = "medium"

    def __init__(self) -> None:
        self.profiles: dict[str, DifficultyProfile] = {
            "easy": DifficultyProfile(
                "easy",
                enemy_spawn_interval_ticks=180,
                max_concurrent_enemies=3,
                player_starting_health=150,
                player_speed=3.0,
                obstacle_count=5,
                kill_points=10,
            ),
            "medium": DifficultyProfile(
                "medium",
                enemy_spawn_interval_ticks=120,
                max_concurrent_enemies=5,
                player_starting_health=100,
                player_speed=2.5,
                obstacle_count=10,
                kill_points=10,
            ),
            "hard": DifficultyProfile(
                "hard",
                enemy_spawn_interval_ticks=60,
                max_concurrent_enemies=8,
                player_starting_health=80,
                player_speed=2.0,
                obstacle_count=15,
                kill_points=20,
            ),
        }
        self.enemy_profiles: dict[str, EnemyProfile] = {
            "easy": EnemyProfile(speed=1.2, health=2),
            "medium": EnemyProfile(speed=1.8, health=3),
            "hard": EnemyProfile(speed=2.5, health=4, width=40.0, height=40.0, hit_radius=20.0),
        }
        self.default_enemy = EnemyProfile(speed=1.5, health=2)

    @staticmethod
    def _key(difficulty: str | None) -> str:
        return str(difficulty or "").strip().lower()

    def is_known(self, difficulty: str | None) -> bool:
        return self._key(difficulty) in self.profiles

    def profile(self, difficulty: str | None) -> DifficultyProfile:
        d = self._key(difficulty)
        found = self.profiles.get(d)
        if found is None:
            LOG.warning("Unknown difficulty %r, using %s profile", difficulty, self.default_name)
            return self.profiles[self.default_name]
        return found

    def enemy_profile(self, difficulty: str | None) -> EnemyProfile:
        return self.enemy_profiles.get(self._key(difficulty), self.default_enemy)
