"""Enemy entity and related functionality."""

from __future__ import annotations

from dataclasses import dataclass
import math
import random
from typing import Iterable

from enemy_behaviors.base import Behavior, MovementPattern
from enemy_behaviors.direct import Direct
from enemy_behaviors.flanking import Flanking
from enemy_behaviors.zigzag import Zigzag
from layout import Obstacle
from logic import BalanceLogic, EnemyProfile
from physics import rects_overlap
from tank import Tank
from utils import Vec2, heading_deg, normalize_angle_deg

_BEHAVIOR_IMPLS: dict[MovementPattern, Behavior] = {
    MovementPattern.DIRECT: Direct(),
    MovementPattern.ZIGZAG: Zigzag(),
    MovementPattern.FLANKING: Flanking(),
}


@dataclass
class Enemy(Tank):
    """AI-driven tank."""
    pattern: MovementPattern = MovementPattern.DIRECT
    last_move_time: float = 0.0

    @classmethod
    def spawn(
        cls,
        pos: Vec2,
        profile: EnemyProfile,
        pattern: MovementPattern,
        balance: BalanceLogic | None = None,
    ) -> "Enemy":
        return cls(
            pos=pos,
            health=profile.health,
            speed=profile.speed,
            width=profile.width,
            height=profile.height,
            hit_radius=profile.hit_radius,
            pattern=pattern,
            balance=balance or BalanceLogic(),
        )

    def pursue(
        self,
        player_pos: Vec2,
        terrain: Iterable[Obstacle],
        time_ms: float,
        rng: random.Random,
    ) -> None:
        """Advance one tick towards the player, steering around terrain."""
        if not self.active:
            return

        b = self.balance
        to_player = player_pos - self.pos
        # Turret tracks the player whatever the body is doing.
        if not to_player.is_zero():
            self.turret_heading = heading_deg(to_player)

        distance = max(to_player.length(), 1.0)
        move = to_player * (self.speed / distance)

        if not move.is_zero():
            diff = normalize_angle_deg(heading_deg(move) - self.body_heading)
            self.body_heading += diff * b.body_turn_rate

        move = _BEHAVIOR_IMPLS[self.pattern].steer(move, distance, time_ms, b)

        candidate = self.pos + move
        box = self.bounding_box(candidate)
        # Every listed obstacle blocks enemy pathing, bushes included.
        blocked = any(rects_overlap(box, o.bounding_box()) for o in terrain)

        if not blocked:
            self.pos = candidate
        else:
            self.pattern = self.pattern.next()
            angle = rng.random() * math.tau
            step = self.speed * b.escape_speed_factor
            self.pos = self.pos + Vec2(math.cos(angle) * step, math.sin(angle) * step)

        self.last_move_time = time_ms

    def tick(self, width: float, height: float) -> None:
        self.update_projectiles(width, height)
