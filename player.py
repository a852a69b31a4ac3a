"""Player entity and related functionality."""

from __future__ import annotations

from dataclasses import dataclass

from projectile import Projectile
from tank import Tank
from utils import Vec2, clamp, heading_deg


@dataclass
class Player(Tank):
    """Player-controlled tank."""
    cooldown: int = 0

    def move(self, move_vec: Vec2, width: float, height: float, speed_scale: float = 1.0) -> None:
        """Drive along the input vector, hard-clamped to the battlefield."""
        if not self.active:
            return
        if not move_vec.is_zero():
            self.body_heading = heading_deg(move_vec)

        self.pos = self.pos + move_vec * (self.speed * speed_scale)
        self.clamp_to_bounds(width, height)

    def clamp_to_bounds(self, width: float, height: float) -> None:
        hw = self.width / 2
        hh = self.height / 2
        self.pos = Vec2(
            clamp(self.pos.x, hw, max(hw, width - hw)),
            clamp(self.pos.y, hh, max(hh, height - hh)),
        )

    def fire(self, target: Vec2) -> Projectile | None:
        """Fire at a world point. Ignored while reloading or when aiming at itself."""
        if not self.active or self.cooldown > 0:
            return None

        direction = (target - self.pos).normalized()
        shell = self.launch(direction)
        if shell is None:
            return None

        self.pos = self.pos - direction * self.balance.recoil
        self.cooldown = int(self.balance.fire_cooldown_ticks)
        return shell

    def tick(self, width: float, height: float) -> None:
        """Per-tick bookkeeping: reload and move shells."""
        if self.cooldown > 0:
            self.cooldown -= 1
        self.update_projectiles(width, height)
