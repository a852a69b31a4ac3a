"""Projectile entity and related functionality."""

from collections import deque
from dataclasses import dataclass, field

from utils import Vec2, heading_deg


@dataclass
class Projectile:
    """Tank shell travelling in a straight line until it hits something."""
    pos: Vec2
    direction: Vec2
    speed: float = 7.0
    hit_radius: float = 4.0
    width: float = 8.0
    height: float = 14.0
    active: bool = True
    trail: deque = field(default_factory=lambda: deque(maxlen=5))

    @property
    def heading(self) -> float:
        return heading_deg(self.direction)

    def update(self, width: float, height: float) -> bool:
        """Advance one tick. Returns False once the shell is spent."""
        if not self.active:
            return False

        self.trail.append((self.pos.x, self.pos.y))
        self.pos = self.pos + self.direction * self.speed

        if self.pos.x < 0 or self.pos.x > width or self.pos.y < 0 or self.pos.y > height:
            self.active = False
        return self.active

    def deactivate(self) -> None:
        self.active = False

    def bounding_box(self) -> tuple[float, float, float, float]:
        return (self.pos.x - self.width / 2, self.pos.y - self.height / 2, self.width, self.height)


def make_projectile(origin: Vec2, direction: Vec2, balance) -> Projectile:
    """Build a shell with the balance table's ballistics."""
    return Projectile(
        pos=origin.copy(),
        direction=direction.copy(),
        speed=balance.bullet_speed,
        hit_radius=balance.bullet_hit_radius,
        width=balance.bullet_width,
        height=balance.bullet_height,
        trail=deque(maxlen=max(1, int(balance.trail_length))),
    )
