"""Shared tank shape for the player and enemies."""

from __future__ import annotations

from dataclasses import dataclass, field

from logic import BalanceLogic
from projectile import Projectile, make_projectile
from utils import Vec2, heading_deg


@dataclass
class Tank:
    """Position, headings, health and the shells a tank owns."""

    pos: Vec2
    health: float
    speed: float
    width: float = 40.0
    height: float = 40.0
    hit_radius: float = 20.0
    max_health: float = 0.0
    body_heading: float = 0.0
    turret_heading: float = 0.0
    active: bool = True
    projectiles: list[Projectile] = field(default_factory=list)
    balance: BalanceLogic = field(default_factory=BalanceLogic, repr=False)

    def __post_init__(self) -> None:
        if self.max_health <= 0:
            self.max_health = self.health

    def aim(self, target: Vec2) -> None:
        """Point the turret at the target."""
        if not self.active:
            return
        d = target - self.pos
        if d.is_zero():
            return
        self.turret_heading = heading_deg(d)

    def launch(self, direction: Vec2) -> Projectile | None:
        """Spawn a shell at the muzzle along a unit direction."""
        if not self.active or direction.is_zero():
            return None
        self.turret_heading = heading_deg(direction)
        muzzle = self.pos + direction * self.balance.launch_offset
        shell = make_projectile(muzzle, direction, self.balance)
        self.projectiles.append(shell)
        return shell

    def take_damage(self, amount: float) -> bool:
        """Apply damage. Returns True only on the hit that destroys the tank."""
        if not self.active:
            return False
        self.health = max(0.0, self.health - amount)
        if self.health <= 0:
            self.active = False
            return True
        return False

    def update_projectiles(self, width: float, height: float) -> None:
        for p in self.projectiles:
            p.update(width, height)
        self.prune_projectiles()

    def prune_projectiles(self) -> None:
        self.projectiles = [p for p in self.projectiles if p.active]

    def bounding_box(self, pos: Vec2 | None = None) -> tuple[float, float, float, float]:
        p = pos or self.pos
        return (p.x - self.width / 2, p.y - self.height / 2, self.width, self.height)
