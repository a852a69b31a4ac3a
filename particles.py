"""Explosion effects: timed bursts of particles.

Only the simulation side lives here. Drawing happens in ``visuals``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Tuple
import math
import random

from utils import Vec2

Color = Tuple[int, int, int]

FIRE_RED: Color = (255, 51, 0)
FIRE_YELLOW: Color = (255, 204, 0)


@dataclass
class Particle:
    """Particle offset relative to its explosion's center."""

    offset: Vec2
    vel: Vec2
    size: float
    color: Color


@dataclass
class Explosion:
    """Short-lived burst emitted on impacts and destruction."""

    pos: Vec2
    size: float = 30.0
    max_frames: int = 20
    frame: int = 0
    active: bool = True
    particles: List[Particle] = field(default_factory=list)

    @classmethod
    def burst(cls, pos: Vec2, size: float, rng: random.Random, max_frames: int = 20) -> "Explosion":
        e = cls(pos=pos.copy(), size=float(size), max_frames=int(max_frames))
        for _ in range(10 + rng.randrange(10)):
            angle = rng.random() * math.tau
            speed = 1.0 + rng.random() * 3.0
            e.particles.append(
                Particle(
                    offset=Vec2(0.0, 0.0),
                    vel=Vec2(math.cos(angle) * speed, math.sin(angle) * speed),
                    size=2.0 + rng.random() * 3.0,
                    color=FIRE_RED if rng.random() > 0.6 else FIRE_YELLOW,
                )
            )
        return e

    @property
    def progress(self) -> float:
        return self.frame / max(1, self.max_frames)

    def update(self) -> None:
        if not self.active:
            return

        self.frame += 1
        if self.frame >= self.max_frames:
            self.active = False
            return

        for p in self.particles:
            p.offset = p.offset + p.vel
            p.size *= 0.95
