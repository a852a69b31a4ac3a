"""Battlefield terrain generation: border walls plus scattered props."""

from __future__ import annotations

from dataclasses import dataclass
import logging
import random

from logic import BalanceLogic, DifficultyProfile
from utils import Vec2

LOG = logging.getLogger(__name__)

KIND_WALL = "wall"
KIND_ROCK = "rock"
KIND_BUSH = "bush"

BLOCKING_KINDS = frozenset({KIND_WALL, KIND_ROCK})

# Bound on placement retries per obstacle; only tiny battlefields exhaust it.
MAX_PLACEMENT_TRIES = 500


@dataclass(frozen=True)
class Obstacle:
    """Axis-aligned obstacle; (x, y) is the top-left corner."""

    x: float
    y: float
    width: float
    height: float
    kind: str = KIND_ROCK

    @property
    def blocking(self) -> bool:
        return self.kind in BLOCKING_KINDS

    @property
    def center(self) -> Vec2:
        return Vec2(self.x + self.width / 2, self.y + self.height / 2)

    def bounding_box(self) -> tuple[float, float, float, float]:
        return (self.x, self.y, self.width, self.height)


def border_walls(width: float, height: float, thickness: float) -> list[Obstacle]:
    """Four wall segments covering the battlefield perimeter."""
    w, h, t = float(width), float(height), float(thickness)
    return [
        Obstacle(0.0, 0.0, w, t, KIND_WALL),                 # top
        Obstacle(0.0, h - t, w, t, KIND_WALL),               # bottom
        Obstacle(0.0, t, t, h - t * 2, KIND_WALL),           # left
        Obstacle(w - t, t, t, h - t * 2, KIND_WALL),         # right
    ]


def in_center_zone(x: float, y: float, width: float, height: float, avoidance: float) -> bool:
    return abs(x - width / 2) < avoidance and abs(y - height / 2) < avoidance


def generate_terrain(
    width: float,
    height: float,
    profile: DifficultyProfile,
    rng: random.Random,
    balance: BalanceLogic | None = None,
) -> tuple[Obstacle, ...]:
    """Generate the immutable terrain for one match.

    The centre keep-out only tests an obstacle's top-left corner, so a prop
    may still reach into the centre zone. The player's spawn box stays clear.
    """
    b = balance or BalanceLogic()
    w, h = float(width), float(height)
    terrain: list[Obstacle] = border_walls(w, h, b.border_width)

    pad = b.obstacle_padding
    span_x = max(0.0, w - pad * 2)
    span_y = max(0.0, h - pad * 2)

    for i in range(int(profile.obstacle_count)):
        # Keep the player's spawn area clear.
        for _ in range(MAX_PLACEMENT_TRIES):
            x = rng.random() * span_x + pad
            y = rng.random() * span_y + pad
            if not in_center_zone(x, y, w, h, b.center_avoidance):
                break
        else:
            LOG.debug("No room for obstacle %d on a %.0fx%.0f battlefield", i, w, h)
            continue

        size_range = b.obstacle_max_size - b.obstacle_min_size
        ow = rng.random() * size_range + b.obstacle_min_size
        oh = rng.random() * size_range + b.obstacle_min_size
        kind = KIND_ROCK if rng.random() < b.rock_chance else KIND_BUSH
        terrain.append(Obstacle(x, y, ow, oh, kind))

    LOG.debug("Generated terrain: %d obstacles for %s", len(terrain), profile.name)
    return tuple(terrain)
