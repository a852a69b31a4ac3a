"""Visual rendering system.

Draws a ``MatchSnapshot`` with pyglet shapes. World coordinates grow
downwards (y = 0 is the top edge); pyglet's grow upwards, so every point
goes through ``to_screen``.
"""

from __future__ import annotations

import math

import pyglet
from pyglet import shapes
from pyglet.graphics import Group

from config import PALETTE
from snapshot import MatchSnapshot, ObstacleView, TankView

GRID_SIZE = 50


def to_screen(x: float, y: float, view_h: float) -> tuple[float, float]:
    return x, view_h - y


def heading_to_screen_dir(heading: float) -> tuple[float, float]:
    """Unit vector on screen for a sprite heading (0 = up, clockwise)."""
    rad = math.radians(heading)
    return math.sin(rad), math.cos(rad)


class Visuals:
    """Draws terrain, tanks, shells and explosions from a snapshot."""

    def __init__(self):
        self._terrain_batch = pyglet.graphics.Batch()
        self._terrain_shapes: list = []
        self._terrain_key = None
        self._ground = Group(order=0)
        self._props = Group(order=1)

    # ----------------------------
    # Static terrain
    # ----------------------------
    def _build_terrain(self, snap: MatchSnapshot) -> None:
        for s in self._terrain_shapes:
            s.delete()
        self._terrain_shapes = []
        h = snap.height
        b = self._terrain_batch

        bg = shapes.Rectangle(0, 0, snap.width, snap.height, color=PALETTE["ground"], batch=b, group=self._ground)
        self._terrain_shapes.append(bg)
        for gx in range(0, int(snap.width) + 1, GRID_SIZE):
            line = shapes.Line(gx, 0, gx, snap.height, thickness=1, color=PALETTE["grid"], batch=b, group=self._ground)
            self._terrain_shapes.append(line)
        for gy in range(0, int(snap.height) + 1, GRID_SIZE):
            line = shapes.Line(0, gy, snap.width, gy, thickness=1, color=PALETTE["grid"], batch=b, group=self._ground)
            self._terrain_shapes.append(line)

        for o in snap.terrain:
            self._terrain_shapes.extend(self._obstacle_shapes(o, h))

    def _obstacle_shapes(self, o: ObstacleView, view_h: float) -> list:
        b = self._terrain_batch
        sx, sy = to_screen(o.x, o.y + o.height, view_h)
        if o.kind == "bush":
            cx, cy = to_screen(o.x + o.width / 2, o.y + o.height / 2, view_h)
            return [shapes.Circle(cx, cy, o.width / 2, color=PALETTE["bush"], batch=b, group=self._props)]
        color = PALETTE["wall"] if o.kind == "wall" else PALETTE["rock"]
        return [
            shapes.BorderedRectangle(
                sx, sy, o.width, o.height, border=2,
                color=color, border_color=(40, 40, 40), batch=b, group=self._props,
            )
        ]

    # ----------------------------
    # Per-frame entities
    # ----------------------------
    def _tank_shapes(self, t: TankView, view_h: float, body_color, turret_color, batch) -> list:
        out = []
        cx, cy = to_screen(t.pos[0], t.pos[1], view_h)
        body = shapes.Rectangle(cx, cy, t.width, t.height, color=body_color, batch=batch)
        body.anchor_x = t.width / 2
        body.anchor_y = t.height / 2
        body.rotation = t.body_heading
        out.append(body)

        dx, dy = heading_to_screen_dir(t.turret_heading)
        barrel = t.height * 0.6
        out.append(shapes.Line(cx, cy, cx + dx * barrel, cy + dy * barrel, thickness=4, color=turret_color, batch=batch))
        out.append(shapes.Circle(cx, cy, t.width * 0.22, color=turret_color, batch=batch))

        # Health bar above the tank.
        bar_w = 50 if body_color == PALETTE["player"] else 30
        frac = max(0.0, min(1.0, t.health / max(1e-6, t.max_health)))
        bx = cx - bar_w / 2
        by = cy + t.height / 2 + 8
        out.append(shapes.Rectangle(bx, by, bar_w, 5, color=(255, 0, 0), batch=batch))
        if frac > 0:
            out.append(shapes.Rectangle(bx, by, bar_w * frac, 5, color=(0, 255, 0), batch=batch))

        for p in t.projectiles:
            n = len(p.trail)
            for i, (tx, ty) in enumerate(p.trail):
                alpha = (i + 1) / max(1, n)
                sx, sy = to_screen(tx, ty, view_h)
                dot = shapes.Circle(sx, sy, 2 + alpha * 3, color=PALETTE["trail"], batch=batch)
                dot.opacity = int(255 * alpha * 0.6)
                out.append(dot)
            px, py = to_screen(p.pos[0], p.pos[1], view_h)
            shell = shapes.Rectangle(px, py, p.width, p.height, color=PALETTE["bullet"], batch=batch)
            shell.anchor_x = p.width / 2
            shell.anchor_y = p.height / 2
            shell.rotation = p.heading
            out.append(shell)
        return out

    def draw(self, snap: MatchSnapshot) -> None:
        key = (snap.terrain, snap.width, snap.height)
        if key != self._terrain_key:
            self._build_terrain(snap)
            self._terrain_key = key
        self._terrain_batch.draw()

        batch = pyglet.graphics.Batch()
        keep = []
        h = snap.height

        if snap.player.active:
            keep += self._tank_shapes(snap.player, h, PALETTE["player"], PALETTE["player_turret"], batch)
        for e in snap.enemies:
            body = PALETTE["enemy_hard"] if snap.difficulty == "hard" else PALETTE["enemy"]
            keep += self._tank_shapes(e, h, body, PALETTE["enemy_turret"], batch)

        for ex in snap.explosions:
            alpha = 1.0 - ex.progress
            cx, cy = to_screen(ex.pos[0], ex.pos[1], h)
            outer = shapes.Circle(cx, cy, ex.size * (0.5 + ex.progress * 0.5), color=PALETTE["explosion_outer"], batch=batch)
            outer.opacity = int(255 * alpha * 0.7)
            inner = shapes.Circle(cx, cy, ex.size * 0.7 * (0.2 + ex.progress * 0.3), color=PALETTE["explosion_inner"], batch=batch)
            inner.opacity = int(255 * alpha)
            keep += [outer, inner]
            for p in ex.particles:
                dot = shapes.Circle(cx + p.offset[0], cy - p.offset[1], max(0.5, p.size), color=p.color, batch=batch)
                dot.opacity = int(255 * alpha * 0.9)
                keep.append(dot)

        batch.draw()
