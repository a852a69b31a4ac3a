"""On-screen joystick and fire button for touch screens.

Positions are window coordinates (y grows upwards, as pyglet reports them).
A mouse drag drives the stick the same way a finger does.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from level import InputState
from logic import BalanceLogic
from tank import Tank
from utils import Vec2

STICK_RADIUS = 60.0
FIRE_RADIUS = 40.0
MARGIN = 40.0


@dataclass
class VirtualStick:
    """Joystick with a fixed base; the knob follows the pointer, capped at the rim."""
    center: tuple[float, float] = (0.0, 0.0)
    radius: float = STICK_RADIUS
    uid: object | None = None
    pos: tuple[float, float] = (0.0, 0.0)

    def active(self) -> bool:
        return self.uid is not None

    def contains(self, x: float, y: float) -> bool:
        cx, cy = self.center
        return math.hypot(x - cx, y - cy) <= self.radius

    def set_down(self, uid: object, x: float, y: float) -> None:
        self.uid = uid
        self.pos = (float(x), float(y))

    def set_move(self, x: float, y: float) -> None:
        self.pos = (float(x), float(y))

    def set_up(self) -> None:
        self.uid = None
        self.pos = self.center

    def delta(self) -> tuple[float, float]:
        """Knob offset from the base in pixels, clipped to the rim."""
        if not self.active():
            return (0.0, 0.0)
        dx = self.pos[0] - self.center[0]
        dy = self.pos[1] - self.center[1]
        l = math.hypot(dx, dy)
        if l <= 1e-9:
            return (0.0, 0.0)
        s = min(1.0, self.radius / l)
        return (dx * s, dy * s)

    def vector(self) -> Vec2:
        """Move vector in world space, each component in [-1, 1]."""
        dx, dy = self.delta()
        r = max(1.0, self.radius)
        # World y grows downwards.
        return Vec2(dx / r, -dy / r)


@dataclass
class FireButton:
    center: tuple[float, float] = (0.0, 0.0)
    radius: float = FIRE_RADIUS
    uid: object | None = None

    def pressed(self) -> bool:
        return self.uid is not None

    def contains(self, x: float, y: float) -> bool:
        cx, cy = self.center
        return math.hypot(x - cx, y - cy) <= self.radius


@dataclass
class TouchControls:
    """Stick bottom-left, fire button bottom-right, tap elsewhere to shoot there."""
    stick: VirtualStick = field(default_factory=VirtualStick)
    fire: FireButton = field(default_factory=FireButton)
    aim: Vec2 | None = None
    fire_pending: bool = False

    def layout(self, width: float, height: float) -> None:
        r = self.stick.radius
        self.stick.center = (MARGIN + r, MARGIN + r)
        if not self.stick.active():
            self.stick.pos = self.stick.center
        fr = self.fire.radius
        self.fire.center = (float(width) - MARGIN - fr, MARGIN + fr)

    def handle_press(self, uid: object, x: float, y: float) -> bool:
        """Returns True when the press landed on a control."""
        if self.fire.contains(x, y):
            self.fire.uid = uid
            self.fire_pending = True
            return True
        if self.stick.contains(x, y) and not self.stick.active():
            self.stick.set_down(uid, x, y)
            return True
        return False

    def handle_drag(self, uid: object, x: float, y: float) -> bool:
        if uid == self.stick.uid:
            self.stick.set_move(x, y)
            return True
        return uid == self.fire.uid

    def handle_release(self, uid: object) -> bool:
        if uid == self.stick.uid:
            self.stick.set_up()
            return True
        if uid == self.fire.uid:
            self.fire.uid = None
            return True
        return False

    def tap(self, target: Vec2) -> None:
        """Shoot at a battlefield point on the next tick."""
        self.aim = target.copy()
        self.fire_pending = True

    def release_all(self) -> None:
        self.stick.set_up()
        self.fire.uid = None
        self.aim = None
        self.fire_pending = False

    def input_for(self, player: Tank, balance: BalanceLogic, fallback_move: Vec2 | None = None) -> InputState:
        """Build this tick's input; consumes a pending shot."""
        move = self.stick.vector()
        stick_moving = not move.is_zero()
        if stick_moving:
            # Turret looks where the tank is driving.
            self.aim = player.pos + move * balance.stick_aim_distance
        elif fallback_move is not None:
            move = fallback_move

        aim = self.aim
        if aim is None:
            rad = math.radians(player.turret_heading)
            aim = player.pos + Vec2(math.sin(rad), -math.cos(rad)) * balance.stick_aim_distance

        fire = self.fire_pending
        self.fire_pending = False
        return InputState(
            move=move,
            aim=aim,
            fire=fire,
            speed_scale=balance.stick_speed_factor if stick_moving else 1.0,
        )
