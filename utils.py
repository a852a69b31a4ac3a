"""Utility functions and math helpers."""

import math
from dataclasses import dataclass


@dataclass
class Vec2:
    """2D Vector class."""
    x: float
    y: float

    def __add__(self, other):
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other):
        return Vec2(self.x - other.x, self.y - other.y)

    def __mul__(self, s: float):
        return Vec2(self.x * s, self.y * s)

    def __rmul__(self, s: float):
        return self.__mul__(s)

    def __truediv__(self, s: float):
        if abs(s) <= 1e-12:
            return Vec2(0.0, 0.0)
        return Vec2(self.x / s, self.y / s)

    def __neg__(self):
        return Vec2(-self.x, -self.y)

    def length(self) -> float:
        return math.hypot(self.x, self.y)

    def length_squared(self) -> float:
        return self.x * self.x + self.y * self.y

    def dot(self, other) -> float:
        return self.x * other.x + self.y * other.y

    def normalized(self):
        l = self.length()
        if l <= 1e-9:
            return Vec2(0.0, 0.0)
        return Vec2(self.x / l, self.y / l)

    def perp(self):
        """Rotate by +90 degrees in screen space."""
        return Vec2(-self.y, self.x)

    def copy(self):
        return Vec2(self.x, self.y)

    def is_zero(self) -> bool:
        return self.x == 0 and self.y == 0


def clamp(x: float, lo: float, hi: float) -> float:
    """Clamp value between low and high bounds."""
    return lo if x < lo else hi if x > hi else x


def dist(a: Vec2, b: Vec2) -> float:
    """Calculate distance between two positions."""
    return (a - b).length()


def heading_deg(v: Vec2) -> float:
    """Sprite heading for a direction: 0 degrees points up the screen."""
    return math.degrees(math.atan2(v.y, v.x)) + 90.0


def normalize_angle_deg(angle: float) -> float:
    """Wrap an angle difference into (-180, 180]."""
    a = math.fmod(angle, 360.0)
    if a > 180.0:
        a -= 360.0
    elif a <= -180.0:
        a += 360.0
    return a

