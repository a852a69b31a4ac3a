"""Physics and collision detection logic."""

from utils import Vec2

Rect = tuple[float, float, float, float]


def rect_intersect(x1: float, y1: float, w1: float, h1: float,
                   x2: float, y2: float, w2: float, h2: float) -> bool:
    """Strict axis-aligned overlap; touching edges do not count."""
    return x1 < x2 + w2 and x1 + w1 > x2 and y1 < y2 + h2 and y1 + h1 > y2


def rects_overlap(a: Rect, b: Rect) -> bool:
    return rect_intersect(*a, *b)


def check_circle_collision(pos1: Vec2, r1: float, pos2: Vec2, r2: float) -> bool:
    """Check if two circles overlap."""
    d_sq = (pos1 - pos2).length_squared()
    r_sum = r1 + r2
    return d_sq < (r_sum * r_sum)


def push_out_of_rect(pos: Vec2, rect: Rect, step: float) -> Vec2:
    """Nudge a point one fixed step away from a rectangle's center.

    The push runs along whichever axis the point is further from the center on.
    Deep overlaps take several calls to clear.
    """
    x, y, w, h = rect
    dx = pos.x - (x + w / 2)
    dy = pos.y - (y + h / 2)
    if dx == 0 and dy == 0:
        return Vec2(pos.x, pos.y)
    if abs(dx) > abs(dy):
        return Vec2(pos.x + (step if dx > 0 else -step), pos.y)
    return Vec2(pos.x, pos.y + (step if dy > 0 else -step))
