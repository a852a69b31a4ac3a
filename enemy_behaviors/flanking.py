"""Flanking pursuit: circle the player once in close range."""
from enemy_behaviors.base import Behavior


class Flanking(Behavior):
    """Orbits instead of closing distance inside the flank radius."""

    def steer(self, move, distance, time_ms, balance):
        if distance < balance.flank_distance:
            return move.perp() * balance.flank_circle_factor
        return move
