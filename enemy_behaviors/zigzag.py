"""Zigzag pursuit: weave side to side while closing in."""
from enemy_behaviors.base import Behavior
import math


class Zigzag(Behavior):
    """Adds a sideways oscillation driven by simulation time."""

    def steer(self, move, distance, time_ms, balance):
        factor = math.sin(time_ms / balance.zigzag_period_ms) * balance.zigzag_amplitude
        return move + move.perp() * factor
