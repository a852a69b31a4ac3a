"""Direct pursuit: head straight for the player."""
from enemy_behaviors.base import Behavior


class Direct(Behavior):
    """Leaves the pursuit vector untouched."""

    def steer(self, move, distance, time_ms, balance):
        return move
