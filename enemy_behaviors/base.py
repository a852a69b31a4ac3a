"""Base class for enemy movement patterns."""
from abc import ABC, abstractmethod
from enum import Enum


class MovementPattern(Enum):
    """Pursuit strategies an enemy tank cycles through."""

    DIRECT = "direct"
    ZIGZAG = "zigzag"
    FLANKING = "flanking"

    def next(self) -> "MovementPattern":
        """Round-robin successor, used when terrain blocks the current pattern."""
        order = list(MovementPattern)
        return order[(order.index(self) + 1) % len(order)]


class Behavior(ABC):
    """Abstract base class for enemy behaviors."""

    @abstractmethod
    def steer(self, move, distance, time_ms, balance):
        """Modulate the base pursuit vector and return the move for this tick."""
        pass
