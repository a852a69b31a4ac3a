"""Score tracking for a single match."""


class ScoreTracker:
    """Tracks score and kills for one match. Nothing is persisted."""

    def __init__(self):
        self.score: int = 0
        self.kills: int = 0

    # ------------------------------------------------------------------
    # Events
    # ------------------------------------------------------------------

    def on_enemy_kill(self, points: int) -> int:
        """Record a destroyed enemy. Returns points awarded."""
        awarded = max(0, int(points))
        self.score += awarded
        self.kills += 1
        return awarded

    def summary(self) -> str:
        return f"Final Score: {self.score}  ({self.kills} tanks destroyed)"
