"""
session_stats.py
----------------
Tracks statistics for the current run: score, level, high score and
collision count. Owned by one engine; there is no shared instance.
"""


# ===========================================================
# Session Stats
# ===========================================================

class SessionStats:
    """Container for run-specific statistics. Reset when a run starts."""

    def __init__(self):
        self.score = 0
        self.level = 0
        self.high_score = 0
        self.collisions = 0
        self.ticks = 0

    # ===========================================================
    # Core Stats
    # ===========================================================

    def add_score(self, amount: int = 1) -> bool:
        """
        Add to current score and update high score.

        Returns:
            True if the high score was raised.
        """
        self.score += amount
        if self.score > self.high_score:
            self.high_score = self.score
            return True
        return False

    def add_collision(self):
        self.collisions += 1

    def add_tick(self):
        self.ticks += 1

    def restore_high_score(self, value: int):
        """Adopt a persisted high score."""
        self.high_score = max(0, int(value))

    # ===========================================================
    # Lifecycle
    # ===========================================================

    def reset(self):
        """Reset for a new run. Preserves high score."""
        self.score = 0
        self.level = 1
        self.collisions = 0
        self.ticks = 0

    def status_line(self) -> str:
        return f"Score {self.score} Level {self.level} High {self.high_score}"
