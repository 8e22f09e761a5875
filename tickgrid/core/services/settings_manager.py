"""
settings_manager.py
-------------------
Persists the high score between runs.

The file holds a single whitespace-delimited integer. Reading falls back to
0 and writing failures are logged, never raised.
"""

import os

from tickgrid.core.debug.debug_logger import DebugLogger
from tickgrid.core.runtime.game_settings import Paths


class SettingsManager:
    """Read-int / write-int store for the high score."""

    def __init__(self, path: str = Paths.HIGHSCORE_FILE):
        self.path = path

    def load(self) -> int:
        """Stored high score, or 0 when missing, unparsable or not positive."""
        if not os.path.exists(self.path):
            DebugLogger.system("No saved high score", category="persistence")
            return 0

        try:
            with open(self.path, "r", encoding="utf-8") as f:
                tokens = f.read().split()
        except (IOError, OSError) as e:
            DebugLogger.warn(f"Failed to read high score: {e}", category="persistence")
            return 0

        if not tokens:
            return 0
        try:
            value = int(tokens[0])
        except ValueError:
            DebugLogger.warn(f"Ignoring malformed high score '{tokens[0]}'", category="persistence")
            return 0
        return value if value > 0 else 0

    def save(self, value: int) -> bool:
        """Overwrite the stored high score. Returns False if the write failed."""
        try:
            with open(self.path, "w", encoding="utf-8") as f:
                f.write(str(int(value)))
            DebugLogger.system(f"Saved high score {value} to {self.path}", category="persistence")
            return True
        except (IOError, OSError) as e:
            DebugLogger.warn(f"Failed to save high score: {e}", category="persistence")
            return False
