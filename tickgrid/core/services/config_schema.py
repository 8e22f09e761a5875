"""
config_schema.py
----------------
Range checks for a loaded Configuration.

The loader never runs these itself. The engine validates after every load
and substitutes safe values when a check fails.
"""

from typing import List

from tickgrid.core.debug.debug_logger import DebugLogger
from tickgrid.core.runtime.game_settings import Schema


class ConfigSchema:
    """Validates grid size and player start position."""

    def __init__(self, width_range=Schema.WIDTH_RANGE, height_range=Schema.HEIGHT_RANGE):
        self.width_range = width_range
        self.height_range = height_range

    def errors(self, cfg) -> List[str]:
        """Every rule ``cfg`` violates, in check order."""
        problems = []
        min_w, max_w = self.width_range
        min_h, max_h = self.height_range

        if not min_w <= cfg.width <= max_w:
            problems.append(f"config width out of range ({cfg.width} not in [{min_w}, {max_w}])")
        if not min_h <= cfg.height <= max_h:
            problems.append(f"config height out of range ({cfg.height} not in [{min_h}, {max_h}])")
        if not (0 <= cfg.start_x < cfg.width and 0 <= cfg.start_y < cfg.height):
            problems.append(f"player start out of bounds ({cfg.start_x}, {cfg.start_y})")
        return problems

    def validate(self, cfg) -> bool:
        """True if ``cfg`` passes every check; failures are logged to stderr."""
        problems = self.errors(cfg)
        for problem in problems:
            DebugLogger.fail(problem, category="config")
        return not problems
