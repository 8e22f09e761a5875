"""
collision_manager.py
--------------------
Scans the obstacle list for the player's bounding box.

Responsibilities
----------------
- Test a rect against obstacles in insertion order.
- Report only the first overlapping obstacle; callers apply at most one
  collision effect per tick.
"""

from typing import Iterable, Optional

from tickgrid.core.debug.debug_logger import DebugLogger
from tickgrid.systems.collision.rect import Rect, collides


class CollisionManager:
    """Detects collisions but lets the engine decide what happens."""

    def __init__(self):
        self.checks = 0
        self.hits = 0

    def first_hit(self, rect: Rect, obstacles: Iterable[Rect]) -> Optional[Rect]:
        """
        Return the first obstacle overlapping ``rect``.

        Args:
            rect: Bounding box of the moving entity.
            obstacles: Obstacles in the order they were added to the world.

        Returns:
            The colliding obstacle, or None when nothing overlaps.
        """
        for obstacle in obstacles:
            self.checks += 1
            if collides(rect, obstacle):
                self.hits += 1
                DebugLogger.trace(
                    f"Hit obstacle at ({obstacle.x:g}, {obstacle.y:g})",
                    category="collision"
                )
                return obstacle
        return None
