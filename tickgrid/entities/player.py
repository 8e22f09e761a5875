"""
player.py
---------
Defines the Player entity.

Responsibilities
----------------
- Hold the player's name and position (via a Transform component).
- Derive the unit bounding box used for obstacle collisions.
"""

from tickgrid.core.runtime.game_settings import PlayerDefaults
from tickgrid.entities.base_entity import Transform
from tickgrid.systems.collision.rect import Rect


class Player:
    """The controllable entity. Occupies exactly one grid cell."""

    __slots__ = ("name", "transform")

    def __init__(self, name: str = PlayerDefaults.NAME, x: float = 0.0, y: float = 0.0):
        self.name = name
        self.transform = Transform(x, y)

    # ===========================================================
    # Positionable
    # ===========================================================
    @property
    def x(self) -> float:
        return self.transform.x

    @property
    def y(self) -> float:
        return self.transform.y

    def move(self, dx: float, dy: float) -> None:
        self.transform.move(dx, dy)

    def place(self, x: float, y: float) -> None:
        self.transform.place(x, y)

    # ===========================================================
    # Collision
    # ===========================================================
    def get_rect(self) -> Rect:
        """Unit rect whose top-left corner is the player's position."""
        return Rect(self.x, self.y, 1.0, 1.0)

    def describe(self) -> str:
        return f"Player: {self.name}"

    def __repr__(self):
        return f"Player({self.name!r}, {self.x:g}, {self.y:g})"
