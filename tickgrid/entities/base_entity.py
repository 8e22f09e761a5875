"""
base_entity.py
--------------
Position capability shared by anything that lives on the grid.

Entities do not inherit their position; they hold a ``Transform`` component
and satisfy the ``Positionable`` protocol by delegating to it.
"""

from typing import Protocol, runtime_checkable

import pygame


@runtime_checkable
class Positionable(Protocol):
    """Anything with a mutable grid position."""

    @property
    def x(self) -> float: ...

    @property
    def y(self) -> float: ...

    def move(self, dx: float, dy: float) -> None: ...


class Transform:
    """Float position component backed by a pygame vector."""

    __slots__ = ("pos",)

    def __init__(self, x: float = 0.0, y: float = 0.0):
        self.pos = pygame.Vector2(x, y)

    @property
    def x(self) -> float:
        return self.pos.x

    @x.setter
    def x(self, value: float):
        self.pos.x = value

    @property
    def y(self) -> float:
        return self.pos.y

    @y.setter
    def y(self, value: float):
        self.pos.y = value

    def move(self, dx: float, dy: float) -> None:
        """Translate in place."""
        self.pos += (dx, dy)

    def place(self, x: float, y: float) -> None:
        """Jump to an absolute position."""
        self.pos.update(x, y)

    def __repr__(self):
        return f"Transform({self.pos.x:g}, {self.pos.y:g})"
