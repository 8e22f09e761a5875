from tickgrid.entities.base_entity import Positionable, Transform
from tickgrid.entities.player import Player

__all__ = ["Positionable", "Transform", "Player"]
