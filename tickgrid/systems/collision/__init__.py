from tickgrid.systems.collision.rect import Rect, collides
from tickgrid.systems.collision.collision_manager import CollisionManager

__all__ = ["Rect", "collides", "CollisionManager"]
