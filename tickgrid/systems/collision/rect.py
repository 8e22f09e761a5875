"""
rect.py
-------
Axis-aligned bounding box used for every collision test in the runtime.

Rectangles are immutable values: two rects with the same coordinates are
interchangeable, and overlap is decided purely from those coordinates.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Rect:
    """Float rectangle anchored at its top-left corner."""
    x: float
    y: float
    w: float = 1.0
    h: float = 1.0

    def __post_init__(self):
        if self.w < 0 or self.h < 0:
            raise ValueError(f"Rect size must be non-negative, got w={self.w} h={self.h}")

    @classmethod
    def unit(cls, x: float, y: float) -> "Rect":
        """Build a 1x1 rect occupying the grid cell at (x, y)."""
        return cls(float(x), float(y), 1.0, 1.0)

    def collides(self, other: "Rect") -> bool:
        """Return True if this rect overlaps ``other`` on both axes."""
        return collides(self, other)


def collides(a: Rect, b: Rect) -> bool:
    """
    Strict overlap test on both axes.

    Touching edges do not count as a collision, and the result is the same
    whichever rect is passed first.
    """
    return (
        a.x < b.x + b.w
        and a.x + a.w > b.x
        and a.y < b.y + b.h
        and a.y + a.h > b.y
    )
