"""
test_rect.py
------------
Unit tests for the AABB overlap test and first-hit obstacle scan.

Covers:
- Strict overlap (touching edges do not collide)
- Symmetry of collides(a, b)
- Insertion-order first hit in CollisionManager
"""

import pytest

from tickgrid.systems.collision import CollisionManager, Rect, collides


# ===========================================================
# Overlap
# ===========================================================

@pytest.mark.parametrize("a, b, expected", [
    (Rect(0, 0, 1, 1), Rect(0, 0, 1, 1), True),        # identical
    (Rect(0, 0, 2, 2), Rect(1, 1, 2, 2), True),        # partial overlap
    (Rect(0, 0, 4, 4), Rect(1, 1, 1, 1), True),        # containment
    (Rect(0, 0, 1, 1), Rect(1, 0, 1, 1), False),       # touching right edge
    (Rect(0, 0, 1, 1), Rect(0, 1, 1, 1), False),       # touching bottom edge
    (Rect(0, 0, 1, 1), Rect(5, 5, 1, 1), False),       # far away
    (Rect(0.5, 0.5, 1, 1), Rect(1.2, 1.2, 1, 1), True),  # float positions
])
def test_collides(a, b, expected):
    assert collides(a, b) is expected


@pytest.mark.parametrize("a, b", [
    (Rect(0, 0, 1, 1), Rect(0.5, 0.5, 1, 1)),
    (Rect(3, 4, 1, 1), Rect(10, 10, 2, 2)),
    (Rect(-1, -1, 3, 3), Rect(0, 0, 1, 1)),
    (Rect(0, 0, 1, 1), Rect(1, 1, 1, 1)),
])
def test_collides_is_symmetric(a, b):
    assert collides(a, b) == collides(b, a)
    assert a.collides(b) == b.collides(a)


def test_rect_outside_on_one_axis_never_collides():
    """Overlapping horizontally is not enough when rows are disjoint."""
    a = Rect(0, 0, 5, 1)
    b = Rect(2, 3, 1, 1)
    assert not collides(a, b)


def test_zero_size_rect_does_not_collide_at_edge():
    assert not collides(Rect(1, 1, 0, 0), Rect(1, 1, 1, 1))


def test_negative_size_rejected():
    with pytest.raises(ValueError):
        Rect(0, 0, -1, 1)


def test_rect_is_a_value_type():
    assert Rect.unit(3, 4) == Rect(3.0, 4.0, 1.0, 1.0)
    assert len({Rect.unit(1, 1), Rect.unit(1, 1)}) == 1


# ===========================================================
# First Hit
# ===========================================================

def test_first_hit_returns_first_in_insertion_order():
    manager = CollisionManager()
    first = Rect.unit(2, 2)
    second = Rect(2, 2, 2, 2)
    assert manager.first_hit(Rect.unit(2, 2), [Rect.unit(9, 9), first, second]) is first
    assert manager.hits == 1


def test_first_hit_stops_scanning_after_hit():
    manager = CollisionManager()
    manager.first_hit(Rect.unit(0, 0), [Rect.unit(0, 0), Rect.unit(0, 0), Rect.unit(0, 0)])
    assert manager.checks == 1


def test_first_hit_none_when_clear():
    manager = CollisionManager()
    assert manager.first_hit(Rect.unit(0, 0), [Rect.unit(1, 0), Rect.unit(0, 1)]) is None
    assert manager.first_hit(Rect.unit(0, 0), []) is None
