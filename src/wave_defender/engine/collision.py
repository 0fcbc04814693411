"""
Axis-aligned rectangle collision.
"""

from __future__ import annotations

from wave_defender.entities import Entity


def collides(a: Entity, b: Entity) -> bool:
    """
    Check whether two entities overlap.

    Only living entities collide. Rectangles are half-open, so boxes that
    merely touch along an edge do not overlap.

    :param a: First entity.
    :type a: Entity

    :param b: Second entity.
    :type b: Entity

    :return: True if both are alive and their bounds intersect.
    :rtype: bool
    """
    if not a.alive or not b.alive:
        return False
    return a.bounds.colliderect(b.bounds)
