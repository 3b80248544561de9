"""Physics helpers: overlap tests and collider shape settings."""

from __future__ import annotations

from dataclasses import dataclass

from threesisters.components import BoxCollider2D, Transform2D

_DEFAULT_FRICTION = 0.5
_DEFAULT_RESTITUTION = 0.0


@dataclass(frozen=True)
class ShapeMaterial:
    """Density, friction and restitution applied to a collision shape."""

    density: float
    friction: float
    restitution: float


def aabb_collision(a: Transform2D, b: Transform2D) -> bool:
    """Return whether two centred axis-aligned boxes overlap or touch."""
    a_half = a.size / 2.0
    b_half = b.size / 2.0
    overlap_x = (a.position[0] + a_half[0] >= b.position[0] - b_half[0]) and (
        a.position[0] - a_half[0] <= b.position[0] + b_half[0]
    )
    overlap_y = (a.position[1] + a_half[1] >= b.position[1] - b_half[1]) and (
        a.position[1] - a_half[1] <= b.position[1] + b_half[1]
    )
    return bool(overlap_x and overlap_y)


def shape_material(collider: BoxCollider2D) -> ShapeMaterial:
    """Return the collider's material, defaulting values outside (0, 1]."""
    friction = (
        collider.friction if 0.0 < collider.friction <= 1.0 else _DEFAULT_FRICTION
    )
    restitution = (
        collider.restitution
        if 0.0 < collider.restitution <= 1.0
        else _DEFAULT_RESTITUTION
    )
    return ShapeMaterial(float(collider.density), float(friction), float(restitution))


def box_half_extents(
    collider: BoxCollider2D, transform: Transform2D
) -> tuple[float, float]:
    """Return the box shape's half width and half height in world units."""
    return (
        float(collider.size[0] * abs(transform.size[0])),
        float(collider.size[1] * abs(transform.size[1])),
    )