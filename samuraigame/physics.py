"""Axis-aligned box collision checks."""

from __future__ import annotations

from typing import Protocol

from samuraigame.vectors import F2V, RaycastHit


class _RectLike(Protocol):
    x: int
    y: int
    w: int
    h: int


def _intersects(ax: int, ay: int, aw: int, ah: int, b: _RectLike) -> bool:
    if aw <= 0 or ah <= 0 or b.w <= 0 or b.h <= 0:
        return False
    return ax < b.x + b.w and b.x < ax + aw and ay < b.y + b.h and b.y < ay + ah


def aabb_cast(
    source: _RectLike, target: _RectLike, velocity: F2V, delta_time: float
) -> RaycastHit | None:
    """Check whether moving ``source`` by ``velocity`` hits ``target``.

    Each axis is tested on its own. Returns a hit whose normal points away
    from the target on every axis that collides, or None when nothing is hit.
    """
    if velocity.x == 0 and velocity.y == 0:
        return None

    hit = RaycastHit()
    collided = False

    if velocity.x != 0:
        future_x = source.x + int(velocity.x * delta_time)
        if _intersects(future_x, source.y, source.w, source.h, target):
            collided = True
            hit.normal.x = -1.0 if velocity.x > 0 else 1.0

    if velocity.y != 0:
        future_y = source.y + int(velocity.y * delta_time)
        if _intersects(source.x, future_y, source.w, source.h, target):
            collided = True
            hit.normal.y = -1.0 if velocity.y > 0 else 1.0

    return hit if collided else None