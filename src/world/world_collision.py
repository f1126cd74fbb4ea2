"""Pluggable collision against obstacle tiles.

A policy maps an actor and the obstacle rectangles collected by
`draw_map` to the position the actor should end the frame at. The scene
uses `no_collision` unless COLLISION_ENABLED is set.
"""

from __future__ import annotations

from typing import Callable, Iterable, Tuple

from core.area import Area
from world.sprite import Sprite

CollisionPolicy = Callable[[Sprite, Iterable[Area]], Tuple[float, float]]


def no_collision(sprite: Sprite, obstacles: Iterable[Area]) -> tuple[float, float]:
    return sprite.x, sprite.y


def footprint(sprite: Sprite, x: float, y: float) -> Area:
    """Box at (x, y) sized like the sprite's first frame on screen."""
    frame = sprite.frames[0]
    return Area(x, y, frame.width * sprite.scale, frame.height * sprite.scale)


def revert_on_overlap(sprite: Sprite, obstacles: Iterable[Area]) -> tuple[float, float]:
    """Step back one velocity step for every obstacle the footprint overlaps.

    The footprint moves with each step back, so later obstacles are tested
    against the corrected position.
    """
    x, y = sprite.x, sprite.y
    for tile in obstacles:
        if footprint(sprite, x, y).overlaps(tile):
            x -= sprite.vx
            y -= sprite.vy
    return x, y
