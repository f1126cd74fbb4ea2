"""World scene: draws the tile map and drives the actors every frame.

Frame order matters for the look of the demo. Each actor is advanced,
then its shadow and the actor are drawn, and only then wrapped, re-synced
and given the next frame's lift, pose and velocity. Shadows therefore
trail one step behind the actor they belong to.
"""

from __future__ import annotations

from config import *

import math
import time
from typing import Callable, Optional

import pygame

from core.area import Area
from core.canvas import Canvas
from core.scene import FrameContext, Scene

from world.sprite import Sprite
from world.tilemap import DEFAULT_MAP, draw_map
from world.world_collision import CollisionPolicy, no_collision, revert_on_overlap
from world.world_spawner import ActorPair, spawn_actor_pairs

from textures.texture_utils import load_texture
from textures.resourcepath import SPRITES_TEXTURE_PATH


def jump_height(frame_counter: float, height: float = JUMP_HEIGHT, period: float = JUMP_PERIOD) -> int:
    return int(abs(math.sin(frame_counter / period) * height))


def select_frame_index(frame_counter: int, vx: float) -> int:
    """Walk-cycle frame: frames 0/1 face left (or idle), 2/3 face right,
    alternating every ANIM_PHASE_FRAMES frames."""
    phase = (frame_counter // ANIM_PHASE_FRAMES) % 2
    facing = 2 if vx > 0 else 0
    return facing + phase


def steer_towards(sprite: Sprite, target_x: float, target_y: float) -> tuple[float, float]:
    return (
        (target_x - sprite.x) / STEER_DIVISOR,
        (target_y - sprite.y) / STEER_DIVISOR,
    )


def wrap_area(width: float = WIDTH, height: float = HEIGHT, margin: float = WRAP_MARGIN) -> Area:
    return Area(-margin, -margin, width + margin * 2, height + margin * 2)


class WorldScene(Scene):
    def __init__(
        self,
        canvas: Canvas,
        texture=None,
        *,
        grid=DEFAULT_MAP,
        pairs: Optional[list[ActorPair]] = None,
        collision: Optional[CollisionPolicy] = None,
        delay: Optional[Callable[[int], object]] = None,
        delay_ms: int = FRAME_DELAY_MS,
    ) -> None:
        super().__init__()
        self.canvas = canvas
        self.texture = texture if texture is not None else load_texture(SPRITES_TEXTURE_PATH)
        self.grid = grid
        self.pairs = pairs if pairs is not None else spawn_actor_pairs(self.texture, EXTRA_ACTORS, SEED)
        if collision is None:
            collision = revert_on_overlap if COLLISION_ENABLED else no_collision
        self.collision = collision
        self.delay = delay or pygame.time.delay
        self.delay_ms = delay_ms
        self.bounds = wrap_area()
        # Obstacle rectangles from the last drawn map
        self.obstacles: list[Area] = []

        print("World Scene Initialized")

    @property
    def player(self) -> Sprite:
        # The controlled actor is always spawned last
        return self.pairs[-1].actor

    def log_timing(self, label: str, start: float, end: float) -> None:
        if DEBUG_TIMING:
            print(f"{label} took {end - start:.6f} seconds")

    def update_pair(self, pair: ActorPair, ctx: FrameContext) -> None:
        actor = pair.actor
        actor.tick()
        pair.shadow.draw(self.canvas)
        actor.draw(self.canvas)

        actor.wrap(self.bounds)
        pair.sync_shadow()

        actor.z = jump_height(ctx.frame_counter)
        actor.index = select_frame_index(ctx.frame_counter, actor.vx)
        actor.vx, actor.vy = steer_towards(actor, ctx.pointer_x, ctx.pointer_y)

        actor.x, actor.y = self.collision(actor, self.obstacles)

    def frame(self, ctx: FrameContext) -> None:
        start = time.perf_counter()
        self.canvas.clear()
        self.obstacles = draw_map(self.texture, self.canvas, self.grid, CHIP_SIZE)
        self.log_timing("Drawing tile map", start, time.perf_counter())

        for pair in self.pairs:
            self.update_pair(pair, ctx)

        ctx.frame_counter += 1
        self.canvas.present()
        self.log_timing("Frame", start, time.perf_counter())

        self.delay(self.delay_ms)
