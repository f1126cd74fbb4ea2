"""Screen-space sprite drawn from a shared atlas.

A sprite only integrates and projects its own state; choosing the
animation frame, the lift and the velocity is the scene's job.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from core.area import Area
from core.canvas import Canvas


@dataclass
class Sprite:
    texture: object
    frames: list[Area]
    x: float = 0
    y: float = 0
    # Lift above the ground, only affects drawing
    z: float = 0
    vx: float = 0
    vy: float = 0
    origin_x: float = 0
    origin_y: float = 0
    scale: float = 1
    index: int = 0
    id: int = field(default=0, compare=False)

    @property
    def frame(self) -> Area:
        return self.frames[self.index]

    def tick(self) -> None:
        self.x += self.vx
        self.y += self.vy

    def dest_rect(self) -> Area:
        frame = self.frame
        return Area(
            self.x - self.origin_x,
            self.y - self.origin_y - self.z,
            frame.width * self.scale,
            frame.height * self.scale,
        )

    def draw(self, canvas: Canvas) -> None:
        canvas.copy(self.texture, self.frame, self.dest_rect())

    def wrap(self, area: Area) -> None:
        """Re-enter the sprite on the far side of `area`.

        Uses a truncated remainder (sign follows the dividend), so a sprite
        that has left through the low edge keeps its offset and is only
        wrapped once it leaves through the high edge.
        """
        self.x = math.fmod(self.x - area.x, area.width) + area.x
        self.y = math.fmod(self.y - area.y, area.height) + area.y
