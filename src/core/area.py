from __future__ import annotations

from dataclasses import dataclass

import pygame


@dataclass
class Area:
    """Axis-aligned rectangle used as atlas source, screen destination and
    wrap boundary.

    Unlike `pygame.Rect` the fields may hold floats, so sprite positions are
    not truncated until the rectangle is handed to the host.
    """

    x: float
    y: float
    width: float
    height: float

    def to_rect(self) -> pygame.Rect:
        return pygame.Rect(int(self.x), int(self.y), int(self.width), int(self.height))

    def overlaps(self, other: "Area") -> bool:
        return (
            self.x < other.x + other.width
            and self.x + self.width > other.x
            and self.y < other.y + other.height
            and self.y + self.height > other.y
        )
