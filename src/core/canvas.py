"""Drawing surface seam between the world and the host library.

Everything in `world/` draws through the three calls on `Canvas`; the
pygame-backed implementation lives here so tests can swap in a recorder.
"""

from __future__ import annotations

from typing import Protocol

import pygame

from core.area import Area


class Canvas(Protocol):
    def clear(self) -> None: ...  # noqa: D401

    def copy(self, texture, src: Area, dst: Area) -> None: ...  # noqa: D401

    def present(self) -> None: ...  # noqa: D401


class PygameCanvas:
    """Canvas over a pygame surface (normally the display surface).

    `copy` cuts `src` out of the texture and stretches it to `dst`, the
    same contract as SDL_RenderCopy. Scaled chips are cached per
    (texture, src, size) since the atlas never changes during a run.
    """

    def __init__(self, surface: pygame.Surface, clear_color=(0, 0, 0)) -> None:
        self.surface = surface
        self.clear_color = clear_color
        self._scaled: dict[tuple[int, tuple[int, int, int, int], tuple[int, int]], pygame.Surface] = {}

    def clear(self) -> None:
        self.surface.fill(self.clear_color)

    def copy(self, texture: pygame.Surface, src: Area, dst: Area) -> None:
        src_rect = src.to_rect()
        dst_rect = dst.to_rect()
        size = (dst_rect.width, dst_rect.height)
        key = (id(texture), tuple(src_rect), size)
        chip = self._scaled.get(key)
        if chip is None:
            chip = texture.subsurface(src_rect)
            if size != src_rect.size:
                chip = pygame.transform.scale(chip, size)
            self._scaled[key] = chip
        self.surface.blit(chip, dst_rect.topleft)

    def present(self) -> None:  # pragma: no cover - visual
        pygame.display.flip()


__all__ = ["Canvas", "PygameCanvas"]
