"""Core engine loop & orchestration.

Separates concerns:
- Engine: sets up the window, owns the event loop and the frame context.
- Scene: holds the tile map and actors and does the per-frame work.

Events are handled one at a time to completion; there is no other
concurrent work, so the scene's blocking frame delay is acceptable.
"""

from __future__ import annotations

import sys

import pygame

from config import *
from core.canvas import PygameCanvas
from core.scene import FrameContext, Scene
from world.worldscene import WorldScene


# ---------------------------------------------------------------------------
# Engine
# ---------------------------------------------------------------------------
class Engine:
    def __init__(self, scene: Scene | None = None, ctx: FrameContext | None = None):
        pygame.init()
        pygame.display.set_caption(TITLE)
        screen = pygame.display.set_mode((WIDTH, HEIGHT))
        self.canvas = PygameCanvas(screen, CLEAR_COLOR)
        self.ctx = ctx or FrameContext()

        # The default scene loads its atlas here, after the display mode is set
        self.scene = scene if scene is not None else WorldScene(self.canvas)

    # ------------------------------------------------------------------
    def dispatch(self, event) -> None:
        """Handle one event to completion.

        Quit exits with status 0 and pointer motion updates the steering
        target. Every other event goes to `scene.handle_event`, which is a
        no-op on the base `Scene`, so the demo ignores them.
        """
        if event.type == pygame.QUIT:
            pygame.quit()
            sys.exit(0)
        if event.type == pygame.MOUSEMOTION:
            self.ctx.set_pointer(event.pos)
            return
        # Forward anything else to the active scene
        self.scene.handle_event(event, self.ctx)

    # ------------------------------------------------------------------
    def run(self):  # pragma: no cover - visual
        while True:
            for event in pygame.event.get():
                self.dispatch(event)
            # Each pass of the loop is one draw tick
            self.scene.frame(self.ctx)
