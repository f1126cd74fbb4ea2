from __future__ import annotations

from dataclasses import dataclass


@dataclass
class FrameContext:
    """Per-run state threaded through every frame call.

    Holds the last pointer position seen by the event loop and the global
    frame counter that drives animation phase and the jump bob.
    """

    pointer_x: float = 0
    pointer_y: float = 0
    frame_counter: int = 0

    def set_pointer(self, pos) -> None:
        self.pointer_x, self.pointer_y = pos


class Scene:
    # Optional per-event handler (scenes can override)
    def handle_event(self, event, ctx: FrameContext) -> None:
        pass

    # One draw tick; scenes own their full clear/draw/present sequence
    def frame(self, ctx: FrameContext) -> None:  # pragma: no cover - visual
        pass
