from .area import Area
from .canvas import Canvas, PygameCanvas
from .scene import FrameContext, Scene

__all__ = [
    "Area",
    "Canvas",
    "PygameCanvas",
    "FrameContext",
    "Scene",
]
