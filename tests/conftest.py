import os

# Headless pygame for the engine and canvas tests
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pytest

from core.area import Area
from world.sprite import Sprite

ATLAS = object()


class RecordingCanvas:
    """Canvas fake that records every call in order."""

    def __init__(self):
        self.calls = []

    def clear(self):
        self.calls.append(("clear",))

    def copy(self, texture, src, dst):
        self.calls.append(("copy", texture, src, dst))

    def present(self):
        self.calls.append(("present",))

    @property
    def copies(self):
        return [c for c in self.calls if c[0] == "copy"]


@pytest.fixture
def canvas():
    return RecordingCanvas()


@pytest.fixture
def sprite():
    return Sprite(ATLAS, [Area(0, 0, 16, 16), Area(16, 0, 16, 16)])


@pytest.fixture
def atlas():
    return ATLAS
