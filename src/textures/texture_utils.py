"""Texture loading utilities.

Loading failures are not caught: a missing or unreadable atlas stops the
program at startup.
"""

import pygame
from typing import Tuple


def get_texture_size(texture: pygame.Surface) -> Tuple[int, int]:
    """Return (width, height) of a loaded texture."""
    width, height = texture.get_size()
    return int(width), int(height)


def load_texture(filename):
    """Load a texture from an image file.

    Parameters
    ----------
    filename : str
        Path to the image file

    Returns
    -------
    pygame.Surface
        The decoded image, converted for fast alpha blits when a display
        mode is set.
    """
    surface = pygame.image.load(filename)

    # convert_alpha needs a display surface; keep the raw image otherwise
    if pygame.display.get_surface() is not None:
        surface = surface.convert_alpha()

    width, height = get_texture_size(surface)
    print(f"Loaded texture: {filename} (Size: {width}x{height})")
    return surface
