from .texture_utils import load_texture, get_texture_size

__all__ = [
    "load_texture",
    "get_texture_size",
]
