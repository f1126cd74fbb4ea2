"""World package: re-export common symbols for simpler imports.

Callers can import public types from `world` directly, e.g.:

    from world import WorldScene, Sprite, draw_map

The implementation files remain under `world/*.py`.
"""

from .sprite import Sprite
from .tilemap import DEFAULT_MAP, OBSTACLE, draw_map, make_tilemap
from .world_spawner import ActorPair, create_actor, create_shadow, spawn_actor_pairs
from .world_collision import CollisionPolicy, no_collision, revert_on_overlap
from .worldscene import WorldScene, jump_height, select_frame_index, steer_towards, wrap_area

__all__ = [
    "Sprite",
    "DEFAULT_MAP",
    "OBSTACLE",
    "draw_map",
    "make_tilemap",
    "ActorPair",
    "create_actor",
    "create_shadow",
    "spawn_actor_pairs",
    "CollisionPolicy",
    "no_collision",
    "revert_on_overlap",
    "WorldScene",
    "jump_height",
    "select_frame_index",
    "steer_towards",
    "wrap_area",
]
