"""Atlas frame tables and factories for the actors placed at startup.

Every actor is paired with a shadow sprite that has no velocity of its
own; the scene copies the actor's position onto it each frame.
"""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Optional

from config import CHIP_SIZE, DISPLAY_SCALE, HEIGHT, WIDTH
from core.area import Area
from world.sprite import Sprite

# Walk cycle: chips 0-3 of the first atlas row
ACTOR_FRAMES = [Area(col * CHIP_SIZE, 0, CHIP_SIZE, CHIP_SIZE) for col in range(4)]
# Shadow: a single chip at the start of the fourth row
SHADOW_FRAMES = [Area(0, 3 * CHIP_SIZE, CHIP_SIZE, CHIP_SIZE)]


@dataclass
class ActorPair:
    actor: Sprite
    shadow: Sprite

    def sync_shadow(self) -> None:
        self.shadow.x = self.actor.x
        self.shadow.y = self.actor.y


def create_shadow(texture) -> Sprite:
    shadow = Sprite(texture, SHADOW_FRAMES)
    shadow.origin_x = shadow.frames[0].width / 2 + 6
    shadow.origin_y = shadow.frames[0].height - 16
    shadow.scale = DISPLAY_SCALE
    return shadow


def create_actor(texture, rng: Optional[random.Random] = None, actor_id: int = 0) -> Sprite:
    rng = rng or random.Random()
    actor = Sprite(texture, ACTOR_FRAMES, id=actor_id)
    # Integer spawn point anywhere on the visible canvas
    actor.x = int(rng.uniform(0, WIDTH))
    actor.y = int(rng.uniform(0, HEIGHT))
    actor.origin_x = actor.frames[0].width / 2
    actor.origin_y = actor.frames[0].height
    actor.scale = DISPLAY_SCALE
    return actor


def spawn_actor_pair(texture, rng: Optional[random.Random] = None, actor_id: int = 0) -> ActorPair:
    pair = ActorPair(create_actor(texture, rng, actor_id), create_shadow(texture))
    pair.sync_shadow()
    return pair


def spawn_actor_pairs(texture, extra: int = 0, seed=None) -> list[ActorPair]:
    """Spawn `extra` wandering actors followed by the controlled actor (id 0).

    The controlled actor comes last so it is drawn on top.
    """
    rng = random.Random(seed)
    pairs = [spawn_actor_pair(texture, rng, actor_id=n + 1) for n in range(extra)]
    pairs.append(spawn_actor_pair(texture, rng, actor_id=0))
    return pairs
