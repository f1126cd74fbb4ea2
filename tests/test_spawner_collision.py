import random

from core.area import Area
from world.sprite import Sprite
from world.world_collision import no_collision, revert_on_overlap
from world.world_spawner import (
    ACTOR_FRAMES,
    SHADOW_FRAMES,
    create_actor,
    create_shadow,
    spawn_actor_pair,
    spawn_actor_pairs,
)


def test_frame_tables_follow_atlas_layout():
    assert ACTOR_FRAMES == [Area(x, 0, 16, 16) for x in (0, 16, 32, 48)]
    assert SHADOW_FRAMES == [Area(0, 48, 16, 16)]


def test_create_actor_spawns_on_canvas(atlas):
    rng = random.Random(1)
    for _ in range(50):
        actor = create_actor(atlas, rng)
        assert 0 <= actor.x < 1000 and 0 <= actor.y < 800
        assert actor.x == int(actor.x)
        assert (actor.origin_x, actor.origin_y, actor.scale) == (8, 16, 4)
        assert (actor.vx, actor.vy, actor.z, actor.index) == (0, 0, 0, 0)


def test_create_shadow_origin(atlas):
    shadow = create_shadow(atlas)
    assert (shadow.origin_x, shadow.origin_y, shadow.scale) == (14, 0, 4)
    assert shadow.texture is atlas


def test_pair_starts_with_shadow_under_actor(atlas):
    pair = spawn_actor_pair(atlas, random.Random(2))
    assert (pair.shadow.x, pair.shadow.y) == (pair.actor.x, pair.actor.y)


def test_spawn_actor_pairs_puts_player_last(atlas):
    pairs = spawn_actor_pairs(atlas, extra=2, seed=5)
    assert [p.actor.id for p in pairs] == [1, 2, 0]
    again = spawn_actor_pairs(atlas, extra=2, seed=5)
    assert [(p.actor.x, p.actor.y) for p in pairs] == [(p.actor.x, p.actor.y) for p in again]


def make_mover(atlas, x, y, vx, vy):
    sprite = Sprite(atlas, list(ACTOR_FRAMES), x=x, y=y, vx=vx, vy=vy, scale=4)
    return sprite


def test_no_collision_keeps_position(atlas):
    sprite = make_mover(atlas, 10, 20, 3, 4)
    assert no_collision(sprite, [Area(0, 0, 64, 64)]) == (10, 20)


def test_revert_on_overlap_steps_back(atlas):
    sprite = make_mover(atlas, 10, 20, 3, 4)
    assert revert_on_overlap(sprite, [Area(0, 0, 64, 64)]) == (7, 16)


def test_revert_on_overlap_ignores_distant_tiles(atlas):
    sprite = make_mover(atlas, 10, 20, 3, 4)
    assert revert_on_overlap(sprite, [Area(256, 256, 64, 64)]) == (10, 20)


def test_revert_on_overlap_rechecks_after_each_step(atlas):
    # Footprint spans x 60..124; stepping back 10 clears the second tile
    sprite = make_mover(atlas, 60, 0, 10, 0)
    tiles = [Area(0, 0, 64, 64), Area(120, 0, 64, 64)]
    assert revert_on_overlap(sprite, tiles) == (50, 0)
