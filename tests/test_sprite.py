import pytest

from core.area import Area
from world.worldscene import wrap_area


def test_tick_integrates_velocity(sprite):
    sprite.x, sprite.y = 10, 20
    sprite.vx, sprite.vy = 1.5, -2
    sprite.tick()
    assert (sprite.x, sprite.y) == (11.5, 18)
    sprite.tick()
    assert (sprite.x, sprite.y) == (13.0, 16)


def test_tick_does_not_draw(sprite, canvas):
    sprite.vx = 3
    sprite.tick()
    assert canvas.calls == []


def test_draw_anchors_at_origin_and_lift(sprite, canvas):
    sprite.x, sprite.y, sprite.z = 100, 200, 7
    sprite.origin_x, sprite.origin_y = 8, 16
    sprite.scale = 4
    sprite.index = 1
    sprite.draw(canvas)

    assert canvas.calls == [
        ("copy", sprite.texture, Area(16, 0, 16, 16), Area(92, 177, 64, 64)),
    ]


def test_draw_with_bad_index_raises(sprite, canvas):
    sprite.index = 5
    with pytest.raises(IndexError):
        sprite.draw(canvas)


def test_wrap_leaves_inside_positions_alone(sprite):
    area = wrap_area(1000, 800, 48)
    for x, y in [(-48, -48), (0, 0), (500.25, 399.75), (1047.5, 847.5)]:
        sprite.x, sprite.y = x, y
        sprite.wrap(area)
        assert sprite.x == pytest.approx(x)
        assert sprite.y == pytest.approx(y)


def test_wrap_past_high_edge_reenters_at_low_edge(sprite):
    area = Area(-48, -48, 1096, 896)
    sprite.x = area.x + area.width + 1
    sprite.y = area.y + area.height + 1
    sprite.wrap(area)
    assert sprite.x == pytest.approx(area.x + 1)
    assert sprite.y == pytest.approx(area.y + 1)


def test_wrap_keeps_sign_of_offset_past_low_edge(sprite):
    # Truncated remainder: leaving through the low edge is not wrapped
    area = Area(-48, -48, 1096, 896)
    sprite.x, sprite.y = -100, -60
    sprite.wrap(area)
    assert sprite.x == pytest.approx(-100)
    assert sprite.y == pytest.approx(-60)

    sprite.x = -48 - 1096 - 10
    sprite.wrap(area)
    assert sprite.x == pytest.approx(-58)


def test_wrap_area_extends_past_canvas():
    assert wrap_area(1000, 800, 48) == Area(-48, -48, 1096, 896)
