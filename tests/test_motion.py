import math

import pygame
import pytest

from girderworks.constant_move import Direction
from girderworks.definitions import PLAYER, PLATFORM
from girderworks.gameobject import GameResource, Texture
from girderworks.modular import ModularObject
from girderworks.motion import MovingPlatformComponent, OrbitComponent


def _make_object(name):
    key = "motion-test-8x8.png"
    GameResource.instance().add_texture(key, Texture(pygame.Surface((8, 8))))
    obj = ModularObject(name, key)
    obj.set_tile_xy(10, 10)
    return obj


def _centre_distance(obj, cx, cy):
    x = obj.sprite.x + obj.width // 2
    y = obj.sprite.y + obj.height // 2
    return math.hypot(x - cx, y - cy)


def test_orbit_keeps_centre_on_circle():
    obj = _make_object("orb")
    comp = OrbitComponent(obj, 100, 100, 50, 0, 37, Direction.RIGHT)
    for _ in range(12):
        comp.perform()
        assert _centre_distance(obj, 100, 100) == pytest.approx(50)


def test_orbit_right_advances_angle():
    obj = _make_object("orb")
    comp = OrbitComponent(obj, 0, 0, 10, 100, 20, Direction.RIGHT)
    comp.perform()
    assert comp.angle == 100 + 20


def test_orbit_left_reverses_angle():
    obj = _make_object("orb")
    comp = OrbitComponent(obj, 0, 0, 10, 100, 20, Direction.LEFT)
    comp.perform()
    assert comp.angle == 100 - 20


def test_orbit_angle_wraps():
    obj = _make_object("orb")
    comp = OrbitComponent(obj, 0, 0, 10, 300, 90, Direction.RIGHT)
    comp.perform()
    assert 0 < comp.angle < 360
    assert comp.angle == 30


def test_orbit_rejects_vertical_direction():
    obj = _make_object("orb")
    with pytest.raises(ValueError):
        OrbitComponent(obj, 0, 0, 10, 0, 1, Direction.UP)


def _platform(direction=Direction.RIGHT, speed=2, distance=3):
    plat = _make_object(PLATFORM)
    player = _make_object(PLAYER)
    comp = MovingPlatformComponent(plat, speed, direction, distance, player)
    plat.attach_component(comp)
    return plat, player, comp


def test_first_frame_attaches_movers():
    plat, _, comp = _platform()
    start_x = plat.sprite.x
    comp.perform()
    assert plat.get_component("right").enabled is True
    assert plat.get_component("left").enabled is False
    assert comp.starting_coord == start_x


def test_vertical_platform_uses_up_and_down():
    plat, _, comp = _platform(Direction.UP)
    comp.perform()
    assert plat.get_component("up").enabled is True
    assert plat.get_component("down").enabled is False
    assert plat.get_component("left") is None


def test_reverse_direction_swaps_and_resets_cooldown():
    plat, _, comp = _platform()
    comp.perform()
    comp.cooldown = 0
    comp.reverse_direction()
    assert plat.get_component("left").enabled is True
    assert plat.get_component("right").enabled is False
    assert comp.cooldown == 60
    comp.reverse_direction()
    assert plat.get_component("right").enabled is True


def test_reverse_before_start_raises():
    _, _, comp = _platform()
    with pytest.raises(RuntimeError):
        comp.reverse_direction()


def test_platform_carries_player_standing_on_it():
    plat, player, comp = _platform(speed=2)
    player.collisions.colliding_platform = plat
    player.collisions.floor = True
    start_x = player.sprite.x
    comp.perform()
    assert player.sprite.x == start_x + 2


def test_platform_ignores_airborne_player():
    plat, player, comp = _platform()
    player.collisions.colliding_platform = plat
    start = player.sprite.position
    comp.perform()
    assert player.sprite.position == start


def test_platform_eventually_turns_back():
    plat, _, comp = _platform(speed=2, distance=3)
    start_x = plat.sprite.x
    went_left = False
    furthest = start_x
    for _ in range(150):
        plat.update()
        furthest = max(furthest, plat.sprite.x)
        if plat.get_component("left").enabled:
            went_left = True
    assert went_left
    assert furthest > start_x
    assert plat.sprite.x < furthest


def test_disabled_platform_does_not_start():
    plat, _, comp = _platform()
    comp.enabled = False
    plat.update()
    assert plat.get_component("right") is None
    assert comp.started is False