import pygame
import pytest

from girderworks.definitions import HAMMER, LEFT, PLAYER, RIGHT, TILESCALE
from girderworks.gameobject import Clock, GameResource, Texture
from girderworks.hammer import HammerComponent
from girderworks.modular import ModularObject

FRAME = 16


class FakeTimer:
    def __init__(self):
        self.now = 0.0

    def __call__(self):
        return self.now


def _setup(face):
    resource = GameResource.instance()
    resource.add_texture("hammer-player.png", Texture(pygame.Surface((7 * FRAME, 5 * FRAME))))
    resource.add_texture("hammer-sheet.png", Texture(pygame.Surface((2 * FRAME, 4 * FRAME))))
    player = ModularObject(PLAYER, "hammer-player.png", (0, 0))
    player.sprite.position = (100, 200)
    player.face_direction = face
    hammer = ModularObject(HAMMER, "hammer-sheet.png", (0, 0))
    hammer.set_frame_grid(2, 4)
    hammer.set_sprite()
    player.attach_child(hammer)
    timer = FakeTimer()
    comp = HammerComponent(hammer, clock=Clock(timer=timer))
    hammer.attach_component(comp)
    return player, hammer, comp, timer


def test_raise_then_swing_right():
    player, hammer, comp, timer = _setup(RIGHT)
    player.collisions.smash = True
    timer.now = 0.1
    comp.perform()
    assert hammer.sprite.position == (100, 200 - TILESCALE)
    assert hammer.sprite.texture_rect == (0, 0, FRAME, FRAME)
    assert hammer.visible is False
    timer.now = 0.25
    comp.perform()
    assert hammer.sprite.position == (100 + TILESCALE, 200)
    assert hammer.sprite.texture_rect == (FRAME, 0, FRAME, FRAME)
    assert player.collisions.smash is True


def test_swing_left_uses_second_row_and_reaches_left():
    player, hammer, comp, timer = _setup(LEFT)
    player.collisions.smash = True
    timer.now = 0.25
    comp.perform()
    assert hammer.sprite.position == (100 - TILESCALE, 200)
    assert hammer.sprite.texture_rect == (FRAME, FRAME, FRAME, FRAME)


def test_smash_ends_after_swing():
    player, hammer, comp, timer = _setup(RIGHT)
    player.collisions.smash = True
    timer.now = 0.35
    comp.perform()
    assert player.collisions.smash is False
    assert comp.time == 0.0


def test_hidden_when_not_smashing():
    player, hammer, comp, timer = _setup(RIGHT)
    assert hammer.visible is True
    comp.perform()
    assert hammer.visible is False
    comp.perform()
    assert hammer.visible is False


def test_parent_update_drives_hammer():
    player, hammer, comp, timer = _setup(RIGHT)
    player.collisions.smash = True
    timer.now = 0.1
    player.update()
    assert hammer.sprite.position == (100, 200 - TILESCALE)


def test_requires_parent():
    GameResource.instance().add_texture(
        "hammer-sheet.png", Texture(pygame.Surface((2 * FRAME, 4 * FRAME)))
    )
    hammer = ModularObject(HAMMER, "hammer-sheet.png", (0, 0))
    hammer.set_frame_grid(2, 4)
    comp = HammerComponent(hammer)
    with pytest.raises(RuntimeError):
        comp.perform()