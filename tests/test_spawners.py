import pygame
import pytest

from girderworks.definitions import DOWN, PLATFORM, TILESCALE, UP
from girderworks.factory import PLATFORM_TEXTURE, PLAYER_SHEET, make_player
from girderworks.gameobject import GameResource, Texture
from girderworks.spawners import PlatformSpawnerManager, SpawnDirection


@pytest.fixture(autouse=True)
def textures():
    resource = GameResource.instance()
    resource.add_texture(PLATFORM_TEXTURE, Texture(pygame.Surface((8, 8))))
    resource.add_texture(PLAYER_SHEET, Texture(pygame.Surface((112, 80))))


@pytest.fixture
def player():
    return make_player(0, 0)


@pytest.fixture
def manager(player):
    return PlatformSpawnerManager(scene_platforms=[], player=player)


def test_spawner_builds_pairs(manager):
    spawner = manager.make_spawner(1.0, 2, 4, SpawnDirection.UP, 5, 10)
    plats = spawner.platforms
    assert len(plats) == 4
    assert plats == manager.scene_platforms
    for left, right in zip(plats[::2], plats[1::2]):
        assert left.sprite.x == TILESCALE * 5
        assert right.sprite.x == TILESCALE * 6
        assert left.sprite.y == right.sprite.y
    assert all(p.name == PLATFORM and p.get_component(UP) is not None for p in plats)


def test_pairs_are_spaced_by_tiles(manager):
    spawner = manager.make_spawner(1.0, 2, 4, UP, 5, 10)
    ys = [p.sprite.y for p in spawner.platforms[::2]]
    assert ys == [TILESCALE * 10, TILESCALE * 12]


def test_down_spawner_uses_down_movers(manager):
    spawner = manager.make_spawner(1.0, 1, 2, DOWN, 0, 0)
    assert all(p.get_component(DOWN) is not None for p in spawner.platforms)
    assert spawner.direction is SpawnDirection.DOWN


def test_rising_platform_wraps_back_to_start(manager):
    spawner = manager.make_spawner(1.0, 2, 4, UP, 5, 10)
    plat = spawner.platforms[0]
    plat.sprite.position = (plat.sprite.x, spawner.start_y - spawner.distance)
    manager.update()
    assert plat.sprite.y == spawner.start_y


def test_sinking_platform_wraps_up(manager):
    spawner = manager.make_spawner(1.0, 2, 4, DOWN, 5, 10)
    plat = spawner.platforms[0]
    manager.update()
    assert plat.sprite.y == spawner.start_y - spawner.distance


def test_player_carried_by_rising_platform(manager, player):
    spawner = manager.make_spawner(2.0, 2, 4, UP, 5, 10)
    player.collisions.colliding_platform = spawner.platforms[1]
    player.collisions.floor = True
    before = player.sprite.y
    manager.update()
    assert player.sprite.y == before - 2


def test_player_off_floor_not_carried(manager, player):
    spawner = manager.make_spawner(2.0, 2, 4, UP, 5, 10)
    player.collisions.colliding_platform = spawner.platforms[0]
    player.collisions.floor = False
    before = player.sprite.position
    manager.update()
    assert player.sprite.position == before


def test_reset_forgets_spawners(manager):
    manager.make_spawner(1.0, 2, 4, UP, 5, 10)
    manager.reset()
    assert manager.spawners == []


def test_zero_spacing_rejected(manager):
    with pytest.raises(ValueError):
        manager.make_spawner(1.0, 0, 4, UP, 5, 10)


def test_update_needs_player():
    manager = PlatformSpawnerManager()
    manager.make_spawner(1.0, 2, 4, UP, 5, 10)
    with pytest.raises(RuntimeError):
        manager.update()