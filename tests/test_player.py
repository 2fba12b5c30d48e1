import pygame

from girderworks.definitions import LEFT, PLAYER, PLAYER_MOVEMENT_SPEED, RIGHT, TILESCALE
from girderworks.gameobject import GameResource, Keyboard, Texture
from girderworks.modular import ModularObject
from girderworks.player import LadderComponent, PlayerMoveComponent


def _make_object(name=PLAYER):
    key = "player-test-8x8.png"
    GameResource.instance().add_texture(key, Texture(pygame.Surface((8, 8))))
    obj = ModularObject(name, key)
    obj.set_tile_xy(4, 4)
    return obj


def _player_with_keys(*keys):
    player = _make_object()
    keyboard = Keyboard()
    for key in keys:
        keyboard.press(key)
    move = PlayerMoveComponent(player, keyboard)
    ladder = LadderComponent(player, keyboard)
    player.attach_component(move)
    player.attach_component(ladder)
    return player, move, ladder


def test_d_walks_right():
    player, move, _ = _player_with_keys("d")
    start_x = player.sprite.x
    move.perform()
    assert player.sprite.x == start_x + int(PLAYER_MOVEMENT_SPEED)
    assert player.face_direction == RIGHT
    assert player.collisions.walk_right is True


def test_a_walks_left():
    player, move, _ = _player_with_keys("a")
    start_x = player.sprite.x
    move.perform()
    assert player.sprite.x == start_x - int(PLAYER_MOVEMENT_SPEED)
    assert player.face_direction == LEFT
    assert player.collisions.walk_left is True


def test_space_on_floor_jumps():
    player, move, _ = _player_with_keys("space")
    player.collisions.floor = True
    move.perform()
    assert player.collisions.jumping is True


def test_space_in_air_does_not_jump():
    player, move, _ = _player_with_keys("space")
    move.perform()
    assert player.collisions.jumping is False


def test_jump_is_held_for_a_few_frames():
    player, move, _ = _player_with_keys("space")
    player.collisions.floor = True
    move.perform()
    move.keyboard.release("space")
    player.collisions.floor = False
    held = 0
    for _ in range(20):
        player.collisions.jumping = False
        move.perform()
        if not player.collisions.jumping:
            break
        held += 1
    assert held == 7
    assert player.collisions.jumping is False


def test_w_at_ladder_foot_starts_climb():
    player, move, _ = _player_with_keys("w")
    player.collisions.ladder = True
    player.collisions.floor = True
    move.perform()
    assert player.collisions.start_climb_bot is True


def test_s_above_ladder_starts_descent():
    player, move, _ = _player_with_keys("s")
    player.collisions.tile_above_ladder = True
    move.perform()
    assert player.collisions.start_climb_top is True


def test_falling_out_of_bounds_kills():
    player, move, _ = _player_with_keys()
    player.sprite.position = (0, TILESCALE * 34)
    move.perform()
    assert player.hp == 0


def test_disabled_move_component_ignores_input():
    player, move, _ = _player_with_keys("d")
    move.enabled = False
    start = player.sprite.position
    move.perform()
    assert player.sprite.position == start
    assert player.collisions.walk_right is False


def test_climbing_with_w_moves_up():
    player, _, ladder = _player_with_keys("w")
    player.collisions.climbing = True
    start_y = player.sprite.y
    ladder.perform()
    assert player.sprite.y == start_y - int(PLAYER_MOVEMENT_SPEED)


def test_reaching_floor_ends_climb_and_restores_walking():
    player, move, ladder = _player_with_keys()
    move.enabled = False
    player.collisions.climbing = True
    player.collisions.floor = True
    start_y = player.sprite.y
    ladder.perform()
    assert player.collisions.climbing is False
    assert move.enabled is True
    assert player.sprite.y < start_y


def test_start_climb_bot_snaps_to_ladder():
    player, move, ladder_comp = _player_with_keys()
    ladder = _make_object("ladder")
    ladder.sprite.position = (200, 300)
    player.collisions.colliding_ladder = ladder
    player.collisions.start_climb_bot = True
    player.collisions.floor = True
    start_y = player.sprite.y
    ladder_comp.perform()
    assert player.sprite.position == (200, start_y - 5)
    assert player.collisions.climbing is True
    assert player.collisions.floor is False
    assert player.collisions.start_climb_bot is False
    assert move.enabled is False


def test_start_climb_top_snaps_to_ladder_top():
    player, move, ladder_comp = _player_with_keys()
    ladder = _make_object("ladder")
    ladder.sprite.position = (120, 240)
    player.collisions.colliding_ladder = ladder
    player.collisions.start_climb_top = True
    ladder_comp.perform()
    assert player.sprite.position == (120, 240)
    assert player.collisions.climbing is True
    assert player.collisions.start_climb_top is False
    assert move.enabled is False