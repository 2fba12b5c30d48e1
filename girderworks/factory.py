"""Builders for every kind of object in a level, and hammer hits on enemies."""

from .animation import SpriteComponent
from .component import Component
from .definitions import (
    BARREL,
    DOWN,
    ENEMY,
    ENEMY_DEATH,
    FIREBALL,
    HAMMER,
    LADDER,
    LEFT,
    PEACH,
    PLATFORM,
    PLAYER,
    RIGHT,
    ROPE,
    SPAWNER,
    SPRING,
    TILESCALE,
    UP,
)
from .enemy import EnemyComponent, EnemyDamageComponent
from .gameobject import Keyboard
from .hammer import HammerComponent
from .modular import ModularObject
from .physics import PhysicsComponent
from .player import LadderComponent, PlayerMoveComponent

PLAYER_SHEET = "assets/og_Mario_Sheet.png"
ENEMY_SHEET = "assets/og_DK_Sheet.png"
PEACH_SHEET = "assets/og_Peach_Sheet.png"
PLATFORM_TEXTURE = "assets/og_RedGirder.png"
LADDER_TEXTURE = "assets/og_Ladder.png"
SPAWNER_TEXTURE = "assets/og_PlatformSpawner.png"
ROPE_TEXTURE = "assets/og_PlatformSpawnerRope.png"
FIREBALL_SHEET = "assets/og_Fireball_Sheet.png"
SPRING_SHEET = "assets/og_Spring_Sheet.png"
BARREL_SHEET = "assets/og_Barrel_Sheet.png"
HAMMER_SHEET = "assets/og_Hammer_Sheet.png"

KEYBOARD = Keyboard()
"""The key state read by the player objects this module builds."""

_SHEET_ORIGIN = (0, 0)


class HitByHammerComponent(Component):
    """Kills its enemy owner when the visible hammer overlaps it."""

    def __init__(self, owner, player, hammer, sound_manager):
        super().__init__("HitByHammerComp")
        self.attach_owner(owner)
        self.player = player
        self.hammer = hammer
        self.sound_manager = sound_manager

    def perform(self):
        owner = self.owner
        hammer = self.hammer
        ox, oy = owner.sprite.position
        hx, hy = hammer.sprite.position
        overlapping = (
            ox < hx + hammer.width
            and hx < ox + owner.width
            and oy < hy + hammer.height
            and hy < oy + owner.height
        )
        if overlapping and owner.hp > 0 and hammer.visible:
            owner.hp = 0
            owner.dead = True
            self.sound_manager.play_sfx(ENEMY_DEATH, False)


def _sheet_object(name, path, columns, rows, x, y, scale=None):
    obj = ModularObject(name, path, _SHEET_ORIGIN)
    obj.set_frame_grid(columns, rows)
    obj.set_sprite()
    if scale is not None:
        obj.scale_object(scale)
    obj.set_tile_xy(x, y)
    return obj


def _tile_object(name, path, x, y):
    obj = ModularObject(name, path)
    obj.set_tile_xy(x, y)
    return obj


def make_player(x, y):
    player = _sheet_object(PLAYER, PLAYER_SHEET, 7, 5, x, y, scale=0.5)
    player.attach_component(PlayerMoveComponent(player, KEYBOARD))
    player.attach_component(PhysicsComponent(player))
    player.attach_component(LadderComponent(player, KEYBOARD))
    player.attach_component(SpriteComponent(player))
    player.attach_component(EnemyDamageComponent(player))
    return player


def make_enemy(state, x, y):
    enemy = _sheet_object(ENEMY, ENEMY_SHEET, 4, 4, x, y)
    enemy.state = state
    enemy.attach_component(EnemyComponent(enemy))
    enemy.attach_component(PhysicsComponent(enemy))
    enemy.attach_component(SpriteComponent(enemy))
    return enemy


def make_peach(x, y):
    return _sheet_object(PEACH, PEACH_SHEET, 3, 2, x, y, scale=0.5)


def make_platform(x, y):
    return _tile_object(PLATFORM, PLATFORM_TEXTURE, x, y)


def make_ladder(x, y):
    return _tile_object(LADDER, LADDER_TEXTURE, x, y)


def make_spawner(direction, x, y):
    """Build a platform spawner turned to face ``direction``."""
    spawner = ModularObject(SPAWNER, SPAWNER_TEXTURE)
    if direction == UP:
        spawner.set_tile_xy(x, y)
    elif direction == DOWN:
        spawner.sprite.rotate(180)
        spawner.set_tile_xy(x + 1, y - 1)
    elif direction == LEFT:
        spawner.sprite.rotate(-90)
        spawner.set_tile_xy(x - 1, y)
    elif direction == RIGHT:
        spawner.sprite.rotate(90)
        spawner.set_tile_xy(x + 1, y)
    return spawner


def make_spawner_rope(x, y):
    return _tile_object(ROPE, ROPE_TEXTURE, x, y)


def make_fireball(move_direction, x, y):
    fireball = _sheet_object(FIREBALL, FIREBALL_SHEET, 4, 3, x, y, scale=0.5)
    fireball.attach_component(EnemyComponent(fireball))
    fireball.attach_component(PhysicsComponent(fireball))
    fireball.attach_component(SpriteComponent(fireball))
    fireball.moving_direction = move_direction
    return fireball


def make_spring(move_direction, x, y):
    spring = _sheet_object(SPRING, SPRING_SHEET, 4, 2, x, y, scale=0.5)
    spring.attach_component(PhysicsComponent(spring))
    spring.attach_component(EnemyComponent(spring))
    spring.attach_component(SpriteComponent(spring))
    spring.moving_direction = move_direction
    spring.collisions.climbing = False
    return spring


def make_barrel(move_direction, x, y):
    barrel = _sheet_object(BARREL, BARREL_SHEET, 4, 4, x, y)
    barrel.attach_component(EnemyComponent(barrel))
    barrel.attach_component(PhysicsComponent(barrel))
    barrel.attach_component(SpriteComponent(barrel))
    barrel.moving_direction = move_direction
    return barrel


def make_hammer(player):
    """Build the player's hidden hammer and attach it as the player's child."""
    hammer = ModularObject(HAMMER, HAMMER_SHEET, _SHEET_ORIGIN)
    hammer.set_frame_grid(2, 4)
    hammer.set_sprite()
    px, py = player.sprite.position
    hammer.sprite.position = (px, py / 24 - 2 * TILESCALE)
    hammer.attach_component(HammerComponent(hammer))
    hammer.scale_object(0.5)
    hammer.toggle_visibility()
    player.attach_child(hammer)
    return hammer