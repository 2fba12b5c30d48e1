"""Enemy movement and the damage the player takes from touching enemies."""

from .component import Component
from .definitions import (
    BARREL,
    FIREBALL,
    FIREBALL_MOVEMENT_SPEED,
    FRAMERATE,
    LEFT,
    PLAYER_INVUL_TIME,
    RIGHT,
    SPRING,
    SPRING_MOVEMENT_SPEED,
)
from .gameobject import Transform

# A barrel on the floor rolls this many one-pixel steps per frame.
_BARREL_STEPS = FRAMERATE // 10 + 1


class EnemyComponent(Component):
    """Moves fireballs, barrels and springs according to their kind."""

    def __init__(self, owner):
        super().__init__("EnemyComp")
        self.attach_owner(owner)

    def perform(self):
        if not self.enabled:
            return
        owner = self.owner
        kind = owner.name
        if kind == FIREBALL:
            self._move_fireball(owner)
        elif kind == BARREL:
            self._move_barrel(owner)
        elif kind == SPRING:
            self._move_spring(owner)

    @staticmethod
    def _move_fireball(owner):
        if owner.moving_direction == LEFT:
            Transform.move_left(owner)
        elif owner.moving_direction == RIGHT:
            Transform.move_right(owner)

        if owner.collisions.platform_end:
            if owner.moving_direction == LEFT:
                owner.moving_direction = RIGHT
                owner.move(FIREBALL_MOVEMENT_SPEED, 0)
            elif owner.moving_direction == RIGHT:
                owner.moving_direction = LEFT
                owner.move(-FIREBALL_MOVEMENT_SPEED, 0)

    @staticmethod
    def _move_barrel(owner):
        if not owner.collisions.floor:
            return
        if owner.moving_direction == LEFT:
            step = Transform.move_left
        elif owner.moving_direction == RIGHT:
            step = Transform.move_right
        else:
            return
        for _ in range(_BARREL_STEPS):
            step(owner)

    @staticmethod
    def _move_spring(owner):
        if owner.moving_direction == LEFT:
            owner.move(-SPRING_MOVEMENT_SPEED, 0)
        elif owner.moving_direction == RIGHT:
            owner.move(SPRING_MOVEMENT_SPEED, 0)
        else:
            return
        collisions = owner.collisions
        if collisions.floor and not collisions.jumping:
            collisions.jumping = True
            collisions.floor = False


class EnemyDamageComponent(Component):
    """Takes a hit point from the player on enemy contact, then grants invulnerability."""

    def __init__(self, owner):
        super().__init__("EnemyDamageComp")
        self.attach_owner(owner)
        self.invul_timer = 0

    def perform(self):
        owner = self.owner
        self.invul_timer -= 1
        if owner.collisions.enemy and self.invul_timer <= 0:
            owner.hp -= 1
            self.invul_timer = PLAYER_INVUL_TIME