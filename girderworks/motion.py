"""Orbiting objects and platforms that shuttle back and forth."""

import math

from .component import Component
from .constant_move import ConstantMoveComponent, Direction
from .definitions import TILESCALE

_REVERSE_COOLDOWN = 60
_HORIZONTAL = (Direction.LEFT, Direction.RIGHT)


class OrbitComponent(Component):
    """Moves the owner's centre around a fixed point."""

    def __init__(self, owner, center_x, center_y, radius, start_angle, speed, direction):
        super().__init__("OrbitComp")
        self.attach_owner(owner)
        self.center_x = center_x
        self.center_y = center_y
        self.radius = radius
        self.angle = start_angle
        self.speed = speed
        direction = Direction(direction)
        if direction not in _HORIZONTAL:
            raise ValueError(f"orbit direction must be left or right, got {direction.value}")
        self.direction = direction

    def perform(self):
        owner = self.owner
        if self.direction is Direction.RIGHT:
            self.angle += self.speed
        else:
            self.angle -= self.speed

        if self.angle >= 360:
            self.angle -= 360
        elif self.angle <= 0:
            self.angle += 360

        rads = math.radians(self.angle)
        new_x = self.center_x + self.radius * math.cos(rads) - owner.width // 2
        new_y = self.center_y + self.radius * math.sin(rads) - owner.height // 2
        owner.sprite.position = (new_x, new_y)


_CARRY = {
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
    Direction.UP: (0, 1),
    Direction.DOWN: (0, -1),
}


class MovingPlatformComponent(Component):
    """Shuttles a platform along one axis and carries the player standing on it."""

    def __init__(self, owner, speed, start_direction, distance, player):
        super().__init__("MovingPlatComp")
        self.attach_owner(owner)
        self.speed = speed
        self.start_direction = Direction(start_direction)
        self.distance = distance
        self.player = player
        self.started = False
        self.cooldown = _REVERSE_COOLDOWN
        self.starting_coord = 0.0
        self.movers = {}

    @property
    def horizontal(self):
        return self.start_direction in _HORIZONTAL

    def _axis(self):
        if self.horizontal:
            return Direction.LEFT, Direction.RIGHT
        return Direction.UP, Direction.DOWN

    def _coord(self):
        sprite = self.owner.sprite
        return sprite.x if self.horizontal else sprite.y

    def _start(self):
        owner = self.owner
        for direction in self._axis():
            owner.attach_component(
                ConstantMoveComponent(owner, direction.value, direction, self.speed)
            )
            mover = owner.get_component(direction.value)
            mover.enabled = False
            self.movers[direction] = mover
        self.starting_coord = self._coord()
        self.movers[self.start_direction].enabled = True
        self.started = True

    def perform(self):
        if not self.enabled:
            return
        self.cooldown -= 1

        if not self.started:
            self._start()

        coord = self._coord()
        span = self.distance * TILESCALE
        at_limit = coord >= self.starting_coord + span or coord <= self.starting_coord - span
        at_origin = self.starting_coord - 1 <= coord <= self.starting_coord + 1
        if (at_limit or at_origin) and self.cooldown <= 0:
            self.reverse_direction()

        self._carry_player()

    def _carry_player(self):
        collisions = self.player.collisions
        if collisions.colliding_platform is not self.owner or not collisions.floor:
            return
        for direction in (Direction.LEFT, Direction.RIGHT, Direction.UP, Direction.DOWN):
            mover = self.movers.get(direction)
            if mover is not None and mover.enabled:
                dx, dy = _CARRY[direction]
                self.player.move(dx * self.speed, dy * self.speed)
                return

    def reverse_direction(self):
        """Swap which way the platform travels and restart the cooldown."""
        if not self.started:
            raise RuntimeError("the platform has not started moving")
        first, second = (self.movers[d] for d in self._axis())
        if first.enabled:
            first.enabled = False
            second.enabled = True
        else:
            first.enabled = True
            second.enabled = False
        self.cooldown = _REVERSE_COOLDOWN