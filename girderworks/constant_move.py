"""A component that keeps pushing its owner in one fixed direction."""

from enum import Enum

from .component import Component


class Direction(Enum):
    """A direction on screen; up means towards the top."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


_OFFSETS = {
    Direction.UP: (0, 1),
    Direction.DOWN: (0, -1),
    Direction.RIGHT: (1, 0),
    Direction.LEFT: (-1, 0),
}


class ConstantMoveComponent(Component):
    """Moves the owner by a fixed speed in a fixed direction every frame."""

    def __init__(self, owner, name, direction, speed):
        super().__init__(name)
        self.attach_owner(owner)
        self.direction = Direction(direction)
        self.speed = speed

    def perform(self):
        if not self.enabled:
            return
        dx, dy = _OFFSETS[self.direction]
        self.owner.move(dx * self.speed, dy * self.speed)