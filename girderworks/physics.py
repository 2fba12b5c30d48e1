"""Gravity, wall stops, ground clipping and jump arcs."""

from .component import Component
from .definitions import (
    GRAVITY,
    GROUND_CLIP_AMOUNT,
    PLAYER_JUMP_HEIGHT,
    PLAYER_MOVEMENT_SPEED,
    SPRING,
    SPRING_JUMP_HEIGHT,
)

_FLOAT_FRAMES = 10


class PhysicsComponent(Component):
    """Applies gravity and resolves the owner's collision flags each frame."""

    def __init__(self, owner):
        super().__init__("PhysicsComp")
        self.attach_owner(owner)
        self.saved_x = int(owner.sprite.x)
        self.saved_y = int(owner.sprite.y)
        self.jump_start_y = int(owner.sprite.y)
        self.float_timer = 0
        self.floating = False

    def perform(self):
        owner = self.owner
        sprite = owner.sprite
        c = owner.collisions

        if not c.floor and not c.jumping and not c.tile_above_ladder and not c.climbing:
            owner.move(0, GRAVITY)

        if c.ground_clip:
            owner.move(0, GROUND_CLIP_AMOUNT + 1)
            if c.wall_right:
                owner.move(-PLAYER_MOVEMENT_SPEED + 5, 0)
            if c.wall_left:
                owner.move(PLAYER_MOVEMENT_SPEED - 5, 0)

        if c.wall_right and sprite.x > self.saved_x:
            sprite.position = (self.saved_x, sprite.y)
        if c.wall_left and sprite.x < self.saved_x:
            sprite.position = (self.saved_x, sprite.y)

        if not c.jumping and c.floor and not c.climbing:
            self.jump_start_y = int(sprite.y)

        if c.jumping and not c.climbing:
            self._advance_jump()

        self.saved_x = int(sprite.x)
        self.saved_y = int(sprite.y)

    def _advance_jump(self):
        owner = self.owner
        c = owner.collisions
        if c.floor or c.ceiling:
            c.jumping = False

        height = SPRING_JUMP_HEIGHT if owner.name == SPRING else PLAYER_JUMP_HEIGHT
        if owner.sprite.y <= self.jump_start_y - height and not self.floating:
            self.float_timer = _FLOAT_FRAMES
            self.floating = True

        self.float_timer -= 1
        if not self.floating:
            owner.move(0, -GRAVITY)
        elif self.float_timer <= 0:
            c.jumping = False
            self.floating = False