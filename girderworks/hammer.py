"""Swinging the hammer held by the player."""

from .component import Component
from .definitions import LEFT, RIGHT, TILESCALE
from .gameobject import Clock

CELL = 16
RAISE_TIME = 0.0
SWING_TIME = 0.2
SMASH_END = 0.3


class HammerComponent(Component):
    """Keeps the hammer beside its parent and plays the raise-and-swing frames."""

    def __init__(self, owner, clock=None):
        super().__init__("HammerComp")
        self.attach_owner(owner)
        self.clock = clock if clock is not None else Clock()
        self.time = 0.0

    def perform(self):
        owner = self.owner
        parent = owner.parent
        if parent is None:
            raise RuntimeError("the hammer must be attached to a parent object")
        if not owner.frame_x or not owner.frame_y:
            raise ValueError("the hammer's frame grid must be set before swinging")
        w = owner.frame_w // owner.frame_x
        h = owner.frame_h // owner.frame_y

        if not parent.collisions.smash:
            if owner.visible:
                owner.toggle_visibility()
            return

        owner.toggle_visibility()
        face = parent.face_direction
        if face == RIGHT:
            row, reach = owner.sprite_rec_y, TILESCALE
        elif face == LEFT:
            row, reach = owner.sprite_rec_y + CELL, -TILESCALE
        else:
            return

        self.time += self.clock.restart()
        if self.time > RAISE_TIME:
            px, py = parent.sprite.position
            owner.sprite.position = (px, py - TILESCALE)
            owner.sprite.texture_rect = (owner.sprite_rec_x, row, w, h)
            if self.time > SWING_TIME:
                px, py = parent.sprite.position
                owner.sprite.position = (px + reach, py)
                owner.sprite.texture_rect = (owner.sprite_rec_x + CELL, row, w, h)
            if self.time > SMASH_END:
                self.time = 0.0
                parent.collisions.smash = False