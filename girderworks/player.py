"""Keyboard-driven player movement and ladder climbing."""

from .component import Component
from .definitions import LEFT, PLAYER_MOVEMENT_SPEED, RIGHT, TILESCALE

KEY_RIGHT = "d"
KEY_LEFT = "a"
KEY_UP = "w"
KEY_DOWN = "s"
KEY_JUMP = "space"

_JUMP_EXTENSION = 7
_OUT_OF_BOUNDS_Y = TILESCALE * 34
_CLIMB_EXIT_LIFT = 3
_CLIMB_ENTRY_LIFT = 5


class PlayerMoveComponent(Component):
    """Reads the keyboard to walk, jump and start climbing."""

    def __init__(self, owner, keyboard):
        super().__init__("PlayerMoveComp")
        self.attach_owner(owner)
        self.keyboard = keyboard
        self.jump_extension = 0

    def perform(self):
        if not self.enabled:
            return
        owner = self.owner
        keys = self.keyboard
        collisions = owner.collisions

        if keys.is_pressed(KEY_RIGHT):
            collisions.walk_right = True
            owner.move(PLAYER_MOVEMENT_SPEED, 0)
            owner.face_direction = RIGHT

        if keys.is_pressed(KEY_LEFT):
            collisions.walk_left = True
            owner.move(-PLAYER_MOVEMENT_SPEED, 0)
            owner.face_direction = LEFT

        self.jump_extension -= 1
        if self.jump_extension >= 0:
            collisions.jumping = True
        if keys.is_pressed(KEY_JUMP) and collisions.floor:
            collisions.jumping = True
            self.jump_extension = _JUMP_EXTENSION

        if (
            keys.is_pressed(KEY_UP)
            and collisions.ladder
            and not collisions.jumping
            and collisions.floor
            and not collisions.climbing
        ):
            collisions.start_climb_bot = True

        if keys.is_pressed(KEY_DOWN) and collisions.tile_above_ladder and not collisions.climbing:
            collisions.start_climb_top = True

        if owner.sprite.y >= _OUT_OF_BOUNDS_Y:
            owner.hp = 0


class LadderComponent(Component):
    """Moves the player along ladders and handles getting on and off them."""

    def __init__(self, owner, keyboard):
        super().__init__("LadderComp")
        self.attach_owner(owner)
        self.keyboard = keyboard

    def perform(self):
        owner = self.owner
        keys = self.keyboard
        collisions = owner.collisions

        if keys.is_pressed(KEY_UP) and collisions.climbing:
            owner.move(0, PLAYER_MOVEMENT_SPEED)
        if keys.is_pressed(KEY_DOWN) and collisions.climbing:
            owner.move(0, -PLAYER_MOVEMENT_SPEED)

        # Reaching the ground or the tile above the ladder ends the climb.
        if collisions.climbing and collisions.floor:
            self._stop_climbing()
        if collisions.climbing and collisions.tile_above_ladder:
            self._stop_climbing()

        if collisions.start_climb_bot:
            owner.disable_component("PlayerMoveComp")
            ladder = collisions.colliding_ladder
            owner.sprite.position = (ladder.sprite.x, owner.sprite.y - _CLIMB_ENTRY_LIFT)
            collisions.start_climb_bot = False
            collisions.climbing = True
            collisions.floor = False

        if collisions.start_climb_top:
            owner.disable_component("PlayerMoveComp")
            ladder = collisions.colliding_ladder
            owner.sprite.position = ladder.sprite.position
            collisions.start_climb_top = False
            collisions.climbing = True

    def _stop_climbing(self):
        owner = self.owner
        owner.collisions.climbing = False
        owner.enable_component("PlayerMoveComp")
        owner.move(0, _CLIMB_EXIT_LIFT)