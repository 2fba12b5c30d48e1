"""Sprite-sheet animation for the player, the ape and the enemies."""

from .component import Component
from .definitions import (
    BARREL,
    CLIMBING,
    DEFAULT_L,
    DEFAULT_R,
    ENEMY,
    FIREBALL,
    IDLE,
    LEFT,
    NONE,
    PLAYER,
    RIGHT,
    SPRING,
    THROW_BARREL_D,
    THROW_BARREL_L,
    THROW_BARREL_R,
    WALK_L,
    WALK_R,
)
from .gameobject import Clock

CELL = 16
APE_CELL_WIDTH = 48
APE_ROW_HEIGHT = 32
FRAME_DELAY = 0.3
THROW_DELAY = 4.0
THROW_HOLD = 4.2
SPRING_HOLD = 0.1
DEATH_FRAMES = 4

_THROW_ROWS = {THROW_BARREL_D: 1, THROW_BARREL_L: 2, THROW_BARREL_R: 3}


class SpriteComponent(Component):
    """Steps the owner through its sprite-sheet frames.

    Enemies whose hit points run out play a death animation, after which
    they are hidden and flagged for return to their pool.
    """

    def __init__(self, owner, clock=None):
        super().__init__("SpriteComp")
        self.attach_owner(owner)
        self.clock = clock if clock is not None else Clock()
        self.time = 0.0
        self.counter = 0
        self.prev_state = ""
        self.approaching_ladder = ""
        self.killed = False
        self._frame_size = (0, 0)

    def perform(self):
        if not self.enabled:
            return
        owner = self.owner
        if not owner.frame_x or not owner.frame_y:
            raise ValueError("the owner's frame grid must be set before animating")
        self._frame_size = (owner.frame_w // owner.frame_x, owner.frame_h // owner.frame_y)

        handlers = {
            PLAYER: self._animate_player,
            ENEMY: self._animate_ape,
            FIREBALL: self._animate_fireball,
            BARREL: self._animate_barrel,
            SPRING: self._animate_spring,
        }
        handler = handlers.get(owner.name)
        if handler is not None:
            handler(owner)

    def _show(self, x, y):
        self.owner.sprite.texture_rect = (x, y, *self._frame_size)

    def _tick(self):
        self.time += self.clock.restart()

    def _restart(self):
        self.time = 0.0
        self.clock.restart()

    def _cycle(self, y, frames, step=CELL, wrap_to=None):
        """Advance a looping row of frames once enough time has passed."""
        if self.counter < frames and self.time > FRAME_DELAY:
            self._show(self.owner.sprite_rec_x + self.counter * step, y)
            self.counter += 1
            if wrap_to is not None and self.counter == frames:
                self.counter = wrap_to
            self._restart()
        elif self.counter == frames and (wrap_to is None or self.time > FRAME_DELAY):
            self.counter = 0

    def _play_death(self, y):
        owner = self.owner
        if not self.killed:
            self.killed = True
            self.counter = 0
            owner.disable_component("EnemyComp")
        self._tick()
        if self.counter < DEATH_FRAMES and self.time > FRAME_DELAY:
            self._show(owner.sprite_rec_x + self.counter * CELL, y)
            self.counter += 1
            self._restart()
        elif self.counter >= DEATH_FRAMES:
            owner.toggle_visibility()
            self.enabled = False
            owner.return_to_pool = True
            self.killed = False
            self.counter = 0

    def _animate_player(self, owner):
        c = owner.collisions
        base_y = owner.sprite_rec_y
        if c.walk_right:
            self._tick()
            self._cycle(base_y, 4, wrap_to=1)
            self.prev_state = WALK_R
            self.approaching_ladder = WALK_R
        elif c.walk_left:
            self._tick()
            self._cycle(base_y + CELL, 4)
            self.prev_state = WALK_L
            self.approaching_ladder = WALK_L
        elif c.climbing:
            self._tick()
            self._cycle(base_y + 2 * CELL, 2)
            self.prev_state = CLIMBING
        else:
            self._settle_player(owner)

    def _settle_player(self, owner):
        """Show a standing frame facing the way the player last went."""
        base_x = owner.sprite_rec_x
        base_y = owner.sprite_rec_y
        state = self.prev_state
        if state in (DEFAULT_R, DEFAULT_L):
            row = base_y if state == DEFAULT_R else base_y + CELL
            self._show(base_x, row)
            self.prev_state = NONE
            self.counter = 0
            self.time = 0.0
        elif state == WALK_R:
            self._show(base_x + 4 * CELL, base_y)
            self.prev_state = DEFAULT_R
        elif state == WALK_L:
            self._show(base_x + 4 * CELL, base_y + CELL)
            self.prev_state = DEFAULT_L
        elif state == CLIMBING:
            if self.approaching_ladder == WALK_L:
                self.prev_state = DEFAULT_L
            elif self.approaching_ladder == WALK_R:
                self.prev_state = DEFAULT_R
            self.approaching_ladder = NONE

    def _animate_ape(self, owner):
        if owner.state == IDLE:
            self._tick()
            self._cycle(owner.sprite_rec_y, 4, step=APE_CELL_WIDTH)
            return
        row = _THROW_ROWS.get(owner.state)
        if row is None:
            return
        self._tick()
        x = owner.sprite_rec_x
        if self.time > THROW_DELAY:
            self._show(x, owner.sprite_rec_y + row * APE_ROW_HEIGHT)
            if self.time > THROW_HOLD:
                self._restart()
                self._show(x, owner.sprite_rec_y)

    def _animate_fireball(self, owner):
        base_y = owner.sprite_rec_y
        if owner.hp <= 0:
            self._play_death(base_y + 2 * CELL)
        elif owner.moving_direction == LEFT:
            self._tick()
            self._cycle(base_y + CELL, 2)
        elif owner.moving_direction == RIGHT:
            self._tick()
            self._cycle(base_y, 2)

    def _animate_barrel(self, owner):
        base_y = owner.sprite_rec_y
        if owner.hp <= 0:
            self._play_death(base_y + 3 * CELL)
        elif not owner.collisions.floor:
            self._tick()
            self._cycle(base_y + 2 * CELL, 2)
        elif owner.moving_direction == LEFT:
            self._tick()
            self._cycle(base_y, 4)
        elif owner.moving_direction == RIGHT:
            self._tick()
            self._cycle(base_y + CELL, 4)

    def _animate_spring(self, owner):
        base_y = owner.sprite_rec_y
        if owner.hp <= 0:
            self._play_death(base_y + CELL)
        elif owner.collisions.floor or self.counter > 0:
            self._tick()
            self.counter += 1
            self._show(owner.sprite_rec_x + CELL, base_y)
            if self.time > SPRING_HOLD:
                self._show(owner.sprite_rec_x, base_y)
                self.counter = 0
                self._restart()