"""A fixed-size pool of reusable objects."""

from .animation import SpriteComponent
from .constant_move import ConstantMoveComponent, Direction
from .definitions import DOWN, FIREBALL, RIGHT, UP
from .enemy import EnemyComponent
from .factory import HitByHammerComponent
from .modular import ModularObject
from .physics import PhysicsComponent

_FIREBALL_FRAME = (0, 0, 16, 16)


class ObjectPool:
    """Hands out and takes back objects built once up front.

    The pool prepares nothing about its objects beyond what its set-up
    methods are asked to add.
    """

    def __init__(self, name, texture_name, size, animated):
        origin = (0, 0) if animated else None
        self._slots = [ModularObject(name, texture_name, origin) for _ in range(size)]

    def __len__(self):
        return len(self._slots)

    def _objects(self):
        return (obj for obj in self._slots if obj is not None)

    def request(self):
        """Take a fresh, visible, enabled object out, or return None if none is left."""
        for index, obj in enumerate(self._slots):
            if obj is None:
                continue
            obj.enable_all_components()
            obj.return_to_pool = False
            obj.hp = 1
            if obj.name == FIREBALL:
                obj.sprite.texture_rect = _FIREBALL_FRAME
            obj.dead = False
            if not obj.visible:
                obj.toggle_visibility()
            self._slots[index] = None
            return obj
        return None

    def release(self, obj):
        """Hide and disable an object and put it in the first free slot.

        When every slot is full the object is only hidden and disabled.
        """
        obj.disable_all_components()
        if obj.visible:
            obj.toggle_visibility()
        for index, slot in enumerate(self._slots):
            if slot is None:
                self._slots[index] = obj
                return

    def available(self):
        return sum(1 for _ in self._objects())

    def give_constant_move(self, direction, speed):
        """Give every pooled object a disabled vertical mover named after ``direction``."""
        if direction not in (UP, DOWN):
            return
        move = Direction(direction)
        for obj in self._objects():
            obj.attach_component(ConstantMoveComponent(obj, direction, move, speed))
            obj.disable_component(direction)

    def set_up_fireballs(self, player, hammer, sound_manager):
        """Make every pooled object an animated fireball the hammer can kill."""
        for obj in self._objects():
            obj.set_frame_grid(4, 3)
            obj.set_sprite()
            obj.scale_object(0.5)
            obj.set_tile_xy(0, 0)
            obj.attach_component(EnemyComponent(obj))
            obj.attach_component(PhysicsComponent(obj))
            obj.attach_component(SpriteComponent(obj))
            obj.attach_component(HitByHammerComponent(obj, player, hammer, sound_manager))
            obj.moving_direction = RIGHT