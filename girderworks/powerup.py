"""Picking up the hammer power-up and switching the music while it lasts."""

from .component import Component
from .definitions import BGM, HAMMER_BGM


class HammerPowerComponent(Component):
    """Lets the player smash while the hammer lasts.

    The collected hammer item goes back into its pool and out of the
    scene's object list. While the power-up is active the hammer music
    plays instead of the normal background music.
    """

    def __init__(self, player, sound_manager, hammer_pool, game_objects, allow_bgm):
        super().__init__("HammerPowerComp")
        self.attach_owner(player)
        self.sound_manager = sound_manager
        self.hammer_pool = hammer_pool
        self.game_objects = game_objects
        self.allow_bgm = allow_bgm
        self.bgm_toggle = True
        self.first_toggle = True

    def perform(self):
        collisions = self.owner.collisions

        if collisions.hammer_duration > 0:
            collisions.smash = True
            if self.first_toggle:
                self.first_toggle = False
                self._collect(collisions.colliding_hammer_item)
                collisions.colliding_hammer_item = None

            # Touching another item during the power-up collects it next frame.
            if collisions.colliding_hammer_item is not None:
                self.first_toggle = True

            if self.allow_bgm and self.bgm_toggle:
                self.sound_manager.stop_bgm(BGM)
                self.sound_manager.play_bgm(HAMMER_BGM)
                self.bgm_toggle = False
        else:
            collisions.smash = False
            self.first_toggle = True
            if not self.bgm_toggle and self.allow_bgm:
                self.sound_manager.stop_bgm(HAMMER_BGM)
                self.sound_manager.play_bgm(BGM)
                self.bgm_toggle = True

    def _collect(self, item):
        if item is None:
            return
        self.hammer_pool.release(item)
        for index, obj in enumerate(self.game_objects):
            if obj is item:
                del self.game_objects[index]
                break