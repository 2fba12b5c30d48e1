"""Objects built from components, with collision state and health."""

from dataclasses import dataclass

from .gameobject import BlockObject


@dataclass
class Collisions:
    """Per-frame contact flags and the objects being touched."""

    floor: bool = False
    wall_right: bool = False
    wall_left: bool = False
    ceiling: bool = False
    player: bool = False
    enemy: bool = False
    ladder: bool = False
    climbing: bool = False
    jumping: bool = False
    ground_clip: bool = False
    tile_above_ladder: bool = False
    start_climb_top: bool = False
    start_climb_bot: bool = False
    platform_end: bool = False
    walk_left: bool = False
    walk_right: bool = False
    smash: bool = False
    hammer_duration: int = 0
    colliding_ladder: object = None
    colliding_platform: object = None
    colliding_hammer_item: object = None


class ModularObject(BlockObject):
    """A block object whose behaviour comes from attached components."""

    def __init__(self, name, texture_name, sheet_origin=None):
        super().__init__(name, texture_name, sheet_origin)
        self.components = []
        self.collisions = Collisions()
        self.hp = 1
        self.dead = False
        self.return_to_pool = False

    def attach_component(self, component):
        self.components.append(component)
        component.attach_owner(self)

    def get_component(self, name):
        return next((c for c in self.components if c.name == name), None)

    def _set_enabled(self, name, enabled):
        component = self.get_component(name)
        if component is not None:
            component.enabled = enabled

    def disable_component(self, name):
        """Disable the first component with this name, if any."""
        self._set_enabled(name, False)

    def enable_component(self, name):
        """Enable the first component with this name, if any."""
        self._set_enabled(name, True)

    def disable_all_components(self):
        for component in self.components:
            component.enabled = False

    def enable_all_components(self):
        for component in self.components:
            component.enabled = True

    def update(self):
        """Update children, then run every component; each checks its own flag."""
        for child in tuple(self.children):
            child.update()
        for component in tuple(self.components):
            component.perform()

    def toggle_visibility(self):
        self.visible = not self.visible