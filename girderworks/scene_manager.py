"""Keeps every scene and switches between them."""

from enum import Enum, auto


class SceneType(Enum):
    """Which kind of scene to switch to."""

    MAIN_MENU = auto()
    DEATH_SCREEN = auto()
    SETTINGS = auto()
    LEVEL_SELECT = auto()
    NEXT_LEVEL = auto()
    WIN_SCREEN = auto()


class SceneManager:
    """Holds the levels and menus and loads and unloads the current one."""

    def __init__(self):
        self.scenes = []
        self.main_menu = None
        self.death_screen = None
        self.settings = None
        self.level_select = None
        self.win_screen = None
        self.current_scene = None

    def add_scene(self, scene):
        """Append a level; levels are numbered from 1 in the order added."""
        self.scenes.append(scene)

    def add_menu(self, scene):
        self.main_menu = scene

    def add_death_screen(self, scene):
        self.death_screen = scene

    def add_settings(self, scene):
        self.settings = scene

    def add_level_select(self, scene):
        self.level_select = scene

    def add_win_screen(self, scene):
        self.win_screen = scene

    def _target(self, scene_type, level_number):
        scene_type = SceneType(scene_type)
        if scene_type is SceneType.NEXT_LEVEL:
            if not 1 <= level_number <= len(self.scenes):
                raise IndexError(
                    f"level {level_number} does not exist; there are {len(self.scenes)} levels"
                )
            return self.scenes[level_number - 1]
        scene = {
            SceneType.MAIN_MENU: self.main_menu,
            SceneType.DEATH_SCREEN: self.death_screen,
            SceneType.SETTINGS: self.settings,
            SceneType.LEVEL_SELECT: self.level_select,
            SceneType.WIN_SCREEN: self.win_screen,
        }[scene_type]
        if scene is None:
            raise RuntimeError(f"no scene registered for {scene_type.name}")
        return scene

    def change_current_scene(self, scene_type, level_number):
        """Unload the current scene and load the chosen one."""
        target = self._target(scene_type, level_number)
        if self.current_scene is not None:
            self.current_scene.unload()
        self.current_scene = target
        self.current_scene.load()

    def _require_current(self):
        if self.current_scene is None:
            raise RuntimeError("there is no current scene")
        return self.current_scene

    def load_current_scene(self):
        self._require_current().load()

    def update_current_scene(self):
        return self._require_current().update()

    def draw_current_scene(self, window):
        self._require_current().draw(window)

    def unload_current_scene(self):
        self._require_current().unload()

    def init(self):
        """Start on the main menu."""
        if self.main_menu is None:
            raise RuntimeError("no main menu registered")
        self.current_scene = self.main_menu
        self.load_current_scene()