"""Sprites, textures, timing, input state and the basic scene objects."""

import os
import time
from abc import ABC, abstractmethod
from dataclasses import dataclass, field

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")
import pygame  # noqa: E402

from .definitions import TILESCALE  # noqa: E402

_SPRITE_SCALE = TILESCALE // 8


class TextureError(OSError):
    """Raised when an image file cannot be loaded as a texture."""


class Texture:
    """An image that sprites take their pixels from."""

    def __init__(self, surface):
        self.surface = surface

    @classmethod
    def from_file(cls, path):
        """Load a texture from an image file."""
        try:
            surface = pygame.image.load(os.fspath(path))
        except (FileNotFoundError, pygame.error) as exc:
            raise TextureError(f"cannot load texture {path!s}: {exc}") from exc
        return cls(surface)

    @property
    def width(self):
        return self.surface.get_width()

    @property
    def height(self):
        return self.surface.get_height()

    @property
    def size(self):
        return self.surface.get_size()


@dataclass
class Sprite:
    """A positioned, scaled and rotated view of part of a texture."""

    texture: Texture
    x: float = 0.0
    y: float = 0.0
    scale: tuple = (1.0, 1.0)
    rotation: float = 0.0
    texture_rect: tuple = field(default=None)

    def __post_init__(self):
        if self.texture_rect is None:
            self.texture_rect = (0, 0, self.texture.width, self.texture.height)

    @property
    def position(self):
        return (self.x, self.y)

    @position.setter
    def position(self, value):
        self.x, self.y = (float(v) for v in value)

    def move(self, dx, dy):
        self.x += dx
        self.y += dy

    def scale_by(self, factor):
        sx, sy = self.scale
        self.scale = (sx * factor, sy * factor)

    def rotate(self, degrees):
        """Rotate clockwise; the angle is kept within [0, 360)."""
        self.rotation = (self.rotation + degrees) % 360

    def render(self, surface):
        """Blit the sprite onto a pygame surface."""
        area = pygame.Rect(*self.texture_rect).clip(self.texture.surface.get_rect())
        if area.width == 0 or area.height == 0:
            return
        sx, sy = self.scale
        size = (round(area.width * abs(sx)), round(area.height * abs(sy)))
        if size[0] <= 0 or size[1] <= 0:
            return
        image = pygame.transform.scale(self.texture.surface.subsurface(area), size)
        if sx < 0 or sy < 0:
            image = pygame.transform.flip(image, sx < 0, sy < 0)
        if self.rotation:
            image = pygame.transform.rotate(image, -self.rotation)
        surface.blit(image, (round(self.x), round(self.y)))


class Clock:
    """Measures seconds elapsed since it was last restarted."""

    def __init__(self, timer=time.monotonic):
        self._timer = timer
        self._start = timer()

    @property
    def elapsed(self):
        return self._timer() - self._start

    def restart(self):
        """Return the elapsed seconds and start counting again."""
        now = self._timer()
        elapsed = now - self._start
        self._start = now
        return elapsed


class Keyboard:
    """The set of keys currently held down."""

    def __init__(self):
        self._pressed = set()

    @staticmethod
    def _normalise(key):
        return str(key).lower()

    def press(self, key):
        self._pressed.add(self._normalise(key))

    def release(self, key):
        self._pressed.discard(self._normalise(key))

    def is_pressed(self, key):
        return self._normalise(key) in self._pressed


class GameObject(ABC):
    """A named thing in a scene."""

    def __init__(self, name):
        self.name = name

    @abstractmethod
    def init(self):
        """Prepare the object before play."""

    @abstractmethod
    def update(self):
        """Advance the object by one frame."""

    @abstractmethod
    def draw(self, window):
        """Render the object onto the window surface."""


class GameResource:
    """Shared store of textures and the default font."""

    _instance = None

    def __init__(self):
        self._textures = {}
        self._font = None

    @classmethod
    def instance(cls):
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    def add_texture(self, path, texture):
        """Register a texture under a file name so later loads reuse it."""
        self._textures[os.fspath(path)] = texture

    def load_texture(self, path):
        key = os.fspath(path)
        if key not in self._textures:
            self._textures[key] = Texture.from_file(key)
        return self._textures[key]

    @property
    def font(self):
        if self._font is None:
            if not pygame.font.get_init():
                pygame.font.init()
            self._font = pygame.font.Font(None, 30)
        return self._font


class BlockObject(GameObject):
    """A sprite-backed object, optionally cut from a sprite sheet."""

    def __init__(self, name, texture_name, sheet_origin=None):
        super().__init__(name)
        self.texture = GameResource.instance().load_texture(texture_name)
        self.sprite = Sprite(self.texture)
        self.parent = None
        self.children = []
        self.visible = True
        self.moving_direction = ""
        self.face_direction = ""
        self.state = ""
        self.frame_x = None
        self.frame_y = None
        self.frame_w = self.texture.width
        self.frame_h = self.texture.height
        if sheet_origin is None:
            self.sprite_rec_x = 0
            self.sprite_rec_y = 0
            self.sprite.texture_rect = (0, 0, self.texture.width, self.texture.height)
            self.sprite.scale = (_SPRITE_SCALE, _SPRITE_SCALE)
            self.sprite.move(TILESCALE // 2, TILESCALE // 2)
            self.height = self.texture.height * _SPRITE_SCALE
            self.width = self.texture.width * _SPRITE_SCALE
        else:
            self.sprite_rec_x, self.sprite_rec_y = sheet_origin
            self.height = 0
            self.width = 0

    def set_frame_grid(self, columns, rows):
        """Set how many columns and rows the sprite sheet is cut into."""
        self.frame_x = columns
        self.frame_y = rows

    def set_sprite(self):
        """Show one frame of the sheet and size the object to it."""
        if not self.frame_x or not self.frame_y:
            raise ValueError("the frame grid must be set before the sprite")
        self.sprite.texture_rect = (
            self.sprite_rec_x,
            self.sprite_rec_y,
            self.frame_w // self.frame_x,
            self.frame_h // self.frame_y,
        )
        self.sprite.scale = (_SPRITE_SCALE, _SPRITE_SCALE)
        self.sprite.move(TILESCALE // 2, TILESCALE // 2)
        self.height = (self.texture.height // self.frame_y) * _SPRITE_SCALE
        self.width = (self.texture.width // self.frame_x) * _SPRITE_SCALE

    def init(self):
        pass

    def attach_child(self, child):
        self.children.append(child)
        child.parent = self

    def get_child(self, name):
        return next((child for child in self.children if child.name == name), None)

    def toggle_visibility(self):
        self.visible = not self.visible

    def move(self, x_pixels, y_pixels):
        """Move by whole pixels; positive y goes up the screen."""
        self.sprite.move(int(x_pixels), -int(y_pixels))

    def set_tile_xy(self, x, y):
        self.sprite.position = (TILESCALE * x, TILESCALE * y)

    def scale_object(self, scale):
        self.sprite.scale_by(scale)
        self.height = int(self.height * scale)
        self.width = int(self.width * scale)

    def draw(self, window):
        self.sprite.render(window)


class Transform:
    """One-pixel nudges of a block object."""

    @staticmethod
    def move_up(obj):
        obj.move(0, -1)

    @staticmethod
    def move_down(obj):
        obj.move(0, 1)

    @staticmethod
    def move_left(obj):
        obj.move(-1, 0)

    @staticmethod
    def move_right(obj):
        obj.move(1, 0)


class TextObject(GameObject):
    """A line of white text drawn with the shared font."""

    def __init__(self, name, text, x, y):
        super().__init__(name)
        self.text = text
        self.position = (float(x), float(y))
        self.color = (255, 255, 255)

    def set_text(self, text):
        self.text = text

    def move(self, x, y):
        """Place the text at an absolute position."""
        self.position = (float(x), float(y))

    def init(self):
        pass

    def update(self):
        pass

    def draw(self, window):
        image = GameResource.instance().font.render(self.text, True, self.color)
        window.blit(image, (round(self.position[0]), round(self.position[1])))