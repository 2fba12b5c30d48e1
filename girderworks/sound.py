"""Sound effects, background music and the player's footstep and jump sounds."""

import os
from dataclasses import dataclass

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")
import pygame  # noqa: E402

from .component import Component  # noqa: E402
from .definitions import JUMP_SFX, PLAYER, VOLUME, WALKING_SFX  # noqa: E402

_JUMP_COOLDOWN = 10


class SoundError(OSError):
    """Raised when a sound file cannot be loaded."""


def load_sound(path):
    """Load a sound file with the pygame mixer, starting the mixer if needed."""
    path = os.fspath(path)
    if not os.path.isfile(path):
        raise SoundError(f"cannot load sound {path}: no such file")
    try:
        if not pygame.mixer.get_init():
            pygame.mixer.init()
        return pygame.mixer.Sound(path)
    except pygame.error as exc:
        raise SoundError(f"cannot load sound {path}: {exc}") from exc


@dataclass
class Track:
    """A named sound and whether it repeats when played."""

    name: str
    sound: object
    looping: bool = False

    def play(self):
        self.sound.play(loops=-1 if self.looping else 0)

    def stop(self):
        self.sound.stop()


class SoundManager:
    """Keeps the game's sound effects and music tracks by name."""

    def __init__(self, loader=load_sound):
        self._loader = loader
        self.sfx = []
        self.bgm = []

    def _load(self, path, name, volume, looping):
        sound = self._loader(path)
        sound.set_volume(volume / 100)
        return Track(name, sound, looping)

    @staticmethod
    def _find(tracks, name):
        return next((track for track in tracks if track.name == name), None)

    def add_sfx(self, path, name):
        """Load a one-shot sound effect at the current sound volume."""
        self.sfx.append(self._load(path, name, VOLUME.sound, False))

    def play_sfx(self, name, loop):
        """Restart a sound effect; a true ``loop`` makes it repeat until stopped."""
        track = self._find(self.sfx, name)
        if track is None:
            return
        track.stop()
        if loop:
            track.looping = True
        track.play()

    def stop_sfx_loop(self, name):
        track = self._find(self.sfx, name)
        if track is None:
            return
        track.stop()
        track.looping = False

    def add_bgm(self, path, name):
        """Load a looping music track at the current music volume."""
        self.bgm.append(self._load(path, name, VOLUME.music, True))

    def play_bgm(self, name):
        track = self._find(self.bgm, name)
        if track is not None:
            track.play()

    def stop_bgm(self, name):
        track = self._find(self.bgm, name)
        if track is not None:
            track.stop()

    def reset(self):
        """Forget every loaded sound."""
        self.sfx.clear()
        self.bgm.clear()


class SfxComponent(Component):
    """Plays the player's footstep loop and jump sound."""

    def __init__(self, owner, sound_manager):
        super().__init__("SfxComp")
        self.attach_owner(owner)
        self.sound_manager = sound_manager
        self.walk_start = False
        self.walk_end = False
        self.walk_lock = False
        self.jump_toggle = False
        self.jump_lock = False
        self.jump_cooldown = 0

    def perform(self):
        owner = self.owner
        c = owner.collisions
        sounds = self.sound_manager

        if self.walk_start and not self.walk_lock and c.floor:
            self.walk_start = False
            self.walk_lock = True
            sounds.play_sfx(WALKING_SFX, True)
        if self.walk_end or not c.floor:
            self.walk_end = False
            self.walk_lock = False
            sounds.stop_sfx_loop(WALKING_SFX)

        self.jump_cooldown -= 1
        if self.jump_toggle and not self.jump_lock and self.jump_cooldown <= 0:
            self.jump_cooldown = _JUMP_COOLDOWN
            self.jump_toggle = False
            self.jump_lock = True
            sounds.play_sfx(JUMP_SFX, False)

        if owner.name == PLAYER:
            if c.walk_left or c.walk_right:
                self.walk_start = True
            else:
                self.walk_end = True

            if c.jumping and not self.jump_lock:
                self.jump_toggle = True
            elif not c.jumping and c.floor:
                self.jump_lock = False