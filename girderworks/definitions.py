"""Game-wide constants, scene result codes and volume settings."""

from dataclasses import dataclass
from enum import IntEnum

TILESCALE = 24

NUMBER_OF_STAGES = 3

FRAMERATE = 60

PIXEL = TILESCALE * 0.16

PLAYER_MOVEMENT_SPEED = TILESCALE * 0.1
PLAYER_JUMP_HEIGHT = TILESCALE * 2
PLAYER_INVUL_TIME = 150
HAMMER_POWERUP_DURATION = 600

GRAVITY = -TILESCALE * 0.15
GROUND_CLIP_AMOUNT = TILESCALE * 0.167
COLLISION_LEEWAY = TILESCALE * 0.2

# Object names double as identifiers.
PLAYER = "player"
ENEMY = "enemy"
PLATFORM = "platform"
LADDER = "ladder"
SPAWNER = "spawner"
ROPE = "rope"
FIREBALL = "fire ball"
FIREBALL_MOVEMENT_SPEED = 2
SPRING = "spring"
SPRING_JUMP_HEIGHT = TILESCALE * 3
SPRING_MOVEMENT_SPEED = 3
BARREL = "barrel"
PEACH = "peach"
HAMMER = "hammer"
HAMMER_ITEM = "hammeritem"

# Movement directions.
LEFT = "left"
RIGHT = "right"
UP = "up"
DOWN = "down"
STATIONARY = "stationary"

# Player animation states.
WALK_L = "walkLeft"
WALK_R = "walkRight"
CLIMBING = "climbing"
DEFAULT_L = "defaultLeft"
DEFAULT_R = "defaultRight"
NONE = "none"

# Ape animation states.
IDLE = "idle"
THROW_BARREL_D = "throwBarrelDown"
THROW_BARREL_L = "throwBarrelLeft"
THROW_BARREL_R = "throwBarrelRight"

# Sound names.
BGM = "bgm"
JUMP_SFX = "jumpsfx"
WALKING_SFX = "walkingsfx"
ENEMY_DEATH = "enemydeath"
HAMMER_BGM = "hammerbgm"

BASE_SPAWN_RATE = 10 * 60


class SceneResult(IntEnum):
    """What a level scene reports after an update."""

    ONGOING = -1
    LOST = 2
    WIN = 37


class MenuResult(IntEnum):
    """What a menu or death screen reports after an update."""

    ONGOING = -1
    START_GAME = 2
    SETTINGS = 3
    EXIT_GAME = 4
    RESTART = 5
    MAIN_MENU = 4


@dataclass
class VolumeSettings:
    """Sound effect and music volume, each from 0 to 100."""

    sound: int = 100
    music: int = 100

    def __post_init__(self):
        for label, value in (("sound", self.sound), ("music", self.music)):
            if not 0 <= value <= 100:
                raise ValueError(f"{label} volume must be between 0 and 100, got {value}")


VOLUME = VolumeSettings()