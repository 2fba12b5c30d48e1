"""Columns of two-tile platforms that rise or sink endlessly."""

from dataclasses import dataclass, field
from enum import Enum

from .constant_move import ConstantMoveComponent, Direction
from .definitions import TILESCALE
from .factory import make_platform


class SpawnDirection(Enum):
    """Which way a spawner's platforms travel."""

    UP = "up"
    DOWN = "down"


@dataclass
class Spawner:
    """One column of moving platforms; distances and starts are in pixels."""

    direction: SpawnDirection
    distance: int
    start_x: int
    start_y: int
    speed: float
    platforms: list = field(default_factory=list)


class PlatformSpawnerManager:
    """Builds vertical platform spawners, wraps their platforms and carries the player."""

    def __init__(self, scene_platforms=None, player=None):
        self.scene_platforms = scene_platforms if scene_platforms is not None else []
        self.player = player
        self.spawners = []

    def make_spawner(self, speed, tiles_between, distance_in_tiles, direction, start_x, start_y):
        """Add a column of platform pairs spaced ``tiles_between`` tiles apart."""
        if tiles_between <= 0:
            raise ValueError(f"tiles between platforms must be positive, got {tiles_between}")
        direction = SpawnDirection(direction)
        distance = distance_in_tiles * TILESCALE
        spawner = Spawner(
            direction=direction,
            distance=distance,
            start_x=start_x * TILESCALE,
            start_y=start_y * TILESCALE,
            speed=speed,
        )
        count = (distance // (tiles_between * TILESCALE)) * 2
        move = Direction(direction.value)
        for index in range(count):
            x = start_x if index % 2 == 0 else start_x + 1
            platform = make_platform(x, start_y + tiles_between * (index // 2))
            platform.attach_component(ConstantMoveComponent(platform, move.value, move, speed))
            spawner.platforms.append(platform)
            self.scene_platforms.append(platform)
        self.spawners.append(spawner)
        return spawner

    def update(self):
        """Wrap platforms that travelled the full distance and carry the player."""
        if self.player is None:
            raise RuntimeError("the spawner manager has no player")
        for spawner in self.spawners:
            for platform in spawner.platforms:
                y = platform.sprite.y
                if spawner.direction is SpawnDirection.UP and y <= spawner.start_y - spawner.distance:
                    platform.move(0, -spawner.distance)
                elif spawner.direction is SpawnDirection.DOWN and y >= spawner.start_y:
                    platform.move(0, spawner.distance)

        collisions = self.player.collisions
        for spawner in self.spawners:
            for platform in spawner.platforms:
                if platform is collisions.colliding_platform and collisions.floor:
                    if spawner.direction is SpawnDirection.UP:
                        self.player.move(0, spawner.speed)
                    else:
                        self.player.move(0, -spawner.speed)

    def reset(self):
        self.spawners.clear()