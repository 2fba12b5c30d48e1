"""A playable level: its objects, collision detection, drawing and outcome."""

from dataclasses import dataclass, field

from .definitions import (
    COLLISION_LEEWAY,
    GROUND_CLIP_AMOUNT,
    HAMMER_ITEM,
    HAMMER_POWERUP_DURATION,
    TILESCALE,
    SceneResult,
)
from .gameobject import Clock

_RIGHT_EDGE = TILESCALE * 28


@dataclass
class AllObjects:
    """Every object a scene holds, grouped by role."""

    platforms: list = field(default_factory=list)
    game_objects: list = field(default_factory=list)
    enemies: list = field(default_factory=list)
    ladders: list = field(default_factory=list)
    above_ladder: list = field(default_factory=list)
    platform_ends: list = field(default_factory=list)
    player: object = None
    peach: object = None
    hammer: object = None


def _box(obj):
    return obj.sprite.x, obj.sprite.y, obj.width, obj.height


def floor_collision(main, target):
    """True when ``main`` stands on top of ``target`` within the leeway."""
    mx, my, mw, mh = _box(main)
    tx, ty, tw, _ = _box(target)
    return mx < tx + tw and tx < mx + mw and my + mh >= ty and my + mh - ty <= COLLISION_LEEWAY


def wall_right_collision(main, target):
    mx, my, mw, mh = _box(main)
    tx, ty, _, th = _box(target)
    return mx + mw >= tx and mx < tx and my + mh > ty and my < ty + th


def wall_left_collision(main, target):
    mx, my, mw, mh = _box(main)
    tx, ty, tw, th = _box(target)
    return mx <= tx + tw and mx + mw > tx + tw and my + mh > ty and my < ty + th


def ceiling_collision(main, target):
    """True when ``main`` bumps the underside of ``target`` within the leeway."""
    mx, my, mw, _ = _box(main)
    tx, ty, tw, th = _box(target)
    return mx < tx + tw and tx < mx + mw and my <= ty + th and ty + th - my <= COLLISION_LEEWAY


def overlap_collision(main, target):
    """True when the two boxes overlap."""
    mx, my, mw, mh = _box(main)
    tx, ty, tw, th = _box(target)
    return mx < tx + tw and tx < mx + mw and my < ty + th and ty < my + mh


def ground_clip_collision(main, target):
    _, my, _, mh = _box(main)
    return my + mh - GROUND_CLIP_AMOUNT <= target.sprite.y


def ladder_collision(main, target):
    mx, my, mw, mh = _box(main)
    tx, ty, tw, _ = _box(target)
    return mx < tx + tw + 1 and tx < mx + mw and my + mh > ty


def above_ladder_collision(main, target):
    mx, my, mw, mh = _box(main)
    tx, ty, tw, _ = _box(target)
    return mx < tx + tw and tx < mx + mw and my + mh > ty


def platform_end_collision(main, target):
    return main.sprite.x == target.sprite.x and main.sprite.y + main.height == target.sprite.y


def _wall(obj, platforms, hits, at_edge=lambda: False):
    """Check wall contact against each platform, flagging ground clipping on a hit."""
    for platform in platforms:
        if hits(obj, platform):
            if ground_clip_collision(obj, platform):
                obj.collisions.ground_clip = True
            return True
        if at_edge():
            return True
    return False


def _first(candidates, hits):
    return next((target for target in candidates if hits(target)), None)


class Scene:
    """A level holding objects; each update refreshes their collisions."""

    def __init__(self, clock=None):
        self.objects = AllObjects()
        self.score = 0
        self.time = 0.0
        self.clock = clock if clock is not None else Clock()
        self.win_condition = False

    def load(self):
        self.score = 0
        self.time = 0.0

    def unload(self):
        """Drop every object the scene holds."""
        player = self.objects.player
        if player is not None:
            player.collisions.colliding_ladder = None
            player.collisions.colliding_platform = None
        self.objects = AllObjects()

    def update(self):
        """Refresh collisions and report whether the level is lost, won or ongoing."""
        self.time += self.clock.restart()
        self.update_all_collisions(self.objects)
        if self.objects.player.hp <= 0:
            return SceneResult.LOST
        if self.win_condition:
            return SceneResult.WIN
        return SceneResult.ONGOING

    def draw(self, window):
        """Draw visible objects; later layers cover earlier ones."""
        objects = self.objects
        layers = (
            objects.platforms,
            objects.above_ladder,
            objects.ladders,
            objects.game_objects,
            objects.enemies,
            objects.platform_ends,
            (objects.player, objects.peach, objects.hammer),
        )
        for layer in layers:
            for obj in layer:
                if obj is not None and obj.visible:
                    obj.draw(window)

    def update_all_collisions(self, objects):
        if objects.player is None:
            raise RuntimeError("the scene has no player")
        self._update_player(objects)
        if objects.peach is not None:
            self._update_peach(objects)
        for enemy in objects.enemies:
            self._update_enemy(enemy, objects)

    @staticmethod
    def _update_player(objects):
        player = objects.player
        c = player.collisions
        c.walk_left = False
        c.walk_right = False
        c.ground_clip = False

        platform = _first(objects.platforms, lambda p: floor_collision(player, p))
        c.floor = platform is not None
        if platform is not None:
            c.colliding_platform = platform

        c.wall_right = _wall(
            player,
            objects.platforms,
            wall_right_collision,
            lambda: player.sprite.x + player.width >= _RIGHT_EDGE,
        )
        c.wall_left = _wall(
            player, objects.platforms, wall_left_collision, lambda: player.sprite.x <= 0
        )
        c.ceiling = any(ceiling_collision(player, p) for p in objects.platforms)
        c.enemy = any(
            e.visible and not e.dead and overlap_collision(player, e) for e in objects.enemies
        )

        c.ladder = False
        for ladder in objects.ladders:
            if overlap_collision(player, ladder) and not c.climbing:
                c.ladder = True
                c.colliding_ladder = ladder
                break

        tile = _first(objects.above_ladder, lambda t: floor_collision(player, t))
        c.tile_above_ladder = tile is not None
        if tile is not None:
            c.floor = True
            if not c.climbing:
                c.colliding_ladder = tile

        c.hammer_duration -= 1
        item = _first(
            objects.game_objects,
            lambda o: o.name == HAMMER_ITEM and overlap_collision(player, o),
        )
        if item is not None:
            c.hammer_duration = HAMMER_POWERUP_DURATION
            c.colliding_hammer_item = item

    @staticmethod
    def _update_peach(objects):
        peach = objects.peach
        platform = _first(objects.platforms, lambda p: floor_collision(peach, p))
        peach.collisions.floor = platform is not None
        if platform is not None:
            peach.collisions.colliding_platform = platform

    @staticmethod
    def _update_enemy(enemy, objects):
        c = enemy.collisions
        platforms = objects.platforms
        c.ground_clip = False
        c.floor = any(floor_collision(enemy, p) for p in platforms)
        c.wall_right = _wall(enemy, platforms, wall_right_collision)
        c.wall_left = _wall(enemy, platforms, wall_left_collision)
        c.ceiling = any(ceiling_collision(enemy, p) for p in platforms)
        c.player = overlap_collision(enemy, objects.player)
        c.tile_above_ladder = any(floor_collision(enemy, t) for t in objects.above_ladder)
        if c.tile_above_ladder:
            c.floor = True
        c.platform_end = any(platform_end_collision(enemy, e) for e in objects.platform_ends)