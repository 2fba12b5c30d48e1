# girderworks

A small component-based engine for a girder-climbing arcade platformer.
It provides a hero who runs, jumps and climbs ladders. It provides barrels
and fireballs that roll along girders, springs that bounce, and a hammer
power-up. It also provides moving and orbiting platforms and vertical
platform spawners. Scenes and a scene manager tie these together.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Concepts

### Objects

`ModularObject` (in `girderworks.modular`) is a sprite-backed game object.
It carries:

- a list of components,
- a `Collisions` record of per-frame contact flags,
- hit points (`hp`),
- a `dead` flag,
- a `return_to_pool` flag.

Positions are in pixels, and the world is laid out on a grid of
`TILESCALE`-sized tiles (`girderworks.definitions`). `move(x, y)` moves by
whole pixels, and a positive `y` goes up the screen. `set_tile_xy(x, y)`
places an object on the tile grid.

### Components

Behaviour is added by attaching `Component` subclasses with
`attach_component`. `ModularObject.update()` first updates the object's
children and then calls every attached component's `perform()`. Components
can be switched off and on by name with `disable_component` and
`enable_component`, or all at once with `disable_all_components` and
`enable_all_components`.

The components are:

- `PlayerMoveComponent` and `LadderComponent` (`girderworks.player`): walking,
  jumping, starting and ending a ladder climb, read from a `Keyboard`.
- `PhysicsComponent` (`girderworks.physics`): gravity, wall stops, ground
  clipping and jump arcs.
- `EnemyComponent` and `EnemyDamageComponent` (`girderworks.enemy`): movement
  of fireballs, barrels and springs, and the damage the player takes from
  touching an enemy.
- `SpriteComponent` (`girderworks.animation`): sprite-sheet animation. It also
  plays enemy death animations, after which the enemy is hidden and flagged
  for return to its pool.
- `HammerComponent` (`girderworks.hammer`) swings the hammer beside its
  parent.
- `HammerPowerComponent` (`girderworks.powerup`) handles picking up a hammer
  item and switching the music.
- `HitByHammerComponent` (`girderworks.factory`) kills an enemy that the
  visible hammer overlaps.
- `ConstantMoveComponent` (`girderworks.constant_move`), `OrbitComponent` and
  `MovingPlatformComponent` (`girderworks.motion`): fixed-direction movement,
  circling a point, and shuttling back and forth while carrying the player.
- `SfxComponent` (`girderworks.sound`): footstep and jump sounds through a
  `SoundManager`.

### Factory

`girderworks.factory` builds ready-made objects:

- `make_player`
- `make_enemy`
- `make_peach`
- `make_platform`
- `make_ladder`
- `make_spawner`
- `make_spawner_rope`
- `make_fireball`
- `make_spring`
- `make_barrel`
- `make_hammer`

Player objects read keys from the module's shared `KEYBOARD`.

### Pools and spawners

`ObjectPool` (`girderworks.pool`) hands out and takes back reusable objects
with `request()` and `release()`. `available()` counts the objects still in
the pool. `PlatformSpawnerManager` (`girderworks.spawners`) builds columns
of rising or sinking platforms. They wrap around after a set distance and
carry the player along.

### Scenes

`Scene` (`girderworks.scene`) holds every object of a level in an
`AllObjects` record, available as `scene.objects`. `Scene.update()`
refreshes collisions and returns a `SceneResult`:

- `LOST` when the player's hit points reach zero,
- `WIN` when `win_condition` is set,
- `ONGOING` otherwise.

`Scene.draw(surface)` draws the visible objects in layer order. The
collision tests are available as plain functions, for example
`floor_collision` and `overlap_collision`.

`SceneManager` (`girderworks.scene_manager`) switches between the main menu,
levels, the death screen, settings, level select and the win screen. Levels
are numbered from 1 in the order they are added.

## Textures

Objects load their images through `GameResource.instance()`
(`girderworks.gameobject`). By default they load from the `assets/` paths
named in `girderworks.factory`, relative to the working directory. Textures
can also be registered in memory with `add_texture(path, texture)`.

## Example

```python
import pygame

from girderworks.factory import KEYBOARD, PLATFORM_TEXTURE, PLAYER_SHEET, HAMMER_SHEET
from girderworks.factory import make_hammer, make_platform, make_player
from girderworks.gameobject import GameResource, Texture
from girderworks.scene import Scene

resources = GameResource.instance()
resources.add_texture(PLAYER_SHEET, Texture(pygame.Surface((112, 80))))
resources.add_texture(HAMMER_SHEET, Texture(pygame.Surface((32, 64))))
resources.add_texture(PLATFORM_TEXTURE, Texture(pygame.Surface((8, 8))))


class FirstLevel(Scene):
    def load(self):
        super().load()
        objects = self.objects
        objects.player = make_player(2, 20)
        objects.hammer = make_hammer(objects.player)
        objects.platforms.extend(make_platform(x, 22) for x in range(28))


level = FirstLevel()
level.load()

KEYBOARD.press("d")          # hold "right"
result = level.update()      # refresh collisions; a SceneResult
level.objects.player.update()  # run the player's components
```

`Scene.update()` only refreshes collisions. Running each object's `update()`
is left to the caller.

## What this package does not do

It has no command to start a game and no window or event loop. It ships no
level layouts, menu screens or image and sound files. The caller has to:

- open a pygame display,
- feed key events into a `Keyboard`,
- call the scene and object updates each frame,
- draw onto the display surface,
- provide the assets.