# forradia

A small tile-based role-playing world that runs in a full-screen window.
A new world is generated each time the game starts: a 100 × 100 area that
is first covered in grass, then dotted with 30 to 39 round lakes, and then
given 100 to 119 trees placed on random tiles. You walk around it with the
arrow keys, and the view follows you.

## Installing

```
pip install .
```

This also installs pygame, which draws the window.

## Playing

```
forradia
```

The command takes no options besides `--help`. The game goes through three
scenes in turn:

1. **Intro**: draws the background and the logo, then moves on.
2. **World generation**: builds a new world, then moves on.
3. **Main**: draws an 11 × 11 tile view centred on the player, with the
   player in the middle tile.

While the main scene is showing:

- Hold the **arrow keys** to move. The player takes at most one step about
  every third of a second. Holding two keys at once moves diagonally.
- **Close the window** to quit.

## Images

Images are PNG files found, subdirectories included, in a `resources/Images/`
directory that sits next to the `forradia` package directory. Each image is
looked up by its file name without the extension, for example
`GroundGrass.png`, `GroundWater_0.png`, `Player.png`,
`DefaultSceneBackground.png` and `ForradiaWorldLogo.png`. If two files share
a name, the first one found is kept. A missing directory or a missing image
is not an error; nothing is drawn in its place. Trees are recorded on the
tiles but not drawn.

## Using it as a library

The world and generation code need no window:

```python
import random

from forradia.hashing import name_hash
from forradia.world import WorldArea
from forradia.worldgen import generate_new_world

area = WorldArea()
generate_new_world(area, random.Random(1))
water = name_hash("GroundWater_0")
count = sum(1 for _, _, tile in area.tiles() if tile.ground == water)
print(count, "water tiles")
```

Other parts:

- `forradia.world`: `Tile` (ground and object as name hashes), `WorldArea`
  (`tile(x, y)`, `tiles()`, `contains(x, y)`) and `World`.
- `forradia.worldgen`: `clear_with_grass`, `generate_water`,
  `generate_objects` and `generate_new_world`, each taking an optional
  `random.Random`.
- `forradia.player.Player`: position (starting at 50, 50), movement timing
  and `move_up` / `move_right` / `move_down` / `move_left`.
- `forradia.keyboard.KeyboardInput`: which keys are held down.
- `forradia.movement.update_player_movement(player, keyboard, now)`: moves
  the player from the held arrow keys; `now` is in milliseconds.
- `forradia.scenes`: `SceneName`, the `Scene` base class and `SceneManager`.
- `forradia.canvas.Canvas`, `forradia.images.ImageLoader`,
  `forradia.renderer.ImageRenderer` and `forradia.worldview.WorldView`:
  drawing with pygame.
- `forradia.theme`: the three scenes, `GameContext` and
  `build_scene_manager`.
- `forradia.engine.Engine` and `forradia.app.Game`: the main loop.
  `Engine` accepts an event source, so it can be driven without a window.

## What it does not do

There is no main menu: `SceneName.MAIN_MENU` exists but no scene is
registered under it. The mouse is ignored, the world is not saved, and the
game has no goals beyond walking around.

## Running the tests

```
pip install .[test]
pytest
```