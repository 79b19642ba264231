# unseenia

The game logic of a small top-down action role-playing game, with no
dependence on any graphics, window or input library. Every piece is plain
Python and can be driven from any front end or from tests. Textures are
opaque values: the package stores whatever you pass and never loads an image.

## What is inside

- `unseenia.geometry`: `Vector2`, `Rect` (with `intersects` and `contains`)
  and `Sprite` (with `move`, `set_position` and `global_bounds`, which takes
  origin and rotation into account).
- `unseenia.attributes`: `AttributeComponent` holds level, experience,
  attribute points and derived stats (hit points, damage, accuracy, defence,
  luck). `exp_for_level` gives the experience curve.
- `unseenia.skills`: `SkillType`, `Skill` and `SkillComponent`. Each skill
  has its own level and experience; an unknown skill index raises
  `IndexError`.
- `unseenia.movement`: `MovementComponent` accelerates, caps and decelerates
  a velocity and moves its sprite by it. `MovementState` names the states
  that `get_state` checks.
- `unseenia.animation`: `Animation` steps through frames of a sprite sheet;
  `AnimationComponent` plays named animations with `play` or, at a speed
  scaled by a modifier, `play_modified`, and supports a priority animation
  that runs to its end before others may play.
- `unseenia.hitbox`: `HitboxComponent`, a box that follows a sprite at an
  offset and can predict its next position.
- `unseenia.entity`: `Entity`, the abstract base that puts the components
  together.
- `unseenia.player`: `Player`, with hit point and experience helpers and a
  `Sword` aimed at the mouse. `update_attack` takes whether the attack button
  is held.
- `unseenia.enemies`: `Enemy` and `Rat`.
- `unseenia.items`: `Item`, `MeleeWeapon`, `Sword`, `RangedWeapon`, `Bow` and
  `Inventory` (`add`, `remove`, `clear`, and list-like access).
- `unseenia.tiles`: `TileType`, `Tile`, `RegularTile` and `EnemySpawnerTile`.
- `unseenia.enemy_system`: `EnemyType` and `EnemySystem`, which creates an
  enemy of a given type and appends it to a list of active enemies; an
  unknown type raises `ValueError`.
- `unseenia.tilemap`: `TileMap`, a layered grid of tile stacks. It adds and
  removes tiles, saves and loads the map as a text file (`save_to_file`,
  `load_from_file`, `TileMap.from_file`), keeps entities inside the world and
  out of colliding tiles, fires spawner tiles near an entity through an
  `EnemySystem`, and lists the tiles around a grid position in drawing order
  with `visible_tiles`.
- `unseenia.settings`: `VideoMode` and `GraphicsSettings`, which can be saved
  to and loaded from a small text file.
- `unseenia.state`: `StateData` and the abstract `State`, which provide key
  repeat timing, pause and quit flags, and mapping of a mouse position to
  world and grid coordinates. `load_key_values` and `load_keybinds` read key
  configuration files of whitespace-separated pairs.
- `unseenia.gui`: `Button`, `DropDownList`, `TextureSelector` and
  `ProgressBar`, which track their state from a mouse position and a
  pressed flag you pass in. `p2p_x`, `p2p_y` and `calc_char_size` scale
  values to a `VideoMode`.

## Example

```python
from unseenia.geometry import Vector2
from unseenia.player import Player
from unseenia.tilemap import TileMap

world = TileMap(64.0, 10, 10, "tiles.png")
player = Player(220.0, 220.0, "player_sheet.png")

player.move(1.0, 0.0, 0.016)
world.update_world_bounds_collision(player, 0.016)
world.update_tile_collision(player, 0.016)
player.update(0.016, Vector2(300.0, 300.0))

player.gain_exp(100)
world.save_to_file("world.slmp")
loaded = TileMap.from_file("world.slmp")
```

## What it does not do

The package has no command to run and no game loop. It opens no window,
draws nothing, plays no sound and reads no keyboard or mouse itself: the
caller supplies positions, button states and elapsed time. `State` is only a
base class; there are no concrete menu, settings, world or tile-editor
screens, and the widgets in `unseenia.gui` keep state and geometry but do not
render text or shapes.

## Tests

Install with the `test` extra and run `pytest`.