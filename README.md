# apiengine

A small 2D game engine built on pygame. A game is made of **levels**. Each
level holds **actors**, and actors own **components**. One component is the
**sprite renderer**, which draws frames cut from loaded images and plays
frame animations. A single engine core owns the following:

- the main window and its back buffer
- a delta-time timer
- keyboard and mouse input
- the set of levels

The core switches levels when asked.

## Installation

```
pip install .
```

Tests:

```
pip install .[test]
pytest
```

## Running the sample game

```
apiengine
```

### Resources

The command takes no options apart from `--help`. The sample game looks for a
`Resources` directory in the working directory or in any directory above it,
and then does the following:

1. It loads every file under that directory, including subdirectories. Each
   file must be a PNG or BMP image.
2. It cuts `Player_Right.png` into 128×128 frames.
3. It loads the images in `Resources/bomb` as one sprite named `BOMB`.

The play level also needs `bg-1-1.png`. If no `Resources` directory is
found, or an image cannot be loaded, `EngineError` is raised.

### Playing

The main window is sized to the desktop. The game opens on the title level:

- On the title level, `R` goes to the play level.
- On the play level, `W`, `A`, `S` and `D` move the player. The camera
  follows the player.
- On the play level, `R` returns to the title level.

Closing the window ends the program. While debug mode is on, the play level
draws its frame rate and the player's position in the top-left corner.

## Building your own game

Subclass `ContentsCore` from `apiengine.core`. It has two methods to
implement:

- `begin_play`, called once at start-up.
- `tick`, called every frame before the engine's own tick.

Pass an instance to `engine_start`. It opens the windows and runs the frame
loop until the window is closed.

In `begin_play`, load images through `get_image_manager()` from
`apiengine.image_manager`, which offers these methods:

- `load(path, key_name=None)`: the key defaults to the file name.
- `load_folder(path, key_name=None)`: every image under the directory becomes
  one frame of the sprite.
- `cutting_sprite(key_name, cutting_size)`: cuts the sprite into cells of the
  given size.
- `cutting_sprite_grid(key_name, x, y)`: cuts the sprite into `x` columns and
  `y` rows.
- `create_cut_sprite(...)`: cuts a grid with spacing into a new sprite.
- `find_sprite`, `find_image` and `is_load_sprite`: look up what is loaded.

Keys are not case sensitive for ASCII letters.

Register levels with `get_core().create_level(name, game_mode_type,
main_pawn_type)`, then open the first one with `open_level(name)`. The level
change takes effect on the next tick.

### Actors and components

Actors derive from `Actor` in `apiengine.actor`, and game modes derive from
`GameMode`. You can override these methods:

- `begin_play`
- `tick(delta_time)`
- `level_change_start`
- `level_change_end`

Move an actor with `set_actor_location`, `add_actor_location` and
`set_actor_scale`. Spawn more actors into a level with
`level.spawn_actor(actor_type)`.

In an actor's constructor, create components with
`create_default_sub_object(component_type)`. Components begin play on the
level's next tick.

A `SpriteRenderer` from `apiengine.sprite_renderer` offers these methods:

- `set_sprite(name, index=0)`
- `set_order(order)`: lower orders are drawn first.
- `set_sprite_scale(ratio=1.0)`
- `set_component_location`
- `set_component_scale`
- `create_animation(name, sprite_name, start, end, time=0.1, loop=True)`
- `create_animation_frames(name, sprite_name, indexes, times, loop=True)`
- `change_animation(name, force=False)`
- `set_animation_event(name, frame, function)`

### Input

`get_input()` from `apiengine.input` returns the engine-wide input object.
Keys are given as single characters (`"A"`, `"1"`) or as `VirtualKey`
members. The input object offers these methods:

- `is_down`
- `is_press`
- `is_up`
- `is_free`
- `press_time`
- `bind_action(key, KeyEvent.DOWN, function)`: also accepts the other
  `KeyEvent` members.

An `EngineInput` can be built with a custom `key_source(code)` function,
for example in tests.

### Debug text and errors

`core_output_string(text, pos=None)` from `apiengine.core_debug` queues a line
of debug text. Queued lines are drawn over the frame while debug mode is on.
Change debug mode with `set_is_debug` or `switch_is_debug`.

Failures raise `EngineError` from `apiengine.base`. Examples include:

- missing or already loaded images
- unknown levels, animations or keys
- sprite indexes out of range
- cuts that do not divide an image evenly

## What it does not do

The engine has no sound, no collision detection and no physics. In the
sample game, the player's footstep event only counts steps.

The sub window is an off-screen surface and is never shown. Input is read
only while the pygame display is initialised.