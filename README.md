# solong

A small two-dimensional puzzle game. You move the player around a walled map and
pick up every collectible. Then you walk onto the exit to win. Each step is
counted and printed to the terminal.

## Installing

```
pip install .
```

The game window is drawn with pygame.

## Playing

```
so_long path/to/level.ber
```

The command takes exactly one argument, a map file with the `.ber` extension.
With any other number of arguments it prints `Arguments must be 2!` and exits
with status 1.

The tile images are loaded from an `images/` directory relative to the current
directory. That directory must hold `wall.xpm`, `collect.xpm`, `player.xpm` and
`exit.xpm`. Floor tiles are left black.

Controls:

| Key                       | Action     |
|---------------------------|------------|
| W / Up arrow              | move up    |
| A / Left arrow            | move left  |
| S / Down arrow            | move down  |
| D / Right arrow           | move right |
| Esc or closing the window | quit       |

After each move that succeeds, `Step: N` is printed.

The exit only ends the game once every collectible has been picked up. When that
happens, `You won!` is printed and the window closes. Before then the player can
stand on the exit and walk on, and `collect c` is printed as a reminder.

## Map format

A map is a text file of equal-length lines, separated by `\n`. It is made of
these characters:

- `1` wall
- `0` empty floor
- `C` collectible
- `E` exit
- `P` player start

A map is accepted only when all of the following hold:

- the file name ends in `.ber`;
- the file is not empty;
- it has exactly one `P` and one `E`, and at least one `C`;
- every line has the same width, so the map is a rectangle;
- the first line, the last line, and the first and last column are all walls;
- it contains no other characters;
- the exit and every collectible can be reached from the start without passing
  through walls.

For example:

```
1111111111
1P00C0C001
1011110111
10C00000E1
1111111111
```

When a map is rejected, the reason is printed and the command exits with
status 1.

## Using it as a library

```python
from solong.gamemap import load_map, MapError
from solong.game import Game, Direction, MoveResult

game_map = load_map("level.ber")        # raises MapError if the map is invalid
game = Game(game_map)
result = game.step(Direction.RIGHT)      # MoveResult.BLOCKED, MOVED, ON_EXIT or WON
print(game.x, game.y, game.moves, game.collectibles)
```

The modules are:

- `solong.gamemap`
  - `GameMap` is a grid of tiles with `tile`, `place`, `positions`, `count`
    and `lines`.
  - The validation helpers are `check_extension`, `validate_line`,
    `count_elements`, `validate_elements` and `validate_shape`.
  - `read_map_lines` and `load_map` read map files.
- `solong.pathcheck` has `has_valid_path(game_map, x, y)`. It runs a flood fill
  from the start and reports whether the exit and every collectible are
  reachable. The map is not modified.
- `solong.game`
  - `Game` holds the player's position and counts moves and the collectibles
    still to pick up.
  - `Direction` and `MoveResult` are enums.
  - `direction_for_key` maps numeric key codes to directions.
- `solong.xpm` reads XPM images into `XpmImage` values with `load_xpm`,
  `parse_xpm_text` and `parse_xpm`. Colours are given as `#RRGGBB` or as one of
  a small set of names: white, black, gray/grey, red, green, blue, yellow, cyan,
  magenta, orange, brown, purple, pink and `None`. A name it does not know reads
  as black.
- `solong.render`
  - `load_images(directory)` loads the four tile images.
  - `Renderer` draws a game onto a pygame surface, using 60-pixel tiles.
- `solong.printf`
  - `render(fmt, *args)` is a small formatter with the `%c %s %d %i %u %x %X %p`
    and `%%` conversions.
  - `printf(fmt, *args)` writes the formatted text to standard output.
- `solong.cli`
  - `prepare_game(filename)` loads and checks a map in one call and returns a
    `Game`. It raises `MapError("MAP is not valid")` when the exit or a
    collectible cannot be reached.
  - `run(game, images_dir)` plays the game in a window.
  - `main(argv=None)` is the `so_long` command.

## What it does not do

- The move count is only printed to the terminal. It is not drawn in the window.
- There are no sounds, no animations and no enemies.
- Progress is not saved.

## Running the tests

```
pip install .[test]
pytest
```