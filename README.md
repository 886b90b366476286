# zoolworld

A small tile-based puzzle game played in the terminal. You walk a character
around a walled map and open every chest. Once the last chest is open the
door unlocks, and stepping onto it ends the game.

## Installing

```
pip install .
```

The package has no dependencies outside the standard library.

## Playing

```
zoolworld path/to/level.ber
```

The command takes exactly one argument: a map file whose name ends in
`.ber`. The board is printed as text, then keys are read from standard
input, one line at a time:

- each `w`, `a`, `s`, `d` on a line moves up, left, down or right, in order
  (so `ddw` makes three moves);
- a line that is exactly `Escape` (or a lone escape character) quits;
- any other character is ignored.

After every move that changes something, the board is printed again. The
game ends with status 0 on `Escape`, on stepping through the open exit, or
when standard input runs out.

On a bad start the game prints `Error` and a reason to standard output and
exits with status 1:

| Message       | Cause                                                        |
|---------------|--------------------------------------------------------------|
| `Usage: ...`  | not exactly one argument                                     |
| `Error map`   | name not ending in `.ber`, unreadable file, empty or non-rectangular map |
| `Bad Parsing` | the map breaks one of the rules below                        |

### How the board is drawn

| Glyph           | Meaning                         |
|-----------------|---------------------------------|
| `1`             | wall                            |
| `0`             | floor                           |
| `C`             | closed chest                    |
| `c`             | opened chest                    |
| `E`             | closed exit                     |
| `O`             | open exit                       |
| `^` `v` `<` `>` | the player, facing that way     |

## Map files

A map is a rectangle of characters, one row per line:

| Character | Meaning        |
|-----------|----------------|
| `1`       | wall           |
| `0`       | floor          |
| `P`       | player start   |
| `C`       | closed chest   |
| `c`       | opened chest   |
| `E`       | exit           |

A valid map

- is surrounded by walls on every side,
- has exactly one `P`,
- has exactly one `E`,
- has at least one `C`.

Example:

```
1111111
1P0C0E1
1111111
```

Walking into a closed chest opens it. The exit blocks the player while any
chest is still closed.

## Using the game from Python

The rules live in `zoolworld.board` and need no terminal:

```python
from zoolworld.board import Board, Direction, MapError, Outcome

board = Board.from_rows([
    "1111111",
    "1P0C0E1",
    "1111111",
])                              # raises MapError if the map breaks a rule
board.probe(Direction.RIGHT)    # Outcome.MOVED, without moving
step = board.move(Direction.RIGHT)
step.outcome                    # an Outcome
step.draws                      # ((Sprite, (row, col)), ...) to redraw
step.position                   # the player's (row, col) afterwards
board.remaining                 # chests still closed
board.rows                      # the current map as text lines
```

`Board(grid)` builds a board from a list of character lists without checking
the rules; `validate()` checks them and sets `player`, `exit` and
`remaining`. `cell(row, col)` returns a cell's character.

`zoolworld.game` holds the rest:

- `load_board(path)` reads a `.ber` file and returns a validated `Board`.
- `Game(board, resolution=32)` keeps what is drawn on each cell.
  `handle_key(key)` applies a key and returns the `Step` (or `None` for an
  ignored key); it raises `QuitGame` on escape or at the open exit.
  `render()` returns the board as text; `window_size` gives the pixel size
  for the chosen tile resolution.
- `main(argv=None)` is the `zoolworld` command.

Smaller helpers come with the package: `zoolworld.lines.read_lines` reads a
stream line by line in fixed-size chunks, `zoolworld.output` has a
printf-style formatter (`format_printf`, `printf`) and writers, and
`zoolworld.chars` and `zoolworld.strings` hold ASCII character and string
utilities.

## What it does not do

There is no graphical window: the game is drawn as text and driven by lines
of input, not by live key presses. `zoolworld.game.CHEST_IMAGES` names image
files for the chest tiles, but nothing loads or shows them.

## Running the tests

```
pip install .[test]
pytest
```