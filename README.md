# witchquest

A small tile-based puzzle game. You play a witch on a walled grid: pick up
every collectible, then step onto the exit to win.

## Installing

```
pip install .
```

## Playing

```
witchquest path/to/level.ber
```

The command takes exactly one argument: a map file whose name ends in `.ber`.
With no argument, more than one argument, a wrong extension or an unusable
map, it prints `Error` followed by the reason and exits with status 1.

The game opens a window titled `the_witch`, with each cell drawn 64 pixels
square.

### Controls

| Key                  | Action      |
|----------------------|-------------|
| `w` / Up arrow       | move up     |
| `s` / Down arrow     | move down   |
| `a` / Left arrow     | move left   |
| `d` / Right arrow    | move right  |
| `q` / Esc            | quit        |

After each key press the move counter is printed in the terminal. Closing the
window also quits. Reaching the open exit prints `YOU WON!`.

### Rules

- Walls stop the player.
- Stepping on a collectible picks it up.
- The exit stays closed until every collectible has been picked up; the step
  onto the open exit wins the game and is not counted as a move.

## Map format

A map is a plain-text grid built from these characters:

| Char | Meaning                       |
|------|-------------------------------|
| `1`  | wall                          |
| `0`  | empty floor                   |
| `C`  | collectible                   |
| `E`  | exit                          |
| `P`  | player start                  |

Blank lines are ignored. A map is rejected if:

- the file is empty or cannot be read, or the grid is smaller than 3×3;
- it contains any other character;
- it does not have exactly one `P`, exactly one `E` and at least one `C`;
- it is not rectangular or not fully enclosed by walls.

Example:

```
1111111
1P0C0E1
1111111
```

## Using it as a library

```python
from witchquest.board import parse_board
from witchquest.game import Game, Direction

game = Game(parse_board("11111\n1PCE1\n11111\n"))
game.move(Direction.RIGHT)
print(game.collected, game.exit_open)  # 1 True
print(game.status_line())
```

- `witchquest.board` — `Tile`, `Board`, `parse_board`, `load_board`
  (both raise `MapError` for an unusable map) and `valid_extension`.
- `witchquest.game` — `Game` with `move`, `handle_key` and `status_line`;
  `Direction`, `Facing`, `Key` and `direction_for_key`.
- `witchquest.display` — `Display`, which draws a game with pygame and runs
  its window loop, and `translate_key`.
- `witchquest.cli` — `main(argv=None)`, the command above.

Smaller helpers the game is built on:

- `witchquest.printf` — `sprintf` and `printf` with the conversions
  `%c %s %p %d %i %u %x %X %%`, plus `put_char`, `put_str`, `put_endl`
  and `put_nbr`.
- `witchquest.lines` — `LineReader`, which reads a text stream line by line in
  small chunks, and `read_lines`.
- `witchquest.strings` — bounded search, comparison, slicing and splitting.
- `witchquest.chars` — ASCII classification, case mapping, `atoi`, `itoa`,
  `utoa` and `itoa_base`.

## What it does not do

Cells are drawn as flat coloured squares; there are no sprite images, sounds
or animations. The left-facing player is shown in a different colour. There is
no level selection, saving or score keeping beyond the move counter.

## Running the tests

```
pip install .[test]
pytest
```