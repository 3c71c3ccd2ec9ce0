"""The game map: tiles, the board grid, and loading with validation."""

from __future__ import annotations

import os
from enum import Enum
from typing import Iterable, Iterator

from witchquest.lines import read_lines
from witchquest.strings import compare_n, rfind_char, split_words

__all__ = [
    "MapError",
    "Tile",
    "Board",
    "parse_board",
    "load_board",
    "valid_extension",
]

MAP_EXTENSION = ".ber"
_MIN_SIDE = 3


class MapError(Exception):
    """Raised when a map file cannot be used."""


class Tile(str, Enum):
    """The kinds of cell a map is made of, keyed by their map character."""

    FLOOR = "0"
    WALL = "1"
    COLLECTIBLE = "C"
    EXIT = "E"
    PLAYER = "P"


class Board:
    """A grid of tiles addressed by column ``x`` and row ``y``."""

    def __init__(self, rows: Iterable[str | Iterable[Tile]]) -> None:
        self._grid = [[Tile(cell) for cell in row] for row in rows]

    @property
    def height(self) -> int:
        """Number of rows."""
        return len(self._grid)

    @property
    def width(self) -> int:
        """Number of columns."""
        return len(self._grid[0]) if self._grid else 0

    def rows(self) -> list[str]:
        """The rows as map text, top to bottom."""
        return ["".join(tile.value for tile in row) for row in self._grid]

    def count(self, tile: Tile | str) -> int:
        """How many cells hold ``tile``."""
        wanted = Tile(tile)
        return sum(row.count(wanted) for row in self._grid)

    def positions(self, tile: Tile | str) -> Iterator[tuple[int, int]]:
        """Every ``(x, y)`` holding ``tile``, row by row."""
        wanted = Tile(tile)
        for y, row in enumerate(self._grid):
            for x, cell in enumerate(row):
                if cell is wanted:
                    yield x, y

    def find(self, tile: Tile | str) -> tuple[int, int] | None:
        """The first ``(x, y)`` holding ``tile``, or None."""
        return next(self.positions(tile), None)

    def _check(self, x: int, y: int) -> None:
        if not (0 <= y < len(self._grid) and 0 <= x < len(self._grid[y])):
            raise IndexError(f"position ({x}, {y}) is outside the board")

    def at(self, x: int, y: int) -> Tile:
        """The tile at column ``x``, row ``y``."""
        self._check(x, y)
        return self._grid[y][x]

    def put(self, x: int, y: int, tile: Tile | str) -> None:
        """Place ``tile`` at column ``x``, row ``y``."""
        self._check(x, y)
        self._grid[y][x] = Tile(tile)

    def __str__(self) -> str:
        return "\n".join(self.rows())


def _check_dimension(lines: list[str]) -> None:
    if not lines:
        raise MapError("Empty map file")
    rows = len(lines)
    cols = sum(len(line) for line in lines) // rows
    if cols < _MIN_SIDE or rows < _MIN_SIDE:
        raise MapError("Invalid map dimension")


def _check_sprites(lines: list[str]) -> None:
    allowed = {tile.value for tile in Tile}
    if any(ch not in allowed for line in lines for ch in line):
        raise MapError("Invalid map attribute")
    text = "".join(lines)
    players = text.count(Tile.PLAYER.value)
    collectibles = text.count(Tile.COLLECTIBLE.value)
    exits = text.count(Tile.EXIT.value)
    if players == 1 and collectibles > 0 and exits == 1:
        return
    message = "The numbers of sprites is not valid"
    if players > 1 or exits > 1:
        message += "\nMust have just one player and one exit"
    raise MapError(message)


def _check_sides(lines: list[str]) -> None:
    width = len(lines[0])
    wall = Tile.WALL.value
    closed = (
        all(len(line) == width for line in lines)
        and set(lines[0]) == {wall}
        and set(lines[-1]) == {wall}
        and all(line[0] == wall and line[-1] == wall for line in lines)
    )
    if not closed:
        raise MapError("Invalid wall or is not rectangular")


def parse_board(text: str) -> Board:
    """Build a board from map text, raising MapError if the map is unusable.

    Blank lines are ignored.  The map must be at least 3 by 3, use only the
    characters ``01CEP``, hold one player, one exit and at least one
    collectible, and be a rectangle closed by walls.
    """
    lines = split_words(text, "\n")
    _check_dimension(lines)
    _check_sprites(lines)
    _check_sides(lines)
    return Board(lines)


def load_board(path: str | os.PathLike[str]) -> Board:
    """Read and validate the map file at ``path``."""
    try:
        lines = read_lines(path)
    except OSError as exc:
        raise MapError("Empty map file") from exc
    return parse_board("".join(lines))


def valid_extension(filename: str | os.PathLike[str] | None) -> bool:
    """True if the name ends in ``.ber`` after its last dot."""
    if filename is None:
        return False
    name = os.fspath(filename)
    dot = rfind_char(name, ".")
    if dot is None:
        return False
    return compare_n(name[dot:], MAP_EXTENSION, len(MAP_EXTENSION) + 1) == 0