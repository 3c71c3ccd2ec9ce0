"""Game state and rules: moving the player, collecting, and reaching the exit."""

from __future__ import annotations

from enum import Enum, IntEnum

from witchquest.board import Board, Tile
from witchquest.printf import sprintf

__all__ = [
    "Key",
    "Direction",
    "Facing",
    "Game",
    "WIN_MESSAGE",
    "direction_for_key",
]

WIN_MESSAGE = "\nYOU WON!"
_STATUS_FORMAT = "\r\033[0;31mMoves:\033[0;33m %d\033[0m "


class Key(IntEnum):
    """Key codes of the special keys the game reacts to."""

    ESC = 65307
    LEFT = 65361
    UP = 65362
    RIGHT = 65363
    DOWN = 65364


class Direction(Enum):
    """A step on the board as ``(dx, dy)``."""

    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]


class Facing(Enum):
    """Which way the player sprite is drawn after the last move key."""

    INITIAL = 0
    LEFT = "l"
    RIGHT = "f"
    VERTICAL = "r"

    @property
    def mirrored(self) -> bool:
        """True when the left-facing sprite is to be used."""
        return self is Facing.LEFT


_QUIT_KEYS = frozenset({ord("q"), int(Key.ESC)})

_KEY_DIRECTIONS = {
    ord("w"): Direction.UP,
    ord("a"): Direction.LEFT,
    ord("s"): Direction.DOWN,
    ord("d"): Direction.RIGHT,
    int(Key.UP): Direction.UP,
    int(Key.LEFT): Direction.LEFT,
    int(Key.DOWN): Direction.DOWN,
    int(Key.RIGHT): Direction.RIGHT,
}

_FACING = {
    Direction.LEFT: Facing.LEFT,
    Direction.RIGHT: Facing.RIGHT,
    Direction.UP: Facing.VERTICAL,
    Direction.DOWN: Facing.VERTICAL,
}


def _key_code(key: int | str) -> int:
    if isinstance(key, str):
        if len(key) != 1:
            raise ValueError(f"expected a single character, got {key!r}")
        return ord(key)
    return int(key)


def direction_for_key(key: int | str) -> Direction | None:
    """The direction bound to ``key`` (w/a/s/d or an arrow), or None."""
    return _KEY_DIRECTIONS.get(_key_code(key))


class Game:
    """One play of a board: the player's position, score and outcome."""

    def __init__(self, board: Board) -> None:
        start = board.find(Tile.PLAYER)
        if start is None:
            raise ValueError("the board has no player")
        self.board = board
        self.x, self.y = start
        self.collected = 0
        self.total = board.count(Tile.COLLECTIBLE)
        self.moves = 0
        self.won = False
        self.quit = False
        self.facing = Facing.INITIAL

    @property
    def finished(self) -> bool:
        """True once the player has won or quit."""
        return self.won or self.quit

    @property
    def exit_open(self) -> bool:
        """True once every collectible has been picked up."""
        return self.collected == self.total

    def move(self, direction: Direction) -> bool:
        """Try one step; return True if the player moved or reached an open exit.

        Walls stop the player, as does the exit while collectibles remain.
        The step onto an open exit wins the game and is not counted as a move.
        """
        if self.finished:
            return False
        nx, ny = self.x + direction.dx, self.y + direction.dy
        target = self.board.at(nx, ny)
        if target is Tile.WALL:
            return False
        if target is Tile.EXIT:
            if self.exit_open:
                self.won = True
                return True
            return False
        if target is Tile.COLLECTIBLE:
            self.collected += 1
        self.board.put(self.x, self.y, Tile.FLOOR)
        self.board.put(nx, ny, Tile.PLAYER)
        self.x, self.y = nx, ny
        self.moves += 1
        return True

    def handle_key(self, key: int | str) -> bool:
        """React to a key press; return False once the game is over."""
        if self.finished:
            return False
        code = _key_code(key)
        if code in _QUIT_KEYS:
            self.quit = True
            return False
        direction = direction_for_key(code)
        if direction is not None:
            self.move(direction)
            self.facing = _FACING[direction]
        return not self.finished

    def status_line(self) -> str:
        """The move counter as shown on the terminal."""
        return sprintf(_STATUS_FORMAT, self.moves)