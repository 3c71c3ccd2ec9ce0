"""Drawing the board in a window and feeding key presses to the game."""

from __future__ import annotations

import os

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

from witchquest.board import Tile  # noqa: E402
from witchquest.game import WIN_MESSAGE, Game, Key  # noqa: E402
from witchquest.printf import printf  # noqa: E402

__all__ = [
    "DEFAULT_TILE_SIZE",
    "WINDOW_TITLE",
    "FLOOR_COLOUR",
    "WALL_COLOUR",
    "COLLECTIBLE_COLOUR",
    "EXIT_COLOUR",
    "PLAYER_COLOUR",
    "PLAYER_LEFT_COLOUR",
    "Display",
    "translate_key",
]

DEFAULT_TILE_SIZE = 64
WINDOW_TITLE = "the_witch"
FRAME_RATE = 60

Colour = tuple[int, int, int]

FLOOR_COLOUR: Colour = (46, 34, 47)
WALL_COLOUR: Colour = (94, 86, 80)
COLLECTIBLE_COLOUR: Colour = (250, 200, 60)
EXIT_COLOUR: Colour = (120, 60, 160)
PLAYER_COLOUR: Colour = (60, 180, 90)
PLAYER_LEFT_COLOUR: Colour = (40, 140, 200)

_TILE_COLOURS: dict[Tile, Colour] = {
    Tile.FLOOR: FLOOR_COLOUR,
    Tile.WALL: WALL_COLOUR,
    Tile.COLLECTIBLE: COLLECTIBLE_COLOUR,
    Tile.EXIT: EXIT_COLOUR,
    Tile.PLAYER: PLAYER_COLOUR,
}

_SPECIAL_KEYS = {
    pygame.K_ESCAPE: Key.ESC,
    pygame.K_LEFT: Key.LEFT,
    pygame.K_UP: Key.UP,
    pygame.K_RIGHT: Key.RIGHT,
    pygame.K_DOWN: Key.DOWN,
}


def translate_key(pygame_key: int, unicode: str = "") -> int | None:
    """The game key code for a pygame key event, or None if it has none."""
    special = _SPECIAL_KEYS.get(pygame_key)
    if special is not None:
        return int(special)
    if 0 < pygame_key < 128:
        return pygame_key
    if len(unicode) == 1:
        return ord(unicode)
    return None


class Display:
    """Draws a game's board as coloured tiles and runs its window loop."""

    def __init__(self, game: Game, tile_size: int = DEFAULT_TILE_SIZE) -> None:
        if tile_size <= 0:
            raise ValueError(f"tile_size must be positive, got {tile_size}")
        self.game = game
        self.tile_size = tile_size

    def window_size(self) -> tuple[int, int]:
        """Width and height of the window in pixels."""
        board = self.game.board
        return board.width * self.tile_size, board.height * self.tile_size

    def tile_colour(self, tile: Tile | str) -> Colour:
        """The colour a tile is drawn in; the player follows its facing."""
        kind = Tile(tile)
        if kind is Tile.PLAYER and self.game.facing.mirrored:
            return PLAYER_LEFT_COLOUR
        return _TILE_COLOURS[kind]

    def render(self, surface: pygame.Surface) -> None:
        """Draw every cell of the board onto ``surface``."""
        size = self.tile_size
        for y, row in enumerate(self.game.board.rows()):
            for x, cell in enumerate(row):
                rect = pygame.Rect(x * size, y * size, size, size)
                surface.fill(self.tile_colour(cell), rect)

    def _on_key(self, pygame_key: int, unicode: str) -> None:
        code = translate_key(pygame_key, unicode)
        if code is not None:
            self.game.handle_key(code)
        if not self.game.finished:
            printf("%s", self.game.status_line())

    def run(self) -> bool:
        """Open the window and play until the game is won or closed.

        Returns True if the player won.
        """
        pygame.init()
        try:
            screen = pygame.display.set_mode(self.window_size())
            pygame.display.set_caption(WINDOW_TITLE)
            clock = pygame.time.Clock()
            while not self.game.finished:
                for event in pygame.event.get():
                    if event.type == pygame.QUIT:
                        self.game.quit = True
                    elif event.type == pygame.KEYDOWN:
                        self._on_key(event.key, event.unicode)
                    if self.game.finished:
                        break
                self.render(screen)
                pygame.display.flip()
                clock.tick(FRAME_RATE)
            if self.game.won:
                printf("%s", WIN_MESSAGE)
            printf("\n")
        finally:
            pygame.quit()
        return self.game.won