import pygame
import pytest

from witchquest.board import Tile, parse_board
from witchquest.display import (
    COLLECTIBLE_COLOUR,
    EXIT_COLOUR,
    PLAYER_COLOUR,
    PLAYER_LEFT_COLOUR,
    WALL_COLOUR,
    Display,
    translate_key,
)
from witchquest.game import Game, Key

MAP = "11111\n1CPE1\n11111\n"


def make_display(tile_size=8):
    return Display(Game(parse_board(MAP)), tile_size)


def pixel(surface, x, y, size):
    return tuple(surface.get_at((x * size + 1, y * size + 1)))[:3]


def test_window_size_matches_board():
    display = make_display(10)
    board = display.game.board
    assert display.window_size() == (board.width * 10, board.height * 10)


def test_tile_size_must_be_positive():
    with pytest.raises(ValueError):
        make_display(0)


def test_tile_colours():
    display = make_display()
    assert display.tile_colour(Tile.WALL) == WALL_COLOUR
    assert display.tile_colour("C") == COLLECTIBLE_COLOUR
    assert display.tile_colour(Tile.EXIT) == EXIT_COLOUR
    assert display.tile_colour(Tile.PLAYER) == PLAYER_COLOUR


def test_unknown_tile_rejected():
    with pytest.raises(ValueError):
        make_display().tile_colour("X")


def test_render_paints_every_cell():
    display = make_display()
    surface = pygame.Surface(display.window_size())
    display.render(surface)
    board = display.game.board
    for y in range(board.height):
        for x in range(board.width):
            assert pixel(surface, x, y, 8) == display.tile_colour(board.at(x, y))


def test_player_facing_left_uses_left_colour():
    display = make_display()
    display.game.handle_key("a")
    assert display.tile_colour(Tile.PLAYER) == PLAYER_LEFT_COLOUR
    surface = pygame.Surface(display.window_size())
    display.render(surface)
    assert pixel(surface, display.game.x, display.game.y, 8) == PLAYER_LEFT_COLOUR


def test_translate_special_keys():
    assert translate_key(pygame.K_ESCAPE, "") == Key.ESC
    assert translate_key(pygame.K_LEFT, "") == Key.LEFT
    assert translate_key(pygame.K_UP, "") == Key.UP
    assert translate_key(pygame.K_RIGHT, "") == Key.RIGHT
    assert translate_key(pygame.K_DOWN, "") == Key.DOWN


def test_translate_letter_keys():
    assert translate_key(pygame.K_w, "w") == ord("w")
    assert translate_key(pygame.K_q, "q") == ord("q")


def test_translate_unmapped_key():
    assert translate_key(pygame.K_F1, "") is None