import pytest

from witchquest.board import (
    Board,
    MapError,
    Tile,
    load_board,
    parse_board,
    valid_extension,
)

VALID = "1111111\n1P0C0E1\n1111111\n"


def test_parse_valid_map():
    board = parse_board(VALID)
    assert board.height == 3
    assert board.width == 7
    assert board.find(Tile.PLAYER) == (1, 1)
    assert board.find(Tile.EXIT) == (5, 1)
    assert board.count(Tile.COLLECTIBLE) == 1


def test_str_round_trip():
    text = "1111111\n1P0C0E1\n1111111"
    assert str(parse_board(text)) == text


def test_blank_lines_are_ignored():
    assert str(parse_board("\n" + VALID + "\n\n")) == VALID.strip("\n")


@pytest.mark.parametrize(
    "text, message",
    [
        ("", "Empty map file"),
        ("\n\n", "Empty map file"),
        ("111\n1P1\n", "Invalid map dimension"),
        ("11\n1P\n11", "Invalid map dimension"),
        ("11111\n1PXCE\n11111", "Invalid map attribute"),
        ("11111\n1P0E1\n11111", "The numbers of sprites is not valid"),
        ("111111\n1PPCE1\n111111", "Must have just one player and one exit"),
        ("111111\n1PECE1\n111111", "Must have just one player and one exit"),
        ("11111\n1PCE0\n11111", "Invalid wall or is not rectangular"),
        ("11111\n0PCE1\n11111", "Invalid wall or is not rectangular"),
        ("11011\n1PCE1\n11111", "Invalid wall or is not rectangular"),
        ("11111\n1PCE1\n11101", "Invalid wall or is not rectangular"),
        ("11111\n1PCE1\n111111", "Invalid wall or is not rectangular"),
    ],
)
def test_invalid_maps(text, message):
    with pytest.raises(MapError, match=message):
        parse_board(text)


def test_load_board_from_file(tmp_path):
    path = tmp_path / "level.ber"
    path.write_text(VALID, encoding="utf-8")
    board = load_board(path)
    assert str(board) == VALID.strip("\n")


def test_load_missing_file(tmp_path):
    with pytest.raises(MapError, match="Empty map file"):
        load_board(tmp_path / "missing.ber")


@pytest.mark.parametrize(
    "name, expected",
    [
        ("maps/1map.ber", True),
        (".ber", True),
        ("map.ber.txt", False),
        ("map.BER", False),
        ("mapber", False),
        ("map.berx", False),
        (None, False),
    ],
)
def test_valid_extension(name, expected):
    assert valid_extension(name) is expected


def test_put_and_at():
    board = parse_board(VALID)
    board.put(1, 1, Tile.FLOOR)
    assert board.at(1, 1) is Tile.FLOOR
    assert board.count(Tile.PLAYER) == 0
    board.put(2, 1, "P")
    assert board.find(Tile.PLAYER) == (2, 1)


def test_at_outside_board():
    board = parse_board(VALID)
    with pytest.raises(IndexError):
        board.at(board.width, 0)
    with pytest.raises(IndexError):
        board.at(0, -1)


def test_board_rejects_unknown_tile():
    with pytest.raises(ValueError):
        Board(["111", "1X1", "111"])


def test_tile_lookup_by_character():
    assert Tile("C") is Tile.COLLECTIBLE
    assert list(parse_board(VALID).positions("1"))[0] == (0, 0)