"""Command-line entry point: check the map argument, then play it."""

from __future__ import annotations

import sys
from typing import Sequence

from witchquest.board import MapError, load_board, valid_extension
from witchquest.display import Display
from witchquest.game import Game
from witchquest.printf import printf

__all__ = ["main"]


def _error(message: str) -> int:
    printf("Error\n%s\n", message)
    return 1


def main(argv: Sequence[str] | None = None) -> int:
    """Play the map named by the single argument; return the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        return _error("No args")
    if len(args) > 1:
        return _error("Only the first file would be used")
    path = args[0]
    if not valid_extension(path):
        return _error("Invalid file extension")
    try:
        board = load_board(path)
    except MapError as exc:
        return _error(str(exc))
    Display(Game(board)).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())