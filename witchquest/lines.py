"""Reading a stream line by line in fixed-size chunks."""

from __future__ import annotations

from os import PathLike
from typing import Iterator, TextIO

__all__ = ["BUFFER_SIZE", "LineReader", "read_lines"]

BUFFER_SIZE = 5


class LineReader:
    """Yield the lines of a text stream, each with its newline if it had one.

    The stream is read ``buffer_size`` characters at a time and never further
    than needed to complete the current line.
    """

    def __init__(self, stream: TextIO, buffer_size: int = BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError(f"buffer_size must be positive, got {buffer_size}")
        self._stream = stream
        self._buffer_size = buffer_size
        self._pending = ""

    def read_line(self) -> str | None:
        """Return the next line, or None once the stream is exhausted."""
        while "\n" not in self._pending:
            chunk = self._stream.read(self._buffer_size)
            if not chunk:
                break
            self._pending += chunk
        if not self._pending:
            return None
        line, newline, rest = self._pending.partition("\n")
        self._pending = rest
        return line + newline

    def __iter__(self) -> Iterator[str]:
        while (line := self.read_line()) is not None:
            yield line


def read_lines(path: str | PathLike[str]) -> list[str]:
    """All lines of the file at ``path``, line endings kept as they are."""
    with open(path, encoding="utf-8", newline="") as handle:
        return list(LineReader(handle))