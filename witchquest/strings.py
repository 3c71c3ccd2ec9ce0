"""Bounded search, comparison, slicing and splitting of text and bytes."""

from __future__ import annotations

from typing import NamedTuple

__all__ = [
    "BoundedResult",
    "find_char",
    "rfind_char",
    "compare_n",
    "find_within",
    "substring",
    "trim",
    "split_words",
    "copy_bounded",
    "concat_bounded",
    "find_byte",
    "compare_bytes",
]


class BoundedResult(NamedTuple):
    """Text produced by a bounded copy and the length it tried to produce."""

    text: str
    wanted: int


def _as_char(c: int | str) -> str:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, int):
        return chr(c & 0xFF)
    raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")


def _non_negative(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")


def find_char(s: str, c: int | str) -> int | None:
    """Index of the first ``c`` in ``s``; ``"\\0"`` matches the end of ``s``."""
    ch = _as_char(c)
    if ch == "\0":
        return len(s)
    index = s.find(ch)
    return None if index < 0 else index


def rfind_char(s: str, c: int | str) -> int | None:
    """Index of the last ``c`` in ``s``; ``"\\0"`` matches the end of ``s``."""
    ch = _as_char(c)
    if ch == "\0":
        return len(s)
    index = s.rfind(ch)
    return None if index < 0 else index


def compare_n(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters; the sign tells the order, 0 if equal."""
    _non_negative("n", n)
    for pos in range(n):
        a = ord(s1[pos]) if pos < len(s1) else 0
        b = ord(s2[pos]) if pos < len(s2) else 0
        if a != b or a == 0:
            return a - b
    return 0


def find_within(big: str, little: str, length: int) -> int | None:
    """Index of ``little`` in ``big`` lying wholly within the first ``length`` chars."""
    _non_negative("length", length)
    if not little:
        return 0
    limit = min(length, len(big))
    for pos in range(limit):
        if pos + len(little) <= length and big.startswith(little, pos):
            return pos
    return None


def substring(s: str, start: int, length: int) -> str:
    """At most ``length`` characters of ``s`` from ``start``; empty past the end."""
    _non_negative("start", start)
    _non_negative("length", length)
    if start >= len(s):
        return ""
    return s[start:start + length]


def trim(s: str, charset: str) -> str:
    """``s`` without the characters of ``charset`` at either end."""
    return s.strip(charset)


def split_words(s: str, sep: int | str) -> list[str]:
    """The non-empty pieces of ``s`` between occurrences of ``sep``."""
    return [word for word in s.split(_as_char(sep)) if word]


def copy_bounded(src: str, size: int) -> BoundedResult:
    """Copy ``src`` into room for ``size`` characters including a terminator."""
    _non_negative("size", size)
    text = src[:size - 1] if size > 0 else ""
    return BoundedResult(text, len(src))


def concat_bounded(dst: str, src: str, size: int) -> BoundedResult:
    """Append ``src`` to ``dst`` in room for ``size`` characters including a terminator."""
    _non_negative("size", size)
    if size <= len(dst):
        return BoundedResult(dst, len(src) + size)
    room = size - len(dst) - 1
    return BoundedResult(dst + src[:room], len(dst) + len(src))


def find_byte(data: bytes | bytearray | memoryview, c: int, n: int) -> int | None:
    """Index of the first byte equal to ``c`` (taken modulo 256) in the first ``n`` bytes."""
    _non_negative("n", n)
    view = bytes(data)
    if n > len(view):
        raise ValueError(f"n ({n}) exceeds the data length ({len(view)})")
    index = view.find(bytes([c & 0xFF]), 0, n)
    return None if index < 0 else index


def compare_bytes(
    a: bytes | bytearray | memoryview, b: bytes | bytearray | memoryview, n: int
) -> int:
    """Difference of the first unequal bytes among the first ``n``; 0 if none differ."""
    _non_negative("n", n)
    left, right = bytes(a), bytes(b)
    if n > len(left) or n > len(right):
        raise ValueError(f"n ({n}) exceeds the length of an operand")
    for x, y in zip(left[:n], right[:n]):
        if x != y:
            return x - y
    return 0