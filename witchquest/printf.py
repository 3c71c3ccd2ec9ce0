"""Formatted output with the conversions %c %s %p %d %i %u %x %X and %%."""

from __future__ import annotations

import operator
import re
import sys
from typing import Any, Iterator, TextIO

from witchquest.chars import itoa, itoa_base, utoa

__all__ = [
    "HEX_BASE_LOWER",
    "HEX_BASE_UPPER",
    "sprintf",
    "printf",
    "put_char",
    "put_str",
    "put_endl",
    "put_nbr",
]

HEX_BASE_LOWER = "0123456789abcdef"
HEX_BASE_UPPER = "0123456789ABCDEF"

# A lone "%" at the very end of the format is consumed and prints nothing.
_DIRECTIVE = re.compile(r"%(?:([cspdiuxX%])|$)")
_UINT_MASK = 0xFFFFFFFF


def _int32(value: Any) -> int:
    """Wrap an integer to the range of a 32-bit signed int."""
    n = operator.index(value) & _UINT_MASK
    return n - (1 << 32) if n & 0x80000000 else n


def _uint32(value: Any) -> int:
    return operator.index(value) & _UINT_MASK


def _char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"%c expects a single character, got {value!r}")
        return value
    return chr(operator.index(value) & 0xFF)


def _string(value: Any) -> str:
    if value is None:
        return "(null)"
    if not isinstance(value, str):
        raise TypeError(f"%s expects a str or None, got {type(value).__name__}")
    return value


def _pointer(value: Any) -> str:
    if value is None or (isinstance(value, int) and value == 0):
        return "(nil)"
    address = value if isinstance(value, int) else id(value)
    return "0x" + itoa_base(address, HEX_BASE_LOWER)


_CONVERTERS = {
    "c": _char,
    "s": _string,
    "p": _pointer,
    "d": lambda v: itoa(_int32(v)),
    "i": lambda v: itoa(_int32(v)),
    "u": lambda v: utoa(_uint32(v)),
    "x": lambda v: itoa_base(_uint32(v), HEX_BASE_LOWER),
    "X": lambda v: itoa_base(_uint32(v), HEX_BASE_UPPER),
}


def _convert(spec: str | None, args: Iterator[Any]) -> str:
    if spec is None:
        return ""
    if spec == "%":
        return "%"
    try:
        value = next(args)
    except StopIteration:
        raise TypeError(f"not enough arguments for conversion %{spec}") from None
    return _CONVERTERS[spec](value)


def sprintf(fmt: str, *args: Any) -> str:
    """Return ``fmt`` with its conversions replaced by the formatted ``args``.

    Unknown conversions are copied through unchanged; surplus arguments are ignored.
    """
    remaining = iter(args)
    return _DIRECTIVE.sub(lambda m: _convert(m.group(1), remaining), fmt)


def printf(fmt: str, *args: Any) -> int:
    """Write the formatted text to standard output and return its length."""
    text = sprintf(fmt, *args)
    sys.stdout.write(text)
    return len(text)


def _target(stream: TextIO | None) -> TextIO:
    return sys.stdout if stream is None else stream


def put_char(c: str | int, stream: TextIO | None = None) -> int:
    """Write one character to ``stream`` (standard output by default)."""
    _target(stream).write(_char(c))
    return 1


def put_str(s: str, stream: TextIO | None = None) -> int:
    """Write ``s`` to ``stream`` and return the number of characters written."""
    _target(stream).write(s)
    return len(s)


def put_endl(s: str, stream: TextIO | None = None) -> int:
    """Write ``s`` followed by a newline."""
    text = s + "\n"
    _target(stream).write(text)
    return len(text)


def put_nbr(n: int, stream: TextIO | None = None) -> int:
    """Write the decimal form of ``n`` taken as a 32-bit signed integer."""
    text = itoa(_int32(n))
    _target(stream).write(text)
    return len(text)