"""Character classification, case mapping and integer/text conversion."""

from __future__ import annotations

__all__ = [
    "is_alpha",
    "is_digit",
    "is_alnum",
    "is_ascii",
    "is_print",
    "to_upper",
    "to_lower",
    "atoi",
    "itoa",
    "utoa",
    "itoa_base",
]

_UINT_MASK = 0xFFFFFFFF
_ULLONG_MASK = 0xFFFFFFFFFFFFFFFF
_SPACE_CODES = frozenset({9, 10, 11, 12, 13, 32})


def _code(c: int | str) -> int:
    """Return the code point of a one-character string, or the int itself."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    if isinstance(c, int):
        return c
    raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")


def _same_kind(original: int | str, code: int) -> int | str:
    return chr(code) if isinstance(original, str) else code


def is_alpha(c: int | str) -> bool:
    """True for an ASCII letter."""
    code = _code(c)
    return 65 <= code <= 90 or 97 <= code <= 122


def is_digit(c: int | str) -> bool:
    """True for an ASCII decimal digit."""
    return 48 <= _code(c) <= 57


def is_alnum(c: int | str) -> bool:
    """True for an ASCII letter or digit."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: int | str) -> bool:
    """True for a code in the range 0..127."""
    return 0 <= _code(c) <= 127


def is_print(c: int | str) -> bool:
    """True for a printable ASCII character, space included."""
    return 32 <= _code(c) <= 126


def to_upper(c: int | str) -> int | str:
    """Map an ASCII lower-case letter to upper case; leave anything else alone."""
    code = _code(c)
    if 97 <= code <= 122:
        code -= 32
    return _same_kind(c, code)


def to_lower(c: int | str) -> int | str:
    """Map an ASCII upper-case letter to lower case; leave anything else alone."""
    code = _code(c)
    if 65 <= code <= 90:
        code += 32
    return _same_kind(c, code)


def atoi(text: str) -> int:
    """Parse a leading decimal integer, skipping whitespace; 0 if there is none."""
    pos = 0
    length = len(text)
    while pos < length and ord(text[pos]) in _SPACE_CODES:
        pos += 1
    sign = 1
    if pos < length and text[pos] in "+-":
        if text[pos] == "-":
            sign = -1
        pos += 1
    value = 0
    while pos < length and is_digit(text[pos]):
        value = value * 10 + (ord(text[pos]) - 48)
        pos += 1
    return sign * value


def itoa(n: int) -> str:
    """Decimal text of a signed integer."""
    if n < 0:
        return "-" + utoa_unbounded(-n)
    return utoa_unbounded(n)


def utoa_unbounded(n: int) -> str:
    return itoa_base(n, "0123456789") if n <= _ULLONG_MASK else str(n)


def utoa(n: int) -> str:
    """Decimal text of n taken as a 32-bit unsigned integer."""
    return itoa_base(n & _UINT_MASK, "0123456789")


def itoa_base(n: int, base: str) -> str:
    """Text of n, taken as a 64-bit unsigned integer, in the digits of ``base``."""
    radix = len(base)
    if radix < 2:
        raise ValueError("base must have at least two digits")
    n &= _ULLONG_MASK
    digits = []
    while True:
        n, rest = divmod(n, radix)
        digits.append(base[rest])
        if n == 0:
            break
    return "".join(reversed(digits))