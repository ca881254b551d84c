"""Character classification, case mapping and integer/text conversion."""

from __future__ import annotations

from typing import Union

Char = Union[int, str]

_SPACES = frozenset("\t\n\r\v\f ")
_DIGITS = "0123456789"


def _code(c: Char) -> int:
    """Return the code point of a one-character string, or an int unchanged."""
    if isinstance(c, bool):
        raise TypeError("expected an int or a one-character string, not bool")
    if isinstance(c, int):
        return c
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    raise TypeError(f"expected an int or a one-character string, not {type(c).__name__}")


def isalpha(c: Char) -> bool:
    """True for an ASCII letter."""
    code = _code(c)
    return ord("A") <= code <= ord("Z") or ord("a") <= code <= ord("z")


def isdigit(c: Char) -> bool:
    """True for an ASCII decimal digit."""
    return ord("0") <= _code(c) <= ord("9")


def isalnum(c: Char) -> bool:
    """True for an ASCII letter or digit."""
    return isalpha(c) or isdigit(c)


def isascii(c: Char) -> bool:
    """True for a code in the range 0..127."""
    return 0 <= _code(c) <= 127


def isprint(c: Char) -> bool:
    """True for a printable ASCII character, space included."""
    return 32 <= _code(c) <= 126


def _same_kind(original: Char, code: int) -> Char:
    return chr(code) if isinstance(original, str) else code


def toupper(c: Char) -> Char:
    """Map an ASCII lower-case letter to upper case; anything else is returned unchanged."""
    code = _code(c)
    if ord("a") <= code <= ord("z"):
        return _same_kind(c, code - 32)
    return c


def tolower(c: Char) -> Char:
    """Map an ASCII upper-case letter to lower case; anything else is returned unchanged."""
    code = _code(c)
    if ord("A") <= code <= ord("Z"):
        return _same_kind(c, code + 32)
    return c


def _parse_integer(text: str) -> int:
    """Skip leading whitespace, read one optional sign, then as many digits as follow."""
    pos = 0
    length = len(text)
    while pos < length and text[pos] in _SPACES:
        pos += 1
    sign = 1
    if pos < length and text[pos] in "+-":
        if text[pos] == "-":
            sign = -1
        pos += 1
    start = pos
    while pos < length and text[pos] in _DIGITS:
        pos += 1
    digits = text[start:pos]
    return sign * int(digits) if digits else 0


def atoi(text: str) -> int:
    """Read a leading decimal integer from text; 0 when there is none."""
    return _parse_integer(text)


def atoll(text: str) -> int:
    """Read a leading decimal integer from text, as a wide integer; 0 when there is none."""
    return _parse_integer(text)


def itoa(n: int) -> str:
    """Return the decimal representation of n."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an int, not {type(n).__name__}")
    return str(n)