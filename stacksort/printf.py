"""Minimal printf-style formatting and simple writers for text streams."""

from __future__ import annotations

import sys
from typing import Any, Callable, Iterator, Optional, TextIO

_INT_BITS = 32
_POINTER_BITS = 64
_LOWER_HEX = "0123456789abcdef"
_UPPER_HEX = "0123456789ABCDEF"


def _wrap_signed(n: int, bits: int = _INT_BITS) -> int:
    """Reduce n to a two's-complement signed integer of the given width."""
    half = 1 << (bits - 1)
    return ((n + half) % (1 << bits)) - half


def _wrap_unsigned(n: int, bits: int = _INT_BITS) -> int:
    """Reduce n to an unsigned integer of the given width."""
    return n % (1 << bits)


def _require_int(value: Any, conversion: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"%{conversion} expects an int, not {type(value).__name__}")
    return value


def _in_base(n: int, digits: str) -> str:
    """Render a non-negative integer with the given digit alphabet."""
    base = len(digits)
    out = []
    while True:
        n, rem = divmod(n, base)
        out.append(digits[rem])
        if n == 0:
            break
    return "".join(reversed(out))


def _char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"%c expects a single character, got {value!r}")
        return value
    return chr(_require_int(value, "c") & 0xFF)


def _string(value: Any) -> str:
    if value is None:
        return "(null)"
    if not isinstance(value, str):
        raise TypeError(f"%s expects a str or None, not {type(value).__name__}")
    return value


def _pointer(value: Any) -> str:
    if value is None:
        return "(nil)"
    address = _wrap_unsigned(_require_int(value, "p"), _POINTER_BITS)
    if address == 0:
        return "(nil)"
    return "0x" + _in_base(address, _LOWER_HEX)


def _signed(value: Any) -> str:
    return str(_wrap_signed(_require_int(value, "d")))


def _unsigned(value: Any) -> str:
    return str(_wrap_unsigned(_require_int(value, "u")))


def _lower_hex(value: Any) -> str:
    return _in_base(_wrap_unsigned(_require_int(value, "x")), _LOWER_HEX)


def _upper_hex(value: Any) -> str:
    return _in_base(_wrap_unsigned(_require_int(value, "X")), _UPPER_HEX)


_CONVERSIONS: dict[str, Callable[[Any], str]] = {
    "c": _char,
    "s": _string,
    "p": _pointer,
    "d": _signed,
    "i": _signed,
    "u": _unsigned,
    "x": _lower_hex,
    "X": _upper_hex,
}


def _render(fmt: str, args: tuple) -> Iterator[str]:
    if fmt is None:
        raise TypeError("format string must not be None")
    remaining = iter(args)

    def next_arg(conversion: str) -> Any:
        try:
            return next(remaining)
        except StopIteration:
            raise TypeError(f"not enough arguments for %{conversion}") from None

    chars = iter(fmt)
    for ch in chars:
        if ch != "%":
            yield ch
            continue
        conversion = next(chars, None)
        if conversion is None:
            return
        if conversion == "%":
            yield "%"
        elif conversion in _CONVERSIONS:
            yield _CONVERSIONS[conversion](next_arg(conversion))
        # Any other conversion character is consumed and produces nothing.


def format_printf(fmt: str, *args: Any) -> str:
    """Expand %c %s %p %d %i %u %x %X and %% in fmt and return the result."""
    return "".join(_render(fmt, args))


def _target(file: Optional[TextIO]) -> TextIO:
    return sys.stdout if file is None else file


def printf(fmt: str, *args: Any, file: Optional[TextIO] = None) -> int:
    """Write the formatted text to file (standard output by default); return its length."""
    text = format_printf(fmt, *args)
    _target(file).write(text)
    return len(text)


def put_char(c: str, file: Optional[TextIO] = None) -> None:
    """Write a single character."""
    _target(file).write(_char(c))


def put_str(s: str, file: Optional[TextIO] = None) -> None:
    """Write a string as is."""
    if not isinstance(s, str):
        raise TypeError(f"expected a str, not {type(s).__name__}")
    _target(file).write(s)


def put_endl(s: str, file: Optional[TextIO] = None) -> None:
    """Write a string followed by a newline."""
    put_str(s, file)
    _target(file).write("\n")


def put_nbr(n: int, file: Optional[TextIO] = None) -> None:
    """Write an integer in decimal, as a 32-bit signed value."""
    _target(file).write(_signed(n))