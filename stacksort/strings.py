"""String and byte-buffer helpers: searching, comparing, slicing and splitting."""

from __future__ import annotations

from itertools import zip_longest
from typing import Callable, Optional, Tuple, Union

Char = Union[int, str]
Bytes = Union[bytes, bytearray, memoryview]


def _char(c: Char) -> str:
    """Return c as a one-character string."""
    if isinstance(c, bool):
        raise TypeError("expected an int or a one-character string, not bool")
    if isinstance(c, int):
        return chr(c)
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    raise TypeError(f"expected an int or a one-character string, not {type(c).__name__}")


def _byte(c: Char) -> int:
    """Return c as a byte value, truncated to eight bits."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c) & 0xFF
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected an int or a one-character string, not {type(c).__name__}")
    return c & 0xFF


def _check_count(n: int, *buffers: Bytes) -> None:
    if n < 0:
        raise ValueError("byte count must not be negative")
    if any(n > len(buf) for buf in buffers):
        raise ValueError("byte count exceeds the buffer length")


def split(s: str, sep: Char) -> list[str]:
    """Split s on the separator character, dropping empty words."""
    separator = _char(sep)
    return [word for word in s.split(separator) if word]


def strchr(s: str, c: Char) -> Optional[int]:
    """Index of the first occurrence of c in s.

    Searching for the NUL character finds the end of the string.
    """
    ch = _char(c)
    pos = s.find(ch)
    if pos >= 0:
        return pos
    if ch == "\0":
        return len(s)
    return None


def strrchr(s: str, c: Char) -> Optional[int]:
    """Index of the last occurrence of c in s.

    Searching for the NUL character finds the end of the string.
    """
    ch = _char(c)
    if ch == "\0":
        return len(s)
    pos = s.rfind(ch)
    return pos if pos >= 0 else None


def strlcat(dest: str, src: str, size: int) -> Tuple[str, int]:
    """Append src to dest within a total buffer of size characters, terminator included.

    Returns the resulting string and the length that was attempted to be built.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    dest_len = len(dest)
    src_len = len(src)
    if size <= dest_len:
        return dest, src_len + size
    room = size - 1 - dest_len
    return dest + src[:room], src_len + dest_len


def strlcpy(src: str, size: int) -> Tuple[str, int]:
    """Copy at most size - 1 characters of src.

    Returns the copy and the full length of src.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    copied = src[: size - 1] if size else ""
    return copied, len(src)


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most n characters; negative, zero or positive like the C routine."""
    if n < 0:
        raise ValueError("n must not be negative")
    for a, b in zip_longest(s1[:n], s2[:n], fillvalue="\0"):
        if a != b:
            return ord(a) - ord(b)
    return 0


def strnstr(big: str, little: str, length: int) -> Optional[int]:
    """Index of little in big, searching only the first length characters."""
    if length < 0:
        raise ValueError("length must not be negative")
    if not little:
        return 0
    if length == 0:
        return None
    width = len(little)
    last_start = min(len(big), length - width + 1)
    for start in range(max(last_start, 0)):
        if big.startswith(little, start):
            return start
    return None


def strtrim(s: str, charset: str) -> str:
    """Remove characters found in charset from both ends of s."""
    return s.strip(charset)


def substr(s: str, start: int, length: int) -> str:
    """Return at most length characters of s beginning at start."""
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start >= len(s):
        return ""
    return s[start : start + length]


def strjoin(s1: str, s2: str) -> str:
    """Concatenate two strings."""
    return s1 + s2


def strmapi(s: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from func(index, char) for each character of s."""
    return "".join(func(index, ch) for index, ch in enumerate(s))


def striteri(s: str, func: Callable[[int, str], Optional[str]]) -> str:
    """Visit each character with its index; a non-None result replaces the character."""
    out = []
    for index, ch in enumerate(s):
        replacement = func(index, ch)
        out.append(ch if replacement is None else replacement)
    return "".join(out)


def memchr(data: Bytes, c: Char, n: int) -> Optional[int]:
    """Index of the first byte equal to c among the first n bytes of data."""
    _check_count(n, data)
    target = _byte(c)
    pos = bytes(data[:n]).find(bytes([target]))
    return pos if pos >= 0 else None


def memcmp(a: Bytes, b: Bytes, n: int) -> int:
    """Compare the first n bytes; return the difference of the first differing pair, else 0."""
    _check_count(n, a, b)
    for x, y in zip(bytes(a[:n]), bytes(b[:n])):
        if x != y:
            return x - y
    return 0