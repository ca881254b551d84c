"""Turning command-line arguments into the ranks that fill stack a."""

from __future__ import annotations

from typing import Iterable, List, Sequence

from .chars import atoll, isdigit
from .strings import split

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1


class ParseError(ValueError):
    """Raised when the arguments do not form a list of distinct 32-bit integers."""


def collect_inputs(args: Sequence[str]) -> List[str]:
    """Return the number words given on the command line.

    A single argument is split on spaces; several arguments are taken whole.
    """
    words = list(args)
    if len(words) == 1:
        return split(words[0], " ")
    return words


def is_valid_input(text: str) -> bool:
    """True for an optional sign followed by one or more ASCII digits."""
    body = text[1:] if text[:1] in ("-", "+") else text
    return bool(body) and all(isdigit(ch) for ch in body)


def has_duplicates(values: Iterable[int]) -> bool:
    """True when some value occurs more than once."""
    seen = set()
    for value in values:
        if value in seen:
            return True
        seen.add(value)
    return False


def to_values(inputs: Iterable[str]) -> List[int]:
    """Convert number words to integers, checking form, range and uniqueness."""
    values = []
    for text in inputs:
        if not is_valid_input(text):
            raise ParseError(f"not an integer: {text!r}")
        value = atoll(text)
        if not INT_MIN <= value <= INT_MAX:
            raise ParseError(f"out of range: {text!r}")
        values.append(value)
    if has_duplicates(values):
        raise ParseError("duplicate values")
    return values


def is_sorted(values: Sequence[int]) -> bool:
    """True when values never decrease."""
    return all(a <= b for a, b in zip(values, values[1:]))


def rank_values(values: Sequence[int]) -> List[int]:
    """Replace each value by its position in the sorted order."""
    ranks = {value: rank for rank, value in enumerate(sorted(values))}
    return [ranks[value] for value in values]


def parse(args: Sequence[str]) -> List[int]:
    """Parse the arguments and return their ranks, in input order."""
    return rank_values(to_values(collect_inputs(args)))