"""The sorting strategy: short cases by hand, longer ones by windowed pushes."""

from __future__ import annotations

from typing import Sequence

from .stacks import Stacks


def search_min_index(values: Sequence[int]) -> int:
    """Position of the first smallest value."""
    if not values:
        raise ValueError("no values to search")
    return min(range(len(values)), key=values.__getitem__)


def find_max_index(values: Sequence[int]) -> int:
    """Position of the first largest value."""
    if not values:
        raise ValueError("no values to search")
    return max(range(len(values)), key=values.__getitem__)


def sort_three(stacks: Stacks) -> None:
    """Sort a stack a of two or three elements."""
    a = stacks.a
    if len(a) < 2:
        return
    if len(a) == 2:
        # With two elements the third position wraps around to the first.
        stacks.ra()
        return
    first, second, third = a[0], a[1], a[2]
    if first > second and second < third and first < third:
        stacks.sa()
    elif first > second > third:
        stacks.sa()
        stacks.rra()
    elif first > second and second < third and first > third:
        stacks.ra()
    elif first < second and second > third and first < third:
        stacks.sa()
        stacks.ra()
    elif first < second and second > third and first > third:
        stacks.rra()


def _push_min_to_b(stacks: Stacks) -> None:
    size = len(stacks.a)
    min_index = search_min_index(stacks.a)
    if min_index <= size // 2:
        for _ in range(min_index):
            stacks.ra()
    else:
        for _ in range(size - min_index):
            stacks.rra()
    stacks.pb()


def sort_five(stacks: Stacks) -> None:
    """Push the smallest of a to b until three remain, sort them, bring the others back."""
    while len(stacks.a) > 3:
        _push_min_to_b(stacks)
    sort_three(stacks)
    stacks.pa()
    stacks.pa()


def filling_b(stacks: Stacks, window_size: int) -> None:
    """Move all but five ranks to b, taking those within a sliding window first."""
    pushed = 0
    while len(stacks.a) > 5:
        top = stacks.a[0]
        if top > pushed + window_size:
            stacks.ra()
        elif top < pushed:
            stacks.pb()
            stacks.rb()
            pushed += 1
        else:
            stacks.pb()
            pushed += 1


def _bring_max_to_top(stacks: Stacks) -> None:
    size = len(stacks.b)
    max_index = find_max_index(stacks.b)
    if max_index <= size // 2:
        for _ in range(max_index):
            stacks.rb()
    else:
        for _ in range(size - max_index):
            stacks.rrb()


def filling_a(stacks: Stacks) -> None:
    """Return every element of b to a, largest first."""
    limit = 5
    for _ in range(len(stacks.b)):
        _bring_max_to_top(stacks)
        while limit > 0 and stacks.a[-1] > stacks.b[0]:
            stacks.rra()
            limit -= 1
        stacks.pa()


def solve(stacks: Stacks) -> None:
    """Sort stack a, reporting each command through the stacks' emitter."""
    size = len(stacks.a)
    if size <= 3:
        sort_three(stacks)
    elif size <= 5:
        sort_five(stacks)
    else:
        window_size = int(size * (0.1 if size <= 100 else 0.06))
        filling_b(stacks, window_size)
        sort_five(stacks)
        filling_a(stacks)