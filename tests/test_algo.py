import random
from itertools import permutations

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from stacksort.algo import (
    filling_a,
    filling_b,
    find_max_index,
    search_min_index,
    solve,
    sort_five,
    sort_three,
)
from stacksort.stacks import Stacks


def make(values, b=()):
    log = []
    return Stacks(values, b, emit=log.append), log


def replay(values, commands):
    stacks = Stacks(values, emit=lambda _name: None)
    for name in commands:
        getattr(stacks, name)()
    return stacks


def test_search_min_index_first_of_ties():
    assert search_min_index([4, 2, 7, 2]) == 1


def test_find_max_index_first_of_ties():
    assert find_max_index([1, 9, 3, 9]) == 1


def test_min_and_max_index_point_at_extremes():
    values = [5, -8, 13, 0]
    assert values[search_min_index(values)] == -8
    assert values[find_max_index(values)] == 13


@pytest.mark.parametrize("func", [search_min_index, find_max_index])
def test_index_search_on_empty_raises(func):
    with pytest.raises(ValueError):
        func([])


@pytest.mark.parametrize("values", list(permutations(range(3))))
def test_sort_three_sorts_every_order(values):
    stacks, _ = make(values)
    sort_three(stacks)
    assert list(stacks.a) == [0, 1, 2]
    assert list(stacks.b) == []


@pytest.mark.parametrize(
    "values, commands",
    [
        ([2, 1, 0], ["sa", "rra"]),
        ([0, 2, 1], ["sa", "ra"]),
        ([1, 2, 0], ["rra"]),
        ([2, 0, 1], ["ra"]),
        ([1, 0, 2], ["sa"]),
        ([0, 1, 2], []),
    ],
)
def test_sort_three_commands(values, commands):
    stacks, log = make(values)
    sort_three(stacks)
    assert log == commands


def test_sort_three_with_two_elements_rotates():
    stacks, log = make([1, 0])
    sort_three(stacks)
    assert list(stacks.a) == [0, 1]
    assert log == ["ra"]


@pytest.mark.parametrize("values", list(permutations(range(4))) + list(permutations(range(5))))
def test_sort_five_sorts_every_order(values):
    stacks, _ = make(values)
    sort_five(stacks)
    assert list(stacks.a) == sorted(values)
    assert list(stacks.b) == []


def test_filling_b_leaves_five_in_a():
    values = list(range(12))
    random.Random(7).shuffle(values)
    stacks, _ = make(values)
    filling_b(stacks, 1)
    assert len(stacks.a) == 5
    assert sorted(list(stacks.a) + list(stacks.b)) == list(range(12))


def test_filling_b_with_zero_window_pushes_in_rank_order():
    values = [6, 2, 0, 5, 1, 4, 3, 7]
    stacks, _ = make(values)
    filling_b(stacks, 0)
    assert list(stacks.b) == [2, 1, 0]
    assert sorted(stacks.a) == [3, 4, 5, 6, 7]


def test_filling_a_spends_its_reverse_rotations_then_pushes():
    stacks, log = make([5, 6, 7, 8, 9], [4, 3, 2, 1, 0])
    filling_a(stacks)
    assert list(stacks.a) == list(range(10))
    assert list(stacks.b) == []
    assert log[:5] == ["rra"] * 5
    assert log[5:] == ["pa"] * 5


@pytest.mark.parametrize(
    "values",
    [p for n in range(2, 6) for p in permutations(range(n)) if list(p) != sorted(p)],
)
def test_solve_small_inputs(values):
    stacks, log = make(values)
    solve(stacks)
    assert list(stacks.a) == sorted(values)
    assert list(replay(values, log).a) == sorted(values)


@settings(max_examples=60, deadline=None)
@given(st.integers(6, 9).flatmap(lambda n: st.permutations(list(range(n)))))
def test_solve_sorts_up_to_nine(values):
    stacks, _ = make(values)
    solve(stacks)
    assert list(stacks.a) == sorted(values)
    assert list(stacks.b) == []


@pytest.mark.parametrize("size, seed", [(20, 1), (60, 2), (120, 3)])
def test_solve_large_keeps_elements_and_empties_b(size, seed):
    values = list(range(size))
    random.Random(seed).shuffle(values)
    stacks, log = make(values)
    solve(stacks)
    assert list(stacks.b) == []
    assert sorted(stacks.a) == list(range(size))
    replayed = replay(values, log)
    assert list(replayed.a) == list(stacks.a)