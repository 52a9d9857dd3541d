import random

import pytest

from algokit.arrays import (
    contains,
    largest,
    push_zeros_to_end,
    reverse_in_place,
    second_largest,
    smallest,
    sort_binary,
    sorted_intersection,
    swap_alternate,
)


def test_largest_example():
    assert largest([2, 5, 1, 3, 0]) == 5


def test_smallest_example():
    assert smallest([2, 5, 1, 3, 0]) == 0


@pytest.mark.parametrize("seed", range(5))
def test_extremes_match_builtins(seed):
    rng = random.Random(seed)
    values = [rng.randint(-100, 100) for _ in range(20)]
    assert largest(values) == max(values)
    assert smallest(values) == min(values)


@pytest.mark.parametrize("func", [largest, smallest])
def test_extremes_reject_empty(func):
    with pytest.raises(ValueError):
        func([])


def test_contains():
    values = [5, 7, -2, 10, 22, -2, 0, 5, 22, 1]
    assert contains(values, 22) is True
    assert contains(values, -2) is True
    assert contains(values, 3) is False
    assert contains([], 0) is False


def test_push_zeros_to_end_keeps_order():
    values = [3, 0, 4, 0, 5]
    push_zeros_to_end(values)
    assert values == [3, 4, 5, 0, 0]


def test_push_zeros_all_zero():
    values = [0, 0, 0]
    push_zeros_to_end(values)
    assert values == [0, 0, 0]


def test_reverse_in_place_even_and_odd():
    even = [1, 4, 0, 2, -2, 15]
    odd = [6, 5, 4, 3, 2]
    reverse_in_place(even)
    reverse_in_place(odd)
    assert even == [15, -2, 2, 0, 4, 1]
    assert odd == [2, 3, 4, 5, 6]


def test_reverse_twice_is_identity():
    values = [9, 8, 7, 1]
    reverse_in_place(values)
    reverse_in_place(values)
    assert values == [9, 8, 7, 1]


def test_second_largest():
    assert second_largest([12, 35, 1, 10, 34, 1]) == 34


def test_second_largest_missing():
    assert second_largest([10, 10, 10]) == -1
    assert second_largest([7]) == -1
    assert second_largest([]) == -1


def test_sort_binary():
    values = [1, 1, 0, 0, 0, 0, 1, 0]
    sort_binary(values)
    assert values == sorted([1, 1, 0, 0, 0, 0, 1, 0])


@pytest.mark.parametrize("seed", range(5))
def test_sort_binary_random(seed):
    rng = random.Random(seed)
    values = [rng.randint(0, 1) for _ in range(15)]
    expected = sorted(values)
    sort_binary(values)
    assert values == expected


def test_swap_alternate_even():
    values = [1, 2, 3, 4, 5, 6]
    swap_alternate(values)
    assert values == [2, 1, 4, 3, 6, 5]


def test_swap_alternate_odd_keeps_last():
    values = [1, 2, 3, 4, 5]
    swap_alternate(values)
    assert values == [2, 1, 4, 3, 5]


def test_sorted_intersection_with_duplicates():
    assert sorted_intersection([1, 2, 2, 2, 3, 4], [2, 2, 3, 3]) == [2, 2, 3]


def test_sorted_intersection_empty():
    assert sorted_intersection([1, 3, 5], [2, 4, 6]) == []