from itertools import combinations

import pytest

from algokit.recursion import (
    count_down,
    count_subsequences_with_sum,
    count_up,
    fibonacci,
    first_subsequence_with_sum,
    is_palindrome,
    repeat_name,
    reverse_list,
    subsequences,
    subsequences_with_sum,
    sum_to,
)


def test_repeat_name():
    assert repeat_name("Rohit", 3) == ["Rohit", "Rohit", "Rohit"]
    assert repeat_name("Rohit", 0) == []


def test_count_up_and_down_are_mirrors():
    assert count_up(6) == list(range(1, 7))
    assert count_down(6) == list(reversed(count_up(6)))
    assert count_up(0) == []


def test_count_down_rejects_negative():
    with pytest.raises(ValueError):
        count_down(-1)


@pytest.mark.parametrize("n", [0, 1, 5, 30])
def test_sum_to_matches_builtin(n):
    assert sum_to(n) == sum(range(n + 1))


def test_sum_to_rejects_negative():
    with pytest.raises(ValueError):
        sum_to(-3)


def test_reverse_list():
    values = [1, 4, 0, 2, -2]
    assert reverse_list(values) == [-2, 2, 0, 4, 1]
    assert values == [1, 4, 0, 2, -2]
    assert reverse_list(reverse_list(values)) == values


@pytest.mark.parametrize(
    "text, expected", [("madam", True), ("naman", True), ("rohit", False), ("", True)]
)
def test_is_palindrome(text, expected):
    assert is_palindrome(text) is expected


def test_fibonacci_example():
    assert fibonacci(4) == 3


def test_fibonacci_recurrence():
    for n in range(2, 25):
        assert fibonacci(n) == fibonacci(n - 1) + fibonacci(n - 2)
    assert fibonacci(0) == 0
    assert fibonacci(1) == 1


def test_subsequences_order():
    assert list(subsequences([3, 1, 2])) == [
        [3, 1, 2],
        [3, 1],
        [3, 2],
        [3],
        [1, 2],
        [1],
        [2],
        [],
    ]


def test_subsequences_cover_all_combinations():
    values = [4, 8, 15, 16]
    produced = sorted(tuple(s) for s in subsequences(values))
    expected = sorted(
        combo for k in range(len(values) + 1) for combo in combinations(values, k)
    )
    assert produced == expected


def test_subsequences_with_sum():
    assert list(subsequences_with_sum([1, 2, 1], 2)) == [[1, 1], [2]]


def test_first_subsequence_with_sum():
    assert first_subsequence_with_sum([1, 2, 1], 2) == [1, 1]
    assert first_subsequence_with_sum([1, 2, 1], 100) is None


def test_count_subsequences_with_sum():
    assert count_subsequences_with_sum([1, 2, 1], 2) == 2
    assert count_subsequences_with_sum([5, 6], 100) == 0


def test_count_matches_generated():
    values = [1, 2, 3, 1, 2]
    assert count_subsequences_with_sum(values, 3) == len(
        list(subsequences_with_sum(values, 3))
    )
    assert all(sum(s) == 3 for s in subsequences_with_sum(values, 3))