"""Everyday operations on lists of numbers: extremes, search, in-place rearrangements."""

from __future__ import annotations

from collections.abc import MutableSequence, Sequence


def largest(values: Sequence[int]) -> int:
    """Return the largest element; raise ValueError for an empty sequence."""
    if not values:
        raise ValueError("largest() of an empty sequence")
    best = values[0]
    for value in values:
        if value > best:
            best = value
    return best


def smallest(values: Sequence[int]) -> int:
    """Return the smallest element; raise ValueError for an empty sequence."""
    if not values:
        raise ValueError("smallest() of an empty sequence")
    best = values[0]
    for value in values:
        if value < best:
            best = value
    return best


def contains(values: Sequence[int], key: int) -> bool:
    """Linear search: True if ``key`` occurs in ``values``."""
    return any(value == key for value in values)


def push_zeros_to_end(values: MutableSequence[int]) -> None:
    """Move every zero to the end in place, keeping the order of the other elements."""
    write = 0
    for read, value in enumerate(values):
        if value != 0:
            values[read], values[write] = values[write], values[read]
            write += 1


def reverse_in_place(values: MutableSequence[int]) -> None:
    """Reverse ``values`` in place by swapping from both ends."""
    start, end = 0, len(values) - 1
    while start < end:
        values[start], values[end] = values[end], values[start]
        start += 1
        end -= 1


def second_largest(values: Sequence[int]) -> int:
    """Return the largest value strictly below the maximum, or -1 if there is none."""
    top: int | None = None
    runner_up: int | None = None
    for value in values:
        if top is None or value > top:
            runner_up, top = top, value
        elif value < top and (runner_up is None or value > runner_up):
            runner_up = value
    return -1 if runner_up is None else runner_up


def sort_binary(values: MutableSequence[int]) -> None:
    """Sort a list of zeros and ones in place with two pointers."""
    left, right = 0, len(values) - 1
    while left < right:
        while left < right and values[left] == 0:
            left += 1
        while left < right and values[right] == 1:
            right -= 1
        if left < right:
            values[left], values[right] = values[right], values[left]
            left += 1
            right -= 1


def swap_alternate(values: MutableSequence[int]) -> None:
    """Swap each pair of neighbours in place; an odd last element stays put."""
    for first in range(0, len(values) - 1, 2):
        values[first], values[first + 1] = values[first + 1], values[first]


def sorted_intersection(first: Sequence[int], second: Sequence[int]) -> list[int]:
    """Intersection of two non-decreasing sequences, duplicates matched pairwise."""
    result: list[int] = []
    i = j = 0
    while i < len(first) and j < len(second):
        a, b = first[i], second[j]
        if a == b:
            result.append(a)
            i += 1
            j += 1
        elif a < b:
            i += 1
        else:
            j += 1
    return result