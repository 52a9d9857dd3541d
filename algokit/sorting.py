"""Comparison sorts on lists of numbers."""

from __future__ import annotations

from collections.abc import Iterable, MutableSequence


def bubble_sort(values: MutableSequence[int]) -> None:
    """Sort in place by pushing the maximum to the end with adjacent swaps.

    Stops early once a full pass makes no swap.
    """
    for last in range(len(values) - 1, 0, -1):
        swapped = False
        for j in range(last):
            if values[j] > values[j + 1]:
                values[j], values[j + 1] = values[j + 1], values[j]
                swapped = True
        if not swapped:
            break


def insertion_sort(values: MutableSequence[int]) -> None:
    """Sort in place by sinking each element back to its correct position."""
    for i in range(1, len(values)):
        j = i
        while j > 0 and values[j - 1] > values[j]:
            values[j - 1], values[j] = values[j], values[j - 1]
            j -= 1


def selection_sort(values: MutableSequence[int]) -> None:
    """Sort in place by swapping the minimum of the unsorted part to its front."""
    size = len(values)
    for i in range(size - 1):
        smallest = min(range(i, size), key=values.__getitem__)
        values[i], values[smallest] = values[smallest], values[i]


def _merge(values: MutableSequence[int], left: int, mid: int, right: int) -> None:
    lower = values[left : mid + 1]
    upper = values[mid + 1 : right + 1]
    i = j = 0
    k = left
    while i < len(lower) and j < len(upper):
        if lower[i] <= upper[j]:
            values[k] = lower[i]
            i += 1
        else:
            values[k] = upper[j]
            j += 1
        k += 1
    for rest in (lower[i:], upper[j:]):
        for value in rest:
            values[k] = value
            k += 1


def _merge_sort(values: MutableSequence[int], left: int, right: int) -> None:
    if left < right:
        mid = left + (right - left) // 2
        _merge_sort(values, left, mid)
        _merge_sort(values, mid + 1, right)
        _merge(values, left, mid, right)


def merge_sort(values: MutableSequence[int]) -> None:
    """Stable top-down merge sort, in place."""
    _merge_sort(values, 0, len(values) - 1)


def _partition(values: list[int], low: int, high: int) -> int:
    pivot = values[low]
    i, j = low, high
    while i < j:
        while values[i] <= pivot and i <= high - 1:
            i += 1
        while values[j] > pivot and j >= low + 1:
            j -= 1
        if i < j:
            values[i], values[j] = values[j], values[i]
    values[low], values[j] = values[j], values[low]
    return j


def quick_sort(values: Iterable[int]) -> list[int]:
    """Return a sorted copy, partitioning around the first element of each range."""
    result = list(values)
    pending = [(0, len(result) - 1)]
    while pending:
        low, high = pending.pop()
        if low < high:
            pivot_index = _partition(result, low, high)
            pending.append((low, pivot_index - 1))
            pending.append((pivot_index + 1, high))
    return result