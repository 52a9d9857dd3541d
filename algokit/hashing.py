"""Frequency tables built once and queried many times."""

from __future__ import annotations

from collections import Counter
from collections.abc import Hashable, Iterable, Mapping, Sequence


def count_frequencies(values: Iterable[Hashable]) -> Counter:
    """Count occurrences of each value; missing values count as zero."""
    return Counter(values)


def bounded_frequencies(values: Iterable[int], size: int) -> list[int]:
    """Count values known to lie in ``range(size)`` into a list of that length."""
    if size < 0:
        raise ValueError("size must not be negative")
    table = [0] * size
    for value in values:
        if not 0 <= value < size:
            raise ValueError(f"value {value} outside range 0..{size - 1}")
        table[value] += 1
    return table


def answer_queries(
    table: Mapping[Hashable, int] | Sequence[int], queries: Iterable[Hashable]
) -> list[int]:
    """Look up each query in a precomputed frequency table."""
    if isinstance(table, Mapping):
        return [table.get(query, 0) for query in queries]
    answers = []
    for query in queries:
        if not isinstance(query, int) or not 0 <= query < len(table):
            raise IndexError(f"query {query!r} outside the table")
        answers.append(table[query])
    return answers