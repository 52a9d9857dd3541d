"""Small recursive routines: counting, sums, palindromes, subsequences."""

from __future__ import annotations

from collections.abc import Iterator, Sequence


def repeat_name(name: str, n: int) -> list[str]:
    """Return ``name`` repeated ``n`` times."""
    return [name] * max(n, 0)


def count_up(n: int) -> list[int]:
    """Return the numbers 1..n in order."""
    return list(range(1, n + 1))


def count_down(n: int) -> list[int]:
    """Return the numbers n..1 in order; n must not be negative."""
    if n < 0:
        raise ValueError("n must not be negative")
    return list(range(n, 0, -1))


def sum_to(n: int) -> int:
    """Sum of the first ``n`` natural numbers; n must not be negative."""
    if n < 0:
        raise ValueError("n must not be negative")
    return n * (n + 1) // 2


def reverse_list(values: Sequence) -> list:
    """Return a reversed copy made by swapping mirrored positions."""
    result = list(values)
    size = len(result)
    for i in range(size // 2):
        result[i], result[size - i - 1] = result[size - i - 1], result[i]
    return result


def is_palindrome(text: str) -> bool:
    """True if ``text`` reads the same in both directions."""
    size = len(text)
    return all(text[i] == text[size - i - 1] for i in range(size // 2))


def fibonacci(n: int) -> int:
    """Return the n-th Fibonacci number; values below 2 are returned unchanged."""
    if n <= 1:
        return n
    previous, current = 0, 1
    for _ in range(n - 1):
        previous, current = current, previous + current
    return current


def _walk(values: Sequence[int], index: int, chosen: list[int], running: int):
    if index == len(values):
        yield list(chosen), running
        return
    chosen.append(values[index])
    yield from _walk(values, index + 1, chosen, running + values[index])
    chosen.pop()
    yield from _walk(values, index + 1, chosen, running)


def subsequences(values: Sequence[int]) -> Iterator[list[int]]:
    """Yield every subsequence, taking each element before leaving it out."""
    for chosen, _ in _walk(values, 0, [], 0):
        yield chosen


def subsequences_with_sum(values: Sequence[int], target: int) -> Iterator[list[int]]:
    """Yield the subsequences whose elements add up to ``target``."""
    for chosen, running in _walk(values, 0, [], 0):
        if running == target:
            yield chosen


def first_subsequence_with_sum(values: Sequence[int], target: int) -> list[int] | None:
    """Return the first subsequence summing to ``target``, or None."""
    return next(subsequences_with_sum(values, target), None)


def count_subsequences_with_sum(values: Sequence[int], target: int) -> int:
    """Count the subsequences summing to ``target``."""
    return sum(1 for _ in subsequences_with_sum(values, target))