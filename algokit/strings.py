"""String puzzles: reversal, rotation, pangrams, palindromes, word ordering."""

from __future__ import annotations

import string
from collections import Counter

__all__ = [
    "reverse_string",
    "is_palindrome",
    "defang_ip",
    "is_rotated_by_two",
    "is_pangram",
    "sort_letters",
    "longest_palindrome_length",
    "sort_sentence",
]


def reverse_string(text: str) -> str:
    """Return ``text`` reversed."""
    return text[::-1]


def is_palindrome(text: str) -> bool:
    """True if ``text`` reads the same forwards and backwards."""
    return text == text[::-1]


def defang_ip(address: str) -> str:
    """Replace every ``.`` in an IP address with ``[.]``."""
    return address.replace(".", "[.]")


def is_rotated_by_two(first: str, second: str) -> bool:
    """True if ``second`` is ``first`` rotated two places either way."""
    if len(first) != len(second):
        return False
    clockwise = first[-2:] + first[:-2]
    anticlockwise = first[2:] + first[:2]
    return second in (clockwise, anticlockwise)


def is_pangram(sentence: str) -> bool:
    """True if every lowercase English letter appears in ``sentence``."""
    return set(string.ascii_lowercase) <= set(sentence)


def sort_letters(text: str) -> str:
    """Counting sort of a string of lowercase English letters."""
    counts = Counter(text)
    stray = set(counts) - set(string.ascii_lowercase)
    if stray:
        raise ValueError(f"unexpected characters: {''.join(sorted(stray))!r}")
    return "".join(letter * counts[letter] for letter in string.ascii_lowercase)


def longest_palindrome_length(text: str) -> int:
    """Length of the longest palindrome that can be built from the characters."""
    counts = Counter(text).values()
    length = sum(count - count % 2 for count in counts)
    has_odd = any(count % 2 for count in counts)
    return length + int(has_odd)


def sort_sentence(text: str) -> str:
    """Rebuild a shuffled sentence whose words end in their 1-based position digit."""
    placed: dict[int, str] = {}
    for word in text.split():
        digit = word[-1]
        if not digit.isdigit() or digit == "0" or len(word) < 2:
            raise ValueError(f"word {word!r} does not end in a position 1-9")
        position = int(digit)
        if position in placed:
            raise ValueError(f"position {position} appears twice")
        placed[position] = word[:-1]
    if set(placed) != set(range(1, len(placed) + 1)):
        raise ValueError("positions must run from 1 without gaps")
    return " ".join(placed[position] for position in sorted(placed))