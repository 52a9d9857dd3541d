"""Polynomials as lists of terms in decreasing order of power."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class Term:
    """One term ``coeff * x**power``."""

    coeff: int
    power: int


def add_polynomials(first: Sequence[Term], second: Sequence[Term]) -> list[Term]:
    """Merge two polynomials sorted by decreasing power, adding equal powers.

    Terms whose coefficients cancel are kept with a zero coefficient.
    """
    result: list[Term] = []
    i = j = 0
    while i < len(first) and j < len(second):
        a, b = first[i], second[j]
        if a.power < b.power:
            result.append(b)
            j += 1
        elif a.power > b.power:
            result.append(a)
            i += 1
        else:
            result.append(Term(a.coeff + b.coeff, a.power))
            i += 1
            j += 1
    result.extend(first[i:])
    result.extend(second[j:])
    return result


def format_polynomial(terms: Iterable[Term]) -> str:
    """Render terms as ``coeff,power`` pairs separated by spaces."""
    return " ".join(f"{term.coeff},{term.power}" for term in terms)