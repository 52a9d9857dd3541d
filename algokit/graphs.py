"""Adjacency-matrix graphs read from an edge list."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Sequence


def adjacency_matrix(
    vertex_count: int, edges: Iterable[Sequence[int]], directed: bool = False
) -> list[list[int]]:
    """Build a matrix from ``(u, v)`` or ``(u, v, weight)`` edges.

    Unweighted edges are stored as 1. Undirected edges fill both cells.
    """
    if vertex_count < 0:
        raise ValueError("vertex count must not be negative")
    matrix = [[0] * vertex_count for _ in range(vertex_count)]
    for edge in edges:
        if len(edge) == 2:
            u, v = edge
            weight = 1
        elif len(edge) == 3:
            u, v, weight = edge
        else:
            raise ValueError(f"edge {tuple(edge)!r} must have two or three items")
        for vertex in (u, v):
            if not 0 <= vertex < vertex_count:
                raise ValueError(f"vertex {vertex} outside 0..{vertex_count - 1}")
        matrix[u][v] = weight
        if not directed:
            matrix[v][u] = weight
    return matrix


def format_matrix(matrix: Iterable[Iterable[int]]) -> str:
    """Render a matrix one row per line, each entry followed by a space."""
    return "".join("".join(f"{cell} " for cell in row) + "\n" for row in matrix)


def main(argv: list[str] | None = None) -> int:
    """Read ``V E`` and E edges from standard input and print the matrix."""
    parser = argparse.ArgumentParser(
        prog="algokit-graph",
        description="Print the adjacency matrix of a graph read from standard input.",
    )
    parser.add_argument("--directed", action="store_true", help="edges go one way")
    parser.add_argument("--weighted", action="store_true", help="edges carry a weight")
    args = parser.parse_args(argv)

    try:
        numbers = [int(token) for token in sys.stdin.read().split()]
        if len(numbers) < 2:
            raise ValueError("expected vertex and edge counts")
        vertex_count, edge_count, *rest = numbers
        if edge_count < 0:
            raise ValueError("edge count must not be negative")
        width = 3 if args.weighted else 2
        needed = edge_count * width
        if len(rest) < needed:
            raise ValueError(f"expected {edge_count} edges of {width} numbers")
        chunks = iter(rest[:needed])
        edges = list(zip(*[chunks] * width))
        matrix = adjacency_matrix(vertex_count, edges, directed=args.directed)
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    sys.stdout.write(format_matrix(matrix))
    return 0