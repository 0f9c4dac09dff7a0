"""Building and printing adjacency matrices and adjacency lists."""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from typing import Any

Edge = tuple[int, int]
WeightedEdge = tuple[int, int, int]


def _check_nodes(n: int, *nodes: int) -> None:
    for node in nodes:
        if not 1 <= node <= n:
            raise ValueError(f"node {node} is outside the range 1..{n}")


def matrix_to_adjacency_list(matrix: Sequence[Sequence[int]]) -> list[list[int]]:
    """Turn a 0/1 matrix into lists of neighbours, one list per row.

    Only the first ``len(matrix)`` columns of each row are looked at.
    """
    n = len(matrix)
    return [
        [column for column, value in enumerate(row[:n]) if value == 1]
        for row in matrix
    ]


def adjacency_matrix(
    n: int, edges: Iterable[Edge], directed: bool = False
) -> list[list[int]]:
    """Return the n x n 0/1 matrix of a graph whose nodes are 1..n.

    Entry ``[u - 1][v - 1]`` is 1 when there is an edge from u to v.
    """
    matrix = [[0] * n for _ in range(n)]
    for u, v in edges:
        _check_nodes(n, u, v)
        matrix[u - 1][v - 1] = 1
        if not directed:
            matrix[v - 1][u - 1] = 1
    return matrix


def adjacency_list(
    n: int, edges: Iterable[Edge], directed: bool = False
) -> dict[int, list[int]]:
    """Return a mapping from each node 1..n to its neighbours in edge order."""
    adj: dict[int, list[int]] = {node: [] for node in range(1, n + 1)}
    for u, v in edges:
        _check_nodes(n, u, v)
        adj[u].append(v)
        if not directed:
            adj[v].append(u)
    return adj


def weighted_adjacency_matrix(
    n: int, edges: Iterable[WeightedEdge], directed: bool = False
) -> list[list[int]]:
    """Return the n x n weight matrix of a graph whose nodes are 1..n.

    Missing edges are 0; a later edge between the same nodes overwrites
    an earlier one.
    """
    matrix = [[0] * n for _ in range(n)]
    for u, v, weight in edges:
        _check_nodes(n, u, v)
        matrix[u - 1][v - 1] = weight
        if not directed:
            matrix[v - 1][u - 1] = weight
    return matrix


def weighted_adjacency_list(
    n: int, edges: Iterable[WeightedEdge], directed: bool = False
) -> dict[int, list[tuple[int, int]]]:
    """Return a mapping from each node 1..n to ``(neighbour, weight)`` pairs."""
    adj: dict[int, list[tuple[int, int]]] = {node: [] for node in range(1, n + 1)}
    for u, v, weight in edges:
        _check_nodes(n, u, v)
        adj[u].append((v, weight))
        if not directed:
            adj[v].append((u, weight))
    return adj


def format_matrix(matrix: Iterable[Iterable[Any]]) -> str:
    """Render a matrix as space separated rows, one per line."""
    return "\n".join(" ".join(str(value) for value in row) for row in matrix)


def _format_entry(entry: Any) -> str:
    if isinstance(entry, tuple):
        return ",".join(str(part) for part in entry)
    return str(entry)


def format_adjacency_list(
    adj: Mapping[int, Iterable[Any]] | Iterable[Iterable[Any]],
) -> str:
    """Render an adjacency list one node per line.

    Weighted entries given as ``(neighbour, weight)`` are written as
    ``neighbour,weight``.
    """
    rows = adj.values() if isinstance(adj, Mapping) else adj
    return "\n".join(" ".join(_format_entry(entry) for entry in row) for row in rows)