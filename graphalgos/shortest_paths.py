"""Shortest paths, shortest distances and minimum spanning trees on weighted graphs.

A weighted graph is given as an adjacency structure whose entries are
``(neighbour, weight)`` pairs: either a sequence indexed by node or a
mapping from node to its pairs.
"""

from __future__ import annotations

import heapq
from collections import deque
from collections.abc import Iterable, Iterator, Mapping, Sequence
from itertools import count
from typing import Union

from graphalgos.traversal import Node, _neighbours, _nodes

WeightedAdjacency = Union[
    Mapping[Node, Iterable[tuple[Node, int]]],
    Sequence[Iterable[tuple[Node, int]]],
]
Cell = tuple[int, int]

MULTIPLICATION_MODULUS = 100_000


class NegativeCycleError(ValueError):
    """A cycle of negative total weight is reachable from the source."""


def _all_nodes(adj: WeightedAdjacency) -> list[Node]:
    nodes = _nodes(adj)
    known = set(nodes)
    for node in list(nodes):
        for neighbour, _ in _neighbours(adj, node):
            if neighbour not in known:
                known.add(neighbour)
                nodes.append(neighbour)
    return nodes


def _in_node_order(adj: WeightedAdjacency, distances: dict[Node, int]) -> dict[Node, int]:
    return {node: distances[node] for node in _all_nodes(adj) if node in distances}


def _edges(adj: WeightedAdjacency) -> list[tuple[Node, Node, int]]:
    return [
        (node, neighbour, weight)
        for node in _nodes(adj)
        for neighbour, weight in _neighbours(adj, node)
    ]


def bellman_ford(adj: WeightedAdjacency, source: Node) -> dict[Node, int]:
    """Return the distances from ``source`` to every reachable node.

    Negative weights are allowed. Raises NegativeCycleError when a
    negative cycle can be reached from the source.
    """
    edges = _edges(adj)
    distances: dict[Node, int] = {source: 0}
    for _ in range(len(_all_nodes(adj))):
        changed = False
        for u, v, weight in edges:
            if u in distances and (v not in distances or distances[u] + weight < distances[v]):
                distances[v] = distances[u] + weight
                changed = True
        if not changed:
            break
    for u, v, weight in edges:
        if u in distances and distances[u] + weight < distances[v]:
            raise NegativeCycleError("graph has a negative cycle reachable from the source")
    return _in_node_order(adj, distances)


def _dijkstra(
    adj: WeightedAdjacency, source: Node
) -> tuple[dict[Node, int], dict[Node, Node]]:
    distances: dict[Node, int] = {source: 0}
    parents: dict[Node, Node] = {}
    tie = count()
    heap: list[tuple[int, int, Node]] = [(0, next(tie), source)]
    while heap:
        dist, _, node = heapq.heappop(heap)
        if dist > distances[node]:
            continue
        for neighbour, weight in _neighbours(adj, node):
            candidate = dist + weight
            if neighbour not in distances or candidate < distances[neighbour]:
                distances[neighbour] = candidate
                parents[neighbour] = node
                heapq.heappush(heap, (candidate, next(tie), neighbour))
    return distances, parents


def dijkstra(adj: WeightedAdjacency, source: Node) -> dict[Node, int]:
    """Return the distances from ``source`` to every reachable node.

    Weights must not be negative.
    """
    distances, _ = _dijkstra(adj, source)
    return _in_node_order(adj, distances)


def shortest_path(
    adj: WeightedAdjacency, source: Node, target: Node
) -> list[Node] | None:
    """Return a cheapest path from ``source`` to ``target``, or None if there is none."""
    distances, parents = _dijkstra(adj, source)
    if target not in distances:
        return None
    path = [target]
    while path[-1] != source:
        path.append(parents[path[-1]])
    path.reverse()
    return path


def _topological_from(adj: WeightedAdjacency, source: Node) -> list[Node]:
    finished: list[Node] = []
    seen = {source}
    on_path = {source}
    stack: list[tuple[Node, Iterator[tuple[Node, int]]]] = [
        (source, iter(_neighbours(adj, source)))
    ]
    while stack:
        node, neighbours = stack[-1]
        for neighbour, _ in neighbours:
            if neighbour in on_path:
                raise ValueError("graph has a cycle")
            if neighbour not in seen:
                seen.add(neighbour)
                on_path.add(neighbour)
                stack.append((neighbour, iter(_neighbours(adj, neighbour))))
                break
        else:
            stack.pop()
            on_path.discard(node)
            finished.append(node)
    finished.reverse()
    return finished


def dag_shortest_distances(adj: WeightedAdjacency, source: Node) -> dict[Node, int]:
    """Return the distances from ``source`` in a directed acyclic graph.

    Negative weights are allowed. Raises ValueError if a cycle is
    reachable from the source.
    """
    distances: dict[Node, int] = {source: 0}
    for node in _topological_from(adj, source):
        for neighbour, weight in _neighbours(adj, node):
            candidate = distances[node] + weight
            if neighbour not in distances or candidate < distances[neighbour]:
                distances[neighbour] = candidate
    return _in_node_order(adj, distances)


def relaxation_distances(adj: WeightedAdjacency, source: Node) -> dict[Node, int]:
    """Return the distances from ``source`` by repeated queue-driven relaxation.

    A node is queued again whenever its distance improves. Raises
    NegativeCycleError when relaxation would never settle.
    """
    limit = len(_all_nodes(adj))
    distances: dict[Node, int] = {source: 0}
    pushes: dict[Node, int] = {source: 1}
    queue = deque([source])
    while queue:
        node = queue.popleft()
        for neighbour, weight in _neighbours(adj, node):
            candidate = distances[node] + weight
            if neighbour not in distances or candidate < distances[neighbour]:
                distances[neighbour] = candidate
                pushes[neighbour] = pushes.get(neighbour, 0) + 1
                if pushes[neighbour] > limit:
                    raise NegativeCycleError(
                        "graph has a negative cycle reachable from the source"
                    )
                queue.append(neighbour)
    return _in_node_order(adj, distances)


def binary_maze(
    grid: Sequence[Sequence[int]], source: Cell, destination: Cell
) -> int | None:
    """Return the fewest steps from ``source`` to ``destination`` through cells equal to 1.

    Steps go up, down, left and right. Returns None if the destination
    cannot be reached.
    """
    if source == destination:
        return 0
    rows = len(grid)
    steps = {source: 0}
    queue = deque([source])
    while queue:
        row, col = queue.popleft()
        for d_row, d_col in ((1, 0), (0, 1), (-1, 0), (0, -1)):
            cell = (row + d_row, col + d_col)
            r, c = cell
            if not (0 <= r < rows and 0 <= c < len(grid[r])):
                continue
            if grid[r][c] != 1 or cell in steps:
                continue
            steps[cell] = steps[(row, col)] + 1
            if cell == destination:
                return steps[cell]
            queue.append(cell)
    return None


def min_multiplications(factors: Iterable[int], start: int, end: int) -> int | None:
    """Return the fewest multiplications, modulo 100000, that turn ``start`` into ``end``.

    Each step multiplies the current value by one of ``factors``.
    Returns None if ``end`` cannot be reached.
    """
    factors = list(factors)
    if start == end:
        return 0
    seen = {start}
    queue = deque([(start, 0)])
    while queue:
        value, steps = queue.popleft()
        for factor in factors:
            product = (factor * value) % MULTIPLICATION_MODULUS
            if product == end:
                return steps + 1
            if product not in seen:
                seen.add(product)
                queue.append((product, steps + 1))
    return None


def prim_mst_weight(adj: WeightedAdjacency) -> int:
    """Return the weight of a minimum spanning tree of the first node's component."""
    nodes = _nodes(adj)
    if not nodes:
        return 0
    tie = count()
    heap: list[tuple[int, int, Node]] = [(0, next(tie), nodes[0])]
    in_tree: set[Node] = set()
    total = 0
    while heap:
        weight, _, node = heapq.heappop(heap)
        if node in in_tree:
            continue
        in_tree.add(node)
        total += weight
        for neighbour, edge_weight in _neighbours(adj, node):
            if neighbour not in in_tree:
                heapq.heappush(heap, (edge_weight, next(tie), neighbour))
    return total