"""Orderings and structure of directed and undirected graphs."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator

from graphalgos.traversal import Adjacency, Node, _neighbours, _nodes


def _kahn(adj: Adjacency) -> tuple[list[Node], int]:
    nodes = _nodes(adj)
    indegree: dict[Node, int] = {node: 0 for node in nodes}
    for node in nodes:
        for neighbour in _neighbours(adj, node):
            indegree[neighbour] = indegree.get(neighbour, 0) + 1
    queue = deque(node for node, degree in indegree.items() if degree == 0)
    order: list[Node] = []
    while queue:
        node = queue.popleft()
        order.append(node)
        for neighbour in _neighbours(adj, node):
            indegree[neighbour] -= 1
            if indegree[neighbour] == 0:
                queue.append(neighbour)
    return order, len(indegree)


def topological_order(adj: Adjacency) -> list[Node]:
    """Return the nodes of a directed graph in topological order.

    Raises ValueError if the graph has a cycle.
    """
    order, total = _kahn(adj)
    if len(order) != total:
        raise ValueError("graph has a cycle")
    return order


def can_finish(adj: Adjacency) -> bool:
    """Tell whether a directed graph has no cycle."""
    order, total = _kahn(adj)
    return len(order) == total


def can_finish_prerequisites(n: int, prerequisites: Iterable[tuple[int, int]]) -> bool:
    """Tell whether courses 0..n-1 can all be taken.

    Each pair ``(course, required)`` says ``required`` comes before ``course``.
    """
    adj: list[list[int]] = [[] for _ in range(n)]
    for course, required in prerequisites:
        adj[required].append(course)
    return can_finish(adj)


def _reverse(adj: Adjacency) -> dict[Node, list[Node]]:
    reverse: dict[Node, list[Node]] = {node: [] for node in _nodes(adj)}
    for node in _nodes(adj):
        for neighbour in _neighbours(adj, node):
            reverse.setdefault(neighbour, []).append(node)
    return reverse


def eventual_safe_nodes(adj: Adjacency) -> list[Node]:
    """Return, sorted, the nodes from which every path ends at a sink."""
    reverse = _reverse(adj)
    outdegree = {node: 0 for node in reverse}
    for node in _nodes(adj):
        outdegree[node] = sum(1 for _ in _neighbours(adj, node))
    queue = deque(node for node, degree in outdegree.items() if degree == 0)
    safe: list[Node] = []
    while queue:
        node = queue.popleft()
        safe.append(node)
        for predecessor in reverse[node]:
            outdegree[predecessor] -= 1
            if outdegree[predecessor] == 0:
                queue.append(predecessor)
    return sorted(safe)


def _finish_order(adj: Adjacency) -> list[Node]:
    seen: set[Node] = set()
    finished: list[Node] = []
    for start in _nodes(adj):
        if start in seen:
            continue
        seen.add(start)
        stack: list[tuple[Node, Iterator[Node]]] = [(start, iter(_neighbours(adj, start)))]
        while stack:
            node, neighbours = stack[-1]
            for neighbour in neighbours:
                if neighbour not in seen:
                    seen.add(neighbour)
                    stack.append((neighbour, iter(_neighbours(adj, neighbour))))
                    break
            else:
                stack.pop()
                finished.append(node)
    return finished


def count_strongly_connected(adj: Adjacency) -> int:
    """Count the strongly connected components of a directed graph."""
    transposed = _reverse(adj)
    seen: set[Node] = set()
    count = 0
    for start in reversed(_finish_order(adj)):
        if start in seen:
            continue
        count += 1
        seen.add(start)
        pending = [start]
        while pending:
            node = pending.pop()
            for neighbour in transposed.get(node, ()):
                if neighbour not in seen:
                    seen.add(neighbour)
                    pending.append(neighbour)
    return count


def articulation_points(adj: Adjacency) -> list[Node]:
    """Return, sorted, the nodes whose removal disconnects an undirected graph."""
    discovery: dict[Node, int] = {}
    low: dict[Node, int] = {}
    points: set[Node] = set()
    clock = 0
    for start in _nodes(adj):
        if start in discovery:
            continue
        discovery[start] = low[start] = clock
        clock += 1
        root_children = 0
        stack: list[tuple[Node, Node | None, Iterator[Node]]] = [
            (start, None, iter(_neighbours(adj, start)))
        ]
        while stack:
            node, parent, neighbours = stack[-1]
            for neighbour in neighbours:
                if neighbour not in discovery:
                    discovery[neighbour] = low[neighbour] = clock
                    clock += 1
                    stack.append((neighbour, node, iter(_neighbours(adj, neighbour))))
                    break
                low[node] = min(low[node], discovery[neighbour])
            else:
                stack.pop()
                if parent is None:
                    continue
                low[parent] = min(low[parent], low[node])
                if parent == start:
                    root_children += 1
                elif low[node] >= discovery[parent]:
                    points.add(parent)
        if root_children > 1:
            points.add(start)
    return sorted(points)


def bridges(adj: Adjacency) -> list[tuple[Node, Node]]:
    """Return the edges whose removal disconnects an undirected graph.

    Each bridge is ``(parent, child)`` in depth-first tree order, listed
    in the order the search finishes the child.
    """
    discovery: dict[Node, int] = {}
    low: dict[Node, int] = {}
    found: list[tuple[Node, Node]] = []
    clock = 0
    for start in _nodes(adj):
        if start in discovery:
            continue
        discovery[start] = low[start] = clock
        clock += 1
        stack: list[tuple[Node, Node | None, Iterator[Node]]] = [
            (start, None, iter(_neighbours(adj, start)))
        ]
        while stack:
            node, parent, neighbours = stack[-1]
            for neighbour in neighbours:
                if neighbour == parent:
                    continue
                if neighbour not in discovery:
                    discovery[neighbour] = low[neighbour] = clock
                    clock += 1
                    stack.append((neighbour, node, iter(_neighbours(adj, neighbour))))
                    break
                low[node] = min(low[node], discovery[neighbour])
            else:
                stack.pop()
                if parent is None:
                    continue
                low[parent] = min(low[parent], low[node])
                if low[node] > discovery[parent]:
                    found.append((parent, node))
    return found