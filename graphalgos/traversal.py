"""Breadth- and depth-first traversals and the checks built on them."""

from __future__ import annotations

from collections import deque
from collections.abc import Hashable, Iterable, Iterator, Mapping, Sequence
from typing import Union

Node = Hashable
Adjacency = Union[Mapping[Node, Iterable[Node]], Sequence[Iterable[Node]]]


def _nodes(adj: Adjacency) -> list[Node]:
    """Return the nodes of ``adj`` in their natural order."""
    if isinstance(adj, Mapping):
        return list(adj)
    return list(range(len(adj)))


def _neighbours(adj: Adjacency, node: Node) -> Iterable[Node]:
    if isinstance(adj, Mapping):
        return adj.get(node, ())
    return adj[node]


def _bfs_order(adj: Adjacency, root: Node, seen: set[Node]) -> Iterator[Node]:
    seen.add(root)
    queue = deque([root])
    while queue:
        node = queue.popleft()
        yield node
        for neighbour in _neighbours(adj, node):
            if neighbour not in seen:
                seen.add(neighbour)
                queue.append(neighbour)


def _dfs_order(adj: Adjacency, root: Node, seen: set[Node]) -> Iterator[Node]:
    seen.add(root)
    yield root
    stack = [iter(_neighbours(adj, root))]
    while stack:
        for neighbour in stack[-1]:
            if neighbour not in seen:
                seen.add(neighbour)
                yield neighbour
                stack.append(iter(_neighbours(adj, neighbour)))
                break
        else:
            stack.pop()


def bfs(adj: Adjacency, root: Node) -> list[Node]:
    """Return the nodes reachable from ``root`` in breadth-first order."""
    return list(_bfs_order(adj, root, set()))


def dfs(adj: Adjacency, root: Node) -> list[Node]:
    """Return the nodes reachable from ``root`` in depth-first preorder."""
    return list(_dfs_order(adj, root, set()))


def count_components(adj: Adjacency) -> int:
    """Count the connected components of an undirected graph."""
    seen: set[Node] = set()
    count = 0
    for node in _nodes(adj):
        if node not in seen:
            for _ in _dfs_order(adj, node, seen):
                pass
            count += 1
    return count


def terminal_nodes(adj: Adjacency) -> list[Node]:
    """Return the nodes without outgoing edges, in breadth-first discovery order."""
    seen: set[Node] = set()
    found: list[Node] = []
    for start in _nodes(adj):
        if start in seen:
            continue
        found.extend(
            node for node in _bfs_order(adj, start, seen) if not _neighbours(adj, node)
        )
    return found


def is_bipartite(adj: Adjacency) -> bool:
    """Tell whether the nodes can be two-coloured with no edge inside a colour."""
    color: dict[Node, int] = {}
    for start in _nodes(adj):
        if start in color:
            continue
        color[start] = 0
        queue = deque([start])
        while queue:
            node = queue.popleft()
            for neighbour in _neighbours(adj, node):
                if neighbour not in color:
                    color[neighbour] = 1 - color[node]
                    queue.append(neighbour)
                elif color[neighbour] == color[node]:
                    return False
    return True


def has_cycle_bfs(adj: Adjacency) -> bool:
    """Tell whether an undirected graph has a cycle, searching breadth first."""
    seen: set[Node] = set()
    for start in _nodes(adj):
        if start in seen:
            continue
        seen.add(start)
        queue: deque[tuple[Node, Node | None]] = deque([(start, None)])
        while queue:
            node, parent = queue.popleft()
            for neighbour in _neighbours(adj, node):
                if neighbour not in seen:
                    seen.add(neighbour)
                    queue.append((neighbour, node))
                elif neighbour != parent:
                    return True
    return False


def has_cycle_dfs(adj: Adjacency) -> bool:
    """Tell whether an undirected graph has a cycle, searching depth first."""
    seen: set[Node] = set()
    for start in _nodes(adj):
        if start in seen:
            continue
        seen.add(start)
        stack: list[tuple[Node, Node | None, Iterator[Node]]] = [
            (start, None, iter(_neighbours(adj, start)))
        ]
        while stack:
            node, parent, neighbours = stack[-1]
            for neighbour in neighbours:
                if neighbour not in seen:
                    seen.add(neighbour)
                    stack.append((neighbour, node, iter(_neighbours(adj, neighbour))))
                    break
                if neighbour != parent:
                    return True
            else:
                stack.pop()
    return False