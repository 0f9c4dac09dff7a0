"""Disjoint-set union and the problems solved with it."""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Iterable, Sequence


class DisjointSet:
    """Union-find over the nodes 0..n-1 with path compression."""

    def __init__(self, n: int) -> None:
        self.parent = list(range(n))
        self.rank = [0] * n
        self.size = [1] * n

    def _check(self, node: int) -> None:
        if not 0 <= node < len(self.parent):
            raise ValueError(f"node {node} is outside the range 0..{len(self.parent) - 1}")

    def find(self, node: int) -> int:
        """Return the representative of the set holding ``node``."""
        self._check(node)
        root = node
        while self.parent[root] != root:
            root = self.parent[root]
        while self.parent[node] != root:
            self.parent[node], node = root, self.parent[node]
        return root

    def union_by_rank(self, u: int, v: int) -> None:
        """Join the sets of u and v, hanging the lower-ranked tree below."""
        root_u, root_v = self.find(u), self.find(v)
        if root_u == root_v:
            return
        if self.rank[root_u] < self.rank[root_v]:
            root_u, root_v = root_v, root_u
        elif self.rank[root_u] == self.rank[root_v]:
            self.rank[root_u] += 1
        self.parent[root_v] = root_u
        self.size[root_u] += self.size[root_v]

    def union_by_size(self, u: int, v: int) -> None:
        """Join the sets of u and v, hanging the smaller tree below."""
        root_u, root_v = self.find(u), self.find(v)
        if root_u == root_v:
            return
        if self.size[root_u] < self.size[root_v]:
            root_u, root_v = root_v, root_u
        self.parent[root_v] = root_u
        self.size[root_u] += self.size[root_v]

    def connected(self, u: int, v: int) -> bool:
        """Tell whether u and v are in the same set."""
        return self.find(u) == self.find(v)

    def component_size(self, node: int) -> int:
        """Return the number of nodes in the set holding ``node``."""
        return self.size[self.find(node)]


def merge_accounts(accounts: Sequence[Sequence[str]]) -> list[list[str]]:
    """Merge accounts that share an address.

    Each account is ``[name, address, ...]``. Every merged account keeps
    the name of its representative account and its addresses sorted; the
    merged accounts are returned in sorted order.
    """
    dsu = DisjointSet(len(accounts))
    owner: dict[str, int] = {}
    for index, (_, *addresses) in enumerate(accounts):
        for address in addresses:
            if address in owner:
                dsu.union_by_size(index, owner[address])
            else:
                owner[address] = index

    grouped: defaultdict[int, list[str]] = defaultdict(list)
    for address, index in owner.items():
        grouped[dsu.find(index)].append(address)

    merged = [
        [accounts[root][0], *sorted(addresses)]
        for root, addresses in grouped.items()
    ]
    return sorted(merged)


def count_provinces(matrix: Sequence[Sequence[int]]) -> int:
    """Count the connected groups in a square 0/1 connection matrix."""
    n = len(matrix)
    dsu = DisjointSet(n)
    for i, row in enumerate(matrix):
        for j, value in enumerate(row[:n]):
            if value == 1 and i != j:
                dsu.union_by_rank(i, j)
    return sum(1 for node in range(n) if dsu.find(node) == node)


def operations_to_connect(n: int, connections: Iterable[Sequence[int]]) -> int | None:
    """Return how many cables must be moved to connect all n computers.

    Returns None when there are too few cables for it to be possible.
    """
    connections = list(connections)
    if len(connections) < n - 1:
        return None
    dsu = DisjointSet(n)
    for u, v in connections:
        dsu.union_by_rank(u, v)
    return len({dsu.find(node) for node in range(n)}) - 1


def kruskal_mst_weight(n: int, edges: Iterable[tuple[int, int, int]]) -> int:
    """Return the weight of a minimum spanning forest.

    Edges are ``(u, v, weight)`` with nodes numbered 0..n.
    """
    dsu = DisjointSet(n + 1)
    total = 0
    for u, v, weight in sorted(edges, key=lambda edge: (edge[2], edge[0], edge[1])):
        if not dsu.connected(u, v):
            dsu.union_by_rank(u, v)
            total += weight
    return total