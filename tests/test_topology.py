import random

import pytest

from graphalgos.topology import (
    articulation_points,
    bridges,
    can_finish,
    can_finish_prerequisites,
    count_strongly_connected,
    eventual_safe_nodes,
    topological_order,
)


def _undirected(n, edges):
    adj = [[] for _ in range(n)]
    for u, v in edges:
        adj[u].append(v)
        adj[v].append(u)
    return adj


def _random_dag(n, seed):
    rng = random.Random(seed)
    adj = [[] for _ in range(n)]
    for u in range(n):
        for v in range(u + 1, n):
            if rng.random() < 0.3:
                adj[u].append(v)
    return adj


@pytest.mark.parametrize("seed", range(6))
def test_topological_order_respects_every_edge(seed):
    adj = _random_dag(9, seed)
    order = topological_order(adj)
    position = {node: index for index, node in enumerate(order)}
    assert sorted(order) == list(range(9))
    for u, out in enumerate(adj):
        for v in out:
            assert position[u] < position[v]
    assert can_finish(adj)


def test_topological_order_raises_on_cycle():
    adj = [[1], [2], [0], []]
    with pytest.raises(ValueError):
        topological_order(adj)
    assert not can_finish(adj)


def test_topological_order_accepts_mapping():
    adj = {"a": ["b"], "b": ["c"], "c": []}
    assert topological_order(adj) == list(adj)


def test_prerequisites():
    assert can_finish_prerequisites(2, [(1, 0)])
    assert not can_finish_prerequisites(2, [(1, 0), (0, 1)])


def test_eventual_safe_nodes_example():
    adj = [[1, 2], [2, 3], [5], [0], [5], [], []]
    assert eventual_safe_nodes(adj) == [2, 4, 5, 6]


@pytest.mark.parametrize("seed", range(4))
def test_safe_nodes_only_lead_to_safe_nodes(seed):
    rng = random.Random(seed)
    adj = [[rng.randrange(8) for _ in range(rng.randint(0, 2))] for _ in range(8)]
    safe = set(eventual_safe_nodes(adj))
    for node in safe:
        assert set(adj[node]) <= safe
    for node, out in enumerate(adj):
        if node in out:
            assert node not in safe


@pytest.mark.parametrize("seed", range(4))
def test_every_node_of_a_dag_is_safe(seed):
    adj = _random_dag(7, seed)
    assert eventual_safe_nodes(adj) == list(range(7))


def test_kosaraju_worked_example():
    adj = [[2, 3], [0], [1], [4], []]
    assert count_strongly_connected(adj) == 3


@pytest.mark.parametrize("seed", range(4))
def test_dag_components_are_single_nodes(seed):
    assert count_strongly_connected(_random_dag(8, seed)) == 8


def test_directed_cycle_is_one_component():
    n = 6
    adj = [[(i + 1) % n] for i in range(n)]
    assert count_strongly_connected(adj) == 1


def test_articulation_points_worked_example():
    pairs = [
        (0, 1), (0, 2), (0, 3), (1, 0), (2, 0), (2, 3), (2, 4), (2, 5),
        (3, 2), (3, 0), (4, 2), (4, 6), (5, 2), (5, 6), (6, 4), (6, 5),
    ]
    assert articulation_points(_undirected(7, pairs)) == [0, 2]


def test_articulation_points_of_a_path_are_interior():
    n = 6
    adj = _undirected(n, [(i, i + 1) for i in range(n - 1)])
    assert articulation_points(adj) == list(range(1, n - 1))


def test_cycle_has_no_articulation_points_or_bridges():
    n = 5
    adj = _undirected(n, [(i, (i + 1) % n) for i in range(n)])
    assert articulation_points(adj) == []
    assert bridges(adj) == []


def test_bridges_worked_example():
    adj = _undirected(4, [(0, 1), (1, 2), (2, 0), (1, 3)])
    assert bridges(adj) == [(1, 3)]


@pytest.mark.parametrize("seed", range(4))
def test_every_tree_edge_is_a_bridge(seed):
    rng = random.Random(seed)
    edges = [(rng.randrange(child), child) for child in range(1, 10)]
    found = bridges(_undirected(10, edges))
    assert {frozenset(edge) for edge in found} == {frozenset(edge) for edge in edges}