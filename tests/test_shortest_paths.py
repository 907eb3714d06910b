import math

import pytest

from dsakit.graph import Graph
from dsakit.shortest_paths import (
    NegativeCycleError,
    bellman_ford,
    dag_shortest_distances,
    dijkstra,
    floyd_warshall,
)


def _graph(edges, directed):
    g = Graph()
    for u, v, w in edges:
        g.add_edge(u, v, w, directed)
    return g


DIJKSTRA_EDGES = [
    (1, 2, 7), (1, 3, 9), (1, 6, 14), (2, 4, 15), (2, 3, 10),
    (3, 4, 11), (3, 6, 2), (6, 5, 9), (5, 4, 6),
]
DAG_EDGES = [(0, 1, 5), (0, 2, 3), (2, 1, 2), (1, 3, 3), (2, 3, 5), (2, 4, 6), (4, 3, 1)]
BF_EDGES = [
    ("A", "B", -1), ("B", "E", 3), ("B", "C", 2), ("B", "D", 2),
    ("C", "D", -3), ("D", "B", 1), ("D", "E", 5), ("A", "E", 4),
]
FW_EDGES = [(0, 1, 3), (1, 0, 2), (0, 3, 5), (1, 3, 4), (3, 2, 2), (2, 1, 1)]


def test_dijkstra_worked_example():
    g = _graph(DIJKSTRA_EDGES, directed=False)
    assert dijkstra(g, 6, 1)[1:] == [0, 7, 9, 20, 20, 11]


def test_dijkstra_agrees_with_bellman_ford():
    g = _graph(DIJKSTRA_EDGES, directed=False)
    by_dijkstra = dijkstra(g, 6, 1)
    by_bf = bellman_ford(g, range(1, 7), 1)
    assert all(by_dijkstra[node] == by_bf[node] for node in range(1, 7))


def test_dijkstra_unreachable_is_inf():
    g = _graph([(1, 2, 4)], directed=False)
    dist = dijkstra(g, 3, 1)
    assert len(dist) == 4
    assert dist[3] == math.inf
    assert dist[0] == math.inf
    assert dist[2] == 4


def test_dag_shortest_distances_example():
    g = _graph(DAG_EDGES, directed=True)
    assert dag_shortest_distances(g, 0, 5) == [0, 5, 3, 8, 9]


def test_dag_matches_bellman_ford():
    g = _graph(DAG_EDGES, directed=True)
    dag = dag_shortest_distances(g, 2, 5)
    bf = bellman_ford(g, range(5), 2)
    assert dag == [bf[node] for node in range(5)]
    assert dag[0] == math.inf


def test_bellman_ford_example():
    g = _graph(BF_EDGES, directed=True)
    assert bellman_ford(g, "ABCDE", "A") == {"A": 0, "B": -1, "C": 1, "D": -2, "E": 2}


def test_bellman_ford_negative_cycle():
    g = _graph([(0, 1, 1), (1, 2, -2), (2, 0, -1)], directed=True)
    with pytest.raises(NegativeCycleError):
        bellman_ford(g, range(3), 0)


def test_bellman_ford_unknown_source():
    g = _graph([(0, 1, 1)], directed=True)
    with pytest.raises(ValueError):
        bellman_ford(g, range(2), 7)


def test_bellman_ford_unreachable_node():
    g = _graph([(0, 1, 2)], directed=True)
    dist = bellman_ford(g, range(3), 0)
    assert dist[2] == math.inf
    assert dist[1] == 2


def test_floyd_warshall_rows_match_bellman_ford():
    g = _graph(FW_EDGES, directed=True)
    matrix = floyd_warshall(g, 4)
    for src in range(4):
        bf = bellman_ford(g, range(4), src)
        assert matrix[src] == [bf[v] for v in range(4)]


def test_floyd_warshall_diagonal_and_unreachable():
    g = _graph([(0, 1, 3)], directed=True)
    matrix = floyd_warshall(g, 3)
    assert [matrix[i][i] for i in range(3)] == [0, 0, 0]
    assert matrix[0][1] == 3
    assert matrix[1][0] == math.inf
    assert matrix[2][0] == math.inf