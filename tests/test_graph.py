import pytest

from dsakit.graph import Graph


def letters_graph():
    g = Graph()
    g.add_edge("a", "b", 5)
    g.add_edge("a", "c", 3)
    g.add_edge("c", "d", 20)
    g.add_edge("c", "e", 8)
    g.add_edge("d", "e", 8)
    g.add_edge("e", "f", 8)
    return g


def dag():
    g = Graph()
    for u, v in [(0, 1), (1, 2), (2, 3), (2, 4), (3, 5), (4, 5), (5, 6), (5, 7)]:
        g.add_edge(u, v, directed=True)
    return g


def path_graph():
    g = Graph()
    for u, v in [(0, 5), (5, 4), (4, 3), (0, 6), (6, 3), (0, 1), (1, 2), (2, 3)]:
        g.add_edge(u, v)
    return g


def test_undirected_edge_is_stored_both_ways():
    g = Graph()
    g.add_edge(1, 2, 7)
    assert g.neighbors(1) == [(2, 7)]
    assert g.neighbors(2) == [(1, 7)]


def test_directed_edge_is_stored_once():
    g = Graph()
    g.add_edge(1, 2, 4, directed=True)
    assert g.neighbors(1) == [(2, 4)]
    assert g.neighbors(2) == []


def test_neighbors_of_unknown_node_is_empty():
    assert Graph().neighbors("z") == []


def test_edges_lists_every_stored_edge():
    g = letters_graph()
    edges = list(g.edges())
    assert len(edges) == 12
    assert ("a", "b", 5) in edges and ("b", "a", 5) in edges


def test_format_adjacency_one_line_per_node():
    g = Graph()
    g.add_edge(1, 2, 7, directed=True)
    text = g.format_adjacency()
    lines = text.splitlines()
    assert len(lines) == 2
    assert lines[0].startswith("1->")
    assert "(2, 7)" in lines[0]


def test_bfs_visits_reachable_nodes_once():
    order = letters_graph().bfs("a")
    assert order[0] == "a"
    assert sorted(order) == ["a", "b", "c", "d", "e", "f"]
    assert order.index("b") < order.index("d")


def test_dfs_visits_reachable_nodes_once():
    order = letters_graph().dfs("a")
    assert order[0] == "a"
    assert sorted(order) == ["a", "b", "c", "d", "e", "f"]


def test_dfs_goes_deep_before_wide():
    g = Graph()
    g.add_edge(1, 2, directed=True)
    g.add_edge(1, 3, directed=True)
    g.add_edge(2, 4, directed=True)
    assert g.dfs(1) == [1, 2, 4, 3]


def test_bfs_all_covers_disconnected_components():
    g = Graph()
    g.add_edge("a", "b", 5)
    g.add_edge("b", "c", 10)
    g.add_edge("d", "e", 5)
    g.add_edge("f", "g", 50)
    parts = g.bfs_all("abcdefg")
    assert [set(p) for p in parts] == [{"a", "b", "c"}, {"d", "e"}, {"f", "g"}]


def undirected_cyclic():
    g = Graph()
    for u, v in [(1, 2), (1, 3), (3, 4), (3, 5), (4, 5), (5, 6)]:
        g.add_edge(u, v)
    return g


def undirected_tree():
    g = Graph()
    for u, v in [(0, 1), (1, 2), (1, 3), (2, 4), (2, 5)]:
        g.add_edge(u, v)
    return g


@pytest.mark.parametrize(
    "method", ["has_cycle_undirected_bfs", "has_cycle_undirected_dfs"]
)
def test_undirected_cycle_detection(method):
    assert getattr(undirected_cyclic(), method)(1) is True
    assert getattr(undirected_tree(), method)(0) is False


def test_directed_cycle_detected():
    g = Graph()
    for u, v in [(1, 2), (1, 3), (3, 4), (3, 5), (4, 5), (5, 6), (6, 7), (7, 8), (7, 5)]:
        g.add_edge(u, v, directed=True)
    assert g.has_cycle_directed(1) is True


def test_directed_diamond_is_not_a_cycle():
    assert dag().has_cycle_directed(0) is False


@pytest.mark.parametrize("method", ["topological_sort_dfs", "topological_sort_bfs"])
def test_topological_order_respects_edges(method):
    g = dag()
    order = getattr(g, method)(8)
    assert sorted(order) == list(range(8))
    position = {node: i for i, node in enumerate(order)}
    for u, v, _ in g.edges():
        assert position[u] < position[v]


def test_topological_bfs_leaves_out_cycle():
    g = Graph()
    g.add_edge(0, 1, directed=True)
    g.add_edge(1, 2, directed=True)
    g.add_edge(2, 1, directed=True)
    assert g.topological_sort_bfs(3) == [0]


def test_in_degrees():
    g = dag()
    degrees = g.in_degrees()
    assert degrees[0] == 0
    assert degrees[5] == 2
    assert sum(degrees.values()) == len(list(g.edges()))


def test_shortest_path_bfs():
    path = path_graph().shortest_path_bfs(0, 3)
    assert path == [0, 6, 3]


def test_shortest_path_is_a_real_path():
    g = path_graph()
    path = g.shortest_path_bfs(0, 2)
    assert path[0] == 0 and path[-1] == 2
    for u, v in zip(path, path[1:]):
        assert v in [n for n, _ in g.neighbors(u)]


def test_shortest_path_to_self():
    assert path_graph().shortest_path_bfs(4, 4) == [4]


def test_shortest_path_unreachable_raises():
    g = Graph()
    g.add_edge(0, 1, directed=True)
    g.add_edge(2, 3, directed=True)
    with pytest.raises(ValueError):
        g.shortest_path_bfs(0, 3)