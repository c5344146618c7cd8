import pytest

from dsakit.graphs import Graph, adjacency_matrix, dfs_order

SAMPLE_EDGES = [(0, 1), (0, 2), (1, 2), (1, 4), (1, 3), (2, 4), (3, 4)]


def sample_graph():
    graph = Graph(6)
    for source, destination in SAMPLE_EDGES:
        graph.add_edge(source, destination)
    return graph


def test_adjacency_matrix_single_edge():
    assert adjacency_matrix(2, [(0, 1)]) == [[0, 1], [1, 0]]


def test_adjacency_matrix_is_symmetric_and_marks_edges():
    matrix = adjacency_matrix(6, SAMPLE_EDGES)
    for i in range(6):
        for j in range(6):
            assert matrix[i][j] == matrix[j][i]
    for source, destination in SAMPLE_EDGES:
        assert matrix[source][destination] == 1
    assert sum(map(sum, matrix)) == 2 * len(SAMPLE_EDGES)


def test_adjacency_matrix_rejects_out_of_range_vertex():
    with pytest.raises(IndexError):
        adjacency_matrix(3, [(0, 3)])
    with pytest.raises(IndexError):
        adjacency_matrix(3, [(-1, 0)])


def test_dfs_follows_lowest_neighbour_first():
    assert dfs_order(3, [(0, 2), (2, 1)]) == [0, 2, 1]


def test_dfs_without_edges_visits_vertices_in_order():
    assert dfs_order(5, []) == list(range(5))


def test_dfs_visits_every_vertex_once():
    order = dfs_order(8, SAMPLE_EDGES + [(6, 7)])
    assert sorted(order) == list(range(8))
    assert order[0] == 0


def test_dfs_ignores_self_loops():
    assert dfs_order(2, [(0, 0), (1, 1)]) == list(range(2))


def test_bfs_on_sample_graph():
    assert sample_graph().bfs(0) == [0, 2, 1, 4, 3]


def test_bfs_stays_within_component():
    graph = sample_graph()
    assert graph.bfs(5) == [5]
    assert 5 not in graph.bfs(3)


def test_bfs_can_be_repeated():
    graph = sample_graph()
    first = graph.bfs(0)
    second = graph.bfs(0)
    assert first == [0, 2, 1, 4, 3]
    assert second == [0, 2, 1, 4, 3]


def test_neighbors_are_most_recent_first():
    graph = Graph(4)
    graph.add_edge(0, 1)
    graph.add_edge(0, 3)
    graph.add_edge(0, 2)
    assert graph.neighbors(0) == [2, 3, 1]
    assert graph.neighbors(3) == [0]


def test_bfs_starts_with_start_and_has_no_repeats():
    order = sample_graph().bfs(3)
    assert order[0] == 3
    assert len(order) == len(set(order))


def test_graph_rejects_invalid_vertices():
    graph = Graph(3)
    with pytest.raises(IndexError):
        graph.add_edge(0, 3)
    with pytest.raises(IndexError):
        graph.bfs(-1)
    with pytest.raises(ValueError):
        Graph(-2)