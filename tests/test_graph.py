from dicewars.game import AdjacencyGraph


def test_new_graph_is_empty_and_active():
    graph = AdjacencyGraph(4)

    assert len(graph) == 4
    assert all(graph.is_active(vertex) for vertex in range(4))
    assert all(graph.neighbors_of(vertex) == [] for vertex in range(4))
    assert graph.edge_count() == 0


def test_add_edge_is_symmetric_and_keeps_duplicates():
    graph = AdjacencyGraph(3)
    graph.add_edge(0, 1)
    graph.add_edge(1, 2)
    graph.add_edge(0, 1)

    assert graph.neighbors_of(0) == [1, 1]
    assert graph.neighbors_of(1) == [0, 2, 0]
    assert graph.neighbors_of(2) == [1]
    assert graph.edge_count() == 3


def test_remove_edge_drops_one_occurrence_per_direction():
    graph = AdjacencyGraph(3)
    graph.add_edge(0, 1)
    graph.add_edge(0, 1)
    graph.remove_edge(0, 1)

    assert graph.neighbors_of(0) == [1]
    assert graph.neighbors_of(1) == [0]


def test_remove_missing_edge_is_silent():
    graph = AdjacencyGraph(3)
    graph.add_edge(0, 1)
    graph.remove_edge(0, 2)

    assert graph.neighbors_of(0) == [1]
    assert graph.neighbors_of(2) == []


def test_inactive_vertex_blocks_edge_mutation():
    graph = AdjacencyGraph(3)
    graph.add_edge(0, 1)
    graph.deactivate_vertex(1)

    graph.add_edge(1, 2)
    graph.remove_edge(0, 1)

    assert graph.neighbors_of(2) == []
    assert graph.neighbors_of(0) == [1]
    assert graph.neighbors_of(1) == [0]


def test_deactivate_is_idempotent():
    graph = AdjacencyGraph(2)
    graph.deactivate_vertex(0)
    graph.deactivate_vertex(0)

    assert not graph.is_active(0)
    assert graph.is_active(1)


def test_neighbors_of_unknown_vertex_is_empty():
    assert AdjacencyGraph(2).neighbors_of(7) == []


def test_neighbors_of_returns_a_copy():
    graph = AdjacencyGraph(2)
    graph.add_edge(0, 1)
    graph.neighbors_of(0).append(99)

    assert graph.neighbors_of(0) == [1]


def _path(num_vertices):
    graph = AdjacencyGraph(num_vertices)
    for vertex in range(num_vertices - 1):
        graph.add_edge(vertex, vertex + 1)
    return graph


def test_cluster_size_is_zero_without_matches():
    assert _path(5).largest_cluster_size(lambda vertex: False) == 0


def test_cluster_size_covers_whole_component():
    assert _path(5).largest_cluster_size(lambda vertex: True) == 5


def test_cluster_size_picks_largest_cluster():
    owned = {0, 1, 3, 4, 5}

    assert _path(7).largest_cluster_size(owned.__contains__) == 3


def test_cluster_skips_inactive_vertices():
    graph = _path(5)
    graph.deactivate_vertex(2)

    assert graph.largest_cluster_size(lambda vertex: True) == 2


def test_cluster_counts_duplicate_edges_once():
    graph = AdjacencyGraph(3)
    graph.add_edge(0, 1)
    graph.add_edge(1, 0)
    graph.add_edge(1, 2)

    assert graph.largest_cluster_size(lambda vertex: True) == 3


def test_cluster_handles_long_paths():
    assert _path(20000).largest_cluster_size(lambda vertex: True) == 20000
