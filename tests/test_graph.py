import pytest

from drillbook.graph import Graph


@pytest.fixture
def sample_graph():
    graph = Graph(4)
    graph.add_edge(1, 2)
    graph.add_edge(1, 4)
    graph.add_edge(2, 1)
    graph.add_edge(4, 1)
    graph.add_edge(3, 2)
    graph.add_edge(2, 3)
    return graph


def test_render_sample_graph(sample_graph):
    assert sample_graph.render() == (
        "List value 1 is :- \n2 4 \n"
        "List value 2 is :- \n1 3 \n"
        "List value 3 is :- \n2 \n"
        "List value 4 is :- \n1 \n"
    )


def test_neighbours_keep_insertion_order(sample_graph):
    assert sample_graph.neighbours(1) == [2, 4]
    assert sample_graph.neighbours(2) == [1, 3]


def test_edges_are_directed():
    graph = Graph(3)
    graph.add_edge(1, 2)
    assert 2 in graph.neighbours(1)
    assert 1 not in graph.neighbours(2)


def test_neighbours_returns_a_copy(sample_graph):
    listing = sample_graph.neighbours(3)
    listing.append(4)
    assert 4 not in sample_graph.neighbours(3)


def test_render_lists_every_vertex():
    graph = Graph(3)
    assert graph.render().count("List value") == graph.vertices


@pytest.mark.parametrize("edge", [(0, 1), (1, 5), (5, 1), (-1, 2)])
def test_add_edge_rejects_unknown_vertex(edge):
    graph = Graph(4)
    with pytest.raises(ValueError):
        graph.add_edge(*edge)


def test_neighbours_rejects_unknown_vertex(sample_graph):
    with pytest.raises(ValueError):
        sample_graph.neighbours(9)


def test_negative_vertex_count_rejected():
    with pytest.raises(ValueError):
        Graph(-2)