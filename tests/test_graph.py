"""Tests for mcbtools.graph module."""
import networkx as nx
import pytest

from mcbtools.graph.convert import from_networkx, minimum_cycle_basis_nx
from mcbtools.graph.indexed import EdgeIndexedGraph, edges_from_adj


def test_edges_from_adj_triangle():
    adj = [[1, 2], [0, 2], [0, 1]]
    assert edges_from_adj(adj) == [(0, 1), (0, 2), (1, 2)]


def test_edges_from_adj_parallel_and_loop():
    # two parallel 0-1 edges, one loop at 1
    adj = [[1, 1], [0, 0, 1]]
    assert edges_from_adj(adj) == [(0, 1), (0, 1), (1, 1)]


def test_edges_from_adj_asymmetric():
    with pytest.raises(ValueError):
        edges_from_adj([[1], []])


def test_edges_from_adj_out_of_range():
    with pytest.raises(ValueError):
        edges_from_adj([[3]])


def test_graph_rejects_bad_edge():
    with pytest.raises(ValueError):
        EdgeIndexedGraph(2, [(0, 2)])


def test_edge_indexing_is_symmetric():
    g = EdgeIndexedGraph(3, [(0, 1), (1, 2), (2, 0)])
    for ei, (u, v) in enumerate(g.edges):
        assert g.edge_index(u, v) == ei
        assert g.edge_index(v, u) == ei
    with pytest.raises(KeyError):
        EdgeIndexedGraph(3, [(0, 1)]).edge_index(0, 2)


def test_incident_lists_same_index_from_both_ends():
    g = EdgeIndexedGraph(4, [(0, 1), (1, 2), (2, 3), (3, 0), (0, 2)])
    for u in range(4):
        for v, ei in g.incident(u):
            assert (u, ei) in g.incident(v)
            assert ei in g.edges_between(u, v)


def test_multi_edges_get_distinct_indices():
    g = EdgeIndexedGraph(2, [(0, 1), (1, 0), (0, 1)])
    assert g.edges_between(1, 0) == [0, 1, 2]
    assert g.edge_index(0, 1) == 0
    assert g.neighbors(0) == [1]


def test_cyclomatic_number():
    assert EdgeIndexedGraph(1).cyclomatic_number() == 0
    assert EdgeIndexedGraph(0).cyclomatic_number() == 0
    two_triangles = [(0, 1), (1, 2), (2, 0), (3, 4), (4, 5), (5, 3)]
    g = EdgeIndexedGraph(6, two_triangles)
    assert g.num_components() == 2
    assert g.cyclomatic_number() == 2
    assert EdgeIndexedGraph(2, [(0, 1)] * 3).cyclomatic_number() == 2


def test_from_networkx_relabels():
    G = nx.Graph()
    G.add_edges_from([("a", "b"), ("b", "c"), ("c", "a")])
    g, labels = from_networkx(G)
    assert labels == ["a", "b", "c"]
    assert g.num_vertices == 3
    assert g.num_edges == 3


def test_from_networkx_multigraph():
    G = nx.MultiGraph()
    G.add_edges_from([(0, 1), (0, 1), (1, 1)])
    g, _ = from_networkx(G)
    assert g.num_edges == 3
    assert g.cyclomatic_number() == 2


def test_from_networkx_directed():
    with pytest.raises(ValueError):
        from_networkx(nx.DiGraph([(0, 1)]))


def test_minimum_cycle_basis_nx_labels():
    G = nx.cycle_graph(["x", "y", "z", "w"])
    (path,) = minimum_cycle_basis_nx(G)
    assert path[0] == path[-1]
    assert sorted(path[:-1]) == ["w", "x", "y", "z"]


def test_graph_rejects_non_integer_vertices():
    with pytest.raises(ValueError):
        EdgeIndexedGraph(3, [(0, 1.5)])
    with pytest.raises(ValueError):
        EdgeIndexedGraph(3, [("0", 1)])
