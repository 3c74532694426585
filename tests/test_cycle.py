"""Tests for the Cycle value type."""
import pytest

from mcbtools.cycles.cycle import Cycle
from mcbtools.errors import InvalidCycleError
from mcbtools.graph.indexed import EdgeIndexedGraph


def _square_with_diagonal():
    # 0-1-2-3-0 plus chord 0-2
    return EdgeIndexedGraph(4, [(0, 1), (1, 2), (2, 3), (3, 0), (0, 2)])


def test_triangle_cycle():
    g = _square_with_diagonal()
    c = Cycle([0, 1, 2, 0], g)
    assert c.path() == (0, 1, 2, 0)
    assert c.length() == 3
    assert c.edges() == (0, 1, 4)
    assert c.edge_vector() == 0b10011
    assert bin(c.edge_vector()).count("1") == c.length()


def test_same_edges_compare_equal():
    g = _square_with_diagonal()
    a = Cycle([0, 1, 2, 0], g)
    b = Cycle([2, 1, 0, 2], g)
    assert a == b
    assert hash(a) == hash(b)
    assert a != Cycle([0, 2, 3, 0], g)


def test_not_adjacent():
    g = _square_with_diagonal()
    with pytest.raises(InvalidCycleError):
        Cycle([1, 3, 2, 1], g)


def test_not_closed():
    g = _square_with_diagonal()
    with pytest.raises(InvalidCycleError):
        Cycle([0, 1, 2], g)


def test_repeated_vertex():
    g = EdgeIndexedGraph(5, [(0, 1), (1, 2), (2, 0), (0, 3), (3, 4), (4, 0)])
    # figure eight through 0 is closed but not simple
    with pytest.raises(InvalidCycleError):
        Cycle([0, 1, 2, 0, 3, 4, 0], g)


def test_back_and_forth_on_single_edge():
    g = EdgeIndexedGraph(2, [(0, 1)])
    with pytest.raises(InvalidCycleError):
        Cycle([0, 1, 0], g)


def test_vertex_out_of_range():
    g = _square_with_diagonal()
    with pytest.raises(InvalidCycleError):
        Cycle([0, 9, 0], g)


def test_too_short():
    g = _square_with_diagonal()
    with pytest.raises(InvalidCycleError):
        Cycle([0], g)


def test_two_cycle_over_parallel_edges():
    g = EdgeIndexedGraph(2, [(0, 1), (0, 1)])
    c = Cycle([0, 1, 0], g)
    assert c.edges() == (0, 1)
    assert c.length() == 2


def test_self_loop_cycle():
    g = EdgeIndexedGraph(1, [(0, 0)])
    c = Cycle([0, 0], g)
    assert c.length() == 1
    assert c.edge_vector() == 1


def test_explicit_edges_checked():
    g = EdgeIndexedGraph(2, [(0, 1), (0, 1), (0, 1)])
    c = Cycle([0, 1, 0], g, edges=(0, 2))
    assert c.edge_vector() == 0b101
    with pytest.raises(InvalidCycleError):
        Cycle([0, 1, 0], g, edges=(1, 1))
    with pytest.raises(InvalidCycleError):
        Cycle([0, 1, 0], g, edges=(0,))
    with pytest.raises(InvalidCycleError):
        Cycle([0, 1, 0], g, edges=(0, 7))


def test_explicit_edge_must_join_step():
    g = _square_with_diagonal()
    with pytest.raises(InvalidCycleError):
        Cycle([0, 1, 2, 0], g, edges=(0, 1, 3))


def test_float_vertices_rejected():
    g = EdgeIndexedGraph(3, [(0, 1), (1, 2), (2, 0)])
    # 1.9 and 2.7 must not be truncated to 1 and 2
    with pytest.raises(InvalidCycleError):
        Cycle([0, 1.9, 2.7, 0], g)


def test_string_vertices_rejected():
    g = EdgeIndexedGraph(3, [(0, 1), (1, 2), (2, 0)])
    with pytest.raises(InvalidCycleError):
        Cycle(["a", 1, "a"], g)


def test_float_edge_index_rejected():
    g = EdgeIndexedGraph(2, [(0, 1), (0, 1)])
    with pytest.raises(InvalidCycleError):
        Cycle([0, 1, 0], g, edges=(0, 1.0))
