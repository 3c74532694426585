from __future__ import annotations

import operator
from typing import Optional, Sequence, Tuple

from mcbtools.errors import InvalidCycleError
from mcbtools.graph.indexed import EdgeIndexedGraph
from mcbtools.utils.gf2 import edge_vector


def _as_index(value: object, what: str) -> int:
    try:
        return operator.index(value)
    except TypeError:
        raise InvalidCycleError(f"{what} {value!r} is not an integer") from None


def _resolve_edges(path: Tuple[int, ...], graph: EdgeIndexedGraph) -> Tuple[int, ...]:
    used: set[int] = set()
    out = []
    for a, b in zip(path[:-1], path[1:]):
        free = [ei for ei in graph.edges_between(a, b) if ei not in used]
        if not free:
            if graph.edges_between(a, b):
                raise InvalidCycleError(f"no unused edge left between {a} and {b} in {list(path)}")
            raise InvalidCycleError(f"{a} and {b} are not adjacent in {list(path)}")
        used.add(free[0])
        out.append(free[0])
    return tuple(out)


def _check_edges(
    path: Tuple[int, ...],
    edges: Sequence[int],
    graph: EdgeIndexedGraph,
) -> Tuple[int, ...]:
    edges = tuple(_as_index(ei, "edge index") for ei in edges)
    if len(edges) != len(path) - 1:
        raise InvalidCycleError(f"{len(edges)} edges given for a path of {len(path) - 1} steps")
    if len(set(edges)) != len(edges):
        raise InvalidCycleError(f"edge indices repeat in {list(edges)}")
    for (a, b), ei in zip(zip(path[:-1], path[1:]), edges):
        if not 0 <= ei < graph.num_edges:
            raise InvalidCycleError(f"edge index {ei} out of range")
        u, v = graph.edges[ei]
        if {u, v} != {a, b}:
            raise InvalidCycleError(f"edge {ei} = ({u}, {v}) does not join {a} and {b}")
    return edges


class Cycle:
    """
    A simple cycle of an EdgeIndexedGraph.

    The path is closed (first vertex repeated at the end) and visits no
    internal vertex twice.  The edge-vector has one bit per graph edge on the
    cycle, so its popcount equals length().  Instances are immutable; two
    cycles are equal when they use the same edges.
    """

    __slots__ = ("_path", "_edges", "_vector", "_graph")

    def __init__(
        self,
        path: Sequence[int],
        graph: EdgeIndexedGraph,
        edges: Optional[Sequence[int]] = None,
    ) -> None:
        path = tuple(_as_index(v, "vertex") for v in path)
        if len(path) < 2:
            raise InvalidCycleError(f"path {list(path)} is too short to form a cycle")
        if path[0] != path[-1]:
            raise InvalidCycleError(f"path {list(path)} does not close")
        for v in path:
            if not graph.has_vertex(v):
                raise InvalidCycleError(f"vertex {v} is not in the graph")
        if len(set(path[:-1])) != len(path) - 1:
            raise InvalidCycleError(f"path {list(path)} repeats a vertex")

        if edges is None:
            eis = _resolve_edges(path, graph)
        else:
            eis = _check_edges(path, edges, graph)

        self._path = path
        self._edges = eis
        self._vector = edge_vector(eis)
        self._graph = graph

    def path(self) -> Tuple[int, ...]:
        return self._path

    def edges(self) -> Tuple[int, ...]:
        """Edge indices in path order."""
        return self._edges

    def edge_vector(self) -> int:
        return self._vector

    def length(self) -> int:
        return len(self._edges)

    @property
    def graph(self) -> EdgeIndexedGraph:
        return self._graph

    def __len__(self) -> int:
        return len(self._edges)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Cycle):
            return NotImplemented
        return self._graph is other._graph and self._vector == other._vector

    def __hash__(self) -> int:
        return hash(self._vector)

    def __repr__(self) -> str:
        return f"Cycle({list(self._path)})"
