from __future__ import annotations

import operator
from collections import Counter, defaultdict
from typing import Dict, List, Sequence, Tuple

from mcbtools.utils.connectivity import count_components


def _as_vertex(value: object) -> int:
    try:
        return operator.index(value)
    except TypeError:
        raise ValueError(f"vertex {value!r} is not an integer") from None


def edges_from_adj(adj: Sequence[Sequence[int]]) -> List[Tuple[int, int]]:
    """
    Return undirected edges as (u,v) with u <= v.

    A neighbour listed k times yields k parallel edges; a self-loop is
    listed once in adj[u].  Raises ValueError if adj is not symmetric.
    """
    n = len(adj)
    eds: List[Tuple[int, int]] = []
    counts = [Counter(neigh) for neigh in adj]
    for u, cnt in enumerate(counts):
        for v in sorted(cnt):
            if not 0 <= v < n:
                raise ValueError(f"vertex {u} lists neighbour {v} outside 0..{n - 1}")
            if v < u:
                continue
            k = cnt[v]
            if v != u and counts[v][u] != k:
                raise ValueError(
                    f"asymmetric adjacency: {u} lists {v} {k} times, "
                    f"{v} lists {u} {counts[v][u]} times"
                )
            eds.extend((u, v) for _ in range(k))
    return eds


class EdgeIndexedGraph:
    """
    Undirected (multi)graph on vertices 0..n-1 with a stable edge numbering.

    Edge i is edges[i]; the index is the coordinate used by every cycle
    edge-vector.  Parallel edges and self-loops get their own indices.
    """

    __slots__ = ("_n", "_edges", "_incident", "_between", "_components")

    def __init__(self, n: int, edges: Sequence[Tuple[int, int]] = ()) -> None:
        if n < 0:
            raise ValueError("n must be >= 0.")
        self._n = n
        self._edges: Tuple[Tuple[int, int], ...] = tuple((_as_vertex(u), _as_vertex(v)) for u, v in edges)
        self._incident: List[List[Tuple[int, int]]] = [[] for _ in range(n)]
        self._between: Dict[Tuple[int, int], List[int]] = defaultdict(list)
        for ei, (u, v) in enumerate(self._edges):
            if not (0 <= u < n and 0 <= v < n):
                raise ValueError(f"edge {ei} = ({u}, {v}) has an endpoint outside 0..{n - 1}")
            self._incident[u].append((v, ei))
            if u != v:
                self._incident[v].append((u, ei))
            self._between[(min(u, v), max(u, v))].append(ei)
        self._components: int | None = None

    @classmethod
    def from_adjacency(cls, adj: Sequence[Sequence[int]]) -> "EdgeIndexedGraph":
        """Build from an adjacency list; edges are numbered in (u, v) order."""
        return cls(len(adj), edges_from_adj(adj))

    @property
    def num_vertices(self) -> int:
        return self._n

    @property
    def num_edges(self) -> int:
        return len(self._edges)

    @property
    def edges(self) -> Tuple[Tuple[int, int], ...]:
        return self._edges

    def neighbors(self, u: int) -> List[int]:
        """Sorted distinct neighbours of u (u itself if it carries a loop)."""
        return sorted({v for v, _ in self._incident[u]})

    def incident(self, u: int) -> List[Tuple[int, int]]:
        """(neighbour, edge_index) pairs for every edge at u."""
        return list(self._incident[u])

    def edges_between(self, u: int, v: int) -> List[int]:
        """All edge indices joining u and v, ascending (empty if not adjacent)."""
        return list(self._between.get((min(u, v), max(u, v)), ()))

    def edge_index(self, u: int, v: int) -> int:
        eis = self._between.get((min(u, v), max(u, v)))
        if not eis:
            raise KeyError((u, v))
        return eis[0]

    def has_vertex(self, u: int) -> bool:
        return 0 <= u < self._n

    def num_components(self) -> int:
        if self._components is None:
            self._components = count_components(self._n, self._edges)
        return self._components

    def cyclomatic_number(self) -> int:
        """Dimension of the cycle space: m - n + c."""
        return self.num_edges - self._n + self.num_components()

    def __repr__(self) -> str:
        return f"EdgeIndexedGraph(n={self._n}, m={self.num_edges})"
