"""
Horton candidate cycles.

For every root r and every edge (x, y) not in a BFS tree from r, the closed
walk P(r, x) + (x, y) + P(y, r) is a candidate whenever the two tree paths
share only r.  Horton (1987) showed the set of such cycles contains a
minimum cycle basis.  Self-loops and pairs of parallel edges are added as
cycles of length 1 and 2.
"""
from __future__ import annotations

import logging
from collections import deque
from multiprocessing import Pool
from typing import Dict, Iterator, List, Optional, Sequence, Tuple

from mcbtools.cycles.cycle import Cycle
from mcbtools.graph.indexed import EdgeIndexedGraph

logger = logging.getLogger(__name__)

Path = Tuple[int, ...]

_ADJ: List[List[int]] = []
_PAIRS: List[Tuple[int, int]] = []


def _worker_init(adj: List[List[int]], pairs: List[Tuple[int, int]]) -> None:
    global _ADJ, _PAIRS
    _ADJ = adj
    _PAIRS = pairs


def _worker(root: int) -> List[Path]:
    return horton_paths(root, _ADJ, _PAIRS)


def _bfs_tree(root: int, adj: Sequence[Sequence[int]]) -> Dict[int, int]:
    """Parent map of a BFS tree from root (root maps to itself)."""
    parent = {root: root}
    queue = deque([root])
    while queue:
        u = queue.popleft()
        for v in adj[u]:
            if v not in parent:
                parent[v] = u
                queue.append(v)
    return parent


def _tree_path(parent: Dict[int, int], v: int) -> List[int]:
    """Tree path from v up to the root, v first."""
    out = [v]
    while parent[v] != v:
        v = parent[v]
        out.append(v)
    return out


def horton_paths(
    root: int,
    adj: Sequence[Sequence[int]],
    pairs: Sequence[Tuple[int, int]],
) -> List[Path]:
    """
    Closed Horton paths rooted at one vertex of a simple graph.

    Parameters
    ----------
    root : int
        Common endpoint of the two shortest paths.
    adj : sequence of sequence of int
        Simple adjacency (no loops, no repeated neighbours).
    pairs : sequence of (int, int)
        The distinct edges of adj, each once.

    Returns
    -------
    list of tuple
        Paths of the form (root, ..., x, y, ..., root).
    """
    parent = _bfs_tree(root, adj)
    out: List[Path] = []
    for x, y in pairs:
        if x not in parent or y not in parent:
            continue
        if parent[x] == y or parent[y] == x:
            continue
        px = _tree_path(parent, x)
        py = _tree_path(parent, y)
        if len(set(px).intersection(py)) != 1:
            continue
        out.append(tuple(reversed(px)) + tuple(py))
    return out


class HortonCycles:
    """
    Candidate cycles of a graph in non-decreasing length.

    The candidate list is built on first use and cached, so cycles() can be
    iterated repeatedly.  With processes > 1 the per-root searches run in a
    process pool; results are merged in root order so the output does not
    depend on the pool.
    """

    def __init__(self, graph: EdgeIndexedGraph, processes: int = 1) -> None:
        if processes < 1:
            raise ValueError("processes must be >= 1.")
        self.graph = graph
        self.processes = processes
        self._cycles: Optional[List[Cycle]] = None

    def cycles(self) -> Iterator[Cycle]:
        if self._cycles is None:
            self._cycles = self._generate()
        return iter(self._cycles)

    def __len__(self) -> int:
        if self._cycles is None:
            self._cycles = self._generate()
        return len(self._cycles)

    def _simple_part(self) -> Tuple[List[List[int]], List[Tuple[int, int]]]:
        g = self.graph
        adj = [[v for v in g.neighbors(u) if v != u] for u in range(g.num_vertices)]
        pairs = sorted({(min(u, v), max(u, v)) for u, v in g.edges if u != v})
        return adj, pairs

    def _short_cycles(self) -> List[Cycle]:
        """Self-loops and 2-cycles over parallel edges."""
        g = self.graph
        out: List[Cycle] = []
        for ei, (u, v) in enumerate(g.edges):
            if u == v:
                out.append(Cycle((u, u), g, edges=(ei,)))
        seen: set[Tuple[int, int]] = set()
        for u, v in g.edges:
            key = (min(u, v), max(u, v))
            if u == v or key in seen:
                continue
            seen.add(key)
            eis = g.edges_between(u, v)
            for ej in eis[1:]:
                out.append(Cycle((key[0], key[1], key[0]), g, edges=(eis[0], ej)))
        return out

    def _generate(self) -> List[Cycle]:
        g = self.graph
        adj, pairs = self._simple_part()
        roots = range(g.num_vertices)
        if self.processes > 1 and g.num_vertices > 1:
            with Pool(processes=self.processes, initializer=_worker_init, initargs=(adj, pairs)) as pool:
                per_root = pool.map(_worker, roots)
        else:
            per_root = [horton_paths(r, adj, pairs) for r in roots]

        found: Dict[int, Cycle] = {}
        for c in self._short_cycles():
            found.setdefault(c.edge_vector(), c)
        n_raw = 0
        for paths in per_root:
            for p in paths:
                n_raw += 1
                c = Cycle(p, g)
                found.setdefault(c.edge_vector(), c)

        cycles = sorted(found.values(), key=Cycle.length)
        logger.debug(
            "generated %d distinct candidate cycles (%d raw) for %r",
            len(cycles), n_raw, g,
        )
        return cycles
