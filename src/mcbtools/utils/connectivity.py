from __future__ import annotations

from collections import defaultdict
from typing import Iterable, List, Set, Tuple


def connected_components(
    n: int,
    edges: Iterable[Tuple[int, int]],
) -> List[Set[int]]:
    """Return the vertex sets of the connected components of a graph on 0..n-1.

    Isolated vertices form their own (singleton) component, so an edgeless
    graph on n vertices has n components.
    """
    adj: dict[int, set[int]] = defaultdict(set)
    for u, v in edges:
        adj[u].add(v)
        adj[v].add(u)

    seen = [False] * n
    components: List[Set[int]] = []
    for start in range(n):
        if seen[start]:
            continue
        comp: Set[int] = set()
        stack = [start]
        while stack:
            node = stack.pop()
            if seen[node]:
                continue
            seen[node] = True
            comp.add(node)
            for nbr in adj[node]:
                if not seen[nbr]:
                    stack.append(nbr)
        components.append(comp)
    return components


def count_components(n: int, edges: Iterable[Tuple[int, int]]) -> int:
    """Number of connected components (isolated vertices included)."""
    return len(connected_components(n, edges))
