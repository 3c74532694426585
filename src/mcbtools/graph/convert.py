from __future__ import annotations

from typing import Hashable, List, Tuple

import networkx as nx

from mcbtools.graph.indexed import EdgeIndexedGraph


def from_networkx(G: nx.Graph) -> Tuple[EdgeIndexedGraph, List[Hashable]]:
    """
    Relabel a NetworkX graph onto 0..n-1.

    Returns (graph, labels) where labels[i] is the node of G mapped to i.
    MultiGraph parallel edges and self-loops are kept; edges are numbered in
    G.edges() order.
    """
    if G.is_directed():
        raise ValueError("cycle bases are defined for undirected graphs only")
    labels = list(G.nodes())
    index = {node: i for i, node in enumerate(labels)}
    edges = [(index[u], index[v]) for u, v in G.edges()]
    return EdgeIndexedGraph(len(labels), edges), labels


def minimum_cycle_basis_nx(G: nx.Graph) -> List[List[Hashable]]:
    """Minimum cycle basis of a NetworkX graph as closed paths of node labels."""
    from mcbtools.basis.mcb import MinimumCycleBasis

    graph, labels = from_networkx(G)
    mcb = MinimumCycleBasis.from_graph(graph)
    return [[labels[v] for v in path] for path in mcb.paths()]
