from .indexed import EdgeIndexedGraph, edges_from_adj
from .convert import from_networkx, minimum_cycle_basis_nx

__all__ = [
    "EdgeIndexedGraph",
    "edges_from_adj",
    "from_networkx",
    "minimum_cycle_basis_nx",
]
