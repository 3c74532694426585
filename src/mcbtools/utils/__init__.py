from .connectivity import connected_components, count_components
from .gf2 import EchelonForm, edge_vector, gf2_rank, leading_bit, popcount

__all__ = [
    "connected_components",
    "count_components",
    "EchelonForm",
    "edge_vector",
    "gf2_rank",
    "leading_bit",
    "popcount",
]
