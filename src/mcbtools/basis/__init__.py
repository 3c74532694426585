from .greedy import GreedyBasis
from .mcb import MinimumCycleBasis, minimum_cycle_basis

__all__ = [
    "GreedyBasis",
    "MinimumCycleBasis",
    "minimum_cycle_basis",
]
