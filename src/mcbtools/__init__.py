"""
mcbtools: minimum cycle bases (SSSR ring sets) of undirected graphs via
Horton candidate cycles and greedy GF(2) independence selection.
"""

from .errors import (
    McbError,
    InvalidCycleError,
    MissingInputError,
    MissingCandidatesError,
    GeneratorContractViolation,
)
from .graph.indexed import EdgeIndexedGraph
from .graph.convert import from_networkx, minimum_cycle_basis_nx
from .cycles.cycle import Cycle
from .cycles.source import CandidateSource, PrecomputedCycles
from .cycles.horton import HortonCycles
from .basis.greedy import GreedyBasis
from .basis.mcb import MinimumCycleBasis, minimum_cycle_basis

# Shared utilities
from .utils.connectivity import connected_components, count_components
from .utils.gf2 import EchelonForm, edge_vector, gf2_rank

__all__ = [
    # Errors
    "McbError",
    "InvalidCycleError",
    "MissingInputError",
    "MissingCandidatesError",
    "GeneratorContractViolation",
    # Graph
    "EdgeIndexedGraph",
    "from_networkx",
    "minimum_cycle_basis_nx",
    # Cycles
    "Cycle",
    "CandidateSource",
    "PrecomputedCycles",
    "HortonCycles",
    # Basis
    "GreedyBasis",
    "MinimumCycleBasis",
    "minimum_cycle_basis",
    # Utils
    "connected_components",
    "count_components",
    "EchelonForm",
    "edge_vector",
    "gf2_rank",
]
