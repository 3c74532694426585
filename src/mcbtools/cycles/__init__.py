from .cycle import Cycle
from .source import CandidateSource, PrecomputedCycles
from .horton import HortonCycles, horton_paths

__all__ = [
    "Cycle",
    "CandidateSource",
    "PrecomputedCycles",
    "HortonCycles",
    "horton_paths",
]
