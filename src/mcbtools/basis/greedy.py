from __future__ import annotations

from typing import List, Tuple

from mcbtools.cycles.cycle import Cycle
from mcbtools.utils.gf2 import EchelonForm


class GreedyBasis:
    """
    A growing set of cycles that is linearly independent over GF(2).

    Cycles are offered in non-decreasing length; each one that is not in the
    span of the members so far is kept.  The span is held as an EchelonForm
    over the edge space, so an independence test costs one pass over the
    members' reduced rows.

    Parameters
    ----------
    capacity : int
        Dimension of the cycle space (m - n + c); the basis never grows past it.
    num_edges : int
        Number of coordinates of the edge space.
    """

    def __init__(self, capacity: int, num_edges: int) -> None:
        if capacity < 0:
            raise ValueError("capacity must be >= 0.")
        self.capacity = capacity
        self.num_edges = num_edges
        self._members: List[Cycle] = []
        self._echelon = EchelonForm()

    def is_independent(self, cycle: Cycle) -> bool:
        """True if the cycle's edge-vector lies outside the current span."""
        return self._echelon.reduce(cycle.edge_vector()) != 0

    def add(self, cycle: Cycle) -> None:
        """Accept an independent cycle. Adding a dependent one is a caller bug."""
        if self.is_complete():
            raise AssertionError(f"basis already holds {self.capacity} cycles")
        if cycle.edge_vector() >> self.num_edges:
            raise AssertionError(f"{cycle!r} uses edges outside 0..{self.num_edges - 1}")
        residual = self._echelon.reduce(cycle.edge_vector())
        if residual == 0:
            raise AssertionError(f"{cycle!r} is dependent on the current basis")
        self._echelon.insert(residual)
        self._members.append(cycle)

    def members(self) -> Tuple[Cycle, ...]:
        """Accepted cycles in insertion order."""
        return tuple(self._members)

    def size(self) -> int:
        return len(self._members)

    def is_complete(self) -> bool:
        return len(self._members) >= self.capacity

    def __len__(self) -> int:
        return len(self._members)
