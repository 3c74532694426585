"""
Minimum cycle basis (MCB) of an undirected graph.

A cycle basis is a set of cycles from which every cycle of the graph can be
formed by XOR-ing edge sets; the MCB is one of minimum total length.  For
naphthalene the bases are {6, 6}, {6, 10} and {6, 10}; the MCB is the pair
of six-membered rings.  In ring perception the MCB is what is usually called
the Smallest Set of Smallest Rings (SSSR).

An MCB is not unique in general: bridged systems such as quinuclidine have
several of equal weight, and which one is returned depends on candidate
order.  Only size and total weight are reproducible.
"""
from __future__ import annotations

import logging
from typing import List, Optional, Sequence, Tuple

from mcbtools.basis.greedy import GreedyBasis
from mcbtools.cycles.cycle import Cycle
from mcbtools.cycles.horton import HortonCycles
from mcbtools.cycles.source import CandidateSource
from mcbtools.errors import (
    GeneratorContractViolation,
    MissingCandidatesError,
    MissingInputError,
)
from mcbtools.graph.indexed import EdgeIndexedGraph

logger = logging.getLogger(__name__)


class MinimumCycleBasis:
    """
    Build the minimum cycle basis from an ordered candidate source.

    The basis is computed eagerly in the constructor; the object is read-only
    afterwards.  Use from_graph() to generate Horton candidates internally.
    """

    __slots__ = ("_basis",)

    def __init__(self, candidates: Optional[CandidateSource]) -> None:
        if candidates is None:
            raise MissingCandidatesError("no candidate cycles provided")

        graph = candidates.graph
        basis = GreedyBasis(graph.cyclomatic_number(), graph.num_edges)

        prev = 0
        seen = 0
        # shorter cycles first; each kept cycle is independent of all shorter ones
        for cycle in candidates.cycles():
            if basis.is_complete():
                break
            seen += 1
            if cycle.length() < prev:
                raise GeneratorContractViolation(
                    f"candidate {cycle!r} of length {cycle.length()} "
                    f"follows a candidate of length {prev}"
                )
            prev = cycle.length()
            if basis.is_independent(cycle):
                basis.add(cycle)

        if not basis.is_complete():
            raise GeneratorContractViolation(
                f"candidates exhausted with {basis.size()} of "
                f"{basis.capacity} basis cycles for {graph!r}"
            )
        logger.debug(
            "basis of %d cycles (weight %d) after %d candidates",
            basis.size(), sum(c.length() for c in basis.members()), seen,
        )
        self._basis = basis

    @classmethod
    def from_graph(
        cls,
        graph: Optional[EdgeIndexedGraph],
        processes: int = 1,
    ) -> "MinimumCycleBasis":
        """Minimum cycle basis of a graph, using Horton candidate cycles."""
        if graph is None:
            raise MissingInputError("no graph provided")
        return cls(HortonCycles(graph, processes=processes))

    def paths(self) -> List[Tuple[int, ...]]:
        """Closed vertex paths of the basis cycles, shortest first."""
        return [c.path() for c in self._basis.members()]

    def size(self) -> int:
        return self._basis.size()

    def cycles(self) -> Tuple[Cycle, ...]:
        return self._basis.members()

    def lengths(self) -> List[int]:
        return [c.length() for c in self._basis.members()]

    def weight(self) -> int:
        """Total number of edges over all basis cycles."""
        return sum(self.lengths())

    def __len__(self) -> int:
        return self.size()

    def __repr__(self) -> str:
        return f"MinimumCycleBasis(size={self.size()}, weight={self.weight()})"


def minimum_cycle_basis(
    graph: EdgeIndexedGraph | Sequence[Sequence[int]],
    processes: int = 1,
) -> List[Tuple[int, ...]]:
    """
    Paths of a minimum cycle basis.

    graph may be an EdgeIndexedGraph or an adjacency list (adj[u] lists the
    neighbours of u).
    """
    if graph is not None and not isinstance(graph, EdgeIndexedGraph):
        graph = EdgeIndexedGraph.from_adjacency(graph)
    return MinimumCycleBasis.from_graph(graph, processes=processes).paths()
