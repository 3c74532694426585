from __future__ import annotations

from typing import Iterable, Iterator, List, Protocol, runtime_checkable

from mcbtools.cycles.cycle import Cycle
from mcbtools.errors import InvalidCycleError
from mcbtools.graph.indexed import EdgeIndexedGraph


@runtime_checkable
class CandidateSource(Protocol):
    """
    Anything that yields candidate cycles for a graph.

    cycles() must return the candidates in non-decreasing length and may be
    called more than once (each call restarts the sequence).  For the basis
    to be minimum the candidates must contain some minimum cycle basis.
    """

    graph: EdgeIndexedGraph

    def cycles(self) -> Iterable[Cycle]:
        ...


class PrecomputedCycles:
    """A caller-supplied candidate list, e.g. reused across several analyses."""

    def __init__(self, graph: EdgeIndexedGraph, cycles: Iterable[Cycle]) -> None:
        self.graph = graph
        self._cycles: List[Cycle] = list(cycles)
        for c in self._cycles:
            if c.graph is not graph:
                raise InvalidCycleError(f"{c!r} belongs to a different graph")

    def cycles(self) -> Iterator[Cycle]:
        return iter(self._cycles)

    def __len__(self) -> int:
        return len(self._cycles)
