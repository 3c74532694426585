"""GF(2) vectors packed into Python ints, and an incremental echelon form.

Bit i of a vector is coordinate i (an edge index).  XOR of two ints is the
vector sum, and ``int.bit_length`` locates the leading (pivot) bit, so every
operation works a machine word at a time rather than bit by bit.
"""
from __future__ import annotations

from bisect import bisect_left
from typing import Iterable, List, Sequence, Tuple


def edge_vector(indices: Iterable[int]) -> int:
    """Pack edge indices into a bitset (repeated indices cancel, as in GF(2))."""
    vec = 0
    for i in indices:
        vec ^= 1 << i
    return vec


def popcount(vec: int) -> int:
    return bin(vec).count("1")


def leading_bit(vec: int) -> int:
    """Index of the highest set bit, or -1 for the zero vector."""
    return vec.bit_length() - 1


def gf2_rank(rows: Sequence[int]) -> int:
    """Rank over GF(2) of a list of bitset rows (Gaussian elimination)."""
    form = EchelonForm()
    for row in rows:
        residual = form.reduce(row)
        if residual:
            form.insert(residual)
    return form.rank


class EchelonForm:
    """
    Row-echelon basis of a GF(2) subspace.

    Each row has a distinct leading bit (its pivot).  Reducing a vector is a
    single pass over the rows by decreasing pivot, with one conditional XOR
    per row.
    """

    __slots__ = ("_pivots", "_rows")

    def __init__(self) -> None:
        # _pivots is ascending so bisect can place new rows; iterate reversed.
        self._pivots: List[int] = []
        self._rows: List[int] = []

    @property
    def rank(self) -> int:
        return len(self._rows)

    def rows(self) -> Tuple[int, ...]:
        """Rows by decreasing pivot."""
        return tuple(reversed(self._rows))

    def reduce(self, vec: int) -> int:
        """Residual of vec after elimination; zero iff vec is in the span."""
        for i in range(len(self._rows) - 1, -1, -1):
            if (vec >> self._pivots[i]) & 1:
                vec ^= self._rows[i]
        return vec

    def contains(self, vec: int) -> bool:
        return self.reduce(vec) == 0

    def insert(self, residual: int) -> int:
        """
        Add a fully reduced nonzero vector as a new row; return its pivot.

        The caller must pass the output of reduce(); a vector whose leading
        bit is already a pivot would break the echelon invariant.
        """
        if residual == 0:
            raise ValueError("cannot insert the zero vector")
        p = leading_bit(residual)
        i = bisect_left(self._pivots, p)
        if i < len(self._pivots) and self._pivots[i] == p:
            raise ValueError(f"pivot {p} already present; reduce() the vector first")
        self._pivots.insert(i, p)
        self._rows.insert(i, residual)
        return p
