"""Exceptions raised while building a minimum cycle basis."""
from __future__ import annotations


class McbError(Exception):
    """Base class for all mcbtools errors."""


class InvalidCycleError(McbError, ValueError):
    """A vertex path is not a simple closed walk over the graph's edges."""


class MissingInputError(McbError, TypeError):
    """No graph (or candidate source) was supplied."""


class MissingCandidatesError(MissingInputError):
    """No candidate cycle source was supplied."""


class GeneratorContractViolation(McbError, RuntimeError):
    """The candidate stream was out of order or too poor to span the cycle space."""
