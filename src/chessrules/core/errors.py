"""Exception hierarchy.

Illegal moves are not exceptions: they come back as rejected results. The
classes here signal malformed input at the parsing layer or a caller bug.
"""

from __future__ import annotations


class ChessRulesError(Exception):
    """Base class for all errors raised by the engine."""


class NotationError(ChessRulesError, ValueError):
    """A move token does not follow the ``E2-E4[=Q]`` form."""


class ContractViolation(ChessRulesError, RuntimeError):
    """An internal query was called in a way correct callers never do."""


class PathGeometryError(ContractViolation):
    """A path query was given a direction that does not match its squares."""


class UnknownPieceError(ContractViolation):
    """A piece kind reached code that has no rule for it."""
