"""
Error kinds reported by the interval library.

Construction errors (NaN, Empty, ClosedAtInfinity) are raised by the
validating constructors. Division errors (DivByZero, DisjointUnion) are
returned next to the quotient by ``div`` so callers can still use the
value that came with them. All of these are recoverable.

``UnreachableCaseError`` is different: it means the sign dispatch in the
arithmetic engine met a combination it does not handle, which is a defect
in this library rather than a bad argument.
"""

from __future__ import annotations

from enum import Enum, auto
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from .interval import Interval


class ErrorKind(Enum):
    """Kind of interval error."""
    NAN = auto()
    EMPTY = auto()
    CLOSED_AT_INFINITY = auto()
    DIV_BY_ZERO = auto()
    DISJOINT_UNION = auto()
    SYNTAX = auto()


class IntervalError(ValueError):
    """Base class for recoverable interval errors."""
    kind: ErrorKind


class NaNBoundError(IntervalError):
    """A bound argument is not a number."""
    kind = ErrorKind.NAN


class EmptyIntervalError(IntervalError):
    """The requested bounds and mode describe the empty set."""
    kind = ErrorKind.EMPTY


class ClosedAtInfinityError(IntervalError):
    """A closed endpoint was requested at an infinite bound."""
    kind = ErrorKind.CLOSED_AT_INFINITY


class DivByZeroError(IntervalError, ZeroDivisionError):
    """Division by the degenerate interval [0, 0]."""
    kind = ErrorKind.DIV_BY_ZERO


class DisjointUnionError(IntervalError):
    """
    The exact quotient is a union of two disjoint unbounded intervals.

    The interval returned with this error is a valid enclosure (the whole
    real line) but not a tight one. Callers that need tightness can split
    the denominator at zero and divide by each half.
    """
    kind = ErrorKind.DISJOINT_UNION

    def __init__(self, message: str, enclosure: Optional[Interval] = None):
        super().__init__(message)
        self.enclosure = enclosure


class IntervalSyntaxError(IntervalError):
    """Text could not be parsed as interval notation."""
    kind = ErrorKind.SYNTAX


class UnreachableCaseError(AssertionError):
    """The sign dispatch met an operand combination it does not handle."""
