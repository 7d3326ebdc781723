"""
ivarith: floating-point interval arithmetic and set operations.

Intervals are subsets of the extended real line whose two endpoints are
each open or closed:

    from ivarith import Ends, new, degenerate

    new(0, 1)                          # [0, 1]
    new(0, math.inf, Ends.LEFT_CLOSED) # [0, +Inf), the non-negative reals
    degenerate(-3)                     # [-3, -3]

Addition, subtraction and multiplication of non-empty intervals give
non-empty results. Division is undefined when the denominator is [0, 0],
and when the denominator straddles zero but the numerator does not
contain it the exact quotient is two disjoint unbounded intervals; ``div``
then returns the real line together with a ``DisjointUnionError``.
Intersection and union are defined when the operands overlap or touch.
Operations on empty intervals give the empty interval.

Bounds are computed with the default hardware rounding, which can leave
a result an ulp short of enclosing the exact result. ``ivarith.enclosure``
checks results against exact real arithmetic with Z3.
"""

from ivarith.arith import add, div, mul, negate, sub
from ivarith.ends import Ends
from ivarith.errors import (
    ClosedAtInfinityError,
    DisjointUnionError,
    DivByZeroError,
    EmptyIntervalError,
    ErrorKind,
    IntervalError,
    IntervalSyntaxError,
    NaNBoundError,
    UnreachableCaseError,
)
from ivarith.interval import Interval, degenerate, empty, entire, equal, new, zero
from ivarith.setops import hull, intersection, union
from ivarith.sign import Sign, classify
from ivarith.text import format_bound, parse

__version__ = "0.1.0"

__all__ = [
    "Interval",
    "Ends",
    "Sign",
    "new",
    "degenerate",
    "empty",
    "zero",
    "entire",
    "equal",
    "negate",
    "add",
    "sub",
    "mul",
    "div",
    "intersection",
    "union",
    "hull",
    "classify",
    "parse",
    "format_bound",
    "ErrorKind",
    "IntervalError",
    "NaNBoundError",
    "EmptyIntervalError",
    "ClosedAtInfinityError",
    "DivByZeroError",
    "DisjointUnionError",
    "IntervalSyntaxError",
    "UnreachableCaseError",
]
