"""
Interval arithmetic: negation, addition, subtraction, multiplication and
division.

The arithmetic functions follow Hickey, Ju and van Emden, "Interval
Arithmetic: from Principles to Implementation", in particular their
"functional division", extended to track whether each endpoint of the
result is attained.

Multiplication and division dispatch on the sign class of the operands
(see ``sign``). Negative operands are reduced to non-negative ones with

    mul(x, y) = -mul(-x, y)        div(x, y) = -div(-x, y)

so only the non-negative and mixed cases are computed directly.

Empty operands absorb: any operation with an empty operand returns the
empty interval without an error. Division by [0, 0] and division whose
exact result is a union of two disjoint unbounded intervals are reported
by returning an error next to the quotient.

Floating-point rounding is the hardware default (round to nearest), so a
result can miss values of the exact result by an ulp at either bound.
"""

from __future__ import annotations

import logging
import math
import sys
from typing import Optional, Tuple

from .ends import Ends, LEFT, RIGHT
from .errors import (
    DisjointUnionError,
    DivByZeroError,
    IntervalError,
    UnreachableCaseError,
)
from .interval import Interval, empty, entire, zero
from .setops import union
from .sign import classify, has_zero, is_negative, is_p0, is_p1, is_positive

logger = logging.getLogger(__name__)


def _result(a: float, b: float, e: Ends) -> Interval:
    # Both bounds overflowed to the same infinity: keep a non-empty
    # enclosure by pulling the finite side back to the largest float.
    if a == b and math.isinf(a):
        if a > 0:
            a = sys.float_info.max
        else:
            b = -sys.float_info.max
        e = Ends.OPEN
    # An infinite bound is never attained.
    if math.isinf(a):
        e &= RIGHT
    if math.isinf(b):
        e &= LEFT
    return Interval(a, b, e)


def _mask(closed: bool) -> Ends:
    return Ends.CLOSED if closed else Ends.OPEN


def _quo(p: float, q: float) -> float:
    # A zero denominator here is an open bound approached from above (+0).
    if q == 0:
        return math.copysign(math.inf, p)
    return p / q


def _unreachable(op: str, x: Interval, y: Interval) -> UnreachableCaseError:
    return UnreachableCaseError(
        f"{op}: no case for {x} ({classify(x).value}) and {y} ({classify(y).value})"
    )


# =============================================================================
# Negation, addition, subtraction
# =============================================================================

def negate(x: Interval) -> Interval:
    """Additive inverse: the bounds swap sides, and so do their modes."""
    return Interval(-x.b, -x.a, x.ends.flip())


def add(x: Interval, y: Interval) -> Interval:
    """Sum ``x + y``; an end is closed only if it is closed in both operands."""
    if x.is_empty() or y.is_empty():
        return empty()
    return _result(x.a + y.a, x.b + y.b, x.ends & y.ends)


def sub(x: Interval, y: Interval) -> Interval:
    """Difference ``x - y``."""
    if x.is_empty() or y.is_empty():
        return empty()
    return add(x, negate(y))


# =============================================================================
# Multiplication
# =============================================================================

def _mul_pos_pos(x: Interval, y: Interval) -> Interval:
    e = x.ends & y.ends
    # 0 * y is 0 for every y, so a closed zero bound alone attains the infimum.
    if (x.a == 0 and x.left_is_closed()) or (y.a == 0 and y.left_is_closed()):
        e |= LEFT
    return _result(x.a * y.a, x.b * y.b, e)


def _mul_pos_mixed(x: Interval, y: Interval) -> Interval:
    return _result(x.b * y.a, x.b * y.b, y.ends & _mask(x.right_is_closed()))


def _mul_mixed_mixed(x: Interval, y: Interval) -> Interval:
    # x times the positive part of y, and x times the negative part of y.
    # Both pieces straddle 0 so their union is a single interval.
    by_right = _result(x.a * y.b, x.b * y.b, x.ends & _mask(y.right_is_closed()))
    by_left = _result(x.b * y.a, x.a * y.a, x.ends.flip() & _mask(y.left_is_closed()))
    return union(by_right, by_left)


def mul(x: Interval, y: Interval) -> Interval:
    """Product ``x * y``."""
    if x.is_empty() or y.is_empty():
        return empty()
    if x.is_zero() or y.is_zero():
        return zero()
    if is_negative(x):
        return negate(mul(negate(x), y))
    if is_negative(y):
        return negate(mul(x, negate(y)))

    if is_positive(x) and is_positive(y):
        return _mul_pos_pos(x, y)
    if is_positive(x) and y.is_mixed():
        return _mul_pos_mixed(x, y)
    if x.is_mixed() and is_positive(y):
        return _mul_pos_mixed(y, x)
    if x.is_mixed() and y.is_mixed():
        return _mul_mixed_mixed(x, y)
    raise _unreachable("mul", x, y)


# =============================================================================
# Division
# =============================================================================

def div(x: Interval, y: Interval) -> Tuple[Interval, Optional[IntervalError]]:
    """
    Quotient ``x / y`` and the error, if any, that came with it.

    Returns:
        (empty, None) if either operand is empty.
        (empty, DivByZeroError) if ``y`` is [0, 0].
        ([0, 0], None) if ``x`` is [0, 0] and ``y`` is not.
        ((-Inf, +Inf), DisjointUnionError) if ``y`` straddles 0 and ``x``
            does not contain 0. The exact quotient is two disjoint
            unbounded intervals; the real line encloses them.
        (quotient, None) otherwise. The quotient may be unbounded.
    """
    if x.is_empty() or y.is_empty():
        return empty(), None
    if y.is_zero():
        logger.debug("div %s / %s: division by [0, 0]", x, y)
        return empty(), DivByZeroError(f"{x} / {y}: division by [0, 0]")
    if x.is_zero():
        return zero(), None
    if is_negative(x):
        q, err = div(negate(x), y)
        return negate(q), err
    if is_negative(y):
        q, err = div(x, negate(y))
        return negate(q), err

    if has_zero(x) and has_zero(y) and (x.is_mixed() or y.is_mixed()):
        return entire(), None

    if is_p1(x) and y.is_mixed():
        q = entire()
        logger.debug("div %s / %s: quotient is a disjoint union", x, y)
        return q, DisjointUnionError(
            f"{x} / {y}: quotient is a union of disjoint unbounded intervals", q
        )

    # 0 / y is 0 for every y, so a closed zero bound in x attains the infimum.
    zero_attained = x.a == 0 and x.left_is_closed()

    if is_positive(x) and is_p0(y):
        e = x.ends & y.ends.flip() & LEFT
        if zero_attained:
            e |= LEFT
        return _result(x.a / y.b, math.inf, e), None

    if is_positive(x) and is_p1(y):
        e = x.ends & y.ends.flip()
        if zero_attained:
            e |= LEFT
        return _result(x.a / y.b, _quo(x.b, y.a), e), None

    if x.is_mixed() and is_p1(y):
        e = x.ends & _mask(y.left_is_closed())
        return _result(_quo(x.a, y.a), _quo(x.b, y.a), e), None

    raise _unreachable("div", x, y)
