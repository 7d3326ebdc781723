"""
Interval value type.

An ``Interval`` is a subset of the extended real line given by two bounds
and an endpoint mode:

    Interval(0, 1, Ends.CLOSED)                 [0, 1]
    Interval(0, math.inf, Ends.LEFT_CLOSED)     [0, +Inf)
    Interval(-1, 2, Ends.RIGHT_CLOSED)          (-1, 2]

Intervals are immutable values; every operation returns a new one. The
dataclass constructor stores its arguments as-is and is used for values
that are correct by construction. Values coming from callers go through
``new`` (or ``degenerate``), which rejects NaN bounds, empty intervals and
closed endpoints at infinity.

An interval is empty when ``a > b``, or when ``a == b`` and it is not
closed at both ends. ``Interval()`` is the canonical empty interval (0, 0).
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Union

from .ends import Ends, LEFT, RIGHT
from .errors import (
    ClosedAtInfinityError,
    DivByZeroError,
    EmptyIntervalError,
    NaNBoundError,
)
from .text import format_bound

logger = logging.getLogger(__name__)

Number = Union[int, float]


@dataclass(frozen=True, slots=True, eq=False)
class Interval:
    """
    A subset of the extended reals with independently open or closed ends.

    ``a`` is the left bound, ``b`` the right bound (either may be
    infinite), ``ends`` says which of them are included.

    Equality follows set semantics for empty intervals: any two empty
    intervals are equal regardless of their stored bounds.
    """
    a: float = 0.0
    b: float = 0.0
    ends: Ends = Ends.OPEN

    # =========================================================================
    # Accessors and predicates
    # =========================================================================

    @property
    def left(self) -> float:
        return self.a

    @property
    def right(self) -> float:
        return self.b

    def is_empty(self) -> bool:
        """True if the interval contains no value."""
        return self.a > self.b or (self.a == self.b and self.ends != Ends.CLOSED)

    def is_mixed(self) -> bool:
        """True if the interval holds at least one positive and one negative value."""
        return self.a < 0 < self.b

    def is_unit(self) -> bool:
        """True if the interval holds exactly one value."""
        return self.a == self.b and self.ends == Ends.CLOSED

    def is_zero(self) -> bool:
        """True if the interval is [0, 0]."""
        return self.is_unit() and self.a == 0

    def left_is_closed(self) -> bool:
        return bool(self.ends & LEFT)

    def right_is_closed(self) -> bool:
        return bool(self.ends & RIGHT)

    def contains(self, x: float) -> bool:
        """
        True if ``x`` lies strictly inside the bounds or on a closed bound.

        NaN is never contained.
        """
        return ((self.a < x or (self.a == x and self.left_is_closed())) and
                (self.b > x or (self.b == x and self.right_is_closed())))

    # =========================================================================
    # Operators
    # =========================================================================

    def __neg__(self) -> Interval:
        from .arith import negate
        return negate(self)

    def __add__(self, other: Union[Interval, Number]) -> Interval:
        from .arith import add
        if isinstance(other, (int, float)):
            other = degenerate(other)
        elif not isinstance(other, Interval):
            return NotImplemented
        return add(self, other)

    def __radd__(self, other: Number) -> Interval:
        return self + other

    def __sub__(self, other: Union[Interval, Number]) -> Interval:
        from .arith import sub
        if isinstance(other, (int, float)):
            other = degenerate(other)
        elif not isinstance(other, Interval):
            return NotImplemented
        return sub(self, other)

    def __rsub__(self, other: Number) -> Interval:
        from .arith import sub
        if not isinstance(other, (int, float)):
            return NotImplemented
        return sub(degenerate(other), self)

    def __mul__(self, other: Union[Interval, Number]) -> Interval:
        from .arith import mul
        if isinstance(other, (int, float)):
            other = degenerate(other)
        elif not isinstance(other, Interval):
            return NotImplemented
        return mul(self, other)

    def __rmul__(self, other: Number) -> Interval:
        return self * other

    def __truediv__(self, other: Union[Interval, Number]) -> Interval:
        """
        Quotient ``self / other``.

        Raises ``DivByZeroError`` when ``other`` is [0, 0]. When the exact
        quotient is a disjoint union the enclosure is returned and a
        warning is logged; use ``arith.div`` to detect that case.
        """
        if isinstance(other, (int, float)):
            other = degenerate(other)
        elif not isinstance(other, Interval):
            return NotImplemented
        return _checked_div(self, other)

    def __rtruediv__(self, other: Number) -> Interval:
        if not isinstance(other, (int, float)):
            return NotImplemented
        return _checked_div(degenerate(other), self)

    def __and__(self, other: Interval) -> Interval:
        from .setops import intersection
        if not isinstance(other, Interval):
            return NotImplemented
        return intersection(self, other)

    def __or__(self, other: Interval) -> Interval:
        from .setops import union
        if not isinstance(other, Interval):
            return NotImplemented
        return union(self, other)

    def __contains__(self, x: Number) -> bool:
        return self.contains(x)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Interval):
            return NotImplemented
        return equal(self, other)

    def __hash__(self) -> int:
        if self.is_empty():
            return hash(())
        return hash((self.a, self.b, int(self.ends)))

    # =========================================================================
    # Representation
    # =========================================================================

    def __str__(self) -> str:
        lbr = "[" if self.left_is_closed() else "("
        rbr = "]" if self.right_is_closed() else ")"
        return f"{lbr}{format_bound(self.a)}, {format_bound(self.b)}{rbr}"

    def __repr__(self) -> str:
        return f"Interval('{self}')"


# =============================================================================
# Constructors
# =============================================================================

def new(x: Number, y: Number, ends: Ends = Ends.CLOSED) -> Interval:
    """
    Validating constructor for the interval with bounds ``x`` and ``y``.

    Raises:
        NaNBoundError: if either bound is NaN.
        EmptyIntervalError: if the interval would be empty.
        ClosedAtInfinityError: if an infinite bound is closed.
        ValueError: if ``ends`` is not one of the four endpoint modes.
    """
    if math.isnan(x) or math.isnan(y):
        raise NaNBoundError(f"bound is NaN: ({x}, {y})")
    if int(ends) not in range(4):
        raise ValueError(f"invalid endpoint mode: {int(ends)}")
    iv = Interval(float(x), float(y), Ends(ends))
    if iv.is_empty():
        raise EmptyIntervalError(f"{iv} is empty")
    if iv.a == -math.inf and iv.left_is_closed():
        raise ClosedAtInfinityError(f"{iv} is closed at -Inf")
    if iv.b == math.inf and iv.right_is_closed():
        raise ClosedAtInfinityError(f"{iv} is closed at +Inf")
    return iv


def degenerate(x: Number) -> Interval:
    """Shorthand for ``new(x, x, Ends.CLOSED)``."""
    return new(x, x, Ends.CLOSED)


def empty() -> Interval:
    """The canonical empty interval (0, 0)."""
    return Interval(0.0, 0.0, Ends.OPEN)


def zero() -> Interval:
    """The degenerate interval [0, 0]."""
    return Interval(0.0, 0.0, Ends.CLOSED)


def entire() -> Interval:
    """The whole real line (-Inf, +Inf)."""
    return Interval(-math.inf, math.inf, Ends.OPEN)


def equal(x: Interval, y: Interval) -> bool:
    """True if both intervals are empty or have identical bounds and mode."""
    if x.is_empty():
        return y.is_empty()
    return x.a == y.a and x.b == y.b and x.ends == y.ends


def _checked_div(x: Interval, y: Interval) -> Interval:
    from .arith import div
    result, err = div(x, y)
    if isinstance(err, DivByZeroError):
        raise err
    if err is not None:
        logger.warning("%s / %s: %s; returning enclosure %s", x, y, err, result)
    return result
