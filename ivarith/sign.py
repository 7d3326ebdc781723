"""
Sign classification of intervals.

Every interval falls in exactly one class:

    EMPTY   no values
    ZERO    [0, 0]
    P0      left bound 0, included, right bound > 0       [0, 3)
    P1      only strictly positive values                  (0, 3], [1, 2]
    N0      right bound 0, included, left bound < 0       (-3, 0]
    N1      only strictly negative values                  [-3, 0), [-2, -1]
    MIXED   left bound < 0 < right bound                   [-1, 2]

The zero-touching classes check the endpoint mode: (0, 3] does not contain
0 and is P1, not P0. With that convention an interval outside EMPTY and
ZERO contains 0 exactly when it is P0, N0 or MIXED. Multiplication and
division both dispatch on this classification.
"""

from __future__ import annotations

from enum import Enum

from .interval import Interval


class Sign(Enum):
    EMPTY = "empty"
    ZERO = "zero"
    P0 = "P0"
    P1 = "P1"
    N0 = "N0"
    N1 = "N1"
    MIXED = "mixed"


def is_p0(x: Interval) -> bool:
    """Touches zero from above and contains it."""
    return x.a == 0 and x.b > 0 and x.left_is_closed()


def is_p1(x: Interval) -> bool:
    """Non-empty and strictly positive."""
    return x.a >= 0 and x.b > 0 and not is_p0(x) and not x.is_empty()


def is_n0(x: Interval) -> bool:
    """Touches zero from below and contains it."""
    return x.b == 0 and x.a < 0 and x.right_is_closed()


def is_n1(x: Interval) -> bool:
    """Non-empty and strictly negative."""
    return x.b <= 0 and x.a < 0 and not is_n0(x) and not x.is_empty()


def is_positive(x: Interval) -> bool:
    return is_p0(x) or is_p1(x)


def is_negative(x: Interval) -> bool:
    return is_n0(x) or is_n1(x)


def has_zero(x: Interval) -> bool:
    """Contains 0 as a bound or interior point (not counting [0, 0])."""
    return is_p0(x) or x.is_mixed() or is_n0(x)


def classify(x: Interval) -> Sign:
    """Sign class of ``x``."""
    if x.is_empty():
        return Sign.EMPTY
    if x.is_zero():
        return Sign.ZERO
    if x.is_mixed():
        return Sign.MIXED
    if is_p0(x):
        return Sign.P0
    if is_p1(x):
        return Sign.P1
    if is_n0(x):
        return Sign.N0
    return Sign.N1
