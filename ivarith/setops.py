"""
Set operations on intervals.

Intersection and union are defined when the operands overlap or touch;
otherwise the result is the empty interval (a disjoint union cannot be
represented as one interval). ``hull`` gives the smallest interval
covering both operands when a single enclosing interval is wanted.

The endpoint mode of each side of the result is taken from whichever
operand supplies the binding bound on that side. When both operands
have the same bound, intersection is closed there only if both operands
are (AND) and union is closed there if either is (OR).
"""

from __future__ import annotations

from .ends import Ends, LEFT, RIGHT
from .interval import Interval, empty, equal


def _disjoint(x: Interval, y: Interval) -> bool:
    return (not x.contains(y.a) and not x.contains(y.b) and
            not y.contains(x.a) and not y.contains(x.b))


def _canonical(iv: Interval) -> Interval:
    return empty() if iv.is_empty() else iv


def intersection(x: Interval, y: Interval) -> Interval:
    """Intersection of ``x`` and ``y``; empty if they do not overlap."""
    if x.is_empty() or y.is_empty():
        return empty()
    if equal(x, y):
        return Interval(x.a, x.b, x.ends)
    if _disjoint(x, y):
        return empty()

    e = Ends.OPEN
    if x.a < y.a:
        e ^= y.ends & LEFT
    elif x.a == y.a:
        e ^= x.ends & y.ends & LEFT
    else:
        e ^= x.ends & LEFT

    if x.b < y.b:
        e ^= x.ends & RIGHT
    elif x.b == y.b:
        e ^= x.ends & y.ends & RIGHT
    else:
        e ^= y.ends & RIGHT

    return _canonical(Interval(max(x.a, y.a), min(x.b, y.b), e))


def _union_ends(x: Interval, y: Interval) -> Ends:
    e = Ends.OPEN
    if x.a < y.a:
        e ^= x.ends & LEFT
    elif x.a == y.a:
        e ^= (x.ends | y.ends) & LEFT
    else:
        e ^= y.ends & LEFT

    if x.b < y.b:
        e ^= y.ends & RIGHT
    elif x.b == y.b:
        e ^= (x.ends | y.ends) & RIGHT
    else:
        e ^= x.ends & RIGHT
    return e


def union(x: Interval, y: Interval) -> Interval:
    """
    Union of ``x`` and ``y`` if they overlap or touch, else the empty interval.

    Touching means one operand contains an endpoint of the other, so
    ``(-1, 2] | [2, 4]`` is ``(-1, 4]`` while ``(-1, 2) | (2, 4)`` is empty.
    """
    if x.is_empty() or y.is_empty():
        return empty()
    if equal(x, y):
        return Interval(x.a, x.b, x.ends)
    if _disjoint(x, y):
        return empty()
    return Interval(min(x.a, y.a), max(x.b, y.b), _union_ends(x, y))


def hull(x: Interval, y: Interval) -> Interval:
    """
    Smallest interval containing both ``x`` and ``y``.

    Unlike ``union`` this is defined for disjoint operands; the gap
    between them is included. An empty operand is ignored.
    """
    if x.is_empty():
        return empty() if y.is_empty() else Interval(y.a, y.b, y.ends)
    if y.is_empty():
        return Interval(x.a, x.b, x.ends)
    return Interval(min(x.a, y.a), max(x.b, y.b), _union_ends(x, y))
