"""
Interval notation.

Square brackets denote closed endpoints and parentheses open ones:

    [0, 1]      (0, 1)      [0, +Inf)      (-Inf, 2.5]

``parse`` reads the same notation back. A bare number parses as the
degenerate interval holding it, and ``empty``, ``()``, ``∅`` or ``(0, 0)``
(the rendering of the canonical empty value) parse as the empty interval.
"""

from __future__ import annotations

import math
import re
from typing import TYPE_CHECKING

from .ends import Ends
from .errors import IntervalSyntaxError

if TYPE_CHECKING:
    from .interval import Interval


_NUMBER = r"[+-]?(?:inf(?:inity)?|(?:\d+\.?\d*|\.\d+)(?:e[+-]?\d+)?)"

_INTERVAL_RE = re.compile(
    rf"^\s*(?P<lb>[\[(])\s*(?P<a>{_NUMBER})\s*,\s*(?P<b>{_NUMBER})\s*(?P<rb>[\])])\s*$",
    re.IGNORECASE,
)
_NUMBER_RE = re.compile(rf"^\s*(?P<x>{_NUMBER})\s*$", re.IGNORECASE)
_EMPTY_TOKENS = frozenset({"empty", "()", "∅", "(0,0)"})


def format_bound(v: float) -> str:
    """Render a bound: integral values without a fraction, infinities as ±Inf."""
    v = float(v)
    if math.isinf(v):
        return "+Inf" if v > 0 else "-Inf"
    if math.isnan(v):
        return "NaN"
    if v.is_integer() and abs(v) < 1e16:
        return str(int(v))
    return repr(v)


def parse(text: str) -> Interval:
    """
    Parse interval notation.

    Raises:
        IntervalSyntaxError: if ``text`` is not interval notation.
        NaNBoundError, EmptyIntervalError, ClosedAtInfinityError: if the
            notation is well formed but describes an invalid interval.
    """
    from .interval import degenerate, empty, new

    if "".join(text.split()).lower() in _EMPTY_TOKENS:
        return empty()

    m = _NUMBER_RE.match(text)
    if m:
        return degenerate(float(m.group("x")))

    m = _INTERVAL_RE.match(text)
    if not m:
        raise IntervalSyntaxError(f"not interval notation: {text!r}")

    ends = Ends.of(m.group("lb") == "[", m.group("rb") == "]")
    return new(float(m.group("a")), float(m.group("b")), ends)
