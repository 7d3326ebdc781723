"""
Tests for sign classification.

Zero-touching classes (P0, N0) require the zero bound to be closed; an
interval open at 0 holds only strictly signed values.
"""

import math

from ivarith import Ends, Interval, Sign, classify, empty, entire, new, zero
from ivarith.sign import has_zero, is_n0, is_n1, is_negative, is_p0, is_p1, is_positive

INF = math.inf


class TestClassify:
    """Every interval lands in exactly one class."""

    def test_table(self):
        table = [
            (empty(), Sign.EMPTY),
            (Interval(3, 1, Ends.CLOSED), Sign.EMPTY),
            (zero(), Sign.ZERO),
            (new(0, 0.5), Sign.P0),
            (new(0, INF, Ends.LEFT_CLOSED), Sign.P0),
            (new(0, 1, Ends.RIGHT_CLOSED), Sign.P1),
            (new(1, 2), Sign.P1),
            (new(2, 2), Sign.P1),
            (new(-0.25, 0), Sign.N0),
            (new(-1, 0, Ends.LEFT_CLOSED), Sign.N1),
            (new(-8, -4), Sign.N1),
            (new(-2, 4), Sign.MIXED),
            (entire(), Sign.MIXED),
        ]
        for iv, want in table:
            assert classify(iv) is want, iv

    def test_predicates_partition(self):
        samples = [
            new(0, 0.5), new(0, 1, Ends.OPEN), new(1, 2), new(-0.25, 0),
            new(-1, 0, Ends.OPEN), new(-8, -4), new(-2, 4), entire(),
        ]
        for iv in samples:
            flags = [is_p0(iv), is_p1(iv), is_n0(iv), is_n1(iv), iv.is_mixed()]
            assert sum(flags) == 1, iv

    def test_classification_mirrors_under_negation(self):
        mirror = {Sign.P0: Sign.N0, Sign.P1: Sign.N1, Sign.N0: Sign.P0,
                  Sign.N1: Sign.P1, Sign.MIXED: Sign.MIXED, Sign.ZERO: Sign.ZERO}
        for iv in (new(0, 1), new(0, 1, Ends.OPEN), new(-3, -1), new(-1, 0), new(-1, 1), zero()):
            assert classify(-iv) is mirror[classify(iv)], iv

    def test_empty_is_neither_sign(self):
        for iv in (empty(), Interval(1, 1, Ends.OPEN), Interval(-1, -1, Ends.OPEN)):
            assert not is_positive(iv)
            assert not is_negative(iv)


class TestHasZero:
    """Outside [0, 0], has_zero agrees with contains(0)."""

    def test_agrees_with_contains(self):
        samples = [
            new(0, 0.5), new(0, 1, Ends.RIGHT_CLOSED), new(1, 2), new(-0.25, 0),
            new(-1, 0, Ends.LEFT_CLOSED), new(-8, -4), new(-2, 4), entire(),
        ]
        for iv in samples:
            assert has_zero(iv) == iv.contains(0), iv
