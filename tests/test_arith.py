"""
Tests for interval arithmetic.

Tests cover:
1. Negation (involution, mode flipping)
2. Addition and subtraction
3. Multiplication across sign classes, including endpoint modes
4. Division across sign classes, DivByZero and DisjointUnion
5. Algebraic properties: absorption, zero identities, commutativity
"""

import math
import sys

import pytest

from ivarith import (
    DisjointUnionError,
    DivByZeroError,
    Ends,
    ErrorKind,
    Interval,
    UnreachableCaseError,
    add,
    degenerate,
    div,
    empty,
    entire,
    mul,
    negate,
    new,
    sub,
    zero,
)
from ivarith.arith import _unreachable

INF = math.inf

E = empty()
Z = zero()
P0 = new(0, 0.5)
P1 = new(1, 2)
M = new(-2, 4)
N0 = new(-0.25, 0)
N1 = new(-8, -4)

SAMPLES = [
    Z, P0, P1, M, N0, N1, entire(),
    new(0, 1, Ends.LEFT_CLOSED),
    new(0, 1, Ends.RIGHT_CLOSED),
    new(1, 2, Ends.OPEN),
    new(-1, 3, Ends.RIGHT_CLOSED),
    new(-3, 1, Ends.LEFT_CLOSED),
    new(-2, -1, Ends.LEFT_CLOSED),
    new(-1, 0, Ends.LEFT_CLOSED),
    new(0, INF, Ends.LEFT_CLOSED),
    new(-INF, -1, Ends.RIGHT_CLOSED),
    degenerate(3),
]


def _same(got: Interval, want: Interval) -> bool:
    return got == want and (got.is_empty() or got.ends == want.ends)


class TestNegate:
    """Negation swaps and negates the bounds and flips the mode."""

    def test_table(self):
        table = [
            (Interval(0, 0, Ends.CLOSED), Interval(0, 0, Ends.CLOSED)),
            (Interval(0, 1, Ends.LEFT_CLOSED), Interval(-1, 0, Ends.RIGHT_CLOSED)),
            (Interval(0, 1, Ends.RIGHT_CLOSED), Interval(-1, 0, Ends.LEFT_CLOSED)),
            (Interval(0, 1, Ends.OPEN), Interval(-1, 0, Ends.OPEN)),
            (Interval(2, 4, Ends.CLOSED), Interval(-4, -2, Ends.CLOSED)),
            (Interval(2, 4, Ends.LEFT_CLOSED), Interval(-4, -2, Ends.RIGHT_CLOSED)),
            (Interval(2, 4, Ends.RIGHT_CLOSED), Interval(-4, -2, Ends.LEFT_CLOSED)),
            (Interval(2, 4, Ends.OPEN), Interval(-4, -2, Ends.OPEN)),
            (Interval(-INF, 3, Ends.RIGHT_CLOSED), Interval(-3, INF, Ends.LEFT_CLOSED)),
            (Interval(-INF, INF, Ends.OPEN), Interval(-INF, INF, Ends.OPEN)),
        ]
        for x, want in table:
            assert negate(x) == want, x
            assert negate(want) == x, want

    def test_involution(self):
        for x in SAMPLES + [E]:
            assert negate(negate(x)) == x, x

    def test_does_not_mutate(self):
        x = new(1, 2, Ends.LEFT_CLOSED)
        negate(x)
        assert x == new(1, 2, Ends.LEFT_CLOSED)


# (x, y, x + y, x - y)
ADD_SUB_TABLE = [
    (E, P1, E, E),
    (P1, E, E, E),
    (P1, Z, P1, P1),
    (Z, P1, P1, negate(P1)),
    (P0, P1, new(1, 2.5), new(-2, -0.5)),
    (P1, P0, new(1, 2.5), new(0.5, 2)),
    (P1, M, new(-1, 6), new(-3, 4)),
    (P1, N0, new(0.75, 2), new(1, 2.25)),
    (P1, N1, new(-7, -2), new(5, 10)),
    (M, P1, new(-1, 6), new(-4, 3)),
    (M, P0, new(-2, 4.5), new(-2.5, 4)),
    (M, M, new(-4, 8), new(-6, 6)),
    (M, N0, new(-2.25, 4), new(-2, 4.25)),
    (M, N1, new(-10, 0), new(2, 12)),
    (N1, P1, new(-7, -2), new(-10, -5)),
    (N1, P0, new(-8, -3.5), new(-8.5, -4)),
    (N1, M, new(-10, 0), new(-12, -2)),
    (N1, N0, new(-8.25, -4), new(-8, -3.75)),
    (N0, N1, new(-8.25, -4), new(3.75, 8)),
]


class TestAddSub:
    """Bounds add; a side is closed only if both operands are closed there."""

    def test_add_table(self):
        for x, y, want, _ in ADD_SUB_TABLE:
            assert add(x, y) == want, (x, y)

    def test_sub_table(self):
        for x, y, _, want in ADD_SUB_TABLE:
            assert sub(x, y) == want, (x, y)

    def test_modes_and(self):
        r = add(new(0, 1, Ends.LEFT_CLOSED), new(0, 1))
        assert _same(r, new(0, 2, Ends.LEFT_CLOSED))
        r = add(new(0, 1, Ends.LEFT_CLOSED), new(0, 1, Ends.RIGHT_CLOSED))
        assert _same(r, new(0, 2, Ends.OPEN))

    def test_sub_flips_subtrahend_mode(self):
        r = sub(new(0, 1), new(0, 1, Ends.LEFT_CLOSED))
        assert _same(r, new(-1, 1, Ends.RIGHT_CLOSED))

    def test_unbounded(self):
        r = add(new(0, INF, Ends.LEFT_CLOSED), new(1, 2))
        assert _same(r, new(1, INF, Ends.LEFT_CLOSED))

    def test_round_trip_with_degenerate_offset(self):
        x = new(1, 2)
        assert add(sub(add(x, degenerate(3)), degenerate(3)), Z) == x

    def test_round_trip_with_wide_offset_widens(self):
        # Interval subtraction is not the inverse of addition: the width
        # of the offset is counted twice.
        r = add(sub(add(new(1, 2), new(3, 4)), new(3, 4)), Z)
        assert r == new(0, 3)
        assert new(1, 2) & r == new(1, 2)


# (x, y, x * y)
MUL_TABLE = [
    (P1, P1, new(1, 4)),
    (P0, P1, new(0, 1)),
    (P1, M, new(-4, 8)),
    (M, M, new(-8, 16)),
    (N1, P1, new(-16, -4)),
    (N1, N1, new(16, 64)),
    (N0, M, new(-1, 0.5)),
    (P0, N0, new(-0.125, 0)),
    (M, N1, new(-32, 16)),
    (M, P0, new(-1, 2)),
    (N0, N0, new(0, 0.0625)),
    (P1, Z, Z),
    (Z, M, Z),
]


class TestMul:
    """Multiplication across sign classes."""

    def test_table(self):
        for x, y, want in MUL_TABLE:
            assert mul(x, y) == want, (x, y)
            assert mul(y, x) == want, (y, x)

    def test_zero_bound_attains_infimum(self):
        # 0 * 1 = 0 is attained although 0 is not in the second operand.
        r = mul(new(0, 1, Ends.LEFT_CLOSED), new(0, 2, Ends.RIGHT_CLOSED))
        assert _same(r, new(0, 2, Ends.LEFT_CLOSED))

    def test_open_zero_bounds(self):
        r = mul(new(0, 1, Ends.RIGHT_CLOSED), new(0, 2, Ends.RIGHT_CLOSED))
        assert _same(r, new(0, 2, Ends.RIGHT_CLOSED))

    def test_positive_times_mixed_open_right(self):
        r = mul(new(1, 2, Ends.LEFT_CLOSED), new(-1, 3))
        assert _same(r, new(-2, 6, Ends.OPEN))

    def test_positive_times_mixed_takes_mixed_mode(self):
        r = mul(new(1, 2), new(-1, 3, Ends.RIGHT_CLOSED))
        assert _same(r, new(-2, 6, Ends.RIGHT_CLOSED))

    def test_mixed_times_mixed_open(self):
        r = mul(new(-1, 2, Ends.LEFT_CLOSED), new(-3, 1, Ends.RIGHT_CLOSED))
        assert _same(r, new(-6, 3, Ends.OPEN))

    def test_mixed_times_mixed_closed_by_one_piece(self):
        r = mul(new(-1, 2), new(-3, 1, Ends.LEFT_CLOSED))
        assert _same(r, new(-6, 3))

    def test_mixed_times_mixed_tie_is_closed_if_either_piece_is(self):
        r = mul(new(-2, 2), new(-2, 2, Ends.LEFT_CLOSED))
        assert _same(r, new(-4, 4))

    def test_unbounded_side_is_open(self):
        r = mul(new(1, INF, Ends.LEFT_CLOSED), new(2, 3))
        assert _same(r, new(2, INF, Ends.LEFT_CLOSED))
        assert mul(new(0, 1), entire()) == entire()

    def test_negative_operand_mode(self):
        r = mul(new(-2, -1, Ends.LEFT_CLOSED), new(1, 3))
        assert _same(r, new(-6, -1, Ends.LEFT_CLOSED))


# (x, y, x / y, error kind)
DIV_TABLE = [
    (P1, P1, new(0.5, 2), None),
    (P0, P1, new(0, 0.5), None),
    (P1, P0, new(2, INF, Ends.LEFT_CLOSED), None),
    (P0, P0, new(0, INF, Ends.LEFT_CLOSED), None),
    (M, P1, new(-2, 4), None),
    (M, P0, entire(), None),
    (P0, M, entire(), None),
    (M, M, entire(), None),
    (P1, M, entire(), ErrorKind.DISJOINT_UNION),
    (N1, P1, new(-8, -2), None),
    (P1, N1, new(-0.5, -0.125), None),
    (N1, N1, new(0.5, 2), None),
    (N1, M, entire(), ErrorKind.DISJOINT_UNION),
    (P1, N0, new(-INF, -4, Ends.RIGHT_CLOSED), None),
    (N0, N0, new(0, INF, Ends.LEFT_CLOSED), None),
    (Z, M, Z, None),
    (Z, P1, Z, None),
]


class TestDiv:
    """Division across sign classes."""

    def test_table(self):
        for x, y, want, kind in DIV_TABLE:
            q, err = div(x, y)
            assert _same(q, want), (x, y, q)
            if kind is None:
                assert err is None, (x, y)
            else:
                assert err is not None and err.kind is kind, (x, y)

    def test_disjoint_union_signal(self):
        q, err = div(new(1, 2), new(-2, 4))
        assert _same(q, new(-INF, INF, Ends.OPEN))
        assert isinstance(err, DisjointUnionError)
        assert err.enclosure == q

    def test_open_zero_numerator_is_strictly_positive(self):
        # (0, 1] does not contain 0, so dividing by a mixed interval splits.
        q, err = div(new(0, 1, Ends.RIGHT_CLOSED), new(-1, 1))
        assert q == entire()
        assert isinstance(err, DisjointUnionError)

    def test_closed_zero_numerator_over_mixed(self):
        q, err = div(new(0, 1), new(-1, 1))
        assert q == entire()
        assert err is None

    def test_division_by_zero(self):
        for x in SAMPLES:
            q, err = div(x, Z)
            assert q == empty(), x
            assert isinstance(err, DivByZeroError), x

    def test_zero_numerator(self):
        for y in SAMPLES:
            if y.is_zero():
                continue
            q, err = div(Z, y)
            assert _same(q, Z), y
            assert err is None

    def test_empty_absorbs_without_error(self):
        assert div(E, Z) == (empty(), None)
        assert div(Z, E) == (empty(), None)
        for x in SAMPLES:
            assert div(x, E) == (empty(), None)
            assert div(E, x) == (empty(), None)

    def test_modes_positive_by_positive(self):
        q, _ = div(new(1, 2, Ends.LEFT_CLOSED), new(1, 2, Ends.RIGHT_CLOSED))
        assert _same(q, new(0.5, 2, Ends.LEFT_CLOSED))
        q, _ = div(new(0, 1, Ends.RIGHT_CLOSED), new(1, 2))
        assert _same(q, new(0, 1, Ends.RIGHT_CLOSED))

    def test_open_zero_denominator(self):
        q, err = div(new(1, 2), new(0, 1, Ends.RIGHT_CLOSED))
        assert _same(q, new(1, INF, Ends.LEFT_CLOSED))
        assert err is None
        q, err = div(new(-1, 2), new(0, 1, Ends.RIGHT_CLOSED))
        assert q == entire()
        assert err is None

    def test_mixed_by_positive_modes(self):
        q, _ = div(new(-1, 2, Ends.LEFT_CLOSED), new(2, 4))
        assert _same(q, new(-0.5, 1, Ends.LEFT_CLOSED))
        q, _ = div(new(-1, 2), new(2, 4, Ends.RIGHT_CLOSED))
        assert _same(q, new(-0.5, 1, Ends.OPEN))

    def test_touching_zero_denominator_modes(self):
        q, _ = div(new(0, 1), new(0, 1, Ends.LEFT_CLOSED))
        assert _same(q, new(0, INF, Ends.LEFT_CLOSED))
        q, _ = div(new(1, 2), new(0, 1, Ends.LEFT_CLOSED))
        assert _same(q, new(1, INF, Ends.OPEN))


class TestProperties:
    """Algebraic properties over a spread of sign classes and modes."""

    def test_absorption(self):
        for x in SAMPLES:
            assert add(x, E) == E and add(E, x) == E
            assert sub(x, E) == E and sub(E, x) == E
            assert mul(x, E) == E and mul(E, x) == E
            assert div(x, E)[0] == E and div(E, x)[0] == E

    def test_mul_by_zero(self):
        for x in SAMPLES:
            assert _same(mul(x, Z), Z), x
            assert _same(mul(Z, x), Z), x

    def test_add_commutative(self):
        for x in SAMPLES:
            for y in SAMPLES:
                assert _same(add(x, y), add(y, x)), (x, y)

    def test_mul_commutative(self):
        for x in SAMPLES:
            for y in SAMPLES:
                assert _same(mul(x, y), mul(y, x)), (x, y)

    def test_mul_sign_symmetry(self):
        for x in SAMPLES:
            for y in SAMPLES:
                assert mul(negate(x), y) == negate(mul(x, y)), (x, y)

    def test_results_never_closed_at_infinity(self):
        for x in SAMPLES:
            for y in SAMPLES:
                for r in (add(x, y), sub(x, y), mul(x, y), div(x, y)[0]):
                    if r.is_empty():
                        continue
                    assert not (r.a == -INF and r.left_is_closed()), (x, y, r)
                    assert not (r.b == INF and r.right_is_closed()), (x, y, r)

    def test_overflow_stays_non_empty(self):
        big = new(1e308, 1.5e308)
        cases = [
            add(big, big),
            sub(negate(big), big),
            mul(degenerate(1e200), degenerate(1e200)),
            mul(degenerate(-1e200), degenerate(1e200)),
            div(degenerate(1e300), degenerate(1e-300))[0],
            div(degenerate(1e300), new(0, 1e-300, Ends.RIGHT_CLOSED))[0],
        ]
        for r in cases:
            assert not r.is_empty(), r
            assert math.isinf(r.a) or math.isinf(r.b), r
            assert r.ends == Ends.OPEN, r

    def test_overflow_bounds(self):
        assert mul(degenerate(1e200), degenerate(1e200)) == Interval(sys.float_info.max, INF, Ends.OPEN)
        assert mul(degenerate(-1e200), degenerate(1e200)) == Interval(-INF, -sys.float_info.max, Ends.OPEN)

    def test_results_contain_sampled_products(self):
        points = [-3, -1, -0.5, 0, 0.25, 1, 2, 3.5]
        for x in SAMPLES:
            for y in SAMPLES:
                prod = mul(x, y)
                quo, _ = div(x, y)
                for p in points:
                    if not x.contains(p):
                        continue
                    for q in points:
                        if not y.contains(q):
                            continue
                        assert prod.contains(p * q), (x, y, p, q)
                        if q != 0:
                            assert quo.contains(p / q), (x, y, p, q)


class TestUnreachable:
    """The dispatch fault is an assertion, not a caller-facing error."""

    def test_fault_type(self):
        err = _unreachable("mul", new(0, 1), new(0, 1))
        assert isinstance(err, AssertionError)
        assert "mul" in str(err)

    def test_raised_when_dispatch_has_no_case(self, monkeypatch):
        import ivarith.arith as arith

        monkeypatch.setattr(arith, "is_positive", lambda x: False)
        with pytest.raises(UnreachableCaseError):
            arith.mul(new(1, 2), new(3, 4))
