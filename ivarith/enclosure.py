"""
Enclosure checks with Z3.

Interval results are computed with hardware rounding, so a bound can land
an ulp inside the exact result and the interval then misses values it
should contain. This module asks Z3, over exact real arithmetic, whether a
result really encloses the operation:

    ∃ x ∈ X, y ∈ Y:  x ⊙ y ∉ R        (sat  → VIOLATED, with a witness)
                                        (unsat → PROVEN)

Bounds are converted to Z3 rationals exactly (every finite double is a
dyadic rational), open ends become strict inequalities and infinite ends
are left unconstrained. Division also requires y ≠ 0, matching the
functional definition of interval division.

``check_attained`` asks the converse question for closed result bounds:
is the bound itself produced by some operand pair?
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from enum import Enum
from fractions import Fraction
from typing import Callable, Dict, Optional, Tuple

import z3

from .errors import IntervalError
from .interval import Interval

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT_MS = 5000


class Verdict(Enum):
    PROVEN = "proven"
    VIOLATED = "violated"
    UNKNOWN = "unknown"


@dataclass
class EnclosureReport:
    """Outcome of an enclosure check."""
    op: str
    verdict: Verdict
    witness: Optional[Dict[str, Fraction]] = None

    @property
    def is_proven(self) -> bool:
        return self.verdict is Verdict.PROVEN

    def summary(self) -> str:
        if self.witness is None:
            return f"{self.op}: {self.verdict.value}"
        parts = ", ".join(f"{k}={v}" for k, v in sorted(self.witness.items()))
        return f"{self.op}: {self.verdict.value} ({parts})"


_BINARY_OPS: Dict[str, Callable[[z3.ArithRef, z3.ArithRef], z3.ArithRef]] = {
    "add": lambda x, y: x + y,
    "sub": lambda x, y: x - y,
    "mul": lambda x, y: x * y,
    "div": lambda x, y: x / y,
}
UNARY_OPS = ("neg",)
OPS = UNARY_OPS + tuple(_BINARY_OPS)


def real_val(v: float) -> z3.ArithRef:
    """Exact Z3 rational for a finite double."""
    f = Fraction(v)
    return z3.Q(f.numerator, f.denominator)


def membership(var: z3.ArithRef, iv: Interval) -> z3.BoolRef:
    """Constraint ``var ∈ iv``."""
    if iv.is_empty():
        return z3.BoolVal(False)
    constraints = []
    if not math.isinf(iv.a):
        lo = real_val(iv.a)
        constraints.append(var >= lo if iv.left_is_closed() else var > lo)
    if not math.isinf(iv.b):
        hi = real_val(iv.b)
        constraints.append(var <= hi if iv.right_is_closed() else var < hi)
    if not constraints:
        return z3.BoolVal(True)
    return z3.And(*constraints)


def _to_fraction(v: z3.ExprRef) -> Fraction:
    if z3.is_rational_value(v):
        return Fraction(v.numerator_as_long(), v.denominator_as_long())
    if z3.is_algebraic_value(v):
        return _to_fraction(v.approx(20))
    raise IntervalError(f"not a numeral: {v}")


def _operation_constraints(
    op: str, x: Interval, y: Optional[Interval]
) -> Tuple[list, z3.ArithRef, Dict[str, z3.ArithRef]]:
    vx, vy, vz = z3.Reals("x y z")
    if op in UNARY_OPS:
        return [membership(vx, x), vz == -vx], vz, {"x": vx, "z": vz}
    if op not in _BINARY_OPS:
        raise ValueError(f"unsupported operation: {op!r} (expected one of {', '.join(OPS)})")
    if y is None:
        raise ValueError(f"{op} needs two operands")
    constraints = [membership(vx, x), membership(vy, y), vz == _BINARY_OPS[op](vx, vy)]
    if op == "div":
        constraints.append(vy != 0)
    return constraints, vz, {"x": vx, "y": vy, "z": vz}


def check_enclosure(
    op: str,
    x: Interval,
    y: Optional[Interval],
    result: Interval,
    timeout_ms: int = DEFAULT_TIMEOUT_MS,
) -> EnclosureReport:
    """
    Check that ``result`` contains ``x op y`` for every ``x ∈ X, y ∈ Y``.

    ``y`` is ignored (and may be None) for unary operations.
    """
    constraints, vz, variables = _operation_constraints(op, x, y)

    solver = z3.Solver()
    solver.set("timeout", timeout_ms)
    solver.add(*constraints)
    solver.add(z3.Not(membership(vz, result)))

    status = solver.check()
    logger.debug("enclosure %s %s %s -> %s: %s", op, x, y, result, status)
    if status == z3.unsat:
        return EnclosureReport(op, Verdict.PROVEN)
    if status == z3.sat:
        model = solver.model()
        witness = {
            name: _to_fraction(model.eval(var, model_completion=True))
            for name, var in variables.items()
        }
        return EnclosureReport(op, Verdict.VIOLATED, witness)
    return EnclosureReport(op, Verdict.UNKNOWN)


def check_attained(
    op: str,
    x: Interval,
    y: Optional[Interval],
    result: Interval,
    timeout_ms: int = DEFAULT_TIMEOUT_MS,
) -> Dict[str, Verdict]:
    """
    For each closed, finite bound of ``result``, check that some operand
    pair produces exactly that bound.

    Returns a mapping with keys ``"left"`` and ``"right"`` for the bounds
    that were checked: PROVEN if the bound is attained, VIOLATED if it is
    not (the bound should have been open), UNKNOWN on solver timeout.
    """
    constraints, vz, _ = _operation_constraints(op, x, y)
    if result.is_empty():
        return {}

    bounds = {}
    if result.left_is_closed() and not math.isinf(result.a):
        bounds["left"] = result.a
    if result.right_is_closed() and not math.isinf(result.b):
        bounds["right"] = result.b

    verdicts = {}
    for side, bound in bounds.items():
        solver = z3.Solver()
        solver.set("timeout", timeout_ms)
        solver.add(*constraints)
        solver.add(vz == real_val(bound))
        status = solver.check()
        logger.debug("attained %s %s %s at %s=%s: %s", op, x, y, side, bound, status)
        if status == z3.sat:
            verdicts[side] = Verdict.PROVEN
        elif status == z3.unsat:
            verdicts[side] = Verdict.VIOLATED
        else:
            verdicts[side] = Verdict.UNKNOWN
    return verdicts


def compute(op: str, x: Interval, y: Optional[Interval] = None) -> Tuple[Interval, Optional[IntervalError]]:
    """Apply an arithmetic operation by name; the error slot is only used by ``div``."""
    from .arith import add, div, mul, negate, sub

    if op == "neg":
        return negate(x), None
    if y is None:
        raise ValueError(f"{op} needs two operands")
    if op == "div":
        return div(x, y)
    funcs = {"add": add, "sub": sub, "mul": mul}
    if op not in funcs:
        raise ValueError(f"unsupported operation: {op!r} (expected one of {', '.join(OPS)})")
    return funcs[op](x, y), None


def verify(
    op: str,
    x: Interval,
    y: Optional[Interval] = None,
    timeout_ms: int = DEFAULT_TIMEOUT_MS,
) -> Tuple[Interval, Optional[IntervalError], EnclosureReport]:
    """Compute ``x op y`` with the library and check the result with Z3."""
    result, err = compute(op, x, y)
    return result, err, check_enclosure(op, x, y, result, timeout_ms)
