# -----------------------------------------------------------------------------
# Residual verification
# Purpose:
#   Check floating-point roots against the polynomial a x^2 + b x + c using
#   exact rational arithmetic (SymPy), so the check itself adds no rounding.
#   Residuals are relative: |p(r)| / (|a||r|^2 + |b||r| + |c|).
# -----------------------------------------------------------------------------

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict
from sympy import I, Abs, Rational, expand, N

from .types import RootResult

RESIDUAL_TOL = 1e-9


@dataclass
class Verification:
    residuals: Dict[str, float] = field(default_factory=dict)
    passed: bool = True


def _exact(z: complex):
    # Rational(float) keeps the exact binary value of the double.
    return Rational(z.real) + I * Rational(z.imag)


def residual_check(a: float, b: float, c: float, result: RootResult,
                   tolerance: float = RESIDUAL_TOL) -> Verification:
    qa, qb, qc = Rational(a), Rational(b), Rational(c)

    out = Verification()
    for i, root in enumerate(result.roots(), start=1):
        r = _exact(complex(root))
        value = expand(qa * r**2 + qb * r + qc)
        scale = Abs(qa) * Abs(r) ** 2 + Abs(qb) * Abs(r) + Abs(qc)
        rel = N(Abs(value) / scale) if scale != 0 else N(Abs(value))
        out.residuals[f"x{i}"] = float(rel)
    out.passed = all(v <= tolerance for v in out.residuals.values())
    return out
