# -----------------------------------------------------------------------------
# Root solver
# Purpose:
#   Classify the discriminant of a x^2 + b x + c and apply the quadratic
#   formula with the Newton square root.
#     D == 0 -> RepeatedReal(-b/2a)
#     D >  0 -> TwoReal((-b - sqrt(D))/2a, (-b + sqrt(D))/2a)
#     D <  0 -> ComplexPair(-b/2a, sqrt(-D)/|2a|)
#   Real roots are evaluated as q/a and c/q with q = -(b + sign(b) sqrt(D))/2,
#   the same values without cancellation when b^2 >> 4ac.
# Failures come back as Err(PrecisionError); nothing is raised for bad input.
# -----------------------------------------------------------------------------

from __future__ import annotations
import math

from .newton import DEFAULT_MAX_ITERATIONS, DEFAULT_TOLERANCE, sqrt_newton
from .types import (
    ComplexPair, Err, Ok, Outcome, PrecisionError, RepeatedReal, RootResult, TwoReal,
)

ZERO_LEADING_MESSAGE = "Coefficient 'a' cannot be zero; the equation is not quadratic."


def require_quadratic(a: float) -> Outcome[float]:
    # Shared by the solver and the shell, which rejects a = 0 at its prompt.
    if a == 0:
        return Err(PrecisionError(ZERO_LEADING_MESSAGE, kind="zero_leading"))
    return Ok(a)


def sign(x: float) -> int:
    # Zero counts as positive so q stays nonzero when b == 0 and D > 0.
    return -1 if x < 0 else 1


def discriminant(a: float, b: float, c: float) -> float:
    return b * b - 4 * a * c


def solve(a: float, b: float, c: float,
          tolerance: float = DEFAULT_TOLERANCE,
          max_iterations: int = DEFAULT_MAX_ITERATIONS) -> Outcome[RootResult]:
    checked = require_quadratic(a)
    if not checked.ok:
        return checked

    d = discriminant(a, b, c)
    two_a = 2 * a

    # Adding 0.0 turns a signed zero (-0.0) into 0.0.
    if d == 0:
        result: RootResult = RepeatedReal(-b / two_a + 0.0)
    elif d > 0:
        s = sqrt_newton(d, tolerance, max_iterations)
        # b and sign(b)*s never cancel, so q keeps full precision; the
        # smaller-magnitude root comes from c/q instead of -b +/- s.
        q = -(b + sign(b) * s) / 2
        if sign(b) > 0:
            # q/a is the -sqrt(D) branch
            result = TwoReal(q / a + 0.0, c / q + 0.0)
        else:
            result = TwoReal(c / q + 0.0, q / a + 0.0)
    else:
        s = sqrt_newton(-d, tolerance, max_iterations)
        result = ComplexPair(-b / two_a + 0.0, s / abs(two_a))

    # A subnormal a can push a finite numerator to infinity.
    values = [result.re, result.im] if isinstance(result, ComplexPair) else list(result.roots())
    if not all(math.isfinite(v) for v in values):
        return Err(PrecisionError())
    return Ok(result)
