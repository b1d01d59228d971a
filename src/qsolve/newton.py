# -----------------------------------------------------------------------------
# Newton square root
# Purpose:
#   Non-negative real square root by Newton-Raphson iteration on t^2 - x,
#   so that precision and iteration behaviour stay under our control instead
#   of delegating to math.sqrt.
# Notes:
#   - sqrt_newton(0) returns exactly 0.0 (the update divides by t).
#   - Non-convergence is not an error: the last iterate is returned.
# -----------------------------------------------------------------------------

from __future__ import annotations
from typing import Iterator

DEFAULT_TOLERANCE = 1e-10
# Enough for the full double range: from t0 = 1e308 the iterate halves
# roughly 512 times before quadratic convergence kicks in.
DEFAULT_MAX_ITERATIONS = 1500


def newton_steps(x: float, max_iterations: int = DEFAULT_MAX_ITERATIONS) -> Iterator[float]:
    """
    Yield successive Newton iterates for sqrt(x), starting from t0 = x.
    The starting guess itself is not yielded; at most max_iterations values are.
    """
    if x < 0:
        raise ValueError(f"sqrt_newton requires x >= 0, got {x}")
    if x == 0:
        return
    t = float(x)
    for _ in range(max_iterations):
        t = (t + x / t) / 2
        yield t


def sqrt_newton(x: float,
                tolerance: float = DEFAULT_TOLERANCE,
                max_iterations: int = DEFAULT_MAX_ITERATIONS) -> float:
    """
    Square root of x >= 0.

    Parameters
    ----------
    x : float
        Radicand; negative values raise ValueError.
    tolerance : float
        Stop once two successive iterates differ by less than tolerance
        relative to the newer one.
    max_iterations : int
        Hard cap on the number of updates.

    Returns
    -------
    float
        The last iterate computed.
    """
    if x < 0:
        raise ValueError(f"sqrt_newton requires x >= 0, got {x}")
    if x == 0:
        return 0.0
    prev = float(x)
    for t in newton_steps(x, max_iterations):
        if abs(t - prev) < tolerance * t:
            return t
        prev = t
    return prev
