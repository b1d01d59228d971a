import itertools
import pytest
from qsolve.pipeline import solve_text
from qsolve.roots import discriminant, solve
from qsolve.types import ComplexPair

EPS = 1e-10

def _sorted_roots(a, b, c):
    return sorted(solve(a, b, c).value.roots())

@pytest.mark.parametrize("k", [2, -3, 0.5, 10])
def test_scaling_keeps_real_roots(k):
    a, b, c = 1, -3, 2
    base = _sorted_roots(a, b, c)
    scaled = _sorted_roots(k * a, k * b, k * c)
    assert len(base) == len(scaled)
    for r, s in zip(base, scaled):
        assert abs(r - s) < EPS

@pytest.mark.parametrize("k", [3, -0.25])
def test_scaling_keeps_complex_roots(k):
    base = solve(1, 2, 10).value
    scaled = solve(k, 2 * k, 10 * k).value
    assert isinstance(scaled, ComplexPair)
    assert abs(base.re - scaled.re) < EPS
    assert abs(base.im - scaled.im) < EPS

def test_scaling_keeps_repeated_root():
    assert solve(1, 4, 4).value == solve(-7, -28, -28).value

@pytest.mark.parametrize("a, b, c", [(1, -5, 6), (2, -7, 3), (1, 1, -6)])
def test_reciprocal_relation(a, b, c):
    roots = _sorted_roots(a, b, c)
    expected = sorted(1.0 / r for r in roots)
    swapped = _sorted_roots(c, b, a)
    for e, s in zip(expected, swapped):
        assert abs(e - s) < EPS

@pytest.mark.parametrize("a, b, c", [(1, -5, 6), (2, -7, 3), (1, -1, -2), (3, 6, 3)])
def test_sum_and_product_of_roots(a, b, c):
    roots = solve(a, b, c).value.roots()
    if len(roots) == 1:
        roots = roots * 2
    r1, r2 = roots
    assert abs((r1 + r2) - (-b / a)) < EPS
    assert abs(r1 * r2 - c / a) < EPS

def test_sum_and_product_over_small_integer_grid():
    checked = 0
    for a, b, c in itertools.product([1, 2, 3, -1, -2], range(-5, 6), range(-5, 6)):
        if discriminant(a, b, c) <= 0:
            continue
        r1, r2 = solve(a, b, c).value.roots()
        assert abs((r1 + r2) - (-b / a)) < EPS
        assert abs(r1 * r2 - c / a) < EPS
        checked += 1
    assert checked > 50

def test_shifting_roots():
    # x^2 - 3x + 2 has roots 1, 2; shifting by h = 1 gives x^2 - 5x + 6
    r1, r2 = _sorted_roots(1, -3, 2)
    s1, s2 = _sorted_roots(1, -5, 6)
    assert abs(s1 - (r1 + 1)) < 1e-4
    assert abs(s2 - (r2 + 1)) < 1e-4

@pytest.mark.parametrize("a, b, c", [
    ("1", "100000000", "1"),
    ("1", "-12345678.9", "0.5"),
    ("-2", "98765432.1", "3"),
])
def test_sum_and_product_when_b_dominates(a, b, c):
    fa, fb, fc = float(a), float(b), float(c)
    r1, r2 = solve(fa, fb, fc).value.roots()
    # the sum is only representable to a few ulps of -b/a
    assert abs((r1 + r2) - (-fb / fa)) < EPS * max(1.0, abs(fb / fa))
    assert abs(r1 * r2 - fc / fa) < EPS
    assert solve_text(a, b, c).verified is True
