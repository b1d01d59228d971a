from qsolve.config import Settings
from qsolve.pipeline import solve_text

def _kinds(report):
    return [s["kind"] for s in report.full_trace]

def test_real_roots_end_to_end():
    out = solve_text("1", "5", "4")
    assert out.ok
    assert out.kind == "real"
    assert out.lines == ["x1 = -4", "x2 = -1"]
    assert out.coefficients == {"a": 1.0, "b": 5.0, "c": 4.0}
    assert out.discriminant == 9.0
    assert [r["text"] for r in out.roots] == ["-4", "-1"]
    assert out.verified is True
    assert _kinds(out) == ["inputs_raw", "coefficient", "coefficient", "coefficient",
                           "discriminant", "classification", "verification"]

def test_complex_roots_end_to_end():
    out = solve_text("1", "2", "10")
    assert out.ok
    assert out.kind == "complex"
    assert out.lines == ["x1 = -1 + 3i", "x2 = -1 - 3i"]
    assert [r["text"] for r in out.roots] == ["-1 + 3i", "-1 - 3i"]
    assert out.roots[1]["im"] == -3.0
    assert "complex" in out.summary

def test_repeated_root_end_to_end():
    out = solve_text("1", "2", "1")
    assert out.lines == ["x1 = -1"]
    assert out.kind == "repeated"

def test_scientific_notation_names_the_coefficient():
    out = solve_text("1e2", "1", "1")
    assert not out.ok
    assert out.error_kind == "scientific_notation"
    assert out.error.startswith("Coefficient 'a'")
    assert out.lines == []
    assert _kinds(out) == ["inputs_raw", "error"]

def test_bad_middle_coefficient():
    out = solve_text("1", "x", "1")
    assert not out.ok
    assert out.error_kind == "not_a_number"
    assert "'b'" in out.error

def test_zero_leading_coefficient_keeps_partial_context():
    out = solve_text("0", "1", "1")
    assert not out.ok
    assert out.error_kind == "zero_leading"
    assert "'a' cannot be zero" in out.error
    assert out.coefficients == {"a": 0.0, "b": 1.0, "c": 1.0}
    assert out.discriminant == 1.0

def test_iteration_cap_is_best_effort_and_fails_verification():
    # one Newton update from 16 gives 8.5, so q = -4.25 and the roots are
    # q/a = -4.25 and c/q = 16/17 instead of -2 and 2
    out = solve_text("1", "0", "-4", Settings(sqrt_max_iterations=1))
    assert out.ok
    assert out.lines[0] == "x1 = -4.25"
    assert out.roots[1]["re"] == -4.0 / -4.25
    assert out.verified is False

def test_large_linear_coefficient_is_verified():
    out = solve_text("1", "100000000", "1")
    assert out.ok
    assert out.verified is True
    assert all(r < 1e-12 for r in out.residuals.values())

def test_report_serialises():
    data = solve_text("1", "5", "4").to_dict()
    assert data["ok"] is True
    assert set(data) >= {"lines", "roots", "residuals", "full_trace", "error", "error_kind"}
