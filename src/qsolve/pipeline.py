# -----------------------------------------------------------------------------
# Pipeline: End-to-end solve from coefficient text
# Responsibilities:
#   • Validate the three coefficient strings (first failure wins)
#   • Solve via the root solver (discriminant classification + Newton sqrt)
#   • Format display lines and a one-sentence summary
#   • Verify roots with exact residuals
#   • Record every step on a Tracer and fold failures into a SolveReport
# -----------------------------------------------------------------------------

from __future__ import annotations
from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Optional

from .config import Settings
from .formatting import describe, format_number, format_roots
from .roots import discriminant, solve
from .tracer import Tracer
from .types import ComplexPair, Err, PrecisionError
from .validator import validate
from .verify import residual_check

COEFFICIENT_NAMES = ("a", "b", "c")


@dataclass
class SolveReport:
    # Structured response used by the shell and the API layer
    ok: bool
    coefficients: Dict[str, float] | None = None
    discriminant: float | None = None
    kind: str | None = None           # "repeated" | "real" | "complex"
    lines: List[str] = field(default_factory=list)
    roots: List[Dict[str, Any]] = field(default_factory=list)
    summary: str = ""
    residuals: Dict[str, float] = field(default_factory=dict)
    verified: bool | None = None
    full_trace: List[Dict[str, Any]] = field(default_factory=list)
    error: str | None = None
    error_kind: str | None = None     # PrecisionError.kind

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def _root_rows(result) -> List[Dict[str, Any]]:
    # JSON-friendly roots; complex values split into re/im
    rows = []
    for i, r in enumerate(result.roots(), start=1):
        if isinstance(result, ComplexPair):
            rows.append({"name": f"x{i}", "re": r.real, "im": r.imag,
                         "text": f"{format_number(r.real)} {'+' if r.imag > 0 else '-'} {format_number(abs(r.imag))}i"})
        else:
            rows.append({"name": f"x{i}", "re": r, "im": 0.0, "text": format_number(r)})
    return rows


def _failed(trace: Tracer, err: PrecisionError, **partial: Any) -> SolveReport:
    trace.add("error", {"kind": err.kind, "message": err.message})
    return SolveReport(ok=False, full_trace=trace.steps(), error=err.message, error_kind=err.kind, **partial)


def solve_text(a_text: str, b_text: str, c_text: str, settings: Optional[Settings] = None) -> SolveReport:
    """
    Main orchestration:
      1) validate a, b, c (reporting which coefficient was rejected)
      2) solve; a = 0 and non-finite results come back as errors
      3) format lines and summary
      4) verify residuals against the original coefficients
    """
    settings = settings or Settings()
    trace = Tracer()
    texts = dict(zip(COEFFICIENT_NAMES, (a_text, b_text, c_text)))
    trace.add("inputs_raw", dict(texts))

    coeffs: Dict[str, float] = {}
    for name, text in texts.items():
        checked = validate(text)
        if isinstance(checked, Err):
            err = checked.error
            named = PrecisionError(f"Coefficient '{name}': {err.message}", kind=err.kind)
            return _failed(trace, named)
        coeffs[name] = checked.value
        trace.add("coefficient", {"name": name, "text": text, "value": checked.value})

    a, b, c = coeffs["a"], coeffs["b"], coeffs["c"]
    d = discriminant(a, b, c)
    trace.add("discriminant", {"expr": "b^2 - 4ac", "value": d})

    solved = solve(a, b, c, settings.sqrt_tolerance, settings.sqrt_max_iterations)
    if isinstance(solved, Err):
        return _failed(trace, solved.error, coefficients=coeffs, discriminant=d)
    result = solved.value
    lines = format_roots(result)
    trace.add("classification", {"kind": result.kind, "lines": lines})

    verification = residual_check(a, b, c, result, settings.residual_tolerance)
    trace.add("verification", {"residuals": verification.residuals, "passed": verification.passed})

    return SolveReport(
        ok=True,
        coefficients=coeffs,
        discriminant=d,
        kind=result.kind,
        lines=lines,
        roots=_root_rows(result),
        summary=describe(result),
        residuals=verification.residuals,
        verified=verification.passed,
        full_trace=trace.steps(),
    )
