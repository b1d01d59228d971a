# --- Quadratic Solver API (FastAPI) -------------------------------------------
# Purpose: Minimal API that (1) validates single coefficient strings and
# (2) solves a x^2 + b x + c = 0 from three coefficient strings, returning the
# display lines, structured roots, residuals and the full trace.
# ------------------------------------------------------------------------------

from __future__ import annotations
from typing import Any, Dict
from fastapi import FastAPI
from pydantic import BaseModel

from qsolve.config import load_settings
from qsolve.pipeline import solve_text
from qsolve.tracer import save_trace
from qsolve.types import Err
from qsolve.validator import validate

settings = load_settings()

app = FastAPI(title="Quadratic Solver API")

# ----------------------------- Schemas ----------------------------------------
class ValidateRequest(BaseModel):
    # One coefficient exactly as the user typed it.
    text: str

class Validated(BaseModel):
    ok: bool
    value: float | None = None
    error: str | None = None
    error_kind: str | None = None

class SolveRequest(BaseModel):
    # Coefficients stay text so the validator sees what the user typed.
    a: str
    b: str
    c: str

# ----------------------------- Routes -----------------------------------------
@app.get("/health")
def health(): return {"ok": True}

@app.post("/validate", response_model=Validated)
def validate_coefficient(req: ValidateRequest):
    """
    Check one coefficient. Rejections are a normal response (ok=false) with
    the PrecisionError message and kind, not an HTTP error.
    """
    checked = validate(req.text)
    if isinstance(checked, Err):
        return Validated(ok=False, error=checked.error.message, error_kind=checked.error.kind)
    return Validated(ok=True, value=checked.value)

@app.post("/solve")
def solve(req: SolveRequest) -> Dict[str, Any]:
    """
    Core solving path:
    1) validate a, b, c; 2) classify + solve; 3) format lines; 4) verify.
    User-input failures return ok=false with error/error_kind and the trace.
    """
    report = solve_text(req.a, req.b, req.c, settings)
    payload = report.to_dict()
    payload["trace"] = payload.pop("full_trace")
    if settings.save_traces:
        payload["trace_path"] = save_trace({"input": req.model_dump(), **payload}, settings.trace_dir)
    return payload
