# -----------------------------------------------------------------------------
# Tracing utility
# Purpose:
#   Append-only trace collector recording the steps of one solve (inputs,
#   validated coefficients, discriminant, classification, verification,
#   errors), plus JSON persistence of finished runs.
# -----------------------------------------------------------------------------

from __future__ import annotations
import json
import os
import time
from dataclasses import dataclass
from typing import Any, Dict, List


@dataclass
class TraceStep:
    # One trace record with a short 'kind' label and free-form structured detail.
    kind: str
    detail: Dict[str, Any]


class Tracer:
    def __init__(self): self._steps: List[TraceStep] = []
    def add(self, kind: str, detail: Dict[str, Any]): self._steps.append(TraceStep(kind, detail))
    def kinds(self) -> List[str]: return [s.kind for s in self._steps]
    def steps(self) -> List[Dict[str, Any]]:
        # Export in plain dict form for easy JSON serialization.
        return [{"kind": s.kind, "detail": s.detail} for s in self._steps]


def ts() -> str:
    return time.strftime("%Y%m%d_%H%M%SZ", time.gmtime())


def save_trace(payload: Dict[str, Any], trace_dir: str) -> str:
    """Write one run to <trace_dir>/run_<timestamp>.json and return the path."""
    os.makedirs(trace_dir, exist_ok=True)
    stem = f"run_{ts()}"
    fpath = os.path.join(trace_dir, f"{stem}.json")
    n = 1
    while os.path.exists(fpath):
        # several solves inside the same second
        fpath = os.path.join(trace_dir, f"{stem}_{n}.json")
        n += 1
    with open(fpath, "w", encoding="utf-8") as f:
        json.dump(payload, f, indent=2)
    return fpath
