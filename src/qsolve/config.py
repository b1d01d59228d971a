# -----------------------------------------------------------------------------
# Configuration
# Purpose:
#   Read solver, tracing and service settings from the environment (with an
#   optional .env file) into one immutable Settings value.
# -----------------------------------------------------------------------------

from __future__ import annotations
import os
from dataclasses import dataclass
from dotenv import load_dotenv

from .newton import DEFAULT_MAX_ITERATIONS, DEFAULT_TOLERANCE
from .verify import RESIDUAL_TOL

# Load .env for local overrides (tolerances, trace dir, ports)
load_dotenv()


def _flag(value: str) -> bool:
    return value.strip().lower() in ("1", "true", "yes", "on")


@dataclass(frozen=True)
class Settings:
    sqrt_tolerance: float = DEFAULT_TOLERANCE
    sqrt_max_iterations: int = DEFAULT_MAX_ITERATIONS
    residual_tolerance: float = RESIDUAL_TOL
    trace_dir: str = "traces"
    save_traces: bool = False
    api_host: str = "127.0.0.1"
    api_port: int = 8000
    ui_port: int = 8501
    api_url: str = "http://127.0.0.1:8000"


def load_settings() -> Settings:
    api_host = os.getenv("API_HOST", "127.0.0.1")
    api_port = int(os.getenv("API_PORT", "8000"))
    # 0.0.0.0 is a bind address, not something a client can connect to
    client_host = "127.0.0.1" if api_host in ("0.0.0.0", "0") else api_host
    return Settings(
        sqrt_tolerance=float(os.getenv("QSOLVE_SQRT_TOLERANCE", str(DEFAULT_TOLERANCE))),
        sqrt_max_iterations=int(os.getenv("QSOLVE_SQRT_MAX_ITERATIONS", str(DEFAULT_MAX_ITERATIONS))),
        residual_tolerance=float(os.getenv("QSOLVE_RESIDUAL_TOLERANCE", str(RESIDUAL_TOL))),
        trace_dir=os.getenv("TRACE_DIR", "traces"),
        save_traces=_flag(os.getenv("SAVE_TRACES", "0")),
        api_host=api_host,
        api_port=api_port,
        ui_port=int(os.getenv("UI_PORT", "8501")),
        api_url=os.getenv("API_URL", f"http://{client_host}:{api_port}"),
    )
