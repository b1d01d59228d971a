# -----------------------------------------------------------------------------
# dev_up.py: Dev Orchestrator for the Quadratic Solver
# Boots FastAPI (uvicorn) + Streamlit UI and relays their logs.
# Key details:
#   - Binds API to API_HOST; health probe always connects via 127.0.0.1 when
#     bound to 0.0.0.0
#   - Settings come from qsolve.config (environment + .env)
# -----------------------------------------------------------------------------

from __future__ import annotations
import atexit
import os
import sys
import time
import subprocess
import urllib.request
from pathlib import Path

PROJECT_ROOT = Path(__file__).parent.resolve()
sys.path.insert(0, str(PROJECT_ROOT / "src"))

from qsolve.config import load_settings  # noqa: E402

API_APP = "api.main:app"              # uvicorn import path for FastAPI app
UI_FILE = PROJECT_ROOT / "ui" / "app.py"

def echo(msg: str): print(f"[dev_up] {msg}", flush=True)
def fail(msg: str, code: int = 1): echo(f"❌ {msg}"); sys.exit(code)

def which_or_fail(pkg: str, hint: str):
    try:
        __import__(pkg)
    except ImportError:
        fail(f"{pkg} missing → {hint}")

def wait_for_api(url: str, timeout: float = 30.0) -> bool:
    start = time.time()
    while time.time() - start < timeout:
        try:
            with urllib.request.urlopen(url, timeout=2) as r:
                if r.status == 200:
                    return True
        except OSError:
            time.sleep(0.4)
    return False

def start(cmd: list, env: dict) -> subprocess.Popen:
    echo(f"▶ {' '.join(cmd)}")
    return subprocess.Popen(cmd, cwd=str(PROJECT_ROOT), env=env,
                            stdout=subprocess.PIPE, stderr=subprocess.STDOUT, text=True)

def main():
    settings = load_settings()
    which_or_fail("uvicorn", "pip install uvicorn[standard]")
    which_or_fail("streamlit", "pip install streamlit")

    env = os.environ.copy()
    env["PYTHONPATH"] = os.pathsep.join(p for p in (env.get("PYTHONPATH", ""), str(PROJECT_ROOT / "src"), str(PROJECT_ROOT)) if p)
    env.setdefault("API_URL", settings.api_url)

    api = start([sys.executable, "-m", "uvicorn", API_APP, "--host", settings.api_host,
                 "--port", str(settings.api_port), "--reload"], env)
    ui = None

    def cleanup():
        for proc in (ui, api):
            if proc and proc.poll() is None:
                proc.terminate()
                time.sleep(0.5)
                if proc.poll() is None:
                    proc.kill()
    atexit.register(cleanup)

    echo("⌛ Waiting for API /health ...")
    if not wait_for_api(f"{settings.api_url}/health"):
        fail("API failed to become ready in time.")
    echo("✅ API ready")

    ui = start([sys.executable, "-m", "streamlit", "run", str(UI_FILE),
                "--server.port", str(settings.ui_port), "--server.headless", "true"], env)
    echo(f"🌐 UI running at: http://localhost:{settings.ui_port}")
    echo(f"📘 API docs: {settings.api_url}/docs")

    try:
        while True:
            for name, proc in (("API", api), ("UI", ui)):
                line = proc.stdout.readline() if proc.stdout else ""
                if line:
                    print(f"[{name}] {line}", end="")
            if api.poll() is not None or ui.poll() is not None:
                break
            time.sleep(0.2)
    except KeyboardInterrupt:
        echo("🛑 Ctrl+C pressed, shutting down...")
    finally:
        cleanup()
        echo("✅ All processes stopped cleanly.")

if __name__ == "__main__":
    main()
