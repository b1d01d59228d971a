# -----------------------------------------------------------------------------
# Interactive shell
# Purpose:
#   Console loop: ask for a, b, c one at a time (re-prompting a coefficient
#   until it is accepted), print the root lines verbatim, then ask whether to
#   solve another equation. Input/output functions are injectable for tests.
# Run:
#   python -m qsolve.shell
# -----------------------------------------------------------------------------

from __future__ import annotations
import sys
from typing import Callable, Optional

from .config import Settings, load_settings
from .formatting import format_roots
from .roots import require_quadratic, solve
from .types import Err
from .validator import validate

Reader = Callable[[str], str]
Writer = Callable[[str], None]

AGAIN_PROMPT = "Solve another equation? (y/n): "


def _read_coefficient(name: str, read: Reader, write: Writer) -> float:
    while True:
        checked = validate(read(f"Enter coefficient {name}: "))
        if not isinstance(checked, Err) and name == "a":
            checked = require_quadratic(checked.value)
        if isinstance(checked, Err):
            write(f"Error: {checked.error.message}")
            continue
        return checked.value


def run(read: Reader = input, write: Writer = print, settings: Optional[Settings] = None) -> int:
    settings = settings or load_settings()
    write("Quadratic equation solver: a*x^2 + b*x + c = 0")
    try:
        while True:
            a = _read_coefficient("a", read, write)
            b = _read_coefficient("b", read, write)
            c = _read_coefficient("c", read, write)
            solved = solve(a, b, c, settings.sqrt_tolerance, settings.sqrt_max_iterations)
            if isinstance(solved, Err):
                write(f"Error: {solved.error.message}")
            else:
                for line in format_roots(solved.value):
                    write(line)
            if not read(AGAIN_PROMPT).strip().lower().startswith("y"):
                break
    except (EOFError, KeyboardInterrupt):
        write("")
    return 0


def main():
    sys.exit(run())


if __name__ == "__main__":
    main()
