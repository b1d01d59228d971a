# -----------------------------------------------------------------------------
# Coefficient validator
# Purpose:
#   Turn user-typed coefficient text into a finite float, or an Err carrying a
#   PrecisionError. Only plain decimal text is accepted:
#     optional leading '-', digits, optional single '.' with digits
# Rules (in order):
#   1) any exponent marker (e/E) is rejected, even "1e2"
#   2) anything else that is not plain decimal is rejected
#   3) values that parse to +/-inf or exceed MAX_MAGNITUDE are rejected, so
#      b^2 - 4ac can never overflow a double
# -----------------------------------------------------------------------------

from __future__ import annotations
import math
import re
import sys

from .types import Err, Ok, Outcome, PrecisionError

# |b^2 - 4ac| <= 5 * M^2 when every coefficient is bounded by M; keep margin.
MAX_MAGNITUDE = math.sqrt(sys.float_info.max / 8)

_PLAIN_DECIMAL = re.compile(r"-?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)")


def validate(text: str) -> Outcome[float]:
    # ASCII whitespace only; Unicode spaces are not part of the accepted surface
    s = (text or "").strip(" \t\r\n")

    if "e" in s.lower():
        return Err(PrecisionError(
            f"Scientific notation is not allowed: {text!r}. Enter a plain decimal number.",
            kind="scientific_notation",
        ))

    if not _PLAIN_DECIMAL.fullmatch(s):
        return Err(PrecisionError(
            f"The value you entered is not allowed: {text!r}",
            kind="not_a_number",
        ))

    value = float(s)
    if not math.isfinite(value) or abs(value) > MAX_MAGNITUDE:
        return Err(PrecisionError(
            f"The value {s[:32]}{'...' if len(s) > 32 else ''} is too large to solve accurately.",
            kind="overflow",
        ))
    return Ok(value)
