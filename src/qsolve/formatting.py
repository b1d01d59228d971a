from __future__ import annotations
import math
from decimal import Decimal
from typing import List

from .types import ComplexPair, RepeatedReal, RootResult, TwoReal


def format_number(value: float) -> str:
    """
    Canonical text for a number: integral values without a fractional part
    ("5", never "5.0" or "-0"), everything else as the shortest positional
    decimal that round-trips ("5.5", "0.0000001"), never scientific notation.
    """
    if not math.isfinite(value):
        # "inf" would carry the complex-root "i" marker into a real line
        raise ValueError(f"Cannot format non-finite value {value!r}")
    if value == 0:
        return "0"
    if float(value).is_integer():
        return str(int(value))
    # repr gives the shortest round-tripping digits; Decimal drops the exponent.
    return format(Decimal(repr(float(value))), "f")


def format_roots(result: RootResult) -> List[str]:
    # Consumers detect one root by the missing "x2 =" line and complex roots
    # by the "i" marker, so real lines must never contain an "i".
    if isinstance(result, RepeatedReal):
        return [f"x1 = {format_number(result.root)}"]
    if isinstance(result, TwoReal):
        return [f"x1 = {format_number(result.r1)}", f"x2 = {format_number(result.r2)}"]
    if isinstance(result, ComplexPair):
        re_s, im_s = format_number(result.re), format_number(result.im)
        return [f"x1 = {re_s} + {im_s}i", f"x2 = {re_s} - {im_s}i"]
    raise TypeError(f"Unknown root result: {result!r}")


def describe(result: RootResult) -> str:
    if isinstance(result, RepeatedReal):
        return f"The equation has one repeated real root, {format_number(result.root)}."
    if isinstance(result, TwoReal):
        return "The equation has two distinct real roots."
    return "The equation has no real roots; the roots are a complex conjugate pair."
