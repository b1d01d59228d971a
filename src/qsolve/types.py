# -----------------------------------------------------------------------------
# Types module: Shared value types for the quadratic solver
# Purpose:
#   Define the tagged root results, the single error kind (PrecisionError),
#   and the explicit Ok/Err outcome values passed between validator, solver,
#   formatter and pipeline.
# -----------------------------------------------------------------------------

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Generic, Tuple, TypeVar, Union

T = TypeVar("T")

DEFAULT_PRECISION_MESSAGE = "Not enough precision to calculate an accurate solution"


class PrecisionError(Exception):
    """
    Input or structural condition that prevents a numerically meaningful solve.
    kind is one of:
      - 'scientific_notation': coefficient text uses an exponent marker
      - 'not_a_number': coefficient text is not a plain decimal
      - 'overflow': coefficient magnitude would overflow the arithmetic
      - 'zero_leading': a == 0, the equation is not quadratic
      - 'precision_loss': the formula produced a non-finite value
    """
    def __init__(self, message: str = DEFAULT_PRECISION_MESSAGE, kind: str = "precision_loss"):
        super().__init__(message)
        self.message = message
        self.kind = kind


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T
    ok = True

    def unwrap(self) -> T:
        return self.value


@dataclass(frozen=True)
class Err:
    error: PrecisionError
    ok = False

    def unwrap(self) -> Any:
        # Re-raise for callers that prefer exceptions over explicit results.
        raise self.error


Outcome = Union[Ok[T], Err]


@dataclass(frozen=True)
class RepeatedReal:
    # Discriminant is zero: single root -b/2a.
    root: float
    kind = "repeated"

    def roots(self) -> Tuple[float, ...]:
        return (self.root,)


@dataclass(frozen=True)
class TwoReal:
    """
    Discriminant > 0. r1 comes from the -sqrt(D) branch, r2 from +sqrt(D),
    so r1 <= r2 whenever a > 0.
    """
    r1: float
    r2: float
    kind = "real"

    def roots(self) -> Tuple[float, ...]:
        return (self.r1, self.r2)


@dataclass(frozen=True)
class ComplexPair:
    """
    Discriminant < 0. Conjugate roots re ± im·i with im > 0.
    """
    re: float
    im: float
    kind = "complex"

    def roots(self) -> Tuple[complex, ...]:
        return (complex(self.re, self.im), complex(self.re, -self.im))


RootResult = Union[RepeatedReal, TwoReal, ComplexPair]
