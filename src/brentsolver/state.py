from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Callable, Optional

from brentsolver.errors import NumericalError

UserFunction = Callable[[float], float]


class SolverStatus(str, enum.Enum):
    CONVERGED = "converged"
    EXACT = "exact"
    ITERATION_LIMIT = "iteration_limit"
    STOPPED = "stopped"
    BRACKET_ERROR = "bracket_error"
    NUMERICAL_ERROR = "numerical_error"


def evaluate(function: UserFunction, x: float) -> float:
    """f(x) as a float; domain and arithmetic errors become NumericalError."""
    try:
        return float(function(x))
    except (ValueError, ArithmeticError) as exc:
        raise NumericalError(
            "function", {"x": x}, reason=f"evaluation failed ({exc})"
        ) from exc


@dataclass
class SolverState:
    """
    Iteration state of a single solve call.

    a, b: current counterpart points, b is always the better estimate
          (smaller |f|). Once iterating, f_a * f_b < 0 holds.
    c:    Zhang's midpoint of the current step.
    s:    interpolated candidate of the current step.
    """

    a: float = 0.0
    f_a: float = 0.0
    b: float = 0.0
    f_b: float = 0.0
    c: float = 0.0
    f_c: float = 0.0
    s: float = 0.0
    f_s: float = 0.0
    iteration_count: int = 0
    running: bool = True
    status: Optional[SolverStatus] = None

    def order(self, function: UserFunction, x_a: float, x_b: float) -> None:
        """Evaluate both points; the one with larger |f| becomes a, the other b.

        Ties keep the given order.
        """
        f_a = evaluate(function, x_a)
        f_b = evaluate(function, x_b)
        if abs(f_a) < abs(f_b):
            x_a, x_b = x_b, x_a
            f_a, f_b = f_b, f_a
        self.a, self.f_a = x_a, f_a
        self.b, self.f_b = x_b, f_b

    def is_bracket(self) -> bool:
        return self.f_a * self.f_b < 0

    def b_is_root(self, accuracy: float) -> bool:
        return abs(self.f_b) <= accuracy
