"""Exception classes for the root finder."""

from __future__ import annotations

from typing import Dict


class SolverError(Exception):
    """Base exception for root finding errors."""


class ArgumentError(SolverError, ValueError):
    """Raised for a missing function or an invalid configuration value."""


class BracketError(SolverError):
    """Raised when f(a) and f(b) still share a sign after bracket repair."""

    def __init__(self, name: str, a: float, b: float, f_a: float, f_b: float):
        self.a = a
        self.b = b
        self.f_a = f_a
        self.f_b = f_b
        super().__init__(
            f"{name}: bracket evaluation failed, f(a) and f(b) must have opposite "
            f"signs. Current values: a={a:.3f}, b={b:.3f}, f(a)={f_a:.3f}, f(b)={f_b:.3f}"
        )


class NumericalError(SolverError):
    """Raised when NaN or infinity shows up among the iteration values, or
    when the function itself fails with a domain or arithmetic error."""

    def __init__(
        self,
        name: str,
        values: Dict[str, float],
        reason: str = "non-finite value detected",
    ):
        self.values = dict(values)
        bad = ", ".join(f"{k}={v}" for k, v in values.items())
        super().__init__(f"{name}: solution error, {reason} ({bad})")
