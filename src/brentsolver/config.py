from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from math import isfinite, isnan
from typing import Union

from brentsolver.errors import ArgumentError

# -----------------------------
# Defaults
# -----------------------------

DEFAULT_NAME = "DefaultBrentSolver"
DEFAULT_A0 = -50.0
DEFAULT_B0 = 50.0
DEFAULT_ITERATION_LIMIT = 100
DEFAULT_ACCURACY = 1e-11
# Bracket repair tuning. 2/2 suits temperature-like ranges (-100, 100);
# for pressure-like ranges eval_x_divider=0 tends to work better. Anything
# else has to be found empirically.
DEFAULT_EVAL_CYCLES = 5
DEFAULT_EVAL_X2_DIVIDER = 2
DEFAULT_EVAL_X_DIVIDER = 2
MAX_EVAL_CYCLES = 1000


@dataclass(frozen=True)
class SolverConfig:
    """
    Solver control parameters.

    accuracy:        tolerance on |b - a| and on |f(b)| for the initial
                     "already a root" check; stored as abs(value).
    iteration_limit: hard cap on loop iterations.
    eval_cycles, eval_x2_divider, eval_x_divider:
                     bracket repair tuning, see brentsolver.bracket.
    a0, b0:          requested initial bracket.
    """

    accuracy: float = DEFAULT_ACCURACY
    iteration_limit: Union[int, float] = DEFAULT_ITERATION_LIMIT
    eval_cycles: int = DEFAULT_EVAL_CYCLES
    eval_x2_divider: int = DEFAULT_EVAL_X2_DIVIDER
    eval_x_divider: int = DEFAULT_EVAL_X_DIVIDER
    a0: float = DEFAULT_A0
    b0: float = DEFAULT_B0

    def __post_init__(self) -> None:
        accuracy = abs(float(self.accuracy))
        if accuracy == 0 or isnan(accuracy):
            raise ArgumentError(f"accuracy must be non-zero, got {self.accuracy!r}")
        object.__setattr__(self, "accuracy", accuracy)

        if isnan(self.iteration_limit) or self.iteration_limit < 1:
            raise ArgumentError(
                f"iteration_limit must be >= 1, got {self.iteration_limit!r}"
            )
        for name in ("eval_cycles", "eval_x2_divider", "eval_x_divider"):
            if not isinstance(getattr(self, name), int):
                raise ArgumentError(f"{name} must be an int, got {getattr(self, name)!r}")
        if self.eval_cycles < 0:
            raise ArgumentError(f"eval_cycles must be >= 0, got {self.eval_cycles}")
        if self.eval_x2_divider == 0:
            raise ArgumentError("eval_x2_divider cannot be 0")
        # Repair runs max(eval_cycles, eval_x_divider) + 1 steps.
        for name in ("eval_cycles", "eval_x_divider"):
            if getattr(self, name) > MAX_EVAL_CYCLES:
                raise ArgumentError(
                    f"{name} must be <= {MAX_EVAL_CYCLES}, got {getattr(self, name)}"
                )

        for name in ("a0", "b0"):
            value = float(getattr(self, name))
            if not isfinite(value):
                raise ArgumentError(f"{name} must be finite, got {value!r}")
            object.__setattr__(self, name, value)

    def replace(self, **changes) -> "SolverConfig":
        """Copy with some fields changed; the copy is validated again."""
        return dataclasses.replace(self, **changes)

    def with_counterpart_points(self, a0: float, b0: float) -> "SolverConfig":
        return self.replace(a0=a0, b0=b0)

    def with_default_counterpart_points(self) -> "SolverConfig":
        return self.replace(a0=DEFAULT_A0, b0=DEFAULT_B0)

    def with_default_evaluation_coefficients(self) -> "SolverConfig":
        return self.replace(
            eval_cycles=DEFAULT_EVAL_CYCLES,
            eval_x2_divider=DEFAULT_EVAL_X2_DIVIDER,
            eval_x_divider=DEFAULT_EVAL_X_DIVIDER,
        )
