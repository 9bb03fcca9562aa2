"""
Brent-Dekker root finder, modified after Zhengqiu Zhang (International
Journal of Experimental Algorithms, 2(1), 2011).

Each step takes Zhang's midpoint c = (a + b) / 2, interpolates a candidate
s from (a, b, c) by inverse quadratic interpolation (secant when two of the
function values coincide) and keeps whichever sub-interval of {a, c, s, b}
still holds the sign change. This replaces the interval bookkeeping of the
classical Brent-Dekker scheme.

The user function has to be written as expression = 0. The initial points
do not need to bracket the root: if f(a0) and f(b0) share a sign, the
counterpart point evaluation in brentsolver.bracket tries to repair the
bracket first.

Naming follows the textbook notation: a0, b0 are the requested points,
a, b the working counterpart points (b always the better estimate), f_x
the function value at point x.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Optional

import numpy as np

from brentsolver.bracket import evaluate_bracket
from brentsolver.config import DEFAULT_A0, DEFAULT_B0, DEFAULT_NAME, SolverConfig
from brentsolver.diagnostics import DiagnosticSink, LoggingSink
from brentsolver.errors import ArgumentError, BracketError, NumericalError, SolverError
from brentsolver.interpolation import inverse_quadratic, secant
from brentsolver.state import SolverState, SolverStatus, UserFunction, evaluate

ITERATION_MESSAGE = (
    "%(name)s: iteration %(iteration)s: s=%(s).5f, a=%(a).5f, f(a)=%(f_a).5f, "
    "b=%(b).5f, f(b)=%(f_b).5f, c=%(c).5f, f(c)=%(f_c).5f, diff=%(difference)s"
)


@dataclass
class SolverResult:
    """
    Outcome of one solve call.

    root:       last b, the best estimate.
    status:     why the call ended.
    iterations: loop iterations performed.
    elapsed:    wall time in seconds.
    error:      the BracketError / NumericalError for failed calls.
    """

    root: float
    f_root: float
    status: SolverStatus
    iterations: int
    elapsed: float
    a: float = float("nan")
    f_a: float = float("nan")
    error: Optional[SolverError] = None

    @property
    def converged(self) -> bool:
        return self.status in (SolverStatus.CONVERGED, SolverStatus.EXACT)

    @property
    def failed(self) -> bool:
        return self.error is not None

    def unwrap(self) -> float:
        """Root value, or raise the stored error."""
        if self.error is not None:
            raise self.error
        return self.root


def _check_function(function) -> UserFunction:
    if function is None:
        raise ArgumentError("Argument [function] cannot be None.")
    if not callable(function):
        raise ArgumentError(f"Argument [function] must be callable, got {function!r}")
    return function


def _require_finite(name: str, state: SolverState) -> None:
    values = {"f_a": state.f_a, "f_b": state.f_b, "f_c": state.f_c, "f_s": state.f_s}
    finite = np.isfinite(list(values.values()))
    if not finite.all():
        bad = {k: v for (k, v), ok in zip(values.items(), finite) if not ok}
        raise NumericalError(name, bad)


class BrentSolver:
    """
    Single variable root finder.

        solver = BrentSolver()
        solver.find_root(lambda x: 2 * x * x + 5 * x - 3)         # -3.0
        solver.set_counterpart_points(-1, 2)
        solver.find_root()                                        # 0.5

    One instance runs one call at a time. Each call builds its own
    SolverState; only the configuration and the function live on the
    instance.
    """

    def __init__(
        self,
        name: str = DEFAULT_NAME,
        function: Optional[UserFunction] = None,
        config: Optional[SolverConfig] = None,
        sink: Optional[DiagnosticSink] = None,
    ):
        self.name = name
        self._function = _check_function(function) if function is not None else None
        self._config = config or SolverConfig()
        self.sink: DiagnosticSink = sink or LoggingSink()
        self._state: Optional[SolverState] = None
        self.last_result: Optional[SolverResult] = None

    # -----------------------------
    # Configuration
    # -----------------------------

    @property
    def config(self) -> SolverConfig:
        return self._config

    @config.setter
    def config(self, value: SolverConfig) -> None:
        if not isinstance(value, SolverConfig):
            raise ArgumentError(f"config must be a SolverConfig, got {value!r}")
        self._config = value

    def configure(self, **changes) -> SolverConfig:
        self._config = self._config.replace(**changes)
        return self._config

    @property
    def accuracy(self) -> float:
        return self._config.accuracy

    @property
    def function(self) -> Optional[UserFunction]:
        return self._function

    def set_function(self, function: UserFunction) -> None:
        self._function = _check_function(function)

    def set_counterpart_points(self, a0: float, b0: float) -> None:
        self._config = self._config.with_counterpart_points(a0, b0)

    def reset_counterpart_points(self) -> None:
        self._config = self._config.with_default_counterpart_points()

    def reset_evaluation_coefficients(self) -> None:
        self._config = self._config.with_default_evaluation_coefficients()

    @property
    def iteration_count(self) -> int:
        """Iterations used by the most recent call."""
        return self.last_result.iterations if self.last_result else 0

    def stop(self) -> None:
        """Ask the call in flight to finish after its current iteration."""
        if self._state is not None:
            self._state.running = False

    # -----------------------------
    # Solving
    # -----------------------------

    def calc_for_function(
        self,
        function: UserFunction,
        a0: Optional[float] = None,
        b0: Optional[float] = None,
    ) -> float:
        """Set the function (and the counterpart points, when given) and solve."""
        if a0 is not None and b0 is not None:
            self.set_counterpart_points(a0, b0)
        self.set_function(function)
        return self.find_root()

    def find_root(
        self,
        function: Optional[UserFunction] = None,
        a0: Optional[float] = None,
        b0: Optional[float] = None,
    ) -> float:
        """
        Root of ``function`` near [a0, b0].

        Missing arguments fall back to the function and points set on the
        solver. Raises BracketError when no sign change could be set up and
        NumericalError when NaN or infinity appears while iterating. Hitting
        the iteration limit is not an error: the best estimate is returned
        and a warning is traced.
        """
        return self.solve(function, a0, b0).unwrap()

    def solve(
        self,
        function: Optional[UserFunction] = None,
        a0: Optional[float] = None,
        b0: Optional[float] = None,
    ) -> SolverResult:
        """Same as find_root, but failures come back inside the result."""
        if (a0 is None) != (b0 is None):
            raise ArgumentError("a0 and b0 must be given together")
        if function is not None:
            self.set_function(function)
        if a0 is not None:
            self.set_counterpart_points(a0, b0)
        if self._function is None:
            raise ArgumentError("Argument [function] cannot be None.")

        state = SolverState()
        self._state = state
        started = time.perf_counter()
        try:
            self._run(self._function, self._config, state)
        except (BracketError, NumericalError) as exc:
            state.status = (
                SolverStatus.BRACKET_ERROR
                if isinstance(exc, BracketError)
                else SolverStatus.NUMERICAL_ERROR
            )
            result = self._result(state, started, error=exc)
            self.sink.log_event(
                logging.ERROR,
                "%(name)s: %(error)s",
                {"event": "solve.error", "name": self.name, "error": str(exc),
                 "status": state.status.value, "iterations": state.iteration_count},
            )
        else:
            result = self._result(state, started)
            level = logging.INFO if result.converged else logging.WARNING
            self.sink.log_event(
                level,
                "%(name)s: calculation finished (%(status)s) after %(iterations)s "
                "iterations in %(elapsed).6f s, root=%(root)s",
                {"event": "solve.finish", "name": self.name,
                 "status": result.status.value, "iterations": result.iterations,
                 "elapsed": result.elapsed, "root": result.root},
            )
        finally:
            self._state = None
        self.last_result = result
        return result

    def _result(
        self, state: SolverState, started: float, error: Optional[SolverError] = None
    ) -> SolverResult:
        return SolverResult(
            root=state.b,
            f_root=state.f_b,
            status=state.status,
            iterations=state.iteration_count,
            elapsed=time.perf_counter() - started,
            a=state.a,
            f_a=state.f_a,
            error=error,
        )

    def _run(self, function: UserFunction, config: SolverConfig, state: SolverState) -> None:
        name = self.name
        self.sink.log_event(
            logging.INFO,
            "%(name)s: calculation in progress, a0=%(a0)s, b0=%(b0)s",
            {"event": "solve.start", "name": name, "a0": config.a0, "b0": config.b0},
        )

        state.order(function, config.a0, config.b0)
        if state.b_is_root(config.accuracy):
            state.status = SolverStatus.CONVERGED
            return
        if not state.is_bracket():
            evaluate_bracket(function, state, config, self.sink, name)
            if state.b_is_root(config.accuracy):
                state.status = SolverStatus.CONVERGED
                return
            if not state.is_bracket():
                raise BracketError(name, state.a, state.b, state.f_a, state.f_b)
        if not state.running:
            state.status = SolverStatus.STOPPED
            return

        self.sink.log_event(
            logging.DEBUG,
            "%(name)s: initial values: a=%(a).5f, f(a)=%(f_a).5f, b=%(b).5f, f(b)=%(f_b).5f",
            {"event": "solve.initial", "name": name, "a": state.a, "f_a": state.f_a,
             "b": state.b, "f_b": state.f_b},
        )

        while state.running:
            # Zhang's midpoint
            state.c = (state.a + state.b) / 2
            state.f_c = evaluate(function, state.c)

            try:
                if state.f_a != state.f_c and state.f_b != state.f_c:
                    state.s = inverse_quadratic(
                        state.a, state.b, state.c, state.f_a, state.f_b, state.f_c
                    )
                else:
                    state.s = secant(state.a, state.b, state.f_a, state.f_b)
            except ZeroDivisionError:
                raise NumericalError(
                    name, {"f_a": state.f_a, "f_b": state.f_b, "f_c": state.f_c}
                ) from None

            # Width before this step replaces the bracket.
            difference = abs(state.b - state.a)
            if state.c > state.s:
                state.c, state.s = state.s, state.c
            state.f_c = evaluate(function, state.c)
            state.f_s = evaluate(function, state.s)

            if state.f_c * state.f_s < 0:
                state.a, state.b = state.s, state.c
            elif state.f_s * state.f_b < 0:
                state.a = state.c
            else:
                state.b = state.s
            state.f_a = evaluate(function, state.a)
            state.f_b = evaluate(function, state.b)

            _require_finite(name, state)

            state.iteration_count += 1
            self.sink.log_event(
                logging.DEBUG,
                ITERATION_MESSAGE,
                {"event": "iteration", "name": name, "iteration": state.iteration_count,
                 "a": state.a, "f_a": state.f_a, "b": state.b, "f_b": state.f_b,
                 "c": state.c, "f_c": state.f_c, "s": state.s, "f_s": state.f_s,
                 "difference": difference},
            )

            if difference < config.accuracy:
                state.status = SolverStatus.CONVERGED
                state.running = False
            elif state.iteration_count >= config.iteration_limit:
                state.status = SolverStatus.ITERATION_LIMIT
                state.running = False
            elif state.f_b == 0:
                state.status = SolverStatus.EXACT
                state.running = False

        if state.status is None:
            state.status = SolverStatus.STOPPED


def find_root(
    function: UserFunction,
    a0: float = DEFAULT_A0,
    b0: float = DEFAULT_B0,
    **config,
) -> float:
    """One-off solve with a throwaway solver; ``config`` goes to SolverConfig."""
    solver = BrentSolver(config=SolverConfig(a0=a0, b0=b0, **config))
    return solver.find_root(function)
