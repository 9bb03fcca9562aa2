"""Counterpart point evaluation (bracket repair).

When f(a) and f(b) share a sign, try to find a replacement for a on the
other side of the root by linear extrapolation:

  1. P1 = (b, f(b)), already the point closer to the root.
  2. P2 = (b / eval_x2_divider, f(b / eval_x2_divider)).
  3. Aim for f_target = -f(b) / (eval_x_divider - i): opposite sign to
     f(b), shrinking as i grows so later attempts aim closer to the
     crossing.
  4. Solve the P1-P2 line for f_target, evaluate f there and reorder the
     pair (b, x).

Stops on a sign flip against the f(b) of that step, or when b itself
turns out to be a root. Works when the initial guesses are of the right
order of magnitude; strongly non-linear functions or far-off guesses can
defeat it, in which case the caller's bracket check fails afterwards.
"""

from __future__ import annotations

import logging

from brentsolver.config import SolverConfig
from brentsolver.diagnostics import DiagnosticSink
from brentsolver.interpolation import linear_solve_for_x
from brentsolver.state import SolverState, UserFunction, evaluate

STEP_MESSAGE = (
    "%(name)s: bracket step %(step)s: a=%(a).3f, b=%(b).3f, "
    "f(a)=%(f_a).3f, f(b)=%(f_b).3f"
)


def evaluate_bracket(
    function: UserFunction,
    state: SolverState,
    config: SolverConfig,
    sink: DiagnosticSink,
    name: str = "",
) -> bool:
    """
    Try to turn (state.a, state.b) into a valid bracket, in place.
    Returns True if a sign change was found or b turned out to be a root.
    """
    sink.log_event(
        logging.DEBUG,
        "%(name)s: bracket repair started: a=%(a).3f, b=%(b).3f, f(a)=%(f_a).3f, f(b)=%(f_b).3f",
        {"event": "bracket.start", "name": name, "a": state.a, "b": state.b,
         "f_a": state.f_a, "f_b": state.f_b},
    )
    # Let the target divider run down to its smallest positive value.
    cycles = max(config.eval_cycles, config.eval_x_divider)

    for i in range(cycles + 1):
        divider = config.eval_x_divider - i
        if divider == 0:
            continue
        x1, f_x1 = state.b, state.f_b
        x2 = state.b / config.eval_x2_divider
        f_x2 = evaluate(function, x2)
        f_target = -f_x1 / divider
        if f_x2 == f_x1:
            # Flat line through P1 and P2, nothing to extrapolate along.
            break
        x = linear_solve_for_x(x1, f_x1, x2, f_x2, f_target)
        f_x = evaluate(function, x)

        state.order(function, state.b, x)
        sink.log_event(
            logging.DEBUG,
            STEP_MESSAGE,
            {"event": "bracket.step", "name": name, "step": i, "x": x, "f_x": f_x,
             "a": state.a, "b": state.b, "f_a": state.f_a, "f_b": state.f_b},
        )
        if state.b_is_root(config.accuracy):
            return True
        if f_x * f_x1 < 0:
            return True
    return False
