import logging

from .config import SolverConfig
from .diagnostics import DiagnosticSink, InMemorySink, LoggingSink, NullSink
from .errors import ArgumentError, BracketError, NumericalError, SolverError
from .interpolation import (
    inverse_quadratic,
    linear_interpolate,
    linear_solve_for_x,
    secant,
)
from .logging_config import (
    configure_from_env,
    disable_logging,
    enable_console_logging,
    set_level,
)
from .solver import BrentSolver, SolverResult, SolverStatus, find_root

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "ArgumentError",
    "BracketError",
    "BrentSolver",
    "DiagnosticSink",
    "InMemorySink",
    "LoggingSink",
    "NullSink",
    "NumericalError",
    "SolverConfig",
    "SolverError",
    "SolverResult",
    "SolverStatus",
    "configure_from_env",
    "disable_logging",
    "enable_console_logging",
    "find_root",
    "inverse_quadratic",
    "linear_interpolate",
    "linear_solve_for_x",
    "secant",
    "set_level",
]
