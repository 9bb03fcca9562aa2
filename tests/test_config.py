import math

import pytest

from brentsolver.config import (
    DEFAULT_A0,
    DEFAULT_ACCURACY,
    DEFAULT_B0,
    DEFAULT_EVAL_CYCLES,
    DEFAULT_EVAL_X2_DIVIDER,
    DEFAULT_EVAL_X_DIVIDER,
    DEFAULT_ITERATION_LIMIT,
    MAX_EVAL_CYCLES,
    SolverConfig,
)
from brentsolver.errors import ArgumentError


def test_defaults() -> None:
    config = SolverConfig()
    assert config.accuracy == DEFAULT_ACCURACY == 1e-11
    assert config.iteration_limit == DEFAULT_ITERATION_LIMIT == 100
    assert (config.eval_cycles, config.eval_x2_divider, config.eval_x_divider) == (5, 2, 2)
    assert (config.a0, config.b0) == (-50.0, 50.0)


def test_accuracy_is_stored_as_absolute_value() -> None:
    assert SolverConfig(accuracy=-1e-6).accuracy == 1e-6


@pytest.mark.parametrize("accuracy", [0.0, math.nan])
def test_rejects_zero_or_nan_accuracy(accuracy: float) -> None:
    with pytest.raises(ArgumentError):
        SolverConfig(accuracy=accuracy)


def test_rejects_iteration_limit_below_one() -> None:
    with pytest.raises(ArgumentError):
        SolverConfig(iteration_limit=0)


def test_accepts_float_iteration_limit() -> None:
    assert SolverConfig(iteration_limit=50.0).iteration_limit == 50.0


def test_rejects_zero_x2_divider() -> None:
    with pytest.raises(ArgumentError):
        SolverConfig(eval_x2_divider=0)


def test_rejects_negative_eval_cycles() -> None:
    with pytest.raises(ArgumentError):
        SolverConfig(eval_cycles=-1)


def test_rejects_non_int_tuning_values() -> None:
    with pytest.raises(ArgumentError):
        SolverConfig(eval_x_divider=2.5)


def test_rejects_non_finite_counterpart_points() -> None:
    with pytest.raises(ArgumentError):
        SolverConfig(a0=math.inf)


def test_argument_error_is_a_value_error() -> None:
    with pytest.raises(ValueError):
        SolverConfig(accuracy=0)


def test_replace_returns_validated_copy() -> None:
    config = SolverConfig()
    changed = config.replace(accuracy=-1e-3)
    assert changed.accuracy == 1e-3
    assert config.accuracy == DEFAULT_ACCURACY
    with pytest.raises(ArgumentError):
        config.replace(iteration_limit=-5)


def test_counterpart_point_helpers() -> None:
    config = SolverConfig().with_counterpart_points(-1, 2)
    assert (config.a0, config.b0) == (-1.0, 2.0)
    reset = config.with_default_counterpart_points()
    assert (reset.a0, reset.b0) == (DEFAULT_A0, DEFAULT_B0)


def test_evaluation_coefficient_reset() -> None:
    config = SolverConfig(eval_cycles=9, eval_x2_divider=3, eval_x_divider=0)
    reset = config.with_default_evaluation_coefficients()
    assert reset.eval_cycles == DEFAULT_EVAL_CYCLES
    assert reset.eval_x2_divider == DEFAULT_EVAL_X2_DIVIDER
    assert reset.eval_x_divider == DEFAULT_EVAL_X_DIVIDER


@pytest.mark.parametrize("name", ["eval_cycles", "eval_x_divider"])
def test_rejects_repair_cycles_above_cap(name: str) -> None:
    assert getattr(SolverConfig(**{name: MAX_EVAL_CYCLES}), name) == MAX_EVAL_CYCLES
    with pytest.raises(ArgumentError):
        SolverConfig(**{name: MAX_EVAL_CYCLES + 1})
