"""Closed-form interpolation helpers used by the solver.

None of these guard their denominators: coincident x values or coincident
function values give inf/NaN (or ZeroDivisionError for plain floats), and
callers are expected to check before calling. Being plain arithmetic they
also work element-wise on numpy arrays.
"""

from __future__ import annotations


def linear_interpolate(x1, f1, x2, f2, x):
    """
    Value at x of the line through P1(x1, f1) and P2(x2, f2).
    Works for interpolation and extrapolation alike.
    """
    return f1 + (x - x1) / (x2 - x1) * (f2 - f1)


def linear_solve_for_x(x1, f1, x2, f2, f_target):
    """
    Argument x at which the line through P1(x1, f1) and P2(x2, f2)
    reaches f_target. Inverse of linear_interpolate.
    """
    return x1 + (f_target - f1) * (x2 - x1) / (f2 - f1)


def inverse_quadratic(x_a, x_b, x_c, f_a, f_b, f_c):
    """
    Inverse quadratic interpolation.

    Fits x as a quadratic in f through (x_a, f_a), (x_b, f_b), (x_c, f_c)
    and returns the value at f = 0. Faster than the secant step but only
    reliable close to the root; any two equal f values divide by zero.
    """
    return (
        x_a * f_b * f_c / ((f_a - f_b) * (f_a - f_c))
        + x_b * f_a * f_c / ((f_b - f_a) * (f_b - f_c))
        + x_c * f_a * f_b / ((f_c - f_a) * (f_c - f_b))
    )


def secant(x_a, x_b, f_a, f_b):
    """x-axis intercept of the secant through (x_a, f_a) and (x_b, f_b)."""
    return x_b - f_b * (x_b - x_a) / (f_b - f_a)
