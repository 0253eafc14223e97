"""Bounded iterative solvers shared by the comfort models.

Both solvers stop with :class:`~comfortkit.errors.ConvergenceError` once their
iteration cap is reached, so every model call terminates.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TypeVar

from .constants import SECANT_DELTA, SECANT_MAX_ITERATIONS, SECANT_TOLERANCE
from .errors import ConvergenceError

logger = logging.getLogger(__name__)

T = TypeVar("T")


def secant(
    residual: Callable[[float], float],
    x0: float,
    *,
    delta: float = SECANT_DELTA,
    tolerance: float = SECANT_TOLERANCE,
    max_iterations: int = SECANT_MAX_ITERATIONS,
    name: str = "secant",
) -> float:
    """
    Find a root of ``residual`` with a fixed-perturbation secant method.

    The derivative is estimated from ``residual(x)`` and ``residual(x + delta)``
    at every step. Iteration stops once the step is no larger than ``tolerance``.

    Args:
        residual: Function whose root is sought.
        x0: Starting estimate.
        delta: Perturbation used for the finite-difference slope.
        tolerance: Absolute step size that ends the iteration.
        max_iterations: Iteration cap.
        name: Solver label used in logs and errors.

    Returns:
        The root estimate.

    Raises:
        ConvergenceError: If the cap is reached, or the slope vanishes.
    """
    x_old = x0
    for iteration in range(1, max_iterations + 1):
        err_1 = residual(x_old)
        err_2 = residual(x_old + delta)
        if err_2 == err_1:
            raise ConvergenceError(name, iteration, residual=err_1)
        x_new = x_old - delta * err_1 / (err_2 - err_1)
        step = x_new - x_old
        x_old = x_new
        if abs(step) <= tolerance:
            logger.debug(f"{name} converged in {iteration} iterations: {x_new:.4f}")
            return x_new
    raise ConvergenceError(name, max_iterations, residual=step)


def fixed_point(
    update: Callable[[float], tuple[float, T]],
    x0: float,
    *,
    tolerance: float,
    max_iterations: int,
    name: str = "fixed point",
) -> tuple[float, T]:
    """
    Iterate ``x = update(x)`` until successive values differ by at most ``tolerance``.

    ``update`` returns the new value together with any auxiliary quantities
    computed on the way; the auxiliaries of the final iteration are returned
    to the caller.

    Args:
        update: Map ``x -> (x_new, aux)``.
        x0: Starting value.
        tolerance: Absolute change that ends the iteration.
        max_iterations: Iteration cap.
        name: Solver label used in errors.

    Returns:
        ``(x, aux)`` from the converged iteration.

    Raises:
        ConvergenceError: If the cap is reached.
    """
    x = x0
    for _ in range(max_iterations):
        x_new, aux = update(x)
        step = x_new - x
        x = x_new
        if abs(step) <= tolerance:
            return x, aux
    raise ConvergenceError(name, max_iterations, residual=step)
