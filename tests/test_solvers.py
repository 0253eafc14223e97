"""Tests for the bounded iterative solvers."""

import math

import pytest
from comfortkit.errors import ConvergenceError
from comfortkit.solvers import fixed_point, secant


class TestSecant:
    """Tests for the fixed-perturbation secant solver."""

    def test_finds_root(self):
        """Square root of two within the step tolerance."""
        root = secant(lambda x: x * x - 2.0, 1.0, name="sqrt")
        assert root == pytest.approx(math.sqrt(2.0), abs=0.01)

    def test_linear_converges_quickly(self):
        """A linear residual converges at the second step."""
        root = secant(lambda x: 3.0 * x - 6.0, 0.0, max_iterations=3)
        assert root == pytest.approx(2.0, abs=1e-6)

    def test_flat_residual_raises(self):
        """A vanishing slope cannot produce a step."""
        with pytest.raises(ConvergenceError) as exc_info:
            secant(lambda x: 1.0, 0.0, name="flat")
        assert exc_info.value.solver == "flat"

    def test_iteration_cap(self):
        """A residual without a real root hits the cap."""
        with pytest.raises(ConvergenceError) as exc_info:
            secant(lambda x: x * x + 1.0, 0.5, max_iterations=5, name="no root")
        assert exc_info.value.max_iterations == 5


class TestFixedPoint:
    """Tests for the fixed-point iteration."""

    def test_converges_with_aux(self):
        """x = cos(x) settles near 0.739 and returns the last auxiliary value."""
        calls = []

        def update(x):
            calls.append(x)
            return math.cos(x), len(calls)

        x, aux = fixed_point(update, 1.0, tolerance=1e-6, max_iterations=200)
        assert x == pytest.approx(0.739085, abs=1e-5)
        assert aux == len(calls)

    def test_iteration_cap(self):
        """A diverging update raises once the cap is reached."""
        with pytest.raises(ConvergenceError) as exc_info:
            fixed_point(lambda x: (x + 1.0, None), 0.0, tolerance=0.01, max_iterations=10, name="drift")
        assert exc_info.value.solver == "drift"
        assert exc_info.value.residual == 1.0
