"""Tests for the ASHRAE 55 cooling effect."""

import pytest
from comfortkit import cooling_effect


class TestCoolingEffect:
    """Tests for cooling_effect."""

    def test_still_air_is_zero(self):
        """No cooling effect at or below 0.1 m/s."""
        assert cooling_effect(25, 25, 0.1, 50, 1.2, 0.5) == 0.0
        assert cooling_effect(25, 25, 0.05, 50, 1.2, 0.5) == 0.0

    def test_elevated_air_speed(self):
        """Cooling effect of 0.3 m/s in a typical office."""
        assert cooling_effect(25, 25, 0.3, 50, 1.2, 0.5) == pytest.approx(1.68, abs=0.01)

    def test_increases_with_air_speed(self):
        """Faster air cools more."""
        assert cooling_effect(28, 28, 0.8, 50, 1.2, 0.5) > cooling_effect(28, 28, 0.3, 50, 1.2, 0.5)

    def test_two_decimals(self):
        """The result is rounded to two decimals."""
        ce = cooling_effect(28, 28, 0.5, 50, 1.2, 0.5)
        assert ce == round(ce, 2)

    def test_ip_units(self):
        """IP results are the SI result in °F degrees."""
        si = cooling_effect(25, 25, 0.3, 50, 1.2, 0.5)
        ip = cooling_effect(77, 77, 0.3 * 3.281, 50, 1.2, 0.5, units="IP")
        assert ip == pytest.approx(si * 9 / 5, abs=0.05)
