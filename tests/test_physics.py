"""Tests for psychrometric and body helpers."""

import numpy as np
import pytest
from comfortkit import InvalidInputError, body_surface_area, p_sat, p_sat_torr, t_o, vapor_pressure
from comfortkit.physics.body import lewis_ratio


class TestPsychrometrics:
    """Tests for vapour pressure functions."""

    def test_p_sat_torr_at_25c(self):
        """Saturation pressure at 25 °C is about 23.76 mmHg."""
        assert p_sat_torr(25) == pytest.approx(23.76, abs=0.02)

    def test_vapor_pressure_scales_with_rh(self):
        """Ambient vapour pressure is rh percent of saturation."""
        assert vapor_pressure(25, 50) == pytest.approx(p_sat_torr(25) / 2)
        assert vapor_pressure(25, 0) == 0.0

    def test_p_sat_pascal(self):
        """Hyland-Wexler saturation pressure at 25 °C is about 3.17 kPa."""
        assert p_sat(25) == pytest.approx(3169, abs=3)

    def test_p_sat_ice_branch(self):
        """Below freezing the ice equation gives a small positive pressure."""
        assert 0 < p_sat(-10) < p_sat(0)

    def test_p_sat_array(self):
        """Arrays give arrays, increasing with temperature."""
        values = p_sat(np.array([10.0, 20.0, 30.0]))
        assert isinstance(values, np.ndarray)
        assert np.all(np.diff(values) > 0)


class TestOperativeTemperature:
    """Tests for t_o."""

    def test_still_air_is_mean(self):
        """At 0.1 m/s both weightings reduce to the simple mean."""
        assert t_o(25, 30, 0.1) == pytest.approx(27.5)
        assert t_o(25, 30, 0.1, standard="ASHRAE") == pytest.approx(27.5)

    def test_ashrae_weighting_at_high_speed(self):
        """Above 0.6 m/s ASHRAE weights air temperature by 0.7."""
        assert t_o(20, 30, 0.8, standard="ASHRAE") == pytest.approx(23.0)

    def test_unknown_standard(self):
        """Only ISO and ASHRAE weightings exist."""
        with pytest.raises(InvalidInputError):
            t_o(25, 25, 0.1, standard="CIBSE")


class TestBody:
    """Tests for body surface area and the Lewis relation."""

    def test_dubois(self):
        """DuBois area of a 70 kg, 1.75 m person."""
        assert body_surface_area(70, 1.75) == pytest.approx(1.844, abs=0.001)

    def test_other_formulas_differ(self):
        """Alternative formulas are available and give different areas."""
        assert body_surface_area(70, 1.75, formula="takahira") > body_surface_area(70, 1.75)

    def test_unknown_formula(self):
        """Unknown formula names are rejected."""
        with pytest.raises(InvalidInputError):
            body_surface_area(70, 1.75, formula="mosteller")

    def test_lewis_ratio_sea_level(self):
        """Lewis ratio is 2.2 K/mmHg at sea level and grows with altitude."""
        assert lewis_ratio(101325) == pytest.approx(2.2)
        assert lewis_ratio(80000) > 2.2
