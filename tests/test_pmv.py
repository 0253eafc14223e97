"""
Tests for Fanger PMV/PPD.

Reference values are taken from ISO 7730:2005 Annex D, Table D.1.
"""

import math

import numpy as np
import pytest
from comfortkit import InvalidInputError, PmvPpdResult, pmv, pmv_calculation, pmv_ppd
from comfortkit.pmv import ppd_from_pmv


class TestIsoTable:
    """Tests against the ISO 7730 reference table."""

    @pytest.mark.parametrize(
        "tdb, tr, vr, rh, met, clo, expected_pmv",
        [
            (22, 22, 0.1, 60, 1.2, 0.5, -0.75),
            (27, 27, 0.1, 60, 1.2, 0.5, 0.77),
            (27, 27, 0.3, 60, 1.2, 0.5, 0.44),
            (23.5, 25.5, 0.1, 60, 1.2, 0.5, -0.01),
            (19, 19, 0.1, 40, 1.2, 1.0, -0.60),
        ],
    )
    def test_pmv_table(self, tdb, tr, vr, rh, met, clo, expected_pmv):
        """PMV agrees with ISO 7730 Table D.1."""
        result = pmv_ppd(tdb, tr, vr, rh, met, clo)
        assert result.pmv == pytest.approx(expected_pmv, abs=0.05)

    def test_ppd_table(self):
        """PPD for the 22 °C table entry is about 17 %."""
        assert pmv_ppd(22, 22, 0.1, 60, 1.2, 0.5).ppd == pytest.approx(17, abs=1)


class TestPmvPpd:
    """Tests for the pmv_ppd entry point."""

    def test_scalar_returns_floats(self):
        """Scalar input gives a PmvPpdResult of floats."""
        result = pmv_ppd(25, 25, 0.1, 50, 1.2, 0.5)
        assert isinstance(result, PmvPpdResult)
        assert isinstance(result.pmv, float)
        assert isinstance(result.ppd, float)

    def test_rounding(self):
        """PMV has two decimals and PPD one."""
        result = pmv_ppd(25, 25, 0.1, 50, 1.2, 0.5)
        assert result.pmv == round(result.pmv, 2)
        assert result.ppd == round(result.ppd, 1)

    def test_array_input(self):
        """Array inputs broadcast against scalars."""
        result = pmv_ppd([22, 27], [22, 27], 0.1, 60, 1.2, 0.5)
        assert isinstance(result.pmv, np.ndarray)
        assert result.pmv.shape == (2,)
        assert result.pmv[0] < 0 < result.pmv[1]

    def test_array_matches_scalar(self):
        """Each array element equals the scalar calculation."""
        result = pmv_ppd([22, 27], [22, 27], 0.1, 60, 1.2, 0.5)
        assert result.pmv[1] == pmv_ppd(27, 27, 0.1, 60, 1.2, 0.5).pmv

    def test_iso_limits(self):
        """Air temperature above 30 °C is outside ISO 7730."""
        result = pmv_ppd(35, 35, 0.1, 50, 1.2, 0.5)
        assert math.isnan(result.pmv)
        assert math.isnan(result.ppd)

    def test_limits_disabled(self):
        """limit_inputs=False always returns a value."""
        result = pmv_ppd(35, 35, 0.1, 50, 1.2, 0.5, limit_inputs=False)
        assert result.pmv > 2

    def test_unknown_standard(self):
        """Only ISO and ASHRAE are accepted."""
        with pytest.raises(InvalidInputError) as exc_info:
            pmv_ppd(25, 25, 0.1, 50, 1.2, 0.5, standard="CIBSE")
        assert exc_info.value.parameter == "standard"

    def test_standard_case_insensitive(self):
        """Standard names are case-insensitive."""
        assert pmv_ppd(25, 25, 0.1, 50, 1.2, 0.5, standard="iso") == pmv_ppd(25, 25, 0.1, 50, 1.2, 0.5)

    def test_ip_units(self):
        """IP inputs give the same PMV as their SI equivalents."""
        si = pmv_ppd(25, 25, 0.1, 50, 1.2, 0.5)
        ip = pmv_ppd(77, 77, 0.3281, 50, 1.2, 0.5, units="IP")
        assert ip.pmv == pytest.approx(si.pmv, abs=0.01)

    def test_pmv_shortcut(self):
        """pmv() returns the PMV of pmv_ppd()."""
        assert pmv(25, 25, 0.1, 50, 1.2, 0.5) == pmv_ppd(25, 25, 0.1, 50, 1.2, 0.5).pmv


class TestAshrae:
    """Tests for the ASHRAE 55 elevated air speed path."""

    def test_still_air_matches_iso(self):
        """In still air both standards use the same equation."""
        iso = pmv_ppd(25, 25, 0.1, 50, 1.2, 0.5, standard="ISO")
        ashrae = pmv_ppd(25, 25, 0.1, 50, 1.2, 0.5, standard="ASHRAE")
        assert ashrae.pmv == iso.pmv

    def test_elevated_air_speed_cools(self):
        """Elevated air speed lowers the ASHRAE PMV through the cooling effect."""
        still = pmv_ppd(28, 28, 0.1, 50, 1.2, 0.5, standard="ASHRAE")
        moving = pmv_ppd(28, 28, 0.6, 50, 1.2, 0.5, standard="ASHRAE")
        assert moving.pmv < still.pmv

    def test_met_below_ashrae_limit(self):
        """ASHRAE 55 does not apply below 1 met."""
        assert math.isnan(pmv_ppd(25, 25, 0.1, 50, 0.9, 0.5, standard="ASHRAE").pmv)


class TestPmvHelpers:
    """Tests for the unrounded PMV and the PPD formula."""

    def test_ppd_minimum(self):
        """PPD is 5 % at neutrality."""
        assert float(ppd_from_pmv(0.0)) == pytest.approx(5.0)

    def test_ppd_symmetric(self):
        """PPD is symmetric in PMV."""
        assert float(ppd_from_pmv(-1.0)) == pytest.approx(float(ppd_from_pmv(1.0)))

    def test_pmv_calculation_increases_with_temperature(self):
        """Warmer air gives a higher PMV."""
        assert pmv_calculation(26, 26, 0.1, 50, 1.2, 0.5) > pmv_calculation(24, 24, 0.1, 50, 1.2, 0.5)
