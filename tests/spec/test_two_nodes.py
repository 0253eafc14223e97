"""
Two-node thermoregulation model tests.

Physical and structural properties of two_nodes and two_nodes_array that
must hold for any input, complementing the golden reference values.
"""

import numpy as np
import pytest
from comfortkit import (
    ConvergenceError,
    InvalidInputError,
    TwoNodesArrayResult,
    TwoNodesConfig,
    TwoNodesResult,
    two_nodes,
    two_nodes_array,
)

# =============================================================================
# Structure
# =============================================================================


class TestTwoNodesStructure:
    """Tests for result types, rounding and overrides."""

    def test_returns_result(self, reference_inputs):
        """two_nodes returns a frozen TwoNodesResult."""
        result = two_nodes(**reference_inputs)
        assert isinstance(result, TwoNodesResult)
        with pytest.raises(AttributeError):
            result.set = 0.0

    def test_rounded_to_one_decimal(self, reference_inputs):
        """Every output is rounded to one decimal by default."""
        for value in two_nodes(**reference_inputs).to_dict().values():
            assert value == round(value, 1)

    def test_round_false_keeps_precision(self, reference_inputs):
        """round=False returns the unrounded values."""
        rounded = two_nodes(**reference_inputs)
        raw = two_nodes(**reference_inputs, round=False)
        assert raw.set != rounded.set
        assert raw.rounded(1) == rounded

    def test_config_object(self, reference_inputs):
        """A config object is equivalent to keyword overrides."""
        config = TwoNodesConfig(round=False)
        assert two_nodes(**reference_inputs, config=config) == two_nodes(**reference_inputs, round=False)

    def test_deterministic(self, reference_inputs):
        """Identical inputs give identical outputs."""
        assert two_nodes(**reference_inputs, round=False) == two_nodes(**reference_inputs, round=False)

    def test_user_w_max(self, reference_inputs):
        """A user-supplied w_max replaces the formulaic limit."""
        result = two_nodes(**reference_inputs, w_max=0.5, round=False)
        assert result.w_max == 0.5

    def test_heat_loss_totals(self, reference_inputs):
        """q_skin is the sum of sensible and evaporative skin losses."""
        result = two_nodes(**reference_inputs, round=False)
        assert result.q_skin == pytest.approx(result.q_sensible + result.e_skin)

    def test_invalid_body_position(self, reference_inputs):
        """Only standing and sitting are modelled."""
        with pytest.raises(InvalidInputError):
            two_nodes(**reference_inputs, body_position="lying")

    def test_sitting_differs_from_standing(self, reference_inputs):
        """Posture changes the radiating area and therefore the result."""
        standing = two_nodes(**reference_inputs, round=False)
        sitting = two_nodes(**reference_inputs, body_position="sitting", round=False)
        assert sitting.t_skin != standing.t_skin


# =============================================================================
# Physical properties
# =============================================================================


class TestTwoNodesProperties:
    """Tests for physically expected behaviour."""

    def test_more_clothing_warmer_skin(self):
        """Skin temperature does not fall as clothing insulation rises."""
        t_skin = [
            two_nodes(tdb=22, tr=22, v=0.1, rh=50, met=1.2, clo=clo, round=False).t_skin
            for clo in (0.3, 0.6, 0.9, 1.2)
        ]
        assert all(b >= a for a, b in zip(t_skin, t_skin[1:]))

    def test_warmer_air_higher_set(self):
        """SET rises with air temperature."""
        cool = two_nodes(tdb=20, tr=20, v=0.1, rh=50, met=1.2, clo=0.5, round=False)
        warm = two_nodes(tdb=30, tr=30, v=0.1, rh=50, met=1.2, clo=0.5, round=False)
        assert warm.set > cool.set

    def test_still_air_floor(self):
        """Air speeds below 0.1 m/s are treated as 0.1 m/s."""
        slow = two_nodes(tdb=25, tr=25, v=0.0, rh=50, met=1.2, clo=0.5, round=False)
        floor = two_nodes(tdb=25, tr=25, v=0.1, rh=50, met=1.2, clo=0.5, round=False)
        assert slow == floor

    def test_calculate_ce_removes_activity_convection(self):
        """Without activity-driven convection an active person loses less heat to still air."""
        normal = two_nodes(tdb=25, tr=25, v=0.1, rh=50, met=2.0, clo=0.5, round=False)
        for_ce = two_nodes(tdb=25, tr=25, v=0.1, rh=50, met=2.0, clo=0.5, round=False, calculate_ce=True)
        assert for_ce.t_skin > normal.t_skin

    @pytest.mark.parametrize("tdb", [10.0, 25.0, 40.0])
    @pytest.mark.parametrize("met", [1.0, 2.5])
    def test_physiological_bounds(self, tdb, met):
        """Wettedness and skin blood flow stay within their limits."""
        result = two_nodes(tdb=tdb, tr=tdb, v=0.2, rh=50, met=met, clo=0.6, round=False)
        assert 0.0 <= result.w <= result.w_max
        assert 0.5 <= result.m_bl <= 90.0
        assert result.m_rsw <= 500.0 + 1e-9

    def test_lowered_blood_flow_cap(self):
        """A lower max_skin_blood_flow limits vasodilation in the heat."""
        hot = {"tdb": 40, "tr": 40, "v": 0.1, "rh": 50, "met": 3.0, "clo": 1.0, "round": False}
        default = two_nodes(**hot)
        capped = two_nodes(**hot, max_skin_blood_flow=20)
        assert default.m_bl > 20
        assert capped.m_bl <= 20

    def test_max_sweating_limits_sweat_rate(self):
        """A low max_sweating caps the regulatory sweat rate."""
        hot = {"tdb": 40, "tr": 40, "v": 0.1, "rh": 50, "met": 3.0, "clo": 1.0, "round": False}
        default = two_nodes(**hot)
        capped = two_nodes(**hot, max_sweating=20)
        assert default.m_rsw > 20
        assert capped.m_rsw <= 20 + 1e-9

    def test_supersaturated_skin_cannot_evaporate(self):
        """When the air holds more vapour than the skin surface, sweat does not evaporate."""
        result = two_nodes(tdb=45, tr=45, v=0.1, rh=100, met=1.0, clo=0.5, round=False)
        assert result.e_max < 0
        assert result.e_rsw == 0.0
        assert result.e_skin == 0.0
        assert result.w == result.w_max

    def test_zero_w_max_uses_formula(self, reference_inputs):
        """w_max=0 falls back to the air speed and clothing formula."""
        assert two_nodes(**reference_inputs, w_max=0) == two_nodes(**reference_inputs)

    @pytest.mark.slow
    def test_no_convergence_failure_across_inputs(self):
        """The internal solvers converge and stay finite over the full input range."""
        for tdb in np.arange(0.0, 50.1, 10.0):
            for clo in (0.0, 0.5, 1.0, 1.5, 2.0):
                for met in (0.5, 1.0, 2.0, 3.0, 4.0):
                    try:
                        result = two_nodes(tdb=tdb, tr=tdb, v=0.3, rh=50, met=met, clo=clo)
                    except ConvergenceError as e:
                        pytest.fail(f"tdb={tdb}, clo={clo}, met={met}: {e}")
                    assert all(np.isfinite(value) for value in result.to_dict().values()), (
                        f"non-finite output at tdb={tdb}, clo={clo}, met={met}"
                    )


# =============================================================================
# Batch
# =============================================================================


class TestTwoNodesArray:
    """Tests for two_nodes_array."""

    def test_matches_scalar(self, reference_inputs, warm_inputs):
        """Element i of the batch equals the scalar result for input i."""
        batch = two_nodes_array(**{key: [reference_inputs[key], warm_inputs[key]] for key in reference_inputs})
        assert isinstance(batch, TwoNodesArrayResult)
        assert batch[0] == two_nodes(**reference_inputs)
        assert batch[1] == two_nodes(**warm_inputs)

    def test_scalar_body_parameters_broadcast(self):
        """Body parameters may be scalars or shorter sequences."""
        batch = two_nodes_array(
            [25, 25],
            [25, 25],
            [0.1, 0.1],
            [50, 50],
            [1.2, 1.2],
            [0.5, 0.5],
            body_position=["sitting"],
            body_surface_area=1.9,
        )
        sitting = two_nodes(25, 25, 0.1, 50, 1.2, 0.5, body_position="sitting", body_surface_area=1.9)
        assert batch[0] == sitting
        assert batch[1] == sitting

    def test_mismatched_lengths(self):
        """Primary inputs must share one length."""
        with pytest.raises(InvalidInputError):
            two_nodes_array([25, 26], [25, 26, 27], 0.1, 50, 1.2, 0.5)

    def test_too_long_body_parameter(self):
        """Body parameter sequences cannot be longer than the batch."""
        with pytest.raises(InvalidInputError):
            two_nodes_array([25], [25], [0.1], [50], [1.2], [0.5], wme=[0, 0])

    def test_to_dict(self):
        """to_dict exposes one array per output."""
        batch = two_nodes_array([25, 30], [25, 30], 0.1, 50, 1.2, 0.5)
        data = batch.to_dict()
        assert set(data) == set(TwoNodesResult.__dataclass_fields__)
        assert data["set"].shape == (2,)

    def test_progress_bar(self):
        """The progress option does not change the results."""
        quiet = two_nodes_array([25, 30], [25, 30], 0.1, 50, 1.2, 0.5)
        shown = two_nodes_array([25, 30], [25, 30], 0.1, 50, 1.2, 0.5, progress=True)
        np.testing.assert_array_equal(quiet.set, shown.set)
