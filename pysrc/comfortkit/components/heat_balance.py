"""
Heat-balance time step of the two-node (core/skin) model.

The body is split into a core and a thin skin shell. Every simulated minute
the clothing surface temperature is converged first, then sensible and
latent heat flows update both node temperatures and the thermoregulatory
responses (skin blood flow, sweating, shivering).

Reference:
- Gagge AP, Fobelets AP, Berglund LG (1986). A standard predictive index of
  human response to the thermal environment. ASHRAE Transactions 92(2B).
- ASHRAE Handbook Fundamentals, Chapter 9.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, replace

from ..constants import (
    ALFA_NEUTRAL,
    BODY_WEIGHT,
    C_DIL,
    C_STR,
    C_SW,
    CLO_TO_M2K_W,
    CLOTHING_EMISSIVITY,
    CLOTHING_TEMP_MAX_ITERATIONS,
    CLOTHING_TEMP_TOLERANCE,
    KELVIN_OFFSET,
    MET_FACTOR,
    MIN_SKIN_BLOOD_FLOW,
    RADIATION_AREA_SITTING,
    RADIATION_AREA_STANDING,
    SBC,
    SKIN_BLOOD_FLOW_NEUTRAL,
    TEMP_CORE_NEUTRAL,
    TEMP_SKIN_NEUTRAL,
)
from ..models.config import BodyParams, TwoNodesConfig
from ..models.state import PhysiologicalState
from ..physics.body import lewis_ratio
from ..physics.psychrometrics import p_sat_torr
from ..solvers import fixed_point

# Mean body temperature of the thermally neutral reference state
TEMP_BODY_NEUTRAL = ALFA_NEUTRAL * TEMP_SKIN_NEUTRAL + (1 - ALFA_NEUTRAL) * TEMP_CORE_NEUTRAL

# Initial linearised radiative coefficient (W/m²K)
H_R_INITIAL = 4.7


def rectify(x: float) -> float:
    """Positive part of ``x``; thermoregulatory signals are one-sided."""
    return max(0.0, x)


def activity_convection(met: float, calculate_ce: bool) -> float:
    """
    Convective coefficient generated by body movement (W/m²K).

    Zero when computing SET for the cooling effect, or at rest (met <= 0.85).
    """
    if calculate_ce or met <= 0.85:
        return 0.0
    return 5.66 * (met - 0.85) ** 0.39


def convective_coefficient(air_speed: float, pressure_ratio: float, met: float, calculate_ce: bool = False) -> float:
    """
    Convective heat transfer coefficient h_cc (W/m²K).

    The largest of the natural, forced and activity-driven coefficients.

    Args:
        air_speed: Air speed, already clamped to at least 0.1 m/s.
        pressure_ratio: Atmospheric pressure relative to sea level.
        met: Metabolic rate (met).
        calculate_ce: Skip the activity term.
    """
    h_natural = 3.0 * pressure_ratio**0.53
    h_forced = 8.600001 * (air_speed * pressure_ratio) ** 0.53
    return max(h_natural, h_forced, activity_convection(met, calculate_ce))


def critical_wettedness(air_speed: float, clo: float) -> float:
    """Practical upper limit of skin wettedness for nude or clothed subjects."""
    if clo > 0:
        return 0.59 * air_speed**-0.08
    return 0.38 * air_speed**-0.29


@dataclass(frozen=True)
class StaticQuantities:
    """
    Quantities that stay constant across the 60 simulated minutes.

    Built once per model call by :meth:`build`; the time step reads them but
    never changes them.
    """

    tdb: float
    tr: float
    air_speed: float
    vapor_pressure: float
    met: float
    wme: float
    r_clo: float
    f_a_cl: float
    lr: float
    rm: float
    e_comfort: float
    i_cl: float
    w_max: float
    h_cc: float
    q_res: float
    c_res: float
    pressure_ratio: float
    radiation_area: float
    body_surface_area: float
    max_skin_blood_flow: float
    max_sweating: float

    @classmethod
    def build(
        cls,
        tdb: float,
        tr: float,
        v: float,
        vapor_pressure: float,
        met: float,
        clo: float,
        wme: float,
        body: BodyParams,
        config: TwoNodesConfig,
    ) -> StaticQuantities:
        air_speed = max(v, 0.1)
        pressure_ratio = body.p_atmospheric / 101325
        rm = (met - wme) * MET_FACTOR
        m = met * MET_FACTOR

        w_max = config.w_max if config.w_max else critical_wettedness(air_speed, clo)

        return cls(
            tdb=tdb,
            tr=tr,
            air_speed=air_speed,
            vapor_pressure=vapor_pressure,
            met=met,
            wme=wme,
            r_clo=CLO_TO_M2K_W * clo,
            f_a_cl=1.0 + 0.15 * clo,
            lr=lewis_ratio(body.p_atmospheric),
            rm=rm,
            e_comfort=max(0.0, 0.42 * (rm - MET_FACTOR)),
            i_cl=0.45 if clo > 0 else 1.0,
            w_max=w_max,
            h_cc=convective_coefficient(air_speed, pressure_ratio, met, config.calculate_ce),
            # respiration losses use the resting metabolic heat production
            q_res=0.0023 * m * (44.0 - vapor_pressure),
            c_res=0.0014 * m * (34.0 - tdb),
            pressure_ratio=pressure_ratio,
            radiation_area=RADIATION_AREA_SITTING if body.body_position == "sitting" else RADIATION_AREA_STANDING,
            body_surface_area=body.body_surface_area,
            max_skin_blood_flow=body.max_skin_blood_flow,
            max_sweating=config.max_sweating,
        )

    def initial_state(self) -> PhysiologicalState:
        """Neutral state with the air-layer values for the initial h_r of 4.7."""
        h_t = H_R_INITIAL + self.h_cc
        return PhysiologicalState.neutral(
            met=self.met,
            m=self.met * MET_FACTOR,
            r_a=1.0 / (self.f_a_cl * h_t),
            t_op=(H_R_INITIAL * self.tr + self.h_cc * self.tdb) / h_t,
        )


def clothing_temperature(state: PhysiologicalState, static: StaticQuantities) -> tuple[float, tuple[float, float, float]]:
    """
    Converge the clothing surface temperature for the current skin temperature.

    Returns:
        ``(t_cl, (h_r, r_a, t_op))`` with the coefficients of the final iteration.

    Raises:
        ConvergenceError: If the iteration does not settle within 150 steps.
    """
    r_clo = static.r_clo

    def update(t_cl: float) -> tuple[float, tuple[float, float, float]]:
        h_r = 4.0 * CLOTHING_EMISSIVITY * SBC * ((t_cl + static.tr) / 2.0 + KELVIN_OFFSET) ** 3.0 * static.radiation_area
        h_t = h_r + static.h_cc
        r_a = 1.0 / (static.f_a_cl * h_t)
        t_op = (h_r * static.tr + static.h_cc * static.tdb) / h_t
        t_cl_new = (r_a * state.t_skin + r_clo * t_op) / (r_a + r_clo)
        return t_cl_new, (h_r, r_a, t_op)

    t_cl_guess = (state.r_a * state.t_skin + r_clo * state.t_op) / (state.r_a + r_clo)
    return fixed_point(
        update,
        t_cl_guess,
        tolerance=CLOTHING_TEMP_TOLERANCE,
        max_iterations=CLOTHING_TEMP_MAX_ITERATIONS,
        name="clothing temperature",
    )


def step(state: PhysiologicalState, static: StaticQuantities) -> PhysiologicalState:
    """
    Advance the two-node model by one minute.

    Pure function: ``state`` is left untouched and a new state is returned.
    """
    _, (h_r, r_a, t_op) = clothing_temperature(state, static)

    q_sensible = (state.t_skin - t_op) / (r_a + static.r_clo)

    # core-to-skin heat flow: tissue conductance 5.28 W/m²K, blood 1.163 Wh/(L K)
    hf_cs = (state.t_core - state.t_skin) * (5.28 + 1.163 * state.m_bl)
    s_core = state.m - hf_cs - static.q_res - static.c_res - static.wme
    s_skin = hf_cs - q_sensible - state.e_skin

    tc_sk = 0.97 * state.alfa * BODY_WEIGHT
    tc_cr = 0.97 * (1 - state.alfa) * BODY_WEIGHT
    t_skin = state.t_skin + s_skin * static.body_surface_area / (tc_sk * 60.0)
    t_core = state.t_core + s_core * static.body_surface_area / (tc_cr * 60.0)
    t_body = state.alfa * t_skin + (1 - state.alfa) * t_core

    sk_sig = t_skin - TEMP_SKIN_NEUTRAL
    warm_sk = rectify(sk_sig)
    colds = rectify(-sk_sig)
    c_reg_sig = t_core - TEMP_CORE_NEUTRAL
    c_warm = rectify(c_reg_sig)
    c_cold = rectify(-c_reg_sig)
    warm_b = rectify(t_body - TEMP_BODY_NEUTRAL)

    m_bl = (SKIN_BLOOD_FLOW_NEUTRAL + C_DIL * c_warm) / (1 + C_STR * colds)
    m_bl = min(max(m_bl, MIN_SKIN_BLOOD_FLOW), static.max_skin_blood_flow)

    m_rsw = min(C_SW * warm_b * math.exp(warm_sk / 10.7), static.max_sweating)
    e_rsw = 0.68 * m_rsw

    r_ea = 1.0 / (static.lr * static.f_a_cl * static.h_cc)
    r_ecl = static.r_clo / (static.lr * static.i_cl)
    e_req = static.rm - static.q_res - static.c_res - q_sensible
    e_max = (p_sat_torr(t_skin) - static.vapor_pressure) / (r_ea + r_ecl)

    p_rsw = e_rsw / e_max
    w = 0.06 + 0.94 * p_rsw
    e_diff = w * e_max - e_rsw
    if w > static.w_max:
        w = static.w_max
        p_rsw = static.w_max / 0.94
        e_rsw = p_rsw * e_max
        e_diff = 0.06 * (1.0 - p_rsw) * e_max
    if e_max < 0:
        e_diff = 0.0
        e_rsw = 0.0
        w = static.w_max

    e_skin = e_rsw + e_diff
    # sweat mass consistent with the possibly capped evaporation
    m_rsw = e_rsw / 0.68
    met_shivering = 19.4 * colds * c_cold

    return replace(
        state,
        t_skin=t_skin,
        t_core=t_core,
        m_bl=m_bl,
        alfa=0.0417737 + 0.7451833 / (m_bl + 0.585417),
        m=static.rm + met_shivering,
        e_skin=e_skin,
        q_sensible=q_sensible,
        w=w,
        m_rsw=m_rsw,
        e_rsw=e_rsw,
        e_diff=e_diff,
        e_max=e_max,
        e_req=e_req,
        t_body=t_body,
        h_r=h_r,
        r_a=r_a,
        t_op=t_op,
        r_ea=r_ea,
        r_ecl=r_ecl,
    )
