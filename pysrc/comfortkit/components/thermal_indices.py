"""
Indices derived from the final two-node state.

SET and ET are both found as the temperature of a reference environment
that produces the same skin heat loss as the actual one; they differ only in
the dry and evaporative heat transfer coefficients used.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from ..constants import CLO_TO_M2K_W, K_CLO, MET_FACTOR, MET_FACTOR_ISO
from ..physics.psychrometrics import p_sat_torr
from ..solvers import secant
from .heat_balance import activity_convection


@dataclass(frozen=True)
class StandardEnvironment:
    """
    Heat transfer coefficients of the SET reference environment.

    Still air, tr = tdb, 50 % RH, with the clothing standardised for the
    activity level.

    Attributes:
        h_d: Dry heat transfer coefficient (W/m²K).
        h_e: Evaporative heat transfer coefficient (W/m²mmHg).
    """

    h_d: float
    h_e: float


def standard_environment(
    h_r: float,
    met: float,
    wme: float,
    lr: float,
    pressure_ratio: float,
    calculate_ce: bool = False,
) -> StandardEnvironment:
    """
    Build the SET reference environment.

    Args:
        h_r: Radiative coefficient of the last simulated minute (W/m²K).
        met: Metabolic rate (met).
        wme: External work (met).
        lr: Lewis ratio.
        pressure_ratio: Atmospheric pressure relative to sea level.
        calculate_ce: Skip the activity-driven convection term.
    """
    h_c_s = max(3.0, 3.0 * pressure_ratio**0.53, activity_convection(met, calculate_ce))
    h_t_s = h_c_s + h_r

    r_clo_s = 1.52 / ((met - wme / MET_FACTOR) + 0.6944) - 0.1835
    r_cl_s = CLO_TO_M2K_W * r_clo_s
    f_a_cl_s = 1.0 + K_CLO * r_clo_s
    f_cl_s = 1.0 / (1.0 + CLO_TO_M2K_W * f_a_cl_s * h_t_s * r_clo_s)
    i_m_s = 0.45
    i_cl_s = i_m_s * h_c_s / h_t_s * (1 - f_cl_s) / (h_c_s / h_t_s - f_cl_s * i_m_s)

    r_a_s = 1.0 / (f_a_cl_s * h_t_s)
    r_ea_s = 1.0 / (lr * f_a_cl_s * h_c_s)
    r_ecl_s = r_cl_s / (lr * i_cl_s)
    return StandardEnvironment(h_d=1.0 / (r_a_s + r_cl_s), h_e=1.0 / (r_ea_s + r_ecl_s))


def equivalent_temperature(q_skin: float, t_skin: float, w: float, h_d: float, h_e: float, name: str) -> float:
    """
    Temperature of a 50 % RH isothermal environment with the same skin heat loss.

    Solves ``q_skin = h_d (t_skin - X) + w h_e (p_sat(t_skin) - 0.5 p_sat(X))``
    for X with the shared secant solver.

    Raises:
        ConvergenceError: If the solver exceeds its iteration cap.
    """
    p_s_sk = p_sat_torr(t_skin)

    def residual(x: float) -> float:
        return q_skin - h_d * (t_skin - x) - w * h_e * (p_s_sk - 0.5 * p_sat_torr(x))

    return secant(residual, t_skin - q_skin / h_d, name=name)


def thermal_sensation(t_body: float, rm: float, w_max: float) -> float:
    """Predicted thermal sensation from the mean body temperature."""
    tbm_l = (0.194 / MET_FACTOR_ISO) * rm + 36.301  # lower limit for evaporative regulation
    tbm_h = (0.347 / MET_FACTOR_ISO) * rm + 36.669  # upper limit

    if t_body < tbm_l:
        return 0.4685 * (t_body - tbm_l)
    if t_body < tbm_h:
        return w_max * 4.7 * (t_body - tbm_l) / (tbm_h - tbm_l)
    return w_max * 4.7 + 0.4685 * (t_body - tbm_h)


def discomfort(e_rsw: float, e_comfort: float, e_max: float, w_max: float, e_diff: float, t_sens: float) -> float:
    """Thermal discomfort; falls back to the thermal sensation when not positive."""
    disc = 4.7 * (e_rsw - e_comfort) / (e_max * w_max - e_comfort - e_diff)
    if disc <= 0:
        return t_sens
    return disc


def _sensation_factor(m: float) -> float:
    return 0.303 * math.exp(-0.036 * m) + 0.028


def pmv_gagge(m: float, e_req: float, e_comfort: float, e_diff: float) -> float:
    """Gagge's version of Fanger's PMV."""
    return _sensation_factor(m) * (e_req - e_comfort - e_diff)


def pmv_set(
    m: float,
    rm: float,
    c_res: float,
    q_res: float,
    h_d_s: float,
    t_skin: float,
    set_temperature: float,
    e_comfort: float,
    e_diff: float,
) -> float:
    """PMV with the dry heat loss evaluated in the SET reference environment."""
    dry_set = h_d_s * (t_skin - set_temperature)
    e_req_set = rm - c_res - q_res - dry_set
    return _sensation_factor(m) * (e_req_set - e_comfort - e_diff)


def percent_satisfied(t_op: float, v: float) -> float:
    """
    Predicted percent satisfied with the level of air movement.

    Args:
        t_op: Operative temperature (°C).
        v: Air speed as measured, without the 0.1 m/s floor (m/s).
    """
    return 100 * (1.13 * t_op**0.5 - 0.24 * t_op + 2.7 * v**0.5 - 0.99 * v)
