"""
Gagge two-node thermoregulation model.

Simulates 60 minutes of human heat exchange with a constant environment,
starting from the thermally neutral state, then derives SET, ET and the
comfort indices from the final physiological state.

Reference:
- Gagge AP, Fobelets AP, Berglund LG (1986). A standard predictive index of
  human response to the thermal environment. ASHRAE Transactions 92(2B).
- ANSI/ASHRAE Standard 55-2020, Normative Appendix D.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

from .batch import align_inputs, map_aligned
from .components.heat_balance import StaticQuantities, step
from .components.thermal_indices import (
    discomfort,
    equivalent_temperature,
    pmv_gagge,
    pmv_set,
    standard_environment,
    thermal_sensation,
)
from .constants import (
    DEFAULT_BODY_SURFACE_AREA,
    DEFAULT_MAX_SKIN_BLOOD_FLOW,
    P_ATM_STANDARD,
    SIMULATION_MINUTES,
)
from .models.config import BodyParams, TwoNodesConfig
from .models.results import TwoNodesArrayResult, TwoNodesResult
from .physics.psychrometrics import vapor_pressure

logger = logging.getLogger(__name__)


def calculate_two_nodes(
    tdb: float,
    tr: float,
    v: float,
    pa: float,
    met: float,
    clo: float,
    wme: float,
    body: BodyParams,
    config: TwoNodesConfig,
) -> TwoNodesResult:
    """
    Run the two-node simulation and derive all indices, without rounding.

    Args:
        tdb: Dry bulb air temperature (°C).
        tr: Mean radiant temperature (°C).
        v: Air speed (m/s).
        pa: Ambient water vapour pressure (mmHg).
        met: Metabolic rate (met).
        clo: Clothing insulation (clo).
        wme: External work (met).
        body: Body and site parameters.
        config: Model settings.

    Returns:
        Unrounded TwoNodesResult.

    Raises:
        ConvergenceError: If the clothing temperature, SET or ET solver
            exceeds its iteration cap.
    """
    static = StaticQuantities.build(tdb, tr, v, pa, met, clo, wme, body, config)

    state = static.initial_state()
    for _ in range(SIMULATION_MINUTES):
        state = step(state, static)

    q_skin = state.q_sensible + state.e_skin

    standard = standard_environment(
        h_r=state.h_r,
        met=met,
        wme=wme,
        lr=static.lr,
        pressure_ratio=static.pressure_ratio,
        calculate_ce=config.calculate_ce,
    )
    set_temperature = equivalent_temperature(q_skin, state.t_skin, state.w, standard.h_d, standard.h_e, name="SET")

    h_d = 1.0 / (state.r_a + static.r_clo)
    h_e = 1.0 / (state.r_ea + state.r_ecl)
    et = equivalent_temperature(q_skin, state.t_skin, state.w, h_d, h_e, name="ET")

    t_sens = thermal_sensation(state.t_body, static.rm, static.w_max)

    logger.debug(
        f"two_nodes final state: t_skin={state.t_skin:.3f}, t_core={state.t_core:.3f}, "
        f"w={state.w:.3f}, SET={set_temperature:.3f}"
    )

    return TwoNodesResult(
        e_skin=state.e_skin,
        e_rsw=state.e_rsw,
        e_max=state.e_max,
        q_sensible=state.q_sensible,
        q_skin=q_skin,
        q_res=static.q_res,
        t_core=state.t_core,
        t_skin=state.t_skin,
        m_bl=state.m_bl,
        m_rsw=state.m_rsw,
        w=state.w,
        w_max=static.w_max,
        set=set_temperature,
        et=et,
        pmv_gagge=pmv_gagge(state.m, state.e_req, static.e_comfort, state.e_diff),
        pmv_set=pmv_set(
            m=state.m,
            rm=static.rm,
            c_res=static.c_res,
            q_res=static.q_res,
            h_d_s=standard.h_d,
            t_skin=state.t_skin,
            set_temperature=set_temperature,
            e_comfort=static.e_comfort,
            e_diff=state.e_diff,
        ),
        disc=discomfort(state.e_rsw, static.e_comfort, state.e_max, static.w_max, state.e_diff, t_sens),
        t_sens=t_sens,
    )


def two_nodes(
    tdb: float,
    tr: float,
    v: float,
    rh: float,
    met: float,
    clo: float,
    wme: float = 0,
    body_surface_area: float = DEFAULT_BODY_SURFACE_AREA,
    p_atmospheric: float = P_ATM_STANDARD,
    body_position: str = "standing",
    max_skin_blood_flow: float = DEFAULT_MAX_SKIN_BLOOD_FLOW,
    config: TwoNodesConfig | None = None,
    **kwargs: Any,
) -> TwoNodesResult:
    """
    Two-node model of human temperature regulation (Gagge et al. 1986).

    Returns the physiological variables of a person exposed to a constant
    environment for one hour, together with SET, ET and comfort indices.

    Args:
        tdb: Dry bulb air temperature (°C).
        tr: Mean radiant temperature (°C).
        v: Air speed (m/s). Values below 0.1 are treated as 0.1.
        rh: Relative humidity (%).
        met: Metabolic rate (met).
        clo: Clothing insulation (clo).
        wme: External work (met). Default 0.
        body_surface_area: Body surface area (m²). Default 1.8258.
        p_atmospheric: Atmospheric pressure (Pa). Default 101325.
        body_position: "standing" or "sitting".
        max_skin_blood_flow: Upper limit of skin blood flow (kg/h/m²). Default 90.
        config: Model settings. Defaults to ``TwoNodesConfig.defaults()``.
        **kwargs: Per-call overrides of config fields (``round``,
            ``calculate_ce``, ``max_sweating``, ``w_max``).

    Returns:
        TwoNodesResult, rounded to one decimal unless ``round=False``.

    Raises:
        InvalidInputError: If body_position or another body parameter is invalid.
        ConfigurationError: If an override is unknown or invalid.
        ConvergenceError: If an internal solver exceeds its iteration cap.

    Example:
        >>> result = two_nodes(tdb=25, tr=25, v=0.3, rh=50, met=1.2, clo=0.5)
        >>> result.set
        23.6
    """
    config = (config or TwoNodesConfig.defaults()).with_overrides(**kwargs)
    body = BodyParams(
        body_surface_area=body_surface_area,
        p_atmospheric=p_atmospheric,
        body_position=body_position,
        max_skin_blood_flow=max_skin_blood_flow,
    )

    result = calculate_two_nodes(tdb, tr, v, vapor_pressure(tdb, rh), met, clo, wme, body, config)
    if config.round:
        return result.rounded(1)
    return result


def two_nodes_array(
    tdb: Sequence[float],
    tr: Sequence[float],
    v: Sequence[float],
    rh: Sequence[float],
    met: Sequence[float],
    clo: Sequence[float],
    wme: float | Sequence[float] = 0,
    body_surface_area: float | Sequence[float] = DEFAULT_BODY_SURFACE_AREA,
    p_atmospheric: float | Sequence[float] = P_ATM_STANDARD,
    body_position: str | Sequence[str] = "standing",
    max_skin_blood_flow: float | Sequence[float] = DEFAULT_MAX_SKIN_BLOOD_FLOW,
    config: TwoNodesConfig | None = None,
    progress: bool = False,
    **kwargs: Any,
) -> TwoNodesArrayResult:
    """
    Batch version of :func:`two_nodes`.

    The six primary inputs are equal-length sequences (scalars are repeated).
    Body parameters may be scalars or shorter sequences, which are filled with
    their first element.

    Args:
        tdb, tr, v, rh, met, clo: Primary inputs, as in :func:`two_nodes`.
        wme, body_surface_area, p_atmospheric, body_position,
        max_skin_blood_flow: Body parameters, broadcast to the batch length.
        config: Model settings shared by every element.
        progress: Show a tqdm progress bar.
        **kwargs: Per-call overrides of config fields.

    Returns:
        TwoNodesArrayResult with one array per output, in input order.

    Raises:
        InvalidInputError: If the primary sequences differ in length.
    """
    config = (config or TwoNodesConfig.defaults()).with_overrides(**kwargs)
    columns, length = align_inputs(
        primary={"tdb": tdb, "tr": tr, "v": v, "rh": rh, "met": met, "clo": clo},
        secondary={
            "wme": wme,
            "body_surface_area": body_surface_area,
            "p_atmospheric": p_atmospheric,
            "body_position": body_position,
            "max_skin_blood_flow": max_skin_blood_flow,
        },
    )

    results = map_aligned(
        lambda **row: two_nodes(**row, config=config),
        columns,
        length,
        desc="two_nodes",
        progress=progress,
    )
    return TwoNodesArrayResult.from_results(results)
