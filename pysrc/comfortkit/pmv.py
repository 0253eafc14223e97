"""
Fanger Predicted Mean Vote (PMV) and Predicted Percentage of Dissatisfied (PPD).

The PMV equation is the same in ISO 7730 and ASHRAE 55. Under ASHRAE 55 the
PMV is only used in still air: above 0.1 m/s the cooling effect is
subtracted from tdb and tr first and the air speed is set to 0.1 m/s
(Addendum C to Standard 55-2020).
"""

from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING

import numpy as np

from .constants import CLO_TO_M2K_W, MET_FACTOR_ISO
from .cooling_effect import STILL_AIR_THRESHOLD, cooling_effect
from .errors import ConvergenceError, InvalidInputError
from .models.results import PmvPpdResult
from .utilities import check_standard_compliance_array, round_half_up, units_converter, valid_range

if TYPE_CHECKING:
    from numpy.typing import ArrayLike

logger = logging.getLogger(__name__)

PMV_STANDARDS = ("ISO", "ASHRAE")

# Clothing temperature iteration (ISO 7730 Annex D)
PMV_TOLERANCE = 0.00015
PMV_MAX_ITERATIONS = 150

# PMV range outside of which PMV/PPD are returned as NaN
PMV_VALID_RANGE = {"ISO": (-2.0, 2.0), "ASHRAE": (-100.0, 100.0)}


def pmv_calculation(tdb: float, tr: float, vr: float, rh: float, met: float, clo: float, wme: float = 0) -> float:
    """
    Unrounded PMV for a single set of SI inputs, following ISO 7730 Annex D.

    Raises:
        ConvergenceError: If the clothing temperature iteration exceeds 150 steps.
    """
    pa = rh * 10 * math.exp(16.6536 - 4030.183 / (tdb + 235))

    icl = CLO_TO_M2K_W * clo
    m = met * MET_FACTOR_ISO
    w = wme * MET_FACTOR_ISO
    mw = m - w

    # clothing area factor
    if icl <= 0.078:
        f_cl = 1 + 1.29 * icl
    else:
        f_cl = 1.05 + 0.645 * icl

    hcf = 12.1 * math.sqrt(vr)
    hc = hcf
    taa = tdb + 273
    tra = tr + 273
    t_cla = taa + (35.5 - tdb) / (3.5 * icl + 0.1)

    p1 = icl * f_cl
    p2 = p1 * 3.96
    p3 = p1 * 100
    p4 = p1 * taa
    p5 = 308.7 - 0.028 * mw + p2 * (tra / 100.0) ** 4
    xn = t_cla / 100
    xf = t_cla / 50

    n = 0
    while abs(xn - xf) > PMV_TOLERANCE:
        xf = (xf + xn) / 2
        hcn = 2.38 * abs(100.0 * xf - taa) ** 0.25
        hc = max(hcf, hcn)
        xn = (p5 + p4 * hc - p2 * xf**4) / (100 + p3 * hc)
        n += 1
        if n > PMV_MAX_ITERATIONS:
            raise ConvergenceError("PMV clothing temperature", PMV_MAX_ITERATIONS, residual=xn - xf)

    tcl = 100 * xn - 273

    hl1 = 3.05 * 0.001 * (5733 - 6.99 * mw - pa)  # skin diffusion
    hl2 = 0.42 * (mw - MET_FACTOR_ISO) if mw > MET_FACTOR_ISO else 0  # sweating
    hl3 = 1.7 * 0.00001 * m * (5867 - pa)  # latent respiration
    hl4 = 0.0014 * m * (34 - tdb)  # dry respiration
    hl5 = 3.96 * f_cl * (xn**4 - (tra / 100.0) ** 4)  # radiation
    hl6 = f_cl * hc * (tcl - tdb)  # convection

    ts = 0.303 * math.exp(-0.036 * m) + 0.028
    return ts * (mw - hl1 - hl2 - hl3 - hl4 - hl5 - hl6)


def ppd_from_pmv(pmv: ArrayLike) -> np.ndarray:
    """Predicted Percentage of Dissatisfied (%) for a given PMV."""
    pmv = np.asarray(pmv, dtype=float)
    return 100.0 - 95.0 * np.exp(-0.03353 * pmv**4.0 - 0.2179 * pmv**2.0)


def pmv_ppd(
    tdb: ArrayLike,
    tr: ArrayLike,
    vr: ArrayLike,
    rh: ArrayLike,
    met: ArrayLike,
    clo: ArrayLike,
    wme: ArrayLike = 0,
    standard: str = "ISO",
    units: str = "SI",
    limit_inputs: bool = True,
    airspeed_control: bool = True,
) -> PmvPpdResult:
    """
    PMV and PPD in accordance with ISO 7730 or ASHRAE 55.

    Scalars and arrays are both accepted; array inputs are broadcast against
    each other and the result holds arrays.

    Args:
        tdb: Dry bulb air temperature (°C, °F if units="IP").
        tr: Mean radiant temperature (°C, °F if units="IP").
        vr: Relative air speed (m/s, fps if units="IP"), see
            :func:`~comfortkit.utilities.v_relative`.
        rh: Relative humidity (%).
        met: Metabolic rate (met).
        clo: Dynamic clothing insulation (clo), see
            :func:`~comfortkit.utilities.clo_dynamic`.
        wme: External work (met). Default 0.
        standard: "ISO" or "ASHRAE".
        units: "SI" or "IP".
        limit_inputs: Return NaN when inputs or the PMV fall outside the
            applicability limits of the standard.
        airspeed_control: ASHRAE only. False applies the air speed limits for
            occupants without control over air movement.

    Returns:
        PmvPpdResult with PMV rounded to 2 decimals and PPD to 1.

    Raises:
        InvalidInputError: If the standard is not ISO or ASHRAE.

    Example:
        >>> pmv_ppd(tdb=25, tr=25, vr=0.1, rh=50, met=1.2, clo=0.5).pmv
        0.08
    """
    standard = standard.upper()
    if standard not in PMV_STANDARDS:
        raise InvalidInputError(
            "standard", standard, "PMV calculations can only be performed in compliance with ISO or ASHRAE Standards"
        )

    if units.upper() == "IP":
        converted = units_converter(tdb=tdb, tr=tr, vr=vr)
        tdb, tr, vr = converted["tdb"], converted["tr"], converted["vr"]

    tdb, tr, vr, rh, met, clo, wme = np.broadcast_arrays(
        *(np.asarray(x, dtype=float) for x in (tdb, tr, vr, rh, met, clo, wme))
    )
    scalar = tdb.ndim == 0

    valid = check_standard_compliance_array(
        standard, tdb=tdb, tr=tr, v=vr, met=met, clo=clo, airspeed_control=airspeed_control
    )

    ce = np.zeros(tdb.shape)
    if standard == "ASHRAE":
        ce = np.vectorize(cooling_effect, otypes=[float])(tdb, tr, vr, rh, met, clo, wme)

    tdb = tdb - ce
    tr = tr - ce
    vr = np.where(ce > 0, STILL_AIR_THRESHOLD, vr)

    pmv_values = np.vectorize(pmv_calculation, otypes=[float])(tdb, tr, vr, rh, met, clo, wme)
    ppd_values = ppd_from_pmv(pmv_values)

    if limit_inputs:
        outside = np.isnan(pmv_values) | np.isnan(valid_range(pmv_values, PMV_VALID_RANGE[standard]))
        for values in valid.values():
            outside |= np.isnan(values)
        if outside.any():
            logger.debug(f"{int(outside.sum())} PMV value(s) outside {standard} applicability limits")
        pmv_values = np.where(outside, np.nan, pmv_values)
        ppd_values = np.where(outside, np.nan, ppd_values)

    pmv_values = np.asarray(round_half_up(pmv_values, 2))
    ppd_values = np.asarray(round_half_up(ppd_values, 1))
    if scalar:
        return PmvPpdResult(pmv=float(pmv_values), ppd=float(ppd_values))
    return PmvPpdResult(pmv=pmv_values, ppd=ppd_values)


def pmv(
    tdb: ArrayLike,
    tr: ArrayLike,
    vr: ArrayLike,
    rh: ArrayLike,
    met: ArrayLike,
    clo: ArrayLike,
    wme: ArrayLike = 0,
    standard: str = "ISO",
    units: str = "SI",
    limit_inputs: bool = True,
    airspeed_control: bool = True,
) -> float | np.ndarray:
    """Predicted Mean Vote only; see :func:`pmv_ppd` for the arguments."""
    return pmv_ppd(
        tdb,
        tr,
        vr,
        rh,
        met,
        clo,
        wme,
        standard=standard,
        units=units,
        limit_inputs=limit_inputs,
        airspeed_control=airspeed_control,
    ).pmv
