"""
Cooling effect of elevated air speed (ASHRAE 55 2020, Normative Appendix D).

The cooling effect is the drop in air and mean radiant temperature that,
in still air (0.1 m/s), gives the same SET as the actual environment.
"""

from __future__ import annotations

import logging
import warnings

from scipy import optimize

from .set_tmp import set_tmp
from .utilities import round_half_up, units_converter

logger = logging.getLogger(__name__)

STILL_AIR_THRESHOLD = 0.1  # m/s


def cooling_effect(
    tdb: float,
    tr: float,
    vr: float,
    rh: float,
    met: float,
    clo: float,
    wme: float = 0,
    units: str = "SI",
) -> float:
    """
    Cooling effect of elevated air speed.

    Args:
        tdb: Dry bulb air temperature (°C, °F if units="IP").
        tr: Mean radiant temperature (°C, °F if units="IP").
        vr: Relative air speed (m/s, fps if units="IP").
        rh: Relative humidity (%).
        met: Metabolic rate (met).
        clo: Clothing insulation (clo).
        wme: External work (met). Default 0.
        units: "SI" or "IP".

    Returns:
        Cooling effect (°C, °F if units="IP"), rounded to 2 decimals. Zero
        in still air, or when no temperature drop within 0-40 °C matches.

    Example:
        >>> cooling_effect(tdb=25, tr=25, vr=0.3, rh=50, met=1.2, clo=0.5)
        1.68
    """
    if units.upper() == "IP":
        converted = units_converter(tdb=tdb, tr=tr, vr=vr)
        tdb, tr, vr = converted["tdb"], converted["tr"], converted["vr"]

    if vr <= STILL_AIR_THRESHOLD:
        return 0.0

    common = {"rh": rh, "met": met, "clo": clo, "wme": wme, "round": False, "calculate_ce": True, "limit_inputs": False}
    initial_set = set_tmp(tdb, tr, v=vr, **common)

    def set_difference(x: float) -> float:
        return set_tmp(tdb - x, tr - x, v=STILL_AIR_THRESHOLD, **common) - initial_set

    try:
        ce = optimize.brentq(set_difference, 0.0, 40.0)
    except ValueError:
        logger.debug(f"No cooling effect root in [0, 40] for tdb={tdb}, tr={tr}, vr={vr}")
        ce = 0.0

    if ce == 0:
        warnings.warn(
            "Assuming cooling effect = 0 since no temperature drop between 0 and 40 ºC "
            "reproduces the SET at the given air speed",
            UserWarning,
            stacklevel=2,
        )

    if units.upper() == "IP":
        ce = ce * 9 / 5

    return round_half_up(ce, 2)
