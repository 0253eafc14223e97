"""
Standard Effective Temperature (SET).

SET is the temperature of a hypothetical isothermal environment at 50 % RH,
air speed below 0.1 m/s and tr = tdb, in which the total skin heat loss of a
person wearing clothing standardised for the activity equals the heat loss
in the actual environment with the actual clothing and activity. It is
computed with the two-node model.
"""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np

from .constants import DEFAULT_BODY_SURFACE_AREA, DEFAULT_BODY_SURFACE_AREA_IP, P_ATM_STANDARD
from .errors import InvalidInputError
from .two_nodes import two_nodes_array
from .utilities import UNIT_SYSTEMS, check_standard_compliance_array, round_half_up, units_converter


def set_tmp_array(
    tdb: Sequence[float],
    tr: Sequence[float],
    v: Sequence[float],
    rh: Sequence[float],
    met: Sequence[float],
    clo: Sequence[float],
    wme: float | Sequence[float] = 0,
    body_surface_area: float | Sequence[float] | None = None,
    p_atm: float | Sequence[float] | None = None,
    body_position: str | Sequence[str] = "standing",
    units: str = "SI",
    limit_inputs: bool = True,
    round: bool = True,
    calculate_ce: bool = False,
    progress: bool = False,
) -> np.ndarray:
    """
    SET for sequences of inputs.

    Args:
        tdb: Dry bulb air temperature (°C, °F if units="IP").
        tr: Mean radiant temperature (°C, °F if units="IP").
        v: Air speed (m/s, fps if units="IP").
        rh: Relative humidity (%).
        met: Metabolic rate (met).
        clo: Clothing insulation (clo).
        wme: External work (met). Default 0.
        body_surface_area: Body surface area. Default 1.8258 m² (19.65 ft²
            if units="IP").
        p_atm: Atmospheric pressure. Default 101325 Pa (1 atm if units="IP").
        body_position: "standing" or "sitting".
        units: "SI" or "IP".
        limit_inputs: Return NaN where tdb, tr, v, met or clo fall outside
            the ASHRAE 55 limits (10-40 °C, 0-2 m/s, 1-4 met, 0-1.5 clo).
        round: Round to one decimal.
        calculate_ce: Compute SET for the cooling effect (no activity-driven
            convection).
        progress: Show a tqdm progress bar.

    Returns:
        SET array (°C, °F if units="IP").
    """
    units = units.upper()
    if units not in UNIT_SYSTEMS:
        raise InvalidInputError("units", units, f"must be one of {UNIT_SYSTEMS}")

    if body_surface_area is None:
        body_surface_area = DEFAULT_BODY_SURFACE_AREA if units == "SI" else DEFAULT_BODY_SURFACE_AREA_IP
    if p_atm is None:
        p_atm = P_ATM_STANDARD if units == "SI" else 1

    if units == "IP":
        converted = units_converter(tdb=tdb, tr=tr, v=v, area=body_surface_area, pressure=p_atm)
        tdb, tr, v = converted["tdb"], converted["tr"], converted["v"]
        body_surface_area, p_atm = converted["area"], converted["pressure"]

    set_values = two_nodes_array(
        tdb,
        tr,
        v,
        rh,
        met,
        clo,
        wme=wme,
        body_surface_area=body_surface_area,
        p_atmospheric=p_atm,
        body_position=body_position,
        progress=progress,
        round=False,
        calculate_ce=calculate_ce,
    ).set

    if units == "IP":
        set_values = units_converter(from_units="SI", tmp=set_values)["tmp"]

    if limit_inputs:
        valid = check_standard_compliance_array(
            "ASHRAE",
            tdb=np.broadcast_to(tdb, set_values.shape),
            tr=np.broadcast_to(tr, set_values.shape),
            v=np.broadcast_to(v, set_values.shape),
            met=np.broadcast_to(met, set_values.shape),
            clo=np.broadcast_to(clo, set_values.shape),
        )
        outside = np.zeros(set_values.shape, dtype=bool)
        for values in valid.values():
            outside |= np.isnan(values)
        set_values = np.where(outside, np.nan, set_values)

    if round:
        return np.asarray(round_half_up(set_values, 1))
    return set_values


def set_tmp(
    tdb: float,
    tr: float,
    v: float,
    rh: float,
    met: float,
    clo: float,
    wme: float = 0,
    body_surface_area: float | None = None,
    p_atm: float | None = None,
    body_position: str = "standing",
    units: str = "SI",
    limit_inputs: bool = True,
    round: bool = True,
    calculate_ce: bool = False,
) -> float:
    """
    Standard Effective Temperature for a single set of inputs.

    See :func:`set_tmp_array` for the arguments.

    Returns:
        SET (°C, °F if units="IP"); NaN when limit_inputs is set and an input
        is outside the ASHRAE 55 limits.

    Example:
        >>> set_tmp(tdb=25, tr=25, v=0.1, rh=50, met=1.2, clo=0.5)
        24.3
    """
    result = set_tmp_array(
        [tdb],
        [tr],
        [v],
        [rh],
        [met],
        [clo],
        wme=wme,
        body_surface_area=body_surface_area,
        p_atm=p_atm,
        body_position=body_position,
        units=units,
        limit_inputs=limit_inputs,
        round=round,
        calculate_ce=calculate_ce,
    )
    return float(result[0])
