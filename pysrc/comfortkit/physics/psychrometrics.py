"""Psychrometric helpers: saturation and ambient vapour pressure, operative temperature."""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

import numpy as np

from ..constants import KELVIN_OFFSET
from ..errors import InvalidInputError

if TYPE_CHECKING:
    from numpy.typing import ArrayLike, NDArray


def p_sat_torr(tdb: float) -> float:
    """
    Saturation vapour pressure of water, in mmHg (torr).

    Antoine-type fit used throughout the two-node model.

    Args:
        tdb: Temperature (°C).

    Returns:
        Saturation vapour pressure (mmHg).
    """
    return math.exp(18.6686 - 4030.183 / (tdb + 235.0))


def vapor_pressure(tdb: float, rh: float) -> float:
    """Ambient water vapour pressure (mmHg) from air temperature (°C) and relative humidity (%)."""
    return rh * p_sat_torr(tdb) / 100.0


def p_sat(tdb: ArrayLike) -> NDArray[np.floating] | float:
    """
    Saturation vapour pressure of water, in Pa.

    ASHRAE Handbook Fundamentals (Hyland-Wexler): the ice equation is used
    below 0 °C, the liquid water equation above.

    Args:
        tdb: Dry bulb air temperature (°C), scalar or array.

    Returns:
        Saturation vapour pressure (Pa), rounded to 0.1 Pa.
    """
    ta_k = np.asarray(tdb, dtype=float) + KELVIN_OFFSET

    c1 = -5674.5359
    c2 = 6.3925247
    c3 = -0.9677843e-2
    c4 = 0.62215701e-6
    c5 = 0.20747825e-8
    c6 = -0.9484024e-12
    c7 = 4.1635019
    c8 = -5800.2206
    c9 = 1.3914993
    c10 = -0.048640239
    c11 = 0.41764768e-4
    c12 = -0.14452093e-7
    c13 = 6.5459673

    over_ice = np.exp(c1 / ta_k + c2 + ta_k * (c3 + ta_k * (c4 + ta_k * (c5 + c6 * ta_k))) + c7 * np.log(ta_k))
    over_water = np.exp(c8 / ta_k + c9 + ta_k * (c10 + ta_k * (c11 + ta_k * c12)) + c13 * np.log(ta_k))
    pascals = np.floor(np.where(ta_k < KELVIN_OFFSET, over_ice, over_water) * 10.0 + 0.5) / 10.0

    if pascals.ndim == 0:
        return float(pascals)
    return pascals


def t_o(tdb: ArrayLike, tr: ArrayLike, v: ArrayLike, standard: str = "ISO") -> NDArray[np.floating] | float:
    """
    Operative temperature.

    Args:
        tdb: Dry bulb air temperature (°C).
        tr: Mean radiant temperature (°C).
        v: Air speed (m/s).
        standard: "ISO" weights by sqrt(10 v); "ASHRAE" uses the 0.5/0.6/0.7
            air-speed dependent weighting of ASHRAE 55.

    Returns:
        Operative temperature (°C).

    Raises:
        InvalidInputError: If the standard is not ISO or ASHRAE.
    """
    tdb = np.asarray(tdb, dtype=float)
    tr = np.asarray(tr, dtype=float)
    v = np.asarray(v, dtype=float)

    if standard.lower() == "iso":
        result = (tdb * np.sqrt(10 * v) + tr) / (1 + np.sqrt(10 * v))
    elif standard.lower() == "ashrae":
        a = np.where(v < 0.6, 0.6, 0.7)
        a = np.where(v < 0.2, 0.5, a)
        result = a * tdb + (1 - a) * tr
    else:
        raise InvalidInputError("standard", standard, "operative temperature supports ISO or ASHRAE")

    if result.ndim == 0:
        return float(result)
    return result
