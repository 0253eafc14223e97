"""Representative clothing insulation from outdoor temperature."""

from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np

from .utilities import round_half_up, units_converter

if TYPE_CHECKING:
    from numpy.typing import ArrayLike


def clo_tout_array(tout: ArrayLike, units: str = "SI") -> np.ndarray:
    """
    Representative clothing insulation Icl from the outdoor air temperature
    at 06:00 a.m. (Schiavon & Lee 2013).

    ASHRAE 55 2020 accepts this model for mechanically conditioned buildings.

    Args:
        tout: Outdoor air temperature at 06:00 a.m. (°C, °F if units="IP").
        units: "SI" or "IP".

    Returns:
        Clothing insulation (clo), rounded to 2 decimals.
    """
    t = np.asarray(tout, dtype=float)
    if units.upper() == "IP":
        t = np.asarray(units_converter(tmp=t)["tmp"])

    clo = np.where(t < 26, np.power(10, -0.1635 - 0.0066 * t), 0.46)
    clo = np.where(t < 5, 0.818 - 0.0364 * t, clo)
    clo = np.where(t < -5, 1.0, clo)
    return np.asarray(round_half_up(clo, 2))


def clo_tout(tout: float, units: str = "SI") -> float:
    """
    Clothing insulation for a single outdoor temperature; see :func:`clo_tout_array`.

    Example:
        >>> clo_tout(tout=27)
        0.46
    """
    return float(clo_tout_array(tout, units))
