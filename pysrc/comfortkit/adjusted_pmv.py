"""
Adjusted PMV indices for naturally ventilated and non-air-conditioned buildings.

- aPMV (Yao et al. 2009): adaptive coefficient accounting for behavioural,
  physiological and psychological adaptation.
- ePMV (Fanger & Toftum 2002): expectancy factor for occupants of warm
  climates who judge warmth as less severe than the PMV predicts.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np

from .pmv import pmv
from .utilities import round_half_up

if TYPE_CHECKING:
    from numpy.typing import ArrayLike


def _as_result(values: np.ndarray) -> float | np.ndarray:
    if values.ndim == 0:
        return float(values)
    return values


def a_pmv(
    tdb: ArrayLike,
    tr: ArrayLike,
    vr: ArrayLike,
    rh: ArrayLike,
    met: ArrayLike,
    clo: ArrayLike,
    a_coefficient: ArrayLike,
    wme: ArrayLike = 0,
    units: str = "SI",
    limit_inputs: bool = True,
) -> float | np.ndarray:
    """
    Adaptive Predicted Mean Vote, PMV / (1 + a PMV).

    Args:
        tdb, tr, vr, rh, met, clo, wme: As in :func:`~comfortkit.pmv.pmv_ppd`.
        a_coefficient: Adaptive coefficient (-).
        units: "SI" or "IP".
        limit_inputs: Return NaN outside the ISO 7730 limits.

    Returns:
        aPMV rounded to 2 decimals; an array for array inputs.

    Example:
        >>> v_r = v_relative(v=0.1, met=1.4)
        >>> clo_d = clo_dynamic(clo=0.5, met=1.4)
        >>> a_pmv(tdb=28, tr=28, vr=v_r, rh=50, met=1.4, clo=clo_d, a_coefficient=0.293)
        0.74
    """
    value = np.asarray(pmv(tdb, tr, vr, rh, met, clo, wme, "ISO", units=units, limit_inputs=limit_inputs))
    a_coefficient = np.asarray(a_coefficient, dtype=float)
    return _as_result(np.asarray(round_half_up(value / (1 + a_coefficient * value), 2)))


def e_pmv(
    tdb: ArrayLike,
    tr: ArrayLike,
    vr: ArrayLike,
    rh: ArrayLike,
    met: ArrayLike,
    clo: ArrayLike,
    e_coefficient: ArrayLike,
    wme: ArrayLike = 0,
    units: str = "SI",
    limit_inputs: bool = True,
) -> float | np.ndarray:
    """
    Predicted Mean Vote with expectancy factor.

    Where the PMV is positive the metabolic rate is reduced by 6.7 % per PMV
    unit before the PMV is recomputed and scaled by the expectancy factor.

    Args:
        tdb, tr, vr, rh, met, clo, wme: As in :func:`~comfortkit.pmv.pmv_ppd`.
        e_coefficient: Expectancy factor, 0.5 to 1.
        units: "SI" or "IP".
        limit_inputs: Return NaN outside the ISO 7730 limits.

    Returns:
        ePMV rounded to 2 decimals; an array for array inputs.

    Example:
        >>> v_r = v_relative(v=0.1, met=1.4)
        >>> clo_d = clo_dynamic(clo=0.5, met=1.4)
        >>> e_pmv(tdb=28, tr=28, vr=v_r, rh=50, met=1.4, clo=clo_d, e_coefficient=0.6)
        0.51
    """
    met = np.asarray(met, dtype=float)
    first = np.asarray(pmv(tdb, tr, vr, rh, met, clo, wme, "ISO", units=units, limit_inputs=limit_inputs))
    met = np.where(first > 0, met * (1 - 0.067 * first), met)
    value = np.asarray(pmv(tdb, tr, vr, rh, met, clo, wme, "ISO", units=units, limit_inputs=limit_inputs))
    e_coefficient = np.asarray(e_coefficient, dtype=float)
    return _as_result(np.asarray(round_half_up(value * e_coefficient, 2)))
