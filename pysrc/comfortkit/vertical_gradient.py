"""
Dissatisfaction caused by a vertical air temperature gradient (ASHRAE 55 2020).

Only applicable for relative air speed below 0.2 m/s.
"""

from __future__ import annotations

import math
import warnings

from .models.results import VerticalGradientResult
from .pmv import pmv
from .utilities import check_standard_compliance, round_half_up, units_converter

# ASHRAE 55 acceptability threshold (%)
PPD_VG_LIMIT = 5.0


def vertical_tmp_grad_ppd(
    tdb: float,
    tr: float,
    vr: float,
    rh: float,
    met: float,
    clo: float,
    vertical_tmp_grad: float,
    units: str = "SI",
) -> VerticalGradientResult:
    """
    Percentage of occupants dissatisfied with the head-to-ankle temperature difference.

    Args:
        tdb: Dry bulb air temperature (°C, °F if units="IP").
        tr: Mean radiant temperature (°C, °F if units="IP").
        vr: Relative air speed (m/s, fps if units="IP").
        rh: Relative humidity (%).
        met: Metabolic rate (met).
        clo: Dynamic clothing insulation (clo).
        vertical_tmp_grad: Temperature gradient between feet and head
            (°C/m, °F/ft if units="IP").
        units: "SI" or "IP".

    Returns:
        VerticalGradientResult; acceptable when ppd_vg is at most 5 %.

    Raises:
        InvalidInputError: If vr is above 0.2 m/s.

    Example:
        >>> vertical_tmp_grad_ppd(25, 25, 0.1, 50, 1.2, 0.5, 7)
        VerticalGradientResult(ppd_vg=12.6, acceptability=False)
    """
    if units.upper() == "IP":
        converted = units_converter(tdb=tdb, tr=tr, vr=vr)
        tdb, tr, vr = converted["tdb"], converted["tr"], converted["vr"]
        vertical_tmp_grad = vertical_tmp_grad / 1.8 * 3.28

    for message in check_standard_compliance("ASHRAE", tdb=tdb, tr=tr, v_limited=vr, rh=rh, met=met, clo=clo):
        warnings.warn(message, UserWarning, stacklevel=2)

    tsv = pmv(tdb, tr, vr, rh, met, clo, 0, "ASHRAE")
    exponent = math.exp(0.13 * (tsv - 1.91) ** 2 + 0.15 * vertical_tmp_grad - 1.6)
    ppd_vg = round_half_up((exponent / (1 + exponent) - 0.345) * 100, 1)

    return VerticalGradientResult(ppd_vg=ppd_vg, acceptability=ppd_vg <= PPD_VG_LIMIT)
