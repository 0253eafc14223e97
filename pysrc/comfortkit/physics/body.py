"""Body surface area formulas and the Lewis relation."""

from __future__ import annotations

from ..constants import P_ATM_STANDARD
from ..errors import InvalidInputError

# (coefficient, weight exponent, height exponent) with weight in kg, height in m
_BSA_FORMULAS = {
    "dubois": (0.202, 0.425, 0.725),
    "takahira": (0.2042, 0.425, 0.725),
    "fujimoto": (0.1882, 0.444, 0.663),
    "kurazumi": (0.244, 0.383, 0.693),
}


def body_surface_area(weight: float, height: float, formula: str = "dubois") -> float:
    """
    Body surface area in square meters.

    Args:
        weight: Body weight (kg).
        height: Height (m).
        formula: One of "dubois", "takahira", "fujimoto", "kurazumi".

    Returns:
        Body surface area (m²).

    Raises:
        InvalidInputError: If the formula is unknown.

    Example:
        >>> round(body_surface_area(weight=70, height=1.75), 3)
        1.844
    """
    if formula not in _BSA_FORMULAS:
        raise InvalidInputError("formula", formula, f"must be one of {tuple(_BSA_FORMULAS)}")
    coefficient, weight_exp, height_exp = _BSA_FORMULAS[formula]
    return coefficient * weight**weight_exp * height**height_exp


def lewis_ratio(p_atmospheric: float) -> float:
    """Lewis relation (K/mmHg) scaled by atmospheric pressure (Pa)."""
    return 2.2 / (p_atmospheric / P_ATM_STANDARD)
