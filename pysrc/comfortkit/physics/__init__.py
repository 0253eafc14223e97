"""Physical property functions shared by the comfort models."""

from .body import body_surface_area, lewis_ratio
from .psychrometrics import p_sat, p_sat_torr, t_o, vapor_pressure

__all__ = [
    "body_surface_area",
    "lewis_ratio",
    "p_sat",
    "p_sat_torr",
    "t_o",
    "vapor_pressure",
]
