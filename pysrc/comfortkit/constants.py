"""
Physical constants and default parameters for comfortkit.

This module consolidates the constants shared by the two-node model, the
Fanger PMV model and the supporting utilities, with references.
"""

# =============================================================================
# Physical Constants
# =============================================================================

# Stefan-Boltzmann constant (W/m²/K⁴) as used by the two-node model
# Reference: ASHRAE Handbook Fundamentals, Ch. 9
SBC = 0.000000056697

# Kelvin to Celsius conversion offset
KELVIN_OFFSET = 273.15

# Metabolic unit conversion (W/m² per met) used by the two-node model
MET_FACTOR = 58.2

# Metabolic unit conversion (W/m² per met) used by the Fanger PMV model (ISO 7730)
MET_FACTOR_ISO = 58.15

# Clothing unit conversion (m²K/W per clo)
CLO_TO_M2K_W = 0.155

# Sea-level standard atmospheric pressure (Pa)
P_ATM_STANDARD = 101325.0


# =============================================================================
# Two-Node Model Constants
# =============================================================================
# Gagge, Fobelets & Berglund (1986) as adopted by ASHRAE 55-2020.
# =============================================================================

TEMP_SKIN_NEUTRAL = 33.7  # °C
TEMP_CORE_NEUTRAL = 36.8  # °C
SKIN_BLOOD_FLOW_NEUTRAL = 6.3  # kg/h/m²
ALFA_NEUTRAL = 0.1  # skin mass fraction at thermal neutrality
MIN_SKIN_BLOOD_FLOW = 0.5  # kg/h/m²

BODY_WEIGHT = 70.0  # kg, reference body for thermal capacities
K_CLO = 0.25  # clothing area factor coefficient in the standard environment
C_SW = 170.0  # driving coefficient for regulatory sweating
C_DIL = 120.0  # driving coefficient for vasodilation
C_STR = 0.5  # driving coefficient for vasoconstriction

# Fraction of body surface exchanging radiation
RADIATION_AREA_STANDING = 0.73
RADIATION_AREA_SITTING = 0.7
CLOTHING_EMISSIVITY = 0.95

# Simulation length: one iteration per simulated minute
SIMULATION_MINUTES = 60

# Solver limits
CLOTHING_TEMP_MAX_ITERATIONS = 150
CLOTHING_TEMP_TOLERANCE = 0.01  # °C
SECANT_MAX_ITERATIONS = 1000
SECANT_TOLERANCE = 0.01  # °C
SECANT_DELTA = 0.0001  # °C


# =============================================================================
# Defaults
# =============================================================================

DEFAULT_BODY_SURFACE_AREA = 1.8258  # m², DuBois area of the reference person
DEFAULT_BODY_SURFACE_AREA_IP = 19.65  # ft²
DEFAULT_MAX_SKIN_BLOOD_FLOW = 90.0  # kg/h/m²
DEFAULT_MAX_SWEATING = 500.0  # g/h/m²
BODY_POSITIONS = ("standing", "sitting")


# =============================================================================
# Public API
# =============================================================================

__all__ = [
    "SBC",
    "KELVIN_OFFSET",
    "MET_FACTOR",
    "MET_FACTOR_ISO",
    "CLO_TO_M2K_W",
    "P_ATM_STANDARD",
    "TEMP_SKIN_NEUTRAL",
    "TEMP_CORE_NEUTRAL",
    "SKIN_BLOOD_FLOW_NEUTRAL",
    "ALFA_NEUTRAL",
    "MIN_SKIN_BLOOD_FLOW",
    "BODY_WEIGHT",
    "K_CLO",
    "C_SW",
    "C_DIL",
    "C_STR",
    "RADIATION_AREA_STANDING",
    "RADIATION_AREA_SITTING",
    "CLOTHING_EMISSIVITY",
    "SIMULATION_MINUTES",
    "CLOTHING_TEMP_MAX_ITERATIONS",
    "CLOTHING_TEMP_TOLERANCE",
    "SECANT_MAX_ITERATIONS",
    "SECANT_TOLERANCE",
    "SECANT_DELTA",
    "DEFAULT_BODY_SURFACE_AREA",
    "DEFAULT_BODY_SURFACE_AREA_IP",
    "DEFAULT_MAX_SKIN_BLOOD_FLOW",
    "DEFAULT_MAX_SWEATING",
    "BODY_POSITIONS",
]
