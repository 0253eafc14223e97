"""Physiological state carried between two-node model time steps.

:class:`PhysiologicalState` is an immutable snapshot; the heat-balance step
returns a new snapshot rather than mutating the old one.
"""

from __future__ import annotations

from dataclasses import dataclass

from ..constants import (
    ALFA_NEUTRAL,
    SKIN_BLOOD_FLOW_NEUTRAL,
    TEMP_CORE_NEUTRAL,
    TEMP_SKIN_NEUTRAL,
)


@dataclass(frozen=True)
class PhysiologicalState:
    """
    Thermoregulatory state after one simulated minute.

    Attributes:
        t_skin: Skin temperature (°C).
        t_core: Core temperature (°C).
        m_bl: Skin blood flow (kg/h/m²).
        alfa: Skin share of body mass for the mean body temperature.
        m: Metabolic heat production including shivering (W/m²).
        e_skin: Total evaporative heat loss from skin (W/m²).
        q_sensible: Sensible heat loss from skin (W/m²).
        w: Skin wettedness.
        m_rsw: Regulatory sweat rate (g/h/m²).
        e_rsw: Evaporative heat loss by sweating (W/m²).
        e_diff: Evaporative heat loss by vapour diffusion (W/m²).
        e_max: Maximum evaporative capacity (W/m²).
        e_req: Evaporative heat loss required for regulation (W/m²).
        t_body: Mean body temperature (°C).
        h_r: Radiative heat transfer coefficient of the last clothing iteration.
        r_a: Dry resistance of the air layer of the last clothing iteration.
        t_op: Operative temperature of the last clothing iteration (°C).
        r_ea: Evaporative resistance of the air layer.
        r_ecl: Evaporative resistance of the clothing.

    Example:
        state = static.initial_state()
        for _ in range(60):
            state = step(state, static)
    """

    t_skin: float
    t_core: float
    m_bl: float
    alfa: float
    m: float
    e_skin: float
    q_sensible: float = 0.0
    w: float = 0.0
    m_rsw: float = 0.0
    e_rsw: float = 0.0
    e_diff: float = 0.0
    e_max: float = 0.0
    e_req: float = 0.0
    t_body: float = 0.0
    h_r: float = 4.7
    r_a: float = 0.0
    t_op: float = 0.0
    r_ea: float = 0.0
    r_ecl: float = 0.0

    @classmethod
    def neutral(cls, met: float, m: float, r_a: float, t_op: float) -> PhysiologicalState:
        """
        Thermally neutral starting state.

        Args:
            met: Metabolic rate (met), seeds the evaporative loss.
            m: Metabolic heat production (W/m²).
            r_a: Initial dry resistance of the air layer.
            t_op: Initial operative temperature (°C).
        """
        return cls(
            t_skin=TEMP_SKIN_NEUTRAL,
            t_core=TEMP_CORE_NEUTRAL,
            m_bl=SKIN_BLOOD_FLOW_NEUTRAL,
            alfa=ALFA_NEUTRAL,
            m=m,
            e_skin=0.1 * met,
            t_body=ALFA_NEUTRAL * TEMP_SKIN_NEUTRAL + (1 - ALFA_NEUTRAL) * TEMP_CORE_NEUTRAL,
            r_a=r_a,
            t_op=t_op,
        )
