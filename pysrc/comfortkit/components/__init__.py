"""
Two-node model components.

- **heat_balance**: static quantities of a run and the one-minute ``step()``
  update of the physiological state.
- **thermal_indices**: SET/ET solver, thermal sensation, discomfort and the
  PMV variants computed from the final state.
"""

__all__ = ["heat_balance", "thermal_indices"]
