"""comfortkit - Human thermal comfort and thermoregulation models.

Implements the Gagge two-node model with the indices derived from it (SET,
ET, PMV-Gagge, PMV-SET, discomfort, thermal sensation), the Fanger PMV/PPD
of ISO 7730 and ASHRAE 55, and the related ASHRAE 55 calculations: cooling
effect, adjusted PMV, vertical temperature gradient and clothing prediction.

Quick start::

    import comfortkit

    result = comfortkit.two_nodes(tdb=25, tr=25, v=0.3, rh=50, met=1.2, clo=0.5)
    print(f"SET: {result.set} C, skin wettedness: {result.w}")

    comfortkit.pmv_ppd(tdb=25, tr=25, vr=0.1, rh=50, met=1.2, clo=0.5, standard="ASHRAE")

Batch inputs::

    batch = comfortkit.two_nodes_array([25, 30], [25, 35], [0.3, 0.5], [50, 60], [1.2, 1.5], [0.5, 0.3])
    batch.set  # array([23.6, 29.3])
"""

import logging
from importlib.metadata import PackageNotFoundError, version

logger = logging.getLogger(__name__)

# Version: single source of truth is pyproject.toml
try:
    __version__ = version("comfortkit")
except PackageNotFoundError:
    __version__ = "0.0.0.dev0"  # Fallback for source checkouts without metadata

from . import progress, utilities  # noqa: E402
from .adjusted_pmv import a_pmv, e_pmv  # noqa: E402
from .clothing import clo_tout, clo_tout_array  # noqa: E402
from .cooling_effect import cooling_effect  # noqa: E402
from .errors import ComfortError, ConfigurationError, ConvergenceError, InvalidInputError  # noqa: E402
from .models import (  # noqa: E402
    BodyParams,
    PhysiologicalState,
    PmvPpdResult,
    TwoNodesArrayResult,
    TwoNodesConfig,
    TwoNodesResult,
    VerticalGradientResult,
)
from .physics import body_surface_area, p_sat, p_sat_torr, t_o, vapor_pressure  # noqa: E402
from .pmv import pmv, pmv_calculation, pmv_ppd  # noqa: E402
from .set_tmp import set_tmp, set_tmp_array  # noqa: E402
from .two_nodes import two_nodes, two_nodes_array  # noqa: E402
from .utilities import (  # noqa: E402
    check_standard_compliance,
    check_standard_compliance_array,
    clo_dynamic,
    clo_typical_ensembles,
    f_svv,
    met_typical_tasks,
    round_half_up,
    running_mean_outdoor_temperature,
    transpose_sharp_altitude,
    units_converter,
    v_relative,
    valid_range,
)
from .vertical_gradient import vertical_tmp_grad_ppd  # noqa: E402

__all__ = [
    "__version__",
    # Two-node model
    "two_nodes",
    "two_nodes_array",
    "set_tmp",
    "set_tmp_array",
    # PMV family
    "pmv",
    "pmv_ppd",
    "pmv_calculation",
    "cooling_effect",
    "a_pmv",
    "e_pmv",
    "vertical_tmp_grad_ppd",
    "clo_tout",
    "clo_tout_array",
    # Configuration and results
    "TwoNodesConfig",
    "BodyParams",
    "PhysiologicalState",
    "TwoNodesResult",
    "TwoNodesArrayResult",
    "PmvPpdResult",
    "VerticalGradientResult",
    # Errors
    "ComfortError",
    "ConvergenceError",
    "InvalidInputError",
    "ConfigurationError",
    # Physics
    "p_sat",
    "p_sat_torr",
    "vapor_pressure",
    "t_o",
    "body_surface_area",
    # Utilities
    "units_converter",
    "check_standard_compliance",
    "check_standard_compliance_array",
    "valid_range",
    "v_relative",
    "clo_dynamic",
    "running_mean_outdoor_temperature",
    "round_half_up",
    "f_svv",
    "transpose_sharp_altitude",
    "met_typical_tasks",
    "clo_typical_ensembles",
    # Modules
    "progress",
    "utilities",
]
