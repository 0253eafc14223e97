"""Data models for comfortkit calculations.

Modules
-------
config
    ``TwoNodesConfig`` and ``BodyParams``: run-time settings.
state
    ``PhysiologicalState``: core/skin state between simulated minutes.
results
    ``TwoNodesResult``, ``TwoNodesArrayResult``, ``PmvPpdResult`` and
    ``VerticalGradientResult``: output records.
"""

from .config import BodyParams, TwoNodesConfig
from .results import PmvPpdResult, TwoNodesArrayResult, TwoNodesResult, VerticalGradientResult
from .state import PhysiologicalState

__all__ = [
    # Configuration
    "TwoNodesConfig",
    "BodyParams",
    # State
    "PhysiologicalState",
    # Results
    "TwoNodesResult",
    "TwoNodesArrayResult",
    "PmvPpdResult",
    "VerticalGradientResult",
]
