"""Result data models."""

from __future__ import annotations

from dataclasses import asdict, dataclass, fields
from typing import TYPE_CHECKING

import numpy as np

from ..utilities import round_half_up

if TYPE_CHECKING:
    from numpy.typing import NDArray


@dataclass(frozen=True)
class TwoNodesResult:
    """
    Results of a single two-node model run.

    Attributes:
        e_skin: Total evaporative heat loss from skin, e_rsw + e_diff (W/m²).
        e_rsw: Evaporative heat loss by sweat evaporation (W/m²).
        e_max: Maximum evaporative heat loss from skin (W/m²).
        q_sensible: Sensible heat loss from skin (W/m²).
        q_skin: Total heat loss from skin, q_sensible + e_skin (W/m²).
        q_res: Latent heat loss through respiration (W/m²).
        t_core: Core temperature (°C).
        t_skin: Skin temperature (°C).
        m_bl: Skin blood flow (kg/h/m²).
        m_rsw: Regulatory sweat rate (g/h/m²).
        w: Skin wettedness, 0 to 1.
        w_max: Practical upper limit of skin wettedness, 0 to 1.
        set: Standard Effective Temperature (°C).
        et: New Effective Temperature (°C).
        pmv_gagge: Gagge's version of Fanger's PMV.
        pmv_set: PMV computed with the SET dry heat loss.
        disc: Thermal discomfort.
        t_sens: Predicted thermal sensation.
    """

    e_skin: float
    e_rsw: float
    e_max: float
    q_sensible: float
    q_skin: float
    q_res: float
    t_core: float
    t_skin: float
    m_bl: float
    m_rsw: float
    w: float
    w_max: float
    set: float
    et: float
    pmv_gagge: float
    pmv_set: float
    disc: float
    t_sens: float

    def rounded(self, decimals: int = 1) -> TwoNodesResult:
        """Copy with every field rounded to ``decimals``."""
        return TwoNodesResult(**{k: round_half_up(v, decimals) for k, v in asdict(self).items()})

    def to_dict(self) -> dict[str, float]:
        return asdict(self)


@dataclass(frozen=True)
class TwoNodesArrayResult:
    """
    Results of a batch two-node run, one array per output.

    Element ``i`` of every array belongs to input tuple ``i``; indexing the
    result returns that element as a :class:`TwoNodesResult`.

    Example:
        >>> batch = two_nodes_array([25, 30], [25, 35], [0.3, 0.5], [50, 60], [1.2, 1.5], [0.5, 0.3])
        >>> batch.set
        array([23.6, 29.3])
        >>> batch[1].et
        32.5
    """

    e_skin: NDArray[np.floating]
    e_rsw: NDArray[np.floating]
    e_max: NDArray[np.floating]
    q_sensible: NDArray[np.floating]
    q_skin: NDArray[np.floating]
    q_res: NDArray[np.floating]
    t_core: NDArray[np.floating]
    t_skin: NDArray[np.floating]
    m_bl: NDArray[np.floating]
    m_rsw: NDArray[np.floating]
    w: NDArray[np.floating]
    w_max: NDArray[np.floating]
    set: NDArray[np.floating]
    et: NDArray[np.floating]
    pmv_gagge: NDArray[np.floating]
    pmv_set: NDArray[np.floating]
    disc: NDArray[np.floating]
    t_sens: NDArray[np.floating]

    @classmethod
    def from_results(cls, results: list[TwoNodesResult]) -> TwoNodesArrayResult:
        """Stack scalar results field by field."""
        return cls(**{f.name: np.array([getattr(r, f.name) for r in results], dtype=float) for f in fields(TwoNodesResult)})

    def __len__(self) -> int:
        return len(self.set)

    def __getitem__(self, index: int) -> TwoNodesResult:
        return TwoNodesResult(**{f.name: float(getattr(self, f.name)[index]) for f in fields(self)})

    def to_dict(self) -> dict[str, NDArray[np.floating]]:
        return {f.name: getattr(self, f.name) for f in fields(self)}


@dataclass(frozen=True)
class PmvPpdResult:
    """
    Fanger PMV/PPD results.

    Attributes:
        pmv: Predicted Mean Vote, -3 (cold) to +3 (hot). NaN outside limits.
        ppd: Predicted Percentage of Dissatisfied (%). NaN outside limits.
    """

    pmv: float | NDArray[np.floating]
    ppd: float | NDArray[np.floating]


@dataclass(frozen=True)
class VerticalGradientResult:
    """
    Dissatisfaction caused by a head-to-ankle temperature difference.

    Attributes:
        ppd_vg: Predicted Percentage of Dissatisfied with the gradient (%).
        acceptability: True when ppd_vg is at most 5 % (ASHRAE 55).
    """

    ppd_vg: float
    acceptability: bool
