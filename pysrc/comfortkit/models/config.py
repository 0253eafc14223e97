"""Model configuration classes."""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass, fields, replace
from pathlib import Path
from typing import Any

from ..constants import (
    BODY_POSITIONS,
    DEFAULT_BODY_SURFACE_AREA,
    DEFAULT_MAX_SKIN_BLOOD_FLOW,
    DEFAULT_MAX_SWEATING,
    P_ATM_STANDARD,
)
from ..errors import ConfigurationError, InvalidInputError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TwoNodesConfig:
    """
    Run-time settings for the two-node model.

    Pure configuration, fixed for the duration of a call.

    Attributes:
        round: Round every output to one decimal. Default True.
        calculate_ce: Drop the activity-driven convection term, as required
            when SET is used to compute the cooling effect. Default False.
        max_sweating: Upper limit of regulatory sweating (g/h/m²). Default 500.
        w_max: Practical upper limit of skin wettedness. None, False or 0
            derives it from air speed and clothing.

    Examples:
        Basic usage with defaults:

        >>> config = TwoNodesConfig.defaults()
        >>> config.save("two_nodes.json")

        Per-call override:

        >>> config.with_overrides(round=False).round
        False
    """

    round: bool = True
    calculate_ce: bool = False
    max_sweating: float = DEFAULT_MAX_SWEATING
    w_max: float | None = None

    def __post_init__(self):
        if self.max_sweating <= 0:
            raise ConfigurationError("max_sweating", f"must be positive, got {self.max_sweating}")
        if self.w_max is not None and not self.w_max:
            object.__setattr__(self, "w_max", None)
        if self.w_max is not None and not 0 < self.w_max <= 1:
            raise ConfigurationError("w_max", f"must be in (0, 1], got {self.w_max}")

    @classmethod
    def defaults(cls) -> TwoNodesConfig:
        """Standard configuration (rounded outputs, formulaic w_max)."""
        return cls()

    def with_overrides(self, **overrides: Any) -> TwoNodesConfig:
        """
        Return a copy with the given fields replaced.

        Unknown keys raise ConfigurationError rather than being ignored.
        """
        known = {f.name for f in fields(self)}
        unknown = set(overrides) - known
        if unknown:
            raise ConfigurationError(", ".join(sorted(unknown)), f"unknown option; expected one of {sorted(known)}")
        if not overrides:
            return self
        return replace(self, **overrides)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> TwoNodesConfig:
        """Build a configuration from a plain dict, rejecting unknown keys."""
        return cls().with_overrides(**data)

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    def save(self, path: str | Path):
        """
        Save configuration to a JSON file.

        Args:
            path: Output path for JSON file
        """
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)

        with open(path, "w") as f:
            json.dump(self.to_dict(), f, indent=2)

        logger.info(f"Saved configuration to {path}")

    @classmethod
    def load(cls, path: str | Path) -> TwoNodesConfig:
        """
        Load configuration from a JSON file written by :meth:`save`.

        Raises:
            FileNotFoundError: If the file does not exist.
            ConfigurationError: If the file holds unknown or invalid options.
        """
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Configuration file not found: {path}")

        with open(path) as f:
            data = json.load(f)

        if not isinstance(data, dict):
            raise ConfigurationError(str(path), "expected a JSON object at the top level")
        return cls.from_dict(data)


@dataclass(frozen=True)
class BodyParams:
    """
    Body and site parameters for the two-node model.

    Default values represent the ASHRAE 55 reference person at sea level.

    Attributes:
        body_surface_area: DuBois body surface area (m²). Default 1.8258.
        p_atmospheric: Atmospheric pressure (Pa). Default 101325.
        body_position: "standing" or "sitting". Default "standing".
        max_skin_blood_flow: Upper limit of skin blood flow (kg/h/m²). Default 90.
    """

    body_surface_area: float = DEFAULT_BODY_SURFACE_AREA
    p_atmospheric: float = P_ATM_STANDARD
    body_position: str = "standing"
    max_skin_blood_flow: float = DEFAULT_MAX_SKIN_BLOOD_FLOW

    def __post_init__(self):
        if self.body_position not in BODY_POSITIONS:
            raise InvalidInputError("body_position", self.body_position, f"must be one of {BODY_POSITIONS}")
        if self.body_surface_area <= 0:
            raise InvalidInputError("body_surface_area", self.body_surface_area, "must be positive")
        if self.p_atmospheric <= 0:
            raise InvalidInputError("p_atmospheric", self.p_atmospheric, "must be positive")
        if self.max_skin_blood_flow < 0.5:
            raise InvalidInputError(
                "max_skin_blood_flow", self.max_skin_blood_flow, "must be at least the 0.5 kg/h/m² floor"
            )
