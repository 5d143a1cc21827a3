from __future__ import annotations

import logging
import os
from typing import Optional

from pydantic import Field

from models.base import BaseGolfModel

logger = logging.getLogger(__name__)

_ENV_PREFIX = "STABLEFORD_POINTS_"


class StablefordPoints(BaseGolfModel):
    """Points awarded per net result relative to par."""
    double_eagle: int = 5  # three or more under
    eagle: int = 4
    birdie: int = 3
    par: int = 2
    bogey: int = 1
    double_bogey: int = 0  # two or more over

    def points_for(self, under_par: int) -> int:
        """Points for a net score `under_par` strokes below par (negative when over)."""
        if under_par >= 3:
            return self.double_eagle
        if under_par == 2:
            return self.eagle
        if under_par == 1:
            return self.birdie
        if under_par == 0:
            return self.par
        if under_par == -1:
            return self.bogey
        return self.double_bogey

    def reset_to_defaults(self) -> None:
        for name, field in type(self).model_fields.items():
            setattr(self, name, field.default)

    @classmethod
    def from_env(cls) -> "StablefordPoints":
        values = {}
        for name in cls.model_fields:
            raw = os.getenv(f"{_ENV_PREFIX}{name.upper()}")
            if raw is None or raw == "":
                continue
            try:
                values[name] = int(raw)
            except ValueError:
                logger.warning("Ignoring non-integer %s%s=%r", _ENV_PREFIX, name.upper(), raw)
        return cls(**values)


class ScoringConfig(BaseGolfModel):
    """
    Settings every aggregator reads.

    Passed explicitly instead of living in module state:
    - stableford: the points table
    - current_player_id: listed first among tied players
    - handicap_allowance: fraction of each index used as course handicap
    """
    stableford: StablefordPoints = Field(default_factory=StablefordPoints)
    current_player_id: Optional[str] = None
    handicap_allowance: float = Field(1.0, ge=0.0, le=1.0)

    @classmethod
    def from_env(cls, current_player_id: Optional[str] = None) -> "ScoringConfig":
        allowance = 1.0
        raw = os.getenv("HANDICAP_ALLOWANCE")
        if raw:
            try:
                allowance = float(raw)
            except ValueError:
                logger.warning("Ignoring non-numeric HANDICAP_ALLOWANCE=%r", raw)
            if not 0.0 <= allowance <= 1.0:
                logger.warning("Ignoring HANDICAP_ALLOWANCE=%r outside 0-1", raw)
                allowance = 1.0
        return cls(
            stableford=StablefordPoints.from_env(),
            current_player_id=current_player_id,
            handicap_allowance=allowance,
        )
