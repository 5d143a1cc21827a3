from datetime import datetime
from enum import Enum
from pydantic import Field
from typing import Optional
from uuid import uuid4

from .base import BaseGolfModel, round_half_away

FEET_PER_YARD = 3


class ShotResult(str, Enum):
    """Where the shot finished relative to the intended line."""
    STRAIGHT = "Straight"
    RIGHT = "Right"
    LEFT = "Left"
    OUT_OF_BOUNDS = "Out of Bounds"
    HAZARD = "In a Hazard"
    TRAP = "In the Trap"
    OTHER = "Other"


class PuttBias(str, Enum):
    """Whether a putt's entered length was measured past the hole or short of it."""
    EXACT = "exact"
    LONG = "long"    # previous ball finished past the hole
    SHORT = "short"


def feet_to_yards(feet: int) -> int:
    """Convert a putt length in feet to whole yards."""
    return round_half_away(feet / FEET_PER_YARD)


class Shot(BaseGolfModel):
    """A single tracked shot for one player on one hole."""

    id: str = Field(default_factory=lambda: str(uuid4()))
    player_id: str
    hole_number: int = Field(..., ge=1, le=18)
    shot_number: int = Field(..., ge=1)
    distance_to_hole: Optional[int] = None  # yards remaining after this shot
    putt_length_feet: Optional[int] = Field(None, ge=0)
    club: Optional[str] = None
    result: ShotResult = ShotResult.STRAIGHT
    is_putt: bool = False
    putt_bias: PuttBias = PuttBias.EXACT
    distance_traveled: Optional[int] = None  # derived carry, never entered
    is_penalty: bool = False
    is_retaking: bool = False
    created_at: datetime = Field(default_factory=datetime.now)

    @property
    def key(self):
        return (self.player_id, self.hole_number)

    def effective_remaining(self) -> Optional[float]:
        """
        Remaining distance as seen by the shot before this one.

        A putt measured "long" means the previous ball ran past the hole, so
        its remaining distance counts as negative. The stored
        distance_to_hole is never changed by the bias.
        """
        if self.is_putt and self.putt_bias == PuttBias.LONG:
            if self.putt_length_feet is not None:
                return -self.putt_length_feet / FEET_PER_YARD
            if self.distance_to_hole is not None:
                return -float(self.distance_to_hole)
            return None
        if self.distance_to_hole is None:
            return None
        return float(self.distance_to_hole)
