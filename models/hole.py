from pydantic import Field, ValidationError, field_validator
from typing import List, Optional

from .base import BaseGolfModel


class TeeDistance(BaseGolfModel):
    """Yardage of a hole from one tee box."""
    color: str  # "White", "Blue", "Red", "Green", ...
    yards: int = Field(..., ge=0, le=700)


class Hole(BaseGolfModel):
    """Represents a single hole on a golf course."""
    number: int = Field(..., ge=1, le=18)
    par: Optional[int] = Field(None, ge=3, le=6)
    handicap: Optional[int] = Field(None, ge=1, le=18)  # men's stroke-allocation rank
    ladies_handicap: Optional[int] = Field(None, ge=1, le=18)
    tee_distances: List[TeeDistance] = Field(default_factory=list)

    @field_validator('tee_distances')
    @classmethod
    def validate_unique_tee_colors(cls, v):
        seen = set()
        for distance in v:
            key = distance.color.lower()
            if key in seen:
                raise ValueError(f"Tee color '{distance.color}' listed twice for one hole")
            seen.add(key)
        return v

    def get_distance(self, color: str) -> Optional[int]:
        """Yardage from the given tee color (case-insensitive)."""
        for distance in self.tee_distances:
            if distance.color.lower() == color.lower():
                return distance.yards
        return None

    def set_distance(self, color: str, yards: int) -> Optional[str]:
        """Add or replace the yardage for a tee color. Returns error message if validation fails."""
        try:
            entry = TeeDistance(color=color, yards=yards)
        except ValidationError as e:
            return e.errors()[0]['msg']
        kept = [d for d in self.tee_distances if d.color.lower() != color.lower()]
        return self.update_field('tee_distances', kept + [entry])
