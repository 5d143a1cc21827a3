from pydantic import Field, field_validator
from typing import List, Optional
from uuid import uuid4

from .base import BaseGolfModel
from .hole import Hole


class Course(BaseGolfModel):
    """Golf course with its holes and their tee distances."""

    id: str = Field(default_factory=lambda: str(uuid4()))
    name: Optional[str] = None
    location: Optional[str] = None
    slope_rating: float = Field(113, ge=55, le=155)
    course_rating: float = Field(72.0, ge=55.0, le=85.0)
    holes: List[Hole] = Field(default_factory=list)

    @field_validator('holes')
    @classmethod
    def validate_holes(cls, v):
        if len(v) > 18:
            raise ValueError(f"A course has at most 18 holes, got {len(v)}")
        numbers = [h.number for h in v]
        if len(set(numbers)) != len(numbers):
            raise ValueError("Hole numbers must be unique")
        ranks = [h.handicap for h in v if h.handicap is not None]
        if len(set(ranks)) != len(ranks):
            raise ValueError("Each stroke-allocation rank may be used only once per course")
        return sorted(v, key=lambda h: h.number)

    def get_hole(self, number: int) -> Optional[Hole]:
        """Get a hole by its number (1-18)."""
        for hole in self.holes:
            if hole.number == number:
                return hole
        return None

    def tee_colors(self) -> List[str]:
        """Tee colors in the order they appear on the first hole."""
        if not self.holes:
            return []
        return [d.color for d in self.holes[0].tee_distances]

    @property
    def is_complete(self) -> bool:
        """True when all 18 holes are present with par and rank."""
        return len(self.holes) == 18 and all(
            h.par is not None and h.handicap is not None for h in self.holes
        )

    @property
    def par(self) -> Optional[int]:
        if not self.holes or any(h.par is None for h in self.holes):
            return None
        return sum(h.par for h in self.holes)

    @property
    def front_nine_par(self) -> Optional[int]:
        """Calculate par for holes 1-9."""
        front = [h for h in self.holes if 1 <= h.number <= 9]
        if not front or any(h.par is None for h in front):
            return None
        return sum(h.par for h in front)

    @property
    def back_nine_par(self) -> Optional[int]:
        """Calculate par for holes 10-18."""
        back = [h for h in self.holes if 10 <= h.number <= 18]
        if not back or any(h.par is None for h in back):
            return None
        return sum(h.par for h in back)

    def total_yardage(self, color: str) -> Optional[int]:
        """Sum of hole yardages from one tee; None if no hole lists that tee."""
        yards = [h.get_distance(color) for h in self.holes]
        yards = [y for y in yards if y is not None]
        return sum(yards) if yards else None
