from pydantic import Field, field_validator
from typing import Dict, Optional

from .base import BaseGolfModel


class HoleScore(BaseGolfModel):
    """Gross strokes entered for each player on one hole of a game."""

    hole_number: int = Field(..., ge=1, le=18)
    scores: Dict[str, int] = Field(default_factory=dict)  # player id -> gross strokes

    @field_validator('scores')
    @classmethod
    def validate_scores(cls, v):
        for player_id, strokes in v.items():
            if strokes < 1:
                raise ValueError(f"Score {strokes} for player '{player_id}' must be positive")
            if strokes > 20:
                raise ValueError(f"Score {strokes} for player '{player_id}' seems too high. Please verify.")
        return v

    def get(self, player_id: str) -> Optional[int]:
        """Gross strokes for a player, or None when not yet entered."""
        return self.scores.get(player_id)

    def is_recorded(self, player_id: str) -> bool:
        return player_id in self.scores

    def set_score(self, player_id: str, strokes: Optional[int]) -> Optional[str]:
        """Record (or with None/0, clear) a player's strokes. Returns error message if validation fails."""
        new_scores = {k: s for k, s in self.scores.items() if k != player_id}
        if strokes:
            new_scores[player_id] = strokes
        return self.update_field('scores', new_scores)
