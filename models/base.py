import math

from pydantic import BaseModel, ConfigDict, ValidationError
from typing import Any, Optional


def round_half_away(value: float) -> int:
    """Round to the nearest integer, halves away from zero (2.5 -> 3, -2.5 -> -3)."""
    magnitude = int(math.floor(abs(value) + 0.5))
    return magnitude if value >= 0 else -magnitude


class BaseGolfModel(BaseModel):
    """Shared configuration and methods."""
    model_config = ConfigDict(validate_assignment=True)

    def update_field(self, field_name: str, value: Any) -> Optional[str]:
        """Update a field with user correction. Returns error message if validation fails."""
        try:
            setattr(self, field_name, value)
            return None
        except ValidationError as e:
            return e.errors()[0]['msg']
