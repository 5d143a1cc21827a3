from datetime import datetime
from pydantic import Field
from typing import Optional
from uuid import uuid4

from .base import BaseGolfModel


class Player(BaseGolfModel):
    """Represents a golfer on the roster."""

    id: str = Field(default_factory=lambda: str(uuid4()))
    name: str = ""
    handicap: float = Field(0.0, ge=-10, le=54)
    is_current_user: bool = False
    preferred_tee_color: Optional[str] = "White"
    email: Optional[str] = None
    phone_number: Optional[str] = None
    created_at: Optional[datetime] = None
