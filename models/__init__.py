from .base import BaseGolfModel, round_half_away
from .course import Course
from .game import ALL_HOLES, BACK_NINE, FRONT_NINE, Game, GameFormat
from .hole import Hole, TeeDistance
from .hole_score import HoleScore
from .player import Player
from .shot import PuttBias, Shot, ShotResult, feet_to_yards

__all__ = [
    "ALL_HOLES",
    "BACK_NINE",
    "BaseGolfModel",
    "Course",
    "FRONT_NINE",
    "Game",
    "GameFormat",
    "Hole",
    "HoleScore",
    "Player",
    "PuttBias",
    "Shot",
    "ShotResult",
    "TeeDistance",
    "feet_to_yards",
    "round_half_away",
]
