from .config import ScoringConfig, StablefordPoints
from .exceptions import (
    DuplicateShotError,
    InvalidTeamShapeError,
    ScoringError,
    ShotChainError,
    ShotNotFoundError,
    UnknownFormatError,
)
from .formats import FormatVariant, Team, resolve_format
from .handicap import course_handicap, stroke_allocation, strokes_received
from .matchplay import MatchResult, NassauResult, match_result, nassau_result
from .net import gross_from_net, net_score, net_score_for_hole
from .scorer import score_game, score_variant
from .skins import SkinsResult, skins_result
from .stableford import points_for_net, stableford_points_for_hole
from .standings import Standing

__all__ = [
    "ScoringConfig",
    "StablefordPoints",
    "ScoringError",
    "UnknownFormatError",
    "InvalidTeamShapeError",
    "ShotChainError",
    "DuplicateShotError",
    "ShotNotFoundError",
    "FormatVariant",
    "Team",
    "resolve_format",
    "course_handicap",
    "strokes_received",
    "stroke_allocation",
    "net_score",
    "gross_from_net",
    "net_score_for_hole",
    "points_for_net",
    "stableford_points_for_hole",
    "Standing",
    "MatchResult",
    "NassauResult",
    "match_result",
    "nassau_result",
    "SkinsResult",
    "skins_result",
    "score_game",
    "score_variant",
]
