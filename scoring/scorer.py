from __future__ import annotations

from typing import List, Optional, Union

from models.game import Game

from .config import ScoringConfig
from .exceptions import UnknownFormatError
from .formats import (
    BestBall,
    BestBallMatchPlay,
    FormatVariant,
    Nassau,
    Scramble,
    Skins,
    Stableford,
    StrokePlay,
    TeamStableford,
    resolve_format,
)
from .matchplay import MatchResult, NassauResult, match_result, nassau_result
from .skins import SkinsResult, skins_result
from .standings import (
    Standing,
    best_ball_standings,
    scramble_standings,
    stableford_standings,
    stroke_play_standings,
    team_stableford_standings,
)

GameResult = Union[List[Standing], MatchResult, NassauResult, SkinsResult]


def score_variant(game: Game, variant: FormatVariant, config: ScoringConfig) -> GameResult:
    """Run the aggregator that belongs to an already-resolved format."""
    if isinstance(variant, StrokePlay):
        return stroke_play_standings(game, config)
    if isinstance(variant, Stableford):
        return stableford_standings(game, config)
    if isinstance(variant, Skins):
        return skins_result(game, variant, config)
    if isinstance(variant, TeamStableford):
        return team_stableford_standings(game, variant.teams, config)
    if isinstance(variant, BestBall):
        return best_ball_standings(game, variant.teams, config)
    if isinstance(variant, BestBallMatchPlay):
        return match_result(game, variant.teams, config)
    if isinstance(variant, Scramble):
        return scramble_standings(game, variant.teams, config)
    if isinstance(variant, Nassau):
        return nassau_result(game, variant.teams, config)
    raise UnknownFormatError(f"No aggregator for {type(variant).__name__}")


def score_game(game: Game, config: Optional[ScoringConfig] = None) -> GameResult:
    """Resolve the game's format and compute its standings or match state."""
    config = config or ScoringConfig()
    return score_variant(game, resolve_format(game), config)
