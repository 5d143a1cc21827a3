"""Game formats resolved into one variant per format.

A variant only carries what its aggregator needs. Team variants hold a pair
of two-player teams, so an aggregator can never see a three-player team or a
single team.
"""

from __future__ import annotations

import logging
from typing import Literal, Optional, Tuple, Union

from pydantic import Field

from models.base import BaseGolfModel
from models.game import Game, GameFormat

from .exceptions import InvalidTeamShapeError, UnknownFormatError

logger = logging.getLogger(__name__)


class Team(BaseGolfModel):
    """Two players playing as a side; the first listed member holds scramble scores."""
    name: str
    player_ids: Tuple[str, str]


class StrokePlay(BaseGolfModel):
    kind: Literal[GameFormat.STROKE] = GameFormat.STROKE


class Stableford(BaseGolfModel):
    kind: Literal[GameFormat.STABLEFORD] = GameFormat.STABLEFORD


class Skins(BaseGolfModel):
    kind: Literal[GameFormat.SKINS] = GameFormat.SKINS
    carryover: bool = True
    pot_per_player: Optional[float] = Field(None, ge=0)


class _TeamFormat(BaseGolfModel):
    teams: Tuple[Team, Team]


class TeamStableford(_TeamFormat):
    kind: Literal[GameFormat.TEAM_STABLEFORD] = GameFormat.TEAM_STABLEFORD


class BestBall(_TeamFormat):
    kind: Literal[GameFormat.BEST_BALL] = GameFormat.BEST_BALL


class BestBallMatchPlay(_TeamFormat):
    kind: Literal[GameFormat.BEST_BALL_MATCH_PLAY] = GameFormat.BEST_BALL_MATCH_PLAY


class Scramble(_TeamFormat):
    kind: Literal[GameFormat.SCRAMBLE] = GameFormat.SCRAMBLE


class Nassau(_TeamFormat):
    kind: Literal[GameFormat.NASSAU] = GameFormat.NASSAU


FormatVariant = Union[
    StrokePlay, Stableford, Skins, TeamStableford, BestBall, BestBallMatchPlay, Scramble, Nassau
]

_TEAM_VARIANTS = {
    GameFormat.TEAM_STABLEFORD: TeamStableford,
    GameFormat.BEST_BALL: BestBall,
    GameFormat.BEST_BALL_MATCH_PLAY: BestBallMatchPlay,
    GameFormat.SCRAMBLE: Scramble,
    GameFormat.NASSAU: Nassau,
}


def resolve_teams(game: Game) -> Tuple[Team, Team]:
    """Read the game's team assignments as two teams of two, in team-name order."""
    names = game.team_names
    if len(names) != 2:
        raise InvalidTeamShapeError(
            f"{game.format.value} needs exactly two teams, got {len(names)}"
        )
    teams = []
    for name in names:
        ids = game.team_assignments[name]
        if len(ids) != 2:
            raise InvalidTeamShapeError(
                f"Team '{name}' needs exactly two players, got {len(ids)}"
            )
        teams.append(Team(name=name, player_ids=(ids[0], ids[1])))
    return teams[0], teams[1]


def resolve_format(game: Game) -> FormatVariant:
    """Build the variant for a game, rejecting team formats with the wrong shape."""
    fmt = GameFormat(game.format)
    if fmt == GameFormat.STROKE:
        variant = StrokePlay()
    elif fmt == GameFormat.STABLEFORD:
        variant = Stableford()
    elif fmt == GameFormat.SKINS:
        variant = Skins(carryover=game.skins_carryover, pot_per_player=game.skins_pot_per_player)
    elif fmt in _TEAM_VARIANTS:
        try:
            teams = resolve_teams(game)
        except InvalidTeamShapeError:
            logger.warning("Game %s rejected: invalid teams for %s", game.id, fmt.value)
            raise
        variant = _TEAM_VARIANTS[fmt](teams=teams)
    else:
        raise UnknownFormatError(f"No aggregator for format {fmt!r}")
    logger.debug("Game %s resolved to %s", game.id, type(variant).__name__)
    return variant
